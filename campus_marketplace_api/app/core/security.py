"""
Password hashing helpers.

Passwords are hashed using PBKDF2‑HMAC with SHA‑256, along with salt
generation.  The stored format is ``salthex$hashhex``.
"""

import hashlib
import os


ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"

