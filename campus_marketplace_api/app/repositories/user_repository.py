"""Hand-written SQL for the ``users`` table."""

import sqlite3
from dataclasses import dataclass
from typing import Optional


@dataclass
class UserRecord:
    id: int
    username: str
    password: Optional[str]
    email: Optional[str]
    college: Optional[str]


def _to_record(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        username=row["username"],
        password=row["password"],
        email=row["email"],
        college=row["college"],
    )


def insert_user(
    conn: sqlite3.Connection,
    username: str,
    password_hash: Optional[str],
    email: Optional[str],
    college: Optional[str],
) -> UserRecord:
    """Insert a user row.  Raises ``sqlite3.IntegrityError`` on duplicate username."""
    cursor = conn.execute(
        "INSERT INTO users (username, password, email, college) VALUES (?, ?, ?, ?)",
        (username, password_hash, email, college),
    )
    return UserRecord(
        id=cursor.lastrowid,
        username=username,
        password=password_hash,
        email=email,
        college=college,
    )


def find_by_username(conn: sqlite3.Connection, username: str) -> Optional[UserRecord]:
    """Return the user with this username, or ``None`` if there is none."""
    row = conn.execute(
        "SELECT id, username, password, email, college FROM users WHERE username = ?",
        (username,),
    ).fetchone()
    if not row:
        return None
    return _to_record(row)
