"""
Shared fixtures for the test suite.

Every test that touches the store gets its own SQLite file under
``tmp_path``; ``settings.database_url`` is pointed at it and the
migrations are applied before the test runs.
"""
import hashlib
import logging

import pytest
from fastapi.testclient import TestClient

from campus_marketplace_api.app.core.config import settings
from campus_marketplace_api.app.core.db import init_db, transaction
from campus_marketplace_api.app.core.security import ITERATIONS, hash_password
from campus_marketplace_api.app.repositories import user_repository


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Fresh, migrated database for a single test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()
    return tmp_path / "test.db"


@pytest.fixture
def users(db):
    """Registers ``alice`` and ``bob`` and returns their records by name."""
    created = {}
    with transaction() as conn:
        for name, college in (("alice", "Engineering"), ("bob", "Arts")):
            created[name] = user_repository.insert_user(
                conn,
                username=name,
                password_hash=hash_password(f"{name}-secret"),
                email=f"{name}@campus.edu",
                college=college,
            )
    return created


@pytest.fixture
def client(db):
    from campus_marketplace_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def message_count(db):
    """Callable returning the number of stored messages."""
    def count():
        with transaction() as conn:
            return conn.execute("SELECT COUNT(*) AS count FROM messages").fetchone()["count"]
    return count


@pytest.fixture
def password_matches():
    """Callable checking a plain password against a stored ``salthex$hashhex`` value."""
    def matches(plain, stored):
        salt_hex, hash_hex = stored.split("$", 1)
        digest = hashlib.pbkdf2_hmac("sha256", plain.encode("utf-8"), bytes.fromhex(salt_hex), ITERATIONS)
        return digest.hex() == hash_hex
    return matches
