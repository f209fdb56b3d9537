"""
Business logic for users.

Registration hashes the password before it is stored and reports a
duplicate username as ``ConflictError``.  Lookups never expose the
stored password hash.
"""

import logging
import sqlite3

from ..core.db import transaction
from ..core.errors import ConflictError, NotFoundError
from ..core.security import hash_password
from ..repositories import user_repository
from ..repositories.user_repository import UserRecord
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


def _to_read(record: UserRecord) -> UserRead:
    return UserRead(
        id=record.id,
        username=record.username,
        email=record.email,
        college=record.college,
    )


class UserService:
    """Service for registering and looking up users."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user in the database and return it."""
        logger.info("Registering user %s", data.username)
        try:
            with transaction() as conn:
                record = user_repository.insert_user(
                    conn,
                    username=data.username,
                    password_hash=hash_password(data.password),
                    email=data.email,
                    college=data.college,
                )
        except sqlite3.IntegrityError as exc:
            logger.info("Registration rejected, username %s is taken", data.username)
            raise ConflictError(f"Username {data.username} already exists") from exc
        return _to_read(record)

    @classmethod
    async def get_user(cls, username: str) -> UserRead:
        with transaction() as conn:
            record = user_repository.find_by_username(conn, username)
        if record is None:
            raise NotFoundError(f"User {username} not found")
        return _to_read(record)

    @classmethod
    async def user_exists(cls, username: str) -> bool:
        with transaction() as conn:
            return user_repository.find_by_username(conn, username) is not None
