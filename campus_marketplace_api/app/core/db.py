"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), running work inside an explicit transaction
(``transaction``) and applying migrations on application start
(``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.  Each
migration runs as its own script wrapped in ``BEGIN``/``COMMIT`` together
with the insert of its version row, so a schema change and its record
are committed or rolled back as one unit.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: users and direct messages
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            password TEXT,
            email TEXT,
            college TEXT
        );

        CREATE TABLE IF NOT EXISTS messages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            sender_id INTEGER NOT NULL,
            recipient_id INTEGER NOT NULL,
            timestamp TEXT NOT NULL,
            content TEXT NOT NULL,
            FOREIGN KEY(sender_id) REFERENCES users(id),
            FOREIGN KEY(recipient_id) REFERENCES users(id)
        );
        """,
    ),
    # Migration 2: index for the conversation lookup
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_messages_pair_timestamp
            ON messages(sender_id, recipient_id, timestamp);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # campus_marketplace_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection since SQLite disables it by default.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Yield a connection whose work is committed or rolled back as a unit.

    The transaction is committed when the block exits normally and
    rolled back when it raises; the exception is re-raised either way.
    The connection is always closed.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  To add a migration, append it with an
    incremented version number.  A failing migration is rolled back
    and re-raised; earlier migrations stay applied.
    """
    with transaction() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(
                    f"BEGIN;\n{sql}\nINSERT INTO migrations (version) VALUES ({int(version)});\nCOMMIT;"
                )
                logger.info("Applied migration %s", version)
                current_version = version
