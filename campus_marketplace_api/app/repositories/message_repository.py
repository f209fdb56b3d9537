"""
Hand-written SQL for the ``messages`` table.

Rows are joined with ``users`` on read so that each record carries the
sender and recipient usernames alongside their ids.
"""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import List


@dataclass
class MessageRecord:
    id: int
    sender_id: int
    sender_username: str
    recipient_id: int
    recipient_username: str
    timestamp: datetime
    content: str


_SELECT = """
    SELECT m.id, m.sender_id, s.username AS sender_username,
           m.recipient_id, r.username AS recipient_username,
           m.timestamp, m.content
    FROM messages m
    JOIN users s ON s.id = m.sender_id
    JOIN users r ON r.id = m.recipient_id
"""


def _to_record(row: sqlite3.Row) -> MessageRecord:
    return MessageRecord(
        id=row["id"],
        sender_id=row["sender_id"],
        sender_username=row["sender_username"],
        recipient_id=row["recipient_id"],
        recipient_username=row["recipient_username"],
        timestamp=datetime.fromisoformat(row["timestamp"]),
        content=row["content"],
    )


def insert_message(
    conn: sqlite3.Connection,
    sender_id: int,
    recipient_id: int,
    timestamp: datetime,
    content: str,
) -> MessageRecord:
    """Insert a message row and return it as stored."""
    cursor = conn.execute(
        "INSERT INTO messages (sender_id, recipient_id, timestamp, content) VALUES (?, ?, ?, ?)",
        (sender_id, recipient_id, timestamp.isoformat(timespec="microseconds"), content),
    )
    row = conn.execute(_SELECT + " WHERE m.id = ?", (cursor.lastrowid,)).fetchone()
    return _to_record(row)


def find_between(conn: sqlite3.Connection, user_a_id: int, user_b_id: int) -> List[MessageRecord]:
    """Return the conversation between two users, oldest first.

    Both directions are included.  Messages with the same timestamp
    keep insertion order.
    """
    rows = conn.execute(
        _SELECT
        + """
        WHERE (m.sender_id = ? AND m.recipient_id = ?)
           OR (m.sender_id = ? AND m.recipient_id = ?)
        ORDER BY m.timestamp ASC, m.id ASC
        """,
        (user_a_id, user_b_id, user_b_id, user_a_id),
    ).fetchall()
    return [_to_record(row) for row in rows]

