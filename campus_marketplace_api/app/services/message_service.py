"""
Business logic for direct messages.

``MessageService`` resolves usernames to user records, enforces that
both parties exist, stamps new messages with the server clock and
queries the conversation between two users.  Each operation runs in a
single transaction, so a failed lookup never leaves a partial write.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List

from ..core.db import transaction
from ..core.errors import NotFoundError
from ..repositories import message_repository, user_repository
from ..repositories.message_repository import MessageRecord


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageService:
    """Service for sending and reading direct messages."""

    # Replaceable in tests to control assigned timestamps.
    clock: Callable[[], datetime] = staticmethod(_utcnow)

    @classmethod
    async def get_messages_between_users(cls, username_a: str, username_b: str) -> List[MessageRecord]:
        """Return the conversation between two users, oldest first.

        Messages in both directions are included and keep their
        direction.  An empty list means the users have not exchanged
        any messages.  Raises ``NotFoundError`` naming the first
        username that does not resolve.
        """
        with transaction() as conn:
            user_a = user_repository.find_by_username(conn, username_a)
            if user_a is None:
                logger.info("Conversation lookup failed: user %s not found", username_a)
                raise NotFoundError(f"User {username_a} not found")
            user_b = user_repository.find_by_username(conn, username_b)
            if user_b is None:
                logger.info("Conversation lookup failed: user %s not found", username_b)
                raise NotFoundError(f"User {username_b} not found")
            messages = message_repository.find_between(conn, user_a.id, user_b.id)
        logger.info("Fetched %d messages between %s and %s", len(messages), username_a, username_b)
        return messages

    @classmethod
    async def send_message(cls, from_username: str, to_username: str, content: str) -> MessageRecord:
        """Persist a new message from one user to another.

        The timestamp is taken from the server clock.  There is no
        deduplication: sending the same content twice stores two
        messages.  Raises ``NotFoundError`` identifying whether the
        sender or the receiver is unknown; nothing is stored then.
        """
        logger.info("Sending message from %s to %s", from_username, to_username)
        with transaction() as conn:
            sender = user_repository.find_by_username(conn, from_username)
            if sender is None:
                raise NotFoundError(f"Sender user {from_username} not found")
            recipient = user_repository.find_by_username(conn, to_username)
            if recipient is None:
                raise NotFoundError(f"Receiver user {to_username} not found")
            message = message_repository.insert_message(
                conn,
                sender_id=sender.id,
                recipient_id=recipient.id,
                timestamp=cls.clock(),
                content=content,
            )
        logger.info("Stored message %s from %s to %s", message.id, from_username, to_username)
        return message
