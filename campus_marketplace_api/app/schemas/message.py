"""
Pydantic models for direct messages.

Field names follow the JSON shape the web frontend consumes
(``fromUsername``/``toUsername``), so they are camelCase here.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..repositories.message_repository import MessageRecord


class MessageRead(BaseModel):
    """A message as returned by the messaging endpoints."""

    id: int
    fromUsername: str = Field(..., examples=["alice"])
    toUsername: str = Field(..., examples=["bob"])
    timestamp: datetime
    content: str = Field(..., examples=["Is the desk lamp still available?"])

    @classmethod
    def from_record(cls, record: MessageRecord) -> "MessageRead":
        return cls(
            id=record.id,
            fromUsername=record.sender_username,
            toUsername=record.recipient_username,
            timestamp=record.timestamp,
            content=record.content,
        )
