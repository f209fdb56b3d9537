"""
Message endpoints.

These routes let a user send a direct message to another user and
fetch the conversation between two users.  No authentication is
performed: the caller names the sender via ``fromUsername``.
"""

from typing import List

from fastapi import APIRouter, Query, Request

from campus_marketplace_api.app.core.errors import ValidationError
from campus_marketplace_api.app.schemas.message import MessageRead
from campus_marketplace_api.app.services.message_service import MessageService


router = APIRouter()


def _require(name: str, value: str) -> str:
    if not value.strip():
        raise ValidationError(f"Parameter '{name}' must not be empty")
    return value


@router.get("/between", response_model=List[MessageRead])
async def get_messages_between_users(
    username1: str = Query(...),
    username2: str = Query(...),
) -> List[MessageRead]:
    """Return all messages exchanged between two users, oldest first."""
    _require("username1", username1)
    _require("username2", username2)
    messages = await MessageService.get_messages_between_users(username1, username2)
    return [MessageRead.from_record(msg) for msg in messages]


@router.post(
    "/send",
    response_model=MessageRead,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
async def send_message(
    request: Request,
    fromUsername: str = Query(...),
    toUsername: str = Query(...),
) -> MessageRead:
    """Send a message.  The raw request body is the message content."""
    _require("fromUsername", fromUsername)
    _require("toUsername", toUsername)
    try:
        content = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValidationError("Message body must be UTF-8 text") from exc
    if not content:
        raise ValidationError("Message body must not be empty")
    message = await MessageService.send_message(fromUsername, toUsername, content)
    return MessageRead.from_record(message)
