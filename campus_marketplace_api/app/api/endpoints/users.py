"""
User endpoints.

Provide registration, an existence check used by the web frontend
before opening a conversation, and lookup by username.
"""

from fastapi import APIRouter, status

from campus_marketplace_api.app.schemas.user import UserCreate, UserRead
from campus_marketplace_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate) -> UserRead:
    """Register a new user.  Responds 409 if the username is taken."""
    return await UserService.create_user(user)


@router.get("/exists/{username}", response_model=bool)
async def user_exists(username: str) -> bool:
    return await UserService.user_exists(username)


@router.get("/{username}", response_model=UserRead)
async def get_user(username: str) -> UserRead:
    return await UserService.get_user(username)
