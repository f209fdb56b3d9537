"""
Pydantic models for user data.

The password is accepted on registration only; ``UserRead`` never
carries it.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UserBase(BaseModel):
    username: str = Field(..., min_length=1, examples=["alice"])
    email: Optional[str] = Field(None, examples=["alice@campus.edu"])
    college: Optional[str] = Field(None, examples=["Engineering"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., min_length=1, examples=["strongpassword"])

    @field_validator("username")
    @classmethod
    def username_is_not_padded(cls, value: str) -> str:
        # Messaging rejects blank usernames, so such a user could never chat.
        if not value.strip():
            raise ValueError("username must not be blank")
        if value != value.strip():
            raise ValueError("username must not start or end with whitespace")
        return value


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
