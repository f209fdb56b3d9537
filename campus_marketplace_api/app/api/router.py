"""
Top‑level API router.

This router aggregates domain‑specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import messages, users


router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
