"""
Top-level API router.

Aggregates domain routers under a unified prefix; ``main`` mounts it
under ``/api``.  When a new domain is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

# Route paths inside ``users`` are empty or start with "/{user_id}", so
# the collection lives at exactly /api/users with no trailing slash.
router.include_router(users.router, prefix="/users", tags=["users"])
