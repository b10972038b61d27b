"""
Pydantic models for user data.

Defines schemas for creating, updating and reading users.  Neither
``name`` nor ``email`` is validated: whatever JSON value the client
sends is stored and echoed back as is, and neither field is required.
Unknown keys in request bodies, including ``id``, are ignored.
"""

from typing import Any

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: Any = Field(None, examples=["Alice"])
    email: Any = Field(None, examples=["alice@example.com"])


class UserCreate(UserBase):
    """Schema for the body of ``POST /api/users``.

    The id is always assigned by the store; a client-supplied ``id``
    is dropped during parsing.
    """


class UserUpdate(UserBase):
    """Schema for updating an existing user.

    All fields are optional; only values present in the request body
    are merged onto the stored record (see ``model_dump(exclude_unset=True)``).
    """


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: Any = None
    email: Any = None

    model_config = {
        "from_attributes": True,
    }
