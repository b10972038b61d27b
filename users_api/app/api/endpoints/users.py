"""
User endpoints.

CRUD over the in-memory user collection.  Request bodies are read in
full and parsed by hand rather than through FastAPI body parameters,
so a malformed body produces the service's own ``Invalid JSON`` error
instead of a 422 validation report.
"""

import json
import re
from typing import List, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel

from users_api.app.core.errors import InvalidJSONError, UserNotFoundError
from users_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from users_api.app.services.user_service import UserService


router = APIRouter()

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_USER_ID_RE = re.compile(r"-?[0-9]+")


def get_user_service(request: Request) -> UserService:
    """Build a service bound to the store owned by the running app."""
    return UserService(request.app.state.store)


def parse_user_id(raw: str) -> Optional[int]:
    """Return ``raw`` as an integer id, or ``None`` if it is not one."""
    if not _USER_ID_RE.fullmatch(raw):
        return None
    return int(raw)


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


async def read_payload(request: Request, schema: Type[SchemaT]) -> SchemaT:
    """Await the complete request body and parse it into ``schema``.

    Raises ``InvalidJSONError`` only when the body is not valid JSON.
    Any parsed value is accepted: a JSON value that is not an object
    (``null``, a number, an array) carries no fields, and field values
    are stored as sent.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise InvalidJSONError()
    if not isinstance(payload, dict):
        payload = {}
    return schema.model_validate(payload)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user in insertion order."""
    return await service.list_users()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user from a JSON object body.

    The id is assigned by the store.  Nothing is stored when the body
    is rejected.
    """
    data = await read_payload(request, UserCreate)
    return await service.create_user(data)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        raise UserNotFoundError()
    return await service.get_user(parsed_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    """Delete a user.

    Responds 204 with ``Content-Type: application/json`` and an empty
    body; HTTP does not allow a 204 response to carry content.
    """
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        raise UserNotFoundError()
    await service.delete_user(parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT, media_type="application/json")


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Merge the fields present in the body onto an existing user.

    Existence is checked before the body is read, so an unknown id is
    reported as 404 even when the body is malformed.
    """
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        raise UserNotFoundError()
    await service.get_user(parsed_id)
    data = await read_payload(request, UserUpdate)
    return await service.update_user(parsed_id, data)


@router.api_route("/{rest:path}", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
async def unmatched_user_path(rest: str) -> None:
    """Paths under /api/users/ that carry no single integer id segment.

    ``/api/users/`` and ``/api/users/1/extra`` name no user, so they are
    reported as ``User not found`` rather than ``Route not found``.
    Registered last so the routes above take precedence.
    """
    raise UserNotFoundError()
