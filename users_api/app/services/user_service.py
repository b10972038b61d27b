"""
Business logic for users.

``UserService`` wraps a ``UserStore`` and turns "not found" lookups
into ``UserNotFoundError`` so endpoints can stay thin.  Compound
operations (find a position, then remove or merge at it) run while
holding the store lock, so a concurrent request cannot shift the
position in between.
"""

import logging
from typing import List

from ..core.errors import UserNotFoundError
from ..core.store import UserStore
from ..schemas.user import UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями.

    Operates on the store passed at construction; one store is owned by
    each application instance (``app.state.store``).
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return self.store.list()

    async def create_user(self, data: UserCreate) -> UserRead:
        """Append a new user and return it with its assigned id."""
        user = self.store.append(data.model_dump())
        logger.info("Created user %s", user.id)
        return user

    async def get_user(self, user_id: int) -> UserRead:
        """Retrieve a user by ID.  Raises ``UserNotFoundError`` if absent."""
        user = self.store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> UserRead:
        """Merge the fields set in ``data`` onto an existing user.

        Fields absent from the request body keep their stored values.
        Raises ``UserNotFoundError`` if the user does not exist (or was
        removed while the request body was being read).
        """
        updates = data.model_dump(exclude_unset=True)
        with self.store.lock:
            position = self.store.index_by_id(user_id)
            if position is None:
                raise UserNotFoundError()
            user = self.store.merge_at(position, updates)
        logger.info("Updated user %s (fields: %s)", user_id, ", ".join(sorted(updates)) or "none")
        return user

    async def delete_user(self, user_id: int) -> None:
        """Remove a user.  Raises ``UserNotFoundError`` if absent."""
        with self.store.lock:
            position = self.store.index_by_id(user_id)
            if position is None:
                raise UserNotFoundError()
            self.store.remove_at(position)
        logger.info("Deleted user %s", user_id)
