"""
In-memory user store.

``UserStore`` keeps the ordered sequence of user records for the
lifetime of the process.  There is no persistence: every new store
created with ``UserStore.seeded`` starts from the two seed users.

Every operation holds ``UserStore.lock``.  The lock is re-entrant so
callers (see ``UserService``) can hold it across a lookup followed by
a modification without the position going stale in between.

Lookups signal "not found" by returning ``None``; they never raise.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from ..schemas.user import UserRead
from .config import ID_STRATEGIES


logger = logging.getLogger(__name__)


SEED_USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Alice", "email": "alice@example.com"},
    {"id": 2, "name": "Bob", "email": "bob@example.com"},
]


class UserStore:
    """Ordered, lock-guarded collection of ``UserRead`` records."""

    def __init__(self, users: Optional[Iterable[UserRead]] = None, id_strategy: str = "length") -> None:
        if id_strategy not in ID_STRATEGIES:
            logger.warning("Unknown id strategy %r, falling back to 'length'", id_strategy)
            id_strategy = "length"
        self.id_strategy = id_strategy
        self.lock = threading.RLock()
        self._users: List[UserRead] = list(users or [])
        # Highest id handed out so far; only consulted by the counter strategy.
        self._last_id = max((user.id for user in self._users), default=0)

    @classmethod
    def seeded(cls, id_strategy: str = "length") -> "UserStore":
        """Return a store holding the seed users in their initial order."""
        return cls([UserRead(**row) for row in SEED_USERS], id_strategy=id_strategy)

    def __len__(self) -> int:
        with self.lock:
            return len(self._users)

    def list(self) -> List[UserRead]:
        """Return a snapshot of all records in insertion order."""
        with self.lock:
            return self._users[:]

    def append(self, fields: Dict[str, Any]) -> UserRead:
        """Assign an id, build the record from ``fields`` and append it."""
        with self.lock:
            user_id = self._next_id()
            if self.find_by_id(user_id) is not None:
                logger.warning("Assigned id %s is already held by another user", user_id)
            user = UserRead(**{**fields, "id": user_id})
            self._users.append(user)
            return user

    def find_by_id(self, user_id: int) -> Optional[UserRead]:
        with self.lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def index_by_id(self, user_id: int) -> Optional[int]:
        with self.lock:
            for position, user in enumerate(self._users):
                if user.id == user_id:
                    return position
        return None

    def remove_at(self, position: int) -> None:
        with self.lock:
            del self._users[position]

    def merge_at(self, position: int, fields: Dict[str, Any]) -> UserRead:
        """Overwrite only the given fields of the record at ``position``.

        The id is never part of a merge.
        """
        updates = {key: value for key, value in fields.items() if key != "id"}
        with self.lock:
            user = self._users[position].model_copy(update=updates)
            self._users[position] = user
            return user

    def _next_id(self) -> int:
        if self.id_strategy == "counter":
            self._last_id += 1
            return self._last_id
        # Length-based ids repeat once a record has been removed.
        return len(self._users) + 1
