"""
In-memory storage for User records.

The repository owns an insertion-ordered list of users for the lifetime
of the application instance. Nothing is persisted.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from app.models import User

logger = logging.getLogger(__name__)


def default_seed() -> list[User]:
    """Return the users every fresh repository starts with."""
    return [
        User(id=1, name="Mazlum", email="mazlum@example.com"),
        User(id=2, name="Emre", email="emre@example.com"),
    ]


class UserRepository:
    """
    Owns the user collection.

    IDs are positional: a new user gets ``len(users) + 1``. Reading the
    length and appending happen under one lock, so concurrent creates
    never hand out the same ID.
    """

    def __init__(self, seed: Iterable[User] | None = None) -> None:
        self._users: list[User] = list(default_seed() if seed is None else seed)
        self._lock = threading.Lock()

    def get_all(self) -> list[User]:
        """Return a snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users)

    def create(self, user: User) -> User:
        """
        Store a new user.

        Args:
            user: User to store. Its ``id`` is overwritten.

        Returns:
            The stored user with its assigned ID.
        """
        with self._lock:
            stored = replace(user, id=len(self._users) + 1)
            self._users.append(stored)

        logger.debug("Stored user %s", stored.id)
        return stored

    def count(self) -> int:
        """Return the number of stored users."""
        with self._lock:
            return len(self._users)
