"""Dict-backed implementation of UserRepository."""

from __future__ import annotations

import logging

from shop.domain.model.user import User
from shop.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[int, User] = {}
        for u in users or []:
            self._store[u.id] = u

    def get_by_id(self, user_id: int) -> User | None:
        return self._store.get(user_id)

    def contains(self, user_id: int) -> bool:
        return user_id in self._store

    def list_all(self) -> list[User]:
        return list(self._store.values())

    def save(self, user: User) -> None:
        self._store[user.id] = user
        logger.debug("User #%d saved", user.id)
