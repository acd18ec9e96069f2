"""Abstract repository for User entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def contains(self, user_id: int) -> bool:
        """True if a user is registered under this ID."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user in insertion order."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Insert or overwrite the user stored under its ID."""
