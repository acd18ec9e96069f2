"""Abstract repository for Order entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def contains(self, order_id: int) -> bool:
        """True if an order is registered under this ID."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in insertion order."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Order]:
        """Return every order placed under *user_id*."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Insert or overwrite the order stored under its ID."""
