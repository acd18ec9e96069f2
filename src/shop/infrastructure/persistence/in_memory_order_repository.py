"""Dict-backed implementation of OrderRepository."""

from __future__ import annotations

import logging

from shop.domain.model.order import Order
from shop.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        for o in orders or []:
            self._store[o.id] = o

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def contains(self, order_id: int) -> bool:
        return order_id in self._store

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def list_by_user(self, user_id: int) -> list[Order]:
        return [o for o in self._store.values() if o.user_id == user_id]

    def save(self, order: Order) -> None:
        # user_id is not checked against registered users
        self._store[order.id] = order
        logger.debug("Order #%d saved for user #%d", order.id, order.user_id)
