"""Domain service: product recommendations.

Recommends what a user bought before but has not put back in their
cart. It reads orders from the repository and the cart from the user,
so it spans two entities and lives here rather than on either one.
"""

from __future__ import annotations

import logging

from shop.domain.model.product import Product
from shop.domain.model.user import User
from shop.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RecommendationService:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def order_history(self, user: User) -> set[Product]:
        """Every product that appears on any of the user's orders."""
        history: set[Product] = set()
        for order in self._order_repo.list_by_user(user.id):
            history.update(order.items)
        return history

    def recommend_for(self, user: User) -> set[Product]:
        """Order-history products that are not currently in the cart.

        A cart entry counts as present even when its quantity is zero.
        """
        recommended = self.order_history(user).difference(user.cart)
        logger.debug(
            "Recommending %d product(s) for user #%d", len(recommended), user.id
        )
        return recommended
