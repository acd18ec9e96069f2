"""Application service: Recommend Products use case (query)."""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.user import User
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.user_repository import UserRepository
from shop.domain.service.recommendation_service import RecommendationService


class RecommendProductsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo

    def handle(self, user: User) -> set[Product]:
        svc = RecommendationService(self._order_repo)
        return svc.recommend_for(user)

    def handle_by_id(self, user_id: int) -> set[Product]:
        """Look the user up first; used where the caller only has an ID."""
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return self.handle(user)
