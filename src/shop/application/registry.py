"""The platform registry, the single owner of products, users and orders.

``ECommercePlatform`` is a thin facade over the three repositories and
the use-case handlers. Every operation here is total: unknown IDs and
missing cart entries are treated as absent or zero, never as errors.
The exception is ``recommend_products_by_id``, a CLI convenience that
reports an unknown user.
"""

from __future__ import annotations

from typing import Callable

from shop.application.dto import PlatformReportDTO
from shop.application.list_products import ListProductsHandler
from shop.application.recommend_products import RecommendProductsHandler
from shop.application.show_platform import ShowPlatformHandler
from shop.application.update_stock import UpdateProductStockHandler
from shop.domain.model.order import Order
from shop.domain.model.product import Product, by_price
from shop.domain.model.user import User
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.repository.user_repository import UserRepository


class ECommercePlatform:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._order_repo = order_repo

    # --- Registration (upsert by ID) ------------------------------------------

    def add_user(self, user: User) -> None:
        self._user_repo.save(user)

    def add_product(self, product: Product) -> None:
        self._product_repo.save(product)

    def create_order(self, order: Order) -> None:
        self._order_repo.save(order)

    # --- Snapshots ------------------------------------------------------------
    # Each call returns a fresh dict; the entities inside are shared.

    def get_available_products(self) -> dict[int, Product]:
        return {p.id: p for p in self._product_repo.list_all()}

    def get_users(self) -> dict[int, User]:
        return {u.id: u for u in self._user_repo.list_all()}

    def get_orders(self) -> dict[int, Order]:
        return {o.id: o for o in self._order_repo.list_all()}

    # --- Lookups --------------------------------------------------------------

    def get_product(self, product_id: int) -> Product | None:
        return self._product_repo.get_by_id(product_id)

    def get_user(self, user_id: int) -> User | None:
        return self._user_repo.get_by_id(user_id)

    def get_order(self, order_id: int) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    # --- Mutations ------------------------------------------------------------

    def update_product_stock(self, product: Product, new_stock: int) -> bool:
        return UpdateProductStockHandler(self._product_repo).handle(product, new_stock)

    # --- Queries / reports ----------------------------------------------------

    def sorted_products(
        self, key: Callable[[Product], object] = by_price
    ) -> list[Product]:
        return ListProductsHandler(self._product_repo).sorted_by(key)

    def available_products(self) -> list[Product]:
        return ListProductsHandler(self._product_repo).available()

    def recommend_products(self, user: User) -> set[Product]:
        handler = RecommendProductsHandler(self._order_repo, self._user_repo)
        return handler.handle(user)

    def recommend_products_by_id(self, user_id: int) -> set[Product]:
        """Like ``recommend_products`` but looks the user up first.

        The one registry call that can fail: an unknown ID raises
        EntityNotFoundError so the CLI can report it.
        """
        handler = RecommendProductsHandler(self._order_repo, self._user_repo)
        return handler.handle_by_id(user_id)

    def report(self) -> PlatformReportDTO:
        handler = ShowPlatformHandler(
            self._product_repo, self._user_repo, self._order_repo
        )
        return handler.handle()
