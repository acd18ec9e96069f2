"""Application service: Show Platform use case (query)."""

from __future__ import annotations

from shop.application.dto import (
    CartLineDTO,
    OrderDTO,
    OrderLineItemDTO,
    PlatformReportDTO,
    ProductDTO,
    UserDTO,
)
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.user import User
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.repository.user_repository import UserRepository


class ShowPlatformHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._order_repo = order_repo

    def handle(self) -> PlatformReportDTO:
        return PlatformReportDTO(
            products=[product_to_dto(p) for p in self._product_repo.list_all()],
            users=[user_to_dto(u) for u in self._user_repo.list_all()],
            orders=[order_to_dto(o) for o in self._order_repo.list_all()],
        )


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        stock=product.stock,
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        username=user.username,
        cart=[
            CartLineDTO(product_name=product.name, quantity=qty)
            for product, qty in user.cart.items()
        ],
    )


def order_to_dto(order: Order) -> OrderDTO:
    # Line totals use the live price; ``total`` is whatever was last calculated.
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        items=[
            OrderLineItemDTO(
                product_name=product.name,
                quantity=qty,
                unit_price=str(product.price),
                line_total=str(product.price * qty),
            )
            for product, qty in order.items.items()
        ],
        total=str(order.total_price),
    )
