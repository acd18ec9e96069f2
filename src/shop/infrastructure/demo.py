"""The demonstration scenario the CLI runs against a fresh platform."""

from __future__ import annotations

from shop.application.registry import ECommercePlatform
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.user import User
from shop.domain.model.value_objects import Money
from shop.infrastructure.bootstrap import DEMO_STOCK_UPDATE


def seed_demo(platform: ECommercePlatform) -> None:
    """Two users, two products, one cart and one order each."""
    user1 = User(1, "User1")
    user2 = User(2, "User2")
    platform.add_user(user1)
    platform.add_user(user2)

    product1 = Product(1, "Product1", Money.of("20.00"), stock=50)
    product2 = Product(2, "Product2", Money.of("15.00"), stock=30)
    platform.add_product(product1)
    platform.add_product(product2)

    user1.add_to_cart(product1, 3)
    user2.add_to_cart(product2, 2)

    order1 = Order(1, user1.id)
    order1.add_to_order(product1, 3)
    order1.calculate_total_price()
    platform.create_order(order1)

    order2 = Order(2, user2.id)
    order2.add_to_order(product2, 2)
    order2.calculate_total_price()
    platform.create_order(order2)

    platform.update_product_stock(product1, DEMO_STOCK_UPDATE)
