"""Integration tests for the ECommercePlatform registry.

Uses the in-memory repositories through the bootstrap factory.
"""

import pytest

from shop.application.registry import ECommercePlatform
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.order import Order
from shop.domain.model.product import Product, by_name, by_stock
from shop.domain.model.user import User
from shop.domain.model.value_objects import Money
from shop.infrastructure.bootstrap import platform


@pytest.fixture
def shop() -> ECommercePlatform:
    return platform()


@pytest.fixture
def catalog(shop: ECommercePlatform) -> list[Product]:
    products = [
        Product(1, "Widget", Money.of("20.00"), stock=50),
        Product(2, "Gadget", Money.of("15.00"), stock=0),
        Product(3, "Anvil", Money.of("99.99"), stock=2),
    ]
    for p in products:
        shop.add_product(p)
    return products


class TestRegistration:

    def test_add_and_lookup(self, shop):
        user = User(1, "User1")
        shop.add_user(user)
        assert shop.get_user(1) is user
        assert shop.get_users() == {1: user}

    def test_duplicate_id_overwrites_silently(self, shop):
        shop.add_product(Product(0, "First", Money.of("1")))
        second = Product(0, "Second", Money.of("2"))
        shop.add_product(second)
        assert shop.get_available_products() == {0: second}

    def test_order_for_unknown_user_accepted(self, shop):
        order = Order(1, user_id=404)
        shop.create_order(order)
        assert shop.get_order(1) is order

    def test_unknown_ids_are_none(self, shop):
        assert shop.get_product(1) is None
        assert shop.get_user(1) is None
        assert shop.get_order(1) is None


class TestSnapshots:

    def test_mutating_returned_map_does_not_touch_registry(self, shop, catalog):
        products = shop.get_available_products()
        products.clear()
        assert len(shop.get_available_products()) == 3

    def test_entities_are_shared(self, shop, catalog):
        shop.get_available_products()[1].stock = 7
        assert shop.get_product(1).stock == 7


class TestUpdateProductStock:

    def test_registered_product_updated(self, shop, catalog):
        widget = catalog[0]
        assert shop.update_product_stock(widget, 47) is True
        assert widget.stock == 47

    def test_unregistered_id_is_noop(self, shop, catalog):
        bogus = Product(99, "Ghost", Money.of("1"), stock=5)
        assert shop.update_product_stock(bogus, 0) is False
        assert bogus.stock == 5
        assert [p.stock for p in shop.sorted_products(by_stock)] == [0, 2, 50]

    def test_mutates_given_entity(self, shop, catalog):
        # Lookup is by ID only, so a look-alike with a registered ID is updated.
        twin = Product(1, "Widget", Money.of("20.00"), stock=50)
        shop.update_product_stock(twin, 10)
        assert twin.stock == 10
        assert catalog[0].stock == 50


class TestProductQueries:

    def test_sorted_by_price_default(self, shop, catalog):
        assert [p.name for p in shop.sorted_products()] == ["Gadget", "Widget", "Anvil"]

    def test_sorted_by_name(self, shop, catalog):
        assert [p.name for p in shop.sorted_products(by_name)] == ["Anvil", "Gadget", "Widget"]

    def test_sorted_by_stock(self, shop, catalog):
        stocks = [p.stock for p in shop.sorted_products(by_stock)]
        assert stocks == sorted(stocks)

    def test_sorting_leaves_registry_order(self, shop, catalog):
        shop.sorted_products(by_name)
        assert list(shop.get_available_products()) == [1, 2, 3]

    def test_available_excludes_out_of_stock(self, shop, catalog):
        assert [p.name for p in shop.available_products()] == ["Widget", "Anvil"]

    def test_available_reflects_stock_update(self, shop, catalog):
        shop.update_product_stock(catalog[0], 0)
        assert [p.name for p in shop.available_products()] == ["Anvil"]


class TestRecommendProducts:

    def test_history_minus_cart(self, shop, catalog):
        widget, gadget, anvil = catalog
        user = User(1, "User1")
        shop.add_user(user)
        first = Order(1, user.id)
        first.add_to_order(widget, 1)
        first.add_to_order(gadget, 1)
        second = Order(2, user.id)
        second.add_to_order(anvil, 1)
        shop.create_order(first)
        shop.create_order(second)
        user.add_to_cart(gadget, 1)

        assert shop.recommend_products(user) == {widget, anvil}

    def test_user_need_not_be_registered(self, shop, catalog):
        order = Order(1, user_id=5)
        order.add_to_order(catalog[0], 1)
        shop.create_order(order)
        assert shop.recommend_products(User(5, "Unregistered")) == {catalog[0]}

    def test_by_id(self, shop, catalog):
        user = User(1, "User1")
        shop.add_user(user)
        order = Order(1, user.id)
        order.add_to_order(catalog[2], 1)
        shop.create_order(order)
        assert shop.recommend_products_by_id(1) == {catalog[2]}

    def test_by_unknown_id_rejected(self, shop):
        with pytest.raises(EntityNotFoundError, match="User #3 not found"):
            shop.recommend_products_by_id(3)


class TestReport:

    def test_report_survives_negative_order(self, shop, catalog):
        order = Order(1, user_id=1)
        order.add_to_order(catalog[0], -1)
        shop.create_order(order)
        assert shop.report().orders[0].items[0].line_total == "-$20.00"


class TestScenario:

    def test_end_to_end(self, shop):
        product = Product(1, "Product1", Money.of("20"), stock=50)
        shop.add_product(product)
        user = User(1, "User1")
        shop.add_user(user)

        user.add_to_cart(product, 3)
        assert user.cart == {product: 3}

        order = Order(1, user.id)
        order.add_to_order(product, 3)
        shop.create_order(order)
        assert order.calculate_total_price() == Money.of("60.0")

        shop.update_product_stock(product, 47)
        assert product.stock == 47

        shop.update_product_stock(Product(99, "Bogus", Money.of("1"), stock=3), 0)
        assert shop.get_product(1).stock == 47
        assert 99 not in shop.get_available_products()

        assert shop.recommend_products(user) == set()
