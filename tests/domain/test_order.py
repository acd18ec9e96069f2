"""Unit tests for the Order entity and its total."""

from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


def _product(pid: int = 1, price: str = "20.00") -> Product:
    return Product(pid, f"Product{pid}", Money.of(price), stock=50)


class TestAddToOrder:

    def test_quantities_accumulate(self):
        order, p = Order(1, user_id=1), _product()
        order.add_to_order(p, 2)
        order.add_to_order(p, 3)
        assert order.items == {p: 5}

    def test_products(self):
        order = Order(1, user_id=1)
        a, b = _product(1), _product(2)
        order.add_to_order(a, 1)
        order.add_to_order(b, 1)
        assert set(order.items) == {a, b}

    def test_user_id_not_validated(self):
        order = Order(1, user_id=999)
        assert order.user_id == 999


class TestCalculateTotalPrice:

    def test_new_order_total_is_zero(self):
        assert Order(1, user_id=1).total_price == Money.zero()

    def test_scenario_total(self):
        order, p = Order(1, user_id=1), _product(price="20")
        order.add_to_order(p, 3)
        assert order.calculate_total_price() == Money.of("60.0")
        assert order.total_price == Money.of("60")

    def test_sum_of_line_items(self):
        order = Order(1, user_id=1)
        order.add_to_order(_product(1, "15.00"), 3)
        order.add_to_order(_product(2, "25.00"), 5)
        assert order.calculate_total_price() == Money.of("170.00")

    def test_total_is_stale_until_recalculated(self):
        order, p = Order(1, user_id=1), _product(price="20")
        order.add_to_order(p, 1)
        order.calculate_total_price()
        order.add_to_order(p, 1)
        assert order.total_price == Money.of("20")
        order.calculate_total_price()
        assert order.total_price == Money.of("40")

    def test_uses_current_price(self):
        order, p = Order(1, user_id=1), _product(price="20")
        order.add_to_order(p, 3)
        order.calculate_total_price()

        p.update_price(Money.of("10"))

        assert order.total_price == Money.of("60")
        assert order.calculate_total_price() == Money.of("30")

    def test_negative_net_quantity_gives_negative_total(self):
        order, p = Order(1, user_id=1), _product(price="20")
        order.add_to_order(p, 3)
        order.add_to_order(p, -5)
        assert order.items[p] == -2
        assert order.calculate_total_price() == Money.of("-40")
