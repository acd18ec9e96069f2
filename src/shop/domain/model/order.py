"""Order entity: line items plus a total computed on demand."""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


@dataclass(eq=False)
class Order:
    """A user's order.

    ``user_id`` is not checked against registered users. ``total_price``
    is only refreshed by ``calculate_total_price()``; adding items or
    changing a product's price leaves it stale until then.
    """

    id: int
    user_id: int
    items: dict[Product, int] = field(default_factory=dict)
    total_price: Money = field(default_factory=Money.zero)

    def add_to_order(self, product: Product, quantity: int) -> None:
        """Accumulate *quantity* units of *product* on this order."""
        self.items[product] = self.items.get(product, 0) + quantity

    def calculate_total_price(self) -> Money:
        """Recompute the total from each product's *current* price.

        No price snapshot is taken, so re-running this after a price
        change re-prices the order.
        """
        total = Money.zero()
        for product, quantity in self.items.items():
            total = total + product.price * quantity
        self.total_price = total
        return total

    def __str__(self) -> str:
        return f"Order #{self.id} (user #{self.user_id}, total={self.total_price})"
