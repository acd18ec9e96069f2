"""Product entity and its orderings.

Products live in the platform registry for their whole life. Carts and
orders refer to them by identity, so a price or stock change on a
product is seen everywhere that product is referenced.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    ``eq=False`` keeps identity equality and hashing, which is what lets a
    product key a cart or an order's line items.

    The natural ordering is by price, so ``sorted(products)`` lists the
    cheapest first.
    """

    id: int
    name: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        _check_price(self.price)

    def __lt__(self, other: Product) -> bool:
        return self.price < other.price

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Orders hold no price snapshot: the next ``calculate_total_price``
        on any order containing this product uses the new price.
        """
        _check_price(new_price)
        self.price = new_price

    def __str__(self) -> str:
        return f"Product #{self.id} {self.name} ({self.price}, stock={self.stock})"


def _check_price(price: Money) -> None:
    if price.amount < Decimal("0"):
        raise ValidationError(f"Product price cannot be negative, got {price}")


# ---------------------------------------------------------------------------
# Sort keys
# ---------------------------------------------------------------------------


def by_price(product: Product) -> Decimal:
    return product.price.amount


def by_name(product: Product) -> str:
    return product.name


def by_stock(product: Product) -> int:
    return product.stock


class ProductOrder(Enum):
    """Named orderings selectable from the CLI."""

    PRICE = "price"
    NAME = "name"
    STOCK = "stock"

    @property
    def key(self) -> Callable[[Product], object]:
        return _KEYS[self]


_KEYS: dict[ProductOrder, Callable[[Product], object]] = {
    ProductOrder.PRICE: by_price,
    ProductOrder.NAME: by_name,
    ProductOrder.STOCK: by_stock,
}
