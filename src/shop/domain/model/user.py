"""User entity with a shopping cart."""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.model.product import Product


@dataclass(eq=False)
class User:
    """A shopper and the cart they are filling.

    Invariant: after ``remove_from_cart`` or ``modify_cart`` a cart
    quantity is never negative. Entries are clamped at zero and never
    removed, so a product stays "in the cart" once it has been added.
    """

    id: int
    username: str
    cart: dict[Product, int] = field(default_factory=dict)

    def add_to_cart(self, product: Product, quantity: int) -> None:
        """Add *quantity* units on top of whatever is already in the cart.

        Stock is not checked.
        """
        self.cart[product] = self.cart.get(product, 0) + quantity

    def remove_from_cart(self, product: Product, quantity: int) -> None:
        self.cart[product] = max(self.cart.get(product, 0) - quantity, 0)

    def modify_cart(self, product: Product, quantity: int) -> None:
        """Overwrite the cart quantity for *product*, clamped at zero."""
        self.cart[product] = max(quantity, 0)

    def __str__(self) -> str:
        return f"User #{self.id} {self.username}"
