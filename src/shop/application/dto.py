"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry a snapshot of platform state to the CLI without exposing
the mutable entities themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "$20.00"
    stock: int


@dataclass(frozen=True)
class CartLineDTO:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class UserDTO:
    id: int
    username: str
    cart: list[CartLineDTO]


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str  # the product's current price
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """An order as displayed. ``total`` is the last calculated total."""

    id: int
    user_id: int
    items: list[OrderLineItemDTO]
    total: str


@dataclass(frozen=True)
class PlatformReportDTO:
    products: list[ProductDTO]
    users: list[UserDTO]
    orders: list[OrderDTO]
