"""Application service: product listings (query)."""

from __future__ import annotations

from typing import Callable

from shop.domain.model.product import Product, by_price
from shop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def sorted_by(self, key: Callable[[Product], object] = by_price) -> list[Product]:
        """All products in ascending *key* order.

        The sort is stable, so products that compare equal keep their
        registry order.
        """
        return sorted(self._product_repo.list_all(), key=key)

    def available(self) -> list[Product]:
        """Products with stock left, in registry order."""
        return [p for p in self._product_repo.list_all() if p.stock > 0]
