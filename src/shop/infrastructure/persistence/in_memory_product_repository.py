"""Dict-backed implementation of ProductRepository."""

from __future__ import annotations

import logging

from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def contains(self, product_id: int) -> bool:
        return product_id in self._store

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product
        logger.debug("Product #%d saved", product.id)
