"""Application service: Update Product Stock use case."""

from __future__ import annotations

import logging

from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product: Product, new_stock: int) -> bool:
        """Set *product*'s stock if its ID is registered.

        The given entity is mutated in place. An unregistered ID is a
        silent no-op. Returns whether the update was applied.
        """
        if not self._product_repo.contains(product.id):
            logger.debug("Stock update ignored: product #%d not registered", product.id)
            return False

        product.stock = new_stock
        logger.debug("Product #%d stock set to %d", product.id, new_stock)
        return True
