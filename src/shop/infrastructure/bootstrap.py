"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from shop.application.registry import ECommercePlatform
from shop.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from shop.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from shop.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOGGER_NAME = "shop"

# Stock level the demo scenario sets on the first product after ordering.
DEMO_STOCK_UPDATE = 47


def configure_logging(verbose: bool = False) -> None:
    """Install a root handler and set the level for every ``shop`` logger.

    The level goes on the package logger, so it applies even when the
    root logger was configured earlier and ``basicConfig`` is a no-op.
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


def platform() -> ECommercePlatform:
    """A fresh, empty platform. Nothing survives the process."""
    return ECommercePlatform(
        product_repo=product_repository(),
        user_repo=user_repository(),
        order_repo=order_repository(),
    )
