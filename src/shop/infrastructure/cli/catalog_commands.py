"""CLI commands that query the demo catalog."""

from __future__ import annotations

import click

from shop.application.show_platform import product_to_dto
from shop.domain.exceptions import DomainException
from shop.domain.model.product import ProductOrder
from shop.infrastructure.bootstrap import platform
from shop.infrastructure.cli.demo_commands import SORT_CHOICE
from shop.infrastructure.cli.formatting import echo_products
from shop.infrastructure.demo import seed_demo


@click.command("products")
@click.option(
    "--sort-by",
    type=SORT_CHOICE,
    default=ProductOrder.PRICE.value,
    show_default=True,
    help="Ordering for the listing.",
)
@click.option("--available", is_flag=True, default=False, help="Only products in stock.")
def product_list(sort_by: str, available: bool) -> None:
    """List the demo catalog's products."""
    shop = platform()
    seed_demo(shop)

    ordering = ProductOrder(sort_by.lower())
    if available:
        products = sorted(shop.available_products(), key=ordering.key)
    else:
        products = shop.sorted_products(ordering.key)

    echo_products("Products", (product_to_dto(p) for p in products))


@click.command("recommend")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
def recommend(user_id: int) -> None:
    """Recommend previously ordered products missing from a user's cart."""
    shop = platform()
    seed_demo(shop)

    try:
        products = shop.recommend_products_by_id(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_products(
        f"Recommended for user #{user_id}",
        (product_to_dto(p) for p in sorted(products, key=lambda p: p.id)),
    )
