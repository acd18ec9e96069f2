"""CLI command that runs the demonstration scenario end to end."""

from __future__ import annotations

import click

from shop.application.show_platform import product_to_dto, user_to_dto
from shop.domain.model.product import ProductOrder
from shop.infrastructure.bootstrap import platform
from shop.infrastructure.cli.formatting import (
    echo_cart,
    echo_order,
    echo_products,
    echo_users,
)
from shop.infrastructure.demo import seed_demo

SORT_CHOICE = click.Choice([o.value for o in ProductOrder], case_sensitive=False)


@click.command("demo")
@click.option(
    "--sort-by",
    type=SORT_CHOICE,
    default=ProductOrder.PRICE.value,
    show_default=True,
    help="Ordering for the sorted product listing.",
)
def demo(sort_by: str) -> None:
    """Populate a fresh platform and print every report."""
    shop = platform()
    seed_demo(shop)

    for user in shop.get_users().values():
        echo_cart(user_to_dto(user))
    click.echo()

    state = shop.report()
    echo_products("Products", state.products)
    click.echo()
    echo_users(state.users)
    click.echo()
    for order in state.orders:
        echo_order(order)
        click.echo()

    ordering = ProductOrder(sort_by.lower())
    echo_products(
        f"Sorted products (by {ordering.value})",
        (product_to_dto(p) for p in shop.sorted_products(ordering.key)),
    )
    click.echo()
    echo_products(
        "Available products",
        (product_to_dto(p) for p in shop.available_products()),
    )
    click.echo()

    user1 = shop.get_user(1)
    if user1 is not None:
        recommended = sorted(shop.recommend_products(user1), key=lambda p: p.id)
        echo_products(
            f"Recommended for {user1.username}",
            (product_to_dto(p) for p in recommended),
        )
