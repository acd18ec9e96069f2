"""Shared table formatting for the CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

import click

from shop.application.dto import OrderDTO, ProductDTO, UserDTO


def echo_products(title: str, products: Iterable[ProductDTO]) -> None:
    products = list(products)
    click.echo(f"{title}:")
    if not products:
        click.echo("  (none)")
        return
    click.echo(f"  {'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo(f"  {'-'*47}")
    for p in products:
        click.echo(f"  {p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>8}")


def echo_cart(user: UserDTO) -> None:
    click.echo(f"Cart of {user.username}:")
    if not user.cart:
        click.echo("  (empty)")
        return
    for line in user.cart:
        click.echo(f"  {line.product_name:<20} x{line.quantity}")


def echo_users(users: Iterable[UserDTO]) -> None:
    click.echo("Users:")
    for u in users:
        cart = ", ".join(f"{line.product_name} x{line.quantity}" for line in u.cart)
        click.echo(f"  #{u.id:<4} {u.username:<16} cart=[{cart}]")


def echo_order(order: OrderDTO) -> None:
    click.echo(f"Order #{order.id}  (user #{order.user_id})")
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in order.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {order.total:>20}")
