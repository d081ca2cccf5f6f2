"""CLI commands for carts."""

from __future__ import annotations

import click

from order_service.application.create_cart import CreateCartHandler
from order_service.infrastructure.bootstrap import cart_repository


@click.command("create")
def cart_create() -> None:
    """Create an empty cart."""
    cart = CreateCartHandler(cart_repo=cart_repository()).handle()
    click.echo(f"Cart #{cart.id} created")


@click.command("list")
def cart_list() -> None:
    """List all carts."""
    carts = cart_repository().list_all()

    if not carts:
        click.echo("No carts found.")
        return

    for cart in carts:
        click.echo(f"Cart #{cart.id}")
