import click

from order_service.infrastructure.cli.cart_commands import cart_create, cart_list
from order_service.infrastructure.cli.order_commands import (
    order_advance,
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from order_service.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Order Service: order lifecycle management"""
    configure_logging()


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def cart() -> None:
    """Manage carts."""


# Register subcommands
order.add_command(order_advance)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
cart.add_command(cart_create)
cart.add_command(cart_list)
