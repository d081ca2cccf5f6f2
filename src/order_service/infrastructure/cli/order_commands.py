"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from order_service.application.advance_order_status import AdvanceOrderStatusHandler
from order_service.application.create_order import CreateOrderHandler
from order_service.application.delete_order import DeleteOrderHandler
from order_service.application.dto import CartDTO, NewOrderSpec, OrderDTO, OrderPatch
from order_service.application.find_order import FindOrderHandler
from order_service.application.list_orders import ListOrdersHandler
from order_service.application.update_order import UpdateOrderHandler
from order_service.domain.exceptions import DomainException
from order_service.infrastructure.bootstrap import cart_repository, order_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Cart:        #{dto.cart.id}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Fee:         {dto.fee}")


@click.command("create")
@click.option("--cart-id", required=True, type=int, help="Cart the order belongs to.")
@click.option("--description", default=None, help="Free-text order description.")
@click.option("--fee", default=None, help="Order fee (e.g. 150.00).")
def order_create(cart_id: int, description: str | None, fee: str | None) -> None:
    """Place a new order against an existing cart."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        cart_repo=cart_repository(),
    )
    spec = NewOrderSpec(cart=CartDTO(id=cart_id), description=description, fee=fee)

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an active order."""
    handler = FindOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all active orders."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Cart':<6} {'Status':<12} {'Fee':>10}  Description")
    click.echo("-" * 60)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.cart.id:<6} {dto.status:<12} {dto.fee:>10}  {dto.description}"
        )


@click.command("advance")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to advance.")
def order_advance(order_id: int) -> None:
    """Advance an order to its next status (CREATED -> ORDERED -> IN_PAYMENT)."""
    handler = AdvanceOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order (soft delete; not allowed once in payment)."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--description", default=None, help="New description.")
@click.option("--fee", default=None, help="New fee (e.g. 200.00).")
def order_update(order_id: int, description: str | None, fee: str | None) -> None:
    """Change an order's description and/or fee."""
    if description is None and fee is None:
        raise click.UsageError("Nothing to update: pass --description and/or --fee")

    handler = UpdateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, OrderPatch(description=description, fee=fee))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
