"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from order_service.domain.model.order import Order


@dataclass(frozen=True)
class CartDTO:
    """A reference to a cart by ID.  ``id`` may be None on malformed input."""

    id: int | None


@dataclass(frozen=True)
class NewOrderSpec:
    """Input: an order to place against an existing cart."""

    cart: CartDTO | None
    description: str | None = None
    fee: str | None = None  # e.g. "150.00"


@dataclass(frozen=True)
class OrderPatch:
    """Input: fields to overwrite on an existing order.  None means keep."""

    description: str | None = None
    fee: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as displayed to the user."""

    id: int
    cart: CartDTO
    description: str
    fee: str  # formatted, e.g. "$150.00"
    status: str
    is_active: bool
    created_at: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        cart=CartDTO(id=order.cart.id),
        description=order.description,
        fee=str(order.fee),
        status=order.status.value,
        is_active=order.is_active,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
