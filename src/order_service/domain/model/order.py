"""Order aggregate: the core of the domain.

Owns the status state machine and the soft-delete flag.  Every
mutating method validates first and mutates second, so a rejected call
never leaves the order half-changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from order_service.domain.exceptions import InvalidArgumentError, InvalidStateError
from order_service.domain.model.cart import Cart
from order_service.domain.model.value_objects import Money


class OrderStatus(Enum):
    CREATED = "CREATED"
    ORDERED = "ORDERED"
    IN_PAYMENT = "IN_PAYMENT"

    @property
    def next(self) -> OrderStatus | None:
        """The status this one advances to, or None when locked."""
        return _NEXT_STATUS.get(self)

    @property
    def is_locked(self) -> bool:
        """True once the order has reached payment (or beyond)."""
        return self.next is None


# Forward-only transition table.  A status with no entry is locked.
_NEXT_STATUS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.CREATED: OrderStatus.ORDERED,
    OrderStatus.ORDERED: OrderStatus.IN_PAYMENT,
}


@dataclass
class Order:
    """Aggregate root for orders.

    Use the ``Order.create()`` factory for new orders; it validates the
    cart reference and fee.  The ``__init__`` stays simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    cart: Cart
    description: str = ""
    fee: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.CREATED
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        cart: Cart,
        description: str | None = None,
        fee: str | int | Decimal | Money | None = None,
    ) -> Order:
        """Create a new, active order in CREATED status."""
        if cart is None or cart.id is None:
            raise InvalidArgumentError("Order must reference an existing cart")

        return Order(
            id=None,
            cart=cart,
            description=description or "",
            fee=_coerce_fee(fee) if fee is not None else Money.zero(),
        )

    # --- State transitions ----------------------------------------------------

    def advance_status(self) -> OrderStatus:
        """Move one step forward: CREATED -> ORDERED -> IN_PAYMENT.

        Returns the previous status.
        """
        target = self.status.next
        if target is None:
            raise InvalidStateError(
                f"Cannot advance order #{self.id}, status {self.status.value} "
                f"is final for this service"
            )
        previous = self.status
        self.status = target
        return previous

    def deactivate(self) -> None:
        """Soft delete: mark the order inactive, keeping the record."""
        if not self.is_active:
            raise InvalidStateError(f"Order #{self.id} is already deleted")
        if self.status.is_locked:
            raise InvalidStateError(
                f"Cannot delete order #{self.id} in {self.status.value} status"
            )
        self.is_active = False

    def apply_changes(
        self,
        description: str | None = None,
        fee: str | int | Decimal | Money | None = None,
    ) -> None:
        """Overwrite description and/or fee.  Cart and status are untouched."""
        new_fee = _coerce_fee(fee) if fee is not None else None

        if description is not None:
            self.description = description
        if new_fee is not None:
            self.fee = new_fee


def _coerce_fee(fee: str | int | Decimal | Money) -> Money:
    if isinstance(fee, Money):
        return fee
    return Money.of(fee)
