"""Abstract repository for Cart aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The order lifecycle only needs ``find_by_id``; carts
are created by the outer layers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_service.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def find_by_id(self, cart_id: int) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Cart]:
        """Return every cart."""

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Persist a cart, assigning an ID if absent."""
