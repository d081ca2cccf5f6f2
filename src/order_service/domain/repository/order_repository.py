"""Abstract repository for Order aggregate.

Soft-deleted orders stay in the store.  The ``*_active`` queries are the
only read paths the lifecycle uses; ``find_by_id`` sees inactive rows
too and exists for audit and history lookups.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_service.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def find_active_by_id(self, order_id: int) -> Order | None:
        """Return the order with this ID if it is active, else None."""

    @abstractmethod
    def find_all_active(self) -> list[Order]:
        """Return every active order, in store order."""

    @abstractmethod
    def find_by_id(self, order_id: int) -> Order | None:
        """Return the order with this ID regardless of its active flag."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order, assigning an ID if absent."""
