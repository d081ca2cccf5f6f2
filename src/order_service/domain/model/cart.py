"""Cart aggregate.

Only the identity of a cart matters to the order lifecycle: an order
must point at a cart that exists when the order is placed.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cart:
    id: int | None = None
