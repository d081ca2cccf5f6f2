"""JSON-file-backed implementation of OrderRepository.

Soft-deleted orders remain in the file with ``is_active: false``; the
active queries filter them out explicitly.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from order_service.domain.model.cart import Cart
from order_service.domain.model.order import Order, OrderStatus
from order_service.domain.model.value_objects import Money
from order_service.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def find_active_by_id(self, order_id: int) -> Order | None:
        order = self.find_by_id(order_id)
        if order is None or not order.is_active:
            return None
        return order

    def find_all_active(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw() if raw["is_active"]]

    def find_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> Order:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        return order

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "created_at": order.created_at.isoformat(),
            "description": order.description,
            "fee": str(order.fee.amount),
            "currency": order.fee.currency,
            "status": order.status.value,
            "is_active": order.is_active,
            "cart_id": order.cart.id,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            cart=Cart(id=raw["cart_id"]),
            description=raw.get("description", ""),
            fee=Money(Decimal(raw["fee"]), raw.get("currency", "USD")),
            status=OrderStatus(raw["status"]),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
