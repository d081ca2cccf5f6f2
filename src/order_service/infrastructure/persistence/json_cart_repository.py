"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
from pathlib import Path

from order_service.domain.model.cart import Cart
from order_service.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def find_by_id(self, cart_id: int) -> Cart | None:
        for raw in self._load_raw():
            if raw["id"] == cart_id:
                return Cart(id=raw["id"])
        return None

    def list_all(self) -> list[Cart]:
        return [Cart(id=raw["id"]) for raw in self._load_raw()]

    def save(self, cart: Cart) -> Cart:
        records = self._load_raw()
        if cart.id is None:
            cart.id = max((r["id"] for r in records), default=0) + 1
        if not any(r["id"] == cart.id for r in records):
            records.append({"id": cart.id})
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        return cart

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
