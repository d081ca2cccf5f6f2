"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from order_service.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from order_service.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DATA_DIR_ENV = "ORDER_SERVICE_DATA_DIR"

# Default data directory: <repo>/data when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    """Directory holding the JSON stores; overridable via the environment."""
    override = os.getenv(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "carts.json")
