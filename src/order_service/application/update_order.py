"""Application service: Update Order use case."""

from __future__ import annotations

import structlog

from order_service.application.dto import OrderDTO, OrderPatch, to_order_dto
from order_service.domain.exceptions import OrderNotFoundError
from order_service.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, patch: OrderPatch) -> OrderDTO:
        """Merge the non-None fields of *patch* into the order.

        The cart reference and status are never changed here.
        """
        order = self._order_repo.find_active_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        order.apply_changes(description=patch.description, fee=patch.fee)
        order = self._order_repo.save(order)

        logger.info(
            "Order updated",
            order_id=order.id,
            description_changed=patch.description is not None,
            fee_changed=patch.fee is not None,
        )
        return to_order_dto(order)
