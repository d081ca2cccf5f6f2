"""Application service: Advance Order Status use case.

Moves an active order one step along CREATED -> ORDERED -> IN_PAYMENT.
Orders already in payment are rejected and left untouched.
"""

from __future__ import annotations

import structlog

from order_service.application.dto import OrderDTO, to_order_dto
from order_service.domain.exceptions import InvalidStateError, OrderNotFoundError
from order_service.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class AdvanceOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.find_active_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        try:
            previous = order.advance_status()
        except InvalidStateError:
            logger.warning(
                "Order status advance rejected",
                order_id=order_id,
                status=order.status.value,
            )
            raise

        order = self._order_repo.save(order)
        logger.info(
            "Order status advanced",
            order_id=order.id,
            from_status=previous.value,
            to_status=order.status.value,
        )
        return to_order_dto(order)
