"""Application service: Delete Order use case.

Deletion is soft: the order is flagged inactive and saved back, so it
stays in the store for history but vanishes from every active query.
Orders in payment cannot be deleted through this path.
"""

from __future__ import annotations

import structlog

from order_service.domain.exceptions import InvalidStateError, OrderNotFoundError
from order_service.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.find_active_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        try:
            order.deactivate()
        except InvalidStateError:
            logger.warning(
                "Order deletion rejected",
                order_id=order_id,
                status=order.status.value,
            )
            raise

        self._order_repo.save(order)
        logger.info("Order soft-deleted", order_id=order_id)
