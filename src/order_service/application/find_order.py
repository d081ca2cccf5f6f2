"""Application service: Find Order use case (query)."""

from __future__ import annotations

from order_service.application.dto import OrderDTO, to_order_dto
from order_service.domain.exceptions import OrderNotFoundError
from order_service.domain.repository.order_repository import OrderRepository


class FindOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.find_active_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)
