"""Application service: Create Order use case.

Coordinates the cart lookup and the Order aggregate.  Every check runs
before the order store is touched, so a rejected request never
persists anything.
"""

from __future__ import annotations

import structlog

from order_service.application.dto import NewOrderSpec, OrderDTO, to_order_dto
from order_service.domain.exceptions import CartNotFoundError, InvalidArgumentError
from order_service.domain.model.order import Order
from order_service.domain.repository.cart_repository import CartRepository
from order_service.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo

    def handle(self, spec: NewOrderSpec) -> OrderDTO:
        """Place a new order.

        Steps:
        1. Require a cart reference carrying an ID.
        2. Resolve the cart (fail if it does not exist).
        3. Let the Order aggregate validate the fee and set CREATED.
        4. Persist (the store assigns the ID) and return a DTO.
        """
        if spec.cart is None or spec.cart.id is None:
            raise InvalidArgumentError("Order must reference a cart with an ID")

        cart = self._cart_repo.find_by_id(spec.cart.id)
        if cart is None:
            raise CartNotFoundError(f"Cart #{spec.cart.id} not found")

        order = Order.create(cart=cart, description=spec.description, fee=spec.fee)
        order = self._order_repo.save(order)

        logger.info(
            "Order created",
            order_id=order.id,
            cart_id=cart.id,
            fee=str(order.fee.amount),
        )
        return to_order_dto(order)
