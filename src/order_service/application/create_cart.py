"""Application service: Create Cart use case."""

from __future__ import annotations

import structlog

from order_service.domain.model.cart import Cart
from order_service.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class CreateCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> Cart:
        cart = self._cart_repo.save(Cart())
        logger.info("Cart created", cart_id=cart.id)
        return cart
