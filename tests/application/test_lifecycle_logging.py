"""Structured log events emitted by the lifecycle handlers."""

import pytest
from structlog.testing import capture_logs

from order_service.application.advance_order_status import AdvanceOrderStatusHandler
from order_service.application.create_order import CreateOrderHandler
from order_service.application.delete_order import DeleteOrderHandler
from order_service.application.dto import CartDTO, NewOrderSpec, OrderPatch
from order_service.application.update_order import UpdateOrderHandler
from order_service.domain.exceptions import InvalidStateError
from order_service.domain.model.cart import Cart
from order_service.domain.model.order import Order, OrderStatus
from order_service.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeOrderRepository


def _repo(status: OrderStatus) -> FakeOrderRepository:
    return FakeOrderRepository([
        Order(id=1, cart=Cart(id=1), description="Test order", fee=Money.of("100.00"), status=status)
    ])


def _events(logs: list[dict]) -> list[str]:
    return [entry["event"] for entry in logs]


class TestMutationEvents:

    def test_order_created(self):
        handler = CreateOrderHandler(FakeOrderRepository(), FakeCartRepository([Cart(id=4)]))
        with capture_logs() as logs:
            handler.handle(NewOrderSpec(cart=CartDTO(id=4), fee="12.50"))

        assert _events(logs) == ["Order created"]
        assert logs[0]["log_level"] == "info"
        assert logs[0]["order_id"] == 1
        assert logs[0]["cart_id"] == 4

    def test_status_advanced(self):
        handler = AdvanceOrderStatusHandler(_repo(OrderStatus.CREATED))
        with capture_logs() as logs:
            handler.handle(1)

        assert _events(logs) == ["Order status advanced"]
        assert logs[0]["from_status"] == "CREATED"
        assert logs[0]["to_status"] == "ORDERED"

    def test_soft_deleted(self):
        handler = DeleteOrderHandler(_repo(OrderStatus.ORDERED))
        with capture_logs() as logs:
            handler.handle(1)

        assert _events(logs) == ["Order soft-deleted"]
        assert logs[0]["order_id"] == 1

    def test_updated(self):
        handler = UpdateOrderHandler(_repo(OrderStatus.CREATED))
        with capture_logs() as logs:
            handler.handle(1, OrderPatch(fee="3"))

        assert _events(logs) == ["Order updated"]
        assert logs[0]["description_changed"] is False
        assert logs[0]["fee_changed"] is True


class TestRejectionEvents:

    def test_advance_rejected_logs_warning(self):
        handler = AdvanceOrderStatusHandler(_repo(OrderStatus.IN_PAYMENT))
        with capture_logs() as logs:
            with pytest.raises(InvalidStateError):
                handler.handle(1)

        assert _events(logs) == ["Order status advance rejected"]
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["order_id"] == 1
        assert logs[0]["status"] == "IN_PAYMENT"

    def test_delete_rejected_logs_warning(self):
        handler = DeleteOrderHandler(_repo(OrderStatus.IN_PAYMENT))
        with capture_logs() as logs:
            with pytest.raises(InvalidStateError):
                handler.handle(1)

        assert _events(logs) == ["Order deletion rejected"]
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["status"] == "IN_PAYMENT"
