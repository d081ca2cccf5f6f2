"""Integration tests: the lifecycle handlers against the JSON-file stores."""

from order_service.application.advance_order_status import AdvanceOrderStatusHandler
from order_service.application.create_order import CreateOrderHandler
from order_service.application.delete_order import DeleteOrderHandler
from order_service.application.dto import CartDTO, NewOrderSpec, OrderPatch
from order_service.application.list_orders import ListOrdersHandler
from order_service.application.update_order import UpdateOrderHandler
from order_service.domain.model.cart import Cart
from order_service.domain.model.order import Order, OrderStatus
from order_service.domain.model.value_objects import Money
from order_service.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from order_service.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def _repos(tmp_path):
    return (
        JsonOrderRepository(tmp_path / "orders.json"),
        JsonCartRepository(tmp_path / "carts.json"),
    )


def _order(cart: Cart, desc: str, fee: str, status=OrderStatus.CREATED, is_active=True) -> Order:
    return Order(
        id=None,
        cart=cart,
        description=desc,
        fee=Money.of(fee),
        status=status,
        is_active=is_active,
    )


class TestJsonCartRepository:

    def test_creates_missing_file(self, tmp_path):
        JsonCartRepository(tmp_path / "nested" / "carts.json")
        assert (tmp_path / "nested" / "carts.json").read_text() == "[]"

    def test_assigns_sequential_ids(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        assert repo.save(Cart()).id == 1
        assert repo.save(Cart()).id == 2
        assert [c.id for c in repo.list_all()] == [1, 2]

    def test_find_by_id(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        repo.save(Cart())
        assert repo.find_by_id(1) == Cart(id=1)
        assert repo.find_by_id(2) is None


class TestJsonOrderRepository:

    def test_round_trips_all_fields(self, tmp_path):
        orders, carts = _repos(tmp_path)
        cart = carts.save(Cart())
        saved = orders.save(_order(cart, "Test order", "100.00", OrderStatus.ORDERED))

        loaded = orders.find_by_id(saved.id)
        assert loaded == saved

    def test_active_queries_skip_inactive_rows(self, tmp_path):
        orders, carts = _repos(tmp_path)
        cart = carts.save(Cart())
        orders.save(_order(cart, "Order 1", "100.00"))
        orders.save(_order(cart, "Order 2", "200.00", OrderStatus.ORDERED))
        hidden = orders.save(_order(cart, "Order 3", "300.00", is_active=False))

        assert len(orders.find_all_active()) == 2
        assert orders.find_active_by_id(hidden.id) is None
        assert orders.find_by_id(hidden.id) is not None


class TestLifecycleAgainstJsonStores:

    def test_save_validates_cart_existence(self, tmp_path):
        orders, carts = _repos(tmp_path)
        cart = carts.save(Cart())

        dto = CreateOrderHandler(orders, carts).handle(
            NewOrderSpec(cart=CartDTO(id=cart.id), description="Test order", fee="100.0")
        )

        assert dto.id is not None
        assert dto.description == "Test order"
        assert dto.fee == "$100.00"
        assert dto.cart.id == cart.id

    def test_status_change_is_persisted(self, tmp_path):
        orders, carts = _repos(tmp_path)
        order = orders.save(_order(carts.save(Cart()), "Test order", "100.00"))

        AdvanceOrderStatusHandler(orders).handle(order.id)

        assert orders.find_active_by_id(order.id).status == OrderStatus.ORDERED

    def test_find_all_returns_only_active(self, tmp_path):
        orders, carts = _repos(tmp_path)
        cart = carts.save(Cart())
        orders.save(_order(cart, "Order 1", "100.00"))
        orders.save(_order(cart, "Order 2", "200.00", OrderStatus.ORDERED))
        orders.save(_order(cart, "Order 3", "300.00", is_active=False))

        assert len(ListOrdersHandler(orders).handle()) == 2

    def test_soft_delete_keeps_record(self, tmp_path):
        orders, carts = _repos(tmp_path)
        order = orders.save(_order(carts.save(Cart()), "Test order", "100.00"))

        DeleteOrderHandler(orders).handle(order.id)

        deleted = orders.find_by_id(order.id)
        assert deleted is not None
        assert deleted.is_active is False
        assert all(dto.id != order.id for dto in ListOrdersHandler(orders).handle())

    def test_update_preserves_cart(self, tmp_path):
        orders, carts = _repos(tmp_path)
        cart = carts.save(Cart())
        order = orders.save(_order(cart, "Original order", "100.00"))

        UpdateOrderHandler(orders).handle(
            order.id, OrderPatch(description="Updated order", fee="200.0")
        )

        updated = orders.find_active_by_id(order.id)
        assert updated.description == "Updated order"
        assert updated.fee == Money.of("200.0")
        assert updated.cart.id == cart.id
