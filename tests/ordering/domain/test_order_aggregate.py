"""Tests for Order placement."""

import pytest
from ordering.order.events import OrderPlaced
from ordering.order.order import CustomerDetails, Order, OrderItem, OrderStatus
from protean.exceptions import ValidationError

CUSTOMER = {
    "name": "Sam Doe",
    "email": "sam@example.com",
    "address": "12 Harbour Road",
    "phone": "+1 555 0100",
}


def _place(**overrides):
    defaults = {
        "order_items": [
            {"product": "prod-001", "name": "Home Jersey", "qty": 2, "price": 45.0, "image": "/img/home.jpg"},
        ],
        "customer_details": CUSTOMER,
        "items_price": 90.0,
        "tax_price": 0.0,
        "shipping_price": 10.0,
        "total_price": 100.0,
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestOrderPlace:
    def test_starts_pending_unpaid_undelivered(self):
        order = _place()
        assert order.status == OrderStatus.PENDING.value
        assert order.is_paid is False
        assert order.paid_at is None
        assert order.is_delivered is False
        assert order.delivered_at is None
        assert order.payment_result is None

    def test_sets_timestamps(self):
        order = _place()
        assert order.created_at is not None
        assert order.updated_at == order.created_at

    def test_copies_items(self):
        order = _place()
        assert len(order.items) == 1
        item = order.items[0]
        assert item.product_id == "prod-001"
        assert item.name == "Home Jersey"
        assert item.quantity == 2
        assert item.price == 45.0
        assert item.image == "/img/home.jpg"
        assert item.line_total == 90.0

    def test_accepts_field_names_for_items(self):
        order = _place(
            order_items=[
                {"product_id": "prod-002", "name": "Scarf", "quantity": 3, "price": 12.5, "image": "/img/scarf.jpg"}
            ]
        )
        assert order.items[0].quantity == 3

    def test_stores_prices_verbatim(self):
        # Figures are not recomputed from the items
        order = _place(items_price=1.0, tax_price=2.0, shipping_price=3.0, total_price=4.0)
        assert order.items_price == 1.0
        assert order.tax_price == 2.0
        assert order.shipping_price == 3.0
        assert order.total_price == 4.0

    def test_customer_details(self):
        order = _place()
        assert isinstance(order.customer_details, CustomerDetails)
        assert order.customer_details.email == "sam@example.com"

    def test_raises_order_placed(self):
        order = _place()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == str(order.id)
        assert event.customer_email == "sam@example.com"
        assert event.item_count == 2
        assert event.total_price == 100.0


class TestOrderPlaceValidation:
    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _place(order_items=[])
        assert "No order items" in str(exc.value.messages)

    def test_missing_customer_field_rejected(self):
        with pytest.raises(ValidationError):
            _place(customer_details={"name": "Sam", "email": "sam@example.com", "address": "12 Harbour Road"})

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _place(order_items=[{"product": "p1", "name": "X", "qty": 0, "price": 1.0, "image": "/x.jpg"}])

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _place(order_items=[{"product": "p1", "name": "X", "qty": 1, "price": -1.0, "image": "/x.jpg"}])

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            _place(total_price=-5.0)


class TestOrderItemEntity:
    def test_line_total(self):
        item = OrderItem(product_id="p1", name="X", quantity=3, price=2.5, image="/x.jpg")
        assert item.line_total == 7.5

    def test_image_required(self):
        with pytest.raises(ValidationError):
            OrderItem(product_id="p1", name="X", quantity=1, price=2.5)
