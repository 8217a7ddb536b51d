"""Application tests for payment, delivery and status commands."""

import json

import pytest
from ordering.order.creation import PlaceOrder
from ordering.order.fulfillment import MarkOrderDelivered, UpdateOrderStatus
from ordering.order.order import Order, OrderStatus
from ordering.order.payment import MarkOrderPaid
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _place_order():
    command = PlaceOrder(
        order_items=json.dumps([{"product": "p1", "name": "Scarf", "qty": 1, "price": 12.5, "image": "/s.jpg"}]),
        customer_details=json.dumps({"name": "Sam", "email": "sam@example.com", "address": "1 St", "phone": "555"}),
        items_price=12.5,
        tax_price=0.0,
        shipping_price=10.0,
        total_price=22.5,
    )
    return current_domain.process(command, asynchronous=False)


def _get(order_id):
    return current_domain.repository_for(Order).get(order_id)


class TestMarkOrderPaidCommand:
    def test_marks_paid(self):
        order_id = _place_order()
        current_domain.process(
            MarkOrderPaid(
                order_id=order_id,
                payment_id="PAY-001",
                payment_status="COMPLETED",
                update_time="2026-01-05T10:00:00Z",
                payer_email="payer@example.com",
            ),
            asynchronous=False,
        )
        order = _get(order_id)
        assert order.is_paid is True
        assert order.paid_at is not None
        assert order.payment_result.payment_id == "PAY-001"
        assert order.payment_result.email_address == "payer@example.com"
        assert order.status == OrderStatus.PENDING.value

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(MarkOrderPaid(order_id="missing-order"), asynchronous=False)


class TestMarkOrderDeliveredCommand:
    def test_marks_delivered(self):
        order_id = _place_order()
        current_domain.process(MarkOrderDelivered(order_id=order_id), asynchronous=False)
        order = _get(order_id)
        assert order.is_delivered is True
        assert order.delivered_at is not None
        assert order.status == OrderStatus.DELIVERED.value

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(MarkOrderDelivered(order_id="missing-order"), asynchronous=False)


class TestUpdateOrderStatusCommand:
    def test_updates_status(self):
        order_id = _place_order()
        current_domain.process(UpdateOrderStatus(order_id=order_id, status="tracking"), asynchronous=False)
        assert _get(order_id).status == OrderStatus.TRACKING.value

    def test_rejects_unknown_status(self):
        order_id = _place_order()
        with pytest.raises(ValidationError):
            UpdateOrderStatus(order_id=order_id, status="shipped")
        assert _get(order_id).status == OrderStatus.PENDING.value

    def test_delivered_status_leaves_flag(self):
        order_id = _place_order()
        current_domain.process(UpdateOrderStatus(order_id=order_id, status="delivered"), asynchronous=False)
        order = _get(order_id)
        assert order.status == OrderStatus.DELIVERED.value
        assert order.is_delivered is False
