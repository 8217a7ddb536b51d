import pytest
from notifications.channel import reset_email_channel
from notifications.channel.fake_email import FakeEmailAdapter


@pytest.fixture
def email_adapter():
    adapter = FakeEmailAdapter()
    yield adapter
    adapter.reset()


@pytest.fixture(autouse=True)
def _reset_channel():
    yield
    reset_email_channel()


@pytest.fixture
def placed_order():
    """An order in its public JSON shape, as handed to the dispatcher."""
    return {
        "id": "order-001",
        "customerDetails": {
            "name": "Sam Doe",
            "email": "sam@example.com",
            "address": "12 Harbour Road, Springfield",
            "phone": "+1 555 0100",
        },
        "orderItems": [
            {"id": "item-1", "product": "prod-001", "name": "Home Jersey", "qty": 2, "price": 45.0, "image": "/img/home.jpg"},
            {"id": "item-2", "product": "prod-002", "name": "Scarf", "qty": 1, "price": 12.5, "image": "/img/scarf.jpg"},
        ],
        "itemsPrice": 102.5,
        "taxPrice": 0.0,
        "shippingPrice": 0.0,
        "totalPrice": 102.5,
        "status": "pending",
        "isPaid": False,
        "paidAt": None,
        "paymentResult": None,
        "isDelivered": False,
        "deliveredAt": None,
        "createdAt": "2026-01-05T10:00:00+00:00",
        "updatedAt": "2026-01-05T10:00:00+00:00",
    }
