"""Order aggregate (CQRS) — the authoritative record of a completed checkout.

An Order is created once from a checkout submission and is immutable from
then on, except for its lifecycle fields: status, the paid/delivered flags
and their timestamps. Line items are frozen copies of the product snapshot
the customer saw, so later catalogue changes never alter historical orders.

Lifecycle (3 states):
    PENDING → TRACKING → DELIVERED

The progression is the business intent only. Administrators may write any
of the three statuses at any time; the transition table below documents
which flag and timestamp each administrative action touches, and the one
action (MARK_DELIVERED) that also forces the status.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import (
    OrderDelivered,
    OrderPaid,
    OrderPlaced,
    OrderStatusChanged,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    TRACKING = "tracking"
    DELIVERED = "delivered"


class LifecycleAction(Enum):
    MARK_PAID = "MarkPaid"
    MARK_DELIVERED = "MarkDelivered"
    SET_STATUS = "SetStatus"


@dataclass(frozen=True)
class Transition:
    """Effects of one administrative action on the order's lifecycle fields.

    `flag` is set to True, `stamp` is set to the action time only if it is
    still empty, and `forced_status` (when present) overwrites the status.
    """

    flag: str | None = None
    stamp: str | None = None
    forced_status: OrderStatus | None = None


_TRANSITIONS = {
    LifecycleAction.MARK_PAID: Transition(flag="is_paid", stamp="paid_at"),
    LifecycleAction.MARK_DELIVERED: Transition(
        flag="is_delivered",
        stamp="delivered_at",
        forced_status=OrderStatus.DELIVERED,
    ),
    LifecycleAction.SET_STATUS: Transition(),
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class CustomerDetails:
    """Contact and shipping details captured at checkout.

    All four fields are free text and only checked for presence.
    """

    name = String(required=True, max_length=255)
    email = String(required=True, max_length=255)
    address = String(required=True, max_length=1000)
    phone = String(required=True, max_length=50)


@ordering.value_object(part_of="Order")
class PaymentResult:
    """Opaque payment confirmation as reported by the payment provider."""

    payment_id = String(max_length=255)
    status = String(max_length=100)
    update_time = String(max_length=100)
    email_address = String(max_length=255)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A line item frozen at order time: product reference plus the name,
    unit price and image the customer checked out with."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)
    image = String(required=True, max_length=1000)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


_CUSTOMER_FIELDS = ("name", "email", "address", "phone")


def _normalize_item(item_data: dict) -> dict:
    """Accept both the checkout wire shape (product/qty) and field names."""
    return {
        "product_id": item_data.get("product_id", item_data.get("product")),
        "name": item_data.get("name"),
        "quantity": item_data.get("quantity", item_data.get("qty")),
        "price": item_data.get("price"),
        "image": item_data.get("image"),
    }


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_details = ValueObject(CustomerDetails)
    items = HasMany(OrderItem)
    items_price = Float(required=True, min_value=0.0, default=0.0)
    tax_price = Float(required=True, min_value=0.0, default=0.0)
    shipping_price = Float(required=True, min_value=0.0, default=0.0)
    total_price = Float(required=True, min_value=0.0, default=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    is_paid = Boolean(default=False)
    paid_at = DateTime()
    payment_result = ValueObject(PaymentResult)
    is_delivered = Boolean(default=False)
    delivered_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        order_items,
        customer_details,
        items_price,
        tax_price,
        shipping_price,
        total_price,
    ):
        """Create a new order from a checkout submission.

        Price figures are stored exactly as submitted; they are not
        recomputed from the items or from current product prices.

        Args:
            order_items: List of dicts with product (or product_id), name,
                         qty (or quantity), price, image.
            customer_details: Dict with name, email, address, phone.
            items_price, tax_price, shipping_price, total_price: Non-negative
                         amounts reconciled by the client.
        """
        if not order_items:
            raise ValidationError({"order_items": ["No order items"]})

        now = datetime.now(UTC)
        details = customer_details or {}

        order = cls(
            customer_details=CustomerDetails(**{field: details.get(field) for field in _CUSTOMER_FIELDS}),
            items=[OrderItem(**_normalize_item(item)) for item in order_items],
            items_price=items_price,
            tax_price=tax_price,
            shipping_price=shipping_price,
            total_price=total_price,
            status=OrderStatus.PENDING.value,
            is_paid=False,
            is_delivered=False,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_email=order.customer_details.email,
                item_count=sum(item.quantity for item in order.items),
                total_price=order.total_price,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Transition helper
    # -------------------------------------------------------------------
    def _apply_transition(self, action, now, target_status=None):
        """Apply the flag, stamp and status effects of `action`."""
        transition = _TRANSITIONS[action]

        if transition.flag:
            setattr(self, transition.flag, True)
        if transition.stamp and getattr(self, transition.stamp) is None:
            setattr(self, transition.stamp, now)

        target = transition.forced_status or target_status
        if target is not None:
            self.status = target.value

        self.updated_at = now

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def mark_paid(self, payment_result=None):
        """Record payment. Status is left untouched."""
        now = datetime.now(UTC)
        payment_result = payment_result or {}

        self.payment_result = PaymentResult(
            payment_id=payment_result.get("payment_id"),
            status=payment_result.get("status"),
            update_time=payment_result.get("update_time"),
            email_address=payment_result.get("email_address"),
        )
        self._apply_transition(LifecycleAction.MARK_PAID, now)

        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                payment_id=payment_result.get("payment_id"),
                paid_at=self.paid_at,
            )
        )

    def mark_delivered(self):
        """Record delivery and force the status to delivered."""
        now = datetime.now(UTC)
        previous_status = self.status

        self._apply_transition(LifecycleAction.MARK_DELIVERED, now)

        self.raise_(
            OrderDelivered(
                order_id=str(self.id),
                previous_status=previous_status,
                delivered_at=self.delivered_at,
            )
        )

    def set_status(self, new_status):
        """Write one of the enumerated statuses. Flags are left untouched."""
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError(
                {"status": [f"Unknown status {new_status!r}. Expected one of: {', '.join(s.value for s in OrderStatus)}"]}
            ) from None

        now = datetime.now(UTC)
        previous_status = self.status

        self._apply_transition(LifecycleAction.SET_STATUS, now, target_status=target)

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=target.value,
                changed_at=now,
            )
        )
