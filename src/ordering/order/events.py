"""Domain events for the Order aggregate.

Events are raised on the aggregate and dispatched when the unit of work
commits, after the order itself has been persisted. Handlers therefore never
observe an order that was not stored.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A checkout submission was accepted and stored as a new order."""

    order_id = Identifier(required=True)
    customer_email = String(required=True)
    item_count = Integer(required=True)
    total_price = Float(required=True)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderPaid:
    """Payment confirmation was recorded on the order."""

    order_id = Identifier(required=True)
    payment_id = String()
    paid_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderDelivered:
    """The order was confirmed delivered; its status is forced to delivered."""

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    delivered_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """An administrator set the order status directly."""

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
