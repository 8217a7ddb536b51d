"""Order placement — command and handler.

Turns a checkout submission into a persisted Order. The submitted price
figures are trusted and stored verbatim.
"""

import json

from protean import handle
from protean.fields import Float, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.queries import order_to_dict


@ordering.command(part_of="Order")
class PlaceOrder:
    order_items = Text(required=True)  # JSON: list of item dicts
    customer_details = Text(required=True)  # JSON: {name, email, address, phone}
    items_price = Float(required=True, min_value=0.0)
    tax_price = Float(default=0.0, min_value=0.0)
    shipping_price = Float(default=0.0, min_value=0.0)
    total_price = Float(required=True, min_value=0.0)


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order_items = json.loads(command.order_items) if isinstance(command.order_items, str) else command.order_items
        customer_details = (
            json.loads(command.customer_details)
            if isinstance(command.customer_details, str)
            else command.customer_details
        )

        order = Order.place(
            order_items=order_items,
            customer_details=customer_details,
            items_price=command.items_price,
            tax_price=command.tax_price or 0.0,
            shipping_price=command.shipping_price or 0.0,
            total_price=command.total_price,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)


def place_order(submission: dict) -> dict:
    """Place an order from a checkout submission in its wire shape.

    Returns the stored order, serialized.
    """
    command = PlaceOrder(
        order_items=json.dumps(submission.get("orderItems", [])),
        customer_details=json.dumps(submission.get("customerDetails") or {}),
        items_price=submission.get("itemsPrice"),
        tax_price=submission.get("taxPrice", 0.0),
        shipping_price=submission.get("shippingPrice", 0.0),
        total_price=submission.get("totalPrice"),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return order_to_dict(current_domain.repository_for(Order).get(order_id))
