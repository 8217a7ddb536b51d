"""Delivery confirmation and administrative status changes."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, OrderStatus


@ordering.command(part_of="Order")
class MarkOrderDelivered:
    order_id = Identifier(required=True)


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


@ordering.command_handler(part_of=Order)
class FulfillmentHandler:
    @handle(MarkOrderDelivered)
    def mark_delivered(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_delivered()
        repo.add(order)

    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.set_status(command.status)
        repo.add(order)
