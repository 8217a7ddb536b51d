"""Order payment — command and handler.

Payment is recorded independently of the order status.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class MarkOrderPaid:
    order_id = Identifier(required=True)
    payment_id = String(max_length=255)
    payment_status = String(max_length=100)
    update_time = String(max_length=100)
    payer_email = String(max_length=255)


@ordering.command_handler(part_of=Order)
class MarkOrderPaidHandler:
    @handle(MarkOrderPaid)
    def mark_paid(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_paid(
            payment_result={
                "payment_id": command.payment_id,
                "status": command.payment_status,
                "update_time": command.update_time,
                "email_address": command.payer_email,
            }
        )
        repo.add(order)
