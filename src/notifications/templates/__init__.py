"""Template registry — maps MessageType to template classes.

Each template renders subject, plain-text body and HTML body from an order
snapshot (the public order JSON shape).
"""

from notifications.message import MessageType
from notifications.templates.admin_order_alert import AdminOrderAlertTemplate
from notifications.templates.order_confirmation import OrderConfirmationTemplate

TEMPLATE_REGISTRY: dict[MessageType, type] = {
    MessageType.ORDER_CONFIRMATION: OrderConfirmationTemplate,
    MessageType.ADMIN_ORDER_ALERT: AdminOrderAlertTemplate,
}


def get_template(message_type: MessageType):
    """Look up a template class by message type."""
    template_cls = TEMPLATE_REGISTRY.get(message_type)
    if template_cls is None:
        raise ValueError(f"No template registered for message type: {message_type}")
    return template_cls
