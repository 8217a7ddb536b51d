"""Admin order alert template — tells the shop owner a new order arrived."""

from html import escape

from notifications.message import MessageType, RecipientType


class AdminOrderAlertTemplate:
    message_type = MessageType.ADMIN_ORDER_ALERT
    recipient_type = RecipientType.INTERNAL

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("id", "N/A")
        details = context.get("customerDetails") or {}
        name = details.get("name", "")
        email = details.get("email", "")
        phone = details.get("phone", "")
        total = f"${float(context.get('totalPrice') or 0.0):.2f}"
        return {
            "subject": "New Order Received",
            "body": (
                "New order placed.\n\n"
                f"Order ID: {order_id}\n"
                f"Customer: {name} ({email})\n"
                f"Phone: {phone}\n"
                f"Total Amount: {total}\n\n"
                "Please check the admin dashboard for more details."
            ),
            "html_body": (
                '<div style="font-family: Arial, sans-serif;">'
                "<h2>New Order Placed</h2>"
                f"<p><strong>Order ID:</strong> {escape(str(order_id))}</p>"
                f"<p><strong>Customer:</strong> {escape(name)} ({escape(email)})</p>"
                f"<p><strong>Phone:</strong> {escape(phone)}</p>"
                f"<p><strong>Total Amount:</strong> {total}</p>"
                "<p>Please check the admin dashboard for more details.</p>"
                "</div>"
            ),
        }
