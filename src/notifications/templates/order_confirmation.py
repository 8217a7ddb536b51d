"""Order confirmation template — sent to the customer when an order is placed."""

from html import escape

from notifications.message import MessageType, RecipientType


def _money(value) -> str:
    return f"${float(value or 0.0):.2f}"


class OrderConfirmationTemplate:
    message_type = MessageType.ORDER_CONFIRMATION
    recipient_type = RecipientType.CUSTOMER

    @staticmethod
    def render(context: dict) -> dict:
        store_name = context.get("store_name", "Storefront")
        order_id = context.get("id", "N/A")
        status = (context.get("status") or "pending").capitalize()
        details = context.get("customerDetails") or {}
        items = context.get("orderItems") or []

        lines = [
            f"  {item['name']}: {item['qty']} x {_money(item['price'])} = {_money(item['qty'] * item['price'])}"
            for item in items
        ]
        body = (
            f"Hi {details.get('name', 'there')},\n\n"
            "We have received your order. Here are the details:\n\n"
            f"Order ID: {order_id}\n"
            f"Status: {status}\n"
            f"Phone: {details.get('phone', '')}\n"
            f"Address: {details.get('address', '')}\n\n"
            "Items:\n" + "\n".join(lines) + "\n\n"
            f"Shipping: {_money(context.get('shippingPrice'))}\n"
            f"Tax: {_money(context.get('taxPrice'))}\n"
            f"Total: {_money(context.get('totalPrice'))}\n\n"
            "If you have any questions, please contact us."
        )

        rows = "".join(
            "<tr>"
            f'<td><img src="{escape(item.get("image") or "")}" alt="{escape(item["name"])}" width="50" height="50"></td>'
            f"<td>{escape(item['name'])}</td>"
            f"<td>{item['qty']} x {_money(item['price'])}</td>"
            f"<td>{_money(item['qty'] * item['price'])}</td>"
            "</tr>"
            for item in items
        )
        html_body = (
            '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
            "<h2>Thank you for your order!</h2>"
            f"<p>Hi {escape(details.get('name', 'there'))},</p>"
            "<p>We have received your order. Here are the details:</p>"
            f"<h3>Order ID: {escape(str(order_id))}</h3>"
            f"<p><strong>Status:</strong> {escape(status)}</p>"
            f"<p><strong>Phone:</strong> {escape(details.get('phone', ''))}</p>"
            f"<p><strong>Address:</strong> {escape(details.get('address', ''))}</p>"
            '<table style="width: 100%; border-collapse: collapse;">'
            "<thead><tr><th>Image</th><th>Product</th><th>Quantity</th><th>Total</th></tr></thead>"
            f"<tbody>{rows}</tbody>"
            "</table>"
            f"<p><strong>Shipping:</strong> {_money(context.get('shippingPrice'))}</p>"
            f"<p><strong>Tax:</strong> {_money(context.get('taxPrice'))}</p>"
            f"<h3>Total: {_money(context.get('totalPrice'))}</h3>"
            "<p>If you have any questions, please contact us.</p>"
            "</div>"
        )

        return {
            "subject": f"Order Confirmation - {store_name}",
            "body": body,
            "html_body": html_body,
        }
