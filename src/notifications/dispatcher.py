"""Order notification dispatcher — best-effort confirmation and admin emails.

Renders the customer confirmation and the admin alert for a stored order and
hands each to the email channel. Delivery is advisory: every failure
(a "failed" result, an adapter exception or a timeout) is logged and
swallowed, and nothing is retried.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as SendTimeout

import structlog

from notifications.channel import get_email_channel
from notifications.message import MessageType, OutboundMessage
from notifications.templates import get_template

logger = structlog.get_logger(__name__)

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="notifier")


def _default_timeout() -> float:
    return float(os.environ.get("NOTIFIER_TIMEOUT_SECONDS", "10"))


class NotificationDispatcher:
    """Sends the messages that follow an order placement."""

    def __init__(
        self,
        channel=None,
        admin_email: str | None = None,
        store_name: str | None = None,
        timeout: float | None = None,
    ):
        self.channel = channel
        self.admin_email = admin_email or os.environ.get("ADMIN_EMAIL") or os.environ.get("SMTP_USER")
        self.store_name = store_name or os.environ.get("STORE_NAME", "Storefront")
        self.timeout = timeout if timeout is not None else _default_timeout()

    def render(self, order: dict) -> list[OutboundMessage]:
        """Render the customer confirmation and, when an admin address is set, the admin alert."""
        context = {**order, "store_name": self.store_name}
        customer_email = (order.get("customerDetails") or {}).get("email")

        recipients = [(MessageType.ORDER_CONFIRMATION, customer_email)]
        if self.admin_email:
            recipients.append((MessageType.ADMIN_ORDER_ALERT, self.admin_email))
        else:
            logger.warning("No admin email configured, skipping admin alert", order_id=order.get("id"))

        messages = []
        for message_type, to in recipients:
            template_cls = get_template(message_type)
            rendered = template_cls.render(context)
            messages.append(
                OutboundMessage(
                    message_type=message_type,
                    recipient_type=template_cls.recipient_type,
                    to=to,
                    subject=rendered["subject"],
                    body=rendered["body"],
                    html_body=rendered.get("html_body"),
                )
            )
        return messages

    def dispatch(self, order: dict) -> dict[str, bool]:
        """Send every message for `order`. Never raises.

        Returns:
            Mapping of message type value to whether it was sent.
        """
        results = {}
        try:
            messages = self.render(order)
        except Exception as e:
            logger.error("Failed to render order notifications", order_id=order.get("id"), error=str(e))
            return results

        for message in messages:
            results[message.message_type.value] = self._send(message, order_id=order.get("id"))
        return results

    def _send(self, message: OutboundMessage, order_id=None) -> bool:
        channel = self.channel or get_email_channel()
        try:
            future = _executor.submit(
                channel.send,
                to=message.to,
                subject=message.subject,
                body=message.body,
                html_body=message.html_body,
            )
            result = future.result(timeout=self.timeout)
        except SendTimeout:
            logger.error(
                "Notification dispatch timed out",
                order_id=order_id,
                message_type=message.message_type.value,
                timeout=self.timeout,
            )
            return False
        except Exception as e:
            logger.error(
                "Notification dispatch failed",
                order_id=order_id,
                message_type=message.message_type.value,
                error=str(e),
            )
            return False

        if result.get("status") != "sent":
            logger.error(
                "Notification rejected by channel",
                order_id=order_id,
                message_type=message.message_type.value,
                error=result.get("error", "Unknown dispatch error"),
            )
            return False

        logger.info(
            "Notification sent",
            order_id=order_id,
            message_type=message.message_type.value,
            message_id=result.get("message_id"),
        )
        return True
