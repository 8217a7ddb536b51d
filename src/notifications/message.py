"""Outbound message types and the rendered message handed to a channel."""

from dataclasses import dataclass
from enum import Enum


class MessageType(Enum):
    ORDER_CONFIRMATION = "OrderConfirmation"
    ADMIN_ORDER_ALERT = "AdminOrderAlert"


class RecipientType(Enum):
    CUSTOMER = "Customer"
    INTERNAL = "Internal"


@dataclass(frozen=True)
class OutboundMessage:
    message_type: MessageType
    recipient_type: RecipientType
    to: str
    subject: str
    body: str
    html_body: str | None = None
