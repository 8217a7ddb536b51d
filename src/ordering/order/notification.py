"""Order placement side effects — confirmation emails after the order is stored.

Runs as an event handler on OrderPlaced, which is only dispatched once the
unit of work that stored the order has committed. Nothing raised here may
reach the caller that placed the order.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from notifications.dispatcher import NotificationDispatcher
from ordering.domain import ordering
from ordering.order.events import OrderPlaced
from ordering.order.order import Order
from ordering.order.queries import order_to_dict
from ordering.utils.logging import bind_order_context, clear_context

logger = structlog.get_logger(__name__)

_dispatcher: NotificationDispatcher | None = None


def get_dispatcher() -> NotificationDispatcher:
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = NotificationDispatcher()
    return _dispatcher


def set_dispatcher(dispatcher: NotificationDispatcher | None) -> None:
    """Override the dispatcher (useful for tests). None restores the default."""
    global _dispatcher
    _dispatcher = dispatcher


@ordering.event_handler(part_of=Order)
class OrderConfirmationHandler:
    """Sends the customer confirmation and admin alert for a placed order."""

    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        bind_order_context(event.order_id)
        try:
            order = current_domain.repository_for(Order).get(event.order_id)
            get_dispatcher().dispatch(order_to_dict(order))
        except Exception as e:
            logger.error(
                "Order notifications could not be dispatched",
                order_id=str(event.order_id),
                error=str(e),
            )
        finally:
            clear_context()
