"""Ordering bounded context — checkout, orders and their lifecycle.

Handles order placement from a client-side cart, the order lifecycle driven
by administrative actions, and the product records orders are priced from.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
