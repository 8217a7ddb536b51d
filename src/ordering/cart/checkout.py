"""Checkout: reduce a cart snapshot to an order submission and submit it.

The submission carries the cart lines as order items plus the reconciled
price figures. The cart is cleared only once the order has been placed; on
any failure it is left as it was and the outcome carries a readable reason.
"""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from ordering.cart.cart import Cart
from ordering.cart.pricing import PromoSession, reconcile

logger = structlog.get_logger(__name__)

ORDER_PLACED_MESSAGE = "Order placed successfully! Check your email for details."
EMPTY_CART_MESSAGE = "Your cart is empty."


@dataclass(frozen=True)
class CheckoutOutcome:
    placed: bool
    message: str
    order: dict | None = None


class CheckoutFailed(Exception):
    """Raised by an order submitter with a reason that can be shown to the user."""


def build_submission(cart: Cart, customer_details: dict, promo: PromoSession | None = None) -> dict:
    """Build the checkout payload for the current cart contents."""
    breakdown = reconcile(cart.total, promo.applied if promo else False)
    return {
        "orderItems": [
            {
                "product": item.product_id,
                "name": item.name,
                "qty": item.quantity,
                "price": item.price,
                "image": item.image,
            }
            for item in cart.items
        ],
        "customerDetails": {
            "name": customer_details.get("name"),
            "email": customer_details.get("email"),
            "address": customer_details.get("address"),
            "phone": customer_details.get("phone"),
        },
        "itemsPrice": breakdown.subtotal,
        "taxPrice": breakdown.tax,
        "shippingPrice": breakdown.shipping,
        "totalPrice": breakdown.total,
    }


def submit_checkout(
    cart: Cart,
    customer_details: dict,
    place_order: Callable[[dict], dict],
    promo: PromoSession | None = None,
) -> CheckoutOutcome:
    """Submit the cart through `place_order` and clear it on success.

    `place_order` receives the checkout payload and returns the created order,
    raising CheckoutFailed (or any other exception) when the order was not
    placed.
    """
    if cart.is_empty():
        return CheckoutOutcome(placed=False, message=EMPTY_CART_MESSAGE)

    submission = build_submission(cart, customer_details, promo)
    try:
        order = place_order(submission)
    except CheckoutFailed as e:
        logger.warning("Checkout rejected", reason=str(e))
        return CheckoutOutcome(placed=False, message=f"Order could not be placed: {e}")
    except Exception as e:
        logger.error("Checkout failed", error=str(e))
        return CheckoutOutcome(placed=False, message="Order could not be placed. Please try again.")

    cart.clear()
    return CheckoutOutcome(placed=True, message=ORDER_PLACED_MESSAGE, order=order)
