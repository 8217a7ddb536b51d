"""Checkout pricing — shipping, promo discount and totals derived from a subtotal.

Figures are recomputed on every read of the cart; nothing here is stored.
Tax is carried as a named field that is always zero so the order shape stays
stable.
"""

from dataclasses import dataclass

FREE_SHIPPING_THRESHOLD = 100.0
FLAT_SHIPPING_RATE = 10.0
PROMO_CODE = "SAVE10"
PROMO_DISCOUNT_RATE = 0.10
TAX_RATE_PLACEHOLDER = 0.0


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: float
    shipping: float
    discount: float
    tax: float
    total: float


def shipping_for(subtotal: float) -> float:
    """Shipping is free strictly above the threshold."""
    return 0.0 if subtotal > FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING_RATE


def reconcile(subtotal: float, promo_applied: bool = False) -> PriceBreakdown:
    """Derive shipping, discount, tax and total for a cart subtotal."""
    shipping = shipping_for(subtotal)
    discount = subtotal * PROMO_DISCOUNT_RATE if promo_applied else 0.0
    return PriceBreakdown(
        subtotal=subtotal,
        shipping=shipping,
        discount=discount,
        tax=TAX_RATE_PLACEHOLDER,
        total=subtotal + shipping - discount,
    )


def is_valid_promo_code(code: str | None) -> bool:
    return bool(code) and code.strip().upper() == PROMO_CODE


class PromoSession:
    """Tracks whether the promo code has been applied during a session.

    Once applied the flag is sticky: later codes, valid or not, are ignored.
    """

    def __init__(self):
        self.applied = False
        self.code: str | None = None

    def apply(self, code: str | None) -> bool:
        """Apply a promo code. Returns whether the promo is active afterwards."""
        if self.applied:
            return True

        if is_valid_promo_code(code):
            self.applied = True
            self.code = PROMO_CODE

        return self.applied
