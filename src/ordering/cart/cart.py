"""Shopping cart — client-resident line items that feed checkout.

The cart never touches the server. It owns merge, removal and quantity
updates for line items keyed by (product_id, size, color), derives count and
total on every read, and writes the full collection to its slot after every
mutation. Guard conditions are silent no-ops: cart operations never raise.
"""

import json
from dataclasses import asdict, dataclass
from enum import Enum

import structlog

from ordering.cart.storage import CartSlot, InMemoryCartSlot

logger = structlog.get_logger(__name__)


class CartChange(Enum):
    ADDED = "Added"
    UPDATED = "Updated"
    REMOVED = "Removed"


@dataclass
class CartItem:
    """A product snapshot (name, price, image) selected in a size and color."""

    product_id: str
    name: str
    price: float
    image: str
    size: str
    color: str
    quantity: int = 1

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.product_id, self.size, self.color)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        item = cls(
            product_id=str(data["product_id"]),
            name=str(data["name"]),
            price=float(data["price"]),
            image=str(data.get("image") or ""),
            size=str(data.get("size") or ""),
            color=str(data.get("color") or ""),
            quantity=int(data["quantity"]),
        )
        if item.quantity < 1:
            raise ValueError(f"Invalid quantity {item.quantity} for {item.product_id}")
        return item


@dataclass(frozen=True)
class CartNotice:
    """User-visible confirmation of a cart mutation."""

    change: CartChange
    message: str


class Cart:
    """Mutable collection of CartItems persisted through a CartSlot."""

    def __init__(self, slot: CartSlot | None = None):
        self.slot = slot or InMemoryCartSlot()
        self._items: list[CartItem] = self._load()

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    @property
    def count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def find(self, product_id, size, color) -> CartItem | None:
        key = (str(product_id), size, color)
        return next((i for i in self._items if i.key == key), None)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add(self, item: CartItem) -> CartNotice | None:
        """Add an item, or merge its quantity into the entry with the same key.

        Quantities below 1 are ignored and leave the cart unchanged.
        """
        if item.quantity < 1:
            return None

        existing = self.find(item.product_id, item.size, item.color)

        if existing:
            existing.quantity += item.quantity
            notice = CartNotice(CartChange.UPDATED, f"Updated quantity for {item.name}")
        else:
            self._items.append(
                CartItem(
                    product_id=str(item.product_id),
                    name=item.name,
                    price=item.price,
                    image=item.image,
                    size=item.size,
                    color=item.color,
                    quantity=item.quantity,
                )
            )
            notice = CartNotice(CartChange.ADDED, f"Added {item.name} to cart")

        self._save()
        logger.debug("Cart item added", product_id=item.product_id, change=notice.change.value)
        return notice

    def remove(self, product_id, size, color) -> CartNotice:
        """Remove the entry matching the full key. Absent keys are ignored."""
        key = (str(product_id), size, color)
        self._items = [i for i in self._items if i.key != key]
        self._save()
        return CartNotice(CartChange.REMOVED, "Item removed from cart")

    def set_quantity(self, product_id, size, color, quantity: int) -> None:
        """Overwrite an entry's quantity. Quantities below 1 are ignored."""
        if quantity < 1:
            return

        item = self.find(product_id, size, color)
        if item is None:
            return

        item.quantity = quantity
        self._save()

    def clear(self) -> None:
        self._items = []
        self._save()

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def _load(self) -> list[CartItem]:
        raw = self.slot.load()
        if raw is None:
            return []

        # A corrupt slot is treated as an empty cart and dropped
        try:
            return [CartItem.from_dict(entry) for entry in json.loads(raw)]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.warning("Discarding unreadable cart slot", slot=self.slot.name, error=str(exc))
            self.slot.discard()
            return []

    def _save(self) -> None:
        self.slot.save(json.dumps([item.to_dict() for item in self._items]))
