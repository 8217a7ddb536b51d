"""Product aggregate (CQRS) — the catalogue record a cart line is priced from.

Orders never reference a Product's live state: the cart copies name, price
and image when an item is added, and the order freezes that copy. The read
path of an order resolves product references back to a small projection for
display only.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Float, Integer, String, Text

from ordering.domain import ordering


@ordering.aggregate
class Product:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    images = Text()  # JSON: list of image URLs
    category = String(max_length=100)
    count_in_stock = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name, price, description=None, images=None, category=None, count_in_stock=0):
        now = datetime.now(UTC)
        return cls(
            name=name,
            description=description,
            price=price,
            images=json.dumps(list(images or [])),
            category=category,
            count_in_stock=count_in_stock,
            created_at=now,
            updated_at=now,
        )

    @property
    def image_urls(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    def update_details(self, **changes):
        """Apply the given changes; keys left out (or None) keep their value."""
        for field_name in ("name", "description", "price", "category", "count_in_stock"):
            if changes.get(field_name) is not None:
                setattr(self, field_name, changes[field_name])
        if changes.get("images") is not None:
            self.images = json.dumps(list(changes["images"]))
        self.updated_at = datetime.now(UTC)

    def snapshot(self) -> dict:
        """Minimal projection used when resolving order line items."""
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "images": self.image_urls,
        }
