"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are switched on and off in the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Only active products can be sold.  Deactivation is a soft toggle;
    the row stays so that sold line items keep a valid reference.
    """

    id: str
    name: str
    price: Money
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(product_id: str, name: str, price: Money) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        return Product(id=product_id, name=name.strip(), price=price)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
        self.updated_at = _utcnow()

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self.updated_at = _utcnow()
