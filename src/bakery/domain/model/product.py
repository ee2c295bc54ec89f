"""Product aggregate.

Products live independently of orders and deliveries. They have their own
lifecycle: prices change, products are added and removed from the catalog.
Orders and deliveries keep a denormalised copy of name, unit and price, so
nothing here cascades.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import Money

DEFAULT_PRODUCTS: tuple[tuple[str, str], ...] = (
    ("White Bread", "kg"),
    ("Sourdough", "kg"),
    ("Whole Wheat", "kg"),
    ("Baguette", "pieces"),
    ("Ciabatta", "pieces"),
    ("Brioche", "pieces"),
    ("Pizza Dough", "kg"),
    ("Focaccia", "pieces"),
    ("Croissant", "pieces"),
    ("Rolls", "pieces"),
)


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is optional: a bakery can deliver products it has not priced
    yet, billing then falls back to zero.
    """

    id: str | None
    name: str
    default_unit: str
    price: Money | None = None

    @staticmethod
    def create(name: str, default_unit: str, price: Money | None = None) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not default_unit or not default_unit.strip():
            raise ValidationError("Default unit is required")
        return Product(
            id=None, name=name.strip(), default_unit=default_unit.strip(), price=price
        )

    def update_price(self, new_price: Money | None) -> None:
        """Change the product price.

        This does NOT affect any existing deliveries because they capture
        a price snapshot when recorded.
        """
        self.price = new_price

    def matches_name(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()
