"""Order and delivery lines.

Lines carry denormalised product name and unit strings. The pair
``(product, unit)`` is the join key between what was ordered and what was
delivered; there is no foreign key from a delivery line to an order line,
so several small deliveries can satisfy one order and un-ordered products
can still be delivered.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import Money, Quantity

LineKey = tuple[str, str]


@dataclass(frozen=True)
class OrderLine:
    product: str
    quantity: Decimal
    unit: str

    @staticmethod
    def create(product: str, quantity: str | int | Decimal, unit: str) -> OrderLine:
        """Validate one requested line (quantity must be > 0)."""
        product, unit = _require_names(product, unit)
        return OrderLine(product=product, quantity=Quantity.of(quantity).value, unit=unit)


@dataclass(frozen=True)
class DeliveryLine:
    """A delivered line with the price snapshot taken when it was recorded."""

    product: str
    quantity: Decimal
    unit: str
    price_at_delivery: Money | None = None

    @staticmethod
    def create(
        product: str,
        quantity: str | int | Decimal,
        unit: str,
        price_at_delivery: Money | None = None,
    ) -> DeliveryLine:
        product, unit = _require_names(product, unit)
        return DeliveryLine(
            product=product,
            quantity=Quantity.of(quantity).value,
            unit=unit,
            price_at_delivery=price_at_delivery,
        )


def line_key(line: OrderLine | DeliveryLine) -> LineKey:
    """Composite join key. Case-sensitive and exact."""
    return (line.product or "", line.unit or "")


def _require_names(product: str, unit: str) -> tuple[str, str]:
    if not product or not product.strip():
        raise ValidationError("Product name is required on every line")
    if not unit or not unit.strip():
        raise ValidationError(f"Unit is required for '{product.strip()}'")
    return product.strip(), unit.strip()
