"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from bakery.domain.exceptions import EntityNotFoundError, ValidationError


@dataclass(frozen=True)
class CustomProduct:
    """A product name/unit pair visible only to one customer."""

    name: str
    unit: str


@dataclass
class Customer:
    """Someone the bakery delivers to.

    Customers are never hard-deleted while orders or deliveries still
    reference them; those records carry a denormalised ``customer_name``.
    """

    id: str | None
    name: str
    phone: str = ""
    address: str = ""
    linked_user_id: str | None = None
    custom_products: list[CustomProduct] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    @staticmethod
    def create(
        name: str,
        phone: str = "",
        address: str = "",
        linked_user_id: str | None = None,
    ) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(
            id=None,
            name=name.strip(),
            phone=phone.strip(),
            address=address.strip(),
            linked_user_id=linked_user_id,
        )

    def add_custom_product(self, name: str, unit: str) -> None:
        if not name or not name.strip() or not unit or not unit.strip():
            raise ValidationError("Custom products need a name and a unit")
        product = CustomProduct(name.strip(), unit.strip())
        if product not in self.custom_products:
            self.custom_products.append(product)

    def update_details(
        self,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Change the given contact fields; ``None`` leaves a field as it is."""
        if name is not None:
            if not name.strip():
                raise ValidationError("Customer name is required")
            self.name = name.strip()
        if phone is not None:
            self.phone = phone.strip()
        if address is not None:
            self.address = address.strip()

    def remove_custom_product(self, name: str, unit: str | None = None) -> None:
        def matches(product: CustomProduct) -> bool:
            if product.name.casefold() != name.strip().casefold():
                return False
            return unit is None or product.unit == unit.strip()

        kept = [p for p in self.custom_products if not matches(p)]
        if len(kept) == len(self.custom_products):
            raise EntityNotFoundError(f"{self.name} has no custom product '{name.strip()}'")
        self.custom_products = kept
