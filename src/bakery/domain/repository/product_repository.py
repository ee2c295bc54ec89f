"""Abstract repository for Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from bakery.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by name."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    def price_list(self) -> dict[str, Decimal]:
        """Current catalog prices keyed by product name (priced products only)."""
        return {p.name: p.price.amount for p in self.list_all() if p.price is not None}
