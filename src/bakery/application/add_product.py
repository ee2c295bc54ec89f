"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, default_unit: str, price: str | None = None) -> Product:
        """Add a new product to the catalog. Names are unique ignoring case."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        product = Product.create(
            name=name,
            default_unit=default_unit,
            price=Money.of(price) if price else None,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added", product.id, product.name)
        return product
