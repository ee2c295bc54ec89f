"""Application service: fill an empty catalog with the default bakery products."""

from __future__ import annotations

import logging

from bakery.domain.model.product import DEFAULT_PRODUCTS, Product
from bakery.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SeedProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Seed only when the catalog is empty; return the products added."""
        if self._product_repo.list_all():
            return []

        added = []
        for name, unit in DEFAULT_PRODUCTS:
            product = Product.create(name=name, default_unit=unit)
            self._product_repo.save(product)
            added.append(product)
        logger.info("Seeded %d default products", len(added))
        return added
