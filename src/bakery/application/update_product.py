"""Application service: Update Product Price use case."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, new_price: str | None) -> None:
        """Update a product's price.

        This does NOT affect any existing deliveries; they captured a
        price snapshot when recorded.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.update_price(Money.of(new_price) if new_price else None)
        self._product_repo.save(product)
        logger.info("Product %s price set to %s", product_id, product.price)
