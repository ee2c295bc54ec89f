"""Application service: Delete Delivery use case (a correction)."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.delivery_repository import DeliveryRepository

logger = logging.getLogger(__name__)


class DeleteDeliveryHandler:

    def __init__(self, delivery_repo: DeliveryRepository) -> None:
        self._delivery_repo = delivery_repo

    def handle(self, delivery_id: str) -> None:
        if self._delivery_repo.get_by_id(delivery_id) is None:
            raise EntityNotFoundError(f"Delivery '{delivery_id}' not found")
        self._delivery_repo.delete(delivery_id)
        logger.info("Delivery %s deleted", delivery_id)
