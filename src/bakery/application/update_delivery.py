"""Application service: Update Delivery use case.

A correction of what physically left the bakery: the lines are replaced
wholesale and the date may move, while the delivery keeps its id. Lines
for a product and unit already on the delivery keep their price snapshot.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from bakery.application.dto import LineSpec
from bakery.application.lines import build_delivery_lines
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.delivery import Delivery
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateDeliveryHandler:

    def __init__(
        self,
        delivery_repo: DeliveryRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._delivery_repo = delivery_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo

    def handle(
        self,
        delivery_id: str,
        when: datetime | date | None,
        line_specs: list[LineSpec],
    ) -> Delivery:
        delivery = self._delivery_repo.get_by_id(delivery_id)
        if delivery is None:
            raise EntityNotFoundError(f"Delivery '{delivery_id}' not found")

        customer = self._customer_repo.get_by_id(delivery.customer_id)
        lines = build_delivery_lines(
            line_specs, self._product_repo, customer, previous=delivery.lines
        )
        delivery.correct(when, lines)
        self._delivery_repo.save(delivery)
        logger.info("Delivery %s corrected (%d lines)", delivery.id, len(lines))
        return delivery
