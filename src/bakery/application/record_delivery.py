"""Application service: Record Delivery use case.

Each line keeps a snapshot of the product price at the moment of delivery,
so later catalog price changes never rewrite what a customer owes.
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


class RecordDeliveryHandler:

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
        customer_id: str,
        when: datetime | date,
        line_specs: list[LineSpec],
    ) -> Delivery:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        lines = build_delivery_lines(line_specs, self._product_repo, customer)
        delivery = Delivery.record(customer_id, customer.name, when, lines)
        self._delivery_repo.save(delivery)
        logger.info(
            "Delivery %s recorded for %s (%d lines)", delivery.id, customer.name, len(lines)
        )
        return delivery
