"""Application service: Add Recurring Order use case."""

from __future__ import annotations

import logging

from bakery.application.dto import LineSpec
from bakery.application.lines import build_order_lines
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.recurring import RecurringOrderTemplate
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.repository.recurring_order_repository import (
    RecurringOrderRepository,
)

logger = logging.getLogger(__name__)


class AddRecurringOrderHandler:

    def __init__(
        self,
        recurring_repo: RecurringOrderRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._recurring_repo = recurring_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo

    def handle(
        self,
        customer_id: str,
        days_of_week: set[int],
        line_specs: list[LineSpec],
        notes: str = "",
    ) -> RecurringOrderTemplate:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        template = RecurringOrderTemplate.create(
            customer_id=customer_id,
            customer_name=customer.name,
            days_of_week=days_of_week,
            lines=build_order_lines(line_specs, self._product_repo, customer),
            notes=notes,
        )
        self._recurring_repo.save(template)
        logger.info(
            "Recurring order %s added for %s (%s)", template.id, customer.name, template.days_label
        )
        return template
