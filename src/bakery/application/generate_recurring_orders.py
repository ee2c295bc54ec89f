"""Application service: Generate Recurring Orders use case.

Expands active weekly templates into orders for one date. The generator
decides what to create from a snapshot of existing orders; each insert is
then preceded by a fresh check for the same customer and date, because a
customer may have placed a manual order in the meantime. Under truly
concurrent writers a rare duplicate remains possible; the expected
deployment is a single nightly batch job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from bakery.domain.model.order import Order
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.recurring_order_repository import (
    RecurringOrderRepository,
)
from bakery.domain.service.recurring import generate_orders

logger = logging.getLogger(__name__)


class GenerateRecurringOrdersHandler:

    def __init__(
        self,
        recurring_repo: RecurringOrderRepository,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._recurring_repo = recurring_repo
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, target_date: date) -> list[Order]:
        """Create and persist the orders due on ``target_date``; return the new ones."""
        candidates = generate_orders(
            target_date,
            self._recurring_repo.list_active(),
            self._order_repo.list_by_date(target_date),
            now=self._clock(),
        )

        created: list[Order] = []
        for order in candidates:
            if self._order_repo.find_for_customer_on(order.customer_id, target_date):
                logger.warning(
                    "Skipping recurring order for %s on %s: an order appeared meanwhile",
                    order.customer_name,
                    target_date,
                )
                continue
            self._order_repo.save(order)
            created.append(order)

        logger.info(
            "Generated %d recurring order(s) for %s", len(created), target_date.isoformat()
        )
        return created
