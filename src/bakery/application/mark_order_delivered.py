"""Application service: Mark Order Delivered use case (confirmed -> delivered).

The status is a label set by the driver; actual quantities come from
recorded deliveries and the matching engine.
"""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class MarkOrderDeliveredHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.mark_delivered()
        self._order_repo.save(order)
        logger.info("Order %s marked delivered", order_id)
