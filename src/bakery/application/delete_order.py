"""Application service: Delete Order use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.modification_window import ensure_modifiable

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        ensure_modifiable(order.delivery_date, self._clock())
        self._order_repo.delete(order_id)
        logger.info("Order %s deleted", order_id)
