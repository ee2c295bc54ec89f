"""Application service: Confirm Order use case (pending -> confirmed)."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.confirm()
        self._order_repo.save(order)
        logger.info("Order %s confirmed", order_id)
