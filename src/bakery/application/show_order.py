"""Application service: Show Order use case (query)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from bakery.application.dto import OrderDTO, order_to_dto
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.matching import annotate_order
from bakery.domain.service.modification_window import can_modify


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        delivery_repo: DeliveryRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repo = order_repo
        self._delivery_repo = delivery_repo
        self._clock = clock

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        deliveries = self._delivery_repo.list_by_date_range(
            order.delivery_date, order.delivery_date, customer_id=order.customer_id
        )
        progress = annotate_order(order, deliveries)
        return order_to_dto(progress, can_modify(order.delivery_date, self._clock()))
