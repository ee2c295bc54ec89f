"""Application service: the orders of one day with their delivery progress.

Backs the driver's daily sheet: every order for the date annotated with
what has been delivered so far, plus the per-product totals to bake and
the per-product totals already delivered.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

from bakery.application.dto import DailyOrdersDTO, order_to_dto
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.aggregation import summarize
from bakery.domain.service.matching import annotate_orders
from bakery.domain.service.modification_window import can_modify


class ShowDailyOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        delivery_repo: DeliveryRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repo = order_repo
        self._delivery_repo = delivery_repo
        self._clock = clock

    def handle(self, delivery_date: date) -> DailyOrdersDTO:
        orders = sorted(
            self._order_repo.list_by_date(delivery_date),
            key=lambda o: o.customer_name.casefold(),
        )
        deliveries = self._delivery_repo.list_by_date_range(delivery_date, delivery_date)
        modifiable = can_modify(delivery_date, self._clock())

        return DailyOrdersDTO(
            delivery_date=delivery_date,
            orders=[order_to_dto(p, modifiable) for p in annotate_orders(orders, deliveries)],
            ordered_summary=summarize(orders),
            delivered_summary=summarize(deliveries),
        )
