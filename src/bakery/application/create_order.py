"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model: resolve
the customer and the line units, refuse past dates, reject a
second order for the same customer and day, persist.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from bakery.application.dto import LineSpec, OrderDTO, order_to_dto
from bakery.application.lines import build_order_lines
from bakery.domain.exceptions import DuplicateOrderError, EntityNotFoundError
from bakery.domain.model.order import Order
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.service.matching import annotate_order
from bakery.domain.service.modification_window import can_modify, ensure_not_past

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(
        self,
        customer_id: str,
        delivery_date: date,
        line_specs: list[LineSpec],
        notes: str = "",
    ) -> OrderDTO:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        now = self._clock()
        ensure_not_past(delivery_date, now)

        if self._order_repo.find_for_customer_on(customer_id, delivery_date):
            raise DuplicateOrderError(
                f"{customer.name} already has an order for {delivery_date.isoformat()}"
            )

        lines = build_order_lines(line_specs, self._product_repo, customer)
        order = Order.create(
            customer_id=customer_id,
            customer_name=customer.name,
            delivery_date=delivery_date,
            lines=lines,
            notes=notes,
            created_at=now,
        )
        self._order_repo.save(order)
        logger.info(
            "Order %s created for %s on %s", order.id, customer.name, delivery_date
        )

        return order_to_dto(annotate_order(order, []), can_modify(delivery_date, now))
