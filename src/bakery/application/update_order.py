"""Application service: Update Order use case.

The order being edited arrives as an explicit ``EditingOrder``. Both the
current and the requested delivery date must still be inside the
modification window.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from bakery.application.dto import EditingOrder, OrderDTO, order_to_dto
from bakery.application.lines import build_order_lines
from bakery.domain.exceptions import DuplicateOrderError, EntityNotFoundError
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.service.matching import annotate_order
from bakery.domain.service.modification_window import can_modify, ensure_modifiable

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

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

    def handle(self, editing: EditingOrder) -> OrderDTO:
        order = self._order_repo.get_by_id(editing.order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{editing.order_id}' not found")

        now = self._clock()
        ensure_modifiable(order.delivery_date, now)

        if editing.delivery_date != order.delivery_date:
            ensure_modifiable(editing.delivery_date, now)
            others = [
                o
                for o in self._order_repo.find_for_customer_on(
                    order.customer_id, editing.delivery_date
                )
                if o.id != order.id
            ]
            if others:
                raise DuplicateOrderError(
                    f"{order.customer_name} already has an order for "
                    f"{editing.delivery_date.isoformat()}"
                )

        customer = self._customer_repo.get_by_id(order.customer_id)
        lines = build_order_lines(editing.lines, self._product_repo, customer)
        order.revise(editing.delivery_date, lines, editing.notes)
        self._order_repo.save(order)
        logger.info("Order %s updated", order.id)

        return order_to_dto(annotate_order(order, []), can_modify(order.delivery_date, now))
