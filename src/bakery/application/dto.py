"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from bakery.domain.model.value_objects import format_quantity
from bakery.domain.service.aggregation import SummaryRow
from bakery.domain.service.matching import OrderProgress


@dataclass(frozen=True)
class LineSpec:
    """Input: one requested line.

    ``unit`` may be left out to use the product's default unit. ``price``
    only applies to deliveries and overrides the catalog snapshot.
    """

    product: str
    quantity: str
    unit: str | None = None
    price: str | None = None


@dataclass(frozen=True)
class EditingOrder:
    """Input: the order currently being edited and its new contents."""

    order_id: str
    delivery_date: date
    lines: list[LineSpec]
    notes: str = ""


@dataclass(frozen=True)
class OrderLineDTO:
    product: str
    unit: str
    ordered: str
    delivered: str
    progress: float
    is_complete: bool
    remaining: str = "0"


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order with its delivery progress, as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str
    delivery_date: str
    status: str
    notes: str
    lines: list[OrderLineDTO]
    extras: list[OrderLineDTO]
    is_complete: bool
    has_partial_delivery: bool
    can_modify: bool
    recurring_template_id: str | None = None


@dataclass(frozen=True)
class DailyOrdersDTO:
    delivery_date: date
    orders: list[OrderDTO]
    ordered_summary: list[SummaryRow] = field(default_factory=list)
    delivered_summary: list[SummaryRow] = field(default_factory=list)


def order_to_dto(progress: OrderProgress, can_modify: bool) -> OrderDTO:
    order = progress.order
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        delivery_date=order.delivery_date.isoformat(),
        status=order.status.value,
        notes=order.notes,
        lines=[
            OrderLineDTO(
                product=line.product,
                unit=line.unit,
                ordered=format_quantity(line.ordered),
                delivered=format_quantity(line.delivered),
                progress=line.progress,
                is_complete=line.is_complete,
                remaining=format_quantity(line.remaining),
            )
            for line in progress.lines
        ],
        extras=[
            OrderLineDTO(
                product=extra.product,
                unit=extra.unit,
                ordered="0",
                delivered=format_quantity(extra.delivered),
                progress=0.0,
                is_complete=True,
            )
            for extra in progress.extra_lines
        ],
        is_complete=progress.is_complete,
        has_partial_delivery=progress.has_partial_delivery,
        can_modify=can_modify,
        recurring_template_id=order.recurring_template_id,
    )
