"""Domain service: match orders against the deliveries that fulfil them.

Delivery lines are matched to order lines by ``(product, unit)``. All of a
customer's deliveries on the order's delivery date are pooled, so two
orders for the same customer and date would both see the same deliveries.
Order creation rejects a second order for the same customer and date,
which keeps the pooled totals meaningful.

Pure functions: no I/O, no mutation of the inputs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bakery.domain.model.delivery import Delivery
from bakery.domain.model.lines import LineKey, line_key
from bakery.domain.model.order import Order
from bakery.domain.model.value_objects import ZERO, parse_quantity

HUNDRED = Decimal(100)


@dataclass(frozen=True)
class LineProgress:
    product: str
    unit: str
    ordered: Decimal
    delivered: Decimal
    is_complete: bool
    progress: float

    @property
    def remaining(self) -> Decimal:
        return max(self.ordered - self.delivered, ZERO)


@dataclass(frozen=True)
class ExtraLine:
    """A product delivered to the customer that the order did not contain."""

    product: str
    unit: str
    delivered: Decimal


@dataclass(frozen=True)
class OrderProgress:
    order: Order
    lines: list[LineProgress]
    extra_lines: list[ExtraLine]

    @property
    def is_complete(self) -> bool:
        return all(line.is_complete for line in self.lines)

    @property
    def has_partial_delivery(self) -> bool:
        return any(line.delivered > ZERO for line in self.lines)


def line_progress(ordered: Decimal, delivered: Decimal) -> float:
    """Percentage delivered, clamped to [0, 100]; 0 when nothing was ordered."""
    if ordered <= ZERO:
        return 0.0
    percent = delivered / ordered * HUNDRED
    return float(min(max(percent, ZERO), HUNDRED))


def delivered_totals(
    customer_id: str,
    on: date,
    deliveries: Iterable[Delivery],
) -> dict[LineKey, Decimal]:
    """Sum delivered quantities per (product, unit) for one customer and day."""
    totals: dict[LineKey, Decimal] = {}
    for delivery in deliveries:
        if delivery.customer_id != customer_id or delivery.local_date != on:
            continue
        for line in delivery.lines or []:
            key = line_key(line)
            totals[key] = totals.get(key, ZERO) + parse_quantity(line.quantity)
    return totals


def annotate_order(order: Order, deliveries: Iterable[Delivery]) -> OrderProgress:
    """Compute per-line and per-order completion for a single order."""
    totals = delivered_totals(order.customer_id, order.delivery_date, deliveries)

    lines: list[LineProgress] = []
    ordered_keys: set[LineKey] = set()
    for line in order.lines:
        key = line_key(line)
        ordered_keys.add(key)
        ordered = parse_quantity(line.quantity)
        delivered = totals.get(key, ZERO)
        lines.append(
            LineProgress(
                product=line.product,
                unit=line.unit,
                ordered=ordered,
                delivered=delivered,
                is_complete=delivered >= ordered,
                progress=line_progress(ordered, delivered),
            )
        )

    extras = [
        ExtraLine(product=product, unit=unit, delivered=qty)
        for (product, unit), qty in totals.items()
        if (product, unit) not in ordered_keys
    ]
    return OrderProgress(order=order, lines=lines, extra_lines=extras)


def annotate_orders(
    orders: Iterable[Order],
    deliveries: Sequence[Delivery],
) -> list[OrderProgress]:
    """Annotate every order, keeping the input order."""
    return [annotate_order(order, deliveries) for order in orders]
