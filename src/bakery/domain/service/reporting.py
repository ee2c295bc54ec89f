"""Domain service: delivery reports and per-customer history figures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bakery.domain.model.delivery import Delivery
from bakery.domain.model.order import Order
from bakery.domain.model.payment import Payment
from bakery.domain.model.value_objects import ZERO, parse_quantity
from bakery.domain.service.aggregation import SummaryRow, summarize, total_quantity

ALL_CUSTOMERS = "All customers"


@dataclass(frozen=True)
class DeliveryReport:
    start_date: date
    end_date: date
    customer_label: str
    summary: list[SummaryRow]
    total_quantity: Decimal
    total_deliveries: int
    deliveries: list[Delivery]


@dataclass(frozen=True)
class ProductFrequency:
    product: str
    quantity: Decimal
    count: int


@dataclass(frozen=True)
class CustomerHistory:
    total_orders: int
    total_deliveries: int
    total_paid: Decimal
    average_order_quantity: Decimal
    most_ordered: list[ProductFrequency]
    last_order: Order | None
    last_delivery: Delivery | None


def delivery_report(
    deliveries: Sequence[Delivery],
    start_date: date,
    end_date: date,
    customer_name: str | None = None,
) -> DeliveryReport:
    summary = summarize(deliveries)
    return DeliveryReport(
        start_date=start_date,
        end_date=end_date,
        customer_label=customer_name or ALL_CUSTOMERS,
        summary=summary,
        total_quantity=total_quantity(summary),
        total_deliveries=len(deliveries),
        deliveries=list(deliveries),
    )


def most_ordered_products(orders: Sequence[Order], top_n: int = 5) -> list[ProductFrequency]:
    """Products ranked by total ordered quantity, whatever the unit."""
    quantities: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for order in orders:
        for line in order.lines:
            quantities[line.product] = quantities.get(line.product, ZERO) + parse_quantity(line.quantity)
            counts[line.product] = counts.get(line.product, 0) + 1
    ranked = sorted(quantities.items(), key=lambda item: item[1], reverse=True)
    return [ProductFrequency(name, qty, counts[name]) for name, qty in ranked[:top_n]]


def customer_history(
    orders: Sequence[Order],
    deliveries: Sequence[Delivery],
    payments: Sequence[Payment],
    top_n: int = 5,
) -> CustomerHistory:
    ordered = sum(
        (parse_quantity(line.quantity) for order in orders for line in order.lines), ZERO
    )
    average = ordered / len(orders) if orders else ZERO

    last_order = max(orders, key=lambda o: o.delivery_date, default=None)
    last_delivery = max(
        (d for d in deliveries if d.date is not None),
        key=lambda d: d.date,
        default=None,
    )
    return CustomerHistory(
        total_orders=len(orders),
        total_deliveries=len(deliveries),
        total_paid=sum((p.amount.amount for p in payments), ZERO),
        average_order_quantity=average,
        most_ordered=most_ordered_products(orders, top_n),
        last_order=last_order,
        last_delivery=last_delivery,
    )
