"""Domain service: roll up line quantities into per-product totals.

Used by the daily orders screen (over orders) and by delivery reports and
the dashboard (over deliveries). A single call takes either orders or
deliveries, never both.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from bakery.domain.model.lines import DeliveryLine, LineKey, OrderLine, line_key
from bakery.domain.model.value_objects import ZERO, parse_quantity


class HasLines(Protocol):
    lines: list


@dataclass(frozen=True)
class SummaryRow:
    product: str
    unit: str
    total_quantity: Decimal
    # one per contributing line, not per distinct order/delivery
    count: int


def collation_key(name: str) -> str:
    """Accent- and case-insensitive sort key for product names."""
    decomposed = unicodedata.normalize("NFKD", name or "")
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold()


def summarize(records: Iterable[HasLines]) -> list[SummaryRow]:
    """Aggregate all lines of ``records`` by (product, unit).

    Rows come out sorted by product name; rows with equal names keep the
    order in which they were first met.
    """
    totals: dict[LineKey, Decimal] = {}
    counts: dict[LineKey, int] = {}

    for record in records:
        lines: list[OrderLine | DeliveryLine] = getattr(record, "lines", None) or []
        for line in lines:
            key = line_key(line)
            totals[key] = totals.get(key, ZERO) + parse_quantity(line.quantity)
            counts[key] = counts.get(key, 0) + 1

    rows = [
        SummaryRow(product=product, unit=unit, total_quantity=total, count=counts[(product, unit)])
        for (product, unit), total in totals.items()
    ]
    return sorted(rows, key=lambda row: collation_key(row.product))


def total_quantity(rows: Iterable[SummaryRow]) -> Decimal:
    return sum((row.total_quantity for row in rows), ZERO)
