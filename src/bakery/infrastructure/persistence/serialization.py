"""Shared document <-> domain conversions for the JSON repositories.

Reading is lenient: stored quantities go through ``parse_quantity`` and
broken prices or dates read as missing, so an odd document never stops a
listing.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.lines import DeliveryLine, OrderLine
from bakery.domain.model.value_objects import Money, parse_quantity


def money_to_raw(money: Money | None) -> dict[str, str] | None:
    if money is None:
        return None
    return {"amount": str(money.amount), "currency": money.currency}


def money_from_raw(raw: Any) -> Money | None:
    if raw is None:
        return None
    try:
        if isinstance(raw, dict):
            return Money(Decimal(str(raw["amount"])), raw.get("currency", "EUR"))
        return Money(Decimal(str(raw)))
    except (KeyError, InvalidOperation, ValidationError):
        return None


def datetime_to_raw(value: datetime | None) -> str | None:
    """Stored as naive local time so date-range scans compare local days."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value.isoformat()


def datetime_from_raw(raw: Any) -> datetime | None:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except (TypeError, ValueError):
        return None


def date_from_raw(raw: str) -> date:
    return date.fromisoformat(raw[:10])


def order_line_to_raw(line: OrderLine) -> dict[str, str]:
    return {"product": line.product, "quantity": str(line.quantity), "unit": line.unit}


def order_line_from_raw(raw: dict[str, Any]) -> OrderLine:
    return OrderLine(
        product=raw.get("product") or "",
        quantity=parse_quantity(raw.get("quantity")),
        unit=raw.get("unit") or "",
    )


def delivery_line_to_raw(line: DeliveryLine) -> dict[str, Any]:
    return {
        "product": line.product,
        "quantity": str(line.quantity),
        "unit": line.unit,
        "price_at_delivery": money_to_raw(line.price_at_delivery),
    }


def delivery_line_from_raw(raw: dict[str, Any]) -> DeliveryLine:
    return DeliveryLine(
        product=raw.get("product") or "",
        quantity=parse_quantity(raw.get("quantity")),
        unit=raw.get("unit") or "",
        price_at_delivery=money_from_raw(raw.get("price_at_delivery")),
    )
