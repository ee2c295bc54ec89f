"""Domain service: expand weekly recurring templates into dated orders.

Generation is idempotent: a customer who already has an order on the
target date is skipped, so running the generator twice for the same day
creates nothing the second time.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from bakery.domain.model.order import Order
from bakery.domain.model.recurring import RecurringOrderTemplate


def weekday_index(day: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def templates_for(
    target_date: date,
    templates: Iterable[RecurringOrderTemplate],
) -> list[RecurringOrderTemplate]:
    weekday = weekday_index(target_date)
    return [t for t in templates if t.runs_on(weekday)]


def order_from_template(
    template: RecurringOrderTemplate,
    target_date: date,
    now: datetime | None = None,
) -> Order:
    return Order.create(
        customer_id=template.customer_id,
        customer_name=template.customer_name,
        delivery_date=target_date,
        lines=list(template.lines),
        notes=template.notes,
        recurring_template_id=template.id,
        created_at=now,
    )


def generate_orders(
    target_date: date,
    templates: Iterable[RecurringOrderTemplate],
    existing_orders: Iterable[Order],
    now: datetime | None = None,
) -> list[Order]:
    """Return the new (unsaved) orders for ``target_date``.

    A customer gets at most one order per day, whether it already existed
    or was produced earlier in the same run.
    """
    covered = {o.customer_id for o in existing_orders if o.delivery_date == target_date}

    created: list[Order] = []
    for template in templates_for(target_date, templates):
        if template.customer_id in covered:
            continue
        created.append(order_from_template(template, target_date, now))
        covered.add(template.customer_id)
    return created


def weekly_schedule(templates: Iterable[RecurringOrderTemplate]) -> dict[int, int]:
    """Number of active templates running on each weekday (0=Sunday)."""
    schedule = {weekday: 0 for weekday in range(7)}
    for template in templates:
        if not template.is_active:
            continue
        for weekday in template.days_of_week:
            if weekday in schedule:
                schedule[weekday] += 1
    return schedule
