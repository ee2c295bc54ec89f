"""Domain service: when may an order still be changed?

An order for delivery date D can be edited or deleted only while the
current local time is strictly before 21:00 on the day before D. Every
edit and delete goes through ``ensure_modifiable``; creation only refuses
dates in the past (``ensure_not_past``).
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from bakery.domain.exceptions import ModificationWindowClosedError, ValidationError

CUTOFF_HOUR = 21


def modification_deadline(delivery_date: date) -> datetime:
    """``(D - 1 day)`` at 21:00 local time."""
    if isinstance(delivery_date, datetime):
        delivery_date = delivery_date.date()
    return datetime.combine(delivery_date - timedelta(days=1), time(CUTOFF_HOUR))


def _local(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now()
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def can_modify(delivery_date: date, now: datetime | None = None) -> bool:
    return _local(now) < modification_deadline(delivery_date)


def ensure_modifiable(delivery_date: date, now: datetime | None = None) -> None:
    """Raise ModificationWindowClosedError once the deadline has passed."""
    if not can_modify(delivery_date, now):
        deadline = modification_deadline(delivery_date)
        raise ModificationWindowClosedError(
            f"Orders for {delivery_date.isoformat()} can no longer be changed "
            f"(deadline was {deadline:%Y-%m-%d %H:%M})"
        )


def ensure_not_past(delivery_date: date, now: datetime | None = None) -> None:
    """New orders may be placed for today or later, whatever the hour."""
    if isinstance(delivery_date, datetime):
        delivery_date = delivery_date.date()
    if delivery_date < _local(now).date():
        raise ValidationError(
            f"Cannot place an order for a past date ({delivery_date.isoformat()})"
        )
