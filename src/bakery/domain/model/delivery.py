"""Delivery aggregate.

Deliveries are append-only facts: once recorded they describe what
physically left the bakery. Editing one is a correction, not an update to
a live order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.lines import DeliveryLine


@dataclass
class Delivery:

    id: str | None
    customer_id: str
    customer_name: str
    date: datetime | None
    lines: list[DeliveryLine]
    created_at: datetime = field(default_factory=datetime.now)

    @staticmethod
    def record(
        customer_id: str,
        customer_name: str,
        when: datetime | date,
        lines: list[DeliveryLine],
    ) -> Delivery:
        """Create a new delivery, enforcing all invariants."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")
        if not lines:
            raise ValidationError("Delivery must contain at least one line")
        if not isinstance(when, datetime):
            when = datetime.combine(when, datetime.min.time())
        return Delivery(
            id=None,
            customer_id=customer_id.strip(),
            customer_name=(customer_name or "").strip(),
            date=when,
            lines=list(lines),
        )

    @property
    def local_date(self) -> date | None:
        if self.date is None:
            return None
        if self.date.tzinfo is not None:
            return self.date.astimezone().date()
        return self.date.date()

    def correct(self, when: datetime | date | None, lines: list[DeliveryLine]) -> None:
        """Replace the lines and, when given, the date. The id stays."""
        if not lines:
            raise ValidationError("Delivery must contain at least one line")
        if when is not None:
            if not isinstance(when, datetime):
                when = datetime.combine(when, datetime.min.time())
            self.date = when
        self.lines = list(lines)
