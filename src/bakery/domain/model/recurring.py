"""RecurringOrderTemplate aggregate: a weekly rule that produces orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.lines import OrderLine

# 0=Sunday .. 6=Saturday
WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass
class RecurringOrderTemplate:

    id: str | None
    customer_id: str
    customer_name: str
    days_of_week: frozenset[int]
    lines: list[OrderLine]
    notes: str = ""
    is_active: bool = True
    created_at: datetime = field(default_factory=datetime.now)

    @staticmethod
    def create(
        customer_id: str,
        customer_name: str,
        days_of_week: set[int] | frozenset[int],
        lines: list[OrderLine],
        notes: str = "",
    ) -> RecurringOrderTemplate:
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")
        if not days_of_week:
            raise ValidationError("Select at least one day of the week")
        invalid = sorted(d for d in days_of_week if d not in range(7))
        if invalid:
            raise ValidationError(
                f"Days of week must be 0 (Sunday) to 6 (Saturday), got {invalid}"
            )
        if not lines:
            raise ValidationError("Recurring order must contain at least one line")
        return RecurringOrderTemplate(
            id=None,
            customer_id=customer_id.strip(),
            customer_name=(customer_name or "").strip(),
            days_of_week=frozenset(days_of_week),
            lines=list(lines),
            notes=(notes or "").strip(),
        )

    def runs_on(self, weekday: int) -> bool:
        return self.is_active and weekday in self.days_of_week

    def pause(self) -> None:
        self.is_active = False

    def resume(self) -> None:
        self.is_active = True

    @property
    def days_label(self) -> str:
        return ", ".join(WEEKDAY_NAMES[d] for d in sorted(self.days_of_week))
