"""Payment aggregate.

Payments are manually recorded facts (cash handed to the driver, a wire
transfer seen on the bank statement). Nothing here processes money.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import Money


class PaymentMethod(Enum):
    CASH = "cash"
    WIRE = "wire"
    CHECK = "check"
    CARD = "card"
    OTHER = "other"

    @staticmethod
    def parse(raw: str) -> PaymentMethod:
        try:
            return PaymentMethod(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(m.value for m in PaymentMethod)
            raise ValidationError(
                f"Unknown payment method '{raw}' (expected one of: {allowed})"
            ) from exc


@dataclass
class Payment:

    id: str | None
    customer_id: str
    customer_name: str
    amount: Money
    date: datetime | None
    method: PaymentMethod = PaymentMethod.CASH
    notes: str = ""
    created_at: datetime = field(default_factory=datetime.now)

    @staticmethod
    def record(
        customer_id: str,
        customer_name: str,
        amount: Money,
        when: datetime | date,
        method: PaymentMethod = PaymentMethod.CASH,
        notes: str = "",
    ) -> Payment:
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")
        if not isinstance(when, datetime):
            when = datetime.combine(when, datetime.min.time())
        return Payment(
            id=None,
            customer_id=customer_id.strip(),
            customer_name=(customer_name or "").strip(),
            amount=amount,
            date=when,
            method=method,
            notes=(notes or "").strip(),
        )
