"""Order aggregate.

An Order is what a customer asked to receive on a given delivery date.
Deliveries are recorded separately and matched against orders by the
matching engine; the order itself never tracks shipped quantities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.lines import OrderLine


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DELIVERED = "delivered"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINES = 50


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    customer_id: str
    customer_name: str
    delivery_date: date
    lines: list[OrderLine]
    status: OrderStatus = OrderStatus.PENDING
    notes: str = ""
    recurring_template_id: str | None = None
    created_at: datetime = field(default_factory=datetime.now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        customer_name: str,
        delivery_date: date,
        lines: list[OrderLine],
        notes: str = "",
        recurring_template_id: str | None = None,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")

        if not lines:
            raise ValidationError("Order must contain at least one line")

        if len(lines) > MAX_LINES:
            raise ValidationError(f"Maximum {MAX_LINES} lines per order")

        if isinstance(delivery_date, datetime):
            delivery_date = delivery_date.date()

        return Order(
            id=None,
            customer_id=customer_id.strip(),
            customer_name=(customer_name or "").strip(),
            delivery_date=delivery_date,
            lines=list(lines),
            notes=(notes or "").strip(),
            recurring_template_id=recurring_template_id,
            created_at=created_at or datetime.now(),
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition pending -> confirmed."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot confirm order, current status is {self.status.value}, "
                f"expected pending"
            )
        self.status = OrderStatus.CONFIRMED

    def mark_delivered(self) -> None:
        """Transition confirmed -> delivered."""
        if self.status != OrderStatus.CONFIRMED:
            raise ValidationError(
                f"Cannot mark order delivered, current status is "
                f"{self.status.value}, expected confirmed"
            )
        self.status = OrderStatus.DELIVERED

    # --- Editing --------------------------------------------------------------

    def revise(
        self,
        delivery_date: date,
        lines: list[OrderLine],
        notes: str = "",
    ) -> None:
        """Replace date, lines and notes in one explicit update.

        The modification window is checked by the caller before and after
        the change of date.
        """
        if not lines:
            raise ValidationError("Order must contain at least one line")
        if len(lines) > MAX_LINES:
            raise ValidationError(f"Maximum {MAX_LINES} lines per order")
        if self.status == OrderStatus.DELIVERED:
            raise ValidationError("Cannot edit an order that was already delivered")
        self.delivery_date = delivery_date
        self.lines = list(lines)
        self.notes = (notes or "").strip()
