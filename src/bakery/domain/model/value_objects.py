"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bakery.domain.exceptions import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0")

# Leading numeric prefix, the way a browser's parseFloat reads "2.5kg" as 2.5
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def round_cents(value: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_quantity(raw: object) -> Decimal:
    """Leniently read a stored quantity.

    Never raises: missing, non-numeric and non-finite values read as zero.
    """
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else ZERO
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        return Decimal(str(raw)) if raw == raw and abs(raw) != float("inf") else ZERO
    match = _NUMERIC_PREFIX.match(str(raw))
    if match is None:
        return ZERO
    try:
        return Decimal(match.group(1))
    except InvalidOperation:
        return ZERO


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < ZERO:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: Decimal | int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == ZERO

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = "€" if self.currency == "EUR" else f"{self.currency} "
        return f"{symbol}{round_cents(self.amount):.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A strictly positive decimal quantity (kilograms, pieces, ...).

    Enforces the invariant that you cannot order or deliver zero or
    negative amounts.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Quantity must be a Decimal, got {type(self.value).__name__}"
            )
        if not self.value.is_finite() or self.value <= ZERO:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return format_quantity(self.value)

    @staticmethod
    def of(raw: str | float | int | Decimal) -> Quantity:
        """Strict parsing used at the order/delivery construction boundary."""
        try:
            return Quantity(Decimal(str(raw).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid quantity: {raw!r}") from exc


def format_quantity(value: Decimal) -> str:
    """Render ``5.000`` as ``5`` and ``2.50`` as ``2.5``."""
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return format(value.normalize(), "f")
