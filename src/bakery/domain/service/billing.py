"""Domain service: customer balances and billing statements.

Amounts due come from deliveries (quantity x unit price), amounts paid from
recorded payments. Sums are kept unrounded and only rounded to cents, half
away from zero, when a result is produced.

A line whose price cannot be recovered contributes zero. Billing must
under-count rather than fail; zero-priced lines are a data-quality issue
for whoever maintains the catalog.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from bakery.domain.model.customer import Customer
from bakery.domain.model.delivery import Delivery
from bakery.domain.model.lines import DeliveryLine
from bakery.domain.model.payment import Payment
from bakery.domain.model.value_objects import ZERO, parse_quantity, round_cents

PriceList = Mapping[str, Decimal]

# Dateless records sort and filter as if dated at the earliest instant.
EARLIEST = datetime.min


@dataclass(frozen=True)
class Balance:
    total_due: Decimal
    total_paid: Decimal
    balance: Decimal


@dataclass(frozen=True)
class StatementLine:
    product: str
    quantity: Decimal
    unit: str
    price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class StatementDelivery:
    delivery_id: str | None
    date: datetime | None
    lines: list[StatementLine]
    total: Decimal


@dataclass(frozen=True)
class Statement:
    customer_id: str
    customer: Customer | None
    start_date: date
    end_date: date
    previous_balance: Decimal
    period_total: Decimal
    period_payments: Decimal
    current_balance: Decimal
    deliveries: list[StatementDelivery] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)

    @property
    def customer_name(self) -> str:
        if self.customer is not None:
            return self.customer.name
        for payment in self.payments:
            if payment.customer_name:
                return payment.customer_name
        return ""


# --- Price fallback chain -----------------------------------------------------


def snapshot_price(line: DeliveryLine) -> Decimal | None:
    """Tier 1: the price captured on the delivery line. Zero counts as unset."""
    price = line.price_at_delivery
    if price is None or price.is_zero:
        return None
    return price.amount


def catalog_price(line: DeliveryLine, product_prices: PriceList | None) -> Decimal | None:
    """Tier 2: the current catalog price looked up by product name."""
    if not product_prices:
        return None
    price = product_prices.get(line.product)
    if price is None or price == ZERO:
        return None
    return price


def resolve_unit_price(
    line: DeliveryLine,
    product_prices: PriceList | None = None,
    fallback: Decimal | None = None,
) -> Decimal:
    """Unit price for a delivered line: snapshot, then catalog, then fallback, then 0."""
    for candidate in (snapshot_price(line), catalog_price(line, product_prices), fallback):
        if candidate is not None:
            return candidate
    return ZERO


def line_total(line: DeliveryLine, product_prices: PriceList | None = None) -> Decimal:
    return parse_quantity(line.quantity) * resolve_unit_price(line, product_prices)


def delivery_due(delivery: Delivery, product_prices: PriceList | None = None) -> Decimal:
    return sum((line_total(line, product_prices) for line in delivery.lines or []), ZERO)


# --- Balance ------------------------------------------------------------------


def _due(deliveries: Iterable[Delivery], product_prices: PriceList | None) -> Decimal:
    return sum((delivery_due(d, product_prices) for d in deliveries), ZERO)


def _paid(payments: Iterable[Payment]) -> Decimal:
    return sum((p.amount.amount for p in payments), ZERO)


def compute_balance(
    customer_id: str,
    deliveries: Iterable[Delivery],
    payments: Iterable[Payment],
    product_prices: PriceList | None = None,
) -> Balance:
    """All-time position of one customer."""
    due = _due((d for d in deliveries if d.customer_id == customer_id), product_prices)
    paid = _paid(p for p in payments if p.customer_id == customer_id)
    return Balance(
        total_due=round_cents(due),
        total_paid=round_cents(paid),
        balance=round_cents(due - paid),
    )


# --- Statement ----------------------------------------------------------------


def _moment(value: datetime | None) -> datetime:
    if value is None:
        return EARLIEST
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def _window(start_date: date, end_date: date) -> tuple[datetime, datetime]:
    """``[start 00:00, day after end 00:00)``, i.e. end-of-day inclusive."""
    start = datetime.combine(start_date, time.min)
    if end_date >= date.max:
        return start, datetime.max
    return start, datetime.combine(end_date + timedelta(days=1), time.min)


def _statement_delivery(delivery: Delivery, product_prices: PriceList | None) -> StatementDelivery:
    lines = []
    for line in delivery.lines or []:
        quantity = parse_quantity(line.quantity)
        price = resolve_unit_price(line, product_prices)
        lines.append(
            StatementLine(
                product=line.product,
                quantity=quantity,
                unit=line.unit,
                price=round_cents(price),
                line_total=round_cents(quantity * price),
            )
        )
    return StatementDelivery(
        delivery_id=delivery.id,
        date=delivery.date,
        lines=lines,
        total=round_cents(delivery_due(delivery, product_prices)),
    )


def build_statement(
    customer_id: str,
    start_date: date,
    end_date: date,
    deliveries: Iterable[Delivery],
    payments: Iterable[Payment],
    product_prices: PriceList | None = None,
    customer: Customer | None = None,
) -> Statement:
    """Billing statement for ``[start_date, end_date]`` with carried-forward balance.

    ``deliveries`` and ``payments`` may cover any span; records before the
    window feed the previous balance, records after it are ignored.
    """
    start, end = _window(start_date, end_date)

    before_deliveries: list[Delivery] = []
    period_deliveries: list[Delivery] = []
    for delivery in deliveries:
        if delivery.customer_id != customer_id:
            continue
        moment = _moment(delivery.date)
        if moment < start:
            before_deliveries.append(delivery)
        elif moment < end:
            period_deliveries.append(delivery)

    before_payments: list[Payment] = []
    period_payments: list[Payment] = []
    for payment in payments:
        if payment.customer_id != customer_id:
            continue
        moment = _moment(payment.date)
        if moment < start:
            before_payments.append(payment)
        elif moment < end:
            period_payments.append(payment)

    previous = _due(before_deliveries, product_prices) - _paid(before_payments)
    period_total = _due(period_deliveries, product_prices)
    period_paid = _paid(period_payments)

    period_deliveries.sort(key=lambda d: _moment(d.date))
    period_payments.sort(key=lambda p: _moment(p.date))

    return Statement(
        customer_id=customer_id,
        customer=customer,
        start_date=start_date,
        end_date=end_date,
        previous_balance=round_cents(previous),
        period_total=round_cents(period_total),
        period_payments=round_cents(period_paid),
        current_balance=round_cents(previous + period_total - period_paid),
        deliveries=[_statement_delivery(d, product_prices) for d in period_deliveries],
        payments=period_payments,
    )
