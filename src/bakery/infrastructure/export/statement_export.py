"""Billing statement CSV export and the formatting shared with the PDF.

Only reads fields of ``Statement``; no amount is recomputed here.
"""

from __future__ import annotations

import csv
import io
from datetime import date, datetime
from decimal import Decimal

from bakery.domain.model.value_objects import format_quantity
from bakery.domain.service.billing import Statement

MISSING_DATE = "N/A"


def format_date(value: date | datetime | None) -> str:
    if value is None:
        return MISSING_DATE
    return value.strftime("%d/%m/%Y")


def format_amount(value: Decimal) -> str:
    return f"{value:.2f}"


def statement_filename(statement: Statement, extension: str = "csv") -> str:
    name = (statement.customer_name or statement.customer_id).replace(" ", "_")
    period = f"{statement.start_date.isoformat()}_{statement.end_date.isoformat()}"
    return f"statement_{name}_{period}.{extension}"


def statement_to_csv(statement: Statement) -> str:
    """Delivery lines, then payments, then the summary block."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(["Date", "Product", "Quantity", "Unit", "Price", "Total"])
    for delivery in statement.deliveries:
        for line in delivery.lines:
            writer.writerow(
                [
                    format_date(delivery.date),
                    line.product,
                    format_quantity(line.quantity),
                    line.unit,
                    format_amount(line.price),
                    format_amount(line.line_total),
                ]
            )

    writer.writerow([])
    writer.writerow(["Payments"])
    writer.writerow(["Date", "Amount", "Method", "Notes"])
    for payment in statement.payments:
        writer.writerow(
            [
                format_date(payment.date),
                format_amount(payment.amount.amount),
                payment.method.value,
                payment.notes,
            ]
        )

    writer.writerow([])
    writer.writerow(["Summary"])
    writer.writerow(["Previous balance", format_amount(statement.previous_balance)])
    writer.writerow(["Period total", format_amount(statement.period_total)])
    writer.writerow(["Period payments", format_amount(statement.period_payments)])
    writer.writerow(["Current balance", format_amount(statement.current_balance)])
    return buffer.getvalue()

