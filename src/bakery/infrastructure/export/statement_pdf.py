"""Printable statement of account, rendered with fpdf2.

One A4 page (more if the period is long): customer block, a bordered
table of delivered lines, the payments, and the balance summary. Reads
``Statement`` fields only; no amount is recomputed here.
"""

from __future__ import annotations

from decimal import Decimal

from fpdf import FPDF

from bakery.domain.model.value_objects import format_quantity
from bakery.domain.service.billing import Statement
from bakery.infrastructure.export.statement_export import format_amount, format_date

TITLE = "Statement of Account"
ROW_H = 6

# Delivery table: Date, Product, Quantity, Unit, Price, Total
DELIVERY_COLS = (26, 64, 22, 22, 28, 28)
# Payment table: Date, Method, Amount, Notes
PAYMENT_COLS = (26, 28, 28, 108)


def clean_text(text: str | None) -> str:
    """Core PDF fonts only cover latin-1; anything else prints as '?'."""
    if not text:
        return ""
    return text.encode("latin-1", "replace").decode("latin-1")


def eur(value: Decimal) -> str:
    return f"EUR {format_amount(value)}"


class StatementPDF(FPDF):

    def __init__(self, heading: str = TITLE) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self._heading = heading
        self.set_margins(10, 10, 10)
        self.set_auto_page_break(auto=True, margin=15)

    def header(self):
        self.set_font("Helvetica", "B", 14)
        self.cell(0, 10, self._heading, align="C", new_x="LMARGIN", new_y="NEXT")
        self.ln(1)

    def footer(self):
        self.set_y(-12)
        self.set_font("Helvetica", "", 8)
        self.cell(0, 8, f"Page {self.page_no()}", align="C")

    def section(self, title: str) -> None:
        self.ln(3)
        self.set_font("Helvetica", "B", 11)
        self.cell(0, 7, title, new_x="LMARGIN", new_y="NEXT")

    def table_row(self, widths: tuple[int, ...], values: list[str], aligns: str, bold: bool = False) -> None:
        self.set_font("Helvetica", "B" if bold else "", 9)
        for width, value, align in zip(widths, values, aligns):
            self.cell(width, ROW_H, clean_text(value), border=1, align=align)
        self.ln(ROW_H)


def _shorten(text: str, limit: int = 34) -> str:
    return (text[:limit] + "..") if len(text) > limit else text


def build_statement_pdf(statement: Statement) -> StatementPDF:
    pdf = StatementPDF()
    pdf.set_title(clean_text(f"{TITLE} - {statement.customer_name or statement.customer_id}"))
    pdf.add_page()

    # Customer block
    pdf.set_font("Helvetica", "B", 10)
    pdf.cell(0, ROW_H, clean_text(statement.customer_name or statement.customer_id),
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    if statement.customer is not None:
        if statement.customer.address:
            pdf.cell(0, 5, clean_text(statement.customer.address), new_x="LMARGIN", new_y="NEXT")
        if statement.customer.phone:
            pdf.cell(0, 5, clean_text(f"Tel. {statement.customer.phone}"), new_x="LMARGIN", new_y="NEXT")
    pdf.cell(
        0, 5,
        f"Period: {format_date(statement.start_date)} - {format_date(statement.end_date)}",
        new_x="LMARGIN", new_y="NEXT",
    )

    pdf.section("Deliveries")
    if statement.deliveries:
        pdf.table_row(DELIVERY_COLS, ["Date", "Product", "Quantity", "Unit", "Price", "Total"],
                      "CCCCCC", bold=True)
        for delivery in statement.deliveries:
            for line in delivery.lines:
                pdf.table_row(
                    DELIVERY_COLS,
                    [
                        format_date(delivery.date),
                        _shorten(line.product),
                        format_quantity(line.quantity),
                        line.unit,
                        format_amount(line.price),
                        format_amount(line.line_total),
                    ],
                    "CLRCRR",
                )
            pdf.set_font("Helvetica", "B", 9)
            pdf.cell(sum(DELIVERY_COLS[:-1]), ROW_H, "Delivery total", border=1, align="R")
            pdf.cell(DELIVERY_COLS[-1], ROW_H, format_amount(delivery.total), border=1, align="R",
                     new_x="LMARGIN", new_y="NEXT")
    else:
        pdf.set_font("Helvetica", "", 9)
        pdf.cell(0, ROW_H, "No deliveries in this period.", new_x="LMARGIN", new_y="NEXT")

    pdf.section("Payments")
    if statement.payments:
        pdf.table_row(PAYMENT_COLS, ["Date", "Method", "Amount", "Notes"], "CCCC", bold=True)
        for payment in statement.payments:
            pdf.table_row(
                PAYMENT_COLS,
                [
                    format_date(payment.date),
                    payment.method.value,
                    format_amount(payment.amount.amount),
                    _shorten(payment.notes, 60),
                ],
                "CCRL",
            )
    else:
        pdf.set_font("Helvetica", "", 9)
        pdf.cell(0, ROW_H, "No payments in this period.", new_x="LMARGIN", new_y="NEXT")

    pdf.section("Summary")
    summary = (
        ("Previous balance", statement.previous_balance, False),
        ("Period total", statement.period_total, False),
        ("Period payments", statement.period_payments, False),
        ("Current balance", statement.current_balance, True),
    )
    for label, value, bold in summary:
        pdf.table_row((70, 36), [label, eur(value)], "LR", bold=bold)

    return pdf


def statement_to_pdf(statement: Statement) -> bytes:
    return bytes(build_statement_pdf(statement).output())
