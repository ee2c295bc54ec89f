"""CLI commands for balances and billing statements."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import click

from bakery.application.billing_statement import BillingStatementHandler
from bakery.application.customer_balance import CustomerBalanceHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import (
    customer_repository,
    delivery_repository,
    payment_repository,
    product_repository,
)
from bakery.infrastructure.cli.params import DATE
from bakery.infrastructure.export.statement_export import (
    format_amount,
    format_date,
    statement_filename,
    statement_to_csv,
)
from bakery.infrastructure.export.statement_pdf import statement_to_pdf


@click.command("balance")
@click.option("--customer-id", default=None, help="Customer ID (default: every customer).")
def billing_balance(customer_id: str | None) -> None:
    """Show amount due, paid and outstanding."""
    handler = CustomerBalanceHandler(
        customer_repo=customer_repository(),
        delivery_repo=delivery_repository(),
        payment_repo=payment_repository(),
        product_repo=product_repository(),
    )

    try:
        if customer_id:
            balances = {customer_id: handler.handle(customer_id)}
        else:
            balances = handler.handle_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    names = {c.id: c.name for c in customer_repository().list_all()}
    click.echo(f"{'Customer':<24} {'Due':>12} {'Paid':>12} {'Balance':>12}")
    click.echo("-" * 63)
    for cid, balance in balances.items():
        click.echo(
            f"{names.get(cid, cid):<24} {format_amount(balance.total_due):>12} "
            f"{format_amount(balance.total_paid):>12} {format_amount(balance.balance):>12}"
        )


@click.command("statement")
@click.option("--customer-id", required=True, help="Customer ID.")
@click.option("--start", type=DATE, default=None, help="First day (default: first of month).")
@click.option("--end", type=DATE, default=None, help="Last day (default: today).")
@click.option("--out", "out_dir", type=click.Path(file_okay=False, path_type=Path), default=Path("."),
              show_default=True, help="Directory the PDF is written to.")
@click.option("--csv", "with_csv", is_flag=True, help="Also write the CSV export next to the PDF.")
def billing_statement(
    customer_id: str,
    start: datetime | None,
    end: datetime | None,
    out_dir: Path,
    with_csv: bool,
) -> None:
    """Write a PDF statement of account with carried-forward balance."""
    today = date.today()
    start_date = start.date() if start else today.replace(day=1)
    end_date = end.date() if end else today

    handler = BillingStatementHandler(
        customer_repo=customer_repository(),
        delivery_repo=delivery_repository(),
        payment_repo=payment_repository(),
        product_repo=product_repository(),
    )

    try:
        statement = handler.handle(customer_id, start_date, end_date)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Statement for {statement.customer_name or customer_id}  "
               f"{format_date(start_date)} - {format_date(end_date)}")
    click.echo(f"  {'Previous balance':<20} {format_amount(statement.previous_balance):>12}")
    click.echo(f"  {'Period total':<20} {format_amount(statement.period_total):>12}")
    click.echo(f"  {'Period payments':<20} {format_amount(statement.period_payments):>12}")
    click.echo(f"  {'Current balance':<20} {format_amount(statement.current_balance):>12}")

    out_dir.mkdir(parents=True, exist_ok=True)
    pdf_target = out_dir / statement_filename(statement, "pdf")
    pdf_target.write_bytes(statement_to_pdf(statement))
    click.echo(f"PDF written to {pdf_target}")

    if with_csv:
        csv_target = out_dir / statement_filename(statement, "csv")
        csv_target.write_text(statement_to_csv(statement), encoding="utf-8")
        click.echo(f"CSV written to {csv_target}")
