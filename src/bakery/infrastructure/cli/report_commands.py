"""CLI commands for reports."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from bakery.application.customer_history import CustomerHistoryHandler
from bakery.application.delivery_report import DeliveryReportHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.value_objects import format_quantity
from bakery.infrastructure.bootstrap import (
    customer_repository,
    delivery_repository,
    order_repository,
    payment_repository,
)
from bakery.infrastructure.cli.params import DATE
from bakery.infrastructure.export.report_export import report_to_csv
from bakery.infrastructure.export.statement_export import format_amount


@click.command("deliveries")
@click.option("--start", type=DATE, required=True, help="First day (YYYY-MM-DD).")
@click.option("--end", type=DATE, required=True, help="Last day (YYYY-MM-DD).")
@click.option("--customer-id", default=None, help="Limit to one customer.")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path), default=None)
def report_deliveries(
    start: datetime, end: datetime, customer_id: str | None, csv_path: Path | None
) -> None:
    """Delivered quantities per product over a period."""
    handler = DeliveryReportHandler(
        delivery_repo=delivery_repository(), customer_repo=customer_repository()
    )

    try:
        report = handler.handle(start.date(), end.date(), customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"{report.customer_label}: {report.start_date.isoformat()} - {report.end_date.isoformat()}"
    )
    click.echo(f"  {'Product':<20} {'Unit':<8} {'Quantity':>10} {'Deliveries':>11}")
    click.echo(f"  {'-'*52}")
    for row in report.summary:
        click.echo(
            f"  {row.product:<20} {row.unit:<8} {format_quantity(row.total_quantity):>10} {row.count:>11}"
        )
    click.echo(
        f"  {report.total_deliveries} deliveries, {format_quantity(report.total_quantity)} units in total"
    )

    if csv_path is not None:
        csv_path.write_text(report_to_csv(report), encoding="utf-8")
        click.echo(f"CSV written to {csv_path}")


@click.command("customer")
@click.option("--customer-id", required=True, help="Customer ID.")
def report_customer(customer_id: str) -> None:
    """Order, delivery and payment history figures for one customer."""
    handler = CustomerHistoryHandler(
        customer_repo=customer_repository(),
        order_repo=order_repository(),
        delivery_repo=delivery_repository(),
        payment_repo=payment_repository(),
    )

    try:
        customer, history = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(customer.name)
    click.echo(f"  Orders:      {history.total_orders}")
    click.echo(f"  Deliveries:  {history.total_deliveries}")
    click.echo(f"  Paid:        {format_amount(history.total_paid)}")
    click.echo(f"  Avg/order:   {history.average_order_quantity:.1f}")
    if history.last_order is not None:
        click.echo(f"  Last order:  {history.last_order.delivery_date.isoformat()}")
    if history.most_ordered:
        click.echo("  Most ordered:")
        for product in history.most_ordered:
            click.echo(f"    {product.product:<20} {format_quantity(product.quantity):>8}")
