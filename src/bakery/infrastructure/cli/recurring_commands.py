"""CLI commands for recurring orders."""

from __future__ import annotations

from datetime import datetime, timedelta

import click

from bakery.application.add_recurring_order import AddRecurringOrderHandler
from bakery.application.generate_recurring_orders import GenerateRecurringOrdersHandler
from bakery.application.toggle_recurring_order import ToggleRecurringOrderHandler
from bakery.application.weekly_schedule import WeeklyScheduleHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.recurring import WEEKDAY_NAMES
from bakery.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
    recurring_order_repository,
)
from bakery.infrastructure.cli.params import DATE, parse_days, parse_lines


@click.command("add")
@click.option("--customer-id", required=True, help="Customer ID.")
@click.option("--days", required=True, help="Weekdays as '1,3,5' (0=Sunday .. 6=Saturday).")
@click.option("--items", required=True, help="Lines as 'Product:Qty[:Unit],...'.")
@click.option("--notes", default="", help="Free-text notes copied to each order.")
def recurring_add(customer_id: str, days: str, items: str, notes: str) -> None:
    """Add a weekly recurring order."""
    handler = AddRecurringOrderHandler(
        recurring_repo=recurring_order_repository(),
        customer_repo=customer_repository(),
        product_repo=product_repository(),
    )

    try:
        template = handler.handle(customer_id, parse_days(days), parse_lines(items), notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Recurring order {template.id} added ({template.days_label})")


@click.command("generate")
@click.option("--date", "target", type=DATE, default=None, help="Date to generate for (default: tomorrow).")
def recurring_generate(target: datetime | None) -> None:
    """Create the orders recurring templates call for on a date."""
    target_date = target.date() if target else (datetime.now() + timedelta(days=1)).date()
    handler = GenerateRecurringOrdersHandler(
        recurring_repo=recurring_order_repository(),
        order_repo=order_repository(),
    )
    created = handler.handle(target_date)

    click.echo(f"{len(created)} order(s) generated for {target_date.isoformat()}")
    for order in created:
        click.echo(f"  {order.id}  {order.customer_name}")


@click.command("week")
def recurring_week() -> None:
    """How many recurring orders run on each weekday."""
    schedule = WeeklyScheduleHandler(recurring_repo=recurring_order_repository()).handle()
    click.echo("  ".join(f"{WEEKDAY_NAMES[d]}:{schedule[d]}" for d in range(7)))


@click.command("list")
def recurring_list() -> None:
    """List recurring orders, paused ones included."""
    templates = recurring_order_repository().list_all()

    if not templates:
        click.echo("No recurring orders found.")
        return

    click.echo(f"{'ID':<34} {'Customer':<20} {'Days':<28} {'Status':<8}")
    click.echo("-" * 92)
    for t in templates:
        status = "active" if t.is_active else "paused"
        click.echo(f"{t.id:<34} {t.customer_name:<20} {t.days_label:<28} {status:<8}")


def _toggle(template_id: str, active: bool) -> None:
    handler = ToggleRecurringOrderHandler(recurring_repo=recurring_order_repository())

    try:
        template = handler.handle(template_id, active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Recurring order {template.id} {'resumed' if active else 'paused'}")


@click.command("pause")
@click.option("--id", "template_id", required=True, help="Recurring order ID.")
def recurring_pause(template_id: str) -> None:
    """Stop a recurring order from generating orders."""
    _toggle(template_id, active=False)


@click.command("resume")
@click.option("--id", "template_id", required=True, help="Recurring order ID.")
def recurring_resume(template_id: str) -> None:
    """Let a paused recurring order generate orders again."""
    _toggle(template_id, active=True)
