"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from bakery.application.confirm_order import ConfirmOrderHandler
from bakery.application.create_order import CreateOrderHandler
from bakery.application.daily_orders import ShowDailyOrdersHandler
from bakery.application.delete_order import DeleteOrderHandler
from bakery.application.dto import EditingOrder, OrderDTO
from bakery.application.mark_order_delivered import MarkOrderDeliveredHandler
from bakery.application.show_order import ShowOrderHandler
from bakery.application.update_order import UpdateOrderHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.value_objects import format_quantity
from bakery.infrastructure.bootstrap import (
    customer_repository,
    delivery_repository,
    order_repository,
    product_repository,
)
from bakery.infrastructure.cli.params import DATE, as_date, parse_lines


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order with its progress."""
    state = "complete" if dto.is_complete else ("partial" if dto.has_partial_delivery else "open")
    click.echo(f"Order {dto.id}  (status={dto.status}, {state})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Delivery: {dto.delivery_date}  editable={'yes' if dto.can_modify else 'no'}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(
        f"  {'Product':<20} {'Unit':<8} {'Ordered':>8} {'Delivered':>10} "
        f"{'Remaining':>10} {'Progress':>9}"
    )
    click.echo(f"  {'-'*70}")
    for line in dto.lines:
        click.echo(
            f"  {line.product:<20} {line.unit:<8} {line.ordered:>8} "
            f"{line.delivered:>10} {line.remaining:>10} {line.progress:>8.0f}%"
        )
    for extra in dto.extras:
        click.echo(
            f"  {extra.product:<20} {extra.unit:<8} {'extra':>8} {extra.delivered:>10}"
        )


@click.command("create")
@click.option("--customer-id", required=True, help="Customer ID.")
@click.option("--date", "delivery_date", required=True, type=DATE, help="Delivery date (YYYY-MM-DD).")
@click.option("--items", required=True, help="Lines as 'Product:Qty[:Unit],...'.")
@click.option("--notes", default="", help="Free-text notes.")
def order_create(customer_id: str, delivery_date: datetime, items: str, notes: str) -> None:
    """Create an order for a delivery date."""
    specs = parse_lines(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        customer_repo=customer_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(customer_id, delivery_date.date(), specs, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created")
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID to edit.")
@click.option("--date", "delivery_date", required=True, type=DATE, help="Delivery date (YYYY-MM-DD).")
@click.option("--items", required=True, help="Lines as 'Product:Qty[:Unit],...'.")
@click.option("--notes", default="", help="Free-text notes.")
def order_update(order_id: str, delivery_date: datetime, items: str, notes: str) -> None:
    """Replace an order's date, lines and notes (before the 21:00 cutoff)."""
    editing = EditingOrder(
        order_id=order_id,
        delivery_date=delivery_date.date(),
        lines=parse_lines(items),
        notes=notes,
    )
    handler = UpdateOrderHandler(
        order_repo=order_repository(),
        customer_repo=customer_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(editing)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order (before the 21:00 cutoff)."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show an order with its delivery progress."""
    handler = ShowOrderHandler(order_repo=order_repository(), delivery_repo=delivery_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("confirm")
@click.option("--id", "order_id", required=True, help="Order ID to confirm.")
def order_confirm(order_id: str) -> None:
    """Confirm a pending order."""
    try:
        ConfirmOrderHandler(order_repo=order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} confirmed.")


@click.command("deliver")
@click.option("--id", "order_id", required=True, help="Order ID to mark delivered.")
def order_deliver(order_id: str) -> None:
    """Mark a confirmed order as delivered."""
    try:
        MarkOrderDeliveredHandler(order_repo=order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} marked delivered.")


@click.command("day")
@click.option("--date", "day", type=DATE, default=None, help="Delivery date (default: today).")
def order_day(day: datetime | None) -> None:
    """Orders of one day with progress and the totals to bake."""
    handler = ShowDailyOrdersHandler(
        order_repo=order_repository(), delivery_repo=delivery_repository()
    )
    dto = handler.handle(as_date(day))

    if not dto.orders:
        click.echo(f"No orders for {dto.delivery_date.isoformat()}.")
        return

    for order in dto.orders:
        _display_order(order)
        click.echo()

    click.echo("To bake")
    click.echo(f"  {'Product':<20} {'Unit':<8} {'Total':>8} {'Lines':>6}")
    click.echo(f"  {'-'*45}")
    for row in dto.ordered_summary:
        click.echo(
            f"  {row.product:<20} {row.unit:<8} {format_quantity(row.total_quantity):>8} {row.count:>6}"
        )
