"""CLI commands for deliveries and payments."""

from __future__ import annotations

from datetime import datetime

import click

from bakery.application.delete_delivery import DeleteDeliveryHandler
from bakery.application.delete_payment import DeletePaymentHandler
from bakery.application.record_delivery import RecordDeliveryHandler
from bakery.application.record_payment import RecordPaymentHandler
from bakery.application.update_delivery import UpdateDeliveryHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.delivery import Delivery
from bakery.domain.model.payment import PaymentMethod
from bakery.domain.model.value_objects import format_quantity
from bakery.infrastructure.bootstrap import (
    customer_repository,
    delivery_repository,
    payment_repository,
    product_repository,
)
from bakery.infrastructure.cli.params import DATE, DATE_OR_DATETIME, parse_lines


@click.command("record")
@click.option("--customer-id", required=True, help="Customer ID.")
@click.option("--date", "when", type=DATE_OR_DATETIME, default=None, help="When (default: now).")
@click.option("--items", required=True, help="Lines as 'Product:Qty[:Unit[:Price]],...'.")
def delivery_record(customer_id: str, when: datetime | None, items: str) -> None:
    """Record what was delivered to a customer."""
    handler = RecordDeliveryHandler(
        delivery_repo=delivery_repository(),
        customer_repo=customer_repository(),
        product_repo=product_repository(),
    )

    try:
        delivery = handler.handle(customer_id, when or datetime.now(), parse_lines(items, allow_price=True))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Delivery {delivery.id} recorded for {delivery.customer_name}")
    _echo_lines(delivery)


@click.command("update")
@click.option("--id", "delivery_id", required=True, help="Delivery ID.")
@click.option("--date", "when", type=DATE_OR_DATETIME, default=None, help="New date (default: unchanged).")
@click.option("--items", required=True, help="Replacement lines as 'Product:Qty[:Unit[:Price]],...'.")
def delivery_update(delivery_id: str, when: datetime | None, items: str) -> None:
    """Correct the lines and date of a recorded delivery."""
    handler = UpdateDeliveryHandler(
        delivery_repo=delivery_repository(),
        customer_repo=customer_repository(),
        product_repo=product_repository(),
    )

    try:
        delivery = handler.handle(delivery_id, when, parse_lines(items, allow_price=True))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Delivery {delivery.id} updated for {delivery.customer_name}")
    _echo_lines(delivery)


def _echo_lines(delivery: Delivery) -> None:
    for line in delivery.lines:
        price = str(line.price_at_delivery) if line.price_at_delivery is not None else "-"
        click.echo(f"  {line.product:<20} {format_quantity(line.quantity):>8} {line.unit:<8} {price:>10}")


@click.command("delete")
@click.option("--id", "delivery_id", required=True, help="Delivery ID.")
def delivery_delete(delivery_id: str) -> None:
    """Delete a delivery recorded by mistake."""
    try:
        DeleteDeliveryHandler(delivery_repo=delivery_repository()).handle(delivery_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Delivery {delivery_id} deleted.")


@click.command("record")
@click.option("--customer-id", required=True, help="Customer ID.")
@click.option("--amount", required=True, help="Amount paid (e.g. 50.00).")
@click.option("--date", "when", type=DATE, default=None, help="Payment date (default: today).")
@click.option(
    "--method",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CASH.value,
    show_default=True,
)
@click.option("--notes", default="", help="Free-text notes.")
def payment_record(
    customer_id: str, amount: str, when: datetime | None, method: str, notes: str
) -> None:
    """Record a payment received from a customer."""
    handler = RecordPaymentHandler(
        payment_repo=payment_repository(), customer_repo=customer_repository()
    )

    try:
        payment = handler.handle(customer_id, amount, when or datetime.now(), method, notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Payment {payment.id} of {payment.amount} recorded for {payment.customer_name}")


@click.command("delete")
@click.option("--id", "payment_id", required=True, help="Payment ID.")
def payment_delete(payment_id: str) -> None:
    """Delete a payment recorded by mistake."""
    try:
        DeletePaymentHandler(payment_repo=payment_repository()).handle(payment_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Payment {payment_id} deleted.")


@click.command("list")
@click.option("--limit", default=20, show_default=True, help="How many recent payments.")
def payment_list(limit: int) -> None:
    """List the most recent payments."""
    payments = payment_repository().list_all()[:limit]

    if not payments:
        click.echo("No payments found.")
        return

    for p in payments:
        when = p.date.strftime("%Y-%m-%d") if p.date else "N/A"
        click.echo(f"{when}  {p.customer_name:<24} {str(p.amount):>10}  {p.method.value}")
