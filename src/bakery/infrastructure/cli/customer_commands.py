"""CLI commands for customers."""

from __future__ import annotations

import click

from bakery.application.add_customer import AddCustomerHandler
from bakery.application.custom_products import AddCustomProductHandler, RemoveCustomProductHandler
from bakery.application.update_customer import UpdateCustomerHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.customer import Customer
from bakery.infrastructure.bootstrap import customer_repository


def _parse_custom_product(raw: str) -> tuple[str, str]:
    name, sep, unit = raw.rpartition(":")
    if not sep or not name.strip() or not unit.strip():
        raise click.BadParameter(f"Expected 'Name:unit', got '{raw}'")
    return name.strip(), unit.strip()


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", default="", help="Phone number.")
@click.option("--address", default="", help="Delivery address.")
@click.option("--product", "products", multiple=True, help="Custom product as 'Name:unit' (repeatable).")
def customer_add(name: str, phone: str, address: str, products: tuple[str, ...]) -> None:
    """Add a customer."""
    handler = AddCustomerHandler(customer_repo=customer_repository())
    custom_products = [_parse_custom_product(p) for p in products]

    try:
        customer = handler.handle(
            name=name, phone=phone, address=address, custom_products=custom_products
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' added")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--address", default=None, help="New delivery address.")
def customer_update(
    customer_id: str, name: str | None, phone: str | None, address: str | None
) -> None:
    """Change a customer's name or contact details."""
    handler = UpdateCustomerHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(customer_id, name=name, phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' updated")


@click.command("add-product")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--unit", required=True, help="Unit used when an order line gives none.")
def customer_add_product(customer_id: str, name: str, unit: str) -> None:
    """Add a product only this customer orders."""
    handler = AddCustomProductHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(customer_id, name, unit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_custom_products(customer)


@click.command("remove-product")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--unit", default=None, help="Only remove the entry with this unit.")
def customer_remove_product(customer_id: str, name: str, unit: str | None) -> None:
    """Remove one of a customer's own products."""
    handler = RemoveCustomProductHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(customer_id, name, unit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_custom_products(customer)


def _echo_custom_products(customer: Customer) -> None:
    click.echo(f"Custom products for {customer.name}:")
    if not customer.custom_products:
        click.echo("  (none)")
    for p in customer.custom_products:
        click.echo(f"  {p.name:<24} {p.unit}")


@click.command("list")
def customer_list() -> None:
    """List customers."""
    customers = customer_repository().list_all()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Phone':<14}")
    click.echo("-" * 74)
    for c in customers:
        click.echo(f"{c.id:<34} {c.name:<24} {c.phone:<14}")
