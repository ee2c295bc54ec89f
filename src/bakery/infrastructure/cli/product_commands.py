"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from bakery.application.add_product import AddProductHandler
from bakery.application.seed_products import SeedProductsHandler
from bakery.application.update_product import UpdateProductHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--unit", required=True, help="Default unit (kg, pieces, ...).")
@click.option("--price", default=None, help="Unit price (e.g. 3.50).")
def product_add(name: str, unit: str, price: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, default_unit=unit, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Unit':<8} {'Price':>10}")
    click.echo("-" * 75)
    for p in products:
        price = str(p.price) if p.price is not None else "-"
        click.echo(f"{p.id:<34} {p.name:<20} {p.default_unit:<8} {price:>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price; omit to clear it.")
def product_update(product_id: str, price: str | None) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} price updated")


@click.command("seed")
def product_seed() -> None:
    """Fill an empty catalog with the default bakery products."""
    added = SeedProductsHandler(product_repo=product_repository()).handle()
    if not added:
        click.echo("Catalog already has products; nothing seeded.")
        return
    click.echo(f"Seeded {len(added)} products.")
