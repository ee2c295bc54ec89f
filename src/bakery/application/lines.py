"""Turn user-supplied line specs into validated domain lines.

A missing unit is taken from the catalog product, then from the
customer's own products. Products outside the catalog are accepted as
long as a unit is known. The catalog is read once per call, not once per
line.
"""

from __future__ import annotations

from bakery.application.dto import LineSpec
from bakery.domain.exceptions import ValidationError
from bakery.domain.model.customer import Customer
from bakery.domain.model.lines import DeliveryLine, OrderLine, line_key
from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.product_repository import ProductRepository

Catalog = dict[str, Product]


def load_catalog(product_repo: ProductRepository) -> Catalog:
    return {p.name.casefold(): p for p in product_repo.list_all()}


def _lookup(catalog: Catalog, name: str) -> Product | None:
    return catalog.get(name.strip().casefold())


def _resolve_unit(
    spec: LineSpec,
    catalog: Catalog,
    customer: Customer | None,
) -> str:
    if spec.unit and spec.unit.strip():
        return spec.unit.strip()
    product = _lookup(catalog, spec.product)
    if product is not None:
        return product.default_unit
    if customer is not None:
        for custom in customer.custom_products:
            if custom.name.casefold() == spec.product.strip().casefold():
                return custom.unit
    raise ValidationError(f"No unit given for unknown product '{spec.product}'")


def build_order_lines(
    specs: list[LineSpec],
    product_repo: ProductRepository,
    customer: Customer | None = None,
) -> list[OrderLine]:
    catalog = load_catalog(product_repo)
    return [
        OrderLine.create(spec.product, spec.quantity, _resolve_unit(spec, catalog, customer))
        for spec in specs
    ]


def build_delivery_lines(
    specs: list[LineSpec],
    product_repo: ProductRepository,
    customer: Customer | None = None,
    previous: list[DeliveryLine] | None = None,
) -> list[DeliveryLine]:
    """Delivery lines with the price snapshot taken now (zero when unpriced).

    When correcting a delivery, ``previous`` holds its old lines; a line
    for the same product and unit keeps the price it was delivered at
    unless a new price is given.
    """
    catalog = load_catalog(product_repo)
    kept = {line_key(line): line.price_at_delivery for line in previous or []}
    lines: list[DeliveryLine] = []
    for spec in specs:
        unit = _resolve_unit(spec, catalog, customer)
        key = (spec.product.strip(), unit)
        if spec.price is not None and spec.price.strip():
            price = Money.of(spec.price)
        elif kept.get(key) is not None:
            price = kept[key]
        else:
            product = _lookup(catalog, spec.product)
            price = product.price if product is not None and product.price is not None else Money.of(0)
        lines.append(DeliveryLine.create(spec.product, spec.quantity, unit, price))
    return lines
