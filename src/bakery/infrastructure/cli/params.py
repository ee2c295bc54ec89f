"""Option parsing helpers shared by the CLI commands."""

from __future__ import annotations

from datetime import date, datetime

import click

from bakery.application.dto import LineSpec

DATE = click.DateTime(formats=["%Y-%m-%d"])
DATE_OR_DATETIME = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"])


def parse_lines(raw: str, allow_price: bool = False) -> list[LineSpec]:
    """Parse 'Sourdough:5:kg,Baguette:3' into LineSpec list.

    The unit is optional (the product's default unit is used). Deliveries
    may add a fourth field with the unit price: 'Sourdough:5:kg:3.50'.
    """
    specs: list[LineSpec] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(":")]
        max_parts = 4 if allow_price else 3
        if len(parts) < 2 or len(parts) > max_parts:
            expected = "Product:Qty[:Unit[:Price]]" if allow_price else "Product:Qty[:Unit]"
            raise click.BadParameter(f"Invalid line '{chunk}'. Expected '{expected}'.")
        product, quantity = parts[0], parts[1]
        unit = parts[2] if len(parts) > 2 and parts[2] else None
        price = parts[3] if len(parts) > 3 and parts[3] else None
        specs.append(LineSpec(product=product, quantity=quantity, unit=unit, price=price))
    if not specs:
        raise click.BadParameter("At least one line is required.")
    return specs


def parse_days(raw: str) -> set[int]:
    """Parse '1,3,5' (0=Sunday .. 6=Saturday)."""
    days: set[int] = set()
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            days.add(int(chunk))
        except ValueError:
            raise click.BadParameter(f"Invalid weekday '{chunk}'. Use 0 (Sunday) to 6.")
    return days


def as_date(value: datetime | None) -> date:
    return (value or datetime.now()).date()
