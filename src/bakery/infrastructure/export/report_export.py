"""Delivery report CSV export."""

from __future__ import annotations

import csv
import io

from bakery.domain.model.value_objects import format_quantity
from bakery.domain.service.reporting import DeliveryReport


def report_to_csv(report: DeliveryReport) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Product", "Quantity", "Unit", "Deliveries"])
    for row in report.summary:
        writer.writerow([row.product, format_quantity(row.total_quantity), row.unit, row.count])
    return buffer.getvalue()
