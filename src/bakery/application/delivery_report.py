"""Application service: Delivery Report use case (query)."""

from __future__ import annotations

from datetime import date

from bakery.domain.exceptions import EntityNotFoundError, ValidationError
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.service.reporting import DeliveryReport, delivery_report


class DeliveryReportHandler:

    def __init__(
        self,
        delivery_repo: DeliveryRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._delivery_repo = delivery_repo
        self._customer_repo = customer_repo

    def handle(
        self,
        start_date: date,
        end_date: date,
        customer_id: str | None = None,
    ) -> DeliveryReport:
        if end_date < start_date:
            raise ValidationError("Report end date is before its start date")

        customer_name = None
        if customer_id:
            customer = self._customer_repo.get_by_id(customer_id)
            if customer is None:
                raise EntityNotFoundError(f"Customer '{customer_id}' not found")
            customer_name = customer.name

        deliveries = self._delivery_repo.list_by_date_range(start_date, end_date, customer_id)
        return delivery_report(deliveries, start_date, end_date, customer_name)
