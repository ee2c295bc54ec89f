"""Application service: Billing Statement use case (query).

Loads the customer's whole ledger because the carried-forward balance
depends on everything dated before the requested window.
"""

from __future__ import annotations

from datetime import date

from bakery.domain.exceptions import EntityNotFoundError, ValidationError
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.repository.payment_repository import PaymentRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.service.billing import Statement, build_statement


class BillingStatementHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        delivery_repo: DeliveryRepository,
        payment_repo: PaymentRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._delivery_repo = delivery_repo
        self._payment_repo = payment_repo
        self._product_repo = product_repo

    def handle(self, customer_id: str, start_date: date, end_date: date) -> Statement:
        if end_date < start_date:
            raise ValidationError("Statement end date is before its start date")

        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        return build_statement(
            customer_id,
            start_date,
            end_date,
            self._delivery_repo.list_by_customer(customer_id),
            self._payment_repo.list_by_customer(customer_id),
            product_prices=self._product_repo.price_list(),
            customer=customer,
        )
