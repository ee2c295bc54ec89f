"""Application service: Customer History use case (query)."""

from __future__ import annotations

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.customer import Customer
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.payment_repository import PaymentRepository
from bakery.domain.service.reporting import CustomerHistory, customer_history


class CustomerHistoryHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        delivery_repo: DeliveryRepository,
        payment_repo: PaymentRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._delivery_repo = delivery_repo
        self._payment_repo = payment_repo

    def handle(self, customer_id: str) -> tuple[Customer, CustomerHistory]:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        history = customer_history(
            self._order_repo.list_by_customer(customer_id),
            self._delivery_repo.list_by_customer(customer_id),
            self._payment_repo.list_by_customer(customer_id),
        )
        return customer, history
