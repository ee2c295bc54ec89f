"""Application service: Customer Balance use case (query).

All-time amount due, amount paid and outstanding balance, for one
customer or for the whole customer list.
"""

from __future__ import annotations

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.domain.repository.payment_repository import PaymentRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.service.billing import Balance, compute_balance


class CustomerBalanceHandler:

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

    def handle(self, customer_id: str) -> Balance:
        if self._customer_repo.get_by_id(customer_id) is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        return compute_balance(
            customer_id,
            self._delivery_repo.list_by_customer(customer_id),
            self._payment_repo.list_by_customer(customer_id),
            self._product_repo.price_list(),
        )

    def handle_all(self) -> dict[str, Balance]:
        """Balances keyed by customer id, in customer-name order."""
        prices = self._product_repo.price_list()
        balances: dict[str, Balance] = {}
        for customer in self._customer_repo.list_all():
            customer_id = customer.id or ""
            balances[customer_id] = compute_balance(
                customer_id,
                self._delivery_repo.list_by_customer(customer_id),
                self._payment_repo.list_by_customer(customer_id),
                prices,
            )
        return balances
