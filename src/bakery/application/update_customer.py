"""Application service: Update Customer use case.

Orders and deliveries already recorded keep the customer name they were
saved with.
"""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.customer import Customer
from bakery.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        customer.update_details(name=name, phone=phone, address=address)
        self._customer_repo.save(customer)
        logger.info("Customer %s updated", customer.id)
        return customer
