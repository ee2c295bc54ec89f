"""Application service: Add Customer use case."""

from __future__ import annotations

import logging

from bakery.domain.model.customer import Customer
from bakery.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        phone: str = "",
        address: str = "",
        custom_products: list[tuple[str, str]] | None = None,
    ) -> Customer:
        customer = Customer.create(name=name, phone=phone, address=address)
        for product, unit in custom_products or []:
            customer.add_custom_product(product, unit)
        self._customer_repo.save(customer)
        logger.info("Customer %s '%s' added", customer.id, customer.name)
        return customer
