"""Application services: a customer's own products.

Custom products are name/unit pairs outside the catalog that supply the
unit when an order line for that customer omits one.
"""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.customer import Customer
from bakery.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


def _get_customer(customer_repo: CustomerRepository, customer_id: str) -> Customer:
    customer = customer_repo.get_by_id(customer_id)
    if customer is None:
        raise EntityNotFoundError(f"Customer '{customer_id}' not found")
    return customer


class AddCustomProductHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, name: str, unit: str) -> Customer:
        customer = _get_customer(self._customer_repo, customer_id)
        customer.add_custom_product(name, unit)
        self._customer_repo.save(customer)
        logger.info("Custom product '%s' added for %s", name.strip(), customer.name)
        return customer


class RemoveCustomProductHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, name: str, unit: str | None = None) -> Customer:
        customer = _get_customer(self._customer_repo, customer_id)
        customer.remove_custom_product(name, unit)
        self._customer_repo.save(customer)
        logger.info("Custom product '%s' removed for %s", name.strip(), customer.name)
        return customer
