"""Abstract repository for Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from bakery.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_date(self, delivery_date: date) -> list[Order]:
        """Return every order for a delivery date."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return a customer's orders, most recent delivery date first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID to new ones."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Remove an order. Unknown IDs are ignored."""

    def find_for_customer_on(self, customer_id: str, delivery_date: date) -> list[Order]:
        return [o for o in self.list_by_date(delivery_date) if o.customer_id == customer_id]
