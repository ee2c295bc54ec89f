"""Abstract repository for Delivery aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from bakery.domain.model.delivery import Delivery


class DeliveryRepository(ABC):

    @abstractmethod
    def get_by_id(self, delivery_id: str) -> Delivery | None:
        """Return a delivery by its ID, or None if not found."""

    @abstractmethod
    def list_by_date_range(
        self,
        start: date,
        end: date,
        customer_id: str | None = None,
    ) -> list[Delivery]:
        """Deliveries dated from ``start`` 00:00 to ``end`` end-of-day, newest first."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Delivery]:
        """Every delivery for one customer, newest first."""

    @abstractmethod
    def save(self, delivery: Delivery) -> None:
        """Persist a new or corrected delivery."""

    @abstractmethod
    def delete(self, delivery_id: str) -> None:
        """Remove a delivery recorded by mistake."""
