"""Abstract repository for Payment aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.payment import Payment


class PaymentRepository(ABC):

    @abstractmethod
    def get_by_id(self, payment_id: str) -> Payment | None:
        """Return a payment by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Payment]:
        """Every payment for one customer, newest first."""

    @abstractmethod
    def list_all(self) -> list[Payment]:
        """Every recorded payment, newest first."""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Persist a new payment."""

    @abstractmethod
    def delete(self, payment_id: str) -> None:
        """Remove a payment recorded by mistake."""
