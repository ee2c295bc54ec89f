"""Application service: Record Payment use case.

Payments are facts entered by hand; no money is moved here.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.payment import Payment, PaymentMethod
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.domain.repository.payment_repository import PaymentRepository

logger = logging.getLogger(__name__)


class RecordPaymentHandler:

    def __init__(
        self,
        payment_repo: PaymentRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._payment_repo = payment_repo
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        amount: str,
        when: datetime | date,
        method: str = "cash",
        notes: str = "",
    ) -> Payment:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        payment = Payment.record(
            customer_id=customer_id,
            customer_name=customer.name,
            amount=Money.of(amount),
            when=when,
            method=PaymentMethod.parse(method),
            notes=notes,
        )
        self._payment_repo.save(payment)
        logger.info("Payment %s of %s recorded for %s", payment.id, payment.amount, customer.name)
        return payment
