"""Application service: Delete Payment use case."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.payment_repository import PaymentRepository

logger = logging.getLogger(__name__)


class DeletePaymentHandler:

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    def handle(self, payment_id: str) -> None:
        if self._payment_repo.get_by_id(payment_id) is None:
            raise EntityNotFoundError(f"Payment '{payment_id}' not found")
        self._payment_repo.delete(payment_id)
        logger.info("Payment %s deleted", payment_id)
