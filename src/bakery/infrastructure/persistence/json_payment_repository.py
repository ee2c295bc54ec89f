"""JSON-file-backed implementation of PaymentRepository."""

from __future__ import annotations

from datetime import datetime

from bakery.domain.model.payment import Payment, PaymentMethod
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.payment_repository import PaymentRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.serialization import (
    datetime_from_raw,
    datetime_to_raw,
    money_from_raw,
    money_to_raw,
)

COLLECTION = "payments"


class JsonPaymentRepository(PaymentRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def get_by_id(self, payment_id: str) -> Payment | None:
        raw = self._store.get(COLLECTION, payment_id)
        return self._to_domain(raw) if raw is not None else None

    def list_by_customer(self, customer_id: str) -> list[Payment]:
        docs = self._store.find(
            COLLECTION, where={"customer_id": customer_id}, order_by="date", descending=True
        )
        return [self._to_domain(raw) for raw in docs]

    def list_all(self) -> list[Payment]:
        docs = self._store.find(COLLECTION, order_by="date", descending=True)
        return [self._to_domain(raw) for raw in docs]

    def save(self, payment: Payment) -> None:
        if payment.id is None:
            payment.id = self._store.insert(COLLECTION, self._to_raw(payment))
        else:
            self._store.put(COLLECTION, payment.id, self._to_raw(payment))

    def delete(self, payment_id: str) -> None:
        self._store.delete(COLLECTION, payment_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(payment: Payment) -> dict:
        return {
            "customer_id": payment.customer_id,
            "customer_name": payment.customer_name,
            "amount": money_to_raw(payment.amount),
            "date": datetime_to_raw(payment.date),
            "method": payment.method.value,
            "notes": payment.notes,
            "created_at": payment.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Payment:
        try:
            method = PaymentMethod(raw.get("method"))
        except ValueError:
            method = PaymentMethod.OTHER
        return Payment(
            id=raw["id"],
            customer_id=raw.get("customer_id", ""),
            customer_name=raw.get("customer_name", ""),
            amount=money_from_raw(raw.get("amount")) or Money.of(0),
            date=datetime_from_raw(raw.get("date")),
            method=method,
            notes=raw.get("notes") or "",
            created_at=datetime_from_raw(raw.get("created_at")) or datetime.min,
        )
