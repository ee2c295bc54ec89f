"""JSON-file-backed implementation of DeliveryRepository."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from bakery.domain.model.delivery import Delivery
from bakery.domain.repository.delivery_repository import DeliveryRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.serialization import (
    datetime_from_raw,
    datetime_to_raw,
    delivery_line_from_raw,
    delivery_line_to_raw,
)

COLLECTION = "deliveries"


class JsonDeliveryRepository(DeliveryRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def get_by_id(self, delivery_id: str) -> Delivery | None:
        raw = self._store.get(COLLECTION, delivery_id)
        return self._to_domain(raw) if raw is not None else None

    def list_by_date_range(
        self,
        start: date,
        end: date,
        customer_id: str | None = None,
    ) -> list[Delivery]:
        docs = self._store.find(
            COLLECTION,
            where={"customer_id": customer_id} if customer_id else None,
            range_field="date",
            start=start.isoformat(),
            end=(end + timedelta(days=1)).isoformat(),
            order_by="date",
            descending=True,
        )
        return [self._to_domain(raw) for raw in docs]

    def list_by_customer(self, customer_id: str) -> list[Delivery]:
        docs = self._store.find(
            COLLECTION, where={"customer_id": customer_id}, order_by="date", descending=True
        )
        return [self._to_domain(raw) for raw in docs]

    def save(self, delivery: Delivery) -> None:
        if delivery.id is None:
            delivery.id = self._store.insert(COLLECTION, self._to_raw(delivery))
        else:
            self._store.put(COLLECTION, delivery.id, self._to_raw(delivery))

    def delete(self, delivery_id: str) -> None:
        self._store.delete(COLLECTION, delivery_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(delivery: Delivery) -> dict:
        return {
            "customer_id": delivery.customer_id,
            "customer_name": delivery.customer_name,
            "date": datetime_to_raw(delivery.date),
            "created_at": delivery.created_at.isoformat(),
            "lines": [delivery_line_to_raw(line) for line in delivery.lines],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Delivery:
        return Delivery(
            id=raw["id"],
            customer_id=raw.get("customer_id", ""),
            customer_name=raw.get("customer_name", ""),
            date=datetime_from_raw(raw.get("date")),
            lines=[delivery_line_from_raw(line) for line in raw.get("lines") or []],
            created_at=datetime_from_raw(raw.get("created_at")) or datetime.min,
        )
