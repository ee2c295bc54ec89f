"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import date, datetime

from bakery.domain.model.order import Order, OrderStatus
from bakery.domain.repository.order_repository import OrderRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.serialization import (
    date_from_raw,
    datetime_from_raw,
    order_line_from_raw,
    order_line_to_raw,
)

COLLECTION = "orders"


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._store.get(COLLECTION, order_id)
        return self._to_domain(raw) if raw is not None else None

    def list_by_date(self, delivery_date: date) -> list[Order]:
        docs = self._store.find(COLLECTION, where={"delivery_date": delivery_date.isoformat()})
        return [self._to_domain(raw) for raw in docs]

    def list_by_customer(self, customer_id: str) -> list[Order]:
        docs = self._store.find(
            COLLECTION,
            where={"customer_id": customer_id},
            order_by="delivery_date",
            descending=True,
        )
        return [self._to_domain(raw) for raw in docs]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._store.insert(COLLECTION, self._to_raw(order))
        else:
            self._store.put(COLLECTION, order.id, self._to_raw(order))

    def delete(self, order_id: str) -> None:
        self._store.delete(COLLECTION, order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "customer_id": order.customer_id,
            "customer_name": order.customer_name,
            "delivery_date": order.delivery_date.isoformat(),
            "status": order.status.value,
            "notes": order.notes,
            "recurring_template_id": order.recurring_template_id,
            "created_at": order.created_at.isoformat(),
            "lines": [order_line_to_raw(line) for line in order.lines],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            customer_id=raw.get("customer_id", ""),
            customer_name=raw.get("customer_name", ""),
            delivery_date=date_from_raw(raw["delivery_date"]),
            lines=[order_line_from_raw(line) for line in raw.get("lines") or []],
            status=OrderStatus(raw.get("status", OrderStatus.PENDING.value)),
            notes=raw.get("notes") or "",
            recurring_template_id=raw.get("recurring_template_id"),
            created_at=datetime_from_raw(raw.get("created_at")) or datetime.min,
        )
