"""JSON-file-backed implementation of RecurringOrderRepository."""

from __future__ import annotations

from datetime import datetime

from bakery.domain.model.recurring import RecurringOrderTemplate
from bakery.domain.repository.recurring_order_repository import (
    RecurringOrderRepository,
)
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.serialization import (
    datetime_from_raw,
    order_line_from_raw,
    order_line_to_raw,
)

COLLECTION = "recurring_orders"


class JsonRecurringOrderRepository(RecurringOrderRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def get_by_id(self, template_id: str) -> RecurringOrderTemplate | None:
        raw = self._store.get(COLLECTION, template_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[RecurringOrderTemplate]:
        docs = self._store.find(COLLECTION, order_by="customer_name")
        return [self._to_domain(raw) for raw in docs]

    def save(self, template: RecurringOrderTemplate) -> None:
        if template.id is None:
            template.id = self._store.insert(COLLECTION, self._to_raw(template))
        else:
            self._store.put(COLLECTION, template.id, self._to_raw(template))

    @staticmethod
    def _to_raw(template: RecurringOrderTemplate) -> dict:
        return {
            "customer_id": template.customer_id,
            "customer_name": template.customer_name,
            "days_of_week": sorted(template.days_of_week),
            "lines": [order_line_to_raw(line) for line in template.lines],
            "notes": template.notes,
            "is_active": template.is_active,
            "created_at": template.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> RecurringOrderTemplate:
        return RecurringOrderTemplate(
            id=raw["id"],
            customer_id=raw.get("customer_id", ""),
            customer_name=raw.get("customer_name", ""),
            days_of_week=frozenset(int(d) for d in raw.get("days_of_week") or []),
            lines=[order_line_from_raw(line) for line in raw.get("lines") or []],
            notes=raw.get("notes") or "",
            is_active=bool(raw.get("is_active", True)),
            created_at=datetime_from_raw(raw.get("created_at")) or datetime.min,
        )
