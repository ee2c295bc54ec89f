"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from datetime import datetime

from bakery.domain.model.customer import CustomProduct, Customer
from bakery.domain.repository.customer_repository import CustomerRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.serialization import datetime_from_raw

COLLECTION = "customers"


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def get_by_id(self, customer_id: str) -> Customer | None:
        raw = self._store.get(COLLECTION, customer_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Customer]:
        customers = [self._to_domain(raw) for raw in self._store.find(COLLECTION)]
        return sorted(customers, key=lambda c: c.name.casefold())

    def save(self, customer: Customer) -> None:
        if customer.id is None:
            customer.id = self._store.insert(COLLECTION, self._to_raw(customer))
        else:
            self._store.put(COLLECTION, customer.id, self._to_raw(customer))

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "name": customer.name,
            "phone": customer.phone,
            "address": customer.address,
            "linked_user_id": customer.linked_user_id,
            "custom_products": [
                {"name": p.name, "unit": p.unit} for p in customer.custom_products
            ],
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw.get("name", ""),
            phone=raw.get("phone") or "",
            address=raw.get("address") or "",
            linked_user_id=raw.get("linked_user_id"),
            custom_products=[
                CustomProduct(p.get("name", ""), p.get("unit", ""))
                for p in raw.get("custom_products") or []
            ],
            created_at=datetime_from_raw(raw.get("created_at")) or datetime.min,
        )
