"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from bakery.domain.model.product import Product
from bakery.domain.repository.product_repository import ProductRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.serialization import money_from_raw, money_to_raw

COLLECTION = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._store.get(COLLECTION, product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Product | None:
        for product in self.list_all():
            if product.matches_name(name):
                return product
        return None

    def list_all(self) -> list[Product]:
        docs = self._store.find(COLLECTION, order_by="name")
        return [self._to_domain(raw) for raw in docs]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._store.insert(COLLECTION, self._to_raw(product))
        else:
            self._store.put(COLLECTION, product.id, self._to_raw(product))

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "name": product.name,
            "default_unit": product.default_unit,
            "price": money_to_raw(product.price),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw.get("name", ""),
            default_unit=raw.get("default_unit", ""),
            price=money_from_raw(raw.get("price")),
        )
