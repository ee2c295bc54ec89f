"""Tests for the JSON document store, against a temporary directory."""

import json

import pytest

from bakery.domain.exceptions import EntityNotFoundError
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore


@pytest.fixture
def store(tmp_path):
    return JsonDocumentStore(tmp_path / "data")


class TestWrites:

    def test_insert_generates_id_and_creates_file(self, store, tmp_path):
        doc_id = store.insert("customers", {"name": "Alice"})

        assert store.get("customers", doc_id) == {"name": "Alice", "id": doc_id}
        on_disk = json.loads((tmp_path / "data" / "customers.json").read_text(encoding="utf-8"))
        assert on_disk == [{"name": "Alice", "id": doc_id}]

    def test_put_replaces_whole_document(self, store):
        doc_id = store.insert("customers", {"name": "Alice", "phone": "555"})
        store.put("customers", doc_id, {"name": "Alicia"})
        assert store.get("customers", doc_id) == {"name": "Alicia", "id": doc_id}

    def test_put_creates_missing_document(self, store):
        store.put("customers", "fixed", {"name": "Bob"})
        assert store.get("customers", "fixed")["name"] == "Bob"

    def test_update_merges_fields(self, store):
        doc_id = store.insert("customers", {"name": "Alice", "phone": "555"})
        store.update("customers", doc_id, {"phone": "777", "id": "ignored"})
        assert store.get("customers", doc_id) == {"name": "Alice", "phone": "777", "id": doc_id}

    def test_update_missing_document(self, store):
        with pytest.raises(EntityNotFoundError):
            store.update("customers", "nope", {"name": "x"})

    def test_delete(self, store):
        doc_id = store.insert("customers", {"name": "Alice"})
        store.delete("customers", doc_id)
        assert store.get("customers", doc_id) is None

    def test_unknown_collection_rejected(self, store):
        with pytest.raises(ValueError, match="Unknown collection"):
            store.insert("widgets", {})

    def test_non_ascii_is_kept_readable(self, store, tmp_path):
        store.insert("products", {"name": "Pâte brisée"})
        text = (tmp_path / "data" / "products.json").read_text(encoding="utf-8")
        assert "Pâte brisée" in text


class TestFind:

    def _seed(self, store):
        store.put("deliveries", "a", {"customer_id": "c1", "date": "2024-06-01T08:00:00"})
        store.put("deliveries", "b", {"customer_id": "c2", "date": "2024-06-15T08:00:00"})
        store.put("deliveries", "c", {"customer_id": "c1", "date": "2024-06-30T23:00:00"})
        store.put("deliveries", "d", {"customer_id": "c1", "date": "2024-07-01T00:00:00"})
        store.put("deliveries", "e", {"customer_id": "c1", "date": None})

    def test_empty_collection(self, store):
        assert store.find("orders") == []

    def test_equality_filter(self, store):
        self._seed(store)
        found = store.find("deliveries", where={"customer_id": "c2"})
        assert [d["id"] for d in found] == ["b"]

    def test_range_is_start_inclusive_end_exclusive(self, store):
        self._seed(store)
        found = store.find(
            "deliveries", range_field="date", start="2024-06-01", end="2024-07-01", order_by="date"
        )
        assert [d["id"] for d in found] == ["a", "b", "c"]

    def test_documents_without_range_field_never_match(self, store):
        self._seed(store)
        found = store.find("deliveries", range_field="date", start="0000")
        assert "e" not in [d["id"] for d in found]

    def test_descending_order_puts_missing_last(self, store):
        self._seed(store)
        found = store.find("deliveries", where={"customer_id": "c1"}, order_by="date", descending=True)
        assert [d["id"] for d in found] == ["d", "c", "a", "e"]
