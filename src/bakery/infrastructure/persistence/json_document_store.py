"""JSON-file-backed document store.

One file per collection, each holding a list of documents with a string
``id``. Supports the operations the repositories need: insert with a
generated id, get, partial update, delete, equality and single-field
range queries with one sort key.

Dates are stored as naive local ISO-8601 strings, which sort
chronologically, so range queries compare the strings directly.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from bakery.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

COLLECTIONS = (
    "customers",
    "products",
    "orders",
    "deliveries",
    "payments",
    "recurring_orders",
)

Document = dict[str, Any]


class JsonDocumentStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    # --- Writes ---------------------------------------------------------------

    def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        """Store a new document under a generated id and return the id."""
        doc_id = uuid.uuid4().hex
        docs = self._load(collection)
        docs.append({**data, "id": doc_id})
        self._persist(collection, docs)
        logger.debug("Inserted %s/%s", collection, doc_id)
        return doc_id

    def put(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        """Replace the whole document, creating it if missing."""
        docs = self._load(collection)
        document = {**data, "id": doc_id}
        for i, existing in enumerate(docs):
            if existing.get("id") == doc_id:
                docs[i] = document
                break
        else:
            docs.append(document)
        self._persist(collection, docs)

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        """Merge ``fields`` into an existing document."""
        docs = self._load(collection)
        for existing in docs:
            if existing.get("id") == doc_id:
                existing.update({k: v for k, v in fields.items() if k != "id"})
                self._persist(collection, docs)
                return
        raise EntityNotFoundError(f"No document '{doc_id}' in {collection}")

    def delete(self, collection: str, doc_id: str) -> None:
        docs = self._load(collection)
        remaining = [d for d in docs if d.get("id") != doc_id]
        if len(remaining) != len(docs):
            self._persist(collection, remaining)
            logger.debug("Deleted %s/%s", collection, doc_id)

    # --- Reads ----------------------------------------------------------------

    def get(self, collection: str, doc_id: str) -> Document | None:
        for doc in self._load(collection):
            if doc.get("id") == doc_id:
                return doc
        return None

    def find(
        self,
        collection: str,
        where: Mapping[str, Any] | None = None,
        range_field: str | None = None,
        start: str | None = None,
        end: str | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Document]:
        """Query by equality on ``where`` and ``start <= range_field < end``.

        Documents missing ``range_field`` never match a range query.
        """
        results = []
        for doc in self._load(collection):
            if where and any(doc.get(k) != v for k, v in where.items()):
                continue
            if range_field is not None:
                value = doc.get(range_field)
                if value is None:
                    continue
                if start is not None and value < start:
                    continue
                if end is not None and value >= end:
                    continue
            results.append(doc)

        if order_by is not None:
            present = [d for d in results if d.get(order_by) is not None]
            missing = [d for d in results if d.get(order_by) is None]
            present.sort(key=lambda d: d[order_by], reverse=descending)
            results = present + missing
        return results

    # --- File helpers ---------------------------------------------------------

    def _path(self, collection: str) -> Path:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection '{collection}'")
        return self._data_dir / f"{collection}.json"

    def _load(self, collection: str) -> list[Document]:
        path = self._path(collection)
        if not path.exists():
            return []
        return json.loads(path.read_text(encoding="utf-8"))

    def _persist(self, collection: str, docs: list[Document]) -> None:
        path = self._path(collection)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(docs, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        tmp.replace(path)
