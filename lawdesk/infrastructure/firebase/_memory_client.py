"""In-process document store with the same async surface as FirestoreRESTClient.

Selected with DATABASE_BACKEND=memory for local development and tests.
Documents are stored as deep copies, so callers never share mutable state
with the store (the same isolation the REST round-trip gives). Query
semantics follow Firestore where it matters to repositories:

- create() fails with DocumentExistsError if the ID is taken.
- update() fails with DocumentNotFoundError if the document is missing.
- Documents without an order_by field are excluded from ordered results.
- Comparisons between mismatched types never match.

Every operation completes without yielding to the event loop, so each
single-document write is atomic with respect to other requests.
"""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator
from datetime import datetime
from enum import Enum
from typing import Any

from lawdesk.infrastructure.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
)
from lawdesk.infrastructure.firebase.collections import check_document_id
from lawdesk.shared.utils.datetime import ensure_utc


def _normalize(value: Any) -> Any:
    """Store values the way Firestore returns them (enum values, lists, UTC datetimes)."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    return copy.deepcopy(value)


_SUPPORTED_OPS = frozenset({
    "==", "!=", "<", "<=", ">", ">=", "in", "not-in", "array-contains", "array-contains-any",
})


def _compare(op: str, actual: Any, expected: Any) -> bool:
    try:
        if op == "==":
            return actual == expected
        if op == "!=":
            return actual is not None and actual != expected
        if op == "<":
            return actual < expected
        if op == "<=":
            return actual <= expected
        if op == ">":
            return actual > expected
        if op == ">=":
            return actual >= expected
        if op == "in":
            return actual in expected
        if op == "not-in":
            return actual is not None and actual not in expected
        if op == "array-contains":
            return isinstance(actual, list) and expected in actual
        if op == "array-contains-any":
            return isinstance(actual, list) and any(v in actual for v in expected)
    except TypeError:
        return False
    raise ValueError(f"Unsupported query operator: {op!r}")


class MemoryDocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class MemoryDocumentReference:
    """Reference to a single in-memory document."""

    def __init__(self, store: dict[str, dict[str, Any]], collection_id: str, document_id: str):
        self._store = store
        self._collection_id = collection_id
        self.id = check_document_id(document_id)

    @property
    def _path(self) -> str:
        return f"{self._collection_id}/{self.id}"

    async def update(self, changes: dict[str, Any]) -> None:
        """Merge top-level fields into an existing document."""
        current = self._store.get(self.id)
        if current is None:
            raise DocumentNotFoundError(self._path)
        current.update(_normalize(changes))

    async def get(self) -> MemoryDocumentSnapshot | None:
        data = self._store.get(self.id)
        if data is None:
            return None
        return MemoryDocumentSnapshot(self.id, copy.deepcopy(data))

    async def delete(self) -> None:
        """Delete the document. Idempotent if already missing."""
        self._store.pop(self.id, None)


class _MemoryQuery:
    """Filter/order/limit over one collection; mirrors _Query in the REST client."""

    def __init__(self, store: dict[str, dict[str, Any]]):
        self._store = store
        self._filters: list[tuple[str, str, Any]] = []
        self._order: list[tuple[str, str]] = []
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> _MemoryQuery:
        if op not in _SUPPORTED_OPS:
            raise ValueError(f"Unsupported query operator: {op!r}")
        self._filters.append((field, op, _normalize(value)))
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> _MemoryQuery:
        if direction not in ("ASCENDING", "DESCENDING"):
            raise ValueError(f"Invalid direction: {direction!r}")
        self._order.append((field, direction))
        return self

    def limit(self, n: int) -> _MemoryQuery:
        self._limit = n
        return self

    def _run(self) -> list[tuple[str, dict[str, Any]]]:
        rows = [
            (doc_id, data)
            for doc_id, data in self._store.items()
            if all(_compare(op, data.get(field), value) for field, op, value in self._filters)
        ]
        if self._order:
            rows = [
                row for row in rows
                if all(row[1].get(field) is not None for field, _ in self._order)
            ]
            # Tie-break on document ID in the direction of the last ordering.
            rows.sort(key=lambda row: row[0], reverse=self._order[-1][1] == "DESCENDING")
            for field, direction in reversed(self._order):
                rows.sort(key=lambda row, f=field: row[1][f], reverse=direction == "DESCENDING")
        else:
            rows.sort(key=lambda row: row[0])
        if self._limit is not None:
            rows = rows[: self._limit]
        return rows

    async def stream(self) -> AsyncIterator[MemoryDocumentSnapshot]:
        for doc_id, data in self._run():
            yield MemoryDocumentSnapshot(doc_id, copy.deepcopy(data))

    async def count(self) -> int:
        return len(self._run())


class MemoryCollectionReference:
    """Reference to an in-memory collection."""

    def __init__(self, store: dict[str, dict[str, Any]], collection_id: str):
        self._store = store
        self._collection_id = collection_id

    def document(self, document_id: str) -> MemoryDocumentReference:
        return MemoryDocumentReference(self._store, self._collection_id, document_id)

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (fail with DocumentExistsError if it exists)."""
        if check_document_id(document_id) in self._store:
            raise DocumentExistsError(f"{self._collection_id}/{document_id}")
        self._store[document_id] = _normalize(data)

    def where(self, field: str, op: str, value: Any) -> _MemoryQuery:
        return _MemoryQuery(self._store).where(field, op, value)


class MemoryDocumentClient:
    """Process-local document store with the FirestoreRESTClient interface."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def collection(self, collection_id: str) -> MemoryCollectionReference:
        store = self._collections.setdefault(collection_id, {})
        return MemoryCollectionReference(store, collection_id)

    async def aclose(self) -> None:
        """Drop all data (nothing else to release)."""
        self._collections.clear()
