"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
Keeps the deployment small (avoids grpcio / firebase-admin).
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from lawdesk.infrastructure.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
)
from lawdesk.infrastructure.firebase._rest_encoding import (
    decode_document,
    decode_value,
    encode_document,
    encode_value,
)
from lawdesk.infrastructure.firebase.collections import check_document_id

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
) -> Any:
    """Perform async HTTP request to Firestore REST API. 404 returns None; 409 raises."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers)
    elif method == "PATCH":
        resp = await client.patch(url, headers=headers, json=body)
    elif method == "POST":
        resp = await client.post(url, headers=headers, json=body)
    elif method == "DELETE":
        resp = await client.delete(url, headers=headers)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError(url)
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _doc_id(name: str) -> str:
    return name.split("/")[-1] if name else ""


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class DocumentReference:
    """Reference to a single document; matches firestore API style.

    The ID is percent-encoded as one path segment, so characters such as
    "#", "?" and "%" address the document instead of altering the URL.
    """

    def __init__(self, client: FirestoreRESTClient, collection_path: str, document_id: str):
        self._client = client
        self.id = check_document_id(document_id)
        self._path = f"{collection_path}/{quote(document_id, safe='')}"

    async def update(self, changes: dict[str, Any]) -> None:
        """Merge changes into an existing document.

        Only the given top-level fields are written (updateMask). The
        ``currentDocument.exists`` precondition makes a missing document
        fail instead of being created; that failure raises DocumentNotFoundError.
        """
        if not changes:
            return
        params = [("updateMask.fieldPaths", key) for key in changes]
        params.append(("currentDocument.exists", "true"))
        url = f"{_BASE}/{self._path}?{urlencode(params)}"
        out = await _request_async(
            self._client._http,
            url,
            method="PATCH",
            body=encode_document(changes),
            access_token=await self._client.get_token(),
        )
        if out is None:
            raise DocumentNotFoundError(self._path)

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            access_token=await self._client.get_token(),
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing (404)."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="DELETE",
            access_token=await self._client.get_token(),
        )


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array-contains": "ARRAY_CONTAINS",
    "array-contains-any": "ARRAY_CONTAINS_ANY",
}

_DIRECTIONS = ("ASCENDING", "DESCENDING")


class _Query:
    """Fluent query builder for a collection; runs via runQuery on the server.

    Multiple where() calls are combined with AND. No limit is applied unless
    limit() is called.
    """

    def __init__(
        self,
        client: FirestoreRESTClient,
        parent: str,
        collection_id: str,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._filters: list[tuple[str, str, Any]] = []
        self._order: list[tuple[str, str]] = []
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> _Query:
        if op not in _OP_MAP:
            raise ValueError(f"Unsupported query operator: {op!r}")
        self._filters.append((field, _OP_MAP[op], value))
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> _Query:
        if direction not in _DIRECTIONS:
            raise ValueError(f"direction must be one of {_DIRECTIONS}, got {direction!r}")
        self._order.append((field, direction))
        return self

    def limit(self, n: int) -> _Query:
        self._limit = n
        return self

    def _structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        field_filters = [
            {
                "fieldFilter": {
                    "field": {"fieldPath": field},
                    "op": op,
                    "value": encode_value(value),
                }
            }
            for field, op, value in self._filters
        ]
        if len(field_filters) == 1:
            structured["where"] = field_filters[0]
        elif field_filters:
            structured["where"] = {
                "compositeFilter": {"op": "AND", "filters": field_filters}
            }
        if self._order:
            structured["orderBy"] = [
                {"field": {"fieldPath": field}, "direction": direction}
                for field, direction in self._order
            ]
        if self._limit is not None:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        resp = await _request_async(
            self._client._http,
            f"{_BASE}/{self._parent}:runQuery",
            method="POST",
            body={"structuredQuery": self._structured_query()},
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            doc = item["document"]
            yield DocumentSnapshot(_doc_id(doc.get("name", "")), decode_document(doc))

    async def count(self) -> int:
        """Return the number of matching documents (runAggregationQuery COUNT)."""
        body = {
            "structuredAggregationQuery": {
                "structuredQuery": self._structured_query(),
                "aggregations": [{"alias": "total", "count": {}}],
            }
        }
        resp = await _request_async(
            self._client._http,
            f"{_BASE}/{self._parent}:runAggregationQuery",
            method="POST",
            body=body,
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            fields = item.get("result", {}).get("aggregateFields", {})
            if "total" in fields:
                return int(decode_value(fields["total"]))
        return 0


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path.rstrip("/")

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, self._path, document_id)

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (fail with DocumentExistsError if it exists)."""
        url = f"{_BASE}/{self._path}?documentId={quote(check_document_id(document_id), safe='')}"
        await _request_async(
            self._client._http,
            url,
            method="POST",
            body=encode_document(data),
            access_token=await self._client.get_token(),
        )

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a query with a filter. Chain .where(), .order_by(), .limit(), then .stream()."""
        parent = self._path.rsplit("/", 1)[0]
        collection_id = self._path.split("/")[-1]
        return _Query(self._client, parent, collection_id).where(field, op, value)


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str | None:
        """Return a valid access token; refreshes in thread pool to avoid blocking.

        Returns None when constructed without credentials (e.g. emulator).
        """
        if self._credentials is None:
            return None
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")
