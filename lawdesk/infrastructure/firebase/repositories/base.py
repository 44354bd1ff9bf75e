"""Firm-scoped repository base for Firestore-style document stores.

Every method takes a FirmScope. Single-record reads, updates and deletes
load the document by ID and compare its ``firm_id`` with the scope before
returning or touching it, so an ID from a URL is never sufficient on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from lawdesk.infrastructure.exceptions import DocumentNotFoundError
from lawdesk.infrastructure.firebase.collections import is_valid_document_id
from lawdesk.shared.utils.datetime import utc_now
from lawdesk.shared.utils.generators import generate_cuid

if TYPE_CHECKING:
    from lawdesk.domain.value_objects import FirmScope
    from lawdesk.infrastructure.firebase.client import DocumentClient

ResultT = TypeVar("ResultT")

# Server-owned fields; never taken from caller-supplied changes.
PROTECTED_FIELDS = frozenset({
    "id", "firm_id", "created_by", "created_at", "updated_at", "password_hash",
})

QueryFilter = tuple[str, str, Any]


class FirestoreScopedRepository(Generic[ResultT]):
    """CRUD over one collection, filtered by firm on every access.

    Subclasses set ``collection_name`` and list ordering, and implement
    ``_to_result``.
    """

    collection_name: ClassVar[str]
    order_field: ClassVar[str] = "created_at"
    order_direction: ClassVar[str] = "DESCENDING"

    def __init__(self, client: DocumentClient) -> None:
        self._client = client
        self._coll = client.collection(self.collection_name)

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> ResultT:
        raise NotImplementedError

    async def _get_owned(
        self, scope: FirmScope, record_id: str
    ) -> dict[str, Any] | None:
        """Return document data if it exists and belongs to scope's firm."""
        if not is_valid_document_id(record_id):
            return None
        doc = await self._coll.document(record_id).get()
        if not doc:
            return None
        data = doc.to_dict()
        if data.get("firm_id") != scope.firm_id:
            return None
        return data

    def _firm_query(self, scope: FirmScope, filters: list[QueryFilter] | None = None):
        query = self._coll.where("firm_id", "==", scope.firm_id)
        for field, op, value in filters or []:
            query = query.where(field, op, value)
        return query

    async def _list(
        self, scope: FirmScope, filters: list[QueryFilter] | None = None
    ) -> list[ResultT]:
        query = self._firm_query(scope, filters).order_by(
            self.order_field, self.order_direction
        )
        return [
            self._to_result(snapshot.id, snapshot.to_dict())
            async for snapshot in query.stream()
        ]

    async def _insert(
        self,
        scope: FirmScope,
        fields: dict[str, Any],
        server_fields: dict[str, Any] | None = None,
    ) -> ResultT:
        """Create a document stamped with firm, creator and timestamps.

        ``fields`` come from the caller and lose any protected keys;
        ``server_fields`` (e.g. a password hash) are written as given.
        """
        now = utc_now()
        record_id = generate_cuid()
        data = {
            **{k: v for k, v in fields.items() if k not in PROTECTED_FIELDS},
            **(server_fields or {}),
            "firm_id": scope.firm_id,
            "created_by": scope.user_id,
            "created_at": now,
            "updated_at": now,
        }
        await self._coll.create(record_id, data)
        return self._to_result(record_id, data)

    async def get_scoped(self, scope: FirmScope, record_id: str) -> ResultT | None:
        """Return the record if it belongs to scope's firm, else None."""
        data = await self._get_owned(scope, record_id)
        if data is None:
            return None
        return self._to_result(record_id, data)

    async def update_scoped(
        self, scope: FirmScope, record_id: str, changes: dict[str, Any]
    ) -> ResultT | None:
        """Apply changes and stamp updated_at; None if absent or owned by another firm."""
        data = await self._get_owned(scope, record_id)
        if data is None:
            return None
        updates = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        updates["updated_at"] = utc_now()
        try:
            await self._coll.document(record_id).update(updates)
        except DocumentNotFoundError:
            return None
        data.update(updates)
        return self._to_result(record_id, data)

    async def delete_scoped(self, scope: FirmScope, record_id: str) -> bool:
        """Delete the record; False if absent or owned by another firm."""
        data = await self._get_owned(scope, record_id)
        if data is None:
            return False
        await self._coll.document(record_id).delete()
        return True

    async def count_by_firm(self, scope: FirmScope) -> int:
        """Return the number of records owned by scope's firm."""
        return await self._firm_query(scope).count()
