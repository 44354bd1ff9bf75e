"""Firestore-backed case repository (implements ICaseRepository)."""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.case import CaseCreate, CaseRef, CaseResult
from lawdesk.domain.enums import CaseStatus, Priority
from lawdesk.infrastructure.firebase.collections import COLLECTION_CASES
from lawdesk.infrastructure.firebase.repositories.base import (
    FirestoreScopedRepository,
    QueryFilter,
)

if TYPE_CHECKING:
    from lawdesk.domain.value_objects import FirmScope


class FirestoreCaseRepository(FirestoreScopedRepository[CaseResult]):
    """Case repository using Firestore. Lists newest first."""

    collection_name = COLLECTION_CASES
    order_field = "created_at"
    order_direction = "DESCENDING"

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> CaseResult:
        return CaseResult(
            id=doc_id,
            firm_id=data.get("firm_id", ""),
            title=data.get("title", ""),
            client_name=data.get("client_name", ""),
            case_type=data.get("case_type", ""),
            status=CaseStatus(data.get("status", CaseStatus.PENDING)),
            priority=Priority(data.get("priority", Priority.MEDIUM)),
            summary=data.get("summary"),
            due_date=data.get("due_date"),
            billable_hours=float(data.get("billable_hours") or 0),
            assigned_to=list(data.get("assigned_to") or []),
            created_by=data.get("created_by"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def list_by_firm(
        self,
        scope: FirmScope,
        *,
        status: CaseStatus | None = None,
        priority: Priority | None = None,
    ) -> list[CaseResult]:
        """Return firm cases, newest first, optionally filtered by status/priority."""
        filters: list[QueryFilter] = []
        if status is not None:
            filters.append(("status", "==", status.value))
        if priority is not None:
            filters.append(("priority", "==", priority.value))
        return await self._list(scope, filters)

    async def create(self, scope: FirmScope, data: CaseCreate) -> CaseResult:
        """Create a case in scope's firm, created by scope's user."""
        return await self._insert(scope, asdict(data))

    async def get_refs(self, scope: FirmScope, ids: set[str]) -> dict[str, CaseRef]:
        """Return title/client for the given IDs that belong to scope's firm."""
        wanted = sorted(i for i in ids if i)
        found = await asyncio.gather(*(self.get_scoped(scope, i) for i in wanted))
        return {
            case.id: CaseRef(id=case.id, title=case.title, client_name=case.client_name)
            for case in found
            if case is not None
        }
