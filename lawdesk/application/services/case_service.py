"""Case operations for the caller's firm, with creator references resolved."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.case import CaseCreate, CaseResult, PopulatedCase
from lawdesk.domain.enums import CaseStatus, Priority
from lawdesk.domain.exceptions import ResourceNotFoundException
from lawdesk.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from lawdesk.application.interfaces.repositories import (
        ICaseRepository,
        IUserRepository,
    )
    from lawdesk.domain.value_objects import FirmScope


def _not_found() -> ResourceNotFoundException:
    return ResourceNotFoundException("Case not found", resource_type="case")


def _matches(case: CaseResult, term: str) -> bool:
    return any(
        term in value.lower()
        for value in (case.title, case.client_name, case.case_type)
    )


class CaseService:
    """CRUD over firm cases."""

    def __init__(self, case_repo: ICaseRepository, user_repo: IUserRepository) -> None:
        self.case_repo = case_repo
        self.user_repo = user_repo

    async def _populate(
        self, scope: FirmScope, cases: list[CaseResult]
    ) -> list[PopulatedCase]:
        refs = await self.user_repo.get_refs(
            scope, {c.created_by for c in cases if c.created_by}
        )
        return [
            PopulatedCase(case=c, created_by=refs.get(c.created_by or ""))
            for c in cases
        ]

    @traced("cases.list")
    async def list_cases(
        self,
        scope: FirmScope,
        *,
        search: str | None = None,
        status: CaseStatus | None = None,
        priority: Priority | None = None,
    ) -> list[PopulatedCase]:
        """Return the firm's cases, newest first."""
        cases = await self.case_repo.list_by_firm(scope, status=status, priority=priority)
        term = (search or "").strip().lower()
        if term:
            cases = [c for c in cases if _matches(c, term)]
        return await self._populate(scope, cases)

    @traced("cases.create")
    async def create_case(self, scope: FirmScope, data: CaseCreate) -> PopulatedCase:
        case = await self.case_repo.create(scope, data)
        return (await self._populate(scope, [case]))[0]

    @traced("cases.update")
    async def update_case(
        self, scope: FirmScope, case_id: str, changes: dict[str, Any]
    ) -> PopulatedCase:
        case = await self.case_repo.update_scoped(scope, case_id, changes)
        if case is None:
            raise _not_found()
        return (await self._populate(scope, [case]))[0]

    @traced("cases.delete")
    async def delete_case(self, scope: FirmScope, case_id: str) -> None:
        if not await self.case_repo.delete_scoped(scope, case_id):
            raise _not_found()
