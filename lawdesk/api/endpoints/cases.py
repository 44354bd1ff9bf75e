"""Cases API: list, create, update and delete cases of the caller's firm."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from lawdesk.api.dependencies import Scope, get_case_service
from lawdesk.application.services import CaseService
from lawdesk.core.limiter import limit_writes
from lawdesk.domain.enums import CaseStatus, Priority
from lawdesk.schemas.case import (
    CaseCreateRequest,
    CaseListResponse,
    CaseMutationResponse,
    CaseResponse,
    CaseUpdateRequest,
)
from lawdesk.schemas.common import SuccessMessageResponse

router = APIRouter()

CaseSvc = Annotated[CaseService, Depends(get_case_service)]


@router.get("", response_model=CaseListResponse)
async def list_cases(
    scope: Scope,
    service: CaseSvc,
    search: str | None = Query(default=None, description="Match title, client or case type"),
    status: CaseStatus | None = Query(default=None),
    priority: Priority | None = Query(default=None),
) -> CaseListResponse:
    """Return the firm's cases, newest first."""
    cases = await service.list_cases(scope, search=search, status=status, priority=priority)
    return CaseListResponse(cases=[CaseResponse.from_populated(c) for c in cases])


@router.post("", response_model=CaseMutationResponse)
@limit_writes
async def create_case(
    request: Request, body: CaseCreateRequest, scope: Scope, service: CaseSvc
) -> CaseMutationResponse:
    case = await service.create_case(scope, body.to_dto())
    return CaseMutationResponse(case=CaseResponse.from_populated(case))


@router.put("/{case_id}", response_model=CaseMutationResponse)
@limit_writes
async def update_case(
    request: Request,
    case_id: str,
    body: CaseUpdateRequest,
    scope: Scope,
    service: CaseSvc,
) -> CaseMutationResponse:
    case = await service.update_case(scope, case_id, body.changes())
    return CaseMutationResponse(case=CaseResponse.from_populated(case))


@router.delete("/{case_id}", response_model=SuccessMessageResponse)
@limit_writes
async def delete_case(
    request: Request, case_id: str, scope: Scope, service: CaseSvc
) -> SuccessMessageResponse:
    await service.delete_case(scope, case_id)
    return SuccessMessageResponse(message="Case deleted successfully")
