"""Team API: members of the caller's firm.

New members get a generated temporary password, returned once in the
create response.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from lawdesk.api.dependencies import Scope, get_team_service
from lawdesk.application.services import TeamService
from lawdesk.core.limiter import limit_writes
from lawdesk.domain.enums import UserStatus
from lawdesk.schemas.common import SuccessMessageResponse
from lawdesk.schemas.team import (
    TeamListResponse,
    TeamMemberCreatedResponse,
    TeamMemberCreateRequest,
    TeamMemberResponse,
    TeamMemberUpdatedResponse,
    TeamMemberUpdateRequest,
)

router = APIRouter()

TeamSvc = Annotated[TeamService, Depends(get_team_service)]


@router.get("", response_model=TeamListResponse)
async def list_team(
    scope: Scope,
    service: TeamSvc,
    search: str | None = Query(default=None, description="Match name, email or department"),
    status: UserStatus | None = Query(default=None),
) -> TeamListResponse:
    members = await service.list_members(scope, search=search, status=status)
    return TeamListResponse(team_members=[TeamMemberResponse.from_result(m) for m in members])


@router.post("", response_model=TeamMemberCreatedResponse)
@limit_writes
async def add_member(
    request: Request, body: TeamMemberCreateRequest, scope: Scope, service: TeamSvc
) -> TeamMemberCreatedResponse:
    created = await service.add_member(scope, body.to_dto())
    return TeamMemberCreatedResponse(
        member=TeamMemberResponse.from_result(created.member),
        temp_password=created.temp_password,
    )


@router.put("/{member_id}", response_model=TeamMemberUpdatedResponse)
@limit_writes
async def update_member(
    request: Request,
    member_id: str,
    body: TeamMemberUpdateRequest,
    scope: Scope,
    service: TeamSvc,
) -> TeamMemberUpdatedResponse:
    member = await service.update_member(scope, member_id, body.changes())
    return TeamMemberUpdatedResponse(member=TeamMemberResponse.from_result(member))


@router.delete("/{member_id}", response_model=SuccessMessageResponse)
@limit_writes
async def remove_member(
    request: Request, member_id: str, scope: Scope, service: TeamSvc
) -> SuccessMessageResponse:
    await service.remove_member(scope, member_id)
    return SuccessMessageResponse(message="Team member deleted successfully")
