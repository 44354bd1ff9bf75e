"""Team management: firm members are users of the caller's firm."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.user import TeamMemberCreated, UserCreate, UserResult
from lawdesk.domain.enums import UserStatus
from lawdesk.domain.exceptions import ResourceNotFoundException, ValidationException
from lawdesk.shared.telemetry.tracing import traced
from lawdesk.shared.utils.generators import generate_temporary_password

if TYPE_CHECKING:
    from lawdesk.application.interfaces.repositories import IUserRepository
    from lawdesk.domain.value_objects import FirmScope

logger = logging.getLogger(__name__)


def _not_found() -> ResourceNotFoundException:
    return ResourceNotFoundException("Team member not found", resource_type="user")


def _matches(member: UserResult, term: str) -> bool:
    haystack = (member.name, member.email, member.department or "")
    return any(term in value.lower() for value in haystack)


class TeamService:
    """List, add, update and remove members of the caller's firm."""

    def __init__(self, user_repo: IUserRepository, temp_password_length: int = 8) -> None:
        self.user_repo = user_repo
        self.temp_password_length = temp_password_length

    @traced("team.list")
    async def list_members(
        self,
        scope: FirmScope,
        *,
        search: str | None = None,
        status: UserStatus | None = None,
    ) -> list[UserResult]:
        members = await self.user_repo.list_by_firm(scope, status=status)
        term = (search or "").strip().lower()
        if term:
            members = [m for m in members if _matches(m, term)]
        return members

    @traced("team.create")
    async def add_member(self, scope: FirmScope, data: UserCreate) -> TeamMemberCreated:
        """Create a member with a generated temporary password.

        The plaintext password is returned once, here, and never stored.
        """
        temp_password = generate_temporary_password(self.temp_password_length)
        member = await self.user_repo.create_user(scope, data, temp_password)
        logger.info("Team member %s added to firm %s", member.id, scope.firm_id)
        return TeamMemberCreated(member=member, temp_password=temp_password)

    @traced("team.update")
    async def update_member(
        self, scope: FirmScope, member_id: str, changes: dict[str, Any]
    ) -> UserResult:
        updated = await self.user_repo.update_scoped(scope, member_id, changes)
        if updated is None:
            raise _not_found()
        return updated

    @traced("team.delete")
    async def remove_member(self, scope: FirmScope, member_id: str) -> None:
        """Delete a member. Members cannot delete their own account."""
        if member_id == scope.user_id:
            raise ValidationException("Cannot delete your own account")
        if not await self.user_repo.delete_scoped(scope, member_id):
            raise _not_found()
        logger.info("Team member %s removed from firm %s", member_id, scope.firm_id)
