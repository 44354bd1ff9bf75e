"""Sign up, sign in and profile: firm + founding partner + session token."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from lawdesk.application.dtos.firm import FirmCreate, FirmResult
from lawdesk.application.dtos.user import (
    AuthSession,
    Permission,
    UserCreate,
    UserProfile,
    UserResult,
)
from lawdesk.domain.enums import UserRole, UserStatus
from lawdesk.domain.exceptions import (
    AuthenticationException,
    ConflictException,
    ResourceNotFoundException,
)
from lawdesk.domain.permissions import ADMIN_PERMISSIONS, FOUNDER_DEPARTMENT
from lawdesk.domain.value_objects import FirmScope
from lawdesk.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from lawdesk.application.interfaces.repositories import (
        IFirmRepository,
        IUserRepository,
    )

logger = logging.getLogger(__name__)


def founder_permissions() -> list[Permission]:
    """Full permission set granted to the partner who registers a firm."""
    return [
        Permission(name=name, description=description, category=category)
        for name, description, category in ADMIN_PERMISSIONS
    ]


class AuthService:
    """Creates firms with their founding partner and issues session tokens."""

    def __init__(
        self,
        firm_repo: IFirmRepository,
        user_repo: IUserRepository,
        issue_token: Callable[[str], str],
    ) -> None:
        self.firm_repo = firm_repo
        self.user_repo = user_repo
        self.issue_token = issue_token

    async def _firm_view(self, user: UserResult) -> tuple[FirmResult, int]:
        firm = await self.firm_repo.get_by_id(user.firm_id)
        if firm is None:
            raise ResourceNotFoundException("Firm not found", resource_type="firm")
        current_users = await self.user_repo.count_by_firm(FirmScope(firm.id))
        return firm, current_users

    @traced("auth.signup")
    async def signup(
        self,
        firm_data: FirmCreate,
        admin_email: str,
        password: str,
        admin_name: str | None = None,
        admin_phone: str | None = None,
    ) -> AuthSession:
        """Register a firm and its founding partner, then sign the partner in.

        Raises ConflictException when the admin email or the firm email is
        already registered. If the partner cannot be written after the firm
        was, the firm (and its email claim) is removed before re-raising.
        """
        if await self.user_repo.get_by_email(admin_email) is not None:
            raise ConflictException(
                "User already exists with this email", field="adminEmail"
            )
        if await self.firm_repo.email_exists(firm_data.email):
            raise ConflictException("Firm already exists with this email", field="email")

        firm = await self.firm_repo.create_firm(firm_data)
        founder = UserCreate(
            name=admin_name or admin_email.split("@", 1)[0],
            email=admin_email,
            role=UserRole.PARTNER,
            department=FOUNDER_DEPARTMENT,
            phone=admin_phone,
            status=UserStatus.ACTIVE,
            permissions=founder_permissions(),
        )
        try:
            user = await self.user_repo.create_user(FirmScope(firm.id), founder, password)
        except ConflictException as exc:
            await self.firm_repo.delete_firm(firm.id)
            exc.details["field"] = "adminEmail"
            raise
        except Exception:
            logger.exception("Founder creation failed for firm %s; rolling back", firm.id)
            await self.firm_repo.delete_firm(firm.id)
            raise

        logger.info("Firm %s registered by user %s", firm.id, user.id)
        return AuthSession(
            user=user,
            firm=firm,
            current_users=await self.user_repo.count_by_firm(FirmScope(firm.id)),
            token=self.issue_token(user.id),
        )

    @traced("auth.signin")
    async def signin(self, email: str, password: str) -> AuthSession:
        """Check credentials; raise AuthenticationException on any mismatch."""
        user = await self.user_repo.authenticate(email, password)
        if user is None:
            raise AuthenticationException()
        firm, current_users = await self._firm_view(user)
        return AuthSession(
            user=user,
            firm=firm,
            current_users=current_users,
            token=self.issue_token(user.id),
        )

    async def get_profile(self, user: UserResult) -> UserProfile:
        firm, current_users = await self._firm_view(user)
        return UserProfile(user=user, firm=firm, current_users=current_users)
