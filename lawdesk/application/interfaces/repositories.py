"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Every firm-owned read or write takes a FirmScope as its first argument; a record
whose firm differs from the scope is reported as absent (None / False).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from lawdesk.domain.enums import CaseStatus, EventType, Priority, UserStatus

if TYPE_CHECKING:
    from lawdesk.application.dtos.calendar_event import (
        CalendarEventCreate,
        CalendarEventResult,
    )
    from lawdesk.application.dtos.case import CaseCreate, CaseRef, CaseResult
    from lawdesk.application.dtos.firm import FirmCreate, FirmResult
    from lawdesk.application.dtos.user import UserCreate, UserRef, UserResult
    from lawdesk.domain.value_objects import FirmScope


class IFirmRepository(Protocol):
    """Protocol for firm repository (DIP)."""

    async def get_by_id(self, firm_id: str) -> FirmResult | None:
        """Return firm by ID."""

    async def email_exists(self, email: str) -> bool:
        """Return True if a firm already uses this contact email."""

    async def create_firm(self, data: FirmCreate) -> FirmResult:
        """Create firm; raise ConflictException if the email is taken."""

    async def delete_firm(self, firm_id: str) -> None:
        """Delete firm and release its email (signup rollback only)."""


class IUserRepository(Protocol):
    """Protocol for user / team member repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID regardless of firm (token resolution)."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by (case-insensitive) email regardless of firm."""

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return active user if email/password match; else None."""

    async def list_by_firm(
        self, scope: FirmScope, *, status: UserStatus | None = None
    ) -> list[UserResult]:
        """Return firm members, newest first."""

    async def get_scoped(self, scope: FirmScope, record_id: str) -> UserResult | None:
        """Return member if it belongs to scope's firm."""

    async def create_user(
        self, scope: FirmScope, data: UserCreate, password: str
    ) -> UserResult:
        """Create user in scope's firm with hashed password; ConflictException on duplicate email."""

    async def update_scoped(
        self, scope: FirmScope, record_id: str, changes: dict[str, Any]
    ) -> UserResult | None:
        """Apply changes to a member of scope's firm; None if absent or foreign."""

    async def delete_scoped(self, scope: FirmScope, record_id: str) -> bool:
        """Delete member of scope's firm; False if absent or foreign."""

    async def count_by_firm(self, scope: FirmScope) -> int:
        """Return number of users in scope's firm."""

    async def get_refs(self, scope: FirmScope, ids: set[str]) -> dict[str, UserRef]:
        """Return name/email references for the given member IDs of scope's firm."""


class ICaseRepository(Protocol):
    """Protocol for case repository (DIP)."""

    async def list_by_firm(
        self,
        scope: FirmScope,
        *,
        status: CaseStatus | None = None,
        priority: Priority | None = None,
    ) -> list[CaseResult]:
        """Return firm cases, newest first."""

    async def get_scoped(self, scope: FirmScope, record_id: str) -> CaseResult | None:
        """Return case if it belongs to scope's firm."""

    async def create(self, scope: FirmScope, data: CaseCreate) -> CaseResult:
        """Create case stamped with scope's firm and acting user."""

    async def update_scoped(
        self, scope: FirmScope, record_id: str, changes: dict[str, Any]
    ) -> CaseResult | None:
        """Apply changes to a case of scope's firm; None if absent or foreign."""

    async def delete_scoped(self, scope: FirmScope, record_id: str) -> bool:
        """Delete case of scope's firm; False if absent or foreign."""

    async def get_refs(self, scope: FirmScope, ids: set[str]) -> dict[str, CaseRef]:
        """Return title/client references for the given case IDs of scope's firm."""


class ICalendarEventRepository(Protocol):
    """Protocol for calendar event repository (DIP)."""

    async def list_by_firm(
        self,
        scope: FirmScope,
        *,
        event_type: EventType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CalendarEventResult]:
        """Return firm events ordered by start date ascending."""

    async def get_scoped(
        self, scope: FirmScope, record_id: str
    ) -> CalendarEventResult | None:
        """Return event if it belongs to scope's firm."""

    async def create(
        self, scope: FirmScope, data: CalendarEventCreate
    ) -> CalendarEventResult:
        """Create event stamped with scope's firm and acting user."""

    async def update_scoped(
        self, scope: FirmScope, record_id: str, changes: dict[str, Any]
    ) -> CalendarEventResult | None:
        """Apply changes to an event of scope's firm; None if absent or foreign."""

    async def delete_scoped(self, scope: FirmScope, record_id: str) -> bool:
        """Delete event of scope's firm; False if absent or foreign."""
