"""Calendar operations for the caller's firm.

Events may link to a case; the case must belong to the same firm. Linked
cases and creators are resolved into references on every read.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.calendar_event import (
    CalendarEventCreate,
    CalendarEventResult,
    PopulatedEvent,
)
from lawdesk.domain.enums import EventType
from lawdesk.domain.exceptions import ResourceNotFoundException, ValidationException
from lawdesk.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from lawdesk.application.interfaces.repositories import (
        ICalendarEventRepository,
        ICaseRepository,
        IUserRepository,
    )
    from lawdesk.domain.value_objects import FirmScope


def _not_found() -> ResourceNotFoundException:
    return ResourceNotFoundException("Calendar event not found", resource_type="event")


class CalendarService:
    """CRUD over firm calendar events."""

    def __init__(
        self,
        event_repo: ICalendarEventRepository,
        case_repo: ICaseRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.event_repo = event_repo
        self.case_repo = case_repo
        self.user_repo = user_repo

    async def _require_case(self, scope: FirmScope, case_id: str | None) -> None:
        if case_id and await self.case_repo.get_scoped(scope, case_id) is None:
            raise ResourceNotFoundException("Case not found", resource_type="case")

    async def _populate(
        self, scope: FirmScope, events: list[CalendarEventResult]
    ) -> list[PopulatedEvent]:
        users = await self.user_repo.get_refs(
            scope, {e.created_by for e in events if e.created_by}
        )
        cases = await self.case_repo.get_refs(
            scope, {e.case_id for e in events if e.case_id}
        )
        return [
            PopulatedEvent(
                event=e,
                created_by=users.get(e.created_by or ""),
                case=cases.get(e.case_id or ""),
            )
            for e in events
        ]

    @traced("calendar.list")
    async def list_events(
        self,
        scope: FirmScope,
        *,
        event_type: EventType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[PopulatedEvent]:
        """Return firm events by start date, within [start, end] when given."""
        if start is not None and end is not None and end < start:
            raise ValidationException("end must not be before start", field="end")
        events = await self.event_repo.list_by_firm(
            scope, event_type=event_type, start=start, end=end
        )
        return await self._populate(scope, events)

    @traced("calendar.create")
    async def create_event(
        self, scope: FirmScope, data: CalendarEventCreate
    ) -> PopulatedEvent:
        await self._require_case(scope, data.case_id)
        event = await self.event_repo.create(scope, data)
        return (await self._populate(scope, [event]))[0]

    @traced("calendar.update")
    async def update_event(
        self, scope: FirmScope, event_id: str, changes: dict[str, Any]
    ) -> PopulatedEvent:
        """Apply changes; the merged end date may not precede the merged start date."""
        current = await self.event_repo.get_scoped(scope, event_id)
        if current is None:
            raise _not_found()
        if "case_id" in changes:
            await self._require_case(scope, changes["case_id"])
        start = changes.get("start_date") or current.start_date
        end = changes.get("end_date") or current.end_date
        if end < start:
            raise ValidationException(
                "End date cannot be before start date", field="endDate"
            )
        start_time = changes.get("start_time") or current.start_time
        end_time = changes.get("end_time") or current.end_time
        if end.date() == start.date() and end_time <= start_time:
            raise ValidationException(
                "End time must be after start time", field="endTime"
            )
        event = await self.event_repo.update_scoped(scope, event_id, changes)
        if event is None:
            raise _not_found()
        return (await self._populate(scope, [event]))[0]

    @traced("calendar.delete")
    async def delete_event(self, scope: FirmScope, event_id: str) -> None:
        if not await self.event_repo.delete_scoped(scope, event_id):
            raise _not_found()
