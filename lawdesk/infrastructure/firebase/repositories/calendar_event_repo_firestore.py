"""Firestore-backed calendar event repository (implements ICalendarEventRepository)."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.calendar_event import (
    CalendarEventCreate,
    CalendarEventResult,
)
from lawdesk.domain.enums import EventStatus, EventType, Priority
from lawdesk.infrastructure.firebase.collections import COLLECTION_CALENDAR_EVENTS
from lawdesk.infrastructure.firebase.repositories.base import (
    FirestoreScopedRepository,
    QueryFilter,
)

if TYPE_CHECKING:
    from lawdesk.domain.value_objects import FirmScope


class FirestoreCalendarEventRepository(FirestoreScopedRepository[CalendarEventResult]):
    """Calendar event repository using Firestore. Lists by start date ascending."""

    collection_name = COLLECTION_CALENDAR_EVENTS
    order_field = "start_date"
    order_direction = "ASCENDING"

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> CalendarEventResult:
        start_date = data["start_date"]
        return CalendarEventResult(
            id=doc_id,
            firm_id=data.get("firm_id", ""),
            title=data.get("title", ""),
            description=data.get("description"),
            start_date=start_date,
            end_date=data.get("end_date") or start_date,
            start_time=data.get("start_time", ""),
            end_time=data.get("end_time", ""),
            event_type=EventType(data.get("event_type", EventType.MEETING)),
            location=data.get("location"),
            priority=Priority(data.get("priority", Priority.MEDIUM)),
            status=EventStatus(data.get("status", EventStatus.SCHEDULED)),
            attendees=list(data.get("attendees") or []),
            case_id=data.get("case_id"),
            created_by=data.get("created_by"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def list_by_firm(
        self,
        scope: FirmScope,
        *,
        event_type: EventType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CalendarEventResult]:
        """Return firm events by start date, optionally within [start, end] and of one type."""
        filters: list[QueryFilter] = []
        if event_type is not None:
            filters.append(("event_type", "==", event_type.value))
        if start is not None:
            filters.append(("start_date", ">=", start))
        if end is not None:
            filters.append(("start_date", "<=", end))
        return await self._list(scope, filters)

    async def create(
        self, scope: FirmScope, data: CalendarEventCreate
    ) -> CalendarEventResult:
        """Create an event in scope's firm; end_date defaults to start_date."""
        fields = asdict(data)
        if fields.get("end_date") is None:
            fields["end_date"] = data.start_date
        return await self._insert(scope, fields)
