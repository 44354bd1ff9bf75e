"""DTOs for calendar events."""

from dataclasses import dataclass, field
from datetime import datetime

from lawdesk.application.dtos.case import CaseRef
from lawdesk.application.dtos.user import UserRef
from lawdesk.domain.enums import EventStatus, EventType, Priority


@dataclass(frozen=True)
class CalendarEventCreate:
    """Input for creating an event. end_date defaults to start_date."""

    title: str
    start_date: datetime
    start_time: str
    end_time: str
    end_date: datetime | None = None
    description: str | None = None
    event_type: EventType = EventType.MEETING
    location: str | None = None
    priority: Priority = Priority.MEDIUM
    status: EventStatus = EventStatus.SCHEDULED
    attendees: list[str] = field(default_factory=list)
    case_id: str | None = None


@dataclass(frozen=True)
class CalendarEventResult:
    """Calendar event read-model."""

    id: str
    firm_id: str
    title: str
    description: str | None
    start_date: datetime
    end_date: datetime
    start_time: str
    end_time: str
    event_type: EventType
    location: str | None
    priority: Priority
    status: EventStatus
    attendees: list[str]
    case_id: str | None
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class PopulatedEvent:
    """Event with its creator and linked case resolved."""

    event: CalendarEventResult
    created_by: UserRef | None
    case: CaseRef | None
