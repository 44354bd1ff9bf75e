"""Calendar event API schemas."""

from pydantic import Field, model_validator

from lawdesk.application.dtos.calendar_event import (
    CalendarEventCreate,
    CalendarEventResult,
    PopulatedEvent,
)
from lawdesk.domain.enums import EventStatus, EventType, Priority
from lawdesk.schemas.common import (
    CamelModel,
    CamelResponse,
    TimeOfDay,
    UserRefResponse,
    UtcDatetime,
)


class CalendarEventCreateRequest(CamelModel):
    """Request body for creating an event. endDate defaults to startDate."""

    title: str = Field(..., min_length=1, max_length=300)
    description: str | None = None
    start_date: UtcDatetime
    end_date: UtcDatetime | None = None
    start_time: TimeOfDay
    end_time: TimeOfDay
    event_type: EventType = EventType.MEETING
    location: str | None = None
    priority: Priority = Priority.MEDIUM
    status: EventStatus = EventStatus.SCHEDULED
    attendees: list[str] = Field(default_factory=list)
    case_id: str | None = None

    @model_validator(mode="after")
    def end_not_before_start(self) -> "CalendarEventCreateRequest":
        end_date = self.end_date or self.start_date
        if end_date < self.start_date:
            raise ValueError("End date cannot be before start date")
        if end_date.date() == self.start_date.date() and self.end_time <= self.start_time:
            raise ValueError("End time must be after start time")
        return self

    def to_dto(self) -> CalendarEventCreate:
        return CalendarEventCreate(
            title=self.title,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            start_time=self.start_time,
            end_time=self.end_time,
            event_type=self.event_type,
            location=self.location,
            priority=self.priority,
            status=self.status,
            attendees=self.attendees,
            case_id=self.case_id or None,
        )


class CalendarEventUpdateRequest(CamelModel):
    """Request body for PUT. The merged dates are checked against the stored event."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = None
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    event_type: EventType | None = None
    location: str | None = None
    priority: Priority | None = None
    status: EventStatus | None = None
    attendees: list[str] | None = None
    case_id: str | None = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        for key in (
            "title", "start_date", "end_date", "start_time", "end_time",
            "event_type", "priority", "status", "attendees",
        ):
            if key in data and data[key] is None:
                del data[key]
        if "case_id" in data and not data["case_id"]:
            data["case_id"] = None
        return data


class CaseRefResponse(CamelResponse):
    """Embedded case reference (caseId)."""

    id: str = Field(alias="_id")
    title: str
    client_name: str


class CalendarEventSummaryResponse(CamelResponse):
    """Event record without resolved references (dashboard)."""

    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    start_date: UtcDatetime
    end_date: UtcDatetime
    start_time: str
    end_time: str
    event_type: EventType
    location: str | None = None
    priority: Priority
    status: EventStatus
    attendees: list[str] = Field(default_factory=list)
    firm_id: str
    created_at: UtcDatetime | None = None
    updated_at: UtcDatetime | None = None

    @staticmethod
    def _fields(event: CalendarEventResult) -> dict:
        return {
            "id": event.id,
            "title": event.title,
            "description": event.description,
            "start_date": event.start_date,
            "end_date": event.end_date,
            "start_time": event.start_time,
            "end_time": event.end_time,
            "event_type": event.event_type,
            "location": event.location,
            "priority": event.priority,
            "status": event.status,
            "attendees": event.attendees,
            "firm_id": event.firm_id,
            "created_at": event.created_at,
            "updated_at": event.updated_at,
        }

    @classmethod
    def from_result(cls, event: CalendarEventResult) -> "CalendarEventSummaryResponse":
        return cls(**cls._fields(event))


class CalendarEventResponse(CalendarEventSummaryResponse):
    """Event record with linked case and creator resolved."""

    case_id: CaseRefResponse | None = None
    created_by: UserRefResponse | None = None

    @classmethod
    def from_populated(cls, populated: PopulatedEvent) -> "CalendarEventResponse":
        case, user = populated.case, populated.created_by
        return cls(
            **cls._fields(populated.event),
            case_id=(
                CaseRefResponse(id=case.id, title=case.title, client_name=case.client_name)
                if case
                else None
            ),
            created_by=(
                UserRefResponse(id=user.id, name=user.name, email=user.email)
                if user
                else None
            ),
        )


class CalendarListResponse(CamelResponse):
    events: list[CalendarEventResponse]


class CalendarEventMutationResponse(CamelResponse):
    success: bool = True
    event: CalendarEventResponse
