"""Calendar API: events of the caller's firm, optionally linked to a case."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from lawdesk.api.dependencies import Scope, get_calendar_service
from lawdesk.application.services import CalendarService
from lawdesk.core.limiter import limit_writes
from lawdesk.domain.enums import EventType
from lawdesk.schemas.calendar import (
    CalendarEventCreateRequest,
    CalendarEventMutationResponse,
    CalendarEventResponse,
    CalendarEventUpdateRequest,
    CalendarListResponse,
)
from lawdesk.schemas.common import SuccessMessageResponse, UtcDatetime

router = APIRouter()

CalendarSvc = Annotated[CalendarService, Depends(get_calendar_service)]


@router.get("", response_model=CalendarListResponse)
async def list_events(
    scope: Scope,
    service: CalendarSvc,
    start: UtcDatetime | None = Query(default=None, description="Earliest start date (inclusive)"),
    end: UtcDatetime | None = Query(default=None, description="Latest start date (inclusive)"),
    event_type: EventType | None = Query(default=None, alias="eventType"),
) -> CalendarListResponse:
    """Return the firm's events by start date."""
    events = await service.list_events(scope, event_type=event_type, start=start, end=end)
    return CalendarListResponse(events=[CalendarEventResponse.from_populated(e) for e in events])


@router.post("", response_model=CalendarEventMutationResponse)
@limit_writes
async def create_event(
    request: Request,
    body: CalendarEventCreateRequest,
    scope: Scope,
    service: CalendarSvc,
) -> CalendarEventMutationResponse:
    event = await service.create_event(scope, body.to_dto())
    return CalendarEventMutationResponse(event=CalendarEventResponse.from_populated(event))


@router.put("/{event_id}", response_model=CalendarEventMutationResponse)
@limit_writes
async def update_event(
    request: Request,
    event_id: str,
    body: CalendarEventUpdateRequest,
    scope: Scope,
    service: CalendarSvc,
) -> CalendarEventMutationResponse:
    event = await service.update_event(scope, event_id, body.changes())
    return CalendarEventMutationResponse(event=CalendarEventResponse.from_populated(event))


@router.delete("/{event_id}", response_model=SuccessMessageResponse)
@limit_writes
async def delete_event(
    request: Request, event_id: str, scope: Scope, service: CalendarSvc
) -> SuccessMessageResponse:
    await service.delete_event(scope, event_id)
    return SuccessMessageResponse(message="Calendar event deleted successfully")
