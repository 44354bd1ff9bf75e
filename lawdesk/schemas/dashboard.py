"""Dashboard API schemas."""

from pydantic import Field

from lawdesk.application.dtos.dashboard import DashboardResult
from lawdesk.domain.enums import Priority
from lawdesk.schemas.calendar import CalendarEventSummaryResponse
from lawdesk.schemas.case import CaseSummaryResponse
from lawdesk.schemas.common import CamelResponse


class DashboardStatsResponse(CamelResponse):
    active_cases: int
    team_members: int
    upcoming_deadlines: int
    total_billable_hours: float


class DashboardAlertResponse(CamelResponse):
    type: str = Field(..., description="deadline, case or event")
    title: str
    description: str
    priority: Priority
    related_id: str


class DashboardResponse(CamelResponse):
    """Response for GET /dashboard."""

    stats: DashboardStatsResponse
    recent_cases: list[CaseSummaryResponse]
    upcoming_events: list[CalendarEventSummaryResponse]
    alerts: list[DashboardAlertResponse]

    @classmethod
    def from_result(cls, result: DashboardResult) -> "DashboardResponse":
        stats = result.stats
        return cls(
            stats=DashboardStatsResponse(
                active_cases=stats.active_cases,
                team_members=stats.team_members,
                upcoming_deadlines=stats.upcoming_deadlines,
                total_billable_hours=stats.total_billable_hours,
            ),
            recent_cases=[CaseSummaryResponse.from_result(c) for c in result.recent_cases],
            upcoming_events=[
                CalendarEventSummaryResponse.from_result(e) for e in result.upcoming_events
            ],
            alerts=[
                DashboardAlertResponse(
                    type=a.type,
                    title=a.title,
                    description=a.description,
                    priority=a.priority,
                    related_id=a.related_id,
                )
                for a in result.alerts
            ],
        )
