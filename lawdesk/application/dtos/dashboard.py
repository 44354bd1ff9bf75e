"""DTOs for the firm dashboard aggregate."""

from dataclasses import dataclass, field

from lawdesk.application.dtos.calendar_event import CalendarEventResult
from lawdesk.application.dtos.case import CaseResult
from lawdesk.domain.enums import Priority


@dataclass(frozen=True)
class DashboardStats:
    active_cases: int
    team_members: int
    upcoming_deadlines: int
    total_billable_hours: float


@dataclass(frozen=True)
class DashboardAlert:
    """Priority alert shown on the dashboard (type: deadline, case or event)."""

    type: str
    title: str
    description: str
    priority: Priority
    related_id: str


@dataclass(frozen=True)
class DashboardResult:
    stats: DashboardStats
    recent_cases: list[CaseResult] = field(default_factory=list)
    upcoming_events: list[CalendarEventResult] = field(default_factory=list)
    alerts: list[DashboardAlert] = field(default_factory=list)
