"""Dashboard use case: firm stats, recent cases, upcoming events and alerts."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from lawdesk.application.dtos.calendar_event import CalendarEventResult
from lawdesk.application.dtos.case import CaseResult
from lawdesk.application.dtos.dashboard import (
    DashboardAlert,
    DashboardResult,
    DashboardStats,
)
from lawdesk.application.dtos.user import UserResult
from lawdesk.domain.enums import CaseStatus, Priority
from lawdesk.shared.telemetry.tracing import traced
from lawdesk.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from lawdesk.application.interfaces.repositories import (
        ICalendarEventRepository,
        ICaseRepository,
        IUserRepository,
    )
    from lawdesk.domain.value_objects import FirmScope

RECENT_CASES_LIMIT = 3
UPCOMING_EVENTS_LIMIT = 3
DEADLINE_WINDOW = timedelta(days=7)
CRITICAL_DEADLINE_WINDOW = timedelta(days=2)
MAX_CASE_ALERTS = 2


def _short_date(value: datetime) -> str:
    return value.strftime("%b %d")


def _due_within(case: CaseResult, now: datetime, window: timedelta) -> bool:
    due = ensure_utc(case.due_date)
    return due is not None and now < due < now + window


def build_dashboard(
    cases: list[CaseResult],
    members: list[UserResult],
    events: list[CalendarEventResult],
    now: datetime,
) -> DashboardResult:
    """Aggregate firm records into the dashboard view.

    Deadline windows are open intervals: a case due exactly now, or exactly
    at the window edge, is not counted.
    """
    now = ensure_utc(now)

    critical = [c for c in cases if _due_within(c, now, CRITICAL_DEADLINE_WINDOW)]
    alerts = [
        DashboardAlert(
            type="deadline",
            title="Case deadline approaching",
            description=f"{c.title} - Due {_short_date(c.due_date)}",
            priority=Priority.HIGH,
            related_id=c.id,
        )
        for c in critical
    ]
    high_pending = [
        c for c in cases
        if c.priority == Priority.HIGH and c.status == CaseStatus.PENDING
    ]
    alerts.extend(
        DashboardAlert(
            type="case",
            title="High priority case pending",
            description=f"{c.title} - Requires attention",
            priority=Priority.MEDIUM,
            related_id=c.id,
        )
        for c in high_pending[:MAX_CASE_ALERTS]
    )

    upcoming = sorted(
        (e for e in events if ensure_utc(e.start_date) > now),
        key=lambda e: ensure_utc(e.start_date),
    )[:UPCOMING_EVENTS_LIMIT]
    if upcoming:
        nxt = upcoming[0]
        alerts.append(
            DashboardAlert(
                type="event",
                title=nxt.event_type.label,
                description=(
                    f"{nxt.title} - {_short_date(nxt.start_date)} at {nxt.start_time}"
                ),
                priority=Priority.HIGH if nxt.priority == Priority.HIGH else Priority.LOW,
                related_id=nxt.id,
            )
        )

    epoch = datetime.min.replace(tzinfo=now.tzinfo)
    recent = sorted(
        cases, key=lambda c: ensure_utc(c.created_at) or epoch, reverse=True
    )[:RECENT_CASES_LIMIT]

    stats = DashboardStats(
        active_cases=sum(1 for c in cases if c.status == CaseStatus.ACTIVE),
        team_members=sum(1 for m in members if m.is_active),
        upcoming_deadlines=sum(1 for c in cases if _due_within(c, now, DEADLINE_WINDOW)),
        total_billable_hours=sum(c.billable_hours for c in cases),
    )
    return DashboardResult(
        stats=stats,
        recent_cases=recent,
        upcoming_events=upcoming,
        alerts=alerts,
    )


class GetDashboardUseCase:
    """Load a firm's cases, members and events and aggregate them."""

    def __init__(
        self,
        case_repo: ICaseRepository,
        user_repo: IUserRepository,
        event_repo: ICalendarEventRepository,
    ) -> None:
        self.case_repo = case_repo
        self.user_repo = user_repo
        self.event_repo = event_repo

    @traced("dashboard.get")
    async def execute(self, scope: FirmScope, now: datetime | None = None) -> DashboardResult:
        now = now or utc_now()
        cases, members, events = await asyncio.gather(
            self.case_repo.list_by_firm(scope),
            self.user_repo.list_by_firm(scope),
            self.event_repo.list_by_firm(scope, start=now),
        )
        return build_dashboard(cases, members, events, now)
