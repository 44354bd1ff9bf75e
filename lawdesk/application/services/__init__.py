"""Application services (orchestrate repositories for one resource each)."""

from lawdesk.application.services.auth_service import AuthService
from lawdesk.application.services.calendar_service import CalendarService
from lawdesk.application.services.case_service import CaseService
from lawdesk.application.services.team_service import TeamService

__all__ = ["AuthService", "CalendarService", "CaseService", "TeamService"]
