"""Request dependencies (auth, firm scope, service providers)."""

from lawdesk.api.dependencies.auth import (
    CurrentUser,
    Scope,
    get_current_user,
    get_current_user_id,
    get_firm_scope,
)
from lawdesk.api.dependencies.services import (
    get_auth_service,
    get_calendar_service,
    get_case_service,
    get_dashboard_use_case,
    get_team_service,
)

__all__ = [
    "CurrentUser",
    "Scope",
    "get_auth_service",
    "get_calendar_service",
    "get_case_service",
    "get_current_user",
    "get_current_user_id",
    "get_dashboard_use_case",
    "get_firm_scope",
    "get_team_service",
]
