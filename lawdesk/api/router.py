"""API router aggregation.

Everything under /api except sign up and sign in requires a bearer token;
the token check is attached at router level so it runs before any handler.
"""

from fastapi import APIRouter, Depends

from lawdesk.api.dependencies import get_current_user_id
from lawdesk.api.endpoints import auth, calendar, cases, dashboard, team

_protected = [Depends(get_current_user_id)]

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(
    cases.router, prefix="/cases", tags=["cases"], dependencies=_protected
)
api_router.include_router(
    team.router, prefix="/team", tags=["team"], dependencies=_protected
)
api_router.include_router(
    calendar.router, prefix="/calendar", tags=["calendar"], dependencies=_protected
)
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["dashboard"], dependencies=_protected
)
