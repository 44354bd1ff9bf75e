"""Dashboard API: firm overview computed server-side."""

from typing import Annotated

from fastapi import APIRouter, Depends

from lawdesk.api.dependencies import Scope, get_dashboard_use_case
from lawdesk.application.use_cases import GetDashboardUseCase
from lawdesk.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    scope: Scope,
    use_case: Annotated[GetDashboardUseCase, Depends(get_dashboard_use_case)],
) -> DashboardResponse:
    """Return stats, recent cases, upcoming events and priority alerts."""
    return DashboardResponse.from_result(await use_case.execute(scope))
