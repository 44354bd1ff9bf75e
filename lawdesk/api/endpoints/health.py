"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from lawdesk.schemas.health import HealthResponse
from lawdesk.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return OK with the current server time."""
    return HealthResponse(timestamp=utc_now())
