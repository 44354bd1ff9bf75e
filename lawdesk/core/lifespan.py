"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, document store,
telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from lawdesk.core.config import get_settings
from lawdesk.infrastructure.firebase.client import (
    close_document_store,
    init_document_store,
)
from lawdesk.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, document store, telemetry (if enabled).
    Shutdown order: document store close, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    init_document_store()

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    logger.info(
        "%s %s started (environment=%s, backend=%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
        settings.database_backend,
    )

    yield

    # ---- Shutdown ----
    await close_document_store()

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
