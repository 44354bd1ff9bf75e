"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from lawdesk.shared.telemetry.logging import setup_logging
from lawdesk.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from lawdesk.shared.telemetry.tracing import get_trace_id, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "get_trace_id",
]
