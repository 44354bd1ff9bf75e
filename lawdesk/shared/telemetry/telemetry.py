"""OpenTelemetry tracing for the lawdesk API.

Built once by the lifespan when TELEMETRY_ENABLED is true. Spans come from
the FastAPI instrumentor (one per request) and from ``@traced`` service
methods; the logging instrumentor adds trace ids to log records.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

EXPORTERS = ("console", "otlp", "none")


def _build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    if exporter_type == "otlp":
        if not otlp_endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required for the otlp exporter")
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type == "console":
        return ConsoleSpanExporter()
    return None


class TelemetryConfig:
    """Tracer provider for this process plus the instrumentation hooked onto it."""

    def __init__(self, service_name: str, service_version: str, environment: str) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider:
        """Create the tracer provider and install it globally.

        Args:
            exporter_type: One of EXPORTERS; "none" records spans without exporting.
            otlp_endpoint: OTLP gRPC endpoint, required for "otlp".
            sample_rate: Fraction of traces kept (0.0-1.0).
        """
        provider = TracerProvider(
            resource=Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            ),
            sampler=TraceIdRatioBased(sample_rate),
        )
        exporter = _build_exporter(exporter_type, otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider
        logger.info(
            "Tracing enabled: service=%s exporter=%s sample_rate=%s",
            self.service_name,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace every request except health checks."""
        if self.tracer_provider is None:
            return
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.tracer_provider, excluded_urls="/health"
        )

    def instrument_logging(self) -> None:
        """Add otelTraceID/otelSpanID to log records (format left unchanged)."""
        if self.tracer_provider is None:
            return
        LoggingInstrumentor().instrument(
            tracer_provider=self.tracer_provider, set_logging_format=False
        )

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is not None:
            self.tracer_provider.shutdown()
            self.tracer_provider = None


_telemetry: TelemetryConfig | None = None


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry set at startup, if any."""
    return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    global _telemetry
    _telemetry = telemetry
