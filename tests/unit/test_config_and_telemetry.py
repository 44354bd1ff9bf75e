import pytest
from opentelemetry.sdk.trace.export import ConsoleSpanExporter
from pydantic import ValidationError

from lawdesk.core.config import Settings
from lawdesk.shared.telemetry.telemetry import _build_exporter


def test_memory_backend_needs_no_credentials() -> None:
    settings = Settings(database_backend="memory", environment="test")
    assert settings.secret_key.get_secret_value()
    assert settings.telemetry_exporter == "console"


def test_production_requires_secret_key(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(database_backend="memory", environment="production", secret_key="")


def test_unknown_exporter_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(database_backend="memory", telemetry_exporter="jaeger")


def test_otlp_exporter_requires_endpoint() -> None:
    with pytest.raises(ValidationError):
        Settings(database_backend="memory", telemetry_exporter="otlp")


def test_sample_rate_bounds() -> None:
    with pytest.raises(ValidationError):
        Settings(database_backend="memory", telemetry_sample_rate=1.5)


def test_exporter_selection() -> None:
    assert isinstance(_build_exporter("console", None), ConsoleSpanExporter)
    assert _build_exporter("none", None) is None
    with pytest.raises(ValueError):
        _build_exporter("otlp", None)
