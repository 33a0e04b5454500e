"""traced decorator: spans, allowlisted attributes and error status."""

import pytest
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from street_archive.core.config import Settings
from street_archive.shared.telemetry import TelemetryConfig, configure_telemetry, tracing


@pytest.fixture
def exporter(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    """Route tracing.trace.get_tracer to a private provider with an in-memory exporter."""
    span_exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    monkeypatch.setattr(
        tracing.trace, "get_tracer", lambda name, *a, **kw: provider.get_tracer(name)
    )
    return span_exporter


async def test_async_span_records_only_allowlisted_kwargs(exporter: InMemorySpanExporter) -> None:
    @tracing.traced("repo.op", attributes={"component": "test"})
    async def op(*, record_id: str, query: str) -> str:
        return record_id

    assert await op(record_id="street-801", query="secret text") == "street-801"

    (span,) = exporter.get_finished_spans()
    assert span.name == "repo.op"
    assert span.attributes["component"] == "test"
    assert span.attributes["arg.record_id"] == "street-801"
    assert "arg.query" not in span.attributes
    assert span.status.status_code is StatusCode.OK


def test_sync_span_marks_errors(exporter: InMemorySpanExporter) -> None:
    @tracing.traced()
    def boom() -> None:
        raise ValueError("nope")

    with pytest.raises(ValueError):
        boom()

    (span,) = exporter.get_finished_spans()
    assert span.status.status_code is StatusCode.ERROR
    assert span.name.endswith(".boom")


def test_configure_telemetry_disabled_leaves_app_alone() -> None:
    app = FastAPI()
    settings = Settings(_env_file=None, telemetry_enabled=False)
    assert configure_telemetry(app, settings) is None
    assert TelemetryConfig("svc", "1.0", enabled=False).setup_telemetry() is None
