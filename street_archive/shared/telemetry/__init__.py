"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from street_archive.shared.telemetry.logging import (
    RequestIdFilter,
    setup_logging,
)
from street_archive.shared.telemetry.telemetry import (
    TelemetryConfig,
    configure_telemetry,
    get_telemetry,
    set_telemetry,
)
from street_archive.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "RequestIdFilter",
    "TelemetryConfig",
    "add_span_attributes",
    "configure_telemetry",
    "get_telemetry",
    "set_telemetry",
    "setup_logging",
    "traced",
]
