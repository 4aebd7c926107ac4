"""OpenTelemetry tracing helpers.

Modules call :func:`get_tracer` and open spans unconditionally; without a
configured SDK the API hands back no-op tracers.  :func:`configure_telemetry`
installs a real provider and needs the ``otel`` extra
(``pip install kelurahan-mcp[otel]``).

Usage::

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("tool.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, name)
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

ATTR_TOOL_NAME = "kelurahan.tool.name"
ATTR_TOOL_KIND = "kelurahan.tool.kind"
ATTR_TOOL_IS_ERROR = "kelurahan.tool.is_error"
ATTR_TEMPLATE = "kelurahan.template"
ATTR_COMPILER_EXIT_CODE = "kelurahan.compiler.exit_code"
ATTR_RPC_METHOD = "kelurahan.rpc.method"

_INSTRUMENTATION_NAME = "kelurahan_mcp"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a tracer for *name* (no-op until telemetry is configured)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "kelurahan-mcp",
    export_to_console: bool = False,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider exporting to the console and/or OTLP.

    Console spans are flushed per span; OTLP spans are batched.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, with *otlp_endpoint*, the
            OTLP exporter) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        raise ImportError(_missing("opentelemetry-sdk", "configure_telemetry()")) from exc

    processors: list[Any] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))
    if otlp_endpoint:
        processors.append(BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in processors:
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    except ImportError as exc:
        raise ImportError(_missing("opentelemetry-exporter-otlp", "OTLP export")) from exc
    return OTLPSpanExporter(endpoint=endpoint)


def _missing(distribution: str, feature: str) -> str:
    return f"{distribution} is required for {feature}. Install it with: pip install kelurahan-mcp[otel]"
