"""Tracing for the execution gateway.

Instrumented code only ever talks to the OpenTelemetry *API*::

    _tracer = get_tracer(__name__)
    with _tracer.start_as_current_span("shellgate.execute") as span:
        span.set_attribute(ATTR_COMMAND, "git")

Until :func:`configure_telemetry` installs an SDK provider those spans are
no-ops.  The SDK and the OTLP exporter ship in the ``otel`` extra
(``pip install shellgate[otel]``).  stdout belongs to command output and the
MCP stdio transport, so the console exporter writes to stderr.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import SpanProcessor  # pyright: ignore[reportMissingImports]

# Span attributes set on every ``shellgate.execute`` span.
ATTR_COMMAND = "shellgate.command"
ATTR_ARG_COUNT = "shellgate.args.count"
ATTR_CWD = "shellgate.cwd"
ATTR_TIMEOUT = "shellgate.timeout"
ATTR_EXIT_CODE = "shellgate.exit_code"
ATTR_OUTCOME = "shellgate.outcome"
ATTR_ERROR_KIND = "shellgate.error.kind"

_INSTRUMENTATION_NAME = "shellgate"
_OTEL_EXTRA_HINT = "Install it with: pip install shellgate[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name* (defaults to ``shellgate``); a no-op until configured."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "shellgate",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install a global SDK tracer provider for *service_name*.

    Spans go to stderr when *export_to_console* is set, and are batched to
    the OTLP/gRPC collector at *otlp_endpoint* when one is given.  Both can
    be active at once.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, for OTLP,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        raise ImportError(f"opentelemetry-sdk is required for configure_telemetry(). {_OTEL_EXTRA_HINT}") from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[SpanProcessor]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[SpanProcessor] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))

    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            raise ImportError(f"opentelemetry-exporter-otlp is required for OTLP export. {_OTEL_EXTRA_HINT}") from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    return processors
