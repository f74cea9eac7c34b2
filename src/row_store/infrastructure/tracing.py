"""OpenTelemetry tracing for statement execution.

Each executed statement runs inside one span named after its type
("row_store.insert", "row_store.select"). The span carries the statement
type and, once the statement finishes, its status and the table's row
count. Spans leave the process only when an exporter is configured.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)

TRACER_NAME = "row_store"

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "row_store",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Set up OpenTelemetry tracing.

    The tracer is taken from the new provider directly, so calling this
    again (one container per test, say) still yields a working tracer even
    though OpenTelemetry keeps the first global provider.

    Args:
        service_name: Name of the service for tracing
        otlp_endpoint: OTLP collector endpoint (e.g., "http://localhost:4317")
        console_export: Whether to also print spans to stdout

    Returns:
        Configured tracer instance
    """
    global _tracer

    from row_store import __version__

    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: service_name, SERVICE_VERSION: __version__})
    )

    exporters: list[SpanExporter] = []
    if otlp_endpoint:
        exporters.append(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
    if console_export:
        exporters.append(ConsoleSpanExporter())
    for exporter in exporters:
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    _tracer = provider.get_tracer(TRACER_NAME, __version__)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the row store tracer (a no-op tracer until setup_tracing runs)."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME)
    return _tracer


@contextmanager
def statement_span(statement_type: str) -> Iterator[trace.Span]:
    """
    Open the span for one statement.

    Exceptions raised inside the block are recorded on the span and mark it
    as failed before propagating.

    Args:
        statement_type: "insert" or "select"

    Yields:
        The active span
    """
    with get_tracer().start_as_current_span(
        f"{TRACER_NAME}.{statement_type}",
        attributes={"row_store.statement.type": statement_type},
    ) as span:
        yield span
