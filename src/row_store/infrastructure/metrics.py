"""Prometheus metrics for the row store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)

if TYPE_CHECKING:
    from row_store.domain.entities import TableStats


class MetricsRegistry:
    """Registry of all row store metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Statement metrics
        self.statements_total = Counter(
            "row_store_statements_total",
            "Total number of statements executed",
            ["statement_type", "status"],  # status: success, table_full
            registry=self._registry,
        )

        self.statement_latency_seconds = Histogram(
            "row_store_statement_latency_seconds",
            "Statement latency in seconds",
            ["statement_type"],  # insert, select
            buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
            registry=self._registry,
        )

        # Table metrics
        self.rows = Gauge(
            "row_store_rows",
            "Number of live rows in the table",
            registry=self._registry,
        )

        self.pages_allocated = Gauge(
            "row_store_pages_allocated",
            "Number of allocated pages",
            registry=self._registry,
        )

        self.table_full_total = Counter(
            "row_store_table_full_total",
            "Total inserts rejected because the table was full",
            registry=self._registry,
        )

        self.rows_scanned_total = Counter(
            "row_store_rows_scanned_total",
            "Total rows decoded by select scans",
            registry=self._registry,
        )

        self.info = Info(
            "row_store",
            "Row store build information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def record_statement(self, statement_type: str, status: str, seconds: float) -> None:
        """Count one executed statement and observe its latency."""
        self.statements_total.labels(statement_type=statement_type, status=status).inc()
        self.statement_latency_seconds.labels(statement_type=statement_type).observe(seconds)

    def record_table(self, stats: TableStats) -> None:
        """Publish a table's usage gauges."""
        self.rows.set(stats.row_count)
        self.pages_allocated.set(stats.pages_allocated)


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Start the Prometheus scrape endpoint.

    The process-wide registry is reused when one exists, since metric
    names can only be registered once per CollectorRegistry.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry (replaces the process default)

    Returns:
        The metrics registry being served
    """
    global _metrics
    if registry is not None or _metrics is None:
        _metrics = MetricsRegistry(registry)

    from row_store import __version__
    _metrics.info.info({"version": __version__})

    start_http_server(port, registry=_metrics.registry)
    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
