"""Dependency injection container for the row store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from opentelemetry import trace

from row_store.application.executor import QueryExecutor
from row_store.application.lifecycle import new_table
from row_store.domain.entities import Table
from row_store.infrastructure.config import Config, get_config
from row_store.infrastructure.logging import setup_logging, get_logger
from row_store.infrastructure.metrics import MetricsRegistry, get_metrics
from row_store.infrastructure.tracing import setup_tracing


@dataclass
class Container:
    """Dependency injection container for row store components."""

    config: Config
    logger: Any
    tracer: trace.Tracer
    metrics: MetricsRegistry

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        *,
        metrics: MetricsRegistry | None = None,
    ) -> Container:
        """Create and initialize the container with all dependencies.

        Args:
            config: Configuration (the environment-derived config if None).
            metrics: Metrics registry (the process default if None).
        """
        config = config or get_config()
        observability = config.observability

        setup_logging(level=observability.log_level, log_format=observability.log_format)
        logger = get_logger("row_store")
        tracer = setup_tracing(
            service_name=observability.otel_service_name,
            otlp_endpoint=observability.otel_endpoint,
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics or get_metrics(),
        )

        logger.info(
            "row_store_container_initialized",
            page_size=config.storage.page_size,
            max_pages=config.storage.max_pages,
            max_rows=config.storage.layout.max_rows,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None

    def new_table(self) -> Table:
        """Create an empty table sized from the storage config."""
        return new_table(
            page_size=self.config.storage.page_size,
            max_pages=self.config.storage.max_pages,
        )

    def new_executor(self) -> QueryExecutor:
        """Create an executor reporting into this container's metrics."""
        return QueryExecutor(metrics=self.metrics)


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
