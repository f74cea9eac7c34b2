"""Pytest configuration and fixtures for row_store tests."""

from __future__ import annotations

from typing import Callable, Generator

import pytest
from prometheus_client import CollectorRegistry

from row_store.adapters.outbound import MemoryPageStore
from row_store.application import QueryExecutor
from row_store.domain.entities import Row, Table
from row_store.domain.value_objects import ROW_SIZE
from row_store.infrastructure.container import Container
from row_store.infrastructure.metrics import MetricsRegistry

# Small geometry: two rows per page, three pages, six rows in total
SMALL_PAGE_SIZE = ROW_SIZE * 2 + 10
SMALL_MAX_PAGES = 3


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def executor(metrics_registry: MetricsRegistry) -> QueryExecutor:
    """Provide an executor reporting into an isolated registry."""
    return QueryExecutor(metrics=metrics_registry)


@pytest.fixture
def table() -> Generator[Table, None, None]:
    """Provide a table with the default geometry."""
    t = Table(MemoryPageStore())
    yield t
    t.close()


@pytest.fixture
def small_table() -> Generator[Table, None, None]:
    """Provide a table that fills up after six rows."""
    t = Table(MemoryPageStore(page_size=SMALL_PAGE_SIZE, max_pages=SMALL_MAX_PAGES))
    yield t
    t.close()


@pytest.fixture
def alice() -> Row:
    return Row(1, "alice", "a@example.com")


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Make sure no test sees another test's container."""
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def make_rows() -> Callable[[int], list[Row]]:
    """Provide a builder of distinct valid rows."""

    def _make(count: int, start: int = 1) -> list[Row]:
        return [
            Row(i, f"user{i}", f"person{i}@example.com")
            for i in range(start, start + count)
        ]

    return _make


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
