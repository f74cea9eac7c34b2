"""Unit tests for QueryExecutor."""

from __future__ import annotations

from typing import Callable

import pytest

from row_store.application import QueryExecutor, RowScan
from row_store.domain.entities import (
    FieldTooLongError,
    NegativeIdError,
    Row,
    Statement,
    StatementType,
    Table,
)
from row_store.infrastructure.metrics import MetricsRegistry
from row_store.ports.inbound import ExecutionStatus


def select_all(executor: QueryExecutor, table: Table) -> list[Row]:
    return list(executor.execute(Statement.select(), table).rows)


@pytest.mark.unit
class TestInsert:
    """Tests for insert execution."""

    def test_insert_then_select(
        self, executor: QueryExecutor, table: Table, alice: Row
    ) -> None:
        """An inserted row comes back from select unchanged."""
        result = executor.execute(Statement.insert(alice), table)

        assert result.status == ExecutionStatus.SUCCESS
        assert result.success
        assert result.affected_rows == 1
        assert list(result.rows) == []
        assert table.row_count == 1
        assert select_all(executor, table) == [alice]

    def test_insertion_order(
        self,
        executor: QueryExecutor,
        table: Table,
        make_rows: Callable[..., list[Row]],
    ) -> None:
        """Select returns rows in the order they were inserted."""
        rows = make_rows(30)
        for row in reversed(rows):
            executor.execute(Statement.insert(row), table)

        assert select_all(executor, table) == list(reversed(rows))

    def test_duplicate_ids_allowed(self, executor: QueryExecutor, table: Table) -> None:
        """Ids are not unique keys."""
        executor.execute(Statement.insert(Row(1, "a", "a@x")), table)
        executor.execute(Statement.insert(Row(1, "b", "b@x")), table)

        assert [row.username for row in select_all(executor, table)] == ["a", "b"]

    def test_table_full(
        self,
        executor: QueryExecutor,
        small_table: Table,
        make_rows: Callable[..., list[Row]],
    ) -> None:
        """Inserting into a full table reports TABLE_FULL and changes nothing."""
        rows = make_rows(small_table.max_rows)
        for row in rows:
            assert executor.execute(Statement.insert(row), small_table).success

        result = executor.execute(Statement.insert(Row(99, "late", "l@x")), small_table)

        assert result.status == ExecutionStatus.TABLE_FULL
        assert not result.success
        assert result.affected_rows == 0
        assert small_table.row_count == small_table.max_rows
        assert select_all(executor, small_table) == rows

    def test_invalid_row_not_written(self, executor: QueryExecutor, table: Table) -> None:
        """Rows that do not fit raise before anything is written."""
        with pytest.raises(FieldTooLongError):
            executor.execute(Statement.insert(Row(1, "x" * 33, "e")), table)
        with pytest.raises(NegativeIdError):
            executor.execute_insert(Row(-1, "a", "b"), table)

        assert table.row_count == 0
        assert table.get_stats().pages_allocated == 0

    def test_rows_cross_page_boundary(
        self,
        executor: QueryExecutor,
        small_table: Table,
        make_rows: Callable[..., list[Row]],
    ) -> None:
        """Rows on later pages decode correctly."""
        rows = make_rows(5)
        for row in rows:
            executor.execute(Statement.insert(row), small_table)

        assert small_table.get_stats().pages_allocated == 3
        assert select_all(executor, small_table) == rows


@pytest.mark.unit
class TestSelect:
    """Tests for select execution."""

    def test_select_empty(self, executor: QueryExecutor, table: Table) -> None:
        """Selecting from an empty table succeeds with no rows."""
        result = executor.execute(Statement.select(), table)

        assert result.status == ExecutionStatus.SUCCESS
        assert isinstance(result.rows, RowScan)
        assert list(result.rows) == []
        assert table.get_stats().pages_allocated == 0

    def test_select_does_not_mutate(
        self, executor: QueryExecutor, table: Table, alice: Row
    ) -> None:
        """Selecting leaves the row count alone."""
        executor.execute(Statement.insert(alice), table)

        select_all(executor, table)
        select_all(executor, table)

        assert table.row_count == 1

    def test_scan_is_restartable(
        self, executor: QueryExecutor, table: Table, alice: Row
    ) -> None:
        """A scan can be iterated more than once with the same result."""
        executor.execute(Statement.insert(alice), table)
        rows = executor.execute(Statement.select(), table).rows

        assert list(rows) == [alice]
        assert list(rows) == [alice]
        assert len(rows) == 1  # type: ignore[arg-type]

    def test_scan_sees_later_inserts(
        self, executor: QueryExecutor, table: Table, alice: Row
    ) -> None:
        """Each iteration reads the current row count."""
        rows = executor.execute(Statement.select(), table).rows
        assert list(rows) == []

        executor.execute(Statement.insert(alice), table)

        assert list(rows) == [alice]


@pytest.mark.unit
class TestExecutorMetrics:
    """Tests for executor instrumentation."""

    def _sample(self, metrics: MetricsRegistry, name: str, labels: dict | None = None) -> float:
        value = metrics.registry.get_sample_value(name, labels or {})
        return value or 0.0

    def test_statement_counters(
        self,
        executor: QueryExecutor,
        metrics_registry: MetricsRegistry,
        small_table: Table,
        make_rows: Callable[..., list[Row]],
    ) -> None:
        """Statements are counted by type and outcome."""
        for row in make_rows(small_table.max_rows + 1):
            executor.execute(Statement.insert(row), small_table)
        select_all(executor, small_table)

        assert self._sample(
            metrics_registry,
            "row_store_statements_total",
            {"statement_type": "insert", "status": "success"},
        ) == 6
        assert self._sample(
            metrics_registry,
            "row_store_statements_total",
            {"statement_type": "insert", "status": "table_full"},
        ) == 1
        assert self._sample(
            metrics_registry,
            "row_store_statements_total",
            {"statement_type": "select", "status": "success"},
        ) == 1
        assert self._sample(metrics_registry, "row_store_table_full_total") == 1
        assert self._sample(metrics_registry, "row_store_rows_scanned_total") == 6
        assert self._sample(metrics_registry, "row_store_rows") == 6
        assert self._sample(metrics_registry, "row_store_pages_allocated") == 3

    def test_latency_recorded(
        self,
        executor: QueryExecutor,
        metrics_registry: MetricsRegistry,
        table: Table,
    ) -> None:
        """Every statement observes the latency histogram."""
        executor.execute(Statement.select(), table)

        assert self._sample(
            metrics_registry,
            "row_store_statement_latency_seconds_count",
            {"statement_type": "select"},
        ) == 1


@pytest.mark.unit
class TestStatement:
    """Tests for Statement construction."""

    def test_insert_requires_row(self) -> None:
        """An insert statement carries exactly one row."""
        with pytest.raises(ValueError):
            Statement(StatementType.INSERT)

    def test_select_has_no_row(self, alice: Row) -> None:
        """A select statement carries no row."""
        with pytest.raises(ValueError):
            Statement(StatementType.SELECT, alice)

    def test_constructors(self, alice: Row) -> None:
        """The classmethod constructors set the type."""
        assert Statement.insert(alice).type == StatementType.INSERT
        assert Statement.insert(alice).row == alice
        assert Statement.select().row is None
