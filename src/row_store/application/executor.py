"""Statement executor for the row store.

Applies prepared insert and select statements to a table:

    insert: full? -> TABLE_FULL, no mutation
            else  -> encode row into table.append_slot(), then bump row_count
    select: decode slots 0..row_count-1 in order, lazily

Every statement runs to completion synchronously; there are no
intermediate states to observe.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Iterator

from row_store.domain.entities import Row, Statement, StatementType, Table
from row_store.domain.services import RowCodec
from row_store.domain.value_objects import RowNumber
from row_store.infrastructure.logging import get_logger
from row_store.infrastructure.metrics import get_metrics
from row_store.infrastructure.tracing import statement_span
from row_store.ports.inbound.statement_executor import ExecutionResult, ExecutionStatus

if TYPE_CHECKING:
    from row_store.infrastructure.metrics import MetricsRegistry


class RowScan:
    """Lazy, finite, restartable sequence of a table's rows.

    Nothing is cached: each iteration reads row_count afresh and decodes
    the rows straight out of the pages, in row-number order.
    """

    def __init__(
        self,
        table: Table,
        codec: RowCodec,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._table = table
        self._codec = codec
        self._metrics = metrics

    def __iter__(self) -> Iterator[Row]:
        self._table.ensure_open()
        for row_number in range(self._table.row_count):
            slot = self._table.slot_for(RowNumber(row_number))
            row = self._codec.decode(slot.buffer)
            if self._metrics is not None:
                self._metrics.rows_scanned_total.inc()
            yield row

    def __len__(self) -> int:
        return self._table.row_count

    def __repr__(self) -> str:
        return f"RowScan(rows={self._table.row_count})"


class QueryExecutor:
    """Executes prepared statements against a table.

    The executor holds no table state of its own, so one instance can
    serve any number of tables.
    """

    def __init__(
        self,
        codec: RowCodec | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            codec: Row codec (a fresh RowCodec if None).
            metrics: Metrics registry (the process default if None).
        """
        self._codec = codec or RowCodec()
        self._metrics = metrics or get_metrics()
        self._logger = get_logger(__name__)

    @property
    def codec(self) -> RowCodec:
        return self._codec

    def execute(self, statement: Statement, table: Table) -> ExecutionResult:
        """Execute a prepared statement.

        Args:
            statement: The statement to execute.
            table: The table to run it against.

        Returns:
            ExecutionResult with status and, for selects, a RowScan.

        Raises:
            InvalidRowError: If an insert carries a row that does not fit.
            TableClosedError: If the table has been destroyed.
        """
        statement_type = statement.type.value
        start = time.perf_counter()

        with statement_span(statement_type) as span:
            if statement.type == StatementType.INSERT:
                assert statement.row is not None
                result = self.execute_insert(statement.row, table)
            elif statement.type == StatementType.SELECT:
                result = self.execute_select(table)
            else:
                raise ValueError(f"Unsupported statement type: {statement.type}")
            span.set_attribute("row_store.statement.status", result.status.value)
            span.set_attribute("row_store.table.row_count", table.row_count)

        self._metrics.record_statement(
            statement_type, result.status.value, time.perf_counter() - start
        )
        return result

    def execute_insert(self, row: Row, table: Table) -> ExecutionResult:
        """Append one row to the table."""
        table.ensure_open()
        row.validate()

        if table.row_count >= table.max_rows:
            self._logger.info(
                "table_full", row_count=table.row_count, max_rows=table.max_rows
            )
            self._metrics.table_full_total.inc()
            return ExecutionResult.table_full()

        slot = table.append_slot()
        self._codec.encode(row, slot.buffer)
        row_number = table.record_append()

        self._metrics.record_table(table.get_stats())
        self._logger.debug(
            "row_inserted",
            row_number=row_number,
            page_index=slot.page_index,
            byte_offset=slot.byte_offset,
        )
        return ExecutionResult(status=ExecutionStatus.SUCCESS, affected_rows=1)

    def execute_select(self, table: Table) -> ExecutionResult:
        """Return every row of the table, in insertion order."""
        table.ensure_open()
        rows = RowScan(table, self._codec, self._metrics)
        return ExecutionResult(status=ExecutionStatus.SUCCESS, rows=rows)


_default_executor: QueryExecutor | None = None


def get_executor() -> QueryExecutor:
    """Get the process-wide default executor."""
    global _default_executor
    if _default_executor is None:
        _default_executor = QueryExecutor()
    return _default_executor


def execute(statement: Statement, table: Table) -> ExecutionResult:
    """Execute a statement with the default executor."""
    return get_executor().execute(statement, table)
