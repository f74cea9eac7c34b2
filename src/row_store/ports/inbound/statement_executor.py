"""Statement Executor port.

This inbound port defines the contract offered to callers that hold a
prepared statement and a table handle: the interactive loop, the HTTP
surface, or any other embedding process.

Key concepts:
- Statements run to completion synchronously
- A full table is a result, not an exception
- Select results are lazy and recomputed on every iteration
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from row_store.domain.entities import Row, Statement, Table


class ExecutionStatus(Enum):
    """Outcome of executing a statement."""

    SUCCESS = "success"
    TABLE_FULL = "table_full"


@dataclass
class ExecutionResult:
    """Result of statement execution."""

    status: ExecutionStatus
    rows: Iterable[Row] = ()
    affected_rows: int = 0

    @property
    def success(self) -> bool:
        return self.status == ExecutionStatus.SUCCESS

    @classmethod
    def table_full(cls) -> ExecutionResult:
        return cls(status=ExecutionStatus.TABLE_FULL)


class StatementExecutor(Protocol):
    """Protocol for statement execution.

    Example:
        result = executor.execute(Statement.insert(row), table)
        if result.status == ExecutionStatus.TABLE_FULL:
            ...
        for row in executor.execute(Statement.select(), table).rows:
            print(row)
    """

    @abstractmethod
    def execute(self, statement: Statement, table: Table) -> ExecutionResult:
        """Apply a prepared statement to a table.

        Args:
            statement: A prepared insert or select statement.
            table: The table to run it against.

        Returns:
            ExecutionResult with status and, for selects, the rows.

        Raises:
            InvalidRowError: If an insert carries a row that does not fit
                the schema. Nothing is written.
        """
        ...
