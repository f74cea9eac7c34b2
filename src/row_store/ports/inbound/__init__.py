"""Inbound ports - APIs offered to callers of the row store."""

from row_store.ports.inbound.statement_executor import (
    ExecutionResult,
    ExecutionStatus,
    StatementExecutor,
)

__all__ = [
    "ExecutionResult",
    "ExecutionStatus",
    "StatementExecutor",
]
