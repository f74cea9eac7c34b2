"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (StatementExecutor)
- Outbound ports: Dependencies of the core (PageStore)

Adapters implement these ports with concrete functionality.
"""

from row_store.ports.inbound import ExecutionResult, ExecutionStatus, StatementExecutor
from row_store.ports.outbound import (
    PageIndexOutOfRangeError,
    PageStore,
    PageStoreClosedError,
)

__all__ = [
    # Inbound ports
    "ExecutionResult",
    "ExecutionStatus",
    "StatementExecutor",
    # Outbound ports
    "PageStore",
    "PageIndexOutOfRangeError",
    "PageStoreClosedError",
]
