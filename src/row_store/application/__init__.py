"""Application layer for the row store.

The application layer orchestrates domain logic to fulfill use cases.

Exports:
    Executor:
        - QueryExecutor: Applies insert/select statements to a table
        - RowScan: Lazy, restartable select result
        - execute: Run a statement with the default executor
    Lifecycle:
        - new_table: Create an empty table
        - destroy_table: Release a table's pages
"""

from row_store.application.executor import QueryExecutor, RowScan, execute, get_executor
from row_store.application.lifecycle import destroy_table, new_table

__all__ = [
    "QueryExecutor",
    "RowScan",
    "execute",
    "get_executor",
    "new_table",
    "destroy_table",
]
