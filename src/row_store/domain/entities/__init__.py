"""Domain entities for the row store.

Exports:
    Row:
        - Row: Fixed-schema record (id, username, email)
        - InvalidRowError and subclasses: Schema violations

    Page:
        - Page: Fixed-size zero-initialised byte region
        - Slot: Byte location of one row within a page

    Table:
        - Table: Row addressing and row count over a page store
        - TableStats: Monitoring snapshot
        - RowNumberOutOfRangeError, TableClosedError

    Statement:
        - Statement: Parsed insert/select statement
        - StatementType: Statement tag
"""

from row_store.domain.entities.page import Page, Slot
from row_store.domain.entities.row import (
    FieldContainsNulError,
    FieldEncodingError,
    FieldTooLongError,
    IdOutOfRangeError,
    InvalidRowError,
    NegativeIdError,
    Row,
)
from row_store.domain.entities.statement import Statement, StatementType
from row_store.domain.entities.table import (
    RowNumberOutOfRangeError,
    Table,
    TableClosedError,
    TableStats,
)

__all__ = [
    # Row
    "Row",
    "InvalidRowError",
    "NegativeIdError",
    "IdOutOfRangeError",
    "FieldTooLongError",
    "FieldContainsNulError",
    "FieldEncodingError",
    # Page
    "Page",
    "Slot",
    # Table
    "Table",
    "TableStats",
    "RowNumberOutOfRangeError",
    "TableClosedError",
    # Statement
    "Statement",
    "StatementType",
]
