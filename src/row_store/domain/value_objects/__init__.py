"""Value objects for the row store domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Identifiers:
        - PageIndex: Type-safe page position
        - RowNumber: Type-safe logical row index

    Layout:
        - TableLayout: Page/row geometry (rows_per_page, max_rows)
        - ROW_SIZE, ROW_FORMAT, field sizes and offsets
        - PAGE_SIZE, TABLE_MAX_PAGES: Default table geometry
"""

from row_store.domain.value_objects.identifiers import PageIndex, RowNumber
from row_store.domain.value_objects.layout import (
    COLUMN_EMAIL_SIZE,
    COLUMN_USERNAME_SIZE,
    EMAIL_OFFSET,
    ID_MAX,
    ID_OFFSET,
    ID_SIZE,
    PAGE_SIZE,
    ROW_FORMAT,
    ROW_SIZE,
    TABLE_MAX_PAGES,
    USERNAME_OFFSET,
    TableLayout,
)

__all__ = [
    # Identifiers
    "PageIndex",
    "RowNumber",
    # Layout
    "TableLayout",
    "ID_SIZE",
    "ID_OFFSET",
    "ID_MAX",
    "COLUMN_USERNAME_SIZE",
    "USERNAME_OFFSET",
    "COLUMN_EMAIL_SIZE",
    "EMAIL_OFFSET",
    "ROW_SIZE",
    "ROW_FORMAT",
    "PAGE_SIZE",
    "TABLE_MAX_PAGES",
]
