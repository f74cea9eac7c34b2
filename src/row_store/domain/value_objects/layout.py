"""Fixed on-page layout of rows and pages.

Rows are packed back to back inside each page with no per-row metadata:

    ┌──────────────────────────────────────────────────────────────┐
    │ Page (PAGE_SIZE bytes)                                       │
    │ ┌──────────┬──────────┬─────┬────────────────┬─────────────┐ │
    │ │  Row 0   │  Row 1   │ ... │ Row n-1        │  padding    │ │
    │ └──────────┴──────────┴─────┴────────────────┴─────────────┘ │
    └──────────────────────────────────────────────────────────────┘

    Row (ROW_SIZE = 291 bytes)
    ┌────────┬──────────────────┬──────────────────────────────────┐
    │ id     │ username         │ email                            │
    │ (4B)   │ (32B, NUL padded)│ (255B, NUL padded)               │
    └────────┴──────────────────┴──────────────────────────────────┘

The layout is an in-memory contract only. It is never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

ID_SIZE = 4
COLUMN_USERNAME_SIZE = 32
COLUMN_EMAIL_SIZE = 255

ID_OFFSET = 0
USERNAME_OFFSET = ID_OFFSET + ID_SIZE
EMAIL_OFFSET = USERNAME_OFFSET + COLUMN_USERNAME_SIZE
ROW_SIZE = ID_SIZE + COLUMN_USERNAME_SIZE + COLUMN_EMAIL_SIZE

# little-endian: uint32, 32 bytes, 255 bytes
ROW_FORMAT = f"<I{COLUMN_USERNAME_SIZE}s{COLUMN_EMAIL_SIZE}s"

ID_MAX = 2**32 - 1

PAGE_SIZE = 4096
TABLE_MAX_PAGES = 100


@dataclass(frozen=True, slots=True)
class TableLayout:
    """Geometry of a table: how rows map onto pages.

    Attributes:
        page_size: Size of every page in bytes
        max_pages: Upper bound on the number of pages a table may allocate
        row_size: Size of one encoded row in bytes

    Example:
        >>> layout = TableLayout(page_size=4096, max_pages=100)
        >>> layout.rows_per_page
        14
        >>> layout.max_rows
        1400
    """

    page_size: int = PAGE_SIZE
    max_pages: int = TABLE_MAX_PAGES
    row_size: int = ROW_SIZE

    def __post_init__(self) -> None:
        """Validate the geometry."""
        if self.row_size < 1:
            raise ValueError(f"row_size must be positive, got {self.row_size}")
        if self.page_size < self.row_size:
            raise ValueError(
                f"page_size must hold at least one row ({self.row_size} bytes), "
                f"got {self.page_size}"
            )
        if self.max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {self.max_pages}")

    @property
    def rows_per_page(self) -> int:
        """Number of whole rows that fit in one page."""
        return self.page_size // self.row_size

    @property
    def max_rows(self) -> int:
        """Hard cap on the number of rows in a table."""
        return self.rows_per_page * self.max_pages

    @property
    def page_padding(self) -> int:
        """Unused bytes at the end of every page."""
        return self.page_size - self.rows_per_page * self.row_size
