"""Table entity: row addressing on top of a page store.

The table maps logical row numbers onto (page, byte offset) pairs:

    page_index  = row_number // rows_per_page
    byte_offset = (row_number % rows_per_page) * row_size

and tracks row_count, which is both the scan bound for selects and the
position of the next insert. Rows are only ever appended; there is no
update or delete.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from row_store.domain.entities.page import Slot
from row_store.domain.value_objects import ROW_SIZE, PageIndex, RowNumber, TableLayout

if TYPE_CHECKING:
    from row_store.ports.outbound.page_store import PageStore

logger = logging.getLogger(__name__)


@dataclass
class TableStats:
    """Statistics for table monitoring."""

    row_count: int
    max_rows: int
    rows_per_page: int
    row_size: int
    page_size: int
    pages_allocated: int
    max_pages: int

    @property
    def fill_ratio(self) -> float:
        """Fraction of the row capacity in use."""
        return self.row_count / self.max_rows if self.max_rows > 0 else 0.0


class Table:
    """A fixed-schema table of uniform-size rows.

    The table owns its page store. Pages are allocated by the store the
    first time a slot inside them is requested.

    Thread Safety:
        This class is NOT thread-safe. The row store is single-threaded.

    Example:
        >>> table = Table(MemoryPageStore(page_size=4096, max_pages=2))
        >>> table.max_rows
        28
        >>> slot = table.append_slot()
        >>> (slot.page_index, slot.byte_offset)
        (0, 0)
    """

    def __init__(self, page_store: PageStore, *, row_size: int = ROW_SIZE) -> None:
        """Initialize an empty table.

        Args:
            page_store: Store that owns the table's page memory
            row_size: Size of one encoded row in bytes
        """
        self._page_store = page_store
        self._layout = TableLayout(
            page_size=page_store.page_size,
            max_pages=page_store.max_pages,
            row_size=row_size,
        )
        self._row_count = 0
        self._closed = False

    @property
    def layout(self) -> TableLayout:
        return self._layout

    @property
    def row_count(self) -> int:
        """Get the number of live rows."""
        return self._row_count

    @property
    def rows_per_page(self) -> int:
        return self._layout.rows_per_page

    @property
    def max_rows(self) -> int:
        return self._layout.max_rows

    @property
    def is_full(self) -> bool:
        return self._row_count >= self._layout.max_rows

    @property
    def is_closed(self) -> bool:
        return self._closed

    def slot_for(self, row_number: RowNumber) -> Slot:
        """Locate the bytes of a row.

        This is the single addressing function used by both the insert and
        the select path. The containing page is allocated on demand.

        Args:
            row_number: Row to locate, in [0, max_rows)

        Returns:
            The slot holding (or about to hold) the row.

        Raises:
            RowNumberOutOfRangeError: If row_number is outside [0, max_rows)
            TableClosedError: If the table has been destroyed
        """
        self.ensure_open()
        if row_number < 0 or row_number >= self._layout.max_rows:
            raise RowNumberOutOfRangeError(row_number, self._layout.max_rows)

        rows_per_page = self._layout.rows_per_page
        row_size = self._layout.row_size
        page_index = PageIndex(row_number // rows_per_page)
        byte_offset = (row_number % rows_per_page) * row_size

        page = self._page_store.page_for(page_index)
        return Slot(
            row_number=row_number,
            page_index=page_index,
            byte_offset=byte_offset,
            buffer=page.view(byte_offset, row_size),
        )

    def append_slot(self) -> Slot:
        """Return the slot for the next row to be inserted.

        Raises:
            RowNumberOutOfRangeError: If the table is full
        """
        return self.slot_for(RowNumber(self._row_count))

    def record_append(self) -> RowNumber:
        """Make the row written into append_slot() visible.

        Returns:
            The row number of the newly visible row.

        Raises:
            RowNumberOutOfRangeError: If the table is already full
        """
        self.ensure_open()
        if self.is_full:
            raise RowNumberOutOfRangeError(self._row_count, self._layout.max_rows)
        row_number = RowNumber(self._row_count)
        self._row_count += 1
        return row_number

    def get_stats(self) -> TableStats:
        """Return table statistics for monitoring."""
        return TableStats(
            row_count=self._row_count,
            max_rows=self._layout.max_rows,
            rows_per_page=self._layout.rows_per_page,
            row_size=self._layout.row_size,
            page_size=self._layout.page_size,
            pages_allocated=self._page_store.get_num_pages(),
            max_pages=self._layout.max_pages,
        )

    def close(self) -> None:
        """Release all pages. The table is unusable afterwards."""
        if self._closed:
            return
        self._page_store.close()
        self._row_count = 0
        self._closed = True
        logger.debug("table_closed")

    def ensure_open(self) -> None:
        """Raise TableClosedError if the table has been destroyed."""
        if self._closed:
            raise TableClosedError("Table has been destroyed")

    def __len__(self) -> int:
        return self._row_count

    def __enter__(self) -> Table:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Table(rows={self._row_count}/{self._layout.max_rows}, "
            f"pages={self._page_store.get_num_pages()}/{self._layout.max_pages})"
        )


class RowNumberOutOfRangeError(IndexError):
    """Raised when a slot is requested for a row number outside [0, max_rows)."""

    def __init__(self, row_number: int, max_rows: int) -> None:
        super().__init__(f"Row number {row_number} out of range [0, {max_rows})")
        self.row_number = row_number
        self.max_rows = max_rows


class TableClosedError(RuntimeError):
    """Raised when a destroyed table is used."""

    pass
