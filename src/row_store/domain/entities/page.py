"""Fixed-size memory page and the slot views handed out from it.

A page is a zero-initialised byte region of a fixed size. It holds an
integral number of encoded rows; any remainder is padding and is never
addressed. Pages are never resized or moved once allocated, so a slot
(a memoryview into the page) stays valid for as long as the page lives.
"""

from __future__ import annotations

from dataclasses import dataclass

from row_store.domain.value_objects import PAGE_SIZE, PageIndex, RowNumber


class Page:
    """A fixed-size contiguous byte region.

    Thread Safety:
        This class is NOT thread-safe. The row store is single-threaded.

    Example:
        >>> page = Page(PageIndex(0), page_size=4096)
        >>> view = page.view(0, 4)
        >>> view[:] = b"abcd"
        >>> page.to_bytes()[:4]
        b'abcd'
    """

    def __init__(self, page_index: PageIndex, *, page_size: int = PAGE_SIZE) -> None:
        """Allocate a zero-filled page.

        Args:
            page_index: Position of the page in its table
            page_size: Size of the page in bytes
        """
        if page_size < 1:
            raise ValueError(f"Page size must be >= 1, got {page_size}")
        self._page_index = page_index
        self._data = bytearray(page_size)

    @property
    def page_index(self) -> PageIndex:
        """Get the page position."""
        return self._page_index

    @property
    def page_size(self) -> int:
        """Get the page size in bytes."""
        return len(self._data)

    def view(self, offset: int, length: int) -> memoryview:
        """Return a writable view of `length` bytes starting at `offset`.

        Raises:
            ValueError: If the range falls outside the page
        """
        if offset < 0 or length < 0 or offset + length > len(self._data):
            raise ValueError(
                f"Range [{offset}, {offset + length}) outside page of {len(self._data)} bytes"
            )
        return memoryview(self._data)[offset : offset + length]

    def to_bytes(self) -> bytes:
        """Copy the page contents."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Page(index={self._page_index}, size={len(self._data)})"


@dataclass(frozen=True, eq=False)
class Slot:
    """The byte location of one row's encoded data within a page.

    Attributes:
        row_number: Logical row this slot holds
        page_index: Page containing the slot
        byte_offset: Offset of the slot from the start of the page
        buffer: Writable view over exactly one row's bytes
    """

    row_number: RowNumber
    page_index: PageIndex
    byte_offset: int
    buffer: memoryview

    @property
    def size(self) -> int:
        return len(self.buffer)

    @property
    def byte_range(self) -> tuple[int, int]:
        """Half-open [start, end) byte range within the page."""
        return self.byte_offset, self.byte_offset + len(self.buffer)

    def overlaps(self, other: Slot) -> bool:
        """Check whether two slots share any byte."""
        if self.page_index != other.page_index:
            return False
        start, end = self.byte_range
        other_start, other_end = other.byte_range
        return start < other_end and other_start < end
