"""In-memory arena implementation of the PageStore port.

Pages live in a fixed-length list of optional slots, one per possible page
index. A slot is filled on first access and is never reassigned, so page
objects (and views into them) stay put for the lifetime of the store.
"""

from __future__ import annotations

import logging

from row_store.domain.entities.page import Page
from row_store.domain.value_objects import PAGE_SIZE, TABLE_MAX_PAGES, PageIndex
from row_store.ports.outbound.page_store import (
    PageIndexOutOfRangeError,
    PageStoreClosedError,
)

logger = logging.getLogger(__name__)


class MemoryPageStore:
    """Fixed-capacity arena of lazily allocated pages.

    Attributes:
        page_size: Size of every page in bytes.
        max_pages: Number of page slots in the arena.
    """

    def __init__(self, page_size: int = PAGE_SIZE, max_pages: int = TABLE_MAX_PAGES) -> None:
        """Initialize an empty arena.

        Args:
            page_size: Size of every page in bytes.
            max_pages: Maximum number of pages.

        Raises:
            ValueError: If page_size or max_pages < 1.
        """
        if page_size < 1:
            raise ValueError(f"Page size must be >= 1, got {page_size}")
        if max_pages < 1:
            raise ValueError(f"Max pages must be >= 1, got {max_pages}")

        self._page_size = page_size
        self._max_pages = max_pages
        self._pages: list[Page | None] = [None] * max_pages
        self._allocated = 0
        self._closed = False

    @property
    def page_size(self) -> int:
        """Return the fixed page size in bytes."""
        return self._page_size

    @property
    def max_pages(self) -> int:
        """Return the maximum number of pages."""
        return self._max_pages

    @property
    def is_closed(self) -> bool:
        return self._closed

    def page_for(self, page_index: PageIndex) -> Page:
        """Return the page at `page_index`, allocating it on first access."""
        if self._closed:
            raise PageStoreClosedError("Page store is closed")
        if page_index < 0 or page_index >= self._max_pages:
            raise PageIndexOutOfRangeError(page_index, self._max_pages)

        page = self._pages[page_index]
        if page is None:
            page = Page(page_index, page_size=self._page_size)
            self._pages[page_index] = page
            self._allocated += 1
            logger.debug(
                "page_allocated page_index=%d allocated=%d max_pages=%d",
                page_index,
                self._allocated,
                self._max_pages,
            )
        return page

    def is_allocated(self, page_index: PageIndex) -> bool:
        """Check whether a page has been touched yet."""
        if page_index < 0 or page_index >= self._max_pages:
            return False
        return self._pages[page_index] is not None

    def get_num_pages(self) -> int:
        """Return the number of allocated pages."""
        return self._allocated

    def close(self) -> None:
        """Drop every page. Safe to call more than once."""
        if self._closed:
            return
        released = self._allocated
        self._pages = [None] * self._max_pages
        self._allocated = 0
        self._closed = True
        logger.debug("pages_released count=%d", released)

    def __repr__(self) -> str:
        return (
            f"MemoryPageStore(page_size={self._page_size}, "
            f"allocated={self._allocated}/{self._max_pages})"
        )
