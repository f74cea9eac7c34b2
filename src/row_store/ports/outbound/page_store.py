"""Page Store port for fixed-size page memory.

This outbound port defines the contract for the component that owns all
page memory of a table. Pages are allocated lazily on first access and
are never resized, moved or individually freed.

The page store is responsible for:
- Allocating zero-initialised pages on first touch
- Bounding the number of pages (max_pages)
- Releasing all page memory when the table is destroyed
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from row_store.domain.entities.page import Page
    from row_store.domain.value_objects import PageIndex


class PageStore(Protocol):
    """Protocol for page allocation and lookup.

    The page store has no knowledge of page contents or row layout;
    it deals only in whole pages addressed by index.

    Thread Safety:
        Implementations are single-threaded. No locking is required.
    """

    @property
    @abstractmethod
    def page_size(self) -> int:
        """Return the fixed page size in bytes."""
        ...

    @property
    @abstractmethod
    def max_pages(self) -> int:
        """Return the maximum number of pages that may be allocated."""
        ...

    @abstractmethod
    def page_for(self, page_index: PageIndex) -> Page:
        """Return the page at `page_index`, allocating it on first access.

        Args:
            page_index: The page to fetch, in [0, max_pages).

        Returns:
            The page. The same object is returned on every call.

        Raises:
            PageIndexOutOfRangeError: If page_index is outside [0, max_pages).
            PageStoreClosedError: If the store has been closed.
        """
        ...

    @abstractmethod
    def is_allocated(self, page_index: PageIndex) -> bool:
        """Check whether a page has been touched yet."""
        ...

    @abstractmethod
    def get_num_pages(self) -> int:
        """Return the number of allocated pages."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release all page memory.

        After calling close(), the page store should not be used.
        """
        ...


class PageIndexOutOfRangeError(IndexError):
    """Raised when a page index outside [0, max_pages) is requested.

    The table never asks for such a page, so this signals a programming
    error upstream rather than a recoverable condition.
    """

    def __init__(self, page_index: int, max_pages: int) -> None:
        super().__init__(f"Page index {page_index} out of range [0, {max_pages})")
        self.page_index = page_index
        self.max_pages = max_pages


class PageStoreClosedError(RuntimeError):
    """Raised when a closed page store is used."""

    pass
