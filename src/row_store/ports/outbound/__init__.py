"""Outbound ports - interfaces for the memory the row store depends on."""

from row_store.ports.outbound.page_store import (
    PageIndexOutOfRangeError,
    PageStore,
    PageStoreClosedError,
)

__all__ = [
    "PageStore",
    "PageIndexOutOfRangeError",
    "PageStoreClosedError",
]
