"""Outbound adapters - implementations of outbound ports.

Exports:
    - MemoryPageStore: Arena of lazily allocated in-memory pages
"""

from row_store.adapters.outbound.memory_page_store import MemoryPageStore

__all__ = [
    "MemoryPageStore",
]
