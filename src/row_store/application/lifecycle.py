"""Table lifecycle: creation and destruction.

Tables are explicit handles owned by the caller; there is no
process-wide table.

Usage:
    from row_store.application import new_table, destroy_table

    table = new_table()
    ...
    destroy_table(table)
"""

from __future__ import annotations

from row_store.adapters.outbound.memory_page_store import MemoryPageStore
from row_store.domain.entities import Table
from row_store.domain.value_objects import PAGE_SIZE, TABLE_MAX_PAGES
from row_store.infrastructure.logging import get_logger

logger = get_logger(__name__)


def new_table(page_size: int = PAGE_SIZE, max_pages: int = TABLE_MAX_PAGES) -> Table:
    """Create an empty table with no pages allocated.

    Args:
        page_size: Size of each page in bytes (must hold at least one row).
        max_pages: Maximum number of pages the table may allocate.

    Returns:
        A new Table with row_count == 0.

    Raises:
        ValueError: If the geometry cannot hold a single row.
    """
    table = Table(MemoryPageStore(page_size=page_size, max_pages=max_pages))
    logger.debug(
        "table_created",
        page_size=page_size,
        max_pages=max_pages,
        max_rows=table.max_rows,
    )
    return table


def destroy_table(table: Table) -> None:
    """Release every page owned by the table."""
    rows = table.row_count
    table.close()
    logger.debug("table_destroyed", rows=rows)
