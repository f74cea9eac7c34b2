"""Type-safe primitives for addressing pages and rows.

These value objects keep page indices and row numbers apart from
each other and from raw integers at type-checking time.
"""

from __future__ import annotations

from typing import NewType

PageIndex = NewType("PageIndex", int)
"""Zero-based position of a page in a table's page array."""

RowNumber = NewType("RowNumber", int)
"""Zero-based logical index of a row within a table, independent of page boundaries."""
