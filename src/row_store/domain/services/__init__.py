"""Domain services for the row store.

Exports:
    - RowCodec: Fixed-width row encoding/decoding
"""

from row_store.domain.services.row_codec import RowCodec

__all__ = [
    "RowCodec",
]
