"""Row codec: fixed-width binary encoding of rows.

Fields are written at offsets fixed by the schema, with no length prefixes:

    offset 0   id        uint32, little-endian
    offset 4   username  32 bytes, NUL padded
    offset 36  email     255 bytes, NUL padded

Encoding assumes a validated row (see Row.validate). A text value longer
than its region would be cut short by struct, which is why length checks
happen before a row ever reaches the codec.
"""

from __future__ import annotations

import struct
from typing import ClassVar

from row_store.domain.entities.row import TEXT_ENCODING, Row
from row_store.domain.value_objects import ROW_FORMAT, ROW_SIZE


class RowCodec:
    """Converts rows to and from their on-page byte representation.

    The codec is stateless; one instance can serve any number of tables.

    Example:
        >>> codec = RowCodec()
        >>> buffer = bytearray(codec.row_size)
        >>> codec.encode(Row(1, "alice", "a@example.com"), buffer)
        >>> codec.decode(buffer)
        Row(id=1, username='alice', email='a@example.com')
    """

    ROW_STRUCT: ClassVar[struct.Struct] = struct.Struct(ROW_FORMAT)

    @property
    def row_size(self) -> int:
        """Size of one encoded row in bytes."""
        return ROW_SIZE

    def encode(self, row: Row, buffer: bytearray | memoryview, offset: int = 0) -> None:
        """Write `row` into `buffer` at `offset`.

        Args:
            row: A validated row
            buffer: Writable buffer with at least ROW_SIZE bytes past offset
            offset: Byte offset of the row within buffer

        Raises:
            ValueError: If the buffer is too small
        """
        self._check_buffer(buffer, offset)
        self.ROW_STRUCT.pack_into(
            buffer,
            offset,
            row.id,
            row.username.encode(TEXT_ENCODING),
            row.email.encode(TEXT_ENCODING),
        )

    def decode(self, buffer: bytes | bytearray | memoryview, offset: int = 0) -> Row:
        """Read the row stored in `buffer` at `offset`.

        Raises:
            ValueError: If the buffer is too small
        """
        self._check_buffer(buffer, offset)
        row_id, username, email = self.ROW_STRUCT.unpack_from(buffer, offset)
        return Row(
            id=row_id,
            username=username.rstrip(b"\x00").decode(TEXT_ENCODING),
            email=email.rstrip(b"\x00").decode(TEXT_ENCODING),
        )

    def to_bytes(self, row: Row) -> bytes:
        """Encode a row into a fresh ROW_SIZE byte string."""
        buffer = bytearray(ROW_SIZE)
        self.encode(row, buffer)
        return bytes(buffer)

    def _check_buffer(self, buffer: bytes | bytearray | memoryview, offset: int) -> None:
        if offset < 0 or len(buffer) - offset < ROW_SIZE:
            raise ValueError(
                f"Row requires {ROW_SIZE} bytes at offset {offset}, "
                f"buffer has {len(buffer)}"
            )
