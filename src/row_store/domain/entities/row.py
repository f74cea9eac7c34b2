"""Row entity: one fixed-schema record.

A row is a plain value (id, username, email). Its text fields are stored in
fixed-capacity byte regions, so a row must be validated before it is
encoded: values that do not fit are rejected, never truncated.
"""

from __future__ import annotations

from dataclasses import dataclass

from row_store.domain.value_objects import COLUMN_EMAIL_SIZE, COLUMN_USERNAME_SIZE, ID_MAX

TEXT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class Row:
    """A fixed-schema record.

    Attributes:
        id: Numeric identifier, stored as an unsigned 32-bit integer
        username: Up to 32 bytes of UTF-8 text
        email: Up to 255 bytes of UTF-8 text

    Example:
        >>> row = Row(1, "alice", "a@example.com")
        >>> row.validate()
        >>> str(row)
        '(1, alice, a@example.com)'
    """

    id: int
    username: str
    email: str

    def validate(self) -> None:
        """Check that the row fits the on-page layout.

        Raises:
            NegativeIdError: If id is negative
            IdOutOfRangeError: If id does not fit in 32 bits (or is not an int)
            FieldTooLongError: If a text field exceeds its byte capacity
            FieldContainsNulError: If a text field contains a NUL character
            FieldEncodingError: If a text field is not encodable as UTF-8
        """
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise IdOutOfRangeError(f"id must be an integer, got {type(self.id).__name__}")
        if self.id < 0:
            raise NegativeIdError(f"id must be non-negative, got {self.id}")
        if self.id > ID_MAX:
            raise IdOutOfRangeError(f"id must be <= {ID_MAX}, got {self.id}")

        _check_text("username", self.username, COLUMN_USERNAME_SIZE)
        _check_text("email", self.email, COLUMN_EMAIL_SIZE)

    def is_valid(self) -> bool:
        """Return True if validate() would not raise."""
        try:
            self.validate()
        except InvalidRowError:
            return False
        return True

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "username": self.username, "email": self.email}

    def __str__(self) -> str:
        return f"({self.id}, {self.username}, {self.email})"


def _check_text(field_name: str, value: str, capacity: int) -> None:
    if not isinstance(value, str):
        raise FieldTooLongError(
            field_name, f"{field_name} must be a string, got {type(value).__name__}"
        )
    if "\x00" in value:
        raise FieldContainsNulError(field_name, f"{field_name} must not contain NUL characters")
    try:
        size = len(value.encode(TEXT_ENCODING))
    except UnicodeEncodeError as e:
        raise FieldEncodingError(
            field_name, f"{field_name} is not valid {TEXT_ENCODING} text"
        ) from e
    if size > capacity:
        raise FieldTooLongError(
            field_name, f"{field_name} is {size} bytes, capacity is {capacity}"
        )


class InvalidRowError(ValueError):
    """Raised when a row does not fit the fixed schema."""

    pass


class NegativeIdError(InvalidRowError):
    """Raised when a row id is negative."""

    pass


class IdOutOfRangeError(InvalidRowError):
    """Raised when a row id does not fit in an unsigned 32-bit field."""

    pass


class FieldTooLongError(InvalidRowError):
    """Raised when a text field exceeds its fixed byte capacity."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name


class FieldContainsNulError(InvalidRowError):
    """Raised when a text field contains the NUL padding byte."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name


class FieldEncodingError(InvalidRowError):
    """Raised when a text field cannot be encoded, e.g. a lone surrogate."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name
