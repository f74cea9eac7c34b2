"""Statement preparation: turns a line of text into a validated Statement.

Supported statements:
    - insert <id> <username> <email>
    - select

All field validation happens here, before the executor is involved:
ids must fit an unsigned 32-bit integer and text fields must fit their
fixed byte regions. Nothing is ever truncated.
"""

from __future__ import annotations

import re
from enum import Enum

from row_store.domain.entities import (
    FieldTooLongError,
    IdOutOfRangeError,
    InvalidRowError,
    NegativeIdError,
    Row,
    Statement,
)


_ID_PATTERN = re.compile(r"-?[0-9]+")


class PrepareResult(Enum):
    """Reasons a line could not be prepared."""

    SYNTAX_ERROR = "syntax_error"
    NEGATIVE_ID = "negative_id"
    ID_TOO_LARGE = "id_too_large"
    STRING_TOO_LONG = "string_too_long"
    UNRECOGNIZED_STATEMENT = "unrecognized_statement"


class StatementParser:
    """Parser for the row store's statement language.

    Example:
        >>> parser = StatementParser()
        >>> parser.parse("insert 1 alice a@example.com")
        Statement(type=<StatementType.INSERT: 'insert'>, row=Row(id=1, username='alice', email='a@example.com'))
        >>> parser.parse("select").type
        <StatementType.SELECT: 'select'>
    """

    def parse(self, text: str) -> Statement:
        """Parse one statement.

        Args:
            text: The statement text.

        Returns:
            A validated Statement.

        Raises:
            PrepareError: If the text cannot be prepared.
        """
        stripped = text.strip()
        tokens = stripped.split()
        keyword = tokens[0] if tokens else ""

        if keyword == "insert":
            return self._parse_insert(tokens)
        if keyword == "select":
            if len(tokens) != 1:
                raise PrepareError(
                    PrepareResult.SYNTAX_ERROR, "Syntax error. Could not parse statement."
                )
            return Statement.select()

        raise PrepareError(
            PrepareResult.UNRECOGNIZED_STATEMENT,
            f"Unrecognized keyword at start of '{stripped}'.",
        )

    def _parse_insert(self, tokens: list[str]) -> Statement:
        """Parse the arguments of an insert statement."""
        if len(tokens) != 4:
            raise PrepareError(
                PrepareResult.SYNTAX_ERROR, "Syntax error. Could not parse statement."
            )

        _, id_text, username, email = tokens
        if not _ID_PATTERN.fullmatch(id_text):
            raise PrepareError(
                PrepareResult.SYNTAX_ERROR, "Syntax error. Could not parse statement."
            )
        row_id = int(id_text)

        row = Row(id=row_id, username=username, email=email)
        try:
            row.validate()
        except NegativeIdError as e:
            raise PrepareError(PrepareResult.NEGATIVE_ID, "ID must be positive.") from e
        except IdOutOfRangeError as e:
            raise PrepareError(PrepareResult.ID_TOO_LARGE, "ID is too large.") from e
        except FieldTooLongError as e:
            raise PrepareError(PrepareResult.STRING_TOO_LONG, "String is too long.") from e
        except InvalidRowError as e:
            raise PrepareError(
                PrepareResult.SYNTAX_ERROR, "Syntax error. Could not parse statement."
            ) from e

        return Statement.insert(row)


def prepare_statement(text: str) -> Statement:
    """Prepare one statement with a default parser."""
    return StatementParser().parse(text)


class PrepareError(Exception):
    """Exception raised when a statement cannot be prepared."""

    def __init__(self, result: PrepareResult, message: str) -> None:
        super().__init__(message)
        self.result = result
        self.message = message
