"""Unit tests for the statement parser."""

from __future__ import annotations

import pytest

from row_store.adapters.inbound.statement_parser import (
    PrepareError,
    PrepareResult,
    StatementParser,
    prepare_statement,
)
from row_store.domain.entities import Row, StatementType


@pytest.fixture
def parser() -> StatementParser:
    return StatementParser()


@pytest.mark.unit
class TestParseInsert:
    """Tests for parsing insert statements."""

    def test_insert(self, parser: StatementParser) -> None:
        """A well-formed insert yields its row."""
        statement = parser.parse("insert 1 alice a@example.com")

        assert statement.type == StatementType.INSERT
        assert statement.row == Row(1, "alice", "a@example.com")

    def test_surrounding_whitespace(self, parser: StatementParser) -> None:
        """Leading, trailing and repeated whitespace is ignored."""
        statement = parser.parse("  insert   2  bob\tb@example.com \n")
        assert statement.row == Row(2, "bob", "b@example.com")

    def test_missing_fields(self, parser: StatementParser) -> None:
        """Inserts with too few arguments are syntax errors."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert 1 alice")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR
        assert exc_info.value.message == "Syntax error. Could not parse statement."

    def test_extra_fields(self, parser: StatementParser) -> None:
        """Inserts with too many arguments are syntax errors."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert 1 alice a@example.com extra")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR

    def test_non_numeric_id(self, parser: StatementParser) -> None:
        """A non-numeric id is a syntax error."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert one alice a@example.com")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR

    @pytest.mark.parametrize("id_text", ["1_000", "+7", "\u0663", "1.0", "-"])
    def test_id_must_be_ascii_digits(self, parser: StatementParser, id_text: str) -> None:
        """Only plain decimal digits (with an optional minus sign) form an id."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse(f"insert {id_text} alice a@example.com")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR

    def test_negative_id(self, parser: StatementParser) -> None:
        """Negative ids have their own error."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert -1 alice a@example.com")
        assert exc_info.value.result == PrepareResult.NEGATIVE_ID
        assert exc_info.value.message == "ID must be positive."

    def test_id_too_large(self, parser: StatementParser) -> None:
        """Ids past 32 bits are rejected."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert 4294967296 alice a@example.com")
        assert exc_info.value.result == PrepareResult.ID_TOO_LARGE

    def test_id_bounds_accepted(self, parser: StatementParser) -> None:
        """Ids 0 and 2**32 - 1 are valid."""
        assert parser.parse("insert 0 a b").row.id == 0  # type: ignore[union-attr]
        assert parser.parse("insert 4294967295 a b").row.id == 4294967295  # type: ignore[union-attr]

    def test_username_too_long(self, parser: StatementParser) -> None:
        """A 33-byte username is rejected, not truncated."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse(f"insert 1 {'a' * 33} a@example.com")
        assert exc_info.value.result == PrepareResult.STRING_TOO_LONG
        assert exc_info.value.message == "String is too long."

    def test_email_too_long(self, parser: StatementParser) -> None:
        """A 256-byte email is rejected."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse(f"insert 1 alice {'a' * 256}")
        assert exc_info.value.result == PrepareResult.STRING_TOO_LONG

    def test_nul_in_field(self, parser: StatementParser) -> None:
        """Text containing NUL is a syntax error."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert 1 al\x00ice a@example.com")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR

    def test_unencodable_field(self, parser: StatementParser) -> None:
        """Text that is not valid UTF-8 is a syntax error."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("insert 1 \udcff a@example.com")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR

    def test_max_length_fields(self, parser: StatementParser) -> None:
        """Fields at full capacity are accepted."""
        statement = parser.parse(f"insert 1 {'a' * 32} {'a' * 255}")
        assert statement.row is not None
        assert len(statement.row.username) == 32
        assert len(statement.row.email) == 255


@pytest.mark.unit
class TestParseOther:
    """Tests for select and unrecognized input."""

    def test_select(self, parser: StatementParser) -> None:
        """select takes no arguments."""
        statement = parser.parse("select")
        assert statement.type == StatementType.SELECT
        assert statement.row is None

    def test_select_with_arguments(self, parser: StatementParser) -> None:
        """Arguments after select are a syntax error."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("select * from users")
        assert exc_info.value.result == PrepareResult.SYNTAX_ERROR

    def test_unrecognized_keyword(self, parser: StatementParser) -> None:
        """Unknown keywords are reported with the input."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("delete 1")
        assert exc_info.value.result == PrepareResult.UNRECOGNIZED_STATEMENT
        assert exc_info.value.message == "Unrecognized keyword at start of 'delete 1'."

    def test_keywords_are_case_sensitive(self, parser: StatementParser) -> None:
        """Only lowercase keywords are recognized."""
        with pytest.raises(PrepareError) as exc_info:
            parser.parse("SELECT")
        assert exc_info.value.result == PrepareResult.UNRECOGNIZED_STATEMENT

    def test_empty_input(self, parser: StatementParser) -> None:
        """Empty input is not a statement."""
        with pytest.raises(PrepareError):
            parser.parse("   ")

    def test_prepare_statement(self) -> None:
        """The module-level helper uses a default parser."""
        assert prepare_statement("select").type == StatementType.SELECT
