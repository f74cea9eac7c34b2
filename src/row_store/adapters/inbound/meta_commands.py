"""Meta-commands: dot-prefixed lines handled outside the statement language."""

from __future__ import annotations

from enum import Enum
from typing import TextIO

from row_store.domain.entities import Table
from row_store.domain.value_objects import (
    COLUMN_EMAIL_SIZE,
    COLUMN_USERNAME_SIZE,
    EMAIL_OFFSET,
    ID_OFFSET,
    ID_SIZE,
    USERNAME_OFFSET,
)

HELP_TEXT = """\
Statements:
  insert <id> <username> <email>   Append a row
  select                           Print every row
Meta-commands:
  .constants   Print the row and page layout
  .stats       Print table usage
  .help        Print this help
  .exit        Leave the prompt"""


class MetaCommandResult(Enum):
    """Outcome of a meta-command."""

    SUCCESS = "success"
    EXIT = "exit"
    UNRECOGNIZED_COMMAND = "unrecognized_command"


def is_meta_command(line: str) -> bool:
    return line.startswith(".")


def do_meta_command(line: str, table: Table, out: TextIO) -> MetaCommandResult:
    """Run a meta-command.

    Args:
        line: The input line, starting with '.'
        table: The table the session is working on
        out: Stream for command output

    Returns:
        MetaCommandResult.EXIT for .exit, UNRECOGNIZED_COMMAND for unknown
        commands, SUCCESS otherwise.
    """
    command = line.strip()

    if command == ".exit":
        return MetaCommandResult.EXIT
    if command == ".help":
        print(HELP_TEXT, file=out)
        return MetaCommandResult.SUCCESS
    if command == ".constants":
        print("Constants:", file=out)
        _print_constants(table, out)
        return MetaCommandResult.SUCCESS
    if command == ".stats":
        _print_stats(table, out)
        return MetaCommandResult.SUCCESS

    return MetaCommandResult.UNRECOGNIZED_COMMAND


def _print_constants(table: Table, out: TextIO) -> None:
    layout = table.layout
    constants = [
        ("ROW_SIZE", layout.row_size),
        ("ID_SIZE", ID_SIZE),
        ("ID_OFFSET", ID_OFFSET),
        ("USERNAME_SIZE", COLUMN_USERNAME_SIZE),
        ("USERNAME_OFFSET", USERNAME_OFFSET),
        ("EMAIL_SIZE", COLUMN_EMAIL_SIZE),
        ("EMAIL_OFFSET", EMAIL_OFFSET),
        ("PAGE_SIZE", layout.page_size),
        ("ROWS_PER_PAGE", layout.rows_per_page),
        ("TABLE_MAX_PAGES", layout.max_pages),
        ("TABLE_MAX_ROWS", layout.max_rows),
    ]
    for name, value in constants:
        print(f"{name}: {value}", file=out)


def _print_stats(table: Table, out: TextIO) -> None:
    stats = table.get_stats()
    print(f"rows: {stats.row_count}/{stats.max_rows}", file=out)
    print(f"pages: {stats.pages_allocated}/{stats.max_pages}", file=out)
