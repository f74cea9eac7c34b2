"""Inbound adapters for the row store.

Inbound adapters handle incoming requests and convert them to
internal domain operations.

Exports:
    Statement Parser:
        - StatementParser: Converts statement text to a validated Statement
        - prepare_statement: Parse with a default parser
        - PrepareError, PrepareResult: Preparation failures
    Meta-commands:
        - do_meta_command, MetaCommandResult
    Prompt:
        - Repl: Interactive read-eval-print loop

The REST API (row_store.adapters.inbound.rest_api) and the command-line
entry point (row_store.adapters.inbound.cli) are imported directly.
"""

from row_store.adapters.inbound.meta_commands import (
    MetaCommandResult,
    do_meta_command,
    is_meta_command,
)
from row_store.adapters.inbound.repl import Repl
from row_store.adapters.inbound.statement_parser import (
    PrepareError,
    PrepareResult,
    StatementParser,
    prepare_statement,
)

__all__ = [
    "StatementParser",
    "prepare_statement",
    "PrepareError",
    "PrepareResult",
    "MetaCommandResult",
    "do_meta_command",
    "is_meta_command",
    "Repl",
]
