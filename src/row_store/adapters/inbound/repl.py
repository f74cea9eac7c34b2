"""Interactive prompt over a single table.

Each line is either a meta-command (starting with '.') or a statement.
Statements are prepared, executed, and their outcome printed:

    db > insert 1 alice a@example.com
    Executed.
    db > select
    (1, alice, a@example.com)
    Executed.
    db > .exit
"""

from __future__ import annotations

import sys
from typing import TextIO

from row_store.adapters.inbound.meta_commands import (
    MetaCommandResult,
    do_meta_command,
    is_meta_command,
)
from row_store.adapters.inbound.statement_parser import PrepareError, StatementParser
from row_store.domain.entities import Table
from row_store.infrastructure.logging import get_logger
from row_store.ports.inbound.statement_executor import ExecutionStatus, StatementExecutor

logger = get_logger(__name__)


class Repl:
    """Read-eval-print loop bound to one table.

    Example:
        repl = Repl(table, executor)
        exit_code = repl.run()
    """

    def __init__(
        self,
        table: Table,
        executor: StatementExecutor,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = "db > ",
        parser: StatementParser | None = None,
    ) -> None:
        self._table = table
        self._executor = executor
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._prompt = prompt
        self._parser = parser or StatementParser()

    def run(self) -> int:
        """Run until .exit or end of input.

        Returns:
            Process exit code.
        """
        while True:
            self._stdout.write(self._prompt)
            self._stdout.flush()

            line = self._stdin.readline()
            if not line:
                # EOF: finish the prompt line
                self._stdout.write("\n")
                break

            if not self.process_line(line.rstrip("\r\n")):
                break

        logger.debug("repl_finished", rows=self._table.row_count)
        return 0

    def process_line(self, line: str) -> bool:
        """Handle one input line.

        Returns:
            False if the session should end, True otherwise.
        """
        if not line.strip():
            return True

        if is_meta_command(line):
            result = do_meta_command(line, self._table, self._stdout)
            if result == MetaCommandResult.EXIT:
                return False
            if result == MetaCommandResult.UNRECOGNIZED_COMMAND:
                self._print(f"Unrecognized command '{line}'")
            return True

        try:
            statement = self._parser.parse(line)
        except PrepareError as e:
            self._print(e.message)
            return True

        result = self._executor.execute(statement, self._table)
        if result.status == ExecutionStatus.TABLE_FULL:
            self._print("Error: Table full.")
            return True

        for row in result.rows:
            self._print(str(row))
        self._print("Executed.")
        return True

    def _print(self, text: str) -> None:
        print(text, file=self._stdout)
