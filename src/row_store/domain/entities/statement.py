"""Parsed statements handed to the execution engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from row_store.domain.entities.row import Row


class StatementType(Enum):
    """Types of statements the engine understands."""

    INSERT = "insert"
    SELECT = "select"


@dataclass(frozen=True)
class Statement:
    """A prepared statement.

    Insert statements carry the row to store. Select statements carry
    nothing: the read path always returns every row.
    """

    type: StatementType
    row: Row | None = None

    def __post_init__(self) -> None:
        if self.type == StatementType.INSERT and self.row is None:
            raise ValueError("Insert statement requires a row")
        if self.type == StatementType.SELECT and self.row is not None:
            raise ValueError("Select statement does not take a row")

    @classmethod
    def insert(cls, row: Row) -> Statement:
        return cls(type=StatementType.INSERT, row=row)

    @classmethod
    def select(cls) -> Statement:
        return cls(type=StatementType.SELECT)
