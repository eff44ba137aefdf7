"""Structures shared by every relation kind (tables and views)."""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Callable
from typing import Iterator
from typing import Optional

from .errors import InvariantViolationError

logger = logging.getLogger(__name__)


@dataclass
class PgColumn:
    """A column of a relation."""

    name: str
    default_value: Optional[str] = None
    comment: Optional[str] = None


class ColumnList:
    """Ordered collection of columns keyed by name."""

    def __init__(self) -> None:
        self._columns: dict[str, PgColumn] = {}

    def __iter__(self) -> Iterator[PgColumn]:
        return iter(self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def __bool__(self) -> bool:
        return bool(self._columns)

    def __repr__(self) -> str:
        return f"ColumnList({self.names()!r})"

    def get(self, name: str) -> Optional[PgColumn]:
        return self._columns.get(name)

    def names(self) -> list[str]:
        return list(self._columns)

    def add(self, column: PgColumn) -> None:
        """Append a column.

        Raises:
            InvariantViolationError: If a column with the same name exists
        """
        if column.name in self._columns:
            raise InvariantViolationError(f"Column {column.name!r} already exists")
        self._columns[column.name] = column

    def get_or_create(self, name: str) -> tuple[PgColumn, bool]:
        """Return the named column, appending a new one if it is missing.

        Returns:
            Tuple of the column and whether it was created
        """
        column = self._columns.get(name)
        if column is not None:
            return column, False
        column = PgColumn(name=name)
        self._columns[name] = column
        return column, True


@dataclass
class Relation:
    """Name, columns and comment common to tables and views."""

    name: str
    columns: ColumnList = field(default_factory=ColumnList)
    comment: Optional[str] = None


def column_comment_statements(relation: Relation, quote: Callable[[str], str]) -> list[str]:
    """Generate COMMENT ON COLUMN statements for a relation.

    Args:
        relation: Relation whose columns are commented
        quote: Identifier quoting function

    Returns:
        One statement per column with a non-empty comment, in column order
    """
    statements = []
    for column in relation.columns:
        if column.comment:
            statements.append(
                f"COMMENT ON COLUMN {quote(relation.name)}.{quote(column.name)} IS {column.comment};"
            )
    logger.debug(f"Generated {len(statements)} column comment(s) for {relation.name}")
    return statements
