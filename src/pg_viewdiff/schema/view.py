"""View model used while building and diffing schemas."""

import logging
from typing import Callable
from typing import Optional
from typing import Sequence

from .errors import InvariantViolationError
from .relation import PgColumn
from .relation import Relation
from .relation import column_comment_statements

logger = logging.getLogger(__name__)


class PgView:
    """A database view.

    Columns either come from an explicit column list declared with the view
    (``CREATE VIEW v (a, b) AS ...``) or are discovered one by one as default
    values and comments are attached to them. The two paths are mutually
    exclusive.
    """

    def __init__(self, name: str):
        """Initialize the view.

        Args:
            name: View name
        """
        self._relation = Relation(name=name)
        self.query: Optional[str] = None
        self._declared_column_names = False

    def __repr__(self) -> str:
        return f"PgView(name={self.name!r}, declared_column_names={self._declared_column_names})"

    @property
    def name(self) -> str:
        return self._relation.name

    @property
    def comment(self) -> Optional[str]:
        return self._relation.comment

    @comment.setter
    def comment(self, value: Optional[str]) -> None:
        self._relation.comment = value

    @property
    def declared_column_names(self) -> bool:
        return self._declared_column_names

    @property
    def columns(self) -> tuple[PgColumn, ...]:
        return tuple(self._relation.columns)

    def set_query(self, query: str) -> None:
        self.query = query

    def get_column(self, name: str) -> Optional[PgColumn]:
        return self._relation.columns.get(name)

    def set_declared_column_names(self, column_names: Optional[Sequence[str]]) -> None:
        """Set the column names declared along with the view.

        Can only be called once, before any default or comment created a
        column. An empty or missing list leaves the view undeclared.

        Args:
            column_names: Declared column names in order

        Raises:
            InvariantViolationError: If names were already declared, the view
                already has columns, or a single string was passed
        """
        if isinstance(column_names, str):
            raise InvariantViolationError(
                f"Declared column names of view {self.name!r} must be a sequence, not a string"
            )
        if self._declared_column_names:
            raise InvariantViolationError(f"Column names of view {self.name!r} are already declared")
        if self._relation.columns:
            raise InvariantViolationError(
                f"Cannot declare column names of view {self.name!r} after columns were added"
            )

        if not column_names:
            return
        if len(set(column_names)) != len(column_names):
            raise InvariantViolationError(f"Duplicate declared column names for view {self.name!r}")

        self._declared_column_names = True
        for column_name in column_names:
            self._relation.columns.add(PgColumn(name=column_name))
        logger.debug(f"Declared {len(column_names)} column(s) for view {self.name}")

    def get_declared_column_names(self) -> Optional[list[str]]:
        """Return the declared column names, or None if none were declared."""
        if not self._declared_column_names:
            return None
        return self._relation.columns.names()

    def _column_for_update(self, column_name: str) -> PgColumn:
        if self._declared_column_names:
            column = self._relation.columns.get(column_name)
            if column is None:
                raise InvariantViolationError(
                    f"Column {column_name!r} is not among the declared columns of view {self.name!r}"
                )
            return column

        column, created = self._relation.columns.get_or_create(column_name)
        if created:
            logger.debug(f"Added column {column_name} to view {self.name}")
        return column

    def set_column_default_value(self, column_name: str, default_value: Optional[str]) -> None:
        """Add or replace the default value of a column.

        Args:
            column_name: Column name
            default_value: SQL expression, or None for no default
        """
        self._column_for_update(column_name).default_value = default_value

    def remove_column_default_value(self, column_name: str) -> None:
        """Remove the default value of a column, keeping the column."""
        self.set_column_default_value(column_name, None)

    def set_column_comment(self, column_name: str, comment: Optional[str]) -> None:
        """Add or replace the comment of a column.

        Args:
            column_name: Column name
            comment: Comment as an SQL literal, or None for no comment
        """
        self._column_for_update(column_name).comment = comment

    def remove_column_comment(self, column_name: str) -> None:
        """Remove the comment of a column, keeping the column."""
        self.set_column_comment(column_name, None)

    def column_comment_statements(self, quote: Callable[[str], str]) -> list[str]:
        """Generate COMMENT ON COLUMN statements for the view's columns."""
        return column_comment_statements(self._relation, quote)
