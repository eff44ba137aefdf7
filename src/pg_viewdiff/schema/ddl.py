"""DDL generation for views."""

import logging
from typing import Callable

from .errors import InvariantViolationError
from .view import PgView

logger = logging.getLogger(__name__)


def quote_identifier(name: str) -> str:
    """Quote an identifier for use in SQL."""
    # Escape double quotes
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


class ViewDDL:
    """Render CREATE and DROP statements for views.

    Default values, comments and queries are inserted verbatim; only
    identifiers go through the quoting function.
    """

    def __init__(self, quote: Callable[[str], str] = quote_identifier):
        """Initialize the renderer.

        Args:
            quote: Identifier quoting function
        """
        self.quote = quote

    def render_create(self, view: PgView) -> str:
        """Generate the SQL that creates a view.

        The CREATE VIEW statement is followed by column defaults, the view
        comment and column comments, separated by blank lines.

        Args:
            view: Fully populated view

        Returns:
            SQL string for creating the view

        Raises:
            InvariantViolationError: If the view has no query, or declares
                column names without holding any columns
        """
        if view.query is None:
            raise InvariantViolationError(f"View {view.name!r} has no query")

        view_ref = self.quote(view.name)
        create_sql = f"CREATE VIEW {view_ref}"

        if view.declared_column_names:
            if not view.columns:
                raise InvariantViolationError(f"View {view.name!r} declares column names but has no columns")
            cols = ", ".join(self.quote(col.name) for col in view.columns)
            create_sql += f" ({cols})"

        create_sql += f" AS\n\t{view.query};"
        statements = [create_sql]

        # Column default values
        for col in view.columns:
            if col.default_value:
                statements.append(
                    f"ALTER VIEW {view_ref} ALTER COLUMN {self.quote(col.name)} SET DEFAULT {col.default_value};"
                )

        if view.comment:
            statements.append(f"COMMENT ON VIEW {view_ref} IS {view.comment};")

        statements.extend(view.column_comment_statements(self.quote))

        logger.debug(f"Generated {len(statements)} statement(s) for view {view.name}")
        return "\n\n".join(statements)

    def render_drop(self, view: PgView) -> str:
        """Generate DROP VIEW SQL."""
        return f"DROP VIEW {self.quote(view.name)};"


_default_ddl = ViewDDL()


def render_create(view: PgView) -> str:
    """Generate CREATE VIEW SQL with double-quoted identifiers."""
    return _default_ddl.render_create(view)


def render_drop(view: PgView) -> str:
    """Generate DROP VIEW SQL with double-quoted identifiers."""
    return _default_ddl.render_drop(view)
