"""Assembly of rendered statements into a single migration script."""

import logging
from typing import Optional

from .ddl import ViewDDL
from .view import PgView

logger = logging.getLogger(__name__)

EMPTY_SCRIPT = "-- No changes detected"


class MigrationScript:
    """Collect statements from many relations into one SQL script."""

    def __init__(self, ddl: Optional[ViewDDL] = None):
        """Initialize the script.

        Args:
            ddl: View renderer (default: double-quoted identifiers)
        """
        self.ddl = ddl or ViewDDL()
        self.statements: list[str] = []

    def __len__(self) -> int:
        return len(self.statements)

    def add(self, statement: str) -> None:
        if not statement:
            return
        self.statements.append(statement)

    def add_create_view(self, view: PgView) -> None:
        self.add(self.ddl.render_create(view))

    def add_drop_view(self, view: PgView) -> None:
        self.add(self.ddl.render_drop(view))

    def render(self) -> str:
        """Join the collected statements.

        Returns:
            SQL string for the migration
        """
        if not self.statements:
            return EMPTY_SCRIPT

        logger.debug(f"Rendering migration script with {len(self.statements)} statement(s)")
        return "\n\n".join(self.statements)
