"""Build views from plain data such as parsed JSON."""

import json
import logging
from pathlib import Path
from typing import Any
from typing import Optional
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import TypeAdapter

from .view import PgView

logger = logging.getLogger(__name__)


class ColumnDefinition(BaseModel):
    """Per-column metadata of a view."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Column name")
    default: Optional[str] = Field(default=None, description="Default value SQL expression")
    comment: Optional[str] = Field(default=None, description="Comment as an SQL literal")


class ViewDefinition(BaseModel):
    """A view as described in a definition file."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="View name")
    query: str = Field(description="SQL SELECT statement that defines the view")
    comment: Optional[str] = Field(default=None, description="View comment as an SQL literal")
    declared_columns: Optional[list[str]] = Field(
        default=None, description="Column names declared along with the view"
    )
    columns: list[ColumnDefinition] = Field(default_factory=list, description="Column defaults and comments")

    def to_view(self) -> PgView:
        """Build a PgView from this definition.

        Declared columns are set first so that defaults and comments attach
        to them instead of creating new columns.
        """
        view = PgView(self.name)
        view.set_query(self.query)
        view.set_declared_column_names(self.declared_columns)

        for col in self.columns:
            if col.default is not None:
                view.set_column_default_value(col.name, col.default)
            if col.comment is not None:
                view.set_column_comment(col.name, col.comment)

        view.comment = self.comment
        return view


class ViewDefinitionFile(BaseModel):
    """Top level of a definition file written as a mapping."""

    model_config = ConfigDict(extra="forbid")

    views: list[ViewDefinition] = Field(description="View definitions")


_view_list = TypeAdapter(list[ViewDefinition])


def load_views(data: Any) -> list[PgView]:
    """Build views from a list of definitions or a mapping with a ``views`` key.

    Raises:
        pydantic.ValidationError: If the data or a definition is malformed
        InvariantViolationError: If a definition breaks view invariants
    """
    if isinstance(data, dict):
        definitions = ViewDefinitionFile.model_validate(data).views
    else:
        definitions = _view_list.validate_python(data)

    views = [definition.to_view() for definition in definitions]
    logger.info(f"Loaded {len(views)} view definition(s)")
    return views


def load_views_file(path: Union[str, Path]) -> list[PgView]:
    """Read view definitions from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return load_views(data)
