"""Schema model and DDL generation for pg-viewdiff.

This module provides the view model and its SQL rendering:
- Relations, columns and views
- CREATE/DROP VIEW generation
- Assembly of statements into migration scripts
"""

from .ddl import ViewDDL
from .ddl import quote_identifier
from .ddl import render_create
from .ddl import render_drop
from .errors import InvariantViolationError
from .loader import ColumnDefinition
from .loader import ViewDefinition
from .loader import ViewDefinitionFile
from .loader import load_views
from .loader import load_views_file
from .relation import ColumnList
from .relation import PgColumn
from .relation import Relation
from .relation import column_comment_statements
from .script import MigrationScript
from .view import PgView

__all__ = [
    "ColumnDefinition",
    "ColumnList",
    "InvariantViolationError",
    "MigrationScript",
    "PgColumn",
    "PgView",
    "Relation",
    "ViewDDL",
    "ViewDefinition",
    "ViewDefinitionFile",
    "column_comment_statements",
    "load_views",
    "load_views_file",
    "quote_identifier",
    "render_create",
    "render_drop",
]
