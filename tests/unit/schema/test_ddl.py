"""Tests for view DDL generation.

Tests cover:
- Identifier quoting
- CREATE VIEW with and without declared columns
- Column defaults, view comments and column comments
- Section ordering and blank-line separation
- DROP VIEW
"""

import pytest

from pg_viewdiff.schema import InvariantViolationError
from pg_viewdiff.schema import PgView
from pg_viewdiff.schema import ViewDDL
from pg_viewdiff.schema import quote_identifier
from pg_viewdiff.schema import render_create
from pg_viewdiff.schema import render_drop


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def ddl():
    """Create a ViewDDL instance."""
    return ViewDDL()


@pytest.fixture
def simple_view():
    """Create a view with only a query."""
    view = PgView("v1")
    view.set_query("SELECT 1")
    return view


# =============================================================================
# Quoting
# =============================================================================


class TestQuoteIdentifier:
    """Tests for quote_identifier."""

    def test_wraps_in_double_quotes(self):
        assert quote_identifier("users") == '"users"'

    def test_escapes_double_quotes(self):
        assert quote_identifier('my"view') == '"my""view"'

    def test_keeps_case(self):
        assert quote_identifier("MixedCase") == '"MixedCase"'


# =============================================================================
# CREATE VIEW
# =============================================================================


class TestRenderCreate:
    """Tests for render_create."""

    def test_simple_view(self, ddl, simple_view):
        """Test a view with only a query."""
        assert ddl.render_create(simple_view) == 'CREATE VIEW "v1" AS\n\tSELECT 1;'

    def test_declared_columns(self, ddl):
        """Test the declared column list follows the view name."""
        view = PgView("v1")
        view.set_declared_column_names(["a", "b"])
        view.set_query("SELECT 1,2")

        assert ddl.render_create(view) == 'CREATE VIEW "v1" ("a", "b") AS\n\tSELECT 1,2;'

    def test_single_declared_column(self, ddl):
        """Test one declared column has no separator."""
        view = PgView("v1")
        view.set_declared_column_names(["only"])
        view.set_query("SELECT 1")

        assert ddl.render_create(view) == 'CREATE VIEW "v1" ("only") AS\n\tSELECT 1;'

    def test_discovered_columns_not_listed(self, ddl, simple_view):
        """Test columns created by metadata operations are not listed."""
        simple_view.set_column_comment("a", "'A'")

        sql = ddl.render_create(simple_view)

        assert sql.startswith('CREATE VIEW "v1" AS\n\t')
        assert '("a")' not in sql

    def test_column_defaults(self, ddl, simple_view):
        """Test one ALTER VIEW per column with a default, in column order."""
        simple_view.set_column_default_value("b", "2")
        simple_view.set_column_default_value("a", "'x'")

        assert ddl.render_create(simple_view) == (
            'CREATE VIEW "v1" AS\n\tSELECT 1;'
            "\n\n"
            'ALTER VIEW "v1" ALTER COLUMN "b" SET DEFAULT 2;'
            "\n\n"
            'ALTER VIEW "v1" ALTER COLUMN "a" SET DEFAULT \'x\';'
        )

    def test_cleared_default_skipped(self, ddl, simple_view):
        """Test a cleared default produces no statement."""
        simple_view.set_column_default_value("a", "1")
        simple_view.remove_column_default_value("a")

        assert ddl.render_create(simple_view) == 'CREATE VIEW "v1" AS\n\tSELECT 1;'

    def test_empty_default_skipped(self, ddl, simple_view):
        """Test an empty default produces no statement."""
        simple_view.set_column_default_value("a", "")

        assert ddl.render_create(simple_view) == 'CREATE VIEW "v1" AS\n\tSELECT 1;'

    def test_view_comment(self, ddl, simple_view):
        """Test the view comment is emitted verbatim."""
        simple_view.comment = "'Active users'"

        assert ddl.render_create(simple_view) == (
            'CREATE VIEW "v1" AS\n\tSELECT 1;\n\nCOMMENT ON VIEW "v1" IS \'Active users\';'
        )

    def test_empty_view_comment_skipped(self, ddl, simple_view):
        """Test an empty view comment produces no statement."""
        simple_view.comment = ""

        assert ddl.render_create(simple_view) == 'CREATE VIEW "v1" AS\n\tSELECT 1;'

    def test_column_comment(self, ddl, simple_view):
        """Test column comments are emitted after the view comment."""
        simple_view.set_column_comment("a", "'Column A'")

        assert ddl.render_create(simple_view) == (
            'CREATE VIEW "v1" AS\n\tSELECT 1;\n\nCOMMENT ON COLUMN "v1"."a" IS \'Column A\';'
        )

    def test_section_order(self, ddl):
        """Test create, defaults, view comment, column comments order."""
        view = PgView("report")
        view.set_declared_column_names(["id", "total"])
        view.set_query("SELECT id, sum(x) FROM t GROUP BY id")
        view.set_column_comment("total", "'Sum of x'")
        view.set_column_default_value("total", "0")
        view.set_column_comment("id", "'Key'")
        view.comment = "'Totals per id'"

        expected = "\n\n".join(
            [
                'CREATE VIEW "report" ("id", "total") AS\n\tSELECT id, sum(x) FROM t GROUP BY id;',
                'ALTER VIEW "report" ALTER COLUMN "total" SET DEFAULT 0;',
                'COMMENT ON VIEW "report" IS \'Totals per id\';',
                'COMMENT ON COLUMN "report"."id" IS \'Key\';',
                'COMMENT ON COLUMN "report"."total" IS \'Sum of x\';',
            ]
        )
        assert ddl.render_create(view) == expected

    def test_no_trailing_blank_line(self, ddl, simple_view):
        """Test the output ends with the last statement."""
        simple_view.set_column_comment("a", "'A'")

        assert ddl.render_create(simple_view).endswith(";")

    def test_query_inserted_verbatim(self, ddl):
        """Test the query is not validated or reformatted."""
        view = PgView("v1")
        view.set_query("SELECT *\n  FROM t\n WHERE x = 'a;b'")

        assert ddl.render_create(view) == "CREATE VIEW \"v1\" AS\n\tSELECT *\n  FROM t\n WHERE x = 'a;b';"

    def test_missing_query_raises(self, ddl):
        """Test a view without a query cannot be rendered."""
        with pytest.raises(InvariantViolationError):
            ddl.render_create(PgView("v1"))

    def test_custom_quote(self, simple_view):
        """Test identifiers go through the configured quoting function."""
        ddl = ViewDDL(quote=lambda name: f"`{name}`")
        simple_view.set_column_default_value("a", "1")

        assert ddl.render_create(simple_view) == (
            "CREATE VIEW `v1` AS\n\tSELECT 1;\n\nALTER VIEW `v1` ALTER COLUMN `a` SET DEFAULT 1;"
        )

    def test_module_level_render_create(self, simple_view):
        """Test the module-level helper uses double quotes."""
        assert render_create(simple_view) == 'CREATE VIEW "v1" AS\n\tSELECT 1;'


# =============================================================================
# DROP VIEW
# =============================================================================


class TestRenderDrop:
    """Tests for render_drop."""

    def test_drop(self, ddl, simple_view):
        assert ddl.render_drop(simple_view) == 'DROP VIEW "v1";'

    def test_drop_ignores_columns(self, ddl, simple_view):
        """Test columns and comments do not affect DROP."""
        simple_view.set_column_comment("a", "'A'")
        simple_view.comment = "'x'"

        assert ddl.render_drop(simple_view) == 'DROP VIEW "v1";'

    def test_drop_without_query(self, ddl):
        """Test DROP does not need a query."""
        assert ddl.render_drop(PgView("v1")) == 'DROP VIEW "v1";'

    def test_module_level_render_drop(self):
        assert render_drop(PgView("my\"view")) == 'DROP VIEW "my""view";'
