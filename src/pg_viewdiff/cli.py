"""Command line interface for rendering view DDL from definition files."""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import InvariantViolationError
from .schema import MigrationScript
from .schema import load_views_file

# Load environment variables from .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pg-viewdiff", description="Render PostgreSQL view DDL")
    parser.add_argument(
        "action",
        choices=["create", "drop"],
        help="Statements to generate for every view in the file",
    )
    parser.add_argument("path", help="JSON file with view definitions")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write the script to this file instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL}). Can also be set via PG_VIEWDIFF_LOG_LEVEL env var.",
    )
    return parser


def resolve_log_level(cli_value: Optional[str]) -> str:
    """Pick the log level from the CLI flag, then the environment."""
    if cli_value is not None:
        return cli_value

    env_level = os.environ.get("PG_VIEWDIFF_LOG_LEVEL")
    if env_level is None:
        return DEFAULT_LOG_LEVEL
    if env_level.upper() not in LOG_LEVELS:
        logger.warning(f"Invalid PG_VIEWDIFF_LOG_LEVEL value '{env_level}', using default {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return env_level.upper()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        views = load_views_file(args.path)
    except OSError as e:
        logger.error(f"Error reading {args.path}: {e}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {args.path}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid view definitions in {args.path}: {e}")
        return 1
    except InvariantViolationError as e:
        logger.error(f"Inconsistent view definition in {args.path}: {e}")
        return 1

    script = MigrationScript()
    try:
        for view in views:
            if args.action == "create":
                script.add_create_view(view)
            else:
                script.add_drop_view(view)
    except InvariantViolationError as e:
        logger.error(f"Error generating SQL: {e}")
        return 1

    sql = script.render()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(sql + "\n")
        logger.info(f"Wrote {len(script)} statement(s) to {args.output}")
    else:
        print(sql)

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
