# main.py

"""Entry point for the property_admin screen (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging

logger = logging.getLogger("property_admin.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="property_admin",
        description="Browse the real-estate listing dataset.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query. Omit (without --all) to launch the TUI.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        default=False,
        dest="list_all",
        help="List every property headlessly (no query).",
    )
    parser.add_argument(
        "--sort",
        choices=["price", "date"],
        default=None,
        help="Sort key (default: dataset order).",
    )
    parser.add_argument(
        "--order",
        choices=["asc", "desc"],
        default="desc",
        help="Sort direction (default: desc).",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page to show (default: 1).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--data",
        default=None,
        dest="data_path",
        help="Path to a properties JSON file (default: bundled dataset).",
    )
    return parser


def _run_tui(data_path: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from pathlib import Path

    from src.storage.property_repository import PropertyRepository
    from src.ui.app import PropertyAdminApp

    repository = PropertyRepository(
        Path(data_path) if data_path is not None else None
    )
    try:
        app = PropertyAdminApp(repository=repository)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("property_admin TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless listing and exit."""
    from src.cli.runner import cli_list

    exit_code = cli_list(
        query=args.query or "",
        sort=args.sort,
        order=args.order,
        page=args.page,
        output_format=args.output_format,
        data_path=args.data_path,
    )
    sys.exit(exit_code)


def main() -> None:
    """Route to TUI (no args) or headless CLI (query or --all)."""
    parser = _build_parser()
    args = parser.parse_args()
    interactive = args.query is None and not args.list_all

    log_file = setup_logging(interactive=interactive)
    logger.info("property_admin starting, log file: %s", log_file)

    if interactive:
        _run_tui(args.data_path)
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
