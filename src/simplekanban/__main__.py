"""CLI entry point for simplekanban."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="simplekanban",
        description="Personal Kanban board: To Do, In Progress, Done",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to project root containing kanban.yml (default: current directory)",
    )
    parser.add_argument(
        "--storage",
        type=Path,
        default=None,
        metavar="PATH",
        help="Board file (json) or directory (markdown), overriding kanban.yml; "
        "relative paths are resolved against the project root",
    )
    parser.add_argument(
        "--backend",
        choices=["json", "markdown"],
        default=None,
        help="Storage backend, overriding kanban.yml",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Generate default kanban.yml config in project root and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("list", help="Show the board (default)")

    add = subparsers.add_parser("add", help="Add a task to To Do")
    add.add_argument("title", help="Task title")
    add.add_argument("-d", "--description", default="", help="Optional description")

    edit = subparsers.add_parser("edit", help="Edit a task's text or column")
    edit.add_argument("item_id", metavar="ID", help="Task ID or unique prefix")
    edit.add_argument("--title", default=None, help="New title")
    edit.add_argument("-d", "--description", default=None, help="New description")
    edit.add_argument("--column", default=None, help="New column (appends to its end)")

    delete = subparsers.add_parser("delete", help="Delete a task")
    delete.add_argument("item_id", metavar="ID", help="Task ID or unique prefix")

    move = subparsers.add_parser("move", help="Move a task within or across columns")
    move.add_argument("item_id", metavar="ID", help="Task ID or unique prefix")
    move.add_argument("column", help="Target column (e.g. todo, in_progress, done)")
    move.add_argument(
        "--before",
        default=None,
        metavar="ID",
        help="Place before this task (default: end of column)",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.storage:
        settings_kwargs["storage_path"] = args.storage
    if args.backend:
        settings_kwargs["storage_backend"] = args.backend
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root))

    # Import here to keep --help and --version fast
    from .app import build_app
    from .cli.commands import run_command

    app = build_app(settings)
    raise SystemExit(run_command(app, args))


if __name__ == "__main__":
    main()
