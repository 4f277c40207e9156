"""Poyo CLI — route registry management for Poyo projects.

Entry point registered as ``poyo`` in ``pyproject.toml``::

    [project.scripts]
    poyo = "poyo.cli:main"

Every command reads ``routes.json`` fresh, does its work, and writes it
back only when something changed.  Any :class:`~poyo.errors.PoyoError`
ends the command with ``Error: <message>`` on stderr and exit code 1.
"""

import argparse
import logging
import sys
from pathlib import Path

from poyo.config import ProjectConfig
from poyo.errors import PoyoError
from poyo.prompts import Prompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poyo",
        description="Poyo CLI — a general purpose tool for managing Poyo projects.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root (default: nearest parent directory with routes.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file operation",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- poyo route -------------------------------------------------------
    route_parser = subparsers.add_parser("route", help="Manage routes.json and scaffold files")
    route_commands = route_parser.add_subparsers(dest="route_command")

    # -- poyo route add ---------------------------------------------------
    add_parser = route_commands.add_parser("add", help="Add a new route and scaffold files")
    add_parser.add_argument("path", help="URL path for the route (e.g. /Admin/Users)")
    add_parser.add_argument(
        "-p",
        "--public",
        action="store_true",
        help="Mark route as public (accessible without auth)",
    )
    add_parser.add_argument(
        "-g",
        "--guest",
        action="store_true",
        help="Mark route as guest only (only accessible without auth)",
    )
    add_parser.add_argument(
        "-f",
        "--flat",
        action="store_true",
        help="Use flat file structure (detail.page.tsx) instead of folder (Detail/index.page.tsx)",
    )
    add_parser.add_argument("-c", "--controller", default=None, help="Controller class name")
    add_parser.add_argument("-a", "--action", default=None, help="Action method name")
    add_parser.add_argument(
        "--no-view",
        action="store_true",
        help="Skip MVC View generation",
    )

    # -- poyo route remove ------------------------------------------------
    remove_parser = route_commands.add_parser("remove", help="Remove a route")
    remove_parser.add_argument("path", help="URL path of the route to remove")

    # -- poyo route update ------------------------------------------------
    update_parser = route_commands.add_parser("update", help="Update existing route properties")
    update_parser.add_argument("path", help="URL path of the route to update")
    update_parser.add_argument("-p", "--public", default=None, help="Set public status (true/false)")
    update_parser.add_argument(
        "-g", "--guest", default=None, help="Set guest only status (true/false)"
    )

    # -- poyo route sync --------------------------------------------------
    route_commands.add_parser(
        "sync", help="Verify consistency between routes.json and file system"
    )

    # -- poyo route list --------------------------------------------------
    route_commands.add_parser("list", help="List registered routes")

    return parser


def main(argv: list[str] | None = None, *, prompter: Prompter | None = None) -> None:
    """CLI entry point for the ``poyo`` command.

    Args:
        argv: Arguments (default: ``sys.argv[1:]``).
        prompter: Interactive choice provider; defaults to the rich
            terminal prompter.  Tests pass a scripted one.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None or getattr(args, "route_command", None) is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = ProjectConfig.for_root(args.root) if args.root else ProjectConfig.discover()
        _dispatch(args, config, prompter)
    except PoyoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _dispatch(args: argparse.Namespace, config: ProjectConfig, prompter: Prompter | None) -> None:
    if args.route_command in ("remove", "sync") and prompter is None:
        from poyo.prompts import TerminalPrompter

        prompter = TerminalPrompter()

    if args.route_command == "add":
        from poyo.cli._add import add_route

        add_route(args, config)
    elif args.route_command == "remove":
        from poyo.cli._remove import remove_route

        assert prompter is not None
        remove_route(args, config, prompter)
    elif args.route_command == "update":
        from poyo.cli._update import update_route

        update_route(args, config)
    elif args.route_command == "sync":
        from poyo.cli._sync import run_sync

        assert prompter is not None
        run_sync(config, prompter)
    elif args.route_command == "list":
        from poyo.cli._list import list_routes

        list_routes(config)
