"""visanav CLI: inspect the route table and trace path resolution.

Entry point registered as ``visanav`` in ``pyproject.toml``::

    [project.scripts]
    visanav = "visanav.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``visanav`` command."""
    parser = argparse.ArgumentParser(
        prog="visanav",
        description="visanav: client-side routing for the visa assessment app.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- visanav routes ---------------------------------------------------
    subparsers.add_parser("routes", help="List the page table")

    # -- visanav resolve --------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show what a path renders for a simulated session"
    )
    resolve_parser.add_argument("path", help="Path or named route (e.g. /news/7, dashboard)")
    resolve_parser.add_argument(
        "--authenticated",
        action="store_true",
        help="Simulate a signed-in user",
    )
    resolve_parser.add_argument(
        "--not-onboarded",
        action="store_true",
        help="Simulate a profile that has not completed onboarding (implies --authenticated)",
    )
    resolve_parser.add_argument(
        "--admin",
        action="store_true",
        help="Simulate an active admin session",
    )
    resolve_parser.add_argument(
        "--raw-paths",
        action="store_true",
        help="Disable path canonicalization",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from visanav.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from visanav.cli._resolve import run_resolve

        run_resolve(args)
