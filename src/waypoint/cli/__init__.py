"""Waypoint CLI — route table introspection and page discovery.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — guarded client-side routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List a router's routes")
    routes_parser.add_argument(
        "router",
        help="Import string of a Router, RouteTable or route list (e.g. myapp:router)",
    )

    # -- waypoint discover ------------------------------------------------
    discover_parser = subparsers.add_parser(
        "discover", help="Build routes from a pages directory"
    )
    discover_parser.add_argument("pages_dir", help="Pages directory to scan")
    discover_parser.add_argument(
        "--suffix",
        action="append",
        dest="suffixes",
        default=None,
        help="Page file suffix (repeatable, default: .html)",
    )
    discover_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the route tree as JSON",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "discover":
        from waypoint.cli._routes import run_discover

        run_discover(args)
