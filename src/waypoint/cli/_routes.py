"""``waypoint routes`` and ``waypoint discover`` — print route trees."""

import argparse
import json
import sys
from collections.abc import Iterable
from typing import Any

from waypoint.cli._resolve import resolve_router
from waypoint.errors import ConfigurationError
from waypoint.pages.discovery import discover_routes
from waypoint.routing.route import Route
from waypoint.routing.table import RouteTable


def run_routes(args: argparse.Namespace) -> None:
    """List the routes of the router named by ``args.router``."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not router.table.routes:
        print("No routes registered.")
        return
    print_table(router.table)


def run_discover(args: argparse.Namespace) -> None:
    """Discover routes in ``args.pages_dir`` and print them."""
    suffixes = tuple(args.suffixes) if args.suffixes else (".html",)
    try:
        routes = discover_routes(args.pages_dir, suffixes=suffixes)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(json.dumps([route_to_dict(r) for r in routes], indent=2))
        return
    if not routes:
        print("No pages found.")
        return
    try:
        table = RouteTable(routes)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print_table(table)


def route_to_dict(route: Route) -> dict[str, Any]:
    """JSON-ready view of a route and its children (guards are omitted)."""
    data: dict[str, Any] = {
        "path": route.path,
        "component": route.component,
        "name": route.name,
    }
    if route.children:
        data["children"] = [route_to_dict(child) for child in route.children]
    return data


def print_table(table: RouteTable) -> None:
    """Print PATH / NAME / COMPONENT, children indented under their parent.

    PATH is the absolute pattern a route matches, so relative child
    paths show up joined to their parent.
    """
    rows: list[tuple[str, str, str]] = [
        ("  " * depth + (table.full_path(route) or route.path), route.name or "-", route.component)
        for depth, route in _walk(table.routes, 0)
    ]

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_path}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATH", "NAME", "COMPONENT"))
    sep_len = max_path + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, name, component in rows:
        print(fmt.format(path, name, component))


def _walk(routes: Iterable[Route], depth: int) -> Iterable[tuple[int, Route]]:
    for route in routes:
        yield depth, route
        yield from _walk(route.children, depth + 1)
