"""Route table — owns the compiled route forest.

Resolution is depth-first in registration order: each route is tried
directly, then its children (recursively), before any later sibling.
The first match wins; there is no specificity ranking.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from waypoint.routing.matcher import PathMatcher, join_paths
from waypoint.routing.route import Route, RouteMatch


@dataclass(frozen=True, slots=True)
class _RouteNode:
    """A route with its full-path matcher and compiled children."""

    route: Route
    matcher: PathMatcher
    children: tuple["_RouteNode", ...]


class RouteTable:
    """Compiled, immutable route forest.

    Usage::

        table = RouteTable([
            Route("/", "pages/index"),
            Route("/admin", "pages/admin", children=[Route("users", "pages/admin/users")]),
        ])
        match = table.resolve("/admin/users")
        [r.path for r in match.matched]   # ["/admin", "users"]

    Raises ``ConfigurationError`` at construction if any pattern is invalid.
    """

    __slots__ = ("_nodes", "_routes")

    def __init__(self, routes: Sequence[Route] = ()) -> None:
        self._routes = tuple(routes)
        self._nodes = tuple(_compile(route, "/") for route in self._routes)

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(self._nodes))

    def __iter__(self) -> Iterator[Route]:
        return iter(self.flatten())

    @property
    def routes(self) -> tuple[Route, ...]:
        """Top-level routes in registration order."""
        return self._routes

    def resolve(self, path: str) -> RouteMatch | None:
        """Find the first route matching *path*.

        Returns a ``RouteMatch`` (leaf, root-to-leaf chain, params) or
        ``None`` when nothing matches. Never raises on a miss.
        """
        return _resolve(self._nodes, path, ())

    def flatten(self) -> list[Route]:
        """Every route in the tree, pre-order (parent before its children)."""
        return [node.route for node in self._walk(self._nodes)]

    def full_path(self, route: Route) -> str | None:
        """The absolute pattern a route was compiled to, or ``None`` if unknown."""
        for node in self._walk(self._nodes):
            if node.route is route:
                return node.matcher.pattern
        return None

    def _walk(self, nodes: tuple[_RouteNode, ...]) -> Iterator[_RouteNode]:
        for node in nodes:
            yield node
            yield from self._walk(node.children)


def _compile(route: Route, parent_path: str) -> _RouteNode:
    """Compile a route and its descendants into matcher nodes."""
    full = join_paths(parent_path, route.path)
    return _RouteNode(
        route=route,
        matcher=PathMatcher(full),
        children=tuple(_compile(child, full) for child in route.children),
    )


def _resolve(
    nodes: tuple[_RouteNode, ...],
    path: str,
    chain: tuple[Route, ...],
) -> RouteMatch | None:
    """Depth-first match: a route, then its subtree, then the next sibling."""
    for node in nodes:
        params = node.matcher.match(path)
        if params is not None:
            return RouteMatch(route=node.route, matched=(*chain, node.route), params=params)
        if node.children:
            found = _resolve(node.children, path, (*chain, node.route))
            if found is not None:
                return found
    return None
