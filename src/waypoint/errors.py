"""Waypoint exception hierarchy.

Shared across the route table, the guard executor, the middleware
pipeline, and the router so every module raises and catches the same
types.

Only ``ConfigurationError`` ever reaches callers (at construction).
Everything under ``NavigationError`` is raised inside the router and
converted to a ``False`` return from ``Router.navigate()``.
"""

from dataclasses import dataclass


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a route declaration is invalid.

    Typically raised while the route table compiles its patterns.
    """


class MiddlewareError(WaypointError):
    """A middleware misused the ``next`` callable."""


class NavigationError(WaypointError):
    """Base for the reasons a navigation is aborted before commit."""


class NoMatch(NavigationError):  # noqa: N818
    """No route pattern matches the requested path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No route matches {path!r}")
        self.path = path


@dataclass(frozen=True, slots=True)
class GuardRejected(NavigationError):  # noqa: N818
    """An enter or leave guard returned a falsy value or raised."""

    direction: str
    route_path: str

    def __str__(self) -> str:
        return f"{self.direction} guard of {self.route_path!r} rejected the navigation"


class ConcurrentNavigation(NavigationError):  # noqa: N818
    """``navigate()`` was called while another navigation was in flight."""

    def __init__(self) -> None:
        super().__init__("A navigation is already in progress")
