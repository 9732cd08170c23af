"""Shared type aliases used across waypoint modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from waypoint.routing.route import RouteContext

# Enter/leave guard; a truthy result allows the navigation
Guard: TypeAlias = Callable[["RouteContext"], Any]

# before_each/after_each observer; return value ignored
Hook: TypeAlias = Callable[["RouteContext"], Awaitable[None] | None]
