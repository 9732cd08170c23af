"""Waypoint — guarded, middleware-composed client-side routing.

A route tree, a first-match resolver, and a navigation state machine
that moves between routes atomically: before hooks, leave guards,
enter guards, middleware, commit, after hooks.

Basic usage::

    from waypoint import Route, Router

    router = Router([
        Route("/", "pages/index", name="Home"),
        Route("/user/:id", "pages/user", name="UserProfile"),
    ])

    await router.navigate("/user/123")
    router.get_current_route().params["id"]   # "123"

Routes from a pages directory::

    from waypoint import discover_routes
    router = Router(discover_routes("src/pages"))
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "ConcurrentNavigation",
    "ConfigurationError",
    "GuardRejected",
    "HistoryBackend",
    "MemoryHistory",
    "Middleware",
    "NavigationError",
    "Next",
    "NoMatch",
    "NullHistory",
    "Route",
    "RouteContext",
    "RouteMeta",
    "Router",
    "RouterConfig",
    "RouterState",
    "WaypointError",
    "analytics_middleware",
    "auth_middleware",
    "create_router",
    "discover_routes",
    "loading_middleware",
    "page_title_middleware",
    "rbac_middleware",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConcurrentNavigation": "waypoint.errors",
    "ConfigurationError": "waypoint.errors",
    "GuardRejected": "waypoint.errors",
    "NavigationError": "waypoint.errors",
    "NoMatch": "waypoint.errors",
    "WaypointError": "waypoint.errors",
    "HistoryBackend": "waypoint.navigation.history",
    "MemoryHistory": "waypoint.navigation.history",
    "NullHistory": "waypoint.navigation.history",
    "Middleware": "waypoint.middleware.protocol",
    "Next": "waypoint.middleware.protocol",
    "analytics_middleware": "waypoint.middleware.builtin",
    "auth_middleware": "waypoint.middleware.builtin",
    "loading_middleware": "waypoint.middleware.builtin",
    "page_title_middleware": "waypoint.middleware.builtin",
    "rbac_middleware": "waypoint.middleware.builtin",
    "Route": "waypoint.routing.route",
    "RouteContext": "waypoint.routing.route",
    "RouteMeta": "waypoint.routing.route",
    "Router": "waypoint.router",
    "create_router": "waypoint.router",
    "RouterConfig": "waypoint.config",
    "RouterState": "waypoint.navigation.state",
    "discover_routes": "waypoint.pages.discovery",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_path), name)
