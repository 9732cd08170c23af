"""Router import resolution for ``waypoint routes``.

The target may be a ``Router``, a factory returning one, or a bare route
declaration (a ``RouteTable`` or a list/tuple of ``Route`` objects). Bare
declarations are wrapped in a default-configured Router so the CLI can
list them without the application wiring up history or middleware.
"""

import importlib
from collections.abc import Sequence
from typing import Any

from waypoint.router import Router
from waypoint.routing.route import Route
from waypoint.routing.table import RouteTable

DEFAULT_ATTRIBUTE = "router"


def resolve_router(import_string: str) -> Router:
    """Resolve ``"module:attribute"`` to a waypoint Router.

    ``"myapp.nav"`` is shorthand for ``"myapp.nav:router"``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the target is neither a Router nor a route
            declaration, or a factory fails.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name or DEFAULT_ATTRIBUTE)

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Router factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    return _as_router(obj, import_string)


def _as_router(obj: Any, import_string: str) -> Router:
    if isinstance(obj, Router):
        return obj
    if isinstance(obj, RouteTable):
        return Router(obj.routes)
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        stray = [type(item).__name__ for item in obj if not isinstance(item, Route)]
        if not stray:
            return Router(obj)
        msg = (
            f"{import_string!r} is a sequence, but not of Route objects "
            f"(found {', '.join(sorted(set(stray)))})"
        )
        raise TypeError(msg)
    msg = (
        f"{import_string!r} resolved to {type(obj).__name__}; expected a waypoint.Router, "
        "a RouteTable, or a list of Route objects"
    )
    raise TypeError(msg)
