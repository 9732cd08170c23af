"""Route, RouteMeta, RouteMatch, and RouteContext frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlencode

from waypoint._internal.types import Guard

# Recognized meta keys, accepted in either spelling by RouteMeta.from_mapping
_META_ALIASES: dict[str, str] = {
    "title": "title",
    "description": "description",
    "requiresAuth": "requires_auth",
    "requires_auth": "requires_auth",
    "roles": "roles",
    "layout": "layout",
    "preload": "preload",
}


@dataclass(frozen=True, slots=True)
class RouteMeta:
    """Per-route metadata.

    Recognized options are explicit fields; anything else rides along in
    ``extra`` untouched.

    Attributes:
        title: Page title (used by ``page_title_middleware``).
        description: Free-form description for tooling.
        requires_auth: Route expects an authenticated user.
        roles: Roles allowed to view the route (any one suffices).
        layout: Layout identifier for the host renderer.
        preload: Hint that the component should be fetched eagerly.
        extra: Unrecognized keys, passed through as declared.
    """

    title: str | None = None
    description: str | None = None
    requires_auth: bool = False
    roles: tuple[str, ...] = ()
    layout: str | None = None
    preload: bool = False
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # a bare string names a single role
        roles = (self.roles,) if isinstance(self.roles, str) else tuple(self.roles)
        object.__setattr__(self, "roles", roles)
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "RouteMeta":
        """Build a RouteMeta from a plain mapping.

        Accepts ``requiresAuth`` as well as ``requires_auth``. Unknown
        keys are collected into ``extra``.
        """
        if not data:
            return cls()
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            attr = _META_ALIASES.get(key)
            if attr is None:
                extra[key] = value
            else:
                known[attr] = value
        return cls(**known, extra=extra)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a recognized option by either spelling, then ``extra``.

        An unset recognized option (``None``) yields *default*.
        """
        attr = _META_ALIASES.get(key)
        if attr is not None:
            value = getattr(self, attr)
            return default if value is None else value
        return self.extra.get(key, default)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route declaration.

    Children are owned by their parent; the tree is fixed once the
    router is constructed. A child path that does not start with ``/``
    is relative to its parent's full path.

    Lists passed for ``children`` or the guard fields are converted to
    tuples, and a plain ``dict`` passed for ``meta`` goes through
    :meth:`RouteMeta.from_mapping`.
    """

    path: str
    component: str
    name: str | None = None
    meta: RouteMeta = field(default_factory=RouteMeta)
    children: tuple["Route", ...] = ()
    before_enter: tuple[Guard, ...] = ()
    before_leave: tuple[Guard, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.meta, RouteMeta):
            object.__setattr__(self, "meta", RouteMeta.from_mapping(self.meta))
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "before_enter", tuple(self.before_enter))
        object.__setattr__(self, "before_leave", tuple(self.before_leave))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolve: the leaf, its root-to-leaf chain, and params."""

    route: Route
    matched: tuple[Route, ...]
    params: dict[str, str]


@dataclass(frozen=True, slots=True)
class RouteContext:
    """Immutable snapshot of a resolved navigation target.

    Built by the router once a match is found. It is handed to guards,
    hooks, and middleware as the *candidate*; once committed it is kept
    in ``RouterState.history`` and never changes.

    Attributes:
        path: Normalized path (no base path, no trailing slash, no query).
        name: Route name, or the route's path pattern when unnamed.
        component: Component identifier of the leaf route.
        params: Dynamic segment name -> raw (undecoded) value.
        query: Decoded query key -> value, last occurrence wins.
        meta: The leaf route's metadata.
        matched: Root-to-leaf chain of routes.
    """

    path: str
    name: str
    component: str
    params: Mapping[str, str] = field(default_factory=dict, hash=False)
    query: Mapping[str, str] = field(default_factory=dict, hash=False)
    meta: RouteMeta = field(default_factory=RouteMeta)
    matched: tuple[Route, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))
        object.__setattr__(self, "matched", tuple(self.matched))

    @classmethod
    def from_match(cls, path: str, match: RouteMatch, query: Mapping[str, str]) -> "RouteContext":
        route = match.route
        return cls(
            path=path,
            name=route.name or route.path,
            component=route.component,
            params=match.params,
            query=query,
            meta=route.meta,
            matched=match.matched,
        )

    @property
    def route(self) -> Route | None:
        """The leaf route."""
        return self.matched[-1] if self.matched else None

    @property
    def parent(self) -> Route | None:
        """The leaf's parent within ``matched``, or ``None`` at top level."""
        if len(self.matched) < 2:
            return None
        return self.matched[-2]

    @property
    def url(self) -> str:
        """Path plus encoded query string."""
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(dict(self.query))}"

