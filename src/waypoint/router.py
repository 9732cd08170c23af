"""The waypoint router — navigation state machine.

Owns the route table, the middleware pipeline, the hook lists, and the
single shared navigation state. ``navigate()`` is a transaction: the
state either moves to the new route in one step or does not move at all.

Transition order for ``navigate(path)``::

    resolve -> before hooks -> leave guards (current) -> enter guards
    -> middleware -> commit -> after hooks -> reflect URL to history
"""

import logging
from collections.abc import Sequence

import anyio

from waypoint._internal.types import Hook
from waypoint.config import RouterConfig
from waypoint.errors import ConcurrentNavigation, GuardRejected, NavigationError, NoMatch
from waypoint.middleware.pipeline import MiddlewarePipeline
from waypoint.middleware.protocol import Middleware
from waypoint.navigation.guards import GuardExecutor
from waypoint.navigation.history import HistoryBackend, NullHistory
from waypoint.navigation.hooks import HookDispatcher
from waypoint.navigation.state import RouterState
from waypoint.routing.matcher import normalize_path
from waypoint.routing.query import parse_query
from waypoint.routing.route import Route, RouteContext
from waypoint.routing.table import RouteTable

logger = logging.getLogger("waypoint.navigation")
history_logger = logging.getLogger("waypoint.history")


class Router:
    """Client-side router with guarded, middleware-composed navigation.

    Routes are fixed at construction. Middleware and hooks may be
    registered at any time and apply from the next navigation on.

    Usage::

        router = Router([
            Route("/", "pages/index", name="Home"),
            Route("/user/:id", "pages/user", before_enter=[is_logged_in]),
        ])

        @router.after_each
        def track(ctx):
            print("now at", ctx.path)

        ok = await router.navigate("/user/42")
        router.get_current_route().params["id"]   # "42"

    Concurrency:
        One navigation at a time. A call made while another is in flight
        returns ``False`` immediately; it is neither queued nor allowed
        to cancel the running one. Callbacks are awaited one after
        another on the caller's event loop, never fanned out.

    Failure:
        ``navigate()`` never raises. No match, a rejecting guard, a
        concurrent call, or a failing middleware all return ``False``
        and leave the state exactly as it was.
    """

    __slots__ = (
        "_current",
        "_guards",
        "_history",
        "_hooks",
        "_lock",
        "_pipeline",
        "_previous",
        "_table",
        # Committed contexts, append-only
        "_visited",
        "config",
    )

    def __init__(
        self,
        routes: Sequence[Route] = (),
        *,
        config: RouterConfig | None = None,
        history: HistoryBackend | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._table = RouteTable(routes)
        self._history: HistoryBackend = history if history is not None else NullHistory()
        self._pipeline = MiddlewarePipeline()
        self._hooks = HookDispatcher()
        self._guards = GuardExecutor()

        self._current: RouteContext | None = None
        self._previous: RouteContext | None = None
        self._visited: list[RouteContext] = []

        # Created inside the first navigate() (needs a running event loop)
        self._lock: anyio.Lock | None = None

    # -- Registration --

    def use(self, middleware: Middleware) -> Middleware:
        """Append a middleware. Returns it, so this works as a decorator."""
        self._pipeline.use(middleware)
        return middleware

    def before_each(self, hook: Hook) -> Hook:
        """Register a hook run before guards on every resolved navigation."""
        self._hooks.add_before(hook)
        return hook

    def after_each(self, hook: Hook) -> Hook:
        """Register a hook run after every committed navigation."""
        self._hooks.add_after(hook)
        return hook

    # -- Introspection --

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def history_backend(self) -> HistoryBackend:
        return self._history

    @property
    def is_navigating(self) -> bool:
        return self._lock is not None and self._lock.locked()

    def get_state(self) -> RouterState:
        """Return a read-only snapshot of the navigation state."""
        return RouterState(
            current=self._current,
            previous=self._previous,
            is_navigating=self.is_navigating,
            history=tuple(self._visited),
        )

    def get_current_route(self) -> RouteContext | None:
        return self._current

    def get_all_routes(self) -> list[Route]:
        """Every declared route, pre-order, nested children included."""
        return self._table.flatten()

    # -- Navigation --

    async def navigate(self, path: str, *, replace: bool = False) -> bool:
        """Navigate to *path*. Returns ``True`` once the route is committed.

        With ``replace=True`` the host history entry is replaced instead
        of pushed. Never raises.
        """
        try:
            await self._transition(path, replace=replace)
        except NavigationError as exc:
            logger.log(
                logging.INFO if self.config.debug else logging.DEBUG,
                "Navigation to %r aborted: %s",
                path,
                exc,
            )
            return False
        except Exception:
            logger.exception("Navigation to %r failed", path)
            return False
        return True

    def back(self) -> None:
        """Step the host history back one entry, if a backend supports it."""
        self._call_history("back")

    def forward(self) -> None:
        """Step the host history forward one entry, if a backend supports it."""
        self._call_history("forward")

    async def _transition(self, path: str, *, replace: bool) -> None:
        lock = self._navigation_lock()
        if lock.locked():
            raise ConcurrentNavigation
        lock.acquire_nowait()
        try:
            candidate = self._resolve(path)
            await self._hooks.run_before(candidate)

            leaving = self._current.route if self._current is not None else None
            if leaving is not None and not await self._guards.run_leave(leaving, candidate):
                raise GuardRejected("leave", leaving.path)

            entering = candidate.matched[-1]
            if not await self._guards.run_enter(entering, candidate):
                raise GuardRejected("enter", entering.path)

            await self._pipeline.run(candidate)

            self._commit(candidate)
            await self._hooks.run_after(candidate)
            self._reflect(candidate, replace=replace)
        finally:
            lock.release()

    def _navigation_lock(self) -> anyio.Lock:
        if self._lock is None:
            self._lock = anyio.Lock()
        return self._lock

    def _resolve(self, path: str) -> RouteContext:
        """Match *path* and build the candidate context. Raises ``NoMatch``."""
        location, _, _fragment = path.partition("#")
        location, has_query, raw_query = location.partition("?")
        normalized = normalize_path(self.config.strip_base(normalize_path(location)))

        match = self._table.resolve(normalized)
        if match is None:
            raise NoMatch(normalized)

        query = parse_query(raw_query) if has_query else parse_query(self._ambient_query())
        return RouteContext.from_match(normalized, match, query)

    def _commit(self, ctx: RouteContext) -> None:
        self._previous = self._current
        self._current = ctx
        self._visited.append(ctx)

    def _ambient_query(self) -> str:
        try:
            return self._history.get_query() or ""
        except Exception:
            history_logger.exception("History backend failed to report the query string")
            return ""

    def _reflect(self, ctx: RouteContext, *, replace: bool) -> None:
        url = self.config.with_base(ctx.url)
        self._call_history("replace_entry" if replace else "push_entry", ctx, url)

    def _call_history(self, method: str, *args: object) -> None:
        func = getattr(self._history, method, None)
        if func is None:
            return
        try:
            func(*args)
        except Exception:
            history_logger.exception("History backend %s() failed", method)


def create_router(
    routes: Sequence[Route],
    *,
    base_path: str = "/",
    history: HistoryBackend | None = None,
    debug: bool = False,
) -> Router:
    """Build a :class:`Router` from keyword options instead of a config object."""
    return Router(routes, config=RouterConfig(base_path=base_path, debug=debug), history=history)
