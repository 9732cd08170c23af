"""Guard execution — ordered, short-circuiting enter/leave chains."""

import logging
from collections.abc import Sequence

from waypoint._internal.invoke import invoke
from waypoint._internal.types import Guard
from waypoint.routing.route import Route, RouteContext

logger = logging.getLogger("waypoint.guards")


class GuardExecutor:
    """Runs a route's guards strictly in registration order.

    Each guard receives the candidate ``RouteContext``. The first falsy
    result stops the chain and rejects. A guard that raises is treated
    exactly like one that returned ``False``; the error is logged, never
    propagated.
    """

    __slots__ = ()

    async def run_enter(self, route: Route, ctx: RouteContext) -> bool:
        """Run ``route.before_enter``. Returns ``True`` when every guard passes."""
        return await self._run(route.before_enter, "enter", route, ctx)

    async def run_leave(self, route: Route, ctx: RouteContext) -> bool:
        """Run ``route.before_leave``. Returns ``True`` when every guard passes."""
        return await self._run(route.before_leave, "leave", route, ctx)

    async def _run(
        self,
        guards: Sequence[Guard],
        direction: str,
        route: Route,
        ctx: RouteContext,
    ) -> bool:
        for guard in guards:
            try:
                allowed = await invoke(guard, ctx)
            except Exception:
                logger.warning(
                    "%s guard %s of %r raised; rejecting navigation to %r",
                    direction,
                    _name(guard),
                    route.path,
                    ctx.path,
                    exc_info=True,
                )
                return False
            if not allowed:
                logger.debug(
                    "%s guard %s of %r rejected navigation to %r",
                    direction,
                    _name(guard),
                    route.path,
                    ctx.path,
                )
                return False
        return True


def _name(callback: object) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
