"""Onion-composed middleware pipeline.

For middleware ``m1, m2, m3`` registered in that order, a run produces::

    m1 before next -> m2 before next -> m3 before next
    m3 after next  -> m2 after next  -> m1 after next
"""

from waypoint._internal.invoke import invoke
from waypoint.errors import MiddlewareError
from waypoint.middleware.protocol import Middleware, Next
from waypoint.routing.route import RouteContext


async def _terminal() -> None:
    return None


class MiddlewarePipeline:
    """Ordered, append-only list of middleware composed per run."""

    __slots__ = ("_middleware",)

    def __init__(self) -> None:
        self._middleware: list[Middleware] = []

    def __len__(self) -> int:
        return len(self._middleware)

    def use(self, middleware: Middleware) -> None:
        """Append a middleware to the end of the chain."""
        self._middleware.append(middleware)

    async def run(self, ctx: RouteContext) -> None:
        """Run the chain over *ctx*.

        Exceptions from middleware propagate to the caller. Calling the
        same ``next`` twice raises ``MiddlewareError``.
        """
        handler: Next = _terminal
        for mw in reversed(tuple(self._middleware)):
            handler = _wrap(mw, ctx, handler)
        await handler()


def _wrap(mw: Middleware, ctx: RouteContext, downstream: Next) -> Next:
    async def call() -> None:
        called = False

        async def next_() -> None:
            nonlocal called
            if called:
                msg = f"Middleware {mw!r} called next() more than once"
                raise MiddlewareError(msg)
            called = True
            await downstream()

        await invoke(mw, ctx, next_)

    return call
