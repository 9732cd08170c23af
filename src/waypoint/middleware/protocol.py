"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(ctx: RouteContext, next: Next) -> None: ...

No base class required. The router checks the shape, not the lineage.

Middleware runs only after every guard has passed, so it observes and
enriches an already-authorized navigation. Returning without awaiting
``next()`` skips the downstream middleware but does not fail the
navigation.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from waypoint.routing.route import RouteContext

# The rest of the chain, downstream of the current middleware
Next: TypeAlias = Callable[[], Awaitable[None]]


class Middleware(Protocol):
    """Protocol for waypoint middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(ctx: RouteContext, next: Next) -> None:
            start = time.monotonic()
            await next()
            log.info("%s took %.3fs", ctx.path, time.monotonic() - start)

        # Class middleware
        class Breadcrumbs:
            async def __call__(self, ctx: RouteContext, next: Next) -> None:
                ...
    """

    async def __call__(self, ctx: RouteContext, next: Next) -> None: ...
