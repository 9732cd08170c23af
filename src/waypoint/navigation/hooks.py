"""Before/after navigation hooks.

Hooks are observers: they run in registration order, their return
values are ignored, and they cannot cancel or alter a navigation.
A hook that raises is logged and skipped; the next hook still runs.
"""

import logging

from waypoint._internal.invoke import invoke
from waypoint._internal.types import Hook
from waypoint.routing.route import RouteContext

logger = logging.getLogger("waypoint.hooks")


class HookDispatcher:
    """Holds the ``before_each`` and ``after_each`` hook lists."""

    __slots__ = ("_after", "_before")

    def __init__(self) -> None:
        self._before: list[Hook] = []
        self._after: list[Hook] = []

    def add_before(self, hook: Hook) -> None:
        self._before.append(hook)

    def add_after(self, hook: Hook) -> None:
        self._after.append(hook)

    async def run_before(self, ctx: RouteContext) -> None:
        """Await every before-hook over the candidate context."""
        await _run_all(self._before, "before", ctx)

    async def run_after(self, ctx: RouteContext) -> None:
        """Await every after-hook over the committed context."""
        await _run_all(self._after, "after", ctx)


async def _run_all(hooks: list[Hook], phase: str, ctx: RouteContext) -> None:
    # Snapshot so a hook registering another hook does not extend this run
    for hook in tuple(hooks):
        try:
            await invoke(hook, ctx)
        except Exception:
            logger.exception("%s-hook %r failed for %r", phase, hook, ctx.path)
