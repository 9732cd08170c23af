"""Invoke helpers — call sync or async callbacks uniformly.

Guards, hooks, and middleware can be ``def`` or ``async def``. Any code
that calls a user-provided callback must handle both cases. This module
provides a single helper so the sync/async check lives in exactly one
place.

Usage::

    from waypoint._internal.invoke import invoke

    allowed = await invoke(guard, ctx)
"""

import inspect
from typing import Any


async def invoke(callback: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a callback and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync: returns immediately
        def is_logged_in(ctx):
            return session.user is not None

        # async: returns a coroutine
        async def has_quota(ctx):
            return await quota_service.remaining(ctx.params["id"]) > 0
    """
    result = callback(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
