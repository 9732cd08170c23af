"""Built-in middleware factories.

Each factory returns a middleware closure. None of them can fail a
navigation: by the time middleware runs, guards have already granted
it. "Blocking" here means not calling ``next``, which only stops the
downstream middleware.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from waypoint._internal.invoke import invoke
from waypoint.middleware.protocol import Middleware, Next
from waypoint.routing.route import RouteContext

logger = logging.getLogger("waypoint.middleware")


def auth_middleware(is_authenticated: Callable[[], Any]) -> Middleware:
    """Stop the chain for ``requires_auth`` routes when nobody is logged in.

    *is_authenticated* may be sync or async.

    Usage::

        router.use(auth_middleware(lambda: session.user is not None))
    """

    async def auth(ctx: RouteContext, next: Next) -> None:
        if ctx.meta.requires_auth and not await invoke(is_authenticated):
            logger.warning("Unauthenticated access to %r", ctx.path)
            return
        await next()

    return auth


def rbac_middleware(get_user_roles: Callable[[], Iterable[str]]) -> Middleware:
    """Stop the chain when the route declares ``roles`` the user has none of."""

    async def rbac(ctx: RouteContext, next: Next) -> None:
        required = ctx.meta.roles
        if required:
            roles = set(await invoke(get_user_roles) or ())
            if roles.isdisjoint(required):
                logger.warning(
                    "Access to %r requires one of %s; user has %s",
                    ctx.path,
                    ", ".join(required),
                    ", ".join(sorted(roles)) or "no roles",
                )
                return
        await next()

    return rbac


def analytics_middleware(track_page_view: Callable[[str, str], Any]) -> Middleware:
    """Report ``(path, name)`` for every navigation that reaches middleware."""

    async def analytics(ctx: RouteContext, next: Next) -> None:
        await invoke(track_page_view, ctx.path, ctx.name)
        await next()

    return analytics


def page_title_middleware(
    set_title: Callable[[str], Any],
    template: str = "{title}",
) -> Middleware:
    """Set the host's page title from ``meta.title``.

    *template* is formatted with ``title`` and the context's ``params``::

        router.use(page_title_middleware(window.set_title, "{title} | Acme"))
    """

    async def page_title(ctx: RouteContext, next: Next) -> None:
        if ctx.meta.title:
            await invoke(set_title, template.format_map({**ctx.params, "title": ctx.meta.title}))
        await next()

    return page_title


def loading_middleware(
    on_start: Callable[[], Any],
    on_end: Callable[[], Any],
) -> Middleware:
    """Bracket the downstream chain with *on_start* / *on_end*.

    *on_end* runs even when downstream middleware raises.
    """

    async def loading(ctx: RouteContext, next: Next) -> None:
        await invoke(on_start)
        try:
            await next()
        finally:
            await invoke(on_end)

    return loading
