"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(ctx: RouteContext, next: Next) -> None

Built-in middleware factories:
    analytics_middleware -- Report page views
    auth_middleware -- Skip downstream middleware on unauthenticated access
    loading_middleware -- Start/end callbacks around the chain
    page_title_middleware -- Set the page title from route meta
    rbac_middleware -- Skip downstream middleware on missing roles
"""

from waypoint.middleware.builtin import (
    analytics_middleware,
    auth_middleware,
    loading_middleware,
    page_title_middleware,
    rbac_middleware,
)
from waypoint.middleware.pipeline import MiddlewarePipeline
from waypoint.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "MiddlewarePipeline",
    "Next",
    "analytics_middleware",
    "auth_middleware",
    "loading_middleware",
    "page_title_middleware",
    "rbac_middleware",
]
