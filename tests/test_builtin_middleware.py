"""Tests for waypoint.middleware.builtin — ready-made middleware factories."""

import pytest

from waypoint.middleware.builtin import (
    analytics_middleware,
    auth_middleware,
    loading_middleware,
    page_title_middleware,
    rbac_middleware,
)
from waypoint.routing.route import RouteContext, RouteMeta


def _ctx(path: str = "/", name: str = "Home", **meta: object) -> RouteContext:
    return RouteContext(
        path=path,
        name=name,
        component="pages/x",
        params={"id": "7"},
        meta=RouteMeta.from_mapping(meta),
    )


class _Next:
    def __init__(self) -> None:
        self.called = 0

    async def __call__(self) -> None:
        self.called += 1


class TestAuthMiddleware:
    @pytest.mark.asyncio
    async def test_unauthenticated_stops_chain(self) -> None:
        nxt = _Next()
        await auth_middleware(lambda: False)(_ctx(requiresAuth=True), nxt)
        assert nxt.called == 0

    @pytest.mark.asyncio
    async def test_authenticated_continues(self) -> None:
        nxt = _Next()
        await auth_middleware(lambda: True)(_ctx(requiresAuth=True), nxt)
        assert nxt.called == 1

    @pytest.mark.asyncio
    async def test_public_route_skips_check(self) -> None:
        checks: list[bool] = []
        nxt = _Next()
        await auth_middleware(lambda: checks.append(True))(_ctx(), nxt)
        assert nxt.called == 1
        assert checks == []

    @pytest.mark.asyncio
    async def test_async_predicate(self) -> None:
        async def is_authenticated() -> bool:
            return False

        nxt = _Next()
        await auth_middleware(is_authenticated)(_ctx(requiresAuth=True), nxt)
        assert nxt.called == 0


class TestRbacMiddleware:
    @pytest.mark.asyncio
    async def test_missing_role_stops_chain(self) -> None:
        nxt = _Next()
        await rbac_middleware(lambda: ["user"])(_ctx(roles=["admin"]), nxt)
        assert nxt.called == 0

    @pytest.mark.asyncio
    async def test_matching_role_continues(self) -> None:
        nxt = _Next()
        await rbac_middleware(lambda: ["user", "admin"])(_ctx(roles=["admin"]), nxt)
        assert nxt.called == 1

    @pytest.mark.asyncio
    async def test_no_roles_required(self) -> None:
        nxt = _Next()
        await rbac_middleware(lambda: [])(_ctx(), nxt)
        assert nxt.called == 1

    @pytest.mark.asyncio
    async def test_single_role_string(self) -> None:
        nxt = _Next()
        await rbac_middleware(lambda: ["admin"])(_ctx(roles="admin"), nxt)
        assert nxt.called == 1


class TestAnalyticsMiddleware:
    @pytest.mark.asyncio
    async def test_tracks_path_and_name(self) -> None:
        views: list[tuple[str, str]] = []
        nxt = _Next()
        await analytics_middleware(lambda path, name: views.append((path, name)))(
            _ctx("/dashboard", "Dashboard"), nxt
        )
        assert views == [("/dashboard", "Dashboard")]
        assert nxt.called == 1


class TestPageTitleMiddleware:
    @pytest.mark.asyncio
    async def test_sets_title(self) -> None:
        titles: list[str] = []
        await page_title_middleware(titles.append)(_ctx(title="Control Panel"), _Next())
        assert titles == ["Control Panel"]

    @pytest.mark.asyncio
    async def test_template_with_params(self) -> None:
        titles: list[str] = []
        mw = page_title_middleware(titles.append, "{title} #{id} | Acme")
        await mw(_ctx(title="User"), _Next())
        assert titles == ["User #7 | Acme"]

    @pytest.mark.asyncio
    async def test_no_title_leaves_host_alone(self) -> None:
        titles: list[str] = []
        nxt = _Next()
        await page_title_middleware(titles.append)(_ctx(), nxt)
        assert titles == []
        assert nxt.called == 1


class TestLoadingMiddleware:
    @pytest.mark.asyncio
    async def test_brackets_next(self) -> None:
        events: list[str] = []

        async def nxt() -> None:
            events.append("next")

        mw = loading_middleware(lambda: events.append("start"), lambda: events.append("end"))
        await mw(_ctx(), nxt)
        assert events == ["start", "next", "end"]

    @pytest.mark.asyncio
    async def test_end_runs_on_error(self) -> None:
        events: list[str] = []

        async def nxt() -> None:
            raise RuntimeError("downstream")

        mw = loading_middleware(lambda: events.append("start"), lambda: events.append("end"))
        with pytest.raises(RuntimeError):
            await mw(_ctx(), nxt)
        assert events == ["start", "end"]
