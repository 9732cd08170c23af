"""Tests for waypoint.navigation.history — NullHistory and MemoryHistory."""

from waypoint.navigation.history import HistoryBackend, MemoryHistory, NullHistory
from waypoint.routing.route import RouteContext


def _ctx(path: str) -> RouteContext:
    return RouteContext(path=path, name=path, component=f"pages{path}")


class TestNullHistory:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(NullHistory(), HistoryBackend)

    def test_everything_is_noop(self) -> None:
        history = NullHistory()
        assert history.get_query() == ""
        history.push_entry(_ctx("/"), "/")
        history.replace_entry(_ctx("/"), "/")
        history.back()
        history.forward()


class TestMemoryHistory:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryHistory(), HistoryBackend)

    def test_initial_entry(self) -> None:
        history = MemoryHistory("/start?x=1")
        assert len(history) == 1
        assert history.current_url == "/start?x=1"
        assert history.get_query() == "x=1"

    def test_push(self) -> None:
        history = MemoryHistory()
        ctx = _ctx("/a")
        history.push_entry(ctx, "/a")
        assert history.current_url == "/a"
        assert history.current.ctx is ctx
        assert history.index == 1

    def test_replace(self) -> None:
        history = MemoryHistory()
        history.push_entry(_ctx("/a"), "/a")
        history.replace_entry(_ctx("/b"), "/b")
        assert [e.url for e in history.entries] == ["/", "/b"]

    def test_back_and_forward(self) -> None:
        history = MemoryHistory()
        history.push_entry(_ctx("/a"), "/a")
        history.push_entry(_ctx("/b"), "/b")
        history.back()
        assert history.current_url == "/a"
        history.forward()
        assert history.current_url == "/b"

    def test_back_stops_at_first_entry(self) -> None:
        history = MemoryHistory()
        history.back()
        history.back()
        assert history.current_url == "/"

    def test_forward_stops_at_last_entry(self) -> None:
        history = MemoryHistory()
        history.forward()
        assert history.current_url == "/"

    def test_push_discards_forward_entries(self) -> None:
        history = MemoryHistory()
        history.push_entry(_ctx("/a"), "/a")
        history.push_entry(_ctx("/b"), "/b")
        history.back()
        history.push_entry(_ctx("/c"), "/c")
        assert [e.url for e in history.entries] == ["/", "/a", "/c"]
        history.forward()
        assert history.current_url == "/c"

    def test_query_without_question_mark(self) -> None:
        assert MemoryHistory("/plain").get_query() == ""
