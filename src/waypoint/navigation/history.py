"""Host navigation history — the URL bar and back/forward stack.

The router never owns the host's history; it only reflects committed
navigations into it. Any object with this shape works::

    class BrowserHistory:
        def get_query(self) -> str: ...
        def push_entry(self, ctx, url) -> None: ...
        def replace_entry(self, ctx, url) -> None: ...
        def back(self) -> None: ...
        def forward(self) -> None: ...

``NullHistory`` is the default for headless hosts and tests.
``MemoryHistory`` keeps a real entry stack in memory.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from waypoint.routing.route import RouteContext


@runtime_checkable
class HistoryBackend(Protocol):
    """Capabilities the router consumes from the host's history."""

    def get_query(self) -> str: ...
    def push_entry(self, ctx: RouteContext, url: str) -> None: ...
    def replace_entry(self, ctx: RouteContext, url: str) -> None: ...
    def back(self) -> None: ...
    def forward(self) -> None: ...


class NullHistory:
    """History backend that records nothing and has no query."""

    __slots__ = ()

    def get_query(self) -> str:
        return ""

    def push_entry(self, ctx: RouteContext, url: str) -> None:
        pass

    def replace_entry(self, ctx: RouteContext, url: str) -> None:
        pass

    def back(self) -> None:
        pass

    def forward(self) -> None:
        pass


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    url: str
    ctx: RouteContext | None = None


class MemoryHistory:
    """In-memory entry stack with browser-like push/replace/back/forward.

    Pushing while positioned behind the newest entry discards the
    forward entries, as a browser does.

    Usage::

        history = MemoryHistory("/?lang=en")
        router = Router(routes, history=history)
        await router.navigate("/about")
        history.current_url    # "/about"
        history.back()
        history.current_url    # "/?lang=en"
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, initial_url: str = "/") -> None:
        self._entries: list[HistoryEntry] = [HistoryEntry(initial_url)]
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def current_url(self) -> str:
        return self.current.url

    def get_query(self) -> str:
        _, _, query = self.current_url.partition("?")
        return query

    def push_entry(self, ctx: RouteContext, url: str) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(HistoryEntry(url, ctx))
        self._index = len(self._entries) - 1

    def replace_entry(self, ctx: RouteContext, url: str) -> None:
        self._entries[self._index] = HistoryEntry(url, ctx)

    def back(self) -> None:
        if self._index > 0:
            self._index -= 1

    def forward(self) -> None:
        if self._index < len(self._entries) - 1:
            self._index += 1
