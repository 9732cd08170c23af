"""Navigation — guards, hooks, router state, and history backends.

The pieces the router threads a candidate ``RouteContext`` through:

    HookDispatcher -- unconditional before/after observers
    GuardExecutor -- ordered enter/leave guards with short-circuit rejection
    RouterState -- read-only snapshot of the router's navigation state
    HistoryBackend -- host URL history (NullHistory, MemoryHistory)
"""

from waypoint.navigation.guards import GuardExecutor
from waypoint.navigation.history import HistoryBackend, MemoryHistory, NullHistory
from waypoint.navigation.hooks import HookDispatcher
from waypoint.navigation.state import RouterState

__all__ = [
    "GuardExecutor",
    "HistoryBackend",
    "HookDispatcher",
    "MemoryHistory",
    "NullHistory",
    "RouterState",
]
