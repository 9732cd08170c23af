"""Router state snapshot."""

from dataclasses import dataclass

from waypoint.routing.route import RouteContext


@dataclass(frozen=True, slots=True)
class RouterState:
    """Read-only view of the router's navigation state.

    ``history`` only grows on successful commits, and once anything has
    been committed ``current`` is its last entry. Two snapshots taken
    with no navigation in between compare equal.

    Attributes:
        current: The committed route, or ``None`` before the first commit.
        previous: The route committed before ``current``.
        is_navigating: A navigation is in flight.
        history: Every committed route, oldest first.
    """

    current: RouteContext | None = None
    previous: RouteContext | None = None
    is_navigating: bool = False
    history: tuple[RouteContext, ...] = ()
