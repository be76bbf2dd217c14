from typing import Iterable

from ..models import RouteKey, Ticket

_ROUTE_FIELDS = {
    "code": ("origin", "destination"),
    "name": ("origin_name", "destination_name"),
}


def route_fields(route: RouteKey) -> tuple[str, str]:
    try:
        return _ROUTE_FIELDS[route.match_on]
    except KeyError:
        raise ValueError(f"Unknown route field set: {route.match_on!r}") from None


def filter_by_route(tickets: Iterable[Ticket], route: RouteKey) -> list[Ticket]:
    """Tickets flying exactly ``route``, in their original order (case-sensitive match)."""
    origin_field, destination_field = route_fields(route)
    return [
        t for t in tickets
        if getattr(t, origin_field) == route.origin and getattr(t, destination_field) == route.destination
    ]
