import logging
from collections import defaultdict
from typing import Iterable

from .duration import format_duration
from ..models import CarrierMinimum, Ticket


def group_durations_by_carrier(tickets: Iterable[Ticket]) -> dict[str, list[int]]:
    grouped: dict[str, list[int]] = defaultdict(list)
    for ticket in tickets:
        if not ticket.has_duration:
            logging.warning('Skipping ticket %s %s -> %s (%s): %s', ticket.carrier, ticket.origin,
                            ticket.destination, ticket.departure_date, ticket.duration_issue)
            continue
        grouped[ticket.carrier].append(ticket.duration_minutes)
    return dict(grouped)


def minimum_durations_by_carrier(tickets: Iterable[Ticket]) -> dict[str, CarrierMinimum]:
    """Shortest flight per carrier; tickets without a duration are logged and left out."""
    minimums = {}
    for carrier, durations in group_durations_by_carrier(tickets).items():
        shortest = min(durations)
        minimums[carrier] = CarrierMinimum(carrier=carrier, minutes=shortest, formatted=format_duration(shortest))
    return minimums
