import logging
from typing import Sequence

from .carriers import minimum_durations_by_carrier
from .prices import compute_price_statistics
from .routes import filter_by_route
from ..models import AnalysisReport, RouteKey, Ticket


class TicketAnalyzer:
    """Route filter followed by per-carrier minimum durations and price statistics.

    Price statistics cover every ticket on the route, including those whose duration could
    not be resolved. strict_prices restricts them to tickets that also count towards the
    carrier minimums.
    """

    def __init__(self, route: RouteKey, strict_prices: bool = False):
        self.route = route
        self.strict_prices = strict_prices

    def _price_sample(self, tickets: Sequence[Ticket]) -> list[int]:
        if self.strict_prices:
            return [t.price for t in tickets if t.has_duration]
        return [t.price for t in tickets]

    def analyze(self, tickets: Sequence[Ticket]) -> AnalysisReport | None:
        matched = filter_by_route(tickets, self.route)
        logging.info('%d of %d tickets match route %s', len(matched), len(tickets), self.route)
        if not matched:
            return None

        carrier_minimums = minimum_durations_by_carrier(matched)
        skipped = sum(1 for t in matched if not t.has_duration)

        prices = self._price_sample(matched)
        price_stats = compute_price_statistics(prices) if prices else None
        return AnalysisReport(
            route=self.route,
            matched=len(matched),
            skipped=skipped,
            carrier_minimums=carrier_minimums,
            prices=price_stats,
        )
