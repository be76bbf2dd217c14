from dataclasses import dataclass, field
from typing import Literal

MatchOn = Literal["code", "name"]


@dataclass(frozen=True, slots=True)
class Ticket:
    """Canonical flight offer used by every analysis step.

    origin / destination represent IATA codes; *_name keep human-readable city names.
    Date/time fields are kept as received (dd.mm.yy, h:m) and may be missing.
    duration_minutes is resolved once by the loader; when it is None, duration_issue
    explains why and the ticket only takes part in price statistics.
    """
    origin: str
    origin_name: str | None
    destination: str
    destination_name: str | None
    departure_date: str | None
    departure_time: str | None
    arrival_date: str | None
    arrival_time: str | None
    carrier: str
    stops: int
    price: int
    duration_minutes: int | None = None
    duration_issue: str | None = None

    @property
    def has_duration(self) -> bool:
        return self.duration_minutes is not None


@dataclass(frozen=True, slots=True)
class TicketRecord:
    """Wire shape of a ticket inside ``{"tickets": [...]}`` documents."""
    origin: str
    destination: str
    carrier: str
    price: int
    origin_name: str | None = None
    destination_name: str | None = None
    departure_date: str | None = None
    departure_time: str | None = None
    arrival_date: str | None = None
    arrival_time: str | None = None
    stops: int = 0


@dataclass(frozen=True, slots=True)
class FlightTimeRecord:
    """Wire shape of a ticket inside bare-array documents; flight time given in minutes."""
    origin: str
    destination: str
    carrier: str
    flight_time: int
    price: int


@dataclass(frozen=True, slots=True)
class RouteKey:
    origin: str
    destination: str
    match_on: MatchOn = "code"

    def __str__(self) -> str:
        return f"{self.origin} -> {self.destination}"


@dataclass(frozen=True, slots=True)
class CarrierMinimum:
    carrier: str
    minutes: int
    formatted: str


@dataclass(frozen=True, slots=True)
class PriceStatistics:
    count: int
    mean: float
    median: float

    @property
    def difference(self) -> float:
        return self.mean - self.median

    @property
    def absolute_difference(self) -> float:
        return abs(self.difference)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    route: RouteKey
    matched: int
    skipped: int
    carrier_minimums: dict[str, CarrierMinimum] = field(default_factory=dict)
    prices: PriceStatistics | None = None
