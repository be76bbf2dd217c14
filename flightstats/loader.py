"""Reading ticket collections from JSON files.

Two document shapes are accepted and normalized into ``Ticket``:

* ``{"tickets": [...]}`` with separate departure/arrival date and time fields; the
  duration is computed from them.
* a bare ``[...]`` of ``{"from", "to", "carrier", "flightTime", "price"}`` objects where
  the flight time is already given in minutes.
"""
import json
import logging
from pathlib import Path
from typing import Any

import dacite
from tqdm import tqdm

from .errors import SourceLoadError
from .models import FlightTimeRecord, Ticket, TicketRecord
from .processing.duration import ticket_duration

_FLIGHT_TIME_KEYS = {"from": "origin", "to": "destination", "flightTime": "flight_time"}
# Text fields accept any JSON value; a bad schedule value only costs that ticket its duration.
_RECORD_CONFIG = dacite.Config(cast=[str])


def _read_document(path: Path) -> Any:
    try:
        with open(path, 'rt', encoding='utf-8-sig') as f:
            return json.load(f)
    except OSError as exc:
        raise SourceLoadError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SourceLoadError(f"{path} is not valid JSON: {exc}") from exc


def _ticket_from_record(record: TicketRecord) -> Ticket:
    minutes, issue = ticket_duration(record)
    return Ticket(
        origin=record.origin,
        origin_name=record.origin_name,
        destination=record.destination,
        destination_name=record.destination_name,
        departure_date=record.departure_date,
        departure_time=record.departure_time,
        arrival_date=record.arrival_date,
        arrival_time=record.arrival_time,
        carrier=record.carrier,
        stops=record.stops,
        price=record.price,
        duration_minutes=minutes,
        duration_issue=issue,
    )


def _ticket_from_flight_time(record: FlightTimeRecord) -> Ticket:
    return Ticket(
        origin=record.origin,
        origin_name=record.origin,
        destination=record.destination,
        destination_name=record.destination,
        departure_date=None,
        departure_time=None,
        arrival_date=None,
        arrival_time=None,
        carrier=record.carrier,
        stops=0,
        price=record.price,
        duration_minutes=record.flight_time,
    )


def _parse_item(item: Any, index: int, flight_time_shape: bool) -> Ticket:
    if not isinstance(item, dict):
        raise SourceLoadError(f"Ticket #{index} is not an object: {item!r}")
    try:
        if flight_time_shape:
            data = {_FLIGHT_TIME_KEYS.get(k, k): v for k, v in item.items()}
            return _ticket_from_flight_time(dacite.from_dict(data=data, data_class=FlightTimeRecord))
        return _ticket_from_record(dacite.from_dict(data=item, data_class=TicketRecord, config=_RECORD_CONFIG))
    except dacite.DaciteError as exc:
        raise SourceLoadError(f"Ticket #{index} is malformed: {exc}") from exc


def parse_tickets(document: Any) -> list[Ticket]:
    """Normalize a decoded JSON document into tickets, whichever shape it has."""
    if isinstance(document, dict):
        items = document.get("tickets")
        if not isinstance(items, list):
            raise SourceLoadError('Expected a "tickets" array in the top-level object')
        flight_time_shape = False
    elif isinstance(document, list):
        items = document
        flight_time_shape = True
    else:
        raise SourceLoadError(f"Unsupported top-level JSON type: {type(document).__name__}")

    tickets = [
        _parse_item(item, index, flight_time_shape)
        for index, item in enumerate(tqdm(items, desc='Normalizing tickets', leave=False, disable=None))
    ]
    incomplete = sum(1 for t in tickets if not t.has_duration)
    if incomplete:
        logging.info('%d of %d tickets have no resolvable flight duration', incomplete, len(tickets))
    return tickets


def load_tickets(path: str | Path) -> list[Ticket]:
    path = Path(path)
    logging.info('Loading tickets from %s', path)
    tickets = parse_tickets(_read_document(path))
    logging.info('Loaded %d tickets', len(tickets))
    return tickets
