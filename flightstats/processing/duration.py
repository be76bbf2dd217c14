import logging
import re
from datetime import datetime
from typing import TypeAlias

from ..errors import DateTimeParseError, InvalidTimeFormat, MissingFieldError
from ..models import TicketRecord

DurationResult: TypeAlias = tuple[int | None, str | None]

TIMESTAMP_FORMAT = "%d.%m.%y %H:%M"
_DATE_PATTERN = re.compile(r"\d{2}\.\d{2}\.\d{2}")
_SCHEDULE_FIELDS = ("departure_date", "departure_time", "arrival_date", "arrival_time")


def normalize_time(value: str) -> str:
    """Return ``value`` as zero-padded ``HH:MM``; ``8:5`` becomes ``08:05``."""
    parts = value.split(":")
    if len(parts) != 2:
        raise InvalidTimeFormat(f"Invalid time format: {value!r}")
    padded = []
    for part in parts:
        if len(part) == 1:
            part = "0" + part
        elif len(part) != 2:
            raise InvalidTimeFormat(f"Invalid time format: {value!r}")
        padded.append(part)
    return ":".join(padded)


def parse_timestamp(date_str: str, time_str: str) -> datetime:
    try:
        normalized = normalize_time(time_str)
    except InvalidTimeFormat as exc:
        raise DateTimeParseError(str(exc)) from exc
    if not _DATE_PATTERN.fullmatch(date_str):
        raise DateTimeParseError(f"Invalid date format: {date_str!r}")
    try:
        return datetime.strptime(f"{date_str} {normalized}", TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise DateTimeParseError(f"Cannot parse '{date_str} {time_str}': {exc}") from exc


def flight_duration(departure_date: str, departure_time: str, arrival_date: str, arrival_time: str) -> int:
    """Signed minutes between departure and arrival.

    Arrival before departure (missing date rollover in the data) yields a negative value,
    which is kept as-is.
    """
    departure = parse_timestamp(departure_date, departure_time)
    arrival = parse_timestamp(arrival_date, arrival_time)
    minutes = int((arrival - departure).total_seconds()) // 60
    logging.debug('Departure %s, arrival %s, duration %s',
                  departure.strftime("%Y-%m-%d %H:%M"), arrival.strftime("%Y-%m-%d %H:%M"),
                  format_duration(minutes))
    return minutes


def ticket_duration(record: TicketRecord) -> DurationResult:
    """Resolve a record's duration without raising for per-ticket problems."""
    missing = [name for name in _SCHEDULE_FIELDS if getattr(record, name) is None]
    try:
        if missing:
            raise MissingFieldError(missing)
        for name in _SCHEDULE_FIELDS:
            if not isinstance(getattr(record, name), str):
                raise DateTimeParseError(f"{name} is not text: {getattr(record, name)!r}")
        minutes = flight_duration(record.departure_date, record.departure_time,
                                  record.arrival_date, record.arrival_time)
    except (MissingFieldError, DateTimeParseError) as exc:
        return None, f"{type(exc).__name__}: {exc}"
    return minutes, None


def format_duration(minutes: int) -> str:
    """``90`` -> ``1 hours 30 minutes``; negative spans keep the sign on both parts."""
    sign = -1 if minutes < 0 else 1
    hours, rest = divmod(abs(minutes), 60)
    return f"{sign * hours} hours {sign * rest} minutes"
