"""Shared fixtures for flightstats tests."""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from flightstats.models import Ticket


def _make_ticket(**overrides: Any) -> Ticket:
    fields: dict[str, Any] = {
        "origin": "VVO",
        "origin_name": "Владивосток",
        "destination": "TLV",
        "destination_name": "Тель-Авив",
        "departure_date": "12.05.18",
        "departure_time": "16:20",
        "arrival_date": "12.05.18",
        "arrival_time": "22:10",
        "carrier": "TK",
        "stops": 3,
        "price": 12400,
        "duration_minutes": 350,
        "duration_issue": None,
    }
    fields.update(overrides)
    return Ticket(**fields)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Drop stream handlers installed by setup_logging so they do not outlive captured streams."""
    root = logging.getLogger()
    before, level = set(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def make_ticket() -> Callable[..., Ticket]:
    return _make_ticket


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(document: Any, name: str = "tickets.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def tickets_document() -> dict[str, Any]:
    """Document in the ``{"tickets": [...]}`` shape with two carriers and one incomplete ticket."""
    return {
        "tickets": [
            {
                "origin": "VVO",
                "origin_name": "Владивосток",
                "destination": "TLV",
                "destination_name": "Тель-Авив",
                "departure_date": "12.05.18",
                "departure_time": "16:20",
                "arrival_date": "12.05.18",
                "arrival_time": "22:10",
                "carrier": "TK",
                "stops": 3,
                "price": 12400,
            },
            {
                "origin": "VVO",
                "origin_name": "Владивосток",
                "destination": "TLV",
                "destination_name": "Тель-Авив",
                "departure_date": "12.05.18",
                "departure_time": "17:20",
                "arrival_date": "12.05.18",
                "arrival_time": "23:50",
                "carrier": "S7",
                "stops": 1,
                "price": 13100,
            },
            {
                "origin": "VVO",
                "origin_name": "Владивосток",
                "destination": "TLV",
                "destination_name": "Тель-Авив",
                "departure_date": "12.05.18",
                "departure_time": "9:40",
                "arrival_date": "12.05.18",
                "arrival_time": "19:25",
                "carrier": "SU",
                "stops": 3,
                "price": 15300,
            },
            {
                "origin": "VVO",
                "origin_name": "Владивосток",
                "destination": "TLV",
                "destination_name": "Тель-Авив",
                "departure_date": "12.05.18",
                "departure_time": "12:10",
                "arrival_date": "12.05.18",
                "carrier": "TK",
                "stops": 2,
                "price": 20000,
            },
            {
                "origin": "LRN",
                "origin_name": "Ларнака",
                "destination": "TLV",
                "destination_name": "Тель-Авив",
                "departure_date": "12.05.18",
                "departure_time": "12:50",
                "arrival_date": "12.05.18",
                "arrival_time": "14:30",
                "carrier": "SU",
                "stops": 1,
                "price": 7000,
            },
        ]
    }
