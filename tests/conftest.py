"""Shared fixtures: canned HTTP sessions and fake ports."""

import os
import sys
from typing import List, Sequence
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from cheap_flights.config import ApiConfig, reset_config
from cheap_flights.domain.models import FareOption, GeoPoint


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def make_session(json_body=None, text=None, error=None, content_type="application/json"):
    """Build a requests.Session double answering every GET the same way."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    response.url = "http://example.test"
    response.encoding = "utf-8"
    response.headers = {"Content-Type": content_type}
    response.raise_for_status.return_value = None
    if json_body is not None:
        response.json.return_value = json_body
    if text is not None:
        response.text = text
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return session, response


@pytest.fixture
def api_config():
    return ApiConfig()


class FakeFareSource:
    def __init__(self, options: Sequence[FareOption] = (), error=None):
        self.options = list(options)
        self.error = error
        self.calls: List[tuple] = []

    def fetch(self, origin, destination, depart_date):
        self.calls.append((origin, destination, depart_date))
        if self.error is not None:
            raise self.error
        return list(self.options)


class FixedRate:
    def __init__(self, value: float = 0.0125, error=None):
        self.value = value
        self.error = error
        self.calls = 0

    def rate(self) -> float:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.value


class FixedLanguage:
    def __init__(self, language: str = "en"):
        self.language = language

    def detect(self, text: str) -> str:
        return self.language


class CannedKnowledgeBase:
    """Answers SPARQL queries from a label -> CSV body mapping."""

    def __init__(self, answers=None, error=None):
        self.answers = answers or {}
        self.error = error
        self.queries: List[str] = []

    def query_csv(self, query: str) -> str:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        for label, body in self.answers.items():
            if f'"{label}"@' in query:
                return body
        return "itemLabel\r\n"


class StaticResolver:
    def __init__(self, origin=None, destination=None, error=None):
        self.origin = origin or GeoPoint("IEV", "Киев")
        self.destination = destination or GeoPoint("TLL", "Таллин")
        self.error = error
        self.queries: List[str] = []

    def resolve(self, text):
        self.queries.append(text)
        if self.error is not None:
            raise self.error
        return self.origin, self.destination


def fare(price, depart="2020-01-23", ret="2020-01-24", changes=0, gate="Tickets"):
    return FareOption(
        price=price,
        depart_date=depart,
        return_date=ret,
        number_of_changes=changes,
        gate=gate,
        distance=870,
    )
