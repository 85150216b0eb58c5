"""Tests for deep link building."""

import pytest

from conftest import fare

from cheap_flights.domain.errors import DeepLinkError
from cheap_flights.domain.models import GeoPoint
from cheap_flights.links import build_deep_link, day_month

IEV = GeoPoint("IEV", "Киев")
TLL = GeoPoint("TLL", "Таллин")


@pytest.mark.parametrize(
    "date, expected",
    [
        ("2020-01-23", "2301"),
        ("2020-12-01", "0112"),
        ("1999-07-31", "3107"),
    ],
)
def test_day_month(date, expected):
    assert day_month(date) == expected


def test_link_for_round_trip():
    link = build_deep_link(IEV, TLL, fare(3621, "2020-01-23", "2020-01-24"))
    assert link == "aviasales.ru/search/IEV2301TLL24011"


def test_link_uses_custom_prefix():
    link = build_deep_link(IEV, TLL, fare(1), prefix="example.com/s/")
    assert link.startswith("example.com/s/IEV")


@pytest.mark.parametrize(
    "depart, ret",
    [
        ("2020/01/23", "2020-01-24"),
        ("2020-01-23", "24.01.2020"),
        ("", "2020-01-24"),
        ("2020-01-23-10", "2020-01-24"),
        ("2020-01", "2020-01-24"),
    ],
)
def test_malformed_dates_fail(depart, ret):
    with pytest.raises(DeepLinkError) as excinfo:
        build_deep_link(IEV, TLL, fare(100, depart, ret))
    assert excinfo.value.date in {depart, ret}
