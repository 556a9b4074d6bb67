from datetime import datetime

import pytest

from transforms import parse_boolean, parse_date, parse_number, split_list


@pytest.mark.parametrize("value,expected", [
    ("$450,000", 450000),
    (" 1_000 ", 1000),
    ("2.5", 2.5),
    ("€99", 99),
    (7, 7),
    (3.0, 3),
])
def test_parse_number(value, expected):
    assert parse_number(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "nan", "inf", None, True, "12 beds"])
def test_parse_number_rejects(value):
    assert parse_number(value) is None


@pytest.mark.parametrize("value,expected", [
    ("2024-03-15", datetime(2024, 3, 15)),
    ("2024-03-15T10:30:00.123Z", datetime(2024, 3, 15, 10, 30)),
    ("03/15/2024", datetime(2024, 3, 15)),
    ("15/03/2024", datetime(2024, 3, 15)),
    ("3-15-2024", datetime(2024, 3, 15)),
    ("2024/03/15", datetime(2024, 3, 15)),
    ("March 15, 2024", datetime(2024, 3, 15)),
    ("Mar 15 2024", datetime(2024, 3, 15)),
    ("15 March 2024", datetime(2024, 3, 15)),
    ("3/15/24", datetime(2024, 3, 15)),
    ("15-Mar-2024", datetime(2024, 3, 15)),
    ("Friday, March 15, 2024", datetime(2024, 3, 15)),
])
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "not a date", "12345", None, "May", "1/2", "Jan 2020"])
def test_parse_date_rejects(value):
    assert parse_date(value) is None


def test_parse_boolean():
    assert parse_boolean("Yes") is True
    assert parse_boolean("n") is False
    assert parse_boolean(1) is True
    assert parse_boolean("maybe") is None


def test_split_list():
    assert split_list("a.jpg, b.jpg;c.jpg | d.jpg") == ["a.jpg", "b.jpg", "c.jpg", "d.jpg"]
    assert split_list(" , ") == []
    assert split_list(None) == []
    assert split_list(["a", " ", "b "]) == ["a", "b"]
