"""Tests for duration parsing and formatting."""

import datetime

import pytest
from lifesaver.utils.formatting import human_delta

from slowbot.duration import DurationError, format_duration, parse_duration


@pytest.mark.parametrize(
    "expression,expected",
    [
        ("0", datetime.timedelta(0)),
        ("30s", datetime.timedelta(seconds=30)),
        ("5m", datetime.timedelta(minutes=5)),
        ("6h", datetime.timedelta(hours=6)),
        ("1h30m", datetime.timedelta(hours=1, minutes=30)),
        ("1.5h", datetime.timedelta(minutes=90)),
        (".5s", datetime.timedelta(milliseconds=500)),
        ("300ms", datetime.timedelta(milliseconds=300)),
        ("1500us", datetime.timedelta(microseconds=1500)),
        ("1500\N{MICRO SIGN}s", datetime.timedelta(microseconds=1500)),
        ("2000ns", datetime.timedelta(microseconds=2)),
        ("+45s", datetime.timedelta(seconds=45)),
        ("-5s", datetime.timedelta(seconds=-5)),
        ("2m3.25s", datetime.timedelta(minutes=2, seconds=3, milliseconds=250)),
    ],
)
def test_parse_duration(expression, expected):
    assert parse_duration(expression) == expected


@pytest.mark.parametrize(
    "expression", ["", "-", "banana", "30", "s", ".s", "5x", "1h-5m", "5 m", "1e3s"]
)
def test_parse_duration_rejects_garbage(expression):
    with pytest.raises(DurationError) as exc_info:
        parse_duration(expression)

    assert exc_info.value.expression == expression
    assert isinstance(exc_info.value, ValueError)


def test_parse_duration_rejects_huge_values():
    with pytest.raises(DurationError, match="too large"):
        parse_duration("99999999999999999h")


def test_parse_duration_rejects_too_many_digits():
    with pytest.raises(DurationError, match="too many digits"):
        parse_duration("9" * 5000 + "s")

    with pytest.raises(DurationError, match="too many digits"):
        parse_duration("0." + "5" * 5000 + "s")


@pytest.mark.parametrize("seconds", [1, 30, 90, 3600, 3661, 21600])
def test_format_duration(seconds):
    assert format_duration(seconds) == human_delta(datetime.timedelta(seconds=seconds))


def test_format_zero_duration():
    assert format_duration(0) == "0 seconds"
