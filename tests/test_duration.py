"""Tests for duration parsing and formatting."""

from datetime import timedelta

import pytest

from oktetoconfig.duration import InvalidDuration, format_duration, parse_duration


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", timedelta(0)),
        ("-0", timedelta(0)),
        ("30s", timedelta(seconds=30)),
        ("2m", timedelta(minutes=2)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("+5s", timedelta(seconds=5)),
        ("-1.5h", -timedelta(hours=1, minutes=30)),
        (".5s", timedelta(milliseconds=500)),
        ("300ms", timedelta(milliseconds=300)),
        ("10us", timedelta(microseconds=10)),
        ("10µs", timedelta(microseconds=10)),
        ("1500ns", timedelta(microseconds=2)),
        ("100ns", timedelta(0)),
        ("1h1m1s1ms", timedelta(hours=1, minutes=1, seconds=1, milliseconds=1)),
    ],
)
def test_parse_duration(text: str, expected: timedelta) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "-", "notaduration", "10", "1x", ".s", "1h-5m", "s", "3000000h", "\u0663s", "\uff13s"],
)
def test_parse_duration_rejects(text: str) -> None:
    with pytest.raises(InvalidDuration):
        parse_duration(text)


def test_invalid_duration_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_duration("1 minute")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (timedelta(0), "0s"),
        (timedelta(seconds=30), "30s"),
        (timedelta(minutes=2), "2m0s"),
        (timedelta(hours=1, minutes=30), "1h30m0s"),
        (timedelta(hours=2), "2h0m0s"),
        (timedelta(seconds=1, milliseconds=500), "1.5s"),
        (timedelta(milliseconds=300), "300ms"),
        (timedelta(microseconds=1500), "1.5ms"),
        (timedelta(microseconds=2), "2µs"),
        (-timedelta(seconds=5), "-5s"),
    ],
)
def test_format_duration(value: timedelta, expected: str) -> None:
    assert format_duration(value) == expected


def test_parse_duration_rejects_oversized_whole_part() -> None:
    with pytest.raises(InvalidDuration):
        parse_duration("1" * 5000 + "s")


def test_parse_duration_ignores_leading_zeros() -> None:
    assert parse_duration("0" * 40 + "15s") == timedelta(seconds=15)


def test_parse_duration_truncates_long_fraction() -> None:
    assert parse_duration("0." + "1" * 5000 + "s") == timedelta(microseconds=111111)


def test_parse_duration_accepts_min_int64() -> None:
    assert parse_duration("-2562047h47m16.854775808s") == timedelta(microseconds=-9223372036854776)


def test_parse_duration_rejects_max_int64_plus_one() -> None:
    with pytest.raises(InvalidDuration):
        parse_duration("2562047h47m16.854775808s")
