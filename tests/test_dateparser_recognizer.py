from datetime import date, datetime, timezone

import pytest

from socialq.date_recognizers.dateparser_recognizer import (
    DateparserRecognizer,
    most_recent_day_of_month,
    trim_span,
)
from socialq.parsing.log_parser import parse_log_entry
from tests.helpers import NOW, make_person


def test_weekday_resolves_to_most_recent_past_day() -> None:
    recognizer = DateparserRecognizer()

    match = recognizer.find_first("Had coffee Monday", NOW)

    assert match is not None
    assert match.text == "Monday"
    # NOW is Wednesday 2026-10-21, the time of day is carried over
    assert match.value == datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def test_reference_timezone_is_kept() -> None:
    match = DateparserRecognizer().find_first("Called Mom yesterday", NOW)

    assert match is not None
    assert match.value.tzinfo == timezone.utc
    assert match.value.date() == date(2026, 10, 20)


def test_default_parser_prefers_past_dates() -> None:
    parsed = parse_log_entry("Had coffee Monday", [], now=NOW)

    assert parsed.date_source is not None
    assert parsed.occurred_at.date() == date(2026, 10, 19)
    assert parsed.occurred_at < NOW


def test_place_after_date_is_a_location_not_a_name() -> None:
    sarah = make_person(id="p1", name="Sarah Chen")

    parsed = parse_log_entry(
        "Had coffee with Sarah Chen yesterday at Blue Bottle", [sarah], now=NOW
    )

    assert parsed.date_source == "yesterday"
    assert parsed.occurred_at.date() == date(2026, 10, 20)
    assert parsed.location == "Blue Bottle"
    assert [p.id for p in parsed.matched_people] == ["p1"]
    assert parsed.unmatched_names == []


def test_weekday_with_preposition_before_place() -> None:
    parsed = parse_log_entry("Lunch with Sarah Chen on Friday at Blue Bottle", [], now=NOW)

    assert parsed.date_source == "Friday"
    assert parsed.occurred_at.date() == date(2026, 10, 16)
    assert parsed.location == "Blue Bottle"
    assert parsed.unmatched_names == ["Sarah Chen"]


def test_ordinal_is_a_day_of_the_current_month() -> None:
    parsed = parse_log_entry("Had a call with Sarah on the 5th", [], now=NOW)

    assert parsed.date_source == "5th"
    assert parsed.occurred_at == datetime(2026, 10, 5, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("text", "expected_source", "expected"),
    [
        ("Dinner with Dana last night", "last night", datetime(2026, 10, 20, 20, 0)),
        ("Called Mom this morning", "this morning", datetime(2026, 10, 21, 9, 0)),
        ("Coffee this afternoon with Dana", "this afternoon", datetime(2026, 10, 21, 15, 0)),
    ],
)
def test_day_part_phrases(text: str, expected_source: str, expected: datetime) -> None:
    match = DateparserRecognizer().find_first(text, NOW)

    assert match is not None
    assert match.text == expected_source
    assert match.value == expected.replace(tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("span", "expected"),
    [
        ("yesterday at", "yesterday"),
        ("on Friday at", "Friday"),
        ("on the 5th", "5th"),
        ("yesterday,", "yesterday"),
        ("at", ""),
    ],
)
def test_trim_span(span: str, expected: str) -> None:
    assert trim_span(span) == expected


@pytest.mark.parametrize(
    ("day", "base", "expected"),
    [
        (5, datetime(2026, 10, 21), datetime(2026, 10, 5)),
        (21, datetime(2026, 10, 21), datetime(2026, 10, 21)),
        (25, datetime(2026, 10, 21), datetime(2026, 9, 25)),
        (31, datetime(2026, 10, 21), datetime(2026, 8, 31)),
        (31, datetime(2026, 3, 10), datetime(2026, 1, 31)),
        (15, datetime(2026, 1, 10), datetime(2025, 12, 15)),
    ],
)
def test_most_recent_day_of_month(day: int, base: datetime, expected: datetime) -> None:
    assert most_recent_day_of_month(day, base) == expected


def test_impossible_day_of_month() -> None:
    assert most_recent_day_of_month(0, NOW) is None
    assert most_recent_day_of_month(32, NOW) is None
