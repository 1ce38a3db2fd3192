import calendar
import re
from datetime import datetime, timedelta

from dateparser.search import search_dates

from socialq.date_recognizers.base import DateMatch

# Words search_dates tends to pull into a match, e.g. "yesterday at" or "on the"
CONNECTOR_WORDS = r"(?:at|on|in|the|a|an|of|by|for|with|and|to|from|around|about)"
LEADING_CONNECTORS = re.compile(rf"^(?:{CONNECTOR_WORDS}\b[\s,]*)+", re.IGNORECASE)
TRAILING_CONNECTORS = re.compile(rf"(?:[\s,]+{CONNECTOR_WORDS})+$", re.IGNORECASE)
SPAN_PUNCTUATION = " ,.;:!?"

ORDINAL_DAY = re.compile(r"^(\d{1,2})(?:st|nd|rd|th)$", re.IGNORECASE)
BARE_NUMBER = re.compile(r"^\d+$")
EXPLICIT_TIME = re.compile(
    r"\d:\d{2}|\d\s*(?:am|pm)\b|\b(?:noon|midnight|o'clock)\b", re.IGNORECASE
)

# Day-part phrases search_dates does not recognize: (days back, hour of day)
DAY_PARTS = {
    "last night": (1, 20),
    "this morning": (0, 9),
    "this afternoon": (0, 15),
    "this evening": (0, 19),
    "tonight": (0, 20),
}
DAY_PART_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(p) for p in DAY_PARTS) + r")\b", re.IGNORECASE
)


def trim_span(text: str) -> str:
    """Drop connector words and punctuation around a matched date phrase."""
    trimmed = text.strip(SPAN_PUNCTUATION)
    trimmed = LEADING_CONNECTORS.sub("", trimmed)
    trimmed = TRAILING_CONNECTORS.sub("", trimmed)
    return trimmed.strip(SPAN_PUNCTUATION)


def most_recent_day_of_month(day: int, relative_base: datetime) -> datetime | None:
    """Resolve "the 5th" to the latest past (or current) date with that day of month."""
    if not 1 <= day <= 31:
        return None

    year, month = relative_base.year, relative_base.month
    if day > relative_base.day:
        year, month = (year, month - 1) if month > 1 else (year - 1, 12)
    while day > calendar.monthrange(year, month)[1]:
        year, month = (year, month - 1) if month > 1 else (year - 1, 12)
    return relative_base.replace(year=year, month=month, day=day)


class DateparserRecognizer:
    def __init__(self, languages: list[str] | None = None):
        self.languages = languages or ["en"]

    def find_first(self, text: str, relative_base: datetime) -> DateMatch | None:
        found = self._search(text, relative_base)
        day_part = self._find_day_part(text, relative_base)

        if day_part is None:
            return found
        if found is None or text.find(day_part.text) <= text.find(found.text):
            return day_part
        return found

    def _search(self, text: str, relative_base: datetime) -> DateMatch | None:
        # dateparser works on naive datetimes, the caller's zone is put back afterwards
        base = relative_base.replace(tzinfo=None)
        results = search_dates(
            text,
            languages=self.languages,
            settings={
                "PREFER_DATES_FROM": "past",
                "RELATIVE_BASE": base,
                "RETURN_AS_TIMEZONE_AWARE": False,
            },
        )

        for matched_text, value in results or []:
            span = trim_span(matched_text)
            if not span or BARE_NUMBER.match(span):
                continue

            ordinal = ORDINAL_DAY.match(span)
            if ordinal:
                # search_dates reads a lone ordinal as a month
                resolved = most_recent_day_of_month(int(ordinal.group(1)), relative_base)
                if resolved is None:
                    continue
                return DateMatch(text=span, value=resolved)

            if value.time() == datetime.min.time() and not EXPLICIT_TIME.search(span):
                value = datetime.combine(value.date(), base.time())
            if relative_base.tzinfo is not None:
                value = value.replace(tzinfo=relative_base.tzinfo)
            return DateMatch(text=span, value=value)

        return None

    def _find_day_part(self, text: str, relative_base: datetime) -> DateMatch | None:
        match = DAY_PART_PATTERN.search(text)
        if not match:
            return None

        days_back, hour = DAY_PARTS[match.group(1).lower()]
        value = (relative_base - timedelta(days=days_back)).replace(
            hour=hour, minute=0, second=0, microsecond=0
        )
        return DateMatch(text=match.group(1), value=value)
