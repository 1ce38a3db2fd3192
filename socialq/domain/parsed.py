"""Result models of parsing a natural-language log entry."""

from datetime import datetime

from pydantic import BaseModel

from socialq.domain.people import InteractionType, Person


class AmbiguousMatch(BaseModel):
    """A first name found in the text that is shared by several contacts."""

    name: str
    candidates: list[Person]


class ParsedLogEntry(BaseModel):
    """Structured fields extracted from a single free-text log entry.

    Attributes:
        raw_text: The text exactly as typed
        title: Short summary taken from the first sentence
        notes: Full trimmed text
        matched_people: Existing contacts mentioned by name or nickname
        unmatched_names: Capitalized names that look like people but are not contacts yet
        ambiguous_matches: First names shared by two or more contacts
        occurred_at: Parsed date/time, or the parse time when none was found
        date_source: Text fragment the date was parsed from (e.g. "yesterday")
        inferred_type: Interaction type guessed from keywords
        location: Place taken from an "at <Place>" phrase
    """

    raw_text: str
    title: str = ""
    notes: str = ""
    matched_people: list[Person] = []
    unmatched_names: list[str] = []
    ambiguous_matches: list[AmbiguousMatch] = []
    occurred_at: datetime
    date_source: str | None = None
    inferred_type: InteractionType | None = None
    location: str | None = None
