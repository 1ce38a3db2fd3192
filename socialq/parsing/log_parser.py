"""Extraction of people, dates, interaction type and location from a free-text log entry."""

import logging
import re
from datetime import datetime
from functools import cache

from socialq.config import settings
from socialq.date_recognizers.base import DateMatch, DateRecognizer
from socialq.date_recognizers.dateparser_recognizer import DateparserRecognizer
from socialq.domain.parsed import AmbiguousMatch, ParsedLogEntry
from socialq.domain.people import InteractionType, Person

from .lexicon import STOPWORDS, TYPE_KEYWORDS

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r"[.!?\n]+")
TITLE_SPLIT = re.compile(r"[.!?\n]")
# "at" followed by one or more capitalized words, e.g. "at Joe's Diner"
LOCATION_PATTERN = re.compile(r"\bat\s+([A-Z][A-Za-z']+(?:\s+[A-Z][A-Za-z']+)*)")
WORD_PUNCTUATION = ".,!?;:'\"()"
MAX_TITLE_LENGTH = 60


def infer_interaction_type(text: str) -> InteractionType | None:
    """Guess the interaction channel from keywords anywhere in the text."""
    lower_text = text.lower()
    for interaction_type, keywords in TYPE_KEYWORDS:
        if any(keyword in lower_text for keyword in keywords):
            return interaction_type
    return None


def extract_title(text: str) -> str:
    """Use the first sentence as title, truncated with an ellipsis past 60 characters."""
    first_sentence = TITLE_SPLIT.split(text)[0].strip()
    if len(first_sentence) <= MAX_TITLE_LENGTH:
        return first_sentence
    return first_sentence[: MAX_TITLE_LENGTH - 3] + "..."


def extract_location(text: str, date_source: str | None) -> str | None:
    """Find the place named by the last "at <Capitalized Words>" phrase.

    Earlier "at" phrases are more often part of a verb phrase than a place, so the
    last one wins. The date phrase is removed first so "at Noon" and the like never
    turn into places.
    """
    clean_text = text.replace(date_source, "", 1) if date_source else text
    matches = LOCATION_PATTERN.findall(clean_text)
    if not matches:
        return None
    return matches[-1]


def match_known_people(text: str, existing_people: list[Person]) -> list[Person]:
    """Find contacts mentioned by full name or nickname as a whole word."""
    matched = []
    matched_ids = set()

    for person in existing_people:
        if person.id in matched_ids:
            continue
        variants = [v for v in (person.name, person.nickname) if v]
        for variant in variants:
            if re.search(rf"\b{re.escape(variant)}\b", text, re.IGNORECASE):
                matched.append(person)
                matched_ids.add(person.id)
                break

    return matched


def _strip_punctuation(word: str) -> str:
    return word.strip(WORD_PUNCTUATION)


def _is_capitalized(word: str) -> bool:
    return len(word) >= 2 and word[0].isupper()


class LogParser:
    """Turns a typed log entry into structured fields for the interaction form."""

    def __init__(self, date_recognizer: DateRecognizer):
        """Initialize the parser.

        Args:
            date_recognizer: Finds date/time phrases such as "yesterday" or "Monday"
        """
        self.date_recognizer = date_recognizer

    def parse(
        self,
        text: str,
        existing_people: list[Person],
        now: datetime | None = None,
    ) -> ParsedLogEntry:
        """Parse a single log entry against the user's contacts.

        Args:
            text: Raw text as typed
            existing_people: Contacts to match names against
            now: Reference time for relative dates, defaults to the current local time

        Returns:
            A new ParsedLogEntry; nothing is persisted
        """
        now = now or datetime.now().astimezone()
        trimmed = text.strip()
        if not trimmed:
            return ParsedLogEntry(raw_text=text, occurred_at=now)

        date_match = self._find_date(trimmed, now)
        occurred_at = date_match.value if date_match else now
        date_source = date_match.text if date_match else None

        matched_people = match_known_people(trimmed, existing_people)
        candidates = self._find_name_candidates(trimmed, matched_people, date_source)

        location = extract_location(trimmed, date_source)
        if location:
            candidates = [name for name in candidates if name not in location]

        unmatched_names, ambiguous_matches = self._split_ambiguous(candidates, existing_people)

        logger.debug(
            f"Parsed log entry: {len(matched_people)} matched, {len(unmatched_names)} unmatched, "
            f"{len(ambiguous_matches)} ambiguous, date={date_source!r}, location={location!r}"
        )

        return ParsedLogEntry(
            raw_text=text,
            title=extract_title(trimmed),
            notes=trimmed,
            matched_people=matched_people,
            unmatched_names=unmatched_names,
            ambiguous_matches=ambiguous_matches,
            occurred_at=occurred_at,
            date_source=date_source,
            inferred_type=infer_interaction_type(trimmed),
            location=location,
        )

    def _find_date(self, text: str, now: datetime) -> DateMatch | None:
        try:
            return self.date_recognizer.find_first(text, now)
        except Exception as e:
            logger.warning(f"Date recognition failed for {text!r}: {e}")
            return None

    def _find_name_candidates(
        self,
        text: str,
        matched_people: list[Person],
        date_source: str | None,
    ) -> list[str]:
        """Collect capitalized words that look like names of people not yet in the contacts.

        The first word of each sentence is skipped since it is usually a verb ("Met",
        "Had"). Two capitalized words in a row are joined into a full name.
        """
        known_names = {p.name.lower() for p in matched_people}
        known_names |= {p.nickname.lower() for p in matched_people if p.nickname}
        date_text = date_source.lower() if date_source else None

        def is_excluded(word: str) -> bool:
            lower = word.lower()
            if lower in STOPWORDS:
                return True
            if date_text and lower in date_text:
                return True
            return any(lower in name for name in known_names)

        candidates: list[str] = []
        seen = set(known_names)

        for sentence in SENTENCE_SPLIT.split(text):
            words = sentence.split()
            i = 1
            while i < len(words):
                word = _strip_punctuation(words[i])
                i += 1
                if not _is_capitalized(word) or is_excluded(word):
                    continue

                next_word = _strip_punctuation(words[i]) if i < len(words) else ""
                if _is_capitalized(next_word) and not is_excluded(next_word):
                    word = f"{word} {next_word}"
                    i += 1

                if word.lower() not in seen:
                    seen.add(word.lower())
                    candidates.append(word)

        return candidates

    def _split_ambiguous(
        self, candidates: list[str], existing_people: list[Person]
    ) -> tuple[list[str], list[AmbiguousMatch]]:
        """Pull out single first names shared by two or more contacts."""
        unmatched = []
        ambiguous = []

        for name in candidates:
            if " " not in name:
                sharing = [p for p in existing_people if p.first_name.lower() == name.lower()]
                if len(sharing) >= 2:
                    ambiguous.append(AmbiguousMatch(name=name, candidates=sharing))
                    continue
            unmatched.append(name)

        return unmatched, ambiguous


@cache
def _default_parser() -> LogParser:
    return LogParser(DateparserRecognizer(languages=settings.date_languages))


def parse_log_entry(
    text: str,
    existing_people: list[Person],
    now: datetime | None = None,
) -> ParsedLogEntry:
    """Parse a log entry with the dateparser-backed default parser."""
    return _default_parser().parse(text, existing_people, now)
