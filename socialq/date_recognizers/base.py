from datetime import datetime
from typing import Protocol

from pydantic import BaseModel


class DateMatch(BaseModel):
    """A date/time phrase found in text and the moment it resolves to."""

    text: str
    value: datetime


class DateRecognizer(Protocol):
    def find_first(self, text: str, relative_base: datetime) -> DateMatch | None:
        """Find the first date/time phrase in text, preferring past dates."""
        ...
