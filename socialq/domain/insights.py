"""Insights domain models."""

from pydantic import BaseModel

from socialq.domain.people import Person


class InsightsSummary(BaseModel):
    """Relationship health statistics over the user's people and interactions."""

    total_people: int
    total_interactions: int
    this_week: int
    average_sentiment: float | None = None
    type_breakdown: dict[str, int] = {}
    needs_attention: list[Person] = []
