"""Relationship health analytics and list filtering."""

import calendar
from datetime import datetime, timedelta
from typing import Literal

from socialq.domain.insights import InsightsSummary
from socialq.domain.people import (
    INTERACTION_TYPES,
    Interaction,
    Person,
    RelationshipType,
    Reminder,
)
from socialq.timeutils import as_utc, utc_now

DateRange = Literal["all", "today", "week", "month"]
SortBy = Literal["occurred_at", "created_at"]


def compute_insights(
    people: list[Person],
    interactions: list[Interaction],
    now: datetime | None = None,
    attention_days: int = 30,
) -> InsightsSummary:
    """Summarize how the user's relationships are doing.

    Args:
        people: All contacts
        interactions: All logged interactions
        now: Reference time, defaults to the current UTC time
        attention_days: Contacts not seen for more than this many days need attention

    Returns:
        InsightsSummary with totals, weekly activity, average sentiment, a per-type
        breakdown and the people who need attention
    """
    now = as_utc(now or utc_now())
    week_ago = now - timedelta(days=7)

    this_week = sum(1 for i in interactions if as_utc(i.occurred_at) >= week_ago)

    average_sentiment = None
    if interactions:
        average_sentiment = round(sum(i.sentiment for i in interactions) / len(interactions), 1)

    type_breakdown = {interaction_type: 0 for interaction_type in INTERACTION_TYPES}
    for interaction in interactions:
        type_breakdown[interaction.type] += 1

    return InsightsSummary(
        total_people=len(people),
        total_interactions=len(interactions),
        this_week=this_week,
        average_sentiment=average_sentiment,
        type_breakdown=type_breakdown,
        needs_attention=needs_attention(people, now, attention_days),
    )


def needs_attention(
    people: list[Person], now: datetime | None = None, attention_days: int = 30
) -> list[Person]:
    """People never contacted, or not contacted for more than `attention_days` whole days."""
    now = as_utc(now or utc_now())
    result = []
    for person in people:
        if person.last_interaction_at is None:
            result.append(person)
            continue
        days_since = (now - as_utc(person.last_interaction_at)).days
        if days_since > attention_days:
            result.append(person)
    return result


def sort_interactions(
    interactions: list[Interaction], sort_by: SortBy = "occurred_at"
) -> list[Interaction]:
    """Newest first by event time or by logging time. Unlogged times sort last."""
    dated = [i for i in interactions if getattr(i, sort_by) is not None]
    undated = [i for i in interactions if getattr(i, sort_by) is None]
    dated.sort(key=lambda i: as_utc(getattr(i, sort_by)), reverse=True)
    return dated + undated


def date_range_start(date_range: DateRange, now: datetime | None = None) -> datetime | None:
    now = now or utc_now()
    if date_range == "all":
        return None
    if date_range == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if date_range == "week":
        return now - timedelta(days=7)
    if date_range == "month":
        year, month = (now.year, now.month - 1) if now.month > 1 else (now.year - 1, 12)
        day = min(now.day, calendar.monthrange(year, month)[1])
        return now.replace(year=year, month=month, day=day)
    raise ValueError(f"Unknown date range: {date_range}")


def filter_interactions(
    interactions: list[Interaction],
    date_range: DateRange = "all",
    sort_by: SortBy = "occurred_at",
    now: datetime | None = None,
) -> list[Interaction]:
    """Keep interactions that occurred within the date range, newest first."""
    start = date_range_start(date_range, now)
    if start is not None:
        start = as_utc(start)
        interactions = [i for i in interactions if as_utc(i.occurred_at) >= start]
    return sort_interactions(interactions, sort_by)


def filter_people(
    people: list[Person],
    relationship_type: RelationshipType | None = None,
    query: str = "",
) -> list[Person]:
    result = people
    if relationship_type is not None:
        result = [p for p in result if p.relationship_type == relationship_type]
    if query:
        q = query.lower()
        result = [
            p
            for p in result
            if q in p.name.lower() or (p.nickname is not None and q in p.nickname.lower())
        ]
    return list(result)


def due_reminders(
    reminders: list[Reminder], within_days: int = 7, now: datetime | None = None
) -> list[Reminder]:
    """Active reminders falling due within the next `within_days` days, overdue included."""
    cutoff = as_utc(now or utc_now()) + timedelta(days=within_days)
    due = [r for r in reminders if r.is_active and as_utc(r.next_due_at) <= cutoff]
    return sorted(due, key=lambda r: as_utc(r.next_due_at))
