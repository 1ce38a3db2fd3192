"""Relationship domain models: people, interactions and reminders."""

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

RelationshipType = Literal["family", "friend", "colleague", "acquaintance", "other"]
InteractionType = Literal["in-person", "call", "text", "video", "social-media", "email"]
ReminderFrequency = Literal["one-time", "weekly", "biweekly", "monthly", "quarterly"]

INTERACTION_TYPES: tuple[InteractionType, ...] = (
    "in-person",
    "call",
    "text",
    "video",
    "social-media",
    "email",
)


class Person(BaseModel):
    """A contact the user keeps track of.

    Attributes:
        id: Unique identifier assigned by the data store
        name: Full name, e.g. "Sarah Chen"
        nickname: Optional short name, used as the graph label when present
        relationship_type: Kind of relationship, drives the node color
        closeness_level: User-assigned intimacy rating from 1 (distant) to 5 (very close)
        last_interaction_at: When the person was last seen/contacted, if ever
    """

    id: str
    name: str
    nickname: str | None = None
    relationship_type: RelationshipType = "other"
    closeness_level: int = Field(default=3, ge=1, le=5)
    last_interaction_at: datetime | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None
    birthday: str | None = None  # ISO date string

    @property
    def first_name(self) -> str:
        return self.name.split()[0] if self.name.split() else ""


class Interaction(BaseModel):
    """A logged social interaction with the people who took part in it."""

    id: str
    occurred_at: datetime
    sentiment: int = Field(default=3, ge=1, le=5, validation_alias=AliasChoices("sentiment", "quality"))
    type: InteractionType = "in-person"
    title: str = ""
    notes: str | None = None
    location: str | None = None
    created_at: datetime | None = None
    people: list[Person] = []


class Reminder(BaseModel):
    """A nudge to get back in touch with a person."""

    id: str
    person_id: str
    message: str
    frequency: ReminderFrequency = "one-time"
    next_due_at: datetime
    is_active: bool = True
