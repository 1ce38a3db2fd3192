from datetime import datetime, timezone

from socialq.domain.people import Interaction, Person

# A Wednesday
NOW = datetime(2026, 10, 21, 12, 0, tzinfo=timezone.utc)


def make_person(**overrides) -> Person:
    data = {
        "id": "p1",
        "name": "Alice",
        "relationship_type": "friend",
        "closeness_level": 3,
    }
    data.update(overrides)
    return Person(**data)


def make_interaction(**overrides) -> Interaction:
    data = {
        "id": "i1",
        "type": "call",
        "title": "Catch up",
        "sentiment": 4,
        "occurred_at": "2026-01-15T00:00:00Z",
        "people": [],
    }
    data.update(overrides)
    return Interaction(**data)
