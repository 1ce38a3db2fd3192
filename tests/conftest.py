from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from socialq.api import create_app
from socialq.date_recognizers.base import DateRecognizer
from socialq.domain.people import Interaction, Person, Reminder
from socialq.stores.local import LocalStore
from tests.fakes import FakeDateRecognizer
from tests.helpers import make_interaction, make_person


@pytest.fixture
def test_people() -> list[Person]:
    return [
        make_person(id="p1", name="Sarah Chen", nickname="Sash", relationship_type="friend"),
        make_person(id="p2", name="Sarah Lee", relationship_type="colleague"),
        make_person(id="p3", name="Tom Baker", relationship_type="family", closeness_level=5),
    ]


@pytest.fixture
def test_interactions(test_people: list[Person]) -> list[Interaction]:
    sarah_chen, sarah_lee, tom = test_people
    return [
        make_interaction(
            id="i1",
            occurred_at="2026-10-19T18:00:00Z",
            people=[sarah_chen, tom],
            sentiment=5,
            type="in-person",
        ),
        make_interaction(
            id="i2",
            occurred_at="2026-08-01T09:00:00Z",
            people=[sarah_lee],
            sentiment=2,
            type="email",
        ),
    ]


@pytest.fixture
def test_reminders() -> list[Reminder]:
    return [
        Reminder(
            id="r1",
            person_id="p2",
            message="Ask about the new job",
            next_due_at="2026-10-23T09:00:00Z",
        ),
        Reminder(
            id="r2",
            person_id="p3",
            message="Birthday gift",
            next_due_at="2026-12-01T09:00:00Z",
        ),
    ]


@pytest.fixture
def fake_date_recognizer() -> DateRecognizer:
    return FakeDateRecognizer({"yesterday": datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc)})


@pytest.fixture
def store(
    test_people: list[Person],
    test_interactions: list[Interaction],
    test_reminders: list[Reminder],
) -> LocalStore:
    return LocalStore.from_data(
        people=test_people, interactions=test_interactions, reminders=test_reminders
    )


@pytest.fixture
def test_client(store: LocalStore, fake_date_recognizer: DateRecognizer) -> TestClient:
    """Create test client with an in-memory store and a fake date recognizer."""
    app = create_app(store=store, date_recognizer=fake_date_recognizer)
    return TestClient(app)
