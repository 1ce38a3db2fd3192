import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from socialq.date_recognizers.dateparser_recognizer import DateparserRecognizer
from socialq.ingestion.recorder import LogEntryRecorder
from socialq.parsing.log_parser import LogParser
from socialq.stores.local import LocalStore
from tests.fakes import FakeDateRecognizer

YESTERDAY = datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def recorder(store: LocalStore) -> LogEntryRecorder:
    parser = LogParser(FakeDateRecognizer({"yesterday": YESTERDAY}))
    return LogEntryRecorder(store=store, parser=parser)


def test_record_stores_parsed_interaction(recorder: LogEntryRecorder, store: LocalStore) -> None:
    interaction = recorder.record("Had coffee with Sarah Chen yesterday at Blue Bottle")

    assert [p.id for p in interaction.people] == ["p1"]
    assert interaction.occurred_at == YESTERDAY
    assert interaction.type == "in-person"
    assert interaction.location == "Blue Bottle"
    assert interaction.sentiment == 3
    assert interaction.created_at is not None
    assert len(store.list_interactions()) == 3
    assert store.get_person("p1").last_interaction_at == YESTERDAY


def test_sentiment_is_computed_from_notes(recorder: LogEntryRecorder) -> None:
    interaction = recorder.record("Great dinner with Tom Baker, loved it")

    assert interaction.sentiment == 5
    assert [p.id for p in interaction.people] == ["p3"]


def test_explicit_type_and_sentiment_win(recorder: LogEntryRecorder) -> None:
    interaction = recorder.record(
        "Great dinner with Tom Baker", interaction_type="video", sentiment=1
    )

    assert interaction.type == "video"
    assert interaction.sentiment == 1


def test_ambiguous_name_uses_resolution(recorder: LogEntryRecorder) -> None:
    interaction = recorder.record("Lunch with Sarah", resolutions={"Sarah": "p2"})

    assert [p.id for p in interaction.people] == ["p2"]


def test_unresolved_ambiguous_name_is_skipped(
    recorder: LogEntryRecorder, store: LocalStore
) -> None:
    interaction = recorder.record("Lunch with Sarah")

    assert interaction.people == []
    assert len(store.list_people()) == 3


def test_resolution_to_unknown_person_raises(recorder: LogEntryRecorder) -> None:
    with pytest.raises(KeyError):
        recorder.record("Lunch with Sarah", resolutions={"Sarah": "nobody"})


def test_unmatched_names_become_new_contacts(
    recorder: LogEntryRecorder, store: LocalStore
) -> None:
    interaction = recorder.record("Met Priya Patel for drinks")

    assert [p.name for p in interaction.people] == ["Priya Patel"]
    new_person = store.get_person(interaction.people[0].id)
    assert new_person.relationship_type == "other"
    assert new_person.closeness_level == 3
    assert new_person.last_interaction_at == interaction.occurred_at


def test_unmatched_names_can_be_left_out(recorder: LogEntryRecorder, store: LocalStore) -> None:
    interaction = recorder.record("Met Priya Patel for drinks", create_unmatched=False)

    assert interaction.people == []
    assert len(store.list_people()) == 3


def test_empty_entry_is_rejected(recorder: LogEntryRecorder) -> None:
    with pytest.raises(ValueError):
        recorder.record("   ")


def test_recorded_interaction_is_saved_to_disk() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "store.json"
        recorder = LogEntryRecorder(
            store=LocalStore(path), parser=LogParser(FakeDateRecognizer())
        )

        interaction = recorder.record("Called Jordan about the trip")

        reloaded = LocalStore(path)
        assert reloaded.get_interaction(interaction.id).type == "call"
        assert [p.name for p in reloaded.list_people()] == ["Jordan"]


def test_place_after_real_date_phrase_is_not_a_new_contact(store: LocalStore) -> None:
    recorder = LogEntryRecorder(store=store, parser=LogParser(DateparserRecognizer()))

    interaction = recorder.record("Had coffee with Sarah Chen yesterday at Blue Bottle")

    assert interaction.location == "Blue Bottle"
    assert [p.id for p in interaction.people] == ["p1"]
    assert [p.name for p in store.list_people()] == ["Sarah Chen", "Sarah Lee", "Tom Baker"]
