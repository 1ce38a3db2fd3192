import json
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from socialq.domain.people import Interaction, Person, Reminder
from socialq.stores.local import LocalStore
from tests.helpers import make_interaction, make_person


def test_store_round_trips_through_json_file(store: LocalStore) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "nested" / "store.json"
        store.save(str(path))

        loaded = LocalStore(path)

        assert [p.id for p in loaded.list_people()] == ["p1", "p2", "p3"]
        assert {i.id for i in loaded.list_interactions()} == {"i1", "i2"}
        assert [r.id for r in loaded.list_reminders()] == ["r1", "r2"]
        assert loaded.get_interaction("i2").sentiment == 2


def test_missing_file_starts_empty_and_saves_to_that_path() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "store.json"
        store = LocalStore(path)
        assert store.list_people() == []

        store.upsert_person(make_person())
        store.save()

        data = json.loads(path.read_text())
        assert list(data["people"]) == ["p1"]


def test_in_memory_store_save_is_a_no_op() -> None:
    LocalStore().save()


def test_interactions_accept_legacy_quality_field() -> None:
    interaction = Interaction(id="i1", occurred_at="2026-01-01T00:00:00Z", quality=5)

    assert interaction.sentiment == 5


def test_missing_records_raise_key_error(store: LocalStore) -> None:
    with pytest.raises(KeyError):
        store.get_person("nobody")
    with pytest.raises(KeyError):
        store.get_interaction("nothing")
    with pytest.raises(KeyError):
        store.delete_reminder("nothing")
    with pytest.raises(KeyError):
        store.toggle_reminder("nothing")


def test_upserting_interaction_updates_last_interaction_time(store: LocalStore) -> None:
    # Loaded through from_data, so the fixture interactions already set this
    assert store.get_person("p1").last_interaction_at == datetime(
        2026, 10, 19, 18, 0, tzinfo=timezone.utc
    )

    older = make_interaction(id="i3", occurred_at="2025-01-01T00:00:00Z", people=[make_person()])
    store.upsert_interaction(older)

    assert store.get_person("p1").last_interaction_at == datetime(
        2026, 10, 19, 18, 0, tzinfo=timezone.utc
    )


def test_interactions_are_joined_with_current_people(store: LocalStore) -> None:
    renamed = store.get_person("p3").model_copy(update={"nickname": "Tommy"})
    store.upsert_person(renamed)

    interaction = store.get_interaction("i1")

    assert [p.nickname for p in interaction.people] == ["Sash", "Tommy"]


def test_deleting_person_cleans_up_interactions_and_reminders(store: LocalStore) -> None:
    store.delete_person("p3")

    assert [p.id for p in store.get_interaction("i1").people] == ["p1"]
    assert [r.id for r in store.list_reminders()] == ["r1"]


def test_delete_interaction(store: LocalStore) -> None:
    store.delete_interaction("i2")

    assert [i.id for i in store.list_interactions()] == ["i1"]


def test_toggle_reminder(store: LocalStore) -> None:
    toggled = store.toggle_reminder("r1")

    assert toggled.is_active is False
    assert store.toggle_reminder("r1").is_active is True


def test_reminders_are_ordered_by_due_date() -> None:
    store = LocalStore.from_data(
        reminders=[
            Reminder(id="late", person_id="p1", message="b", next_due_at="2026-12-01T00:00:00Z"),
            Reminder(id="soon", person_id="p1", message="a", next_due_at="2026-11-01T00:00:00Z"),
        ]
    )

    assert [r.id for r in store.list_reminders()] == ["soon", "late"]


def test_closeness_level_is_validated() -> None:
    with pytest.raises(ValueError):
        Person(id="p1", name="Alice", closeness_level=6)
