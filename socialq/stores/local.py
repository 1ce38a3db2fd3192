import json
from pathlib import Path
from typing import Dict, List

from loguru import logger

from socialq.domain.people import Interaction, Person, Reminder
from socialq.stores.base import RelationshipStore
from socialq.timeutils import as_utc


class LocalStore(RelationshipStore):
    """Local data store that keeps people, interactions and reminders in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalStore.

        Args:
            filepath: Path to the store file. If provided and exists, will auto-load.
                     If provided and doesn't exist, will save to this path when save() is called.
                     If not provided, creates an empty store in memory only.
        """
        self._filepath = str(filepath) if filepath else None
        self._people: Dict[str, Person] = {}
        self._interactions: Dict[str, Interaction] = {}
        self._reminders: Dict[str, Reminder] = {}

        if self._filepath and Path(self._filepath).exists():
            with open(self._filepath, "r") as f:
                data = json.load(f)
            self._people = {
                person_id: Person(**person_data)
                for person_id, person_data in data.get("people", {}).items()
            }
            self._interactions = {
                interaction_id: Interaction(**interaction_data)
                for interaction_id, interaction_data in data.get("interactions", {}).items()
            }
            self._reminders = {
                reminder_id: Reminder(**reminder_data)
                for reminder_id, reminder_data in data.get("reminders", {}).items()
            }
            logger.info(
                f"Loaded {len(self._people)} people, {len(self._interactions)} interactions "
                f"and {len(self._reminders)} reminders from {self._filepath}"
            )

    @classmethod
    def from_data(
        cls,
        people: List[Person] | None = None,
        interactions: List[Interaction] | None = None,
        reminders: List[Reminder] | None = None,
    ) -> "LocalStore":
        """Create an in-memory LocalStore from provided data (useful for testing)."""
        instance = cls(filepath=None)
        for person in people or []:
            instance.upsert_person(person)
        for interaction in interactions or []:
            instance.upsert_interaction(interaction)
        for reminder in reminders or []:
            instance.upsert_reminder(reminder)
        return instance

    def list_people(self) -> List[Person]:
        return list(self._people.values())

    def get_person(self, person_id: str) -> Person:
        if person_id not in self._people:
            raise KeyError(f"Person {person_id} not found")
        return self._people[person_id]

    def upsert_person(self, person: Person) -> None:
        self._people[person.id] = person

    def delete_person(self, person_id: str) -> None:
        self.get_person(person_id)
        del self._people[person_id]

        for interaction_id, interaction in self._interactions.items():
            remaining = [p for p in interaction.people if p.id != person_id]
            if len(remaining) != len(interaction.people):
                self._interactions[interaction_id] = interaction.model_copy(
                    update={"people": remaining}
                )

        self._reminders = {
            reminder_id: reminder
            for reminder_id, reminder in self._reminders.items()
            if reminder.person_id != person_id
        }

    def list_interactions(self) -> List[Interaction]:
        return [self._join_people(i) for i in self._interactions.values()]

    def get_interaction(self, interaction_id: str) -> Interaction:
        if interaction_id not in self._interactions:
            raise KeyError(f"Interaction {interaction_id} not found")
        return self._join_people(self._interactions[interaction_id])

    def upsert_interaction(self, interaction: Interaction) -> None:
        self._interactions[interaction.id] = interaction

        occurred_at = as_utc(interaction.occurred_at)
        for participant in interaction.people:
            person = self._people.get(participant.id)
            if person is None:
                logger.warning(
                    f"Interaction {interaction.id} references unknown person {participant.id}"
                )
                continue
            last = person.last_interaction_at
            if last is None or as_utc(last) < occurred_at:
                self._people[person.id] = person.model_copy(
                    update={"last_interaction_at": interaction.occurred_at}
                )

    def delete_interaction(self, interaction_id: str) -> None:
        self.get_interaction(interaction_id)
        del self._interactions[interaction_id]

    def list_reminders(self) -> List[Reminder]:
        return sorted(self._reminders.values(), key=lambda r: as_utc(r.next_due_at))

    def upsert_reminder(self, reminder: Reminder) -> None:
        self._reminders[reminder.id] = reminder

    def delete_reminder(self, reminder_id: str) -> None:
        if reminder_id not in self._reminders:
            raise KeyError(f"Reminder {reminder_id} not found")
        del self._reminders[reminder_id]

    def toggle_reminder(self, reminder_id: str) -> Reminder:
        if reminder_id not in self._reminders:
            raise KeyError(f"Reminder {reminder_id} not found")
        reminder = self._reminders[reminder_id]
        toggled = reminder.model_copy(update={"is_active": not reminder.is_active})
        self._reminders[reminder_id] = toggled
        return toggled

    def save(self, filepath: str | None = None) -> None:
        """Save the store to disk.

        Args:
            filepath: Optional path to save to. If not provided, uses the path from initialization.
                     In-memory stores without any path are left unsaved.
        """
        save_path = filepath or self._filepath
        if not save_path:
            logger.debug("In-memory store, nothing to save")
            return

        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        data = {
            "people": {k: v.model_dump(mode="json") for k, v in self._people.items()},
            "interactions": {
                k: v.model_dump(mode="json") for k, v in self._interactions.items()
            },
            "reminders": {k: v.model_dump(mode="json") for k, v in self._reminders.items()},
        }
        with open(save_path, "w") as f:
            json.dump(data, f)
        logger.info(f"Saved store to {save_path}")

    def _join_people(self, interaction: Interaction) -> Interaction:
        """Replace the participant snapshots with the current person records."""
        people = [self._people[p.id] for p in interaction.people if p.id in self._people]
        return interaction.model_copy(update={"people": people})
