from typing import List, Protocol

from socialq.domain.people import Interaction, Person, Reminder


class RelationshipStore(Protocol):
    def list_people(self) -> List[Person]:
        """Get all people."""
        ...

    def get_person(self, person_id: str) -> Person:
        """Get a person by ID, raising KeyError if missing."""
        ...

    def upsert_person(self, person: Person) -> None:
        """Add a new person or update an existing one."""
        ...

    def delete_person(self, person_id: str) -> None:
        """Delete a person, their reminders and their participation in interactions."""
        ...

    def list_interactions(self) -> List[Interaction]:
        """Get all interactions with their current participants joined in."""
        ...

    def get_interaction(self, interaction_id: str) -> Interaction:
        """Get an interaction by ID, raising KeyError if missing."""
        ...

    def upsert_interaction(self, interaction: Interaction) -> None:
        """Add or update an interaction, refreshing its participants' last interaction time."""
        ...

    def delete_interaction(self, interaction_id: str) -> None:
        """Delete an interaction."""
        ...

    def list_reminders(self) -> List[Reminder]:
        """Get all reminders ordered by due date."""
        ...

    def upsert_reminder(self, reminder: Reminder) -> None:
        """Add a new reminder or update an existing one."""
        ...

    def delete_reminder(self, reminder_id: str) -> None:
        """Delete a reminder."""
        ...

    def toggle_reminder(self, reminder_id: str) -> Reminder:
        """Flip a reminder between active and inactive."""
        ...

    def save(self, filepath: str | None = None) -> None:
        """Save the store to disk."""
        ...
