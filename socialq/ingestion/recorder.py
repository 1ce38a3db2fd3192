"""Recording a typed log entry as an interaction in the data store."""

import logging
from uuid import uuid4

from socialq.domain.parsed import ParsedLogEntry
from socialq.domain.people import Interaction, InteractionType, Person
from socialq.parsing.log_parser import LogParser
from socialq.parsing.sentiment import compute_sentiment
from socialq.stores.base import RelationshipStore
from socialq.timeutils import utc_now

logger = logging.getLogger(__name__)


class LogEntryRecorder:
    """Parses a log entry and persists the resulting people and interaction."""

    def __init__(self, *, store: RelationshipStore, parser: LogParser):
        """Initialize the recorder with required services.

        Args:
            store: Data store holding people and interactions
            parser: Log parser used to extract structured fields
        """
        self.store = store
        self.parser = parser

    def record(
        self,
        text: str,
        *,
        resolutions: dict[str, str] | None = None,
        interaction_type: InteractionType | None = None,
        sentiment: int | None = None,
        create_unmatched: bool = True,
    ) -> Interaction:
        """Parse text and store it as a new interaction.

        Args:
            text: Free-text log entry
            resolutions: Chosen person ID for each ambiguous first name
            interaction_type: Overrides the type inferred from keywords
            sentiment: Overrides the sentiment computed from the text
            create_unmatched: Create new contacts for names not found in the store

        Returns:
            The stored interaction with its participants

        Raises:
            ValueError: If the text is empty
            KeyError: If a resolution names an unknown person
        """
        if not text.strip():
            raise ValueError("Cannot record an empty log entry")

        parsed = self.parser.parse(text, self.store.list_people())
        participants = self._resolve_participants(parsed, resolutions or {}, create_unmatched)

        interaction = Interaction(
            id=uuid4().hex,
            occurred_at=parsed.occurred_at,
            sentiment=sentiment if sentiment is not None else compute_sentiment(parsed.notes),
            type=interaction_type or parsed.inferred_type or "in-person",
            title=parsed.title,
            notes=parsed.notes,
            location=parsed.location,
            created_at=utc_now(),
            people=participants,
        )
        self.store.upsert_interaction(interaction)
        self.store.save()

        logger.info(
            f"Recorded {interaction.type} interaction {interaction.id} "
            f"with {len(participants)} people"
        )
        return self.store.get_interaction(interaction.id)

    def _resolve_participants(
        self,
        parsed: ParsedLogEntry,
        resolutions: dict[str, str],
        create_unmatched: bool,
    ) -> list[Person]:
        participants = list(parsed.matched_people)
        participant_ids = {p.id for p in participants}

        for ambiguous in parsed.ambiguous_matches:
            person_id = resolutions.get(ambiguous.name)
            if person_id is None:
                logger.warning(f"Skipping unresolved ambiguous name: {ambiguous.name}")
                continue
            person = self.store.get_person(person_id)
            if person.id not in participant_ids:
                participants.append(person)
                participant_ids.add(person.id)

        if create_unmatched:
            for name in parsed.unmatched_names:
                person = Person(id=uuid4().hex, name=name)
                self.store.upsert_person(person)
                participants.append(person)
                logger.info(f"Created new contact: {name}")

        return participants
