"""Building renderable relationship graphs from people and interactions."""

import logging

from socialq.constants import NEUTRAL_COLOR, RELATIONSHIP_TYPE_COLORS, SENTIMENT_COLORS
from socialq.domain.graph import GraphData, GraphEdge, GraphNode, PhysicsEdge, PhysicsNode
from socialq.domain.people import Interaction, Person
from socialq.timeutils import as_utc

from .physics import run_simulation

logger = logging.getLogger(__name__)

MAX_INTERACTIONS = 50
MAX_PEOPLE = 50
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 500
INTERACTION_RADIUS = 6.0
DIMMED_NODE_OPACITY = 0.1
DIMMED_EDGE_OPACITY = 0.05


def person_node_id(person_id: str) -> str:
    return f"person-{person_id}"


def interaction_node_id(interaction_id: str) -> str:
    return f"interaction-{interaction_id}"


def person_radius(closeness_level: int) -> float:
    """Scale node size linearly with closeness: 14 px at level 1 up to 30 px at level 5."""
    return 14.0 + (closeness_level - 1) * 4.0


def sentiment_color(sentiment: int) -> str:
    return SENTIMENT_COLORS.get(sentiment, NEUTRAL_COLOR)


class RelationshipGraphBuilder:
    """Builds positioned person/interaction graphs."""

    def __init__(
        self,
        *,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
        max_interactions: int = MAX_INTERACTIONS,
        max_people: int = MAX_PEOPLE,
        iterations: int = 300,
    ):
        self.width = width
        self.height = height
        self.max_interactions = max_interactions
        self.max_people = max_people
        self.iterations = iterations

    def build(self, people: list[Person], interactions: list[Interaction]) -> GraphData:
        """Build a laid-out graph of people and their most recent interactions.

        Args:
            people: All of the user's contacts
            interactions: Interactions with their participants joined in

        Returns:
            GraphData with positioned nodes and interaction -> person edges
        """
        if not people:
            return GraphData()

        recent = self._recent_interactions(interactions)
        active_people = self._active_people(people, recent)
        active_ids = {person.id for person in active_people}

        nodes = [self._person_node(p) for p in active_people]
        nodes += [self._interaction_node(i) for i in recent if i.people]
        edges = self._build_edges(recent, active_ids)

        logger.debug(
            f"Built graph with {len(nodes)} nodes and {len(edges)} edges "
            f"from {len(people)} people and {len(interactions)} interactions"
        )

        return GraphData(nodes=self._position(nodes, edges), edges=edges)

    def _recent_interactions(self, interactions: list[Interaction]) -> list[Interaction]:
        """Keep the newest interactions only, bounding the simulation cost."""
        ordered = sorted(interactions, key=lambda i: as_utc(i.occurred_at), reverse=True)
        return ordered[: self.max_interactions]

    def _active_people(self, people: list[Person], recent: list[Interaction]) -> list[Person]:
        # Small address books show everyone, including contacts without interactions
        if len(people) <= self.max_people:
            return list(people)

        appearing = {p.id for interaction in recent for p in interaction.people}
        return [p for p in people if p.id in appearing]

    def _person_node(self, person: Person) -> GraphNode:
        return GraphNode(
            id=person_node_id(person.id),
            type="person",
            label=person.nickname or person.name,
            color=RELATIONSHIP_TYPE_COLORS[person.relationship_type],
            radius=person_radius(person.closeness_level),
        )

    def _interaction_node(self, interaction: Interaction) -> GraphNode:
        return GraphNode(
            id=interaction_node_id(interaction.id),
            type="interaction",
            label="",
            color=sentiment_color(interaction.sentiment),
            radius=INTERACTION_RADIUS,
        )

    def _build_edges(self, recent: list[Interaction], active_ids: set[str]) -> list[GraphEdge]:
        edges = []
        seen = set()

        for interaction in recent:
            for person in interaction.people:
                edge_id = f"edge-{interaction.id}-{person.id}"
                if person.id not in active_ids or edge_id in seen:
                    continue
                seen.add(edge_id)
                edges.append(
                    GraphEdge(
                        id=edge_id,
                        source_id=interaction_node_id(interaction.id),
                        target_id=person_node_id(person.id),
                    )
                )

        return edges

    def _position(self, nodes: list[GraphNode], edges: list[GraphEdge]) -> list[GraphNode]:
        physics_nodes = [PhysicsNode(id=n.id, radius=n.radius) for n in nodes]
        physics_edges = [PhysicsEdge(source_id=e.source_id, target_id=e.target_id) for e in edges]

        positioned = run_simulation(
            physics_nodes, physics_edges, self.width, self.height, self.iterations
        )
        positions = {n.id: (n.x, n.y) for n in positioned}
        fallback = (self.width / 2, self.height / 2)

        result = []
        for node in nodes:
            x, y = positions.get(node.id, fallback)
            result.append(node.model_copy(update={"x": x, "y": y}))
        return result


_default_builder = RelationshipGraphBuilder()


def build_graph_data(people: list[Person], interactions: list[Interaction]) -> GraphData:
    """Build a laid-out relationship graph on the fixed 600x500 canvas."""
    return _default_builder.build(people, interactions)


def apply_highlight(
    nodes: list[GraphNode],
    edges: list[GraphEdge],
    selected_person_id: str | None,
) -> GraphData:
    """Dim everything not directly connected to the selected person.

    With no selection the very same node and edge lists are handed back, so callers
    can compare by identity to skip a re-render. Otherwise new lists of new records
    are returned and the inputs are left untouched.
    """
    if selected_person_id is None:
        return GraphData.model_construct(nodes=nodes, edges=edges)

    selected = person_node_id(selected_person_id)
    connected = {
        e.target_id if e.source_id == selected else e.source_id
        for e in edges
        if selected in (e.source_id, e.target_id)
    }

    highlighted_nodes = [
        n.model_copy(
            update={"opacity": 1.0 if n.id == selected or n.id in connected else DIMMED_NODE_OPACITY}
        )
        for n in nodes
    ]
    highlighted_edges = [
        e.model_copy(
            update={"opacity": 1.0 if selected in (e.source_id, e.target_id) else DIMMED_EDGE_OPACITY}
        )
        for e in edges
    ]

    return GraphData(nodes=highlighted_nodes, edges=highlighted_edges)
