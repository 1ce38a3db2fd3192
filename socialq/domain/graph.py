"""Graph domain models: physics primitives and renderable graph records."""

from typing import Literal

from pydantic import BaseModel, Field


class PhysicsNode(BaseModel):
    """Mutable scratch state of a single node inside one simulation run."""

    id: str
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 0.0


class PhysicsEdge(BaseModel):
    """A spring between two physics nodes, referenced by id."""

    source_id: str
    target_id: str


class GraphNode(BaseModel):
    """Renderable graph vertex for a person or an interaction.

    Attributes:
        id: "person-<id>" or "interaction-<id>"
        type: Which kind of domain entity the node stands for
        label: Text shown next to the node (empty for interactions)
        color: Hex color
        radius: Node radius in canvas units
        opacity: 1 for normal display, lower when dimmed by a selection
        x: Horizontal position on the 600x500 canvas
        y: Vertical position on the 600x500 canvas
    """

    id: str
    type: Literal["person", "interaction"]
    label: str
    color: str
    radius: float
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    x: float = 0.0
    y: float = 0.0


class GraphEdge(BaseModel):
    """Renderable edge, always from an interaction node to a person node."""

    id: str
    source_id: str
    target_id: str
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


class GraphData(BaseModel):
    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
