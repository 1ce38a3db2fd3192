"""Relationship graph layout: physics simulation and domain-to-graph transform."""

from socialq.graph.physics import run_simulation
from socialq.graph.transform import apply_highlight, build_graph_data

__all__ = [
    "apply_highlight",
    "build_graph_data",
    "run_simulation",
]
