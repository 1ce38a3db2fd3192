"""Force-directed layout simulation over abstract nodes and edges.

Three forces act on every node each iteration:
    1. Coulomb-style repulsion between all node pairs
    2. Hookean spring attraction along edges
    3. Weak gravity toward the canvas center
"""

import logging

import numpy as np

from socialq.domain.graph import PhysicsEdge, PhysicsNode

logger = logging.getLogger(__name__)

REPULSION_STRENGTH = 6000.0
SPRING_STRENGTH = 0.06
REST_LENGTH = 110.0
GRAVITY_ALPHA = 0.015
DAMPING = 0.85
MIN_DIST = 1.0
SEED_RADIUS_RATIO = 0.3


def seed_circle(count: int, cx: float, cy: float, radius: float) -> np.ndarray:
    """Place `count` points evenly around a circle.

    Returns:
        Array of shape (count, 2) with x/y positions
    """
    angles = 2 * np.pi * np.arange(count) / count
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def run_simulation(
    nodes: list[PhysicsNode],
    edges: list[PhysicsEdge],
    width: float,
    height: float,
    iterations: int = 300,
) -> list[PhysicsNode]:
    """Lay out nodes on a width x height canvas.

    Caller-supplied positions and velocities are ignored and the input nodes are
    never mutated. Edges that reference an unknown node id are skipped.

    Args:
        nodes: Nodes to position, only id and radius are used
        edges: Springs between nodes
        width: Canvas width
        height: Canvas height
        iterations: Number of integration steps

    Returns:
        New PhysicsNode objects, in input order, with simulated x/y/vx/vy
    """
    if not nodes:
        return []

    cx = width / 2
    cy = height / 2
    center = np.array([cx, cy], dtype=np.float64)
    positions = seed_circle(len(nodes), cx, cy, min(width, height) * SEED_RADIUS_RATIO)
    velocities = np.zeros_like(positions)

    index_by_id = {node.id: i for i, node in enumerate(nodes)}
    pairs = [
        (index_by_id[edge.source_id], index_by_id[edge.target_id])
        for edge in edges
        if edge.source_id in index_by_id and edge.target_id in index_by_id
    ]
    sources = np.array([s for s, _ in pairs], dtype=np.intp)
    targets = np.array([t for _, t in pairs], dtype=np.intp)

    logger.debug(
        f"Simulating {len(nodes)} nodes and {len(pairs)} edges for {iterations} iterations"
    )

    for _ in range(iterations):
        forces = _repulsion_forces(positions)
        forces += _spring_forces(positions, sources, targets)
        forces += GRAVITY_ALPHA * (center - positions)

        velocities = (velocities + forces) * DAMPING
        positions = positions + velocities

    return [
        node.model_copy(
            update={
                "x": float(positions[i, 0]),
                "y": float(positions[i, 1]),
                "vx": float(velocities[i, 0]),
                "vy": float(velocities[i, 1]),
            }
        )
        for i, node in enumerate(nodes)
    ]


def _repulsion_forces(positions: np.ndarray) -> np.ndarray:
    """Push every pair of nodes apart with magnitude REPULSION_STRENGTH / distance^2."""
    delta = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    dist_sq = np.maximum(np.sum(delta**2, axis=-1), MIN_DIST)
    # force / dist turns delta into force * unit vector; the diagonal has delta == 0
    scale = REPULSION_STRENGTH / (dist_sq * np.sqrt(dist_sq))
    return np.sum(delta * scale[..., np.newaxis], axis=1)


def _spring_forces(positions: np.ndarray, sources: np.ndarray, targets: np.ndarray) -> np.ndarray:
    """Pull edge endpoints toward REST_LENGTH apart."""
    forces = np.zeros_like(positions)
    if sources.size == 0:
        return forces

    delta = positions[targets] - positions[sources]
    dist = np.maximum(np.linalg.norm(delta, axis=1), MIN_DIST)
    pull = (SPRING_STRENGTH * (dist - REST_LENGTH) / dist)[:, np.newaxis] * delta

    np.add.at(forces, sources, pull)
    np.add.at(forces, targets, -pull)
    return forces
