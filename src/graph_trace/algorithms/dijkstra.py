"""Dijkstra's single-source shortest paths with a recorded step trace.

Uses :class:`IndexedMinPriorityQueue` for insert-or-decrease-key, so
every node enters the queue at most once per run and is finalized
exactly once. One step is recorded per finalization.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from ..config import TraceOptions, resolve_options
from ..exceptions import InvalidStartNode, NegativeWeight, UnsupportedGraphKind
from ..graph.types import GraphData
from ..priority_queue import IndexedMinPriorityQueue
from ..trace import TraversalResult, TraceRecorder

logger = logging.getLogger(__name__)

ALGORITHM = "dijkstra"


def format_distance(value: int | float, infinity_label: str = "∞") -> str:
    """Render a distance label; integral floats drop their ``.0``."""
    if isinstance(value, float):
        if math.isinf(value):
            return infinity_label
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass
class _DijkstraState:
    distances: dict[str, int | float]
    predecessors: dict[str, str | None]
    queue: IndexedMinPriorityQueue = field(default_factory=IndexedMinPriorityQueue)
    finalized: set[str] = field(default_factory=set)
    order: list[str] = field(default_factory=list)

    def annotations(self, infinity_label: str) -> dict[str, str]:
        return {
            node: format_distance(dist, infinity_label) for node, dist in self.distances.items()
        }


def run_dijkstra(
    graph: GraphData,
    start_id: str | None = None,
    options: TraceOptions | None = None,
) -> TraversalResult:
    """Compute shortest distances from *start_id*.

    Returns:
        TraversalResult whose ``traversal`` is the finalization order and
        whose ``log`` maps every node to its shortest distance
        (``math.inf`` when unreachable).

    Raises:
        InvalidStartNode: If start_id is missing or not in the graph.
        UnsupportedGraphKind: If the graph is unweighted.
        NegativeWeight: If any edge weight is negative.
    """
    if not graph.has_node(start_id):
        raise InvalidStartNode(ALGORITHM, start_id)
    if not graph.is_weighted:
        raise UnsupportedGraphKind(ALGORITHM, "a weighted graph")
    for edge in graph.edges:
        if edge.weight < 0:
            raise NegativeWeight(ALGORITHM, edge)
    options = resolve_options(options)

    state = _DijkstraState(
        distances={node_id: math.inf for node_id in graph.node_ids()},
        predecessors={node_id: None for node_id in graph.node_ids()},
    )
    recorder = TraceRecorder()
    state.distances[start_id] = 0
    state.queue.insert(start_id, 0)

    while state.queue:
        current, current_dist = state.queue.pop()
        state.finalized.add(current)
        state.order.append(current)

        for neighbor, weight in graph.neighbors(current):
            if neighbor in state.finalized:
                continue
            candidate = current_dist + weight
            if candidate < state.distances[neighbor]:
                state.distances[neighbor] = candidate
                state.predecessors[neighbor] = current
                state.queue.insert(neighbor, candidate)

        structure = state.queue.ids()
        recorder.record(
            current=current,
            visited=state.order,
            structure=structure,
            display=(
                f"Visiting {current} "
                f"(dist: {format_distance(current_dist, options.infinity_label)}), "
                f"PQ: [{', '.join(structure)}]"
            ),
            node_annotations=state.annotations(options.infinity_label),
        )

    logger.debug(
        "dijkstra: finalized %d of %d nodes from %s",
        len(state.order),
        len(graph.nodes),
        start_id,
    )
    return recorder.build(
        state.order,
        state.distances,
        state.annotations(options.infinity_label),
        state.predecessors,
    )


def shortest_path(result: TraversalResult, target: str) -> list[str]:
    """Reconstruct the source-to-*target* path from a Dijkstra result.

    Returns:
        Node ids from the source to target, or an empty list if target is
        unreachable or unknown.
    """
    if math.isinf(result.log.get(target, math.inf)):
        return []
    path = [target]
    while result.predecessors.get(path[-1]) is not None:
        path.append(result.predecessors[path[-1]])
    path.reverse()
    return path


__all__ = ["run_dijkstra", "shortest_path", "format_distance"]
