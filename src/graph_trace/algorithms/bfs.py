"""Breadth-first search with a recorded step trace.

Single component only: nodes unreachable from the start node are not
visited. A node is discovered, ranked and logged when it is enqueued.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from ..config import TraceOptions, resolve_options
from ..exceptions import InvalidStartNode, UnsupportedGraphKind
from ..graph.types import GraphData
from ..trace import TraceRecorder, TraversalResult

logger = logging.getLogger(__name__)

ALGORITHM = "bfs"


@dataclass
class _BFSState:
    discovered: set[str] = field(default_factory=set)
    order: list[str] = field(default_factory=list)
    queue: deque[str] = field(default_factory=deque)
    log: dict[str, int] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    predecessors: dict[str, str | None] = field(default_factory=dict)

    def discover(self, node: str, parent: str | None) -> None:
        self.discovered.add(node)
        self.queue.append(node)
        self.predecessors[node] = parent
        self.log[node] = len(self.order)
        self.order.append(node)
        self.annotations[node] = str(len(self.order))


def run_bfs(
    graph: GraphData,
    start_id: str | None = None,
    options: TraceOptions | None = None,
) -> TraversalResult:
    """Run breadth-first search from *start_id*.

    Returns:
        TraversalResult with one step per dequeue; ``log`` maps each
        reached node to its 0-based discovery index.

    Raises:
        UnsupportedGraphKind: If the graph is weighted.
        InvalidStartNode: If start_id is missing or not in the graph.
    """
    if graph.is_weighted:
        raise UnsupportedGraphKind(ALGORITHM, "an unweighted graph")
    if not graph.has_node(start_id):
        raise InvalidStartNode(ALGORITHM, start_id)
    options = resolve_options(options)

    state = _BFSState(predecessors={node_id: None for node_id in graph.node_ids()})
    recorder = TraceRecorder()
    state.discover(start_id, None)

    while state.queue:
        current = state.queue.popleft()

        structure = list(state.queue)
        recorder.record(
            current=current,
            visited=state.order,
            structure=structure,
            display=(
                f"Current: {current} | Queue: {options.arrow.join(structure)} "
                f"| Visited: {', '.join(state.order)}"
            ),
            node_annotations=state.annotations,
        )

        for neighbor, _ in graph.neighbors(current):
            if neighbor not in state.discovered:
                state.discover(neighbor, current)

    logger.debug(
        "bfs: reached %d of %d nodes from %s", len(state.order), len(graph.nodes), start_id
    )
    return recorder.build(state.order, state.log, state.annotations, state.predecessors)


def bfs_levels(result: TraversalResult) -> dict[str, int]:
    """Edge-count distance from the start node for every reached node."""
    levels: dict[str, int] = {}
    for node in result.traversal:
        parent = result.predecessors.get(node)
        levels[node] = 0 if parent is None else levels[parent] + 1
    return levels


__all__ = ["run_bfs", "bfs_levels"]
