"""Topological ordering by Kahn's algorithm, with a recorded step trace."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from ..config import TraceOptions, resolve_options
from ..exceptions import CycleDetected, UnsupportedGraphKind
from ..graph.types import GraphData
from ..trace import TraceRecorder, TraversalResult

logger = logging.getLogger(__name__)

ALGORITHM = "toposort"


@dataclass
class _TopoState:
    in_degree: dict[str, int]
    queue: deque[str] = field(default_factory=deque)
    order: list[str] = field(default_factory=list)
    log: dict[str, int] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    # The predecessor of a node is the one whose removal released it.
    predecessors: dict[str, str | None] = field(default_factory=dict)


def run_toposort(
    graph: GraphData,
    start_id: str | None = None,
    options: TraceOptions | None = None,
) -> TraversalResult:
    """Order the nodes of a directed acyclic graph.

    ``start_id`` is accepted for a uniform signature and ignored.

    Returns:
        TraversalResult with one step per dequeue; ``log`` maps each node
        to its 0-based position and annotations are 1-based ranks.

    Raises:
        UnsupportedGraphKind: If the graph is undirected.
        CycleDetected: If a directed cycle prevents a full ordering.
    """
    if not graph.is_directed:
        raise UnsupportedGraphKind(ALGORITHM, "a directed graph")
    options = resolve_options(options)
    if start_id is not None:
        logger.debug("toposort: ignoring start node %r", start_id)

    node_ids = graph.node_ids()
    state = _TopoState(
        in_degree={node_id: 0 for node_id in node_ids},
        predecessors={node_id: None for node_id in node_ids},
    )
    for edge in graph.edges:
        state.in_degree[edge.node2] += 1
    state.queue.extend(node_id for node_id in node_ids if state.in_degree[node_id] == 0)

    recorder = TraceRecorder()
    while state.queue:
        current = state.queue.popleft()
        state.log[current] = len(state.order)
        state.order.append(current)
        state.annotations[current] = str(len(state.order))

        for successor in graph.successors(current):
            state.in_degree[successor] -= 1
            if state.in_degree[successor] == 0:
                state.predecessors[successor] = current
                state.queue.append(successor)

        structure = list(state.queue)
        recorder.record(
            current=current,
            visited=state.order,
            structure=structure,
            display=(
                f"Selected: {current} | Queue: [{', '.join(structure)}] "
                f"| Order: {options.arrow.join(state.order)}"
            ),
            node_annotations=state.annotations,
        )

    if len(state.order) < len(node_ids):
        logger.debug("toposort: cycle left %d nodes unordered", len(node_ids) - len(state.order))
        raise CycleDetected(ALGORITHM, len(state.order), len(node_ids))

    return recorder.build(state.order, state.log, state.annotations, state.predecessors)


__all__ = ["run_toposort"]
