"""Depth-first search with a recorded step trace.

Iterative and stack based. After the start node's component is exhausted
the remaining nodes are swept in declared order, so every node appears in
the traversal exactly once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import TraceOptions, resolve_options
from ..exceptions import UnsupportedGraphKind
from ..graph.types import GraphData
from ..trace import TraceRecorder, TraversalResult

logger = logging.getLogger(__name__)

ALGORITHM = "dfs"


@dataclass
class _DFSState:
    visited: set[str] = field(default_factory=set)
    order: list[str] = field(default_factory=list)
    # (node, pushed_from) pairs; the top of the stack is the end of the list.
    stack: list[tuple[str, str | None]] = field(default_factory=list)
    log: dict[str, int] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    predecessors: dict[str, str | None] = field(default_factory=dict)

    def frontier(self) -> list[str]:
        return [node for node, _ in self.stack]


def run_dfs(
    graph: GraphData,
    start_id: str | None = None,
    options: TraceOptions | None = None,
) -> TraversalResult:
    """Run depth-first search over *graph*.

    Args:
        graph: Unweighted graph to traverse.
        start_id: Node to start from. When missing or unknown the sweep
            starts at the first declared node.
        options: Display formatting options.

    Returns:
        TraversalResult with one step per newly visited node; ``log`` maps
        each node to its 0-based visit index.

    Raises:
        UnsupportedGraphKind: If the graph is weighted.
    """
    if graph.is_weighted:
        raise UnsupportedGraphKind(ALGORITHM, "an unweighted graph")
    options = resolve_options(options)

    state = _DFSState(predecessors={node_id: None for node_id in graph.node_ids()})
    recorder = TraceRecorder()

    if start_id is not None and not graph.has_node(start_id):
        logger.warning("dfs: start node %r not in graph, sweeping all nodes", start_id)
    elif start_id is not None:
        _process_component(graph, start_id, state, recorder, options)

    for node_id in graph.node_ids():
        if node_id not in state.visited:
            _process_component(graph, node_id, state, recorder, options)

    logger.debug("dfs: visited %d nodes in %d steps", len(state.order), len(recorder))
    return recorder.build(state.order, state.log, state.annotations, state.predecessors)


def _process_component(
    graph: GraphData,
    root: str,
    state: _DFSState,
    recorder: TraceRecorder,
    options: TraceOptions,
) -> None:
    state.stack.append((root, None))

    while state.stack:
        node, parent = state.stack.pop()
        if node in state.visited:
            continue

        state.visited.add(node)
        state.log[node] = len(state.order)
        state.order.append(node)
        state.annotations[node] = str(len(state.order))
        state.predecessors[node] = parent

        structure = state.frontier()
        recorder.record(
            current=node,
            visited=state.order,
            structure=structure,
            display=(
                f"Current: {node} | Stack: {options.arrow.join(structure)} "
                f"| Visited: {', '.join(state.order)}"
            ),
            node_annotations=state.annotations,
        )

        candidates = [n for n, _ in graph.neighbors(node) if n not in state.visited]
        # Reversed so the first-listed neighbor is popped first.
        for neighbor in reversed(candidates):
            state.stack.append((neighbor, node))


__all__ = ["run_dfs"]
