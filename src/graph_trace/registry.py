"""Name-keyed lookup of the traversal algorithms.

Public API:
    AlgorithmEntry: Metadata card for one algorithm.
    ALGORITHMS: Registry of the recognized names.
    get_algorithm / list_algorithms / run_algorithm: Lookup helpers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType

from .algorithms import run_bfs, run_dfs, run_dijkstra, run_toposort
from .config import TraceOptions
from .exceptions import UnknownAlgorithmError
from .graph.types import GraphData
from .trace import TraversalResult

logger = logging.getLogger(__name__)

TraversalFunction = Callable[..., TraversalResult]


@dataclass(frozen=True)
class AlgorithmEntry:
    """Registry card describing one algorithm.

    Attributes:
        name: Registry key, e.g. "bfs".
        label: Human-readable name.
        run: ``(graph, start_id=None, options=None) -> TraversalResult``.
        description: One-paragraph explanation for display.
        requires_start: A start node must be supplied.
        requires_weighted: True = weighted only, False = unweighted only,
            None = either.
        requires_directed: The graph must be directed.
    """

    name: str
    label: str
    run: TraversalFunction
    description: str
    requires_start: bool = False
    requires_weighted: bool | None = None
    requires_directed: bool = False

    def supports(self, graph: GraphData) -> bool:
        """Check the graph-kind preconditions without running."""
        if self.requires_weighted is not None and graph.is_weighted != self.requires_weighted:
            return False
        if self.requires_directed and not graph.is_directed:
            return False
        return True


ALGORITHMS: MappingProxyType[str, AlgorithmEntry] = MappingProxyType(
    {
        "dfs": AlgorithmEntry(
            name="dfs",
            label="Depth-First Search",
            run=run_dfs,
            description=(
                "Depth-First Search (DFS) traverses a graph by exploring as far as possible "
                "along each branch before backtracking to the last un-visited node and "
                "repeating the process. It uses a stack to keep track of nodes to visit next."
            ),
            requires_weighted=False,
        ),
        "bfs": AlgorithmEntry(
            name="bfs",
            label="Breadth-First Search",
            run=run_bfs,
            description=(
                "Breadth-First Search (BFS) traverses a graph by exploring all neighbors of a "
                "node before moving to the next level of neighbors. It uses a queue to keep "
                "track of nodes to visit next."
            ),
            requires_start=True,
            requires_weighted=False,
        ),
        "dijkstra": AlgorithmEntry(
            name="dijkstra",
            label="Dijkstra's Algorithm",
            run=run_dijkstra,
            description=(
                "Dijkstra's algorithm finds the shortest distance from a source node to every "
                "other node in a graph with non-negative edge weights. It repeatedly finalizes "
                "the closest unvisited node, kept in a min-priority queue."
            ),
            requires_start=True,
            requires_weighted=True,
        ),
        "toposort": AlgorithmEntry(
            name="toposort",
            label="Topological Sort",
            run=run_toposort,
            description=(
                "Topological sort orders the nodes of a directed acyclic graph so that every "
                "edge points forward. Kahn's algorithm repeatedly removes a node with no "
                "remaining incoming edges, using a queue."
            ),
            requires_directed=True,
        ),
    }
)


def get_algorithm(name: str) -> AlgorithmEntry:
    """Return the entry registered under *name*.

    Raises:
        UnknownAlgorithmError: If no algorithm has that name.
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(name) from None


def list_algorithms() -> list[AlgorithmEntry]:
    """Return all registered algorithms in insertion order."""
    return list(ALGORITHMS.values())


def run_algorithm(
    name: str,
    graph: GraphData,
    start_id: str | None = None,
    options: TraceOptions | None = None,
) -> TraversalResult:
    """Look up *name* and run it over *graph*."""
    entry = get_algorithm(name)
    logger.debug("running %s (start=%s)", name, start_id)
    return entry.run(graph, start_id, options)


__all__ = [
    "AlgorithmEntry",
    "ALGORITHMS",
    "TraversalFunction",
    "get_algorithm",
    "list_algorithms",
    "run_algorithm",
]
