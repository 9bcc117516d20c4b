"""graph-trace: graph traversals that record a replayable step trace."""

__version__ = "0.1.0"

from .algorithms import (
    bfs_levels,
    format_distance,
    run_bfs,
    run_dfs,
    run_dijkstra,
    run_toposort,
    shortest_path,
)
from .config import DEFAULT_OPTIONS, TraceOptions
from .exceptions import (
    CycleDetected,
    ErrorKind,
    GraphTraceError,
    InvalidGraphError,
    InvalidStartNode,
    NegativeWeight,
    TraversalError,
    UnknownAlgorithmError,
    UnsupportedGraphKind,
)
from .graph import GraphData, GraphEdge, GraphNode
from .priority_queue import IndexedMinPriorityQueue
from .registry import (
    ALGORITHMS,
    AlgorithmEntry,
    get_algorithm,
    list_algorithms,
    run_algorithm,
)
from .trace import TraceCursor, TraceRecorder, TraversalResult, TraversalStep, replay

__all__ = [
    # Graph model
    "GraphNode",
    "GraphEdge",
    "GraphData",
    # Trace
    "TraversalStep",
    "TraversalResult",
    "TraceRecorder",
    "TraceCursor",
    "replay",
    # Algorithms
    "run_dfs",
    "run_bfs",
    "run_dijkstra",
    "run_toposort",
    "bfs_levels",
    "shortest_path",
    "format_distance",
    "IndexedMinPriorityQueue",
    # Registry
    "AlgorithmEntry",
    "ALGORITHMS",
    "get_algorithm",
    "list_algorithms",
    "run_algorithm",
    # Configuration
    "TraceOptions",
    "DEFAULT_OPTIONS",
    # Exceptions
    "GraphTraceError",
    "InvalidGraphError",
    "UnknownAlgorithmError",
    "TraversalError",
    "ErrorKind",
    "UnsupportedGraphKind",
    "InvalidStartNode",
    "NegativeWeight",
    "CycleDetected",
]
