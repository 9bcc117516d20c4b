"""Traversal algorithms.

Every algorithm shares the signature
``run(graph, start_id=None, options=None) -> TraversalResult`` and keeps
its loop state private to one invocation.

Public API:
    run_dfs: Depth-first search with a full sweep of disconnected nodes.
    run_bfs: Breadth-first search from a mandatory start node.
    run_dijkstra: Single-source shortest paths over non-negative weights.
    run_toposort: Kahn's topological ordering of a directed graph.
    bfs_levels: Hop distances derived from a BFS result.
    shortest_path: Path reconstruction from a Dijkstra result.
    format_distance: Distance label rendering.
"""

from __future__ import annotations

from .bfs import bfs_levels, run_bfs
from .dfs import run_dfs
from .dijkstra import format_distance, run_dijkstra, shortest_path
from .toposort import run_toposort

__all__ = [
    "run_dfs",
    "run_bfs",
    "run_dijkstra",
    "run_toposort",
    "bfs_levels",
    "shortest_path",
    "format_distance",
]
