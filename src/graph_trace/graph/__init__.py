"""Graph model consumed by the traversal algorithms.

Public API:
    GraphNode: Immutable graph node.
    GraphEdge: Immutable graph edge.
    GraphData: Validated, read-only graph description.
"""

from __future__ import annotations

from .types import GraphData, GraphEdge, GraphNode

__all__ = ["GraphNode", "GraphEdge", "GraphData"]
