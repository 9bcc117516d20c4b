"""Custom exceptions for graph-trace.

Every traversal failure is a precondition failure raised before a result
is built. The four traversal kinds form a closed set tagged by
:class:`ErrorKind`, so callers can branch on ``err.kind`` instead of
matching message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Tags for the traversal error variants."""

    UNSUPPORTED_GRAPH_KIND = "unsupported_graph_kind"
    INVALID_START_NODE = "invalid_start_node"
    NEGATIVE_WEIGHT = "negative_weight"
    CYCLE_DETECTED = "cycle_detected"


class GraphTraceError(Exception):
    """Base exception for graph-trace."""


class InvalidGraphError(GraphTraceError, ValueError):
    """Raised when a graph description violates the model invariants."""


class UnknownAlgorithmError(GraphTraceError, KeyError):
    """Raised when the registry has no algorithm under the requested name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown algorithm: {self.name!r}"


class TraversalError(GraphTraceError):
    """Base for errors raised by a traversal algorithm."""

    kind: ErrorKind

    def __init__(self, message: str, algorithm: str):
        super().__init__(message)
        self.algorithm = algorithm


class UnsupportedGraphKind(TraversalError):
    """Raised when the weighted/directed flags do not suit the algorithm."""

    kind = ErrorKind.UNSUPPORTED_GRAPH_KIND

    def __init__(self, algorithm: str, requirement: str):
        super().__init__(f"{algorithm} requires {requirement}", algorithm)
        self.requirement = requirement


class InvalidStartNode(TraversalError):
    """Raised when a required start node is missing or unknown."""

    kind = ErrorKind.INVALID_START_NODE

    def __init__(self, algorithm: str, start_id: str | None):
        if start_id is None:
            message = f"{algorithm} requires a start node"
        else:
            message = f"{algorithm}: start node {start_id!r} is not in the graph"
        super().__init__(message, algorithm)
        self.start_id = start_id


class NegativeWeight(TraversalError):
    """Raised when an edge weight is negative."""

    kind = ErrorKind.NEGATIVE_WEIGHT

    def __init__(self, algorithm: str, edge):
        super().__init__(
            f"{algorithm} does not support negative weights "
            f"({edge.node1} - {edge.node2}: {edge.weight})",
            algorithm,
        )
        self.edge = edge


class CycleDetected(TraversalError):
    """Raised when a topological order cannot cover every node."""

    kind = ErrorKind.CYCLE_DETECTED

    def __init__(self, algorithm: str, ordered: int, total: int):
        super().__init__(
            f"graph contains a cycle: ordered {ordered} of {total} nodes",
            algorithm,
        )
        self.ordered = ordered
        self.total = total
