"""Graph data structures passed into every traversal algorithm.

Public API:
    GraphNode: Immutable node; its id doubles as the display label.
    GraphEdge: Immutable edge between two node ids with an optional weight.
    GraphData: Immutable, validated graph description.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from ..exceptions import InvalidGraphError

Weight = int | float


@dataclass(frozen=True)
class GraphNode:
    """An immutable node in the graph.

    Attributes:
        node_id: Unique identifier within a graph, also used as the label.
    """

    node_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.node_id}


@dataclass(frozen=True)
class GraphEdge:
    """An immutable edge in the graph.

    For directed graphs the edge runs from ``node1`` to ``node2``.

    Attributes:
        node1: Source (tail) node id.
        node2: Target (head) node id.
        weight: Edge cost; present if and only if the graph is weighted.
    """

    node1: str
    node2: str
    weight: Weight | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"node1": self.node1, "node2": self.node2}
        if self.weight is not None:
            data["weight"] = self.weight
        return data


@dataclass(frozen=True)
class GraphData:
    """Read-only graph description handed to an algorithm.

    Nodes and edges are held as tuples, so an instance is a snapshot that
    cannot change while an algorithm runs over it.

    Attributes:
        nodes: Nodes in declared order.
        edges: Edges in declared order; this order drives neighbor order.
        is_directed: Edges contribute a neighbor only from node1 to node2.
        is_weighted: Every edge carries a weight.

    Raises:
        InvalidGraphError: On duplicate node ids, dangling edge endpoints,
            or a weight that disagrees with ``is_weighted``.
    """

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    is_directed: bool = False
    is_weighted: bool = False
    _adjacency: dict[str, list[tuple[str, Weight | None]]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Freeze sequences, validate, and index adjacency."""
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

        adjacency: dict[str, list[tuple[str, Weight | None]]] = {}
        for node in self.nodes:
            if not isinstance(node, GraphNode):
                raise InvalidGraphError(f"expected GraphNode, got {type(node).__name__}")
            if not isinstance(node.node_id, str):
                raise InvalidGraphError(
                    f"node id must be a string, got {type(node.node_id).__name__}: {node.node_id!r}"
                )
            if node.node_id in adjacency:
                raise InvalidGraphError(f"duplicate node id: {node.node_id!r}")
            adjacency[node.node_id] = []

        for edge in self.edges:
            if not isinstance(edge, GraphEdge):
                raise InvalidGraphError(f"expected GraphEdge, got {type(edge).__name__}")
            for endpoint in (edge.node1, edge.node2):
                if endpoint not in adjacency:
                    raise InvalidGraphError(
                        f"edge {edge.node1!r} -> {edge.node2!r} references unknown node {endpoint!r}"
                    )
            if self.is_weighted and edge.weight is None:
                raise InvalidGraphError(
                    f"edge {edge.node1!r} -> {edge.node2!r} has no weight in a weighted graph"
                )
            if not self.is_weighted and edge.weight is not None:
                raise InvalidGraphError(
                    f"edge {edge.node1!r} -> {edge.node2!r} has a weight in an unweighted graph"
                )
            if edge.weight is not None:
                _check_weight(edge)

            adjacency[edge.node1].append((edge.node2, edge.weight))
            # Self-loops are listed once, as in the edge-list scan.
            if not self.is_directed and edge.node1 != edge.node2:
                adjacency[edge.node2].append((edge.node1, edge.weight))

        object.__setattr__(self, "_adjacency", adjacency)

    # ── construction ──────────────────────────────────────────

    @classmethod
    def build(
        cls,
        node_ids: Iterable[str],
        edges: Iterable[tuple],
        is_directed: bool = False,
        is_weighted: bool = False,
    ) -> GraphData:
        """Build a graph from plain ids and ``(a, b)`` / ``(a, b, w)`` tuples."""
        graph_edges = []
        for edge in edges:
            if len(edge) == 2:
                graph_edges.append(GraphEdge(edge[0], edge[1]))
            elif len(edge) == 3:
                graph_edges.append(GraphEdge(edge[0], edge[1], edge[2]))
            else:
                raise InvalidGraphError(f"edge tuple must have 2 or 3 items: {edge!r}")
        return cls(
            nodes=tuple(GraphNode(node_id) for node_id in node_ids),
            edges=tuple(graph_edges),
            is_directed=is_directed,
            is_weighted=is_weighted,
        )

    # ── queries ───────────────────────────────────────────────

    def node_ids(self) -> list[str]:
        """Node ids in declared order."""
        return [node.node_id for node in self.nodes]

    def has_node(self, node_id: str | None) -> bool:
        return node_id is not None and node_id in self._adjacency

    def neighbors(self, node_id: str) -> list[tuple[str, Weight | None]]:
        """Return ``(neighbor_id, weight)`` pairs in edge-list order.

        An undirected edge contributes its other endpoint; a directed edge
        contributes only from ``node1`` to ``node2``.

        Raises:
            KeyError: If node_id is not in the graph.
        """
        return list(self._adjacency[node_id])

    def successors(self, node_id: str) -> Iterator[str]:
        for neighbor, _ in self._adjacency[node_id]:
            yield neighbor

    # ── serialization ─────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "isDirected": self.is_directed,
            "isWeighted": self.is_weighted,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GraphData:
        """Create a graph from the ``to_dict`` representation.

        Raises:
            InvalidGraphError: If required fields are missing or invalid.
        """
        try:
            nodes = tuple(GraphNode(str(item["id"])) for item in data["nodes"])
            edges = tuple(
                GraphEdge(str(item["node1"]), str(item["node2"]), item.get("weight"))
                for item in data["edges"]
            )
        except (KeyError, TypeError) as e:
            raise InvalidGraphError(f"malformed graph description: {e}") from e
        return cls(
            nodes=nodes,
            edges=edges,
            is_directed=bool(data.get("isDirected", False)),
            is_weighted=bool(data.get("isWeighted", False)),
        )

    # ── networkx interop ──────────────────────────────────────

    def to_networkx(self) -> nx.Graph:
        """Convert to a ``networkx.DiGraph`` or ``networkx.Graph``.

        Parallel edges collapse into one networkx edge; the last one wins.
        """
        g = nx.DiGraph() if self.is_directed else nx.Graph()
        g.add_nodes_from(self.node_ids())
        for edge in self.edges:
            if self.is_weighted:
                g.add_edge(edge.node1, edge.node2, weight=edge.weight)
            else:
                g.add_edge(edge.node1, edge.node2)
        return g

    @classmethod
    def from_networkx(cls, g: nx.Graph, weighted: bool | None = None) -> GraphData:
        """Create a graph from a networkx graph.

        Args:
            g: Source graph; node labels are converted with ``str``.
            weighted: Read the ``weight`` edge attribute. Defaults to True
                when every edge has one and there is at least one edge.

        Returns:
            GraphData preserving networkx node and edge insertion order.
        """
        edge_data = list(g.edges(data=True))
        if weighted is None:
            weighted = bool(edge_data) and all("weight" in data for _, _, data in edge_data)

        edges = []
        for u, v, data in edge_data:
            weight = data.get("weight") if weighted else None
            edges.append(GraphEdge(str(u), str(v), weight))

        return cls(
            nodes=tuple(GraphNode(str(n)) for n in g.nodes),
            edges=tuple(edges),
            is_directed=g.is_directed(),
            is_weighted=weighted,
        )


def _check_weight(edge: GraphEdge) -> None:
    # bool is an int subclass but never a cost
    if isinstance(edge.weight, bool) or not isinstance(edge.weight, numbers.Real):
        raise InvalidGraphError(
            f"edge {edge.node1!r} -> {edge.node2!r} weight must be a number, got {edge.weight!r}"
        )
    if math.isnan(edge.weight):
        raise InvalidGraphError(f"edge {edge.node1!r} -> {edge.node2!r} weight is NaN")


__all__ = ["GraphNode", "GraphEdge", "GraphData"]
