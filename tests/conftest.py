"""Pytest configuration and shared graph fixtures for graph-trace tests."""

import pytest

from graph_trace import GraphData

FIVE_NODES = ["A", "B", "C", "D", "E"]


@pytest.fixture
def undirected_graph():
    """Unweighted undirected graph.

    A - B - D
    |       |
    C ----- E
    """
    return GraphData.build(
        FIVE_NODES,
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E")],
    )


@pytest.fixture
def weighted_digraph():
    """Weighted directed graph: A->B->D->E (1, 2, 3) and A->C->E (4, 1)."""
    return GraphData.build(
        FIVE_NODES,
        [("A", "B", 1), ("A", "C", 4), ("B", "D", 2), ("C", "E", 1), ("D", "E", 3)],
        is_directed=True,
        is_weighted=True,
    )


@pytest.fixture
def dag():
    """Directed acyclic graph: A->B->D, A->C->E, D->E."""
    return GraphData.build(
        FIVE_NODES,
        [("A", "B"), ("B", "D"), ("A", "C"), ("C", "E"), ("D", "E")],
        is_directed=True,
    )


@pytest.fixture
def cyclic_digraph():
    """The DAG fixture plus E->A."""
    return GraphData.build(
        FIVE_NODES,
        [("A", "B"), ("B", "D"), ("A", "C"), ("C", "E"), ("D", "E"), ("E", "A")],
        is_directed=True,
    )


@pytest.fixture
def disconnected_graph():
    """Two components, A-B and C-D, plus isolated E."""
    return GraphData.build(FIVE_NODES, [("A", "B"), ("C", "D")])
