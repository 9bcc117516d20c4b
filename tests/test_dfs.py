"""Tests for depth-first search and its step trace."""

from __future__ import annotations

import logging

import pytest

from graph_trace import GraphData, UnsupportedGraphKind, run_dfs
from graph_trace.exceptions import ErrorKind


class TestDFSOrder:
    """Visit order follows edge-list order with reverse-order pushes."""

    def test_first_listed_neighbor_visited_first(self, undirected_graph):
        result = run_dfs(undirected_graph, "A")
        assert result.traversal == ("A", "B", "D", "E", "C")

    def test_log_is_visit_index(self, undirected_graph):
        result = run_dfs(undirected_graph, "A")
        assert result.log == {"A": 0, "B": 1, "D": 2, "E": 3, "C": 4}

    def test_annotations_are_one_based_ranks(self, undirected_graph):
        result = run_dfs(undirected_graph, "A")
        assert result.node_annotations == {"A": "1", "B": "2", "D": "3", "E": "4", "C": "5"}

    def test_directed_respects_direction(self, dag):
        result = run_dfs(dag, "D")
        assert result.traversal == ("D", "E", "A", "B", "C")
        assert result.predecessors == {"A": None, "B": "A", "C": "A", "D": None, "E": "D"}


class TestDFSCoverage:
    """Every node is visited exactly once regardless of connectivity."""

    def test_sweeps_disconnected_components(self, disconnected_graph):
        result = run_dfs(disconnected_graph, "C")
        assert result.traversal == ("C", "D", "A", "B", "E")

    def test_no_start_sweeps_in_declared_order(self, disconnected_graph):
        result = run_dfs(disconnected_graph)
        assert result.traversal == ("A", "B", "C", "D", "E")

    def test_unknown_start_falls_back_to_sweep(self, disconnected_graph, caplog):
        with caplog.at_level(logging.WARNING, logger="graph_trace.algorithms.dfs"):
            result = run_dfs(disconnected_graph, "Z")
        assert result.traversal == ("A", "B", "C", "D", "E")
        assert "not in graph" in caplog.text

    @pytest.mark.parametrize("start", ["A", "B", "C", "D", "E"])
    def test_every_node_once_for_any_start(self, undirected_graph, dag, start):
        for graph in (undirected_graph, dag):
            traversal = run_dfs(graph, start).traversal
            assert traversal[0] == start
            assert sorted(traversal) == ["A", "B", "C", "D", "E"]

    def test_empty_graph(self):
        result = run_dfs(GraphData())
        assert result.traversal == ()
        assert result.steps == ()


class TestDFSSteps:
    """One step per newly visited node."""

    def test_stale_entries_produce_no_step(self, undirected_graph):
        result = run_dfs(undirected_graph, "A")
        assert len(result.steps) == 5
        assert [step.current for step in result.steps] == list(result.traversal)

    def test_structure_is_remaining_stack(self, undirected_graph):
        result = run_dfs(undirected_graph, "A")
        assert [step.structure for step in result.steps] == [
            (),
            ("C",),
            ("C",),
            ("C",),
            ("C",),
        ]

    def test_display(self, undirected_graph):
        step = run_dfs(undirected_graph, "A").steps[1]
        assert step.display == "Current: B | Stack: C | Visited: A, B"

    def test_visited_is_cumulative(self, undirected_graph):
        steps = run_dfs(undirected_graph, "A").steps
        assert steps[2].visited == ("A", "B", "D")
        assert steps[2].node_annotations == {"A": "1", "B": "2", "D": "3"}


class TestDFSErrors:
    def test_weighted_graph_rejected(self, weighted_digraph):
        with pytest.raises(UnsupportedGraphKind) as exc_info:
            run_dfs(weighted_digraph, "A")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_GRAPH_KIND
        assert exc_info.value.algorithm == "dfs"
