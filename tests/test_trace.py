"""Tests for the step trace: recorder, result, cursor and serialization."""

from __future__ import annotations

import json
import math

import pytest

from graph_trace import (
    TraceCursor,
    TraceRecorder,
    TraversalResult,
    TraversalStep,
    replay,
    run_bfs,
    run_dfs,
    run_dijkstra,
    run_toposort,
)


@pytest.fixture
def all_results(undirected_graph, weighted_digraph, dag):
    return {
        "dfs": run_dfs(undirected_graph, "A"),
        "bfs": run_bfs(undirected_graph, "A"),
        "dijkstra": run_dijkstra(weighted_digraph, "A"),
        "toposort": run_toposort(dag),
    }


class TestTraceRecorder:
    def test_record_copies_inputs(self):
        recorder = TraceRecorder()
        visited = ["a"]
        annotations = {"a": "1"}
        step = recorder.record("a", visited, [], "a", annotations)
        visited.append("b")
        annotations["b"] = "2"
        assert step.visited == ("a",)
        assert step.node_annotations == {"a": "1"}

    def test_build_freezes_steps(self):
        recorder = TraceRecorder()
        recorder.record("a", ["a"], [], "first", {"a": "1"})
        result = recorder.build(["a"], {"a": 0}, {"a": "1"}, {"a": None})
        recorder.record("b", ["a", "b"], [], "second", {})
        assert len(result.steps) == 1
        assert len(recorder) == 2

    def test_empty_result_defaults(self):
        result = TraversalResult()
        assert result.traversal == ()
        assert result.steps == ()
        assert result.display == ""
        assert result.replayed_annotations() == {}


class TestResultConsistency:
    """The final step agrees with the top-level result."""

    def test_replayed_annotations_match(self, all_results):
        for result in all_results.values():
            assert result.replayed_annotations() == result.node_annotations

    @pytest.mark.parametrize("name", ["dfs", "bfs", "toposort"])
    def test_last_step_matches_traversal(self, all_results, name):
        result = all_results[name]
        last = result.steps[-1]
        assert last.visited == result.traversal
        assert last.current == result.traversal[-1]

    def test_determinism(self, undirected_graph, weighted_digraph, dag):
        assert run_dfs(undirected_graph, "A").to_json() == run_dfs(undirected_graph, "A").to_json()
        assert run_bfs(undirected_graph, "C") == run_bfs(undirected_graph, "C")
        assert run_dijkstra(weighted_digraph, "A") == run_dijkstra(weighted_digraph, "A")
        assert run_toposort(dag).to_json() == run_toposort(dag).to_json()

    def test_display_joins_steps(self, all_results):
        result = all_results["bfs"]
        lines = result.display.split("\n")
        assert len(lines) == len(result.steps)
        assert lines[0] == "Current: A | Queue:  | Visited: A"

    def test_steps_are_immutable(self, all_results):
        step = all_results["dfs"].steps[0]
        with pytest.raises(AttributeError):
            step.current = "Z"  # type: ignore[misc]

    def test_step_annotations_are_read_only(self, all_results):
        step = all_results["dfs"].steps[0]
        with pytest.raises(TypeError):
            step.node_annotations["A"] = "changed"  # type: ignore[index]
        assert all_results["dfs"].steps[0].node_annotations["A"] == "1"

    def test_result_mappings_are_read_only(self, all_results):
        result = all_results["dijkstra"]
        with pytest.raises(TypeError):
            result.log["E"] = 0  # type: ignore[index]
        with pytest.raises(TypeError):
            result.node_annotations["E"] = "0"  # type: ignore[index]
        with pytest.raises(TypeError):
            result.predecessors["E"] = None  # type: ignore[index]
        assert result.log["E"] == 5

    def test_direct_construction_is_frozen(self):
        annotations = {"a": "1"}
        step = TraversalStep("a", visited=["a"], node_annotations=annotations)
        annotations["a"] = "9"
        assert step.visited == ("a",)
        assert step.node_annotations == {"a": "1"}
        restored = TraversalResult.from_dict(TraversalResult(steps=[step]).to_dict())
        with pytest.raises(TypeError):
            restored.steps[0].node_annotations["a"] = "2"  # type: ignore[index]


class TestSerialization:
    def test_field_names(self, all_results):
        data = all_results["dfs"].to_dict()
        assert set(data) == {"traversal", "log", "steps", "nodeAnnotations", "predecessors"}
        assert set(data["steps"][0]) == {
            "current",
            "visited",
            "structure",
            "display",
            "nodeAnnotations",
        }

    def test_infinity_encoded_in_json(self, weighted_digraph):
        result = run_dijkstra(weighted_digraph, "C")
        data = json.loads(result.to_json())
        assert data["log"]["A"] == "Infinity"
        assert data["nodeAnnotations"]["A"] == "∞"

    def test_json_round_trip(self, all_results, weighted_digraph):
        for result in all_results.values():
            assert TraversalResult.from_json(result.to_json()) == result
        restored = TraversalResult.from_json(run_dijkstra(weighted_digraph, "C").to_json())
        assert restored.log["A"] == math.inf


class TestReplay:
    def test_replay_is_restartable(self, all_results):
        result = all_results["dijkstra"]
        first = list(result.replay())
        second = list(result.replay())
        assert first == second
        assert [i for i, _ in first] == list(range(len(result.steps)))

    def test_module_level_replay(self, all_results):
        result = all_results["bfs"]
        assert list(replay(result)) == list(result.replay())
        assert [step.current for _, step in replay(result)] == ["A", "B", "C", "D", "E"]

    def test_cursor_steps_and_resets(self, all_results):
        result = all_results["toposort"]
        cursor = result.cursor()
        assert len(cursor) == 5
        assert cursor.next().current == "A"
        assert cursor.next().current == "B"
        assert cursor.position == 2
        cursor.reset()
        assert cursor.position == 0
        assert [step.current for step in cursor] == ["A", "B", "C", "D", "E"]
        assert cursor.done
        assert cursor.next() is None

    def test_cursor_over_empty_trace(self):
        cursor = TraceCursor([])
        assert cursor.done
        assert cursor.next() is None

    def test_cursor_independent_of_result(self, all_results):
        result = all_results["bfs"]
        cursor = result.cursor()
        list(cursor)
        assert result.cursor().position == 0
        assert isinstance(result.steps[0], TraversalStep)
