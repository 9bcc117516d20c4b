"""Step trace produced by every traversal algorithm.

A traversal computes its whole trace eagerly and returns it as one
immutable :class:`TraversalResult`. Consumers replay ``steps`` at their
own pace; :class:`TraceCursor` is a small pull-based helper for that.

Serialized traces use the field names ``traversal``, ``log``, ``steps``,
``nodeAnnotations`` and ``predecessors``, and per step ``current``,
``visited``, ``structure``, ``display`` and ``nodeAnnotations``.

Public API:
    TraversalStep: One frozen instant of an algorithm's execution.
    TraversalResult: Final answer plus the ordered step trace.
    TraceRecorder: Append-only builder used by the algorithms.
    TraceCursor: Restartable reader over a result's steps.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_INFINITY = "Infinity"


def _encode_number(value: int | float) -> int | float | str:
    if isinstance(value, float) and math.isinf(value):
        return _INFINITY if value > 0 else "-" + _INFINITY
    return value


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


def _decode_number(value: int | float | str) -> int | float:
    if value == _INFINITY:
        return math.inf
    if value == "-" + _INFINITY:
        return -math.inf
    return value


@dataclass(frozen=True)
class TraversalStep:
    """One recorded instant of execution.

    Attributes:
        current: Node being processed at this step.
        visited: Nodes discovered or finalized so far, in order.
        structure: Frontier contents (stack, queue or priority queue).
        display: Precomputed human-readable summary.
        node_annotations: Node id to label (visit rank or distance).
    """

    current: str
    visited: tuple[str, ...] = ()
    structure: tuple[str, ...] = ()
    display: str = ""
    node_annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze sequences and annotations so a recorded step cannot be revised."""
        object.__setattr__(self, "visited", tuple(self.visited))
        object.__setattr__(self, "structure", tuple(self.structure))
        object.__setattr__(self, "node_annotations", _frozen(self.node_annotations))

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "visited": list(self.visited),
            "structure": list(self.structure),
            "display": self.display,
            "nodeAnnotations": dict(self.node_annotations),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TraversalStep:
        return cls(
            current=data["current"],
            visited=tuple(data.get("visited", ())),
            structure=tuple(data.get("structure", ())),
            display=data.get("display", ""),
            node_annotations=dict(data.get("nodeAnnotations", {})),
        )


@dataclass(frozen=True)
class TraversalResult:
    """Final answer and complete step trace of one algorithm run.

    Attributes:
        traversal: Final visit or finalization order.
        log: Node id to traversal index, or to shortest distance for
            Dijkstra (``math.inf`` when unreachable).
        steps: Ordered, append-only step trace.
        node_annotations: Label state after the last step.
        predecessors: Node id to the node it was reached from, None for
            roots and unreached nodes.
    """

    traversal: tuple[str, ...] = ()
    log: Mapping[str, int | float] = field(default_factory=dict)
    steps: tuple[TraversalStep, ...] = ()
    node_annotations: Mapping[str, str] = field(default_factory=dict)
    predecessors: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze every field; a result is never changed after the run."""
        object.__setattr__(self, "traversal", tuple(self.traversal))
        object.__setattr__(self, "log", _frozen(self.log))
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "node_annotations", _frozen(self.node_annotations))
        object.__setattr__(self, "predecessors", _frozen(self.predecessors))

    @property
    def display(self) -> str:
        """All step display lines joined by newlines."""
        return "\n".join(step.display for step in self.steps)

    def replay(self) -> Iterator[tuple[int, TraversalStep]]:
        """Return a fresh iterator of ``(index, step)`` pairs."""
        return iter(enumerate(self.steps))

    def replayed_annotations(self) -> dict[str, str]:
        """Annotation state reached by replaying every step."""
        annotations: dict[str, str] = {}
        for _, step in self.replay():
            annotations = dict(step.node_annotations)
        return annotations

    def cursor(self) -> TraceCursor:
        return TraceCursor(self.steps)

    # ── serialization ─────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "traversal": list(self.traversal),
            "log": {node: _encode_number(value) for node, value in self.log.items()},
            "steps": [step.to_dict() for step in self.steps],
            "nodeAnnotations": dict(self.node_annotations),
            "predecessors": dict(self.predecessors),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TraversalResult:
        return cls(
            traversal=tuple(data["traversal"]),
            log={node: _decode_number(value) for node, value in data["log"].items()},
            steps=tuple(TraversalStep.from_dict(step) for step in data["steps"]),
            node_annotations=dict(data.get("nodeAnnotations", {})),
            predecessors=dict(data.get("predecessors", {})),
        )

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, text: str) -> TraversalResult:
        return cls.from_dict(json.loads(text))


def replay(result: TraversalResult) -> Iterator[tuple[int, TraversalStep]]:
    """Return a fresh iterator of ``(index, step)`` pairs over *result*."""
    return result.replay()


class TraceCursor:
    """Pull-based reader over a finite step sequence.

    The cursor holds only a position; it can be paused, restarted from
    step 0 or dropped without touching the underlying result.
    """

    def __init__(self, steps: Iterable[TraversalStep]):
        self._steps = tuple(steps)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def done(self) -> bool:
        return self._position >= len(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def next(self) -> TraversalStep | None:
        """Return the next step, or None once the trace is exhausted."""
        if self.done:
            return None
        step = self._steps[self._position]
        self._position += 1
        return step

    def reset(self) -> None:
        self._position = 0

    def __iter__(self) -> Iterator[TraversalStep]:
        while not self.done:
            yield self.next()


class TraceRecorder:
    """Append-only step builder.

    ``record`` copies its arguments, so algorithms can keep mutating
    their own state after a step has been taken.
    """

    def __init__(self):
        self._steps: list[TraversalStep] = []

    def __len__(self) -> int:
        return len(self._steps)

    def record(
        self,
        current: str,
        visited: Iterable[str],
        structure: Iterable[str],
        display: str,
        node_annotations: Mapping[str, str],
    ) -> TraversalStep:
        step = TraversalStep(
            current=current,
            visited=tuple(visited),
            structure=tuple(structure),
            display=display,
            node_annotations=dict(node_annotations),
        )
        self._steps.append(step)
        return step

    def build(
        self,
        traversal: Iterable[str],
        log: Mapping[str, int | float],
        node_annotations: Mapping[str, str],
        predecessors: Mapping[str, str | None],
    ) -> TraversalResult:
        return TraversalResult(
            traversal=tuple(traversal),
            log=dict(log),
            steps=tuple(self._steps),
            node_annotations=dict(node_annotations),
            predecessors=dict(predecessors),
        )


__all__ = [
    "TraversalStep",
    "TraversalResult",
    "TraceRecorder",
    "TraceCursor",
    "replay",
]
