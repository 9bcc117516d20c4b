"""Formatting options shared by the traversal algorithms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TraceOptions:
    """Controls how step display strings and distance labels are rendered.

    Attributes:
        arrow: Separator between frontier entries in display strings.
        infinity_label: Label used for unreached nodes in distance annotations.
    """

    arrow: str = " → "
    infinity_label: str = "∞"

    def __post_init__(self):
        """Validate options."""
        if not isinstance(self.arrow, str) or not self.arrow:
            raise ValueError("arrow must be a non-empty string")
        if not isinstance(self.infinity_label, str) or not self.infinity_label.strip():
            raise ValueError("infinity_label must be a non-empty string")


DEFAULT_OPTIONS = TraceOptions()


def resolve_options(options: TraceOptions | None) -> TraceOptions:
    """Return *options*, or the defaults when None."""
    if options is None:
        return DEFAULT_OPTIONS
    if not isinstance(options, TraceOptions):
        raise TypeError("options must be TraceOptions")
    return options


__all__ = ["TraceOptions", "DEFAULT_OPTIONS", "resolve_options"]
