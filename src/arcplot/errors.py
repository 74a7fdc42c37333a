"""Error taxonomy for arc diagram layout.

Every error is a configuration error raised synchronously while the layout
is being resolved, before anything is drawn.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence


class ArcPlotError(ValueError):
    """Base class for all arcplot configuration errors."""


class ShapeError(ArcPlotError):
    """Input has an unrecognised shape (edge list, side spec, ordering)."""


class LengthMismatchError(ShapeError):
    """A per-node or per-edge sequence does not match the node/edge count."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(f"Length of '{what}' ({actual}) differs from expected count ({expected})")
        self.what = what
        self.expected = expected
        self.actual = actual


class EmptyGraphError(ShapeError):
    """The graph has no nodes to lay out."""


class UnknownLabelError(ArcPlotError):
    """One or more string ordering entries match no node label."""

    def __init__(self, labels: Sequence[str]) -> None:
        self.labels = tuple(labels)
        listed = ", ".join(f"'{label}'" for label in self.labels)
        super().__init__(f"Unrecognized values in ordering: {listed}")


class UnknownNodeError(ArcPlotError):
    """An edge references a node that is not in the node set."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Edge endpoint {node!r} is not in the node set")


class MixedSignError(ArcPlotError):
    """A numeric side spec mixes inclusion (positive) and exclusion (negative) indices."""
