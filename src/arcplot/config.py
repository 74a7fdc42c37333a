"""Plot configuration — orientation, visibility flags and default styles."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from arcplot.styles import ArcStyle, LabelStyle, NodeStyle


@dataclass(frozen=True)
class PlotConfig:
    """Settings shared by every draw call of one arc diagram.

    The default styles apply to every arc, node and label unless a per-item
    attribute overrides them.
    """

    horizontal: bool = True
    show_nodes: bool = False
    show_labels: bool = True
    arc_style: ArcStyle = field(default_factory=ArcStyle)
    node_style: NodeStyle = field(default_factory=NodeStyle)
    label_style: LabelStyle = field(default_factory=LabelStyle)

    def with_overrides(self, **changes: Any) -> PlotConfig:
        """Return a copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_CONFIG = PlotConfig()
