"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from arcplot.layout import Point, Side
from arcplot.styles import ArcStyle, LabelStyle, NodeStyle


class Renderer(Protocol):
    """Protocol that all renderers must implement.

    Coordinates are plot coordinates: the node axis spans roughly [0, 1] and
    the perpendicular axis spans the bounds passed to ``set_bounds``.
    """

    def set_bounds(self, x_range: tuple[float, float], y_range: tuple[float, float]) -> None:
        """Set the visible plot region. Called once, before any drawing."""
        ...

    def draw_arc(self, center: Point, radius: float, side: Side, style: ArcStyle) -> None:
        """Draw a semicircle of ``radius`` around ``center`` on ``side`` of the axis."""
        ...

    def draw_node_marker(self, position: Point, style: NodeStyle) -> None:
        """Draw a node symbol at ``position``."""
        ...

    def draw_label(self, text: str, position: Point, side: Side, style: LabelStyle) -> None:
        """Draw a node label next to ``position`` on ``side`` of the axis."""
        ...
