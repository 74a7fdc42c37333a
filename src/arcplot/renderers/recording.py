"""Recording renderer — keeps every draw call for later inspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arcplot.layout import Point, Side
from arcplot.styles import ArcStyle, LabelStyle, NodeStyle


@dataclass
class DrawCall:
    """A single renderer call: method name plus its arguments."""

    method: str
    args: tuple[Any, ...]


@dataclass
class RecordingRenderer:
    """Renderer that appends each call to ``calls`` instead of drawing."""

    calls: list[DrawCall] = field(default_factory=list)

    def set_bounds(self, x_range: tuple[float, float], y_range: tuple[float, float]) -> None:
        self.calls.append(DrawCall("set_bounds", (x_range, y_range)))

    def draw_arc(self, center: Point, radius: float, side: Side, style: ArcStyle) -> None:
        self.calls.append(DrawCall("draw_arc", (center, radius, side, style)))

    def draw_node_marker(self, position: Point, style: NodeStyle) -> None:
        self.calls.append(DrawCall("draw_node_marker", (position, style)))

    def draw_label(self, text: str, position: Point, side: Side, style: LabelStyle) -> None:
        self.calls.append(DrawCall("draw_label", (text, position, side, style)))

    def of(self, method: str) -> list[DrawCall]:
        """All recorded calls to ``method``, in call order."""
        return [c for c in self.calls if c.method == method]
