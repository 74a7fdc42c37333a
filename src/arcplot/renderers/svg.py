"""SVG renderer — turns arc diagram draw calls into an SVG string."""

from __future__ import annotations

import logging
import re

from arcplot.layout import Point, Side
from arcplot.styles import ArcStyle, LabelStyle, NodeStyle

logger = logging.getLogger(__name__)

# ─── Constants ──────────────────────────────────────────────────────────────

WIDTH = 800  # canvas width in pixels
HEIGHT = 400  # canvas height in pixels
PADDING = 40  # canvas padding in pixels, leaves room for labels
FONT_SIZE = 14  # label font size at size=1.0
MARKER_RADIUS = 4  # node marker radius at size=1.0
LABEL_OFFSET = 6  # gap between the axis and a label

_DASHES: dict[str, str] = {
    "solid": "",
    "dashed": "6 4",
    "dotted": "1 3",
    "dotdash": "1 3 4 3",
    "longdash": "10 4",
    "twodash": "2 2 6 2",
}

_GRAY = re.compile(r"^gr[ae]y(\d{1,3})$")


def _escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def _color(name: str) -> str:
    """Translate ``grayNN`` percentages into hex; other colors pass through."""
    m = _GRAY.match(name)
    if m is None or int(m.group(1)) > 100:
        return name
    level = round(int(m.group(1)) * 255 / 100)
    return f"#{level:02x}{level:02x}{level:02x}"


def _fmt(v: float) -> str:
    return f"{v:.2f}"


# ─── Public Renderer ────────────────────────────────────────────────────────


class SvgRenderer:
    """SVG renderer — collects draw calls, produces an SVG document via ``render``."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, padding: int = PADDING) -> None:
        self.width = width
        self.height = height
        self.padding = padding
        self.x_range: tuple[float, float] = (0.0, 1.0)
        self.y_range: tuple[float, float] = (0.0, 1.0)
        self._arcs: list[str] = []
        self._nodes: list[str] = []
        self._labels: list[str] = []

    # ── Coordinate Helpers ──

    def _sx(self) -> float:
        lo, hi = self.x_range
        return (self.width - 2 * self.padding) / ((hi - lo) or 1.0)

    def _sy(self) -> float:
        lo, hi = self.y_range
        return (self.height - 2 * self.padding) / ((hi - lo) or 1.0)

    def _px(self, x: float) -> float:
        return self.padding + (x - self.x_range[0]) * self._sx()

    def _py(self, y: float) -> float:
        # SVG rows grow downward.
        return self.padding + (self.y_range[1] - y) * self._sy()

    # ── Renderer Protocol ──

    def set_bounds(self, x_range: tuple[float, float], y_range: tuple[float, float]) -> None:
        self.x_range = x_range
        self.y_range = y_range
        logger.debug("svg bounds x=%s y=%s", x_range, y_range)

    def draw_arc(self, center: Point, radius: float, side: Side, style: ArcStyle) -> None:
        if radius <= 0:
            return

        if side in (Side.ABOVE, Side.BELOW):
            start = Point(center.x - radius, center.y)
            end = Point(center.x + radius, center.y)
        else:
            start = Point(center.x, center.y - radius)
            end = Point(center.x, center.y + radius)
        sweep = 1 if side in (Side.ABOVE, Side.LEFT) else 0
        rx, ry = radius * self._sx(), radius * self._sy()

        d = (
            f"M {_fmt(self._px(start.x))} {_fmt(self._py(start.y))} "
            f"A {_fmt(rx)} {_fmt(ry)} 0 0 {sweep} {_fmt(self._px(end.x))} {_fmt(self._py(end.y))}"
        )
        attrs = [
            f'd="{d}"',
            'fill="none"',
            f'stroke="{_escape(_color(style.color))}"',
            f'stroke-width="{style.width}"',
            f'stroke-linecap="{style.cap}"',
            f'stroke-linejoin="{style.join}"',
            f'stroke-miterlimit="{style.miter}"',
        ]
        dash = _DASHES.get(style.dash, style.dash)
        if dash:
            attrs.append(f'stroke-dasharray="{dash}"')
        self._arcs.append(f"<path {' '.join(attrs)}/>")

    def draw_node_marker(self, position: Point, style: NodeStyle) -> None:
        cx, cy = self._px(position.x), self._py(position.y)
        r = MARKER_RADIUS * style.size
        paint = (
            f'fill="{_escape(_color(style.fill))}" stroke="{_escape(_color(style.color))}" '
            f'stroke-width="{style.stroke_width}"'
        )
        if style.shape == "square":
            shape = f'<rect x="{_fmt(cx - r)}" y="{_fmt(cy - r)}" width="{_fmt(2 * r)}" height="{_fmt(2 * r)}" {paint}/>'
        elif style.shape == "triangle":
            pts = f"{_fmt(cx)},{_fmt(cy - r)} {_fmt(cx + r)},{_fmt(cy + r)} {_fmt(cx - r)},{_fmt(cy + r)}"
            shape = f'<polygon points="{pts}" {paint}/>'
        elif style.shape == "diamond":
            pts = f"{_fmt(cx)},{_fmt(cy - r)} {_fmt(cx + r)},{_fmt(cy)} {_fmt(cx)},{_fmt(cy + r)} {_fmt(cx - r)},{_fmt(cy)}"
            shape = f'<polygon points="{pts}" {paint}/>'
        else:
            shape = f'<circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{_fmt(r)}" {paint}/>'
        self._nodes.append(shape)

    def draw_label(self, text: str, position: Point, side: Side, style: LabelStyle) -> None:
        x, y = self._px(position.x), self._py(position.y)
        size = FONT_SIZE * style.size
        gap = LABEL_OFFSET + style.offset * size
        horizontal_axis = side in (Side.ABOVE, Side.BELOW)
        if side == Side.BELOW:
            y += gap
        elif side == Side.ABOVE:
            y -= gap
        elif side == Side.LEFT:
            x -= gap
        else:
            x += gap

        # Text runs along the x axis unless turned a quarter counter-clockwise.
        turned = style.perpendicular == horizontal_axis
        if style.perpendicular:
            # Text points away from the axis and ends next to it.
            anchor = "end" if side in (Side.BELOW, Side.LEFT) else "start"
            baseline = "central"
        else:
            anchor = style.justification
            baseline = "hanging" if side in (Side.BELOW, Side.RIGHT) else "auto"

        angle = (-90.0 if turned else 0.0) + style.rotation
        transform = f' transform="rotate({angle:g} {_fmt(x)} {_fmt(y)})"' if angle else ""
        font = f'font-family="{_escape(style.font)}" font-size="{_fmt(size)}"'
        if style.face in ("bold", "bold-italic"):
            font += ' font-weight="bold"'
        if style.face in ("italic", "bold-italic"):
            font += ' font-style="italic"'
        self._labels.append(
            f'<text x="{_fmt(x)}" y="{_fmt(y)}" text-anchor="{anchor}" dominant-baseline="{baseline}" '
            f'{font} fill="{_escape(_color(style.color))}"{transform}>{_escape(text)}</text>'
        )

    # ── Output ──

    def render(self) -> str:
        """Return the SVG document for everything drawn so far (arcs, then nodes, then labels)."""
        w, h = self.width, self.height
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
            f'<rect width="{w}" height="{h}" fill="white"/>',
        ]
        parts.extend(self._arcs)
        parts.extend(self._nodes)
        parts.extend(self._labels)
        parts.append("</svg>")
        return "\n".join(parts)
