"""Layout module — arc diagram geometry pipeline.

Phases:
  1. Graph info      (graph.py — nodes, labels, ordering)
  2. Node layout     (evenly spaced coordinates in [0, 1])
  3. Arc geometry    (center and radius per edge)
  4. Side assignment (positive or negative side of the axis per edge)
  5. Margin bounds   (perpendicular plot extent)

All coordinates live in a unit space: the node axis spans [0, 1] and the
perpendicular axis spans the largest radius on each side.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Integral

from arcplot.errors import EmptyGraphError, LengthMismatchError, MixedSignError, ShapeError, UnknownNodeError
from arcplot.graph import Edge, GraphInfo, Node, as_list, build_graph_info

logger = logging.getLogger(__name__)

# Along-axis plot range; the inset keeps the outermost node markers unclipped.
AXIS_RANGE: tuple[float, float] = (-0.015, 1.015)


# ─── Types ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """A 2D point in plot coordinates."""

    x: float
    y: float


class Side(Enum):
    """Half-plane relative to the node axis."""

    ABOVE = "above"
    BELOW = "below"
    RIGHT = "right"
    LEFT = "left"

    @classmethod
    def for_arc(cls, positive: bool, horizontal: bool) -> Side:
        if horizontal:
            return cls.ABOVE if positive else cls.BELOW
        return cls.RIGHT if positive else cls.LEFT

    @classmethod
    def for_labels(cls, horizontal: bool) -> Side:
        return cls.BELOW if horizontal else cls.LEFT


@dataclass(frozen=True)
class ArcGeometry:
    """Center (along the axis) and radius of the arc drawn for one edge."""

    source: Node
    target: Node
    center: float
    radius: float


@dataclass(frozen=True)
class Bounds:
    """Perpendicular-axis extent: ``min`` ≤ 0 ≤ ``max``."""

    min: float
    max: float


# ─── Node Layout ──────────────────────────────────────────────────────────────


def node_coordinates(num_nodes: int) -> tuple[float, ...]:
    """Split [0, 1] into ``num_nodes`` equal cells and return each cell's midpoint."""
    if num_nodes <= 0:
        raise EmptyGraphError("Cannot lay out a graph with no nodes")
    return tuple((i + 0.5) / num_nodes for i in range(num_nodes))


# ─── Arc Geometry ─────────────────────────────────────────────────────────────


def arc_geometry(
    edges: Iterable[Edge],
    nodes: Sequence[Node],
    coordinates: Sequence[float],
) -> tuple[ArcGeometry, ...]:
    """Compute the arc for every edge from its endpoints' coordinates.

    ``nodes`` and ``coordinates`` are aligned in placement order. Endpoints
    are matched by value against ``nodes``; an edge whose endpoint is not in
    the node set raises UnknownNodeError.
    """
    position = {node: i for i, node in enumerate(nodes)}

    def coord(node: Node) -> float:
        try:
            return coordinates[position[node]]
        except KeyError:
            raise UnknownNodeError(node) from None

    arcs: list[ArcGeometry] = []
    for src, tgt in edges:
        a, b = coord(src), coord(tgt)
        arcs.append(ArcGeometry(source=src, target=tgt, center=(a + b) / 2, radius=abs(a - b) / 2))
    return tuple(arcs)


def max_radius(arcs: Sequence[ArcGeometry]) -> float:
    """Largest arc radius, or 0.0 when there are no arcs."""
    return max((arc.radius for arc in arcs), default=0.0)


# ─── Side Assignment ──────────────────────────────────────────────────────────


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_bool(value: object) -> bool:
    # numpy booleans are not bool subclasses; recognise them by dtype kind.
    return isinstance(value, bool) or getattr(getattr(value, "dtype", None), "kind", None) == "b"


def assign_sides(num_edges: int, above: bool | Iterable[bool] | Iterable[int] | None = None) -> tuple[bool, ...]:
    """Decide per edge whether its arc goes on the positive side of the axis.

    ``above`` may be:
      - None: every edge on the positive side.
      - a single bool: applied to every edge. This shorthand goes beyond the
        one-flag-per-edge form and is equivalent to repeating the flag.
      - an iterable of bools (list, tuple, array): exactly one per edge,
        used verbatim.
      - an iterable of 1-based edge indices: all positive selects the edges
        drawn on the positive side; all negative selects the edges drawn on
        the negative side. Zeros are ignored, so an all-zero list sends every
        edge to the negative side.
    """
    if above is None:
        return (True,) * num_edges
    if _is_bool(above) and getattr(above, "ndim", 0) == 0:
        return (bool(above),) * num_edges
    flags = as_list(above, "above")

    if all(_is_bool(v) for v in flags):
        if len(flags) != num_edges:
            raise LengthMismatchError("above", num_edges, len(flags))
        return tuple(bool(v) for v in flags)

    if not all(_is_integer(v) for v in flags):
        raise ShapeError("'above' must be all bools or all integer edge indices")

    indices = [int(v) for v in flags]  # type: ignore[call-overload]
    positive = {i for i in indices if i > 0}
    negative = {-i for i in indices if i < 0}
    if positive and negative:
        raise MixedSignError(f"'above' mixes positive and negative edge indices: {indices}")

    out_of_range = sorted(i for i in positive | negative if i > num_edges)
    if out_of_range:
        raise ShapeError(f"'above' refers to edges {out_of_range} but there are only {num_edges} edges")

    if positive:
        return tuple(i in positive for i in range(1, num_edges + 1))
    if negative:
        return tuple(i not in negative for i in range(1, num_edges + 1))
    return (False,) * num_edges


# ─── Margin Bounds ────────────────────────────────────────────────────────────


def margin_bounds(radii: Sequence[float], sides: Sequence[bool]) -> Bounds:
    """Perpendicular extent needed to fit the largest arc on each side."""
    top = max((r for r, s in zip(radii, sides) if s), default=0.0)
    bottom = max((r for r, s in zip(radii, sides) if not s), default=0.0)
    return Bounds(min=-bottom, max=top)


# ─── Pipeline ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ArcLayout:
    """Complete arc diagram layout.

    Attributes:
        graph: Resolved nodes, labels and ordering.
        coordinates: Node coordinates along the axis, aligned with ``graph.nodes``.
        arcs: One ArcGeometry per edge, in edge order.
        sides: ``True`` where the arc is on the positive side (above/right).
        bounds: Perpendicular-axis extent.
        horizontal: Node axis orientation.
    """

    graph: GraphInfo
    coordinates: tuple[float, ...]
    arcs: tuple[ArcGeometry, ...]
    sides: tuple[bool, ...]
    bounds: Bounds
    horizontal: bool = True

    @property
    def max_radius(self) -> float:
        return max_radius(self.arcs)

    @property
    def x_range(self) -> tuple[float, float]:
        return AXIS_RANGE if self.horizontal else (self.bounds.min, self.bounds.max)

    @property
    def y_range(self) -> tuple[float, float]:
        return (self.bounds.min, self.bounds.max) if self.horizontal else AXIS_RANGE

    def point(self, coordinate: float) -> Point:
        """Map an along-axis coordinate to a plot point on the axis."""
        return Point(coordinate, 0.0) if self.horizontal else Point(0.0, coordinate)

    def node_points(self) -> list[Point]:
        return [self.point(c) for c in self.coordinates]

    def arc_side(self, index: int) -> Side:
        return Side.for_arc(self.sides[index], self.horizontal)


def compute_layout(
    edgelist: object,
    *,
    nodes: Iterable[Node] | None = None,
    sorted: bool = False,
    decreasing: bool = False,
    ordering: Iterable[object] | None = None,
    labels: Iterable[str] | None = None,
    above: bool | Iterable[bool] | Iterable[int] | None = None,
    horizontal: bool = True,
) -> ArcLayout:
    """Run the full pipeline: graph info → coordinates → arcs + sides → bounds."""
    graph = build_graph_info(
        edgelist,
        nodes=nodes,
        sorted=sorted,
        decreasing=decreasing,
        ordering=ordering,
        labels=labels,
    )
    coordinates = node_coordinates(graph.num_nodes)
    arcs = arc_geometry(graph.edges, graph.nodes, coordinates)
    sides = assign_sides(graph.num_edges, above)
    bounds = margin_bounds([arc.radius for arc in arcs], sides)

    logger.debug(
        "layout: %d nodes, %d arcs, bounds [%.4f, %.4f]",
        graph.num_nodes,
        len(arcs),
        bounds.min,
        bounds.max,
    )

    return ArcLayout(
        graph=graph,
        coordinates=coordinates,
        arcs=arcs,
        sides=sides,
        bounds=bounds,
        horizontal=horizontal,
    )


def node_positions(
    edgelist: object,
    *,
    nodes: Iterable[Node] | None = None,
    sorted: bool = False,
    decreasing: bool = False,
    ordering: Iterable[object] | None = None,
    labels: Iterable[str] | None = None,
) -> list[tuple[str, float]]:
    """Return one (label, coordinate) pair per node, in placement order.

    Nodes sharing a label each keep their own entry.

    Useful for placing custom annotations at the same positions the
    diagram uses.
    """
    graph = build_graph_info(
        edgelist,
        nodes=nodes,
        sorted=sorted,
        decreasing=decreasing,
        ordering=ordering,
        labels=labels,
    )
    return list(zip(graph.labels, node_coordinates(graph.num_nodes)))
