"""Per-edge and per-node drawing styles.

Style attributes may be given as a single value or as a sequence. Sequences
are recycled to the edge or node count: shorter ones repeat cyclically,
longer ones are truncated. Node and label attributes are indexed in node
discovery order and reordered to placement order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, fields
from itertools import cycle, islice
from typing import Any, TypeVar

from arcplot.errors import ArcPlotError, LengthMismatchError

T = TypeVar("T")

NODE_SHAPES = ("circle", "square", "triangle", "diamond")
FONT_FACES = ("plain", "bold", "italic", "bold-italic")


def recycle(values: Any, n: int, name: str = "values") -> list[Any]:
    """Broadcast ``values`` to exactly ``n`` items.

    Scalars (strings included) are repeated; lists, tuples and arrays are
    cycled. An empty sequence cannot be recycled and raises LengthMismatchError.
    """
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
        return [values] * n
    if getattr(values, "ndim", None) == 0:  # numpy scalar
        return [values] * n
    values = list(values)
    if len(values) == 0:
        if n == 0:
            return []
        raise LengthMismatchError(name, n, 0)
    return list(islice(cycle(values), n))


def reorder(values: Sequence[T], order: Sequence[int]) -> list[T]:
    """Pick ``values`` in the positions given by ``order``."""
    return [values[i] for i in order]


# ─── Style Records ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ArcStyle:
    """Stroke style of one arc."""

    color: str = "#5998ff77"
    width: float = 1.8
    dash: str = "solid"
    cap: str = "butt"
    join: str = "bevel"
    miter: float = 1.0


@dataclass(frozen=True)
class NodeStyle:
    """Marker style of one node."""

    shape: str = "circle"
    size: float = 1.0
    color: str = "gray80"
    fill: str = "gray80"
    stroke_width: float = 1.0


@dataclass(frozen=True)
class LabelStyle:
    """Text style of one node label.

    Attributes:
        color: Text colour.
        size: Font scale relative to the renderer's base font size.
        font: Font family.
        face: One of FONT_FACES.
        perpendicular: Run the text perpendicular to the node axis (the
            default); ``False`` runs it parallel to the axis.
        rotation: Extra rotation in degrees, applied after orientation.
        offset: Extra distance from the axis, in text lines.
        justification: Text anchor for labels running parallel to the axis.
    """

    color: str = "gray55"
    size: float = 0.9
    font: str = "sans-serif"
    face: str = "plain"
    perpendicular: bool = True
    rotation: float = 0.0
    offset: float = 0.0
    justification: str = "middle"


def _resolve(cls: type[T], base: T, n: int, attrs: dict[str, Any]) -> list[T]:
    names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(set(attrs) - names)
    if unknown:
        raise TypeError(f"Unknown {cls.__name__} attributes: {', '.join(unknown)}")

    columns = {
        name: recycle(attrs[name] if attrs.get(name) is not None else getattr(base, name), n, name)
        for name in names
    }
    return [cls(**{name: col[i] for name, col in columns.items()}) for i in range(n)]


def resolve_arc_styles(num_edges: int, base: ArcStyle | None = None, **attrs: Any) -> list[ArcStyle]:
    """One ArcStyle per edge, in edge order."""
    return _resolve(ArcStyle, base or ArcStyle(), num_edges, attrs)


def resolve_node_styles(order: Sequence[int], base: NodeStyle | None = None, **attrs: Any) -> list[NodeStyle]:
    """One NodeStyle per node, in placement order."""
    styles = _resolve(NodeStyle, base or NodeStyle(), len(order), attrs)
    for style in styles:
        if style.shape not in NODE_SHAPES:
            raise ArcPlotError(f"Unknown node shape {style.shape!r}; expected one of {NODE_SHAPES}")
    return reorder(styles, order)


def resolve_label_styles(order: Sequence[int], base: LabelStyle | None = None, **attrs: Any) -> list[LabelStyle]:
    """One LabelStyle per node, in placement order."""
    styles = _resolve(LabelStyle, base or LabelStyle(), len(order), attrs)
    for style in styles:
        if style.face not in FONT_FACES:
            raise ArcPlotError(f"Unknown font face {style.face!r}; expected one of {FONT_FACES}")
    return reorder(styles, order)
