"""Public API — lay out an arc diagram and drive a renderer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from arcplot.config import DEFAULT_CONFIG, PlotConfig
from arcplot.graph import Node
from arcplot.layout import ArcLayout, Point, Side, compute_layout
from arcplot.renderers.base import Renderer
from arcplot.renderers.svg import SvgRenderer
from arcplot.styles import resolve_arc_styles, resolve_label_styles, resolve_node_styles

logger = logging.getLogger(__name__)


def arcplot(
    edgelist: object,
    renderer: Renderer,
    *,
    config: PlotConfig | None = None,
    nodes: Iterable[Node] | None = None,
    sorted: bool = False,
    decreasing: bool = False,
    ordering: Iterable[object] | None = None,
    labels: Iterable[str] | None = None,
    above: bool | Iterable[bool] | Iterable[int] | None = None,
    horizontal: bool | None = None,
    show_nodes: bool | None = None,
    show_labels: bool | None = None,
    arc_attrs: Mapping[str, Any] | None = None,
    node_attrs: Mapping[str, Any] | None = None,
    label_attrs: Mapping[str, Any] | None = None,
) -> ArcLayout:
    """Lay out ``edgelist`` as an arc diagram and draw it with ``renderer``.

    ``arc_attrs`` maps ArcStyle fields to a value or a per-edge sequence;
    ``node_attrs`` and ``label_attrs`` map NodeStyle/LabelStyle fields to a
    value or a per-node sequence in node discovery order. Sequences are
    recycled to length.

    Layout and styles are fully resolved before the first draw call, so a
    configuration error never leaves a partial drawing behind.

    Returns the computed layout so callers can place their own annotations.
    """
    cfg = (config or DEFAULT_CONFIG).with_overrides(
        horizontal=horizontal,
        show_nodes=show_nodes,
        show_labels=show_labels,
    )

    layout = compute_layout(
        edgelist,
        nodes=nodes,
        sorted=sorted,
        decreasing=decreasing,
        ordering=ordering,
        labels=labels,
        above=above,
        horizontal=cfg.horizontal,
    )
    graph = layout.graph

    arc_styles = resolve_arc_styles(graph.num_edges, cfg.arc_style, **dict(arc_attrs or {}))
    node_styles = resolve_node_styles(graph.order, cfg.node_style, **dict(node_attrs or {}))
    label_styles = resolve_label_styles(graph.order, cfg.label_style, **dict(label_attrs or {}))

    renderer.set_bounds(layout.x_range, layout.y_range)

    for i, (arc, style) in enumerate(zip(layout.arcs, arc_styles)):
        renderer.draw_arc(layout.point(arc.center), arc.radius, layout.arc_side(i), style)

    points: list[Point] = layout.node_points()
    if cfg.show_nodes:
        for point, node_style in zip(points, node_styles):
            renderer.draw_node_marker(point, node_style)

    if cfg.show_labels:
        side = Side.for_labels(cfg.horizontal)
        for text, point, label_style in zip(graph.labels, points, label_styles):
            renderer.draw_label(text, point, side, label_style)

    logger.debug("drew %d arcs, %d nodes", graph.num_edges, graph.num_nodes)
    return layout


def render_svg(
    edgelist: object,
    *,
    width: int | None = None,
    height: int | None = None,
    **kwargs: Any,
) -> str:
    """Render ``edgelist`` to an SVG string. Keyword arguments are those of ``arcplot``."""
    size = {k: v for k, v in (("width", width), ("height", height)) if v is not None}
    renderer = SvgRenderer(**size)
    arcplot(edgelist, renderer, **kwargs)
    return renderer.render()
