"""arcplot: arc diagram layout.

Nodes are placed along a single axis and every edge is drawn as a
semicircular arc between its endpoints. The package computes node
coordinates, arc geometry, arc sides and plot bounds, and hands the
drawing to a Renderer.
"""

__version__ = "0.1.0"

from arcplot.api import arcplot, render_svg
from arcplot.config import PlotConfig
from arcplot.errors import (
    ArcPlotError,
    EmptyGraphError,
    LengthMismatchError,
    MixedSignError,
    ShapeError,
    UnknownLabelError,
    UnknownNodeError,
)
from arcplot.graph import GraphInfo, build_graph_info
from arcplot.layout import (
    AXIS_RANGE,
    ArcGeometry,
    ArcLayout,
    Bounds,
    Point,
    Side,
    arc_geometry,
    assign_sides,
    compute_layout,
    margin_bounds,
    max_radius,
    node_coordinates,
    node_positions,
)
from arcplot.styles import ArcStyle, LabelStyle, NodeStyle, recycle

__all__ = [
    "AXIS_RANGE",
    "ArcGeometry",
    "ArcLayout",
    "ArcPlotError",
    "ArcStyle",
    "Bounds",
    "EmptyGraphError",
    "GraphInfo",
    "LabelStyle",
    "LengthMismatchError",
    "MixedSignError",
    "NodeStyle",
    "PlotConfig",
    "Point",
    "ShapeError",
    "Side",
    "UnknownLabelError",
    "UnknownNodeError",
    "arc_geometry",
    "arcplot",
    "assign_sides",
    "build_graph_info",
    "compute_layout",
    "margin_bounds",
    "max_radius",
    "node_coordinates",
    "node_positions",
    "recycle",
    "render_svg",
]
