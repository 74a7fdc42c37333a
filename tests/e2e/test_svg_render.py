"""End-to-end tests: edge list in, SVG document out."""

import networkx as nx
import pytest

from arcplot import render_svg
from arcplot.errors import UnknownLabelError
from arcplot.layout import Point, Side
from arcplot.renderers.svg import SvgRenderer, _color
from arcplot.styles import ArcStyle, LabelStyle, NodeStyle

UN_GRAPHE = [
    ("fromage", "pain"),
    ("pain", "vin"),
    ("vin", "biere"),
    ("cidre", "biere"),
    ("foie", "fromage"),
    ("pain", "foie"),
]


def test_document_structure() -> None:
    """Output is a single SVG document with one path per edge and one text per node."""
    svg = render_svg(UN_GRAPHE)
    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="800" height="400"')
    assert svg.endswith("</svg>")
    assert svg.count("<path ") == len(UN_GRAPHE)
    assert svg.count("<text ") == 6


def test_single_arc_geometry() -> None:
    """One edge maps to a half-ellipse spanning both node positions."""
    svg = render_svg([("A", "B")], show_labels=False)
    assert 'd="M 225.24 360.00 A 174.76 320.00 0 0 1 574.76 360.00"' in svg


def test_below_arcs_flip_sweep() -> None:
    """Arcs on the negative side use the opposite sweep flag."""
    above = render_svg([("A", "B")], show_labels=False)
    below = render_svg([("A", "B")], show_labels=False, above=[0])
    assert " 0 0 1 " in above
    assert " 0 0 0 " in below


def test_self_loop_draws_nothing() -> None:
    """Zero-radius arcs produce no path."""
    svg = render_svg([("A", "A"), ("A", "B")])
    assert svg.count("<path ") == 1


def test_vertical_labels_left() -> None:
    """Vertical diagrams right-align labels to the left of the axis."""
    svg = render_svg(nx.cycle_graph(5), horizontal=False)
    assert svg.count('text-anchor="end"') == 5


def test_node_markers_and_colors() -> None:
    """Node markers render with gray percentages translated to hex."""
    svg = render_svg(UN_GRAPHE, show_nodes=True, node_attrs={"shape": ["circle", "square"]})
    assert svg.count("<circle ") == 3
    assert svg.count("<rect ") == 1 + 3  # background + squares
    assert 'fill="#cccccc"' in svg


def test_labels_escaped() -> None:
    """Label text is XML-escaped."""
    svg = render_svg([("a<b", "c&d")])
    assert "a&lt;b" in svg
    assert "c&amp;d" in svg


def test_custom_canvas_size() -> None:
    """width and height set the canvas."""
    svg = render_svg(UN_GRAPHE, width=300, height=150)
    assert 'viewBox="0 0 300 150"' in svg


def test_error_surfaces() -> None:
    """Configuration errors propagate out of render_svg."""
    with pytest.raises(UnknownLabelError):
        render_svg(UN_GRAPHE, ordering=["vin", "biere", "cidre", "fromage", "foie", "bread"])


class TestSvgRenderer:
    def test_dash_and_rotation(self):
        """Dash names become dasharrays; rotated parallel labels get a transform."""
        r = SvgRenderer()
        r.set_bounds((0.0, 1.0), (0.0, 0.5))
        r.draw_arc(Point(0.5, 0.0), 0.25, Side.ABOVE, ArcStyle(dash="dotted"))
        r.draw_label("x", Point(0.5, 0.0), Side.BELOW, LabelStyle(perpendicular=False, rotation=90))
        svg = r.render()
        assert 'stroke-dasharray="1 3"' in svg
        assert 'transform="rotate(90 ' in svg

    def test_bevel_join_by_default(self):
        """Arcs use a bevel line join unless told otherwise."""
        r = SvgRenderer()
        r.draw_arc(Point(0.5, 0.0), 0.25, Side.ABOVE, ArcStyle())
        assert 'stroke-linejoin="bevel"' in r.render()

    def test_perpendicular_labels_below_axis(self):
        """Default labels under a horizontal axis are turned to read upward, ending at the axis."""
        r = SvgRenderer()
        r.draw_label("x", Point(0.5, 0.0), Side.BELOW, LabelStyle())
        svg = r.render()
        assert 'transform="rotate(-90 ' in svg
        assert 'text-anchor="end"' in svg

    def test_parallel_labels_not_rotated(self):
        """Parallel labels under a horizontal axis stay level and use the justification."""
        r = SvgRenderer()
        r.draw_label("x", Point(0.5, 0.0), Side.BELOW, LabelStyle(perpendicular=False, justification="start"))
        svg = r.render()
        assert "transform" not in svg
        assert 'text-anchor="start"' in svg

    def test_parallel_labels_on_vertical_axis_rotated(self):
        """Parallel labels beside a vertical axis are turned to run along it."""
        r = SvgRenderer()
        r.draw_label("x", Point(0.0, 0.5), Side.LEFT, LabelStyle(perpendicular=False))
        assert 'transform="rotate(-90 ' in r.render()

    def test_font_faces(self):
        """Bold and italic faces set weight and style attributes."""
        r = SvgRenderer()
        r.draw_label("a", Point(0.5, 0.0), Side.BELOW, LabelStyle(face="plain"))
        r.draw_label("b", Point(0.5, 0.0), Side.BELOW, LabelStyle(face="bold"))
        r.draw_label("c", Point(0.5, 0.0), Side.BELOW, LabelStyle(face="bold-italic"))
        svg = r.render()
        assert svg.count('font-weight="bold"') == 2
        assert svg.count('font-style="italic"') == 1

    def test_label_offset_in_lines(self):
        """offset moves the label away from the axis by that many text lines."""
        r = SvgRenderer()
        r.set_bounds((0.0, 1.0), (0.0, 1.0))
        r.draw_label("a", Point(0.5, 0.0), Side.BELOW, LabelStyle(size=1.0))
        r.draw_label("b", Point(0.5, 0.0), Side.BELOW, LabelStyle(size=1.0, offset=2.0))
        svg = r.render()
        # axis at y=360; gap 6 px, plus 2 lines of 14 px
        assert 'y="366.00"' in svg
        assert 'y="394.00"' in svg

    def test_vertical_arc_sweep(self):
        """Left arcs sweep clockwise on screen, right arcs counter-clockwise."""
        r = SvgRenderer()
        r.set_bounds((-0.5, 0.5), (0.0, 1.0))
        r.draw_arc(Point(0.0, 0.5), 0.25, Side.LEFT, ArcStyle())
        r.draw_arc(Point(0.0, 0.5), 0.25, Side.RIGHT, ArcStyle())
        paths = [line for line in r.render().splitlines() if line.startswith("<path")]
        assert " 0 0 1 " in paths[0]
        assert " 0 0 0 " in paths[1]

    def test_triangle_and_diamond_markers(self):
        """Triangle and diamond markers are polygons."""
        r = SvgRenderer()
        r.draw_node_marker(Point(0.5, 0.0), NodeStyle(shape="triangle"))
        r.draw_node_marker(Point(0.5, 0.0), NodeStyle(shape="diamond"))
        assert r.render().count("<polygon ") == 2

    def test_color_translation(self):
        """grayNN and greyNN map to hex; other names pass through."""
        assert _color("gray80") == "#cccccc"
        assert _color("grey0") == "#000000"
        assert _color("gray100") == "#ffffff"
        assert _color("#5998ff77") == "#5998ff77"
        assert _color("steelblue") == "steelblue"
