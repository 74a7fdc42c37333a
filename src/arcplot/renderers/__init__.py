"""Renderers for arc diagram draw calls."""

from arcplot.renderers.base import Renderer
from arcplot.renderers.recording import DrawCall, RecordingRenderer
from arcplot.renderers.svg import SvgRenderer

__all__ = ["DrawCall", "RecordingRenderer", "Renderer", "SvgRenderer"]
