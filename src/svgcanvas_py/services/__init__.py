"""Services operating on canvases."""

from svgcanvas_py.services.canvas import Canvas
from svgcanvas_py.services.export import ExportService

__all__ = ["Canvas", "ExportService"]
