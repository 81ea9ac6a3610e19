"""svgcanvas-py: an in-memory 2D vector scene with SVG export.

A :class:`Canvas` owns an ordered list of drawables (lines, circles,
rectangles and text). Drawables are added through the canvas, picked with a
point hit-test, transformed while selected, inspected through read-only
property snapshots and exported as an SVG document.

Key Components:
    - Core Models: Vector2, Color, Line, Circle, Rect, Text
    - Snapshots: LineProps, CircleProps, RectProps, TextProps
    - Services: Canvas, ExportService
    - CLI: ``svgcanvas draw``

Quick Start:
    >>> from svgcanvas_py import Canvas, Vector2, RED
    >>>
    >>> canvas = Canvas(1920, 1080)
    >>> canvas.add_line(Vector2(0, 0), Vector2(100, 100), stroke_color=RED)
    >>> canvas.select_drawable_at(Vector2(50, 50))
    True
    >>> canvas.rotate_selected(0.5)
    True
    >>> canvas.export("scene.svg")
"""

from __future__ import annotations

from svgcanvas_py.config import CanvasConfig
from svgcanvas_py.core import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    TRANSPARENT,
    WHITE,
    Circle,
    CircleProps,
    Color,
    Drawable,
    DrawableType,
    ElementStyle,
    Line,
    LineProps,
    Props,
    Rect,
    RectProps,
    Text,
    TextProps,
    Vector2,
)
from svgcanvas_py.core.logging import configure_logging
from svgcanvas_py.exceptions import (
    InvalidDrawableError,
    InvalidStyleError,
    NoSelectionError,
    SvgCanvasError,
)
from svgcanvas_py.services import Canvas, ExportService

__all__ = [
    "BLACK",
    "BLUE",
    "GREEN",
    "RED",
    "TRANSPARENT",
    "WHITE",
    "Canvas",
    "CanvasConfig",
    "Circle",
    "CircleProps",
    "Color",
    "Drawable",
    "DrawableType",
    "ElementStyle",
    "ExportService",
    "InvalidDrawableError",
    "InvalidStyleError",
    "Line",
    "LineProps",
    "NoSelectionError",
    "Props",
    "Rect",
    "RectProps",
    "SvgCanvasError",
    "Text",
    "TextProps",
    "Vector2",
    "configure_logging",
]

__version__ = "0.1.0"
