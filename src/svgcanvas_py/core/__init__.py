"""Core scene model for svgcanvas-py."""

from svgcanvas_py.core.color import BLACK, BLUE, GREEN, RED, TRANSPARENT, WHITE, Color
from svgcanvas_py.core.markup import Drawable, compose_tag
from svgcanvas_py.core.models import Circle, Line, Rect, Text
from svgcanvas_py.core.props import CircleProps, LineProps, Props, RectProps, TextProps, snapshot
from svgcanvas_py.core.style import ElementStyle
from svgcanvas_py.core.types import DrawableType
from svgcanvas_py.core.vector import EPSILON, Vector2

__all__ = [
    "BLACK",
    "BLUE",
    "EPSILON",
    "GREEN",
    "RED",
    "TRANSPARENT",
    "WHITE",
    "Circle",
    "CircleProps",
    "Color",
    "Drawable",
    "DrawableType",
    "ElementStyle",
    "Line",
    "LineProps",
    "Props",
    "Rect",
    "RectProps",
    "Text",
    "TextProps",
    "Vector2",
    "compose_tag",
    "snapshot",
]
