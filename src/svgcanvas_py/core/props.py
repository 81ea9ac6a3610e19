"""Read-only property snapshots of drawables.

A snapshot copies every value it holds, so changing a snapshot (or mutating
one of its vectors) never reaches the drawable it was taken from.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, ClassVar

from svgcanvas_py.core.models import Circle, Line, Rect, Text
from svgcanvas_py.core.types import DrawableType
from svgcanvas_py.exceptions import InvalidDrawableError

if TYPE_CHECKING:
    from svgcanvas_py.core.color import Color
    from svgcanvas_py.core.vector import Vector2


@dataclass(frozen=True)
class LineProps:
    """Snapshot of a :class:`~svgcanvas_py.core.models.Line`."""

    drawable_type: ClassVar[DrawableType] = DrawableType.LINE

    start: Vector2
    end: Vector2
    stroke_color: Color
    fill: Color
    stroke_width: int
    len: float
    angle: float


@dataclass(frozen=True)
class CircleProps:
    """Snapshot of a :class:`~svgcanvas_py.core.models.Circle`."""

    drawable_type: ClassVar[DrawableType] = DrawableType.CIRCLE

    center: Vector2
    radius: float
    stroke_color: Color
    fill: Color
    stroke_width: int
    circumference: float
    area: float


@dataclass(frozen=True)
class RectProps:
    """Snapshot of a :class:`~svgcanvas_py.core.models.Rect`."""

    drawable_type: ClassVar[DrawableType] = DrawableType.RECT

    start: Vector2
    end: Vector2
    diagonal: Vector2
    dimensions: Vector2
    angle: float
    stroke_color: Color
    fill: Color
    stroke_width: int


@dataclass(frozen=True)
class TextProps:
    """Snapshot of a :class:`~svgcanvas_py.core.models.Text`."""

    drawable_type: ClassVar[DrawableType] = DrawableType.TEXT

    text: str
    pos: Vector2
    angle: float
    fill: Color


Props = LineProps | CircleProps | RectProps | TextProps


def snapshot(drawable: object, index: int | None = None) -> Props:
    """Take a property snapshot of a drawable.

    Args:
        drawable: The drawable to copy.
        index: Position of the drawable on its canvas, used in error messages.

    Returns:
        The snapshot matching the drawable's type.

    Raises:
        InvalidDrawableError: If ``drawable`` is not a supported type.
    """
    if isinstance(drawable, Line):
        return LineProps(
            start=drawable.start.copy(),
            end=drawable.end.copy(),
            stroke_color=drawable.stroke_color,
            fill=drawable.fill,
            stroke_width=drawable.stroke_width,
            len=drawable.len,
            angle=drawable.angle,
        )
    if isinstance(drawable, Circle):
        return CircleProps(
            center=drawable.center.copy(),
            radius=drawable.radius,
            stroke_color=drawable.stroke_color,
            fill=drawable.fill,
            stroke_width=drawable.stroke_width,
            circumference=drawable.circumference,
            area=drawable.area,
        )
    if isinstance(drawable, Rect):
        return RectProps(
            start=drawable.start.copy(),
            end=drawable.end,
            diagonal=drawable.diagonal.copy(),
            dimensions=drawable.dimensions(),
            angle=drawable.angle,
            stroke_color=drawable.stroke_color,
            fill=drawable.fill,
            stroke_width=drawable.stroke_width,
        )
    if isinstance(drawable, Text):
        return TextProps(
            text=drawable.text,
            pos=drawable.pos.copy(),
            angle=drawable.angle,
            fill=drawable.fill,
        )
    raise InvalidDrawableError(drawable, index)


def props_items(props: Props) -> list[tuple[str, str]]:
    """Return ``(name, value)`` pairs for displaying a snapshot."""
    return [(f.name, str(getattr(props, f.name))) for f in fields(props)]
