"""Style definitions for drawables."""

from __future__ import annotations

from dataclasses import dataclass, replace

from svgcanvas_py.core.color import BLACK, TRANSPARENT, Color
from svgcanvas_py.exceptions import InvalidStyleError


@dataclass(frozen=True)
class ElementStyle:
    """Stroke and fill configuration for a drawable.

    Attributes:
        stroke_color: Colour of the outline.
        fill: Colour of the interior.
        stroke_width: Outline width in pixels, 0-255.
    """

    stroke_color: Color = BLACK
    fill: Color = TRANSPARENT
    stroke_width: int = 1

    def __post_init__(self) -> None:
        """Validate the stroke width."""
        if not isinstance(self.stroke_width, int) or not 0 <= self.stroke_width <= 255:
            msg = f"Stroke width must be an integer in 0..255, got {self.stroke_width!r}"
            raise InvalidStyleError(msg)

    def with_overrides(
        self,
        *,
        stroke_color: Color | None = None,
        stroke_width: int | None = None,
        fill: Color | None = None,
    ) -> ElementStyle:
        """Return a copy with every given option replaced.

        Options left as ``None`` keep this style's value.
        """
        updates = {}
        if stroke_color is not None:
            updates["stroke_color"] = stroke_color
        if stroke_width is not None:
            updates["stroke_width"] = stroke_width
        if fill is not None:
            updates["fill"] = fill
        return replace(self, **updates) if updates else self


LINE_STYLE = ElementStyle(stroke_color=BLACK, fill=TRANSPARENT, stroke_width=1)
"""Defaults for lines created through the canvas."""

CIRCLE_STYLE = ElementStyle(stroke_color=BLACK, fill=TRANSPARENT, stroke_width=1)
"""Defaults for circles created through the canvas."""

RECT_STYLE = ElementStyle(stroke_color=BLACK, fill=TRANSPARENT, stroke_width=1)
"""Defaults for rectangles created through the canvas."""

TEXT_FILL = BLACK
"""Default fill for text created through the canvas."""
