"""Canvas owning the drawables of a scene and the current selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from svgcanvas_py.core.models import Circle, Line, Rect, Text
from svgcanvas_py.core.props import snapshot
from svgcanvas_py.core.style import CIRCLE_STYLE, LINE_STYLE, RECT_STYLE, TEXT_FILL
from svgcanvas_py.exceptions import InvalidDrawableError, NoSelectionError
from svgcanvas_py.services.export import ExportService

if TYPE_CHECKING:
    from svgcanvas_py.config import CanvasConfig
    from svgcanvas_py.core.color import Color
    from svgcanvas_py.core.markup import Drawable
    from svgcanvas_py.core.props import Props
    from svgcanvas_py.core.vector import Vector2
    from svgcanvas_py.services.export import ExportDestination

logger = structlog.get_logger(__name__)


class Canvas:
    """A bounded scene holding an ordered list of drawables.

    Drawables are only created through the ``add_*`` methods and are kept in
    insertion order, which is also the order they are hit-tested, rendered and
    exported in. At most one drawable is selected at a time; the transform
    methods act on that selection.

    ``width`` and ``height`` size the exported document. Coordinates outside
    of them are allowed.

    The canvas does no locking. Callers sharing one canvas between threads
    must serialize access themselves.

    Example:
        >>> canvas = Canvas(1920, 1080)
        >>> canvas.add_circle(Vector2(960, 540), 540)
        >>> canvas.select_drawable_at(Vector2(1000, 600))
        True
        >>> canvas.scale_selected(0.5)
        True
    """

    def __init__(self, width: int, height: int, export_service: ExportService | None = None) -> None:
        """Initialize an empty canvas.

        Args:
            width: Width of the exported document in pixels.
            height: Height of the exported document in pixels.
            export_service: Service used to serialize the canvas.
        """
        self.width = width
        self.height = height
        self._drawables: list[Drawable] = []
        # index into _drawables; must be cleared if entries can ever be removed
        self._selected: int | None = None
        self._export_service = export_service or ExportService()

    @classmethod
    def from_config(cls, config: CanvasConfig) -> Canvas:
        """Create an empty canvas sized from a configuration."""
        return cls(config.width, config.height)

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        """The drawables in insertion order."""
        return tuple(self._drawables)

    @property
    def selected_index(self) -> int | None:
        """Position of the selected drawable, or ``None`` when nothing is selected."""
        return self._selected

    def __len__(self) -> int:
        return len(self._drawables)

    def _append(self, drawable: Drawable) -> None:
        self._drawables.append(drawable)
        logger.debug("Drawable added", drawable_type=str(drawable.drawable_type), index=len(self._drawables) - 1)

    # Drawable creation
    def add_line(
        self,
        start: Vector2,
        end: Vector2,
        stroke_color: Color | None = None,
        stroke_width: int | None = None,
        fill: Color | None = None,
    ) -> None:
        """Add a line between two points.

        Style options left as ``None`` take the values of ``LINE_STYLE``.

        Raises:
            InvalidStyleError: If ``stroke_width`` is outside 0..255.
        """
        style = LINE_STYLE.with_overrides(stroke_color=stroke_color, stroke_width=stroke_width, fill=fill)
        self._append(
            Line(
                start=start,
                end=end,
                stroke_color=style.stroke_color,
                fill=style.fill,
                stroke_width=style.stroke_width,
            )
        )

    def add_circle(
        self,
        center: Vector2,
        radius: float,
        stroke_color: Color | None = None,
        stroke_width: int | None = None,
        fill: Color | None = None,
    ) -> None:
        """Add a circle.

        Style options left as ``None`` take the values of ``CIRCLE_STYLE``.

        Raises:
            InvalidStyleError: If ``stroke_width`` is outside 0..255.
        """
        style = CIRCLE_STYLE.with_overrides(stroke_color=stroke_color, stroke_width=stroke_width, fill=fill)
        self._append(
            Circle(
                center=center,
                radius=radius,
                stroke_color=style.stroke_color,
                fill=style.fill,
                stroke_width=style.stroke_width,
            )
        )

    def add_rect(
        self,
        start: Vector2,
        end: Vector2,
        stroke_color: Color | None = None,
        stroke_width: int | None = None,
        fill: Color | None = None,
    ) -> None:
        """Add an unrotated rectangle spanning two opposite corners.

        Style options left as ``None`` take the values of ``RECT_STYLE``.

        Raises:
            InvalidStyleError: If ``stroke_width`` is outside 0..255.
        """
        style = RECT_STYLE.with_overrides(stroke_color=stroke_color, stroke_width=stroke_width, fill=fill)
        self._append(
            Rect.from_corners(
                start,
                end,
                stroke_color=style.stroke_color,
                fill=style.fill,
                stroke_width=style.stroke_width,
            )
        )

    def add_square(
        self,
        start: Vector2,
        side: float,
        stroke_color: Color | None = None,
        stroke_width: int | None = None,
        fill: Color | None = None,
    ) -> None:
        """Add an unrotated square extending right and down from ``start``."""
        style = RECT_STYLE.with_overrides(stroke_color=stroke_color, stroke_width=stroke_width, fill=fill)
        self._append(
            Rect.square(
                start,
                side,
                stroke_color=style.stroke_color,
                fill=style.fill,
                stroke_width=style.stroke_width,
            )
        )

    def add_text(self, text: str, pos: Vector2, fill: Color | None = None) -> None:
        """Add a run of text anchored at ``pos``."""
        self._append(Text(text=text, pos=pos, fill=fill or TEXT_FILL))

    # Selection
    def select_drawable_at(self, point: Vector2) -> bool:
        """Select the earliest-added drawable that contains ``point``.

        Args:
            point: The point to hit-test.

        Returns:
            True if a drawable was selected. On a miss the previous selection
            is kept and False is returned.
        """
        for index, drawable in enumerate(self._drawables):
            if drawable.contains(point):
                self._selected = index
                logger.debug("Drawable selected", index=index, drawable_type=str(drawable.drawable_type))
                return True
        logger.debug("No drawable at point", x=point.x, y=point.y)
        return False

    def clear_selection(self) -> None:
        """Drop the current selection, if any."""
        self._selected = None

    def _selected_drawable(self) -> Drawable | None:
        if self._selected is None:
            return None
        try:
            return self._drawables[self._selected]
        except IndexError:
            raise InvalidDrawableError(None, self._selected) from None

    def get_selected_drawable_properties(self) -> Props:
        """Return a snapshot of the selected drawable's properties.

        Raises:
            NoSelectionError: If nothing is selected.
            InvalidDrawableError: If the selection refers to an unsupported entry.
        """
        drawable = self._selected_drawable()
        if drawable is None:
            raise NoSelectionError
        return snapshot(drawable, self._selected)

    # Transformations of the selection
    def translate_selected(self, offset: Vector2) -> bool:
        """Shift the selected drawable by ``offset``.

        Returns:
            False without changing anything if nothing is selected, else True.
        """
        drawable = self._selected_drawable()
        if drawable is None:
            return False
        drawable.translate(offset)
        logger.debug("Selection translated", index=self._selected, dx=offset.x, dy=offset.y)
        return True

    def rotate_selected(self, angle: float) -> bool:
        """Rotate the selected drawable by ``angle`` radians.

        Returns:
            False without changing anything if nothing is selected, else True.
        """
        drawable = self._selected_drawable()
        if drawable is None:
            return False
        drawable.rotate(angle)
        logger.debug("Selection rotated", index=self._selected, angle=angle)
        return True

    def scale_selected(self, c: float) -> bool:
        """Scale the selected drawable by factor ``c``.

        Returns:
            False without changing anything if nothing is selected, else True.
        """
        drawable = self._selected_drawable()
        if drawable is None:
            return False
        drawable.scale(c)
        logger.debug("Selection scaled", index=self._selected, factor=c)
        return True

    # Export
    def to_svg(self) -> str:
        """Return the SVG document for the whole canvas."""
        return self._export_service.to_svg(self)

    def export(self, destination: ExportDestination) -> None:
        """Write the SVG document to a file path or text stream.

        Raises:
            OSError: If the destination cannot be written.
        """
        self._export_service.write(self, destination)
