"""Export service for rendering a canvas to SVG."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from svgcanvas_py.services.canvas import Canvas

logger = structlog.get_logger(__name__)

ExportDestination = str | os.PathLike[str] | TextIO


class ExportService:
    """Service for serializing a canvas into an SVG document.

    The document is an ``<svg>`` element sized to the canvas that contains
    one fragment per drawable, in insertion order.
    """

    def to_svg(self, canvas: Canvas) -> str:
        """Export canvas to SVG format.

        Args:
            canvas: The canvas to export.

        Returns:
            SVG string representation of the canvas.
        """
        body = "".join(drawable.to_svg() for drawable in canvas.drawables)
        return f'<svg width="{canvas.width}" height="{canvas.height}">{body}</svg>'

    def write(self, canvas: Canvas, destination: ExportDestination) -> None:
        """Write the SVG document of a canvas.

        Args:
            canvas: The canvas to export.
            destination: A file path, or an open text stream to write into.

        Raises:
            OSError: If the destination cannot be written.
        """
        document = self.to_svg(canvas)
        if isinstance(destination, str | os.PathLike):
            Path(destination).write_text(document, encoding="utf-8")
            target = os.fspath(destination)
        else:
            destination.write(document)
            target = getattr(destination, "name", "<stream>")
        logger.info(
            "Canvas exported",
            destination=str(target),
            drawables=len(canvas.drawables),
            size=len(document),
        )
