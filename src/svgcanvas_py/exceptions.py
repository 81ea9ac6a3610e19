"""Custom exceptions for svgcanvas-py."""

from __future__ import annotations


class SvgCanvasError(Exception):
    """Base exception class for all svgcanvas-py errors."""


class NoSelectionError(SvgCanvasError):
    """Raised when an operation needs a selected drawable and none is selected."""

    def __init__(self) -> None:
        """Initialize the exception with a fixed message."""
        super().__init__("No drawable is selected")


class InvalidDrawableError(SvgCanvasError):
    """Raised when a canvas entry is not one of the supported drawable types.

    Attributes:
        index: Position of the offending entry on the canvas, if known.
    """

    def __init__(self, drawable: object, index: int | None = None) -> None:
        """Initialize the exception with the unsupported object.

        Args:
            drawable: The object that is not a supported drawable.
            index: Position of the entry on the canvas, if known.
        """
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Unsupported drawable{where}: {type(drawable).__name__}")


class InvalidStyleError(SvgCanvasError):
    """Raised when a colour or stroke width is outside its allowed range."""

    def __init__(self, message: str) -> None:
        """Initialize the exception with a custom message.

        Args:
            message: Description of why the style value is invalid.
        """
        super().__init__(message)
