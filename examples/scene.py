"""Minimal example showing svgcanvas-py usage.

This example builds a small scene, picks a drawable with a point the way a
pointer click would, transforms it and exports the result.

The script will:
    - Add a line, a circle, a rectangle and a caption to a canvas
    - Select the circle by hit-testing a point inside it
    - Move and grow the circle, then print its properties
    - Write the scene to scene.svg

Running the Example:
    python examples/scene.py
"""

from __future__ import annotations

import math

from svgcanvas_py import BLUE, RED, Canvas, CanvasConfig, Color, Vector2, configure_logging


def build_scene(canvas: Canvas) -> None:
    """Populate the canvas with one drawable of each type."""
    canvas.add_line(Vector2(100, 100), Vector2(400, 100), stroke_color=RED, stroke_width=4)
    canvas.add_circle(Vector2(600, 400), 120, fill=Color.from_hex(0xFFCC00, alpha=0.5))
    canvas.add_rect(Vector2(800, 200), Vector2(1100, 500), stroke_color=BLUE)
    canvas.add_text("svgcanvas-py", Vector2(100, 700))


def main() -> None:
    config = CanvasConfig.from_env()
    configure_logging(debug=True)

    canvas = Canvas.from_config(config)
    build_scene(canvas)

    if canvas.select_drawable_at(Vector2(620, 410)):
        canvas.translate_selected(Vector2(50, -50))
        canvas.scale_selected(1.5)
        print(canvas.get_selected_drawable_properties())  # noqa: T201

    if canvas.select_drawable_at(Vector2(900, 300)):
        canvas.rotate_selected(math.radians(15))

    canvas.export("scene.svg")


if __name__ == "__main__":
    main()
