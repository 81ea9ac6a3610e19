"""Command line interface for svgcanvas-py.

Builds a scene from command line options, optionally transforms the
drawable under a point, and writes the SVG document.
"""

from __future__ import annotations

import math
from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.table import Table

from svgcanvas_py.config import CanvasConfig
from svgcanvas_py.core.color import Color
from svgcanvas_py.core.logging import configure_logging
from svgcanvas_py.core.props import props_items
from svgcanvas_py.core.vector import Vector2
from svgcanvas_py.exceptions import InvalidStyleError, SvgCanvasError
from svgcanvas_py.services.canvas import Canvas

console = Console(stderr=True)


def _numbers(value: str, count: int, option: str) -> list[float]:
    """Split a comma separated option value into ``count`` floats."""
    parts = value.split(",")
    if len(parts) != count:
        msg = f"expected {count} comma separated numbers, got {value!r}"
        raise click.BadParameter(msg, param_hint=option)
    try:
        return [float(part) for part in parts]
    except ValueError:
        msg = f"not a number in {value!r}"
        raise click.BadParameter(msg, param_hint=option) from None


def _text_option(value: str) -> tuple[float, float, str]:
    """Split a ``X,Y,CONTENT`` option value; the content may contain commas."""
    parts = value.split(",", 2)
    if len(parts) != 3:
        msg = f"expected X,Y,CONTENT, got {value!r}"
        raise click.BadParameter(msg, param_hint="--text")
    x, y = _numbers(f"{parts[0]},{parts[1]}", 2, "--text")
    return x, y, parts[2]


def _color(value: str | None, option: str) -> Color | None:
    if value is None:
        return None
    try:
        return Color.parse(value)
    except InvalidStyleError as e:
        raise click.BadParameter(str(e), param_hint=option) from None


def _show_props(canvas: Canvas) -> None:
    props = canvas.get_selected_drawable_properties()
    table = Table(title=f"Selected {props.drawable_type} (index {canvas.selected_index})")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    for name, value in props_items(props):
        table.add_row(name, value)
    console.print(table)


@click.group(name="svgcanvas", help="Build simple vector scenes and export them as SVG.")
@click.version_option(package_name="svgcanvas-py")
def main() -> None:
    """Build simple vector scenes and export them as SVG."""


@main.command(name="draw", help="Create drawables, transform the one under --select and export SVG.")
@click.option("--width", type=int, default=None, help="Canvas width (default from SVGCANVAS_WIDTH or 1920)")
@click.option("--height", type=int, default=None, help="Canvas height (default from SVGCANVAS_HEIGHT or 1080)")
@click.option("--line", "lines", multiple=True, metavar="X1,Y1,X2,Y2", help="Add a line")
@click.option("--circle", "circles", multiple=True, metavar="CX,CY,R", help="Add a circle")
@click.option("--rect", "rects", multiple=True, metavar="X,Y,DX,DY", help="Add a rectangle from a corner and diagonal")
@click.option("--text", "texts", multiple=True, metavar="X,Y,CONTENT", help="Add text")
@click.option("--stroke", default=None, help="Stroke colour, e.g. #ff0000")
@click.option("--fill", default=None, help="Fill colour, e.g. rgba(0, 0, 255, 0.5)")
@click.option("--stroke-width", type=click.IntRange(0, 255), default=None, help="Stroke width in pixels")
@click.option("--select", "select_at", default=None, metavar="X,Y", help="Select the first drawable at this point")
@click.option("--translate", default=None, metavar="DX,DY", help="Move the selection")
@click.option("--rotate", type=float, default=None, help="Rotate the selection by degrees")
@click.option("--scale", type=float, default=None, help="Scale the selection")
@click.option("--show-props", is_flag=True, help="Print the selection's properties")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Output file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def draw(  # noqa: PLR0913
    width: int | None,
    height: int | None,
    lines: tuple[str, ...],
    circles: tuple[str, ...],
    rects: tuple[str, ...],
    texts: tuple[str, ...],
    stroke: str | None,
    fill: str | None,
    stroke_width: int | None,
    select_at: str | None,
    translate: str | None,
    rotate: float | None,
    scale: float | None,
    show_props: bool,
    output: Path | None,
    debug: bool,
    json_logs: bool,
) -> None:
    """Create drawables, transform the selection and export SVG.

    Drawables are added lines first, then circles, rectangles and texts.
    """
    config = CanvasConfig.from_env()
    configure_logging(debug=debug or config.debug, json_logs=json_logs or config.json_logs)

    canvas = Canvas(
        config.width if width is None else width,
        config.height if height is None else height,
    )
    style = {
        "stroke_color": _color(stroke, "--stroke"),
        "stroke_width": stroke_width,
        "fill": _color(fill, "--fill"),
    }

    for value in lines:
        x1, y1, x2, y2 = _numbers(value, 4, "--line")
        canvas.add_line(Vector2(x1, y1), Vector2(x2, y2), **style)
    for value in circles:
        cx, cy, r = _numbers(value, 3, "--circle")
        canvas.add_circle(Vector2(cx, cy), r, **style)
    for value in rects:
        x, y, dx, dy = _numbers(value, 4, "--rect")
        canvas.add_rect(Vector2(x, y), Vector2(x + dx, y + dy), **style)
    for value in texts:
        x, y, content = _text_option(value)
        canvas.add_text(content, Vector2(x, y), fill=style["fill"])

    if select_at is not None:
        px, py = _numbers(select_at, 2, "--select")
        if not canvas.select_drawable_at(Vector2(px, py)):
            console.print(f"[yellow]No drawable at ({px}, {py})[/yellow]")

    if translate is not None:
        dx, dy = _numbers(translate, 2, "--translate")
        canvas.translate_selected(Vector2(dx, dy))
    if rotate is not None:
        canvas.rotate_selected(math.radians(rotate))
    if scale is not None:
        canvas.scale_selected(scale)

    if show_props:
        try:
            _show_props(canvas)
        except SvgCanvasError as e:
            raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(canvas.to_svg())
        return
    try:
        canvas.export(output)
    except OSError as e:
        raise click.FileError(str(output), hint=e.strerror or str(e)) from e
    console.print(f"Wrote {len(canvas)} drawables to [cyan]{output}[/cyan]")

