"""Tests for colours, styles and drawable models."""

from __future__ import annotations

import math

import pytest

from svgcanvas_py.core.color import BLACK, BLUE, GREEN, RED, TRANSPARENT, WHITE, Color
from svgcanvas_py.core.markup import compose_tag, escape_xml, format_number
from svgcanvas_py.core.models import Circle, Line, Rect, Text
from svgcanvas_py.core.style import LINE_STYLE, ElementStyle
from svgcanvas_py.core.types import DrawableType
from svgcanvas_py.core.vector import Vector2
from svgcanvas_py.exceptions import InvalidStyleError


class TestColor:
    """Tests for the Color model."""

    def test_str(self) -> None:
        """Test the rgba text form."""
        assert str(Color(1, 2, 3, 0.5)) == "rgba(1, 2, 3, 0.5)"
        assert str(BLACK) == "rgba(0, 0, 0, 1)"

    def test_named_constants(self) -> None:
        """Test the named colours."""
        assert (WHITE.r, WHITE.g, WHITE.b) == (255, 255, 255)
        assert RED == Color(255, 0, 0)
        assert GREEN == Color(0, 255, 0)
        assert BLUE == Color(0, 0, 255)
        assert TRANSPARENT.a == 0.0

    def test_from_hex(self) -> None:
        """Test decoding a packed RGB number."""
        assert Color.from_hex(0x336699) == Color(0x33, 0x66, 0x99)
        assert Color.from_hex(0xFF0000, alpha=0.25) == Color(255, 0, 0, 0.25)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("#ff0000", Color(255, 0, 0)),
            ("#00ff0080", Color(0, 255, 0, 128 / 255)),
            ("rgba(1, 2, 3, 0.5)", Color(1, 2, 3, 0.5)),
            ("rgb(4,5,6)", Color(4, 5, 6)),
        ],
    )
    def test_parse(self, text: str, expected: Color) -> None:
        """Test parsing supported notations."""
        assert Color.parse(text) == expected

    @pytest.mark.parametrize("text", ["red", "#12", "#zzzzzz", "rgba(300, 0, 0, 1)"])
    def test_parse_invalid(self, text: str) -> None:
        """Test unsupported or out of range colours are rejected."""
        with pytest.raises(InvalidStyleError):
            Color.parse(text)

    def test_out_of_range_channels(self) -> None:
        """Test channel validation."""
        with pytest.raises(InvalidStyleError):
            Color(256, 0, 0)
        with pytest.raises(InvalidStyleError):
            Color(0, 0, 0, 1.5)
        with pytest.raises(InvalidStyleError):
            Color.from_hex(0x1000000)


class TestElementStyle:
    """Tests for the ElementStyle model."""

    def test_default_style(self) -> None:
        """Test default style values."""
        style = ElementStyle()
        assert style.stroke_color == BLACK
        assert style.fill == TRANSPARENT
        assert style.stroke_width == 1

    def test_overrides(self) -> None:
        """Test only given options are replaced."""
        style = LINE_STYLE.with_overrides(stroke_color=RED, stroke_width=None)
        assert style.stroke_color == RED
        assert style.stroke_width == LINE_STYLE.stroke_width
        assert LINE_STYLE.with_overrides() is LINE_STYLE

    @pytest.mark.parametrize("width", [-1, 256])
    def test_invalid_stroke_width(self, width: int) -> None:
        """Test stroke widths must fit in a byte."""
        with pytest.raises(InvalidStyleError):
            ElementStyle(stroke_width=width)


class TestMarkup:
    """Tests for the shared tag composition."""

    def test_self_closing_tag(self) -> None:
        """Test a tag without inner content closes itself."""
        assert compose_tag("circle", {"cx": "1", "r": "2"}) == '<circle cx="1" r="2"/>'

    def test_tag_with_content(self) -> None:
        """Test inner content is wrapped in opening and closing tags."""
        assert compose_tag("text", {"x": "0"}, "hi") == '<text x="0">hi</text>'

    def test_escaping(self) -> None:
        """Test content and attribute values are escaped."""
        assert escape_xml("<a & 'b'>") == "&lt;a &amp; &apos;b&apos;&gt;"
        assert compose_tag("text", {"title": 'say "hi"'}, "a<b") == '<text title="say &quot;hi&quot;">a&lt;b</text>'

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(960.0, "960"), (0, "0"), (-2.0, "-2"), (1.5, "1.5"), (0.1, "0.1")],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        """Test integral numbers drop their fractional part."""
        assert format_number(value) == expected


class TestLine:
    """Tests for the Line model."""

    def test_create_line(self, sample_line: Line) -> None:
        """Test derived length and angle."""
        assert sample_line.len == pytest.approx(math.sqrt(2))
        assert sample_line.angle == pytest.approx(math.pi / 4)
        assert sample_line.drawable_type == DrawableType.LINE

    def test_vertical_line_angle(self) -> None:
        """Test a vertical segment has a finite angle."""
        line = Line(start=Vector2(5, 0), end=Vector2(5, 10))
        assert line.angle == pytest.approx(math.pi / 2)
        assert line.len == 10.0

    def test_endpoints_are_copied(self) -> None:
        """Test the line does not share vectors with the caller."""
        start = Vector2(0, 0)
        line = Line(start=start, end=Vector2(1, 0))
        start.translate(Vector2(5, 5))
        assert line.start == (0, 0)

    def test_translate(self, sample_line: Line) -> None:
        """Test both endpoints move."""
        assert sample_line.translate(Vector2(2, 3)) is sample_line
        assert sample_line.start == (2, 3)
        assert sample_line.end == (3, 4)
        assert sample_line.len == pytest.approx(math.sqrt(2))

    def test_rotate_about_start(self) -> None:
        """Test rotation keeps start fixed and turns end around it."""
        line = Line(start=Vector2(1, 1), end=Vector2(3, 1))
        line.rotate(math.pi / 2)
        assert line.start == (1, 1)
        assert line.end == (1, 3)
        assert line.angle == pytest.approx(math.pi / 2)
        assert line.len == pytest.approx(2.0)

    def test_scale(self, sample_line: Line) -> None:
        """Test scaling stretches the segment from its start."""
        sample_line.scale(2)
        assert sample_line.start == (0, 0)
        assert sample_line.end == (2, 2)
        assert sample_line.len == pytest.approx(math.sqrt(8))

    def test_scale_by_zero_is_ignored(self, sample_line: Line) -> None:
        """Test a zero factor leaves the line unchanged."""
        sample_line.scale(0)
        assert sample_line.end == (1, 1)

    def test_chaining(self, sample_line: Line) -> None:
        """Test transforms can be chained."""
        sample_line.translate(Vector2(1, 0)).scale(3).rotate(0)
        assert sample_line.start == (1, 0)
        assert sample_line.end == (4, 3)

    @pytest.mark.parametrize("point", [Vector2(0, 0), Vector2(0.5, 0.5), Vector2(1, 1)])
    def test_contains_points_on_segment(self, sample_line: Line, point: Vector2) -> None:
        """Test points on the segment, endpoints included, are hits."""
        assert sample_line.contains(point)

    @pytest.mark.parametrize("point", [Vector2(2, 2), Vector2(-0.5, -0.5), Vector2(0.5, 0.6), Vector2(1, 0)])
    def test_contains_misses(self, sample_line: Line, point: Vector2) -> None:
        """Test points off the segment or beyond its ends are misses."""
        assert not sample_line.contains(point)

    def test_contains_vertical(self) -> None:
        """Test hit-testing a vertical segment."""
        line = Line(start=Vector2(5, 0), end=Vector2(5, 10))
        assert line.contains(Vector2(5, 4))
        assert not line.contains(Vector2(5, 11))
        assert not line.contains(Vector2(6, 4))

    def test_to_svg(self) -> None:
        """Test line markup."""
        line = Line(start=Vector2(1, 2), end=Vector2(3.5, 4), stroke_color=RED, stroke_width=2)
        assert line.to_svg() == (
            '<line x1="1" y1="2" x2="3.5" y2="4" '
            'style="fill:rgba(0, 0, 0, 0);stroke:rgba(255, 0, 0, 1);stroke-width:2"/>'
        )


class TestCircle:
    """Tests for the Circle model."""

    def test_derived_fields(self, sample_circle: Circle) -> None:
        """Test circumference and area."""
        assert sample_circle.circumference == pytest.approx(10 * math.pi)
        assert sample_circle.area == pytest.approx(25 * math.pi)

    def test_translate(self, sample_circle: Circle) -> None:
        """Test the center moves and the radius does not."""
        sample_circle.translate(Vector2(1, 1))
        assert sample_circle.center == (1, 1)
        assert sample_circle.radius == 5.0

    def test_rotate_is_noop(self, sample_circle: Circle) -> None:
        """Test rotation changes nothing."""
        assert sample_circle.rotate(1.0) is sample_circle
        assert sample_circle.center == (0, 0)
        assert sample_circle.radius == 5.0

    def test_scale(self, sample_circle: Circle) -> None:
        """Test scaling the radius updates derived fields."""
        sample_circle.scale(2)
        assert sample_circle.center == (0, 0)
        assert sample_circle.radius == 10.0
        assert sample_circle.area == pytest.approx(100 * math.pi)

    def test_scale_by_zero_and_negative(self, sample_circle: Circle) -> None:
        """Test zero is ignored and the sign of the factor is dropped."""
        sample_circle.scale(0)
        assert sample_circle.radius == 5.0
        sample_circle.scale(-2)
        assert sample_circle.radius == 10.0

    def test_contains(self, sample_circle: Circle) -> None:
        """Test the boundary is inclusive."""
        assert sample_circle.contains(Vector2(0, 0))
        assert sample_circle.contains(Vector2(3, 4))
        assert sample_circle.contains(Vector2(5, 0))
        assert not sample_circle.contains(Vector2(4, 4))

    def test_to_svg(self) -> None:
        """Test circle markup."""
        circle = Circle(center=Vector2(960, 540), radius=540)
        assert circle.to_svg() == '<circle cx="960" cy="540" r="540"/>'


class TestRect:
    """Tests for the Rect model."""

    def test_from_corners(self, sample_rect: Rect) -> None:
        """Test the diagonal and opposite corner."""
        assert sample_rect.start == (0, 0)
        assert sample_rect.diagonal == (1, 1)
        assert sample_rect.end == (1, 1)
        assert sample_rect.angle == 0.0

    def test_square(self) -> None:
        """Test building a square from a corner and side."""
        square = Rect.square(Vector2(10, 0), 10)
        assert square.end == (20, 10)
        assert square.dimensions() == (10, 10)

    def test_translate(self, sample_rect: Rect) -> None:
        """Test the whole rectangle moves."""
        sample_rect.translate(Vector2(2, 2))
        assert sample_rect.start == (2, 2)
        assert sample_rect.end == (3, 3)

    def test_rotate(self, sample_rect: Rect) -> None:
        """Test rotation turns the diagonal and accumulates the angle."""
        sample_rect.rotate(math.pi / 4)
        assert sample_rect.angle == pytest.approx(math.pi / 4)
        assert sample_rect.start == (0, 0)
        assert sample_rect.end == (0, math.sqrt(2))
        assert sample_rect.dimensions() == (1, 1)

    def test_scale(self, sample_rect: Rect) -> None:
        """Test scaling the diagonal."""
        sample_rect.scale(2)
        assert sample_rect.start == (0, 0)
        assert sample_rect.end == (2, 2)

    def test_dimensions_of_reversed_rect(self) -> None:
        """Test dimensions are positive whatever the corner order."""
        rect = Rect.from_corners(Vector2(10, 10), Vector2(4, 2))
        assert rect.dimensions() == (6, 8)

    @pytest.mark.parametrize("point", [Vector2(0.5, 0.5), Vector2(0.75, 0), Vector2(1, 0), Vector2(1, 1)])
    def test_contains(self, sample_rect: Rect, point: Vector2) -> None:
        """Test points inside or on the edge are hits."""
        assert sample_rect.contains(point)

    @pytest.mark.parametrize("point", [Vector2(2, 2), Vector2(1, 1.1), Vector2(0, 5), Vector2(12, 16.4)])
    def test_contains_misses(self, sample_rect: Rect, point: Vector2) -> None:
        """Test points outside are misses."""
        assert not sample_rect.contains(point)

    def test_contains_reversed_rect(self) -> None:
        """Test hit-testing a rectangle whose diagonal points up and left."""
        rect = Rect.from_corners(Vector2(10, 10), Vector2(0, 0))
        assert rect.contains(Vector2(5, 5))
        assert not rect.contains(Vector2(15, 15))

    def test_contains_follows_rotation(self) -> None:
        """Test hit-testing accounts for the accumulated angle."""
        rect = Rect.from_corners(Vector2(0, 0), Vector2(4, 1))
        rect.rotate(math.pi / 2)
        assert rect.contains(Vector2(-0.5, 3))
        assert not rect.contains(Vector2(3, 0.5))

    def test_to_svg(self) -> None:
        """Test rectangle markup."""
        rect = Rect.from_corners(Vector2(10, 20), Vector2(40, 60), fill=BLUE)
        assert rect.to_svg() == (
            '<rect x="10" y="20" width="30" height="40" '
            'style="fill:rgba(0, 0, 255, 1);stroke:rgba(0, 0, 0, 1);stroke_width:1;"/>'
        )

    def test_to_svg_normalizes_reversed_corners(self) -> None:
        """Test the markup always has a positive size."""
        rect = Rect.from_corners(Vector2(40, 60), Vector2(10, 20))
        props = rect.tag_properties()
        assert (props["x"], props["y"], props["width"], props["height"]) == ("10", "20", "30", "40")

    def test_to_svg_rotated(self) -> None:
        """Test a rotated rectangle carries a transform about its anchor."""
        rect = Rect.from_corners(Vector2(10, 20), Vector2(40, 60))
        rect.rotate(math.pi / 2)
        props = rect.tag_properties()
        assert props["transform"] == "rotate(90 10 20)"
        assert (props["x"], props["y"]) == ("10", "20")
        assert props["width"] == "30"


class TestText:
    """Tests for the Text model."""

    def test_translate(self, sample_text: Text) -> None:
        """Test the anchor moves."""
        sample_text.translate(Vector2(1, -1))
        assert sample_text.pos == (11, 19)

    def test_rotate_accumulates_angle(self, sample_text: Text) -> None:
        """Test rotation only changes the angle."""
        sample_text.rotate(0.5).rotate(0.25)
        assert sample_text.angle == pytest.approx(0.75)
        assert sample_text.pos == (10, 20)

    def test_scale_is_noop(self, sample_text: Text) -> None:
        """Test scaling does nothing."""
        assert sample_text.scale(3) is sample_text
        assert sample_text.pos == (10, 20)

    def test_never_contains(self, sample_text: Text) -> None:
        """Test text is never hit."""
        assert not sample_text.contains(Vector2(10, 20))

    def test_to_svg(self, sample_text: Text) -> None:
        """Test text markup wraps the content."""
        assert sample_text.inner_content() == "Hello"
        assert sample_text.to_svg() == '<text x="10" y="20">Hello</text>'

    def test_to_svg_escapes_content(self) -> None:
        """Test markup characters in the content are escaped."""
        text = Text(text="a < b & c", pos=Vector2(0, 0))
        assert text.to_svg() == '<text x="0" y="0">a &lt; b &amp; c</text>'
