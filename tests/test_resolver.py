"""Tests for edge path building and style resolution."""

import pytest

from fla_renderer.constants import STROKE_WIDTH
from fla_renderer.dom import (
    Edge,
    FillStyle,
    LineTo,
    MoveTo,
    Selection,
    SelectionMask,
    Shape,
    SolidColor,
    StrokeStyle,
    parse_edge_definition,
)
from fla_renderer.errors import (
    InvalidColorError,
    MissingColorError,
    MissingFillStyleError,
    MissingFillStyleIndexError,
    MissingStrokeStyleError,
    MissingStrokeStyleIndexError,
    UnsupportedError,
)
from fla_renderer.render.path import LineSegment, QuadSegment
from fla_renderer.render.resolver import StrokeSpec, build_edge_path, resolve_edge

RED = FillStyle(index=1, solid_color=SolidColor("#FF0000"))
BLUE_STROKE = StrokeStyle(index=1, solid_color=SolidColor("#0000FF"))


def make_edge(definition: str, **styles: int) -> Edge:
    return Edge(commands=parse_edge_definition(definition), **styles)


class TestBuildEdgePath:
    """Tests for folding commands into a path."""

    def test_moves_after_selection_are_drawn_as_lines(self) -> None:
        path, mask = build_edge_path(parse_edge_definition("!0 0S4!10 0|10 10"))

        assert mask == SelectionMask.STROKE
        (subpath,) = path.subpaths
        assert subpath.start == (0, 0)
        assert subpath.segments == (LineSegment((10, 0)), LineSegment((10, 10)))
        assert subpath.closed

    def test_moves_before_selection_lift_the_pen(self) -> None:
        path, _ = build_edge_path(parse_edge_definition("!0 0|1 1!5 5|6 6S4"))

        assert [sub.start for sub in path.subpaths] == [(0, 0), (5, 5)]
        assert path.subpaths[-1].closed

    def test_curves_keep_control_points(self) -> None:
        path, _ = build_edge_path(parse_edge_definition("!0 0S2[5 10 10 0"))

        assert path.subpaths[0].segments == (QuadSegment((5, 10), (10, 0)),)

    def test_no_selection(self) -> None:
        _, mask = build_edge_path(parse_edge_definition("!0 0|1 1"))
        assert mask is None

    @pytest.mark.parametrize("first, second", [(4, 4), (2, 4), (0, 1), (7, 0)])
    def test_second_selection_is_unsupported(self, first: int, second: int) -> None:
        commands = (
            MoveTo(0, 0),
            Selection(SelectionMask(first)),
            LineTo(1, 1),
            Selection(SelectionMask(second)),
        )

        with pytest.raises(UnsupportedError):
            build_edge_path(commands)


class TestResolveEdge:
    """Tests for resolving fill and stroke styles."""

    def test_stroke_only(self) -> None:
        shape = Shape(stroke_styles=(BLUE_STROKE,))
        edge = make_edge("!0 0|10 0|10 10S4", stroke_style=1)

        resolved = resolve_edge(edge, shape, scale=2.0)

        assert resolved.fill is None
        assert resolved.stroke == StrokeSpec(color=(0, 0, 255), width=STROKE_WIDTH * 2.0)
        assert resolved.stroke.round_cap and resolved.stroke.round_join

    def test_fill_only(self) -> None:
        shape = Shape(fill_styles=(RED,))
        edge = make_edge("!0 0S2|10 0|10 10", fill_style1=1)

        resolved = resolve_edge(edge, shape, scale=1.0)

        assert resolved.fill == (255, 0, 0)
        assert resolved.stroke is None

    def test_fill_and_stroke_apply_together(self) -> None:
        shape = Shape(fill_styles=(RED,), stroke_styles=(BLUE_STROKE,))
        edge = make_edge("!0 0S6|10 0", fill_style1=1, stroke_style=1)

        resolved = resolve_edge(edge, shape, scale=1.0)

        assert resolved.fill == (255, 0, 0)
        assert resolved.stroke.color == (0, 0, 255)

    def test_no_selection_draws_nothing(self) -> None:
        assert resolve_edge(make_edge("!0 0|10 0"), Shape(), scale=1.0) is None
        assert resolve_edge(make_edge("!0 0S0|10 0"), Shape(), scale=1.0) is None

    def test_fill_style_0_is_unsupported(self) -> None:
        shape = Shape(fill_styles=(RED,))
        with pytest.raises(UnsupportedError):
            resolve_edge(make_edge("!0 0S3|1 1", fill_style0=1, fill_style1=1), shape, scale=1.0)

    def test_first_matching_fill_style_wins(self) -> None:
        shape = Shape(fill_styles=(RED, FillStyle(index=1, solid_color=SolidColor("#0000FF"))))

        resolved = resolve_edge(make_edge("!0 0S2|1 1", fill_style1=1), shape, scale=1.0)

        assert resolved.fill == (255, 0, 0)

    def test_missing_fill_index(self) -> None:
        with pytest.raises(MissingFillStyleIndexError):
            resolve_edge(make_edge("!0 0S2|1 1"), Shape(fill_styles=(RED,)), scale=1.0)

    def test_missing_fill_entry(self) -> None:
        with pytest.raises(MissingFillStyleError) as exc_info:
            resolve_edge(make_edge("!0 0S2|1 1", fill_style1=3), Shape(fill_styles=(RED,)), scale=1.0)
        assert exc_info.value.index == 3

    def test_non_solid_fill_is_missing_color(self) -> None:
        shape = Shape(fill_styles=(FillStyle(index=1),))
        with pytest.raises(MissingColorError):
            resolve_edge(make_edge("!0 0S2|1 1", fill_style1=1), shape, scale=1.0)

    def test_solid_fill_without_value_is_black(self) -> None:
        shape = Shape(fill_styles=(FillStyle(index=1, solid_color=SolidColor()),))

        resolved = resolve_edge(make_edge("!0 0S2|1 1", fill_style1=1), shape, scale=1.0)

        assert resolved.fill == (0, 0, 0)

    @pytest.mark.parametrize("value", ["#GG0000", "FF0000", "#FFF"])
    def test_invalid_color(self, value: str) -> None:
        shape = Shape(fill_styles=(FillStyle(index=1, solid_color=SolidColor(value)),))
        with pytest.raises(InvalidColorError):
            resolve_edge(make_edge("!0 0S2|1 1", fill_style1=1), shape, scale=1.0)

    def test_missing_stroke_index(self) -> None:
        with pytest.raises(MissingStrokeStyleIndexError):
            resolve_edge(make_edge("!0 0S4|1 1"), Shape(stroke_styles=(BLUE_STROKE,)), scale=1.0)

    def test_missing_stroke_entry(self) -> None:
        with pytest.raises(MissingStrokeStyleError):
            resolve_edge(make_edge("!0 0S4|1 1", stroke_style=2), Shape(), scale=1.0)

    def test_stroke_without_color_is_black(self) -> None:
        shape = Shape(stroke_styles=(StrokeStyle(index=1),))

        resolved = resolve_edge(make_edge("!0 0S4|1 1", stroke_style=1), shape, scale=0.5)

        assert resolved.stroke == StrokeSpec(color=(0, 0, 0), width=STROKE_WIDTH * 0.5)

    def test_non_solid_stroke_is_unsupported(self) -> None:
        shape = Shape(stroke_styles=(StrokeStyle(index=1, kind="DashedStroke"),))
        with pytest.raises(UnsupportedError, match="DashedStroke"):
            resolve_edge(make_edge("!0 0S4|1 1", stroke_style=1), shape, scale=1.0)
