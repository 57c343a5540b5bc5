"""Turn an edge's commands and selection mask into styled drawing actions."""

from dataclasses import dataclass
from typing import Iterable

from ..constants import DEFAULT_COLOR, STROKE_WIDTH
from ..dom.edges import CurveTo, EdgeCommand, LineTo, MoveTo, Selection, SelectionMask
from ..dom.shape import RGB, Edge, Shape
from ..errors import (
    MissingColorError,
    MissingFillStyleError,
    MissingFillStyleIndexError,
    MissingStrokeStyleError,
    MissingStrokeStyleIndexError,
    UnsupportedError,
)
from .path import Path, PathBuilder


@dataclass(frozen=True)
class StrokeSpec:
    color: RGB
    width: float
    round_cap: bool = True
    round_join: bool = True


@dataclass(frozen=True)
class ResolvedEdge:
    """A closed path plus the fill and stroke that apply to it."""

    path: Path
    fill: RGB | None = None
    stroke: StrokeSpec | None = None


def build_edge_path(
    commands: Iterable[EdgeCommand], builder: PathBuilder | None = None
) -> tuple[Path, SelectionMask | None]:
    """
    Fold edge commands into a closed path.

    Only a move seen before the selection lifts the pen. Once the selection
    is known, later moves are drawn as lines so segments sharing one style
    stay connected.

    Args:
        commands: Commands of one edge
        builder: Path builder to draw into, a fresh one by default

    Returns:
        The path and the selection mask, None when the edge has no selection

    Raises:
        UnsupportedError: If the edge carries more than one selection
    """
    pb = builder or PathBuilder()
    mask: SelectionMask | None = None

    for cmd in commands:
        if isinstance(cmd, MoveTo):
            if mask is None:
                pb.move_to(cmd.x, cmd.y)
            else:
                pb.line_to(cmd.x, cmd.y)
        elif isinstance(cmd, LineTo):
            pb.line_to(cmd.x, cmd.y)
        elif isinstance(cmd, CurveTo):
            pb.quad_to(cmd.cx, cmd.cy, cmd.ex, cmd.ey)
        elif isinstance(cmd, Selection):
            if mask is not None:
                raise UnsupportedError("SelectionMask overwrite")
            mask = cmd.mask
    pb.close_path()

    return pb.finish(), mask


def resolve_edge(
    edge: Edge, shape: Shape, scale: float, builder: PathBuilder | None = None
) -> ResolvedEdge | None:
    """
    Resolve the drawing actions for one edge of ``shape``.

    Fill and stroke are resolved independently; both may apply.

    Args:
        edge: The edge to draw
        shape: Shape owning the edge and its style tables
        scale: Render scale, used for the stroke width
        builder: Path builder to draw into, a fresh one by default

    Returns:
        The resolved edge, or None when the edge selects no style

    Raises:
        RenderError: If a style is missing or the selection is unsupported
    """
    path, mask = build_edge_path(edge.commands, builder)
    if not mask:
        return None

    if mask & SelectionMask.FILL_STYLE_0:
        raise UnsupportedError("FILLSTYLE0")

    fill = _resolve_fill(edge, shape) if mask & SelectionMask.FILL_STYLE_1 else None
    stroke = _resolve_stroke(edge, shape, scale) if mask & SelectionMask.STROKE else None
    return ResolvedEdge(path=path, fill=fill, stroke=stroke)


def _resolve_fill(edge: Edge, shape: Shape) -> RGB:
    if edge.fill_style1 is None:
        raise MissingFillStyleIndexError(1)
    style = shape.get_fill_style(edge.fill_style1)
    if style is None:
        raise MissingFillStyleError(edge.fill_style1)

    # Only solid fills are drawn
    if style.solid_color is None:
        raise MissingColorError()
    return style.solid_color.get_rgb()


def _resolve_stroke(edge: Edge, shape: Shape, scale: float) -> StrokeSpec:
    if edge.stroke_style is None:
        raise MissingStrokeStyleIndexError()
    style = shape.get_stroke_style(edge.stroke_style)
    if style is None:
        raise MissingStrokeStyleError(edge.stroke_style)
    if not style.is_solid:
        raise UnsupportedError(style.kind)

    color = style.solid_color.get_rgb() if style.solid_color is not None else DEFAULT_COLOR
    return StrokeSpec(color=color, width=STROKE_WIDTH * scale)
