"""Shape records: edges plus their fill and stroke style tables."""

from dataclasses import dataclass

from ..constants import DEFAULT_COLOR
from ..errors import InvalidColorError
from ..geometry import BoundingBox, union_boxes
from .edges import EdgeCommand, bounding_box_of_commands

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class SolidColor:
    """A ``<SolidColor>`` element. A missing ``color`` attribute means black."""

    color: str | None = None

    def get_rgb(self) -> RGB:
        """
        Resolve the color to an RGB triple.

        Raises:
            InvalidColorError: If the value is not ``#RRGGBB``
        """
        if self.color is None:
            return DEFAULT_COLOR
        value = self.color
        if len(value) != 7 or not value.startswith("#"):
            raise InvalidColorError(value)
        try:
            return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))
        except ValueError:
            raise InvalidColorError(value)


@dataclass(frozen=True)
class FillStyle:
    """A fill style. ``solid_color`` is None for gradient and bitmap fills."""

    index: int | None
    solid_color: SolidColor | None = None


@dataclass(frozen=True)
class StrokeStyle:
    """A stroke style with the solid color of its inner fill."""

    index: int | None
    kind: str = "SolidStroke"
    solid_color: SolidColor | None = None

    @property
    def is_solid(self) -> bool:
        return self.kind == "SolidStroke"


@dataclass(frozen=True)
class Edge:
    commands: tuple[EdgeCommand, ...] = ()
    fill_style0: int | None = None
    fill_style1: int | None = None
    stroke_style: int | None = None

    def bounding_box(self) -> BoundingBox | None:
        return bounding_box_of_commands(self.commands)


@dataclass(frozen=True)
class Shape:
    edges: tuple[Edge, ...] = ()
    fill_styles: tuple[FillStyle, ...] = ()
    stroke_styles: tuple[StrokeStyle, ...] = ()

    def get_fill_style(self, index: int) -> FillStyle | None:
        """Return the first fill style declared with ``index``."""
        return next((style for style in self.fill_styles if style.index == index), None)

    def get_stroke_style(self, index: int) -> StrokeStyle | None:
        """Return the first stroke style declared with ``index``."""
        return next((style for style in self.stroke_styles if style.index == index), None)

    def bounding_box(self) -> BoundingBox | None:
        return union_boxes(edge.bounding_box() for edge in self.edges)
