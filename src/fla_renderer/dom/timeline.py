"""Timeline records: symbols hold layers, layers hold keyframes."""

from dataclasses import dataclass

from ..compositor import output_frame_count
from ..geometry import BoundingBox, union_boxes
from .shape import Shape


@dataclass(frozen=True)
class Frame:
    """One authored keyframe of a layer."""

    index: int = 0
    shapes: tuple[Shape, ...] = ()

    def bounding_box(self) -> BoundingBox | None:
        return union_boxes(shape.bounding_box() for shape in self.shapes)


@dataclass(frozen=True)
class Layer:
    name: str = ""
    frames: tuple[Frame, ...] = ()

    @property
    def num_frames(self) -> int:
        return len(self.frames)

    def bounding_box(self) -> BoundingBox | None:
        """Box over every keyframe, i.e. the full animated extent of the layer."""
        return union_boxes(frame.bounding_box() for frame in self.frames)


@dataclass(frozen=True)
class Symbol:
    """A named, independently renderable timeline."""

    name: str
    layers: tuple[Layer, ...] = ()
    item_id: str | None = None

    @property
    def num_frames(self) -> int:
        return output_frame_count(self.layers)

    def bounding_box(self) -> BoundingBox | None:
        return union_boxes(layer.bounding_box() for layer in self.layers)
