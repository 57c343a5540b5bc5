"""Axis-aligned bounding boxes aggregated from edge coordinates."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in source units."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )


def bounding_box_of_points(points: Iterable[tuple[float, float]]) -> BoundingBox | None:
    """Return the box covering ``points``, or None when there are none."""
    box: BoundingBox | None = None
    for x, y in points:
        if box is None:
            box = BoundingBox(x, y, x, y)
        else:
            box = BoundingBox(
                min(box.min_x, x), min(box.min_y, y), max(box.max_x, x), max(box.max_y, y)
            )
    return box


def union_boxes(boxes: Iterable[BoundingBox | None]) -> BoundingBox | None:
    """Union every box, skipping scopes without geometry."""
    result: BoundingBox | None = None
    for box in boxes:
        if box is None:
            continue
        result = box if result is None else result.union(box)
    return result
