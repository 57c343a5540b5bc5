"""Device independent paths built from move/line/quad segments."""

from dataclasses import dataclass
from typing import Callable

Point = tuple[float, float]
PointTransform = Callable[[float, float], Point]


@dataclass(frozen=True)
class LineSegment:
    end: Point


@dataclass(frozen=True)
class QuadSegment:
    control: Point
    end: Point


Segment = LineSegment | QuadSegment


@dataclass(frozen=True)
class SubPath:
    start: Point
    segments: tuple[Segment, ...] = ()
    closed: bool = False

    def flatten(self, curve_segments: int) -> list[Point]:
        """Approximate the subpath with a polyline."""
        points = [self.start]
        current = self.start
        for segment in self.segments:
            if isinstance(segment, QuadSegment):
                points.extend(_flatten_quad(current, segment.control, segment.end, curve_segments))
            else:
                points.append(segment.end)
            current = segment.end
        if self.closed and points[-1] != self.start:
            points.append(self.start)
        return points


@dataclass(frozen=True)
class Path:
    subpaths: tuple[SubPath, ...] = ()

    def transform(self, fn: PointTransform) -> "Path":
        """Return a copy with every point mapped through ``fn``."""
        return Path(
            tuple(
                SubPath(
                    start=fn(*sub.start),
                    segments=tuple(_transform_segment(seg, fn) for seg in sub.segments),
                    closed=sub.closed,
                )
                for sub in self.subpaths
            )
        )


class PathBuilder:
    """Accumulate path commands the way a drawing API's path builder does."""

    def __init__(self) -> None:
        self._subpaths: list[SubPath] = []
        self._start: Point | None = None
        self._segments: list[Segment] = []
        self._closed = False

    def move_to(self, x: float, y: float) -> None:
        self._flush()
        self._start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        self._ensure_started((x, y))
        self._segments.append(LineSegment((x, y)))

    def quad_to(self, cx: float, cy: float, ex: float, ey: float) -> None:
        self._ensure_started((cx, cy))
        self._segments.append(QuadSegment((cx, cy), (ex, ey)))

    def close_path(self) -> None:
        if self._start is not None:
            self._closed = True
            start = self._start
            self._flush()
            # Drawing continues from the start of the closed subpath.
            self._start = start

    def finish(self) -> Path:
        self._flush()
        return Path(tuple(self._subpaths))

    def _ensure_started(self, point: Point) -> None:
        # A segment without a preceding move starts at its first point.
        if self._start is None:
            self._start = point

    def _flush(self) -> None:
        if self._start is not None and (self._segments or self._closed):
            self._subpaths.append(SubPath(self._start, tuple(self._segments), self._closed))
        self._start = None
        self._segments = []
        self._closed = False


def _transform_segment(segment: Segment, fn: PointTransform) -> Segment:
    if isinstance(segment, QuadSegment):
        return QuadSegment(fn(*segment.control), fn(*segment.end))
    return LineSegment(fn(*segment.end))


def _flatten_quad(p0: Point, p1: Point, p2: Point, steps: int) -> list[Point]:
    points = []
    for i in range(1, steps + 1):
        t = i / steps
        mt = 1 - t
        points.append(
            (
                mt * mt * p0[0] + 2 * mt * t * p1[0] + t * t * p2[0],
                mt * mt * p0[1] + 2 * mt * t * p1[1] + t * t * p2[1],
            )
        )
    return points
