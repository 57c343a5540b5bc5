"""Render a symbol's timeline into one raster canvas per output frame."""

import math
from itertools import islice
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from ..compositor import iter_output_frames, output_frame_count, select_keyframes
from ..dom.timeline import Frame, Symbol
from ..errors import NoBoundingBoxError
from ..geometry import BoundingBox
from .canvas import Canvas, PillowCanvas
from .path import Point
from .resolver import resolve_edge

CanvasT = TypeVar("CanvasT", bound=Canvas)


@dataclass(frozen=True)
class Transform:
    """Maps source units onto the padded canvas: ``(p - box.min) * scale + padding / 2``."""

    min_x: float
    min_y: float
    scale: float
    offset: float

    def __call__(self, x: float, y: float) -> Point:
        return (
            (x - self.min_x) * self.scale + self.offset,
            (y - self.min_y) * self.scale + self.offset,
        )


class SymbolRenderer(Generic[CanvasT]):
    """Renders every output frame of a symbol at a fixed scale and padding."""

    def __init__(
        self,
        symbol: Symbol,
        scale: float,
        padding: float,
        canvas_factory: Callable[[int, int], CanvasT] = PillowCanvas,  # type: ignore[assignment]
        workers: int | None = None,
    ):
        """
        Initialize the renderer and size the canvas from the symbol's bounding box.

        Args:
            symbol: Symbol to render
            scale: Source units to pixels
            padding: Total padding in pixels, split evenly between both sides
            canvas_factory: Builds an empty canvas from width and height
            workers: Render frames on this many threads when greater than one

        Raises:
            NoBoundingBoxError: If the symbol has no geometry at all
        """
        box = symbol.bounding_box()
        if box is None:
            raise NoBoundingBoxError()

        self.symbol = symbol
        self.scale = scale
        self.padding = padding
        self.canvas_factory = canvas_factory
        self.workers = workers
        self.bounding_box: BoundingBox = box

        self.width = math.floor(box.width * scale) + int(padding)
        self.height = math.floor(box.height * scale) + int(padding)
        self.transform = Transform(box.min_x, box.min_y, scale, padding / 2)

    @property
    def num_frames(self) -> int:
        return output_frame_count(self.symbol.layers)

    def render(self, max_frames: int | None = None) -> list[CanvasT]:
        """
        Render output frames in ascending order.

        Args:
            max_frames: Stop after this many frames

        Returns:
            One canvas per output frame

        Raises:
            RenderError: If any edge fails to resolve. No frames are returned.
        """
        count = self.num_frames
        if max_frames is not None:
            count = min(count, max_frames)

        if self.workers is None or self.workers <= 1 or count <= 1:
            frames = islice(iter_output_frames(self.symbol.layers), count)
            return [self._draw_frame(keyframes) for _, keyframes in frames]

        executor = ThreadPoolExecutor(max_workers=self.workers)
        try:
            # map() yields in submission order and re-raises the first failure
            return list(executor.map(self.render_frame, range(count)))
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def render_frame(self, index: int) -> CanvasT:
        """Render output frame ``index`` into a fresh canvas."""
        return self._draw_frame(select_keyframes(self.symbol.layers, index))

    def _draw_frame(self, keyframes: list[Frame]) -> CanvasT:
        canvas = self.canvas_factory(self.width, self.height)
        for keyframe in keyframes:
            self._draw_keyframe(canvas, keyframe)
        return canvas

    def _draw_keyframe(self, canvas: CanvasT, keyframe: Frame) -> None:
        for shape in keyframe.shapes:
            for edge in shape.edges:
                resolved = resolve_edge(edge, shape, self.scale, canvas.begin_path())
                if resolved is None:
                    continue

                path = resolved.path.transform(self.transform)
                if resolved.fill is not None:
                    canvas.fill(path, resolved.fill)
                if resolved.stroke is not None:
                    stroke = resolved.stroke
                    canvas.stroke(
                        path,
                        stroke.color,
                        stroke.width,
                        round_cap=stroke.round_cap,
                        round_join=stroke.round_join,
                    )


def render_symbol(
    symbol: Symbol,
    scale: float,
    padding: float,
    *,
    canvas_factory: Callable[[int, int], Canvas] = PillowCanvas,
    workers: int | None = None,
    max_frames: int | None = None,
) -> list[Canvas]:
    """Render ``symbol`` into an ordered list of canvases, or raise a RenderError."""
    renderer = SymbolRenderer(symbol, scale, padding, canvas_factory, workers=workers)
    return renderer.render(max_frames=max_frames)
