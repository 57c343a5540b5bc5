"""Raster canvases the renderer draws into."""

from typing import Protocol

from PIL import Image, ImageChops, ImageColor, ImageDraw

from ..constants import CURVE_SEGMENTS
from ..dom.shape import RGB
from .path import Path, PathBuilder


class Canvas(Protocol):
    """Drawing capability the renderer needs from a raster backend."""

    width: int
    height: int

    def begin_path(self) -> PathBuilder: ...

    def fill(self, path: Path, color: RGB) -> None: ...

    def stroke(
        self,
        path: Path,
        color: RGB,
        width: float,
        round_cap: bool = True,
        round_join: bool = True,
    ) -> None: ...


class PillowCanvas:
    """Canvas backed by a transparent RGBA Pillow image."""

    def __init__(self, width: int, height: int, curve_segments: int = CURVE_SEGMENTS):
        """
        Initialize an empty canvas.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            curve_segments: Line pieces used to approximate each quadratic curve
        """
        self.width = width
        self.height = height
        self.curve_segments = curve_segments
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def begin_path(self) -> PathBuilder:
        return PathBuilder()

    def fill(self, path: Path, color: RGB) -> None:
        """
        Fill the path opaquely with ``color``.

        Subpaths are combined with the even-odd rule, so a subpath inside
        another one cuts a hole.
        """
        coverage: Image.Image | None = None
        for subpath in path.subpaths:
            points = subpath.flatten(self.curve_segments)
            if len(points) < 3:
                continue
            polygon = Image.new("1", self.image.size, 0)
            ImageDraw.Draw(polygon).polygon(points, fill=255)
            coverage = polygon if coverage is None else ImageChops.logical_xor(coverage, polygon)

        if coverage is not None:
            self.image.paste((*color, 255), mask=coverage)

    def stroke(
        self,
        path: Path,
        color: RGB,
        width: float,
        round_cap: bool = True,
        round_join: bool = True,
    ) -> None:
        """Stroke every subpath, approximating round caps with discs."""
        fill = (*color, 255)
        line_width = max(1, round(width))
        radius = width / 2
        for subpath in path.subpaths:
            points = subpath.flatten(self.curve_segments)
            if len(points) >= 2:
                self._draw.line(
                    points,
                    fill=fill,
                    width=line_width,
                    joint="curve" if round_join else None,
                )
            if round_cap:
                for x, y in {points[0], points[-1]}:
                    self._draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=fill)

    def to_image(self, background: str | None = None) -> Image.Image:
        """
        Return the canvas as a Pillow image.

        Args:
            background: Optional color to flatten the transparent canvas onto

        Returns:
            RGBA image, or RGB when a background is given
        """
        if background is None:
            return self.image.copy()
        base = Image.new("RGBA", self.image.size, (*ImageColor.getrgb(background)[:3], 255))
        return Image.alpha_composite(base, self.image).convert("RGB")
