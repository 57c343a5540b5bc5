"""Shared render-and-export orchestration used by the CLI."""

from pathlib import Path
from typing import Iterator

from PIL import Image

from .fla import Fla
from .output import resolve_output_provider
from .output.base import OutputProvider
from .render.canvas import PillowCanvas


def build_frame_stream(
    canvases: list[PillowCanvas], background: str | None = None
) -> Iterator[Image.Image]:
    """Convert rendered canvases to Pillow images, optionally flattened onto a background."""
    for canvas in canvases:
        yield canvas.to_image(background)


def export_symbol(
    fla: Fla,
    symbol_name: str,
    output_path: str,
    *,
    scale: float,
    padding: float,
    workers: int | None = None,
    max_frames: int | None = None,
    background: str | None = None,
    provider: OutputProvider | None = None,
) -> list[Path]:
    """
    Render a library symbol and write it with the provider matching ``output_path``.

    Rendering finishes before anything is written, so a failed render leaves
    no partial output behind.

    Returns:
        Paths of the files written
    """
    target_provider = provider or resolve_output_provider(output_path)
    canvases = fla.render_symbol(
        symbol_name,
        scale,
        padding,
        canvas_factory=PillowCanvas,
        workers=workers,
        max_frames=max_frames,
    )
    frame_stream = build_frame_stream(canvases, background)  # type: ignore[arg-type]
    return target_provider.export(frame_stream, frame_duration=fla.document.frame_duration)
