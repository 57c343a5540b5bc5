"""PNG frame sequence output provider."""

from pathlib import Path
from typing import Iterator

from PIL import Image

from .base import OutputProvider


class PngSequenceOutputProvider(OutputProvider):
    """
    Writes each frame as ``<index>.png`` inside the output directory.

    A ``.png`` suffix on the path names the directory, so ``frames.png``
    writes ``frames/0.png``, ``frames/1.png`` and so on.
    """

    def export(self, frames: Iterator[Image.Image], frame_duration: int) -> list[Path]:
        if not self.path:
            raise ValueError("Output path not set")

        directory = Path(self.path)
        if directory.suffix.lower() == ".png":
            directory = directory.with_suffix("")
        directory.mkdir(parents=True, exist_ok=True)

        written = []
        for index, frame in enumerate(frames):
            frame_path = directory / f"{index}.png"
            frame.save(frame_path, format="png")
            written.append(frame_path)
        return written
