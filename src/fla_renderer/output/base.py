"""Base class for output format providers."""

from io import BytesIO
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from PIL import Image


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output path.

        Args:
            path: Path to the output file or directory
        """
        self.path = path

    @abstractmethod
    def export(self, frames: Iterator[Image.Image], frame_duration: int) -> list[Path]:
        """
        Write frames to the output path.

        Args:
            frames: Rendered frames in playback order
            frame_duration: Frame duration in milliseconds

        Returns:
            Paths of the files written
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowSequenceOutputProvider(OutputProvider, ABC):
    """Template output provider for Pillow-supported animated image formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        """Adapt one rendered frame to what the format can store."""
        return frame

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        frame_list = [self.prepare_frame(frame) for frame in frames]
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_duration,
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    def export(self, frames: Iterator[Image.Image], frame_duration: int) -> list[Path]:
        self.write(self.encode(frames, frame_duration))
        return [Path(self.path)]

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}
