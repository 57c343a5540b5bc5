"""Output providers for rendered frame sequences."""

from dataclasses import dataclass
from pathlib import Path

from .base import OutputProvider, PillowSequenceOutputProvider
from .gif_provider import GifOutputProvider
from .png_sequence_provider import PngSequenceOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extensions: tuple[str, ...]
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "png": OutputFormatSpec(
        extensions=("", ".png"),
        provider_class=PngSequenceOutputProvider,
    ),
    "gif": OutputFormatSpec(
        extensions=(".gif",),
        provider_class=GifOutputProvider,
    ),
    "webp": OutputFormatSpec(
        extensions=(".webp",),
        provider_class=WebPOutputProvider,
    ),
}


def resolve_output_provider(path: str) -> OutputProvider:
    """
    Resolve the appropriate output provider based on the path's extension.

    A path without extension, or ending in ``.png``, is a directory of PNG
    frames.

    Args:
        path: Output path (extension determines format)

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If the extension is not supported
    """
    ext = Path(path).suffix.lower()
    spec = _output_spec_from_extension(ext)
    return spec.provider_class(path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def _output_spec_from_extension(ext: str) -> OutputFormatSpec:
    for spec in _OUTPUT_FORMATS.values():
        if ext in spec.extensions:
            return spec
    supported = ", ".join(
        extension for spec in _OUTPUT_FORMATS.values() for extension in spec.extensions if extension
    )
    raise ValueError(
        f"Unsupported output format: {ext}. "
        f"Supported formats: {supported}, or a directory for PNG frames"
    )


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "PillowSequenceOutputProvider",
    "GifOutputProvider",
    "PngSequenceOutputProvider",
    "WebPOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
