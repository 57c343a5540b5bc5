"""Tests for output providers."""

from pathlib import Path

from PIL import Image
import pytest
from fla_renderer.output import (
    GifOutputProvider,
    PngSequenceOutputProvider,
    WebPOutputProvider,
    resolve_output_provider,
    supported_output_formats,
)

def create_test_frame(color="red"):
    """Helper to create a test frame."""
    img = Image.new("RGBA", (10, 10), color)
    return img


def test_gif_provider_encodes_frames():
    """GifOutputProvider should encode frames to GIF format."""
    provider = GifOutputProvider("test_output.gif")
    frames = [create_test_frame("red"), create_test_frame("blue")]

    result = provider.encode(iter(frames), frame_duration=40)

    assert result.startswith(b"GIF89")
    assert len(result) > 0


def test_gif_provider_empty_frames():
    """GifOutputProvider should handle empty frame list."""
    provider = GifOutputProvider("test_output.gif")
    result = provider.encode(iter([]), frame_duration=40)

    # Empty result for empty frames
    assert result == b""


def test_gif_provider_snaps_alpha_to_one_bit():
    """Transparent GIF frames keep coverage as fully opaque or fully hidden pixels."""
    frame = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    frame.putpixel((0, 0), (255, 0, 0, 100))
    frame.putpixel((1, 1), (0, 255, 0, 200))

    prepared = GifOutputProvider("out.gif").prepare_frame(frame)

    assert prepared.mode == "RGBA"
    assert prepared.getpixel((0, 0)) == (0, 0, 0, 0)
    assert prepared.getpixel((1, 1)) == (0, 255, 0, 255)
    assert prepared.getpixel((3, 3)) == (0, 0, 0, 0)


def test_gif_provider_palettizes_flattened_frames():
    """Frames flattened onto a background are palettized before encoding."""
    frame = Image.new("RGB", (4, 4), (0x33, 0x66, 0x99))

    prepared = GifOutputProvider("out.gif").prepare_frame(frame)

    assert prepared.mode == "P"
    assert prepared.convert("RGB").getpixel((2, 2)) == (0x33, 0x66, 0x99)


def test_webp_provider_encodes_frames():
    """WebPOutputProvider should encode frames to WebP format."""
    provider = WebPOutputProvider("test_output.webp")
    frames = [create_test_frame("red"), create_test_frame("blue")]

    result = provider.encode(iter(frames), frame_duration=40)

    # WebP files start with RIFF....WEBP
    assert result.startswith(b"RIFF")
    assert b"WEBP" in result


def test_webp_provider_keeps_transparency(tmp_path: Path):
    """Unflattened frames keep their alpha channel in animated WebP."""
    path = tmp_path / "out.webp"
    transparent = Image.new("RGBA", (10, 10), (0, 0, 0, 0))

    WebPOutputProvider(str(path)).export(iter([transparent, create_test_frame("blue")]), 40)

    with Image.open(path) as image:
        assert image.n_frames == 2
        assert image.convert("RGBA").getpixel((5, 5))[3] == 0


def test_gif_provider_export_writes_file(tmp_path: Path):
    """Animated providers write a single file and report it."""
    path = tmp_path / "out.gif"
    provider = GifOutputProvider(str(path))

    written = provider.export(iter([create_test_frame(), create_test_frame("blue")]), 40)

    assert written == [path]
    with Image.open(path) as image:
        assert image.n_frames == 2


def test_png_sequence_provider_writes_numbered_frames(tmp_path: Path):
    """PngSequenceOutputProvider should write <index>.png files into a new directory."""
    directory = tmp_path / "frames" / "Symbol 1"
    provider = PngSequenceOutputProvider(str(directory))

    written = provider.export(iter([create_test_frame("red"), create_test_frame("blue")]), 40)

    assert written == [directory / "0.png", directory / "1.png"]
    with Image.open(directory / "1.png") as image:
        assert image.convert("RGBA").getpixel((0, 0)) == (0, 0, 255, 255)


def test_png_sequence_provider_requires_path():
    """An empty output path is rejected."""
    with pytest.raises(ValueError, match="Output path not set"):
        PngSequenceOutputProvider("").export(iter([]), 40)


def test_resolve_gif_provider():
    """resolve_output_provider should return GifOutputProvider for .gif files."""
    provider = resolve_output_provider("output.gif")

    assert isinstance(provider, GifOutputProvider)

def test_resolve_webp_provider():
    """resolve_output_provider should return WebPOutputProvider for .webp files."""
    provider = resolve_output_provider("output.webp")

    assert isinstance(provider, WebPOutputProvider)


def test_resolve_directory_provider():
    """A path without extension is a PNG frame directory."""
    provider = resolve_output_provider("frames/output")

    assert isinstance(provider, PngSequenceOutputProvider)


def test_resolve_png_suffix_provider():
    """A .png path also resolves to the PNG frame directory provider."""
    provider = resolve_output_provider("frames/output.PNG")

    assert isinstance(provider, PngSequenceOutputProvider)


def test_png_sequence_provider_strips_png_suffix(tmp_path: Path):
    """Frames for a .png path land in the folder named by its stem."""
    provider = PngSequenceOutputProvider(str(tmp_path / "ball.png"))

    written = provider.export(iter([create_test_frame()]), 40)

    assert written == [tmp_path / "ball" / "0.png"]
    assert not (tmp_path / "ball.png").exists()


def test_resolve_unsupported_format():
    """resolve_output_provider should raise ValueError for unsupported formats."""
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("output.mp4")


def test_resolve_case_insensitive():
    """resolve_output_provider should handle uppercase extensions."""
    provider = resolve_output_provider("output.GIF", )
    assert isinstance(provider, GifOutputProvider)

    provider = resolve_output_provider("output.WEBP", )
    assert isinstance(provider, WebPOutputProvider)


def test_supported_output_formats():
    assert supported_output_formats() == ("png", "gif", "webp")
