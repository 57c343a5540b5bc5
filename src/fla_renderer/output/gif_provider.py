"""GIF output provider."""

from PIL import Image

from .base import PillowSequenceOutputProvider

# Alpha at or above this is opaque in the 1-bit GIF transparency
ALPHA_THRESHOLD = 128


class GifOutputProvider(PillowSequenceOutputProvider):
    """
    Output provider for animated GIF.

    Frames flattened onto a background are palettized directly. Transparent
    frames keep their coverage: each pixel becomes either fully opaque or the
    single transparent palette entry, and every frame is cleared before the
    next one is drawn.
    """

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 2}

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        if frame.mode != "RGBA":
            return frame.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)

        coverage = frame.getchannel("A").point(lambda a: 255 if a >= ALPHA_THRESHOLD else 0)
        # Every hidden pixel shares one color so the palette has one transparent entry
        prepared = Image.new("RGBA", frame.size, (0, 0, 0, 0))
        prepared.paste(frame, mask=coverage)
        prepared.putalpha(coverage)
        return prepared
