"""WebP output provider."""

from .base import PillowSequenceOutputProvider


class WebPOutputProvider(PillowSequenceOutputProvider):
    """
    Output provider for animated WebP.

    Frames are stored lossless with their alpha channel, on a transparent
    animation canvas, so unflattened symbols stay composable.
    """

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {
            "lossless": True,
            "quality": 100,
            "method": 4,
            "exact": True,
            "background": (0, 0, 0, 0),
        }
