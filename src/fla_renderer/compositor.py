"""Map output frame indices onto one keyframe per layer."""

from typing import TYPE_CHECKING, Iterator, Sequence

if TYPE_CHECKING:
    from .dom.timeline import Frame, Layer


def output_frame_count(layers: Sequence["Layer"]) -> int:
    """Number of output frames: the keyframe count of the longest layer."""
    return max((layer.num_frames for layer in layers), default=0)


def keyframe_for(layer: "Layer", output_index: int) -> "Frame | None":
    """
    Pick the keyframe a layer shows at ``output_index``.

    Shorter layers wrap around to their first keyframe instead of holding the
    last one. Layers without keyframes show nothing.
    """
    if not layer.frames:
        return None
    return layer.frames[output_index % len(layer.frames)]


def select_keyframes(layers: Sequence["Layer"], output_index: int) -> list["Frame"]:
    """Keyframes drawn at ``output_index``, in layer order."""
    frames = []
    for layer in layers:
        frame = keyframe_for(layer, output_index)
        if frame is not None:
            frames.append(frame)
    return frames


def iter_output_frames(layers: Sequence["Layer"]) -> Iterator[tuple[int, list["Frame"]]]:
    """Yield ``(output_index, keyframes)`` for every output frame."""
    for output_index in range(output_frame_count(layers)):
        yield output_index, select_keyframes(layers, output_index)
