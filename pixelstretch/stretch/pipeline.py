"""
Stretch orchestrator.

``stretch_image`` chains the whole transform:

    clamp params -> index sequence -> rotate to canonical -> build
    -> rotate back -> crop to original size

and is total for valid images: whatever happens inside, the caller gets a
buffer with the dimensions of the input. Internal failures are logged and the
input is returned unchanged (as a copy). Inputs that are not images at all
(wrong type, wrong array shape, unknown keyword) raise before the transform
starts.

Author: B.G.
"""

import logging

import numpy as np

from ..core import PixelBuffer, StretchParams
from .builder import build_stretched
from .crop import crop_to_size
from .index_sequence import generate_index_sequence
from .orientation import from_canonical, to_canonical

logger = logging.getLogger(__name__)


def _as_buffer(image):
    if isinstance(image, PixelBuffer):
        return image
    if isinstance(image, np.ndarray):
        return PixelBuffer.from_array(image)
    raise TypeError("image must be a PixelBuffer or an (h, w, 4) numpy array")


def _run(source: PixelBuffer, params: StretchParams) -> PixelBuffer:
    params = params.normalized(source.width, source.height)
    index_sequence = generate_index_sequence(params.intensity)
    logger.debug(
        "stretch_image: %dx%d intensity=%d start=%d direction=%s (%d runs)",
        source.width,
        source.height,
        params.intensity,
        params.starting_pixel,
        params.direction.value,
        len(index_sequence),
    )

    rotated, offset = to_canonical(source, params.direction, params.starting_pixel)
    # No pair of rows left below the offset (includes 1-pixel-thin images)
    if offset >= rotated.height - 1:
        logger.debug("stretch_image: offset %d at or past last row, nothing to do", offset)
        return source.copy()

    stretched = build_stretched(index_sequence, rotated, offset)
    restored = from_canonical(stretched, params.direction)
    return crop_to_size(restored, source.width, source.height, params.direction)


def stretch_image(image, params: StretchParams | None = None, **overrides) -> PixelBuffer:
    """
    Apply the directional stretch effect to an image.

    Args:
        image: PixelBuffer or (height, width, 4) uint8 numpy array
        params: Stretch parameters (default: StretchParams())
        **overrides: Field overrides applied on top of params
                     (intensity, starting_pixel, direction)

    Returns:
        PixelBuffer: Stretched image with the same width and height as the input.
        On any internal failure, an unmodified copy of the input.

    Raises:
        TypeError: If image is neither a PixelBuffer nor a numpy array, or an
                   unknown keyword override is given
        ValueError: If a numpy image is not shaped (height, width, 4)

    Only these input checks raise; they run before the fail-safe guard.

    Example:
        import taichi as ti
        import pixelstretch as ps

        ti.init(arch=ti.cpu)
        img = ps.io.load_image("photo.png")
        out = ps.stretch_image(img, intensity=5, starting_pixel=120, direction="up")
        ps.io.save_image(out, "stretched_photo.png")
    """
    source = _as_buffer(image)
    if params is None:
        params = StretchParams()
    if overrides:
        params = StretchParams(
            intensity=overrides.pop("intensity", params.intensity),
            starting_pixel=overrides.pop("starting_pixel", params.starting_pixel),
            direction=overrides.pop("direction", params.direction),
        )
        if overrides:
            raise TypeError(f"Unexpected parameters: {sorted(overrides)}")

    if source.empty:
        return source.copy()

    try:
        return _run(source, params)
    except Exception:
        logger.warning("stretch_image failed, returning the original image", exc_info=True)
        return source.copy()


__all__ = ["stretch_image"]
