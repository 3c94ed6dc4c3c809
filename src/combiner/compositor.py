from __future__ import annotations

import logging
import numpy as np

from .errors import SizeMismatchError
from .loader import DecodedImage

logger = logging.getLogger(__name__)

PIXEL_BYTES = 4  # RGBA8


def alternate_pixels(buf_a: np.ndarray, buf_b: np.ndarray) -> np.ndarray:
    """Interleave two flat RGBA8 buffers pixel by pixel.

    The 4-byte block at byte offset i is taken from buf_a when i % 8 == 0 and
    from buf_b otherwise, i.e. even pixel indices come from A and odd ones
    from B. The count runs over the whole flattened buffer and does not
    restart per row, so on odd-width images the phase flips at each row.
    """
    a = np.ascontiguousarray(buf_a, dtype=np.uint8).reshape(-1)
    b = np.ascontiguousarray(buf_b, dtype=np.uint8).reshape(-1)
    if a.size != b.size:
        raise SizeMismatchError(f"Buffer lengths differ: {a.size} vs {b.size}")
    if a.size % PIXEL_BYTES:
        raise SizeMismatchError(f"Buffer length {a.size} is not a multiple of {PIXEL_BYTES}")

    pix_a = a.reshape(-1, PIXEL_BYTES)
    combined = b.reshape(-1, PIXEL_BYTES).copy()
    combined[0::2] = pix_a[0::2]
    return combined.reshape(-1)


class Compositor:
    """Flatten two equally sized images to RGBA8 and interleave their pixels."""

    @staticmethod
    def flatten(image: DecodedImage) -> np.ndarray:
        return image.to_rgba8().reshape(-1)

    def combine(self, image_1: DecodedImage, image_2: DecodedImage) -> np.ndarray:
        if image_1.size != image_2.size:
            raise SizeMismatchError(
                f"Images must share dimensions: {image_1.size} vs {image_2.size}"
            )
        combined = alternate_pixels(self.flatten(image_1), self.flatten(image_2))
        logger.debug(f"Combined {combined.size // PIXEL_BYTES} pixels")
        return combined
