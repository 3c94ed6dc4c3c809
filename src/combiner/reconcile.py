from __future__ import annotations
from typing import Optional, Tuple

import cv2
import logging

from .helpers import CombineConfig
from .loader import DecodedImage

logger = logging.getLogger(__name__)

Dimensions = Tuple[int, int]  # (width, height)


def smallest_dimensions(dim_1: Dimensions, dim_2: Dimensions) -> Dimensions:
    """Dimensions with the smaller pixel area; ties go to dim_1."""
    if dim_2[0] * dim_2[1] < dim_1[0] * dim_1[1]:
        return dim_2
    return dim_1


class SizeReconciler:
    """Resize the larger of two images to the exact size of the smaller one."""

    def __init__(self, config: Optional[CombineConfig] = None) -> None:
        self.config = config or CombineConfig()

    def resize_exact(self, image: DecodedImage, width: int, height: int) -> DecodedImage:
        shrinking = width < image.width or height < image.height
        # cv2.resize takes (width, height); aspect ratio is not kept
        pixels = cv2.resize(
            image.pixels, (width, height),
            interpolation=self.config.cv2_interpolation(shrinking),
        )
        return DecodedImage(pixels=pixels, source=image.source)

    def reconcile(
        self, image_1: DecodedImage, image_2: DecodedImage
    ) -> Tuple[DecodedImage, DecodedImage]:
        width, height = smallest_dimensions(image_1.size, image_2.size)
        logger.info(f"width: {width}, height: {height}")

        if image_1.size != (width, height):
            image_1 = self.resize_exact(image_1, width, height)
        elif image_2.size != (width, height):
            image_2 = self.resize_exact(image_2, width, height)
        return image_1, image_2
