from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import logging
import numpy as np
import os

from .compositor import Compositor
from .errors import DifferentFormatsError
from .formats import ContainerFormat
from .helpers import CombineConfig
from .loader import ImageLoader
from .output import ImageWriter, OutputImage
from .reconcile import SizeReconciler
from .viz import Visualizer

logger = logging.getLogger(__name__)


@dataclass
class CombineResult:
    output_path: str
    width: int
    height: int
    fmt: ContainerFormat
    data: np.ndarray        # combined RGBA8 bytes, row-major


class CombinePipeline:
    """load -> check formats -> reconcile sizes -> interleave -> write."""

    def __init__(self, config: Optional[CombineConfig] = None) -> None:
        self.config = config or CombineConfig()
        self.loader = ImageLoader()
        self.reconciler = SizeReconciler(self.config)
        self.compositor = Compositor()
        self.writer = ImageWriter(self.config)
        self.viz = Visualizer()

    def run(
        self,
        path_1: str | os.PathLike,
        path_2: str | os.PathLike,
        output_path: str | os.PathLike,
    ) -> CombineResult:
        loaded_1 = self.loader.load(path_1)
        loaded_2 = self.loader.load(path_2)

        # fail before any pixel work
        if loaded_1.fmt is not loaded_2.fmt:
            raise DifferentFormatsError(loaded_1.fmt, loaded_2.fmt)

        image_1, image_2 = self.reconciler.reconcile(loaded_1.image, loaded_2.image)
        output = OutputImage(image_1.width, image_1.height, str(output_path))

        combined = self.compositor.combine(image_1, image_2)
        output.set_data(combined)

        if self.config.show:
            self.viz.show_side_by_side(
                [image_1.to_rgba8(), image_2.to_rgba8(), output.to_rgba()],
                titles=["Image 1 (reconciled)", "Image 2 (reconciled)", "Combined"],
            )

        self.writer.write(output, loaded_1.fmt)
        return CombineResult(
            output_path=output.path,
            width=output.width,
            height=output.height,
            fmt=loaded_1.fmt,
            data=output.data,
        )


def combine_images(
    path_1: str | os.PathLike,
    path_2: str | os.PathLike,
    output_path: str | os.PathLike,
    config: Optional[CombineConfig] = None,
) -> CombineResult:
    return CombinePipeline(config).run(path_1, path_2, output_path)
