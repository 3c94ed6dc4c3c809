from __future__ import annotations
from enum import Enum
from typing import List, Optional

import cv2
import logging
import numpy as np

from .errors import BufferTooSmall, EncodeError, OutputStateError
from .formats import ContainerFormat
from .helpers import CombineConfig, write_file_bytes

logger = logging.getLogger(__name__)


class OutputState(Enum):
    ALLOCATED = "allocated"
    POPULATED = "populated"


class OutputImage:
    """Destination record: size, target path and an RGBA8 byte buffer.

    The buffer starts zeroed (ALLOCATED) and is replaced exactly once by
    set_data (POPULATED).
    """

    def __init__(self, width: int, height: int, path: str) -> None:
        self.width = int(width)
        self.height = int(height)
        self.path = path
        self.capacity = self.width * self.height * 4
        self.data = np.zeros(self.capacity, dtype=np.uint8)
        self.state = OutputState.ALLOCATED

    @property
    def populated(self) -> bool:
        return self.state is OutputState.POPULATED

    def set_data(self, data: np.ndarray) -> None:
        if self.populated:
            raise OutputStateError(f"Output for {self.path} is already populated")
        data = np.asarray(data, dtype=np.uint8).reshape(-1)
        # assertion: reconciliation guarantees the sizes match
        if data.size > self.capacity:
            raise BufferTooSmall(data.size, self.capacity)
        self.data = data
        self.state = OutputState.POPULATED

    def to_rgba(self) -> np.ndarray:
        """Buffer as rows x width x 4; incomplete trailing rows are dropped."""
        row_bytes = self.width * 4
        rows = self.data.size // row_bytes if row_bytes else 0
        return self.data[:rows * row_bytes].reshape(rows, self.width, 4)


class ImageWriter:
    """Encode an OutputImage in a given container format and write it to disk."""

    def __init__(self, config: Optional[CombineConfig] = None) -> None:
        self.config = config or CombineConfig()

    def encode_params(self, fmt: ContainerFormat) -> List[int]:
        if fmt is ContainerFormat.JPEG:
            return [cv2.IMWRITE_JPEG_QUALITY, self.config.jpeg_quality]
        if fmt is ContainerFormat.PNG:
            return [cv2.IMWRITE_PNG_COMPRESSION, self.config.png_compression]
        return []

    def encode(self, output: OutputImage, fmt: ContainerFormat) -> bytes:
        if not output.populated:
            raise OutputStateError(f"Output for {output.path} has no data yet")

        rgba = output.to_rgba()
        if rgba.shape[0] == 0:
            raise EncodeError(f"No complete rows to encode for {output.path}")
        if rgba.shape[0] < output.height:
            logger.warning(
                f"Output data covers {rgba.shape[0]} of {output.height} rows; image will be truncated"
            )

        code = cv2.COLOR_RGBA2BGRA if fmt.keeps_alpha else cv2.COLOR_RGBA2BGR
        pixels = cv2.cvtColor(np.ascontiguousarray(rgba), code)
        try:
            ok, buf = cv2.imencode(fmt.extension, pixels, self.encode_params(fmt))
        except cv2.error as e:
            raise EncodeError(f"Could not encode {output.path} as {fmt.name}: {e}") from e
        if not ok:
            raise EncodeError(f"Could not encode {output.path} as {fmt.name}")
        return buf.tobytes()

    def write(self, output: OutputImage, fmt: ContainerFormat) -> None:
        data = self.encode(output, fmt)
        write_file_bytes(output.path, data)
        logger.info(f"Wrote {output.path} ({fmt.name}, {output.width}x{output.height})")
