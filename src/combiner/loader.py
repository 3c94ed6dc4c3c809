from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import cv2
import logging
import numpy as np
import os

from .errors import DecodeError, FormatUnknownError
from .formats import ContainerFormat, format_from_extension, format_from_signature
from .helpers import read_file_bytes

logger = logging.getLogger(__name__)


@dataclass
class DecodedImage:
    """Decoded bitmap in whatever layout OpenCV produced.

    pixels is HxW (gray), HxWx3 (BGR) or HxWx4 (BGRA); dtype uint8, uint16
    or float32. Use to_rgba8() to get a uniform RGBA uint8 view.
    """
    pixels: np.ndarray
    source: Optional[str] = None

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    def to_rgba8(self) -> np.ndarray:
        """HxWx4 uint8 RGBA copy of the image."""
        px = _to_uint8(self.pixels)
        if px.ndim == 3 and px.shape[2] == 1:
            px = np.ascontiguousarray(px[:, :, 0])

        if px.ndim == 2:
            return cv2.cvtColor(px, cv2.COLOR_GRAY2RGBA)
        if px.shape[2] == 3:
            return cv2.cvtColor(px, cv2.COLOR_BGR2RGBA)
        if px.shape[2] == 4:
            return cv2.cvtColor(px, cv2.COLOR_BGRA2RGBA)
        raise ValueError(f"Unsupported channel count: {px.shape[2]}")


def _to_uint8(px: np.ndarray) -> np.ndarray:
    if px.dtype == np.uint8:
        return px
    if px.dtype == np.uint16:
        # 65535 -> 255 with rounding
        return np.rint(px.astype(np.float64) / 257.0).astype(np.uint8)
    if np.issubdtype(px.dtype, np.floating):
        return np.rint(np.clip(px, 0.0, 1.0) * 255.0).astype(np.uint8)
    raise ValueError(f"Unsupported pixel dtype: {px.dtype}")


def _layout_supported(px: np.ndarray) -> bool:
    if px.dtype not in (np.uint8, np.uint16) and not np.issubdtype(px.dtype, np.floating):
        return False
    return px.ndim == 2 or (px.ndim == 3 and px.shape[2] in (1, 3, 4))


@dataclass
class LoadedImage:
    image: DecodedImage
    fmt: ContainerFormat


def sniff_format(data: bytes, path: str | os.PathLike | None = None) -> ContainerFormat:
    """Extension first, content signature as fallback."""
    fmt = format_from_extension(path) if path is not None else None
    if fmt is None:
        fmt = format_from_signature(data)
    if fmt is None:
        raise FormatUnknownError(str(path) if path is not None else "<bytes>")
    return fmt


def decode_image_bytes(data: bytes, fmt: ContainerFormat, source: Optional[str] = None) -> DecodedImage:
    """Decode data as fmt. Raises DecodeError if it is not a valid image of that format."""
    label = source or "<bytes>"
    actual = format_from_signature(data)
    if actual is not None and actual is not fmt:
        raise DecodeError(f"{label} is not a valid {fmt.name} image (looks like {actual.name})")

    buf = np.frombuffer(data, dtype=np.uint8)
    try:
        pixels = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(f"Could not decode {label} as {fmt.name}: {e}") from e
    if pixels is None:
        raise DecodeError(f"Could not decode {label} as {fmt.name}")
    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise DecodeError(f"{label} has zero width or height")
    if not _layout_supported(pixels):
        raise DecodeError(
            f"{label} has an unsupported pixel layout: shape={pixels.shape} dtype={pixels.dtype}"
        )
    return DecodedImage(pixels=pixels, source=source)


class ImageLoader:
    """Open a file, sniff its container format and decode it."""

    def load(self, path: str | os.PathLike) -> LoadedImage:
        data = read_file_bytes(path)
        fmt = sniff_format(data, path)
        image = decode_image_bytes(data, fmt, source=str(path))
        logger.debug(
            f"Loaded {path}: {fmt.name} {image.width}x{image.height} "
            f"channels={image.channels} dtype={image.pixels.dtype}"
        )
        return LoadedImage(image=image, fmt=fmt)
