from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

import cv2
import os


# Config dataclasses

INTERPOLATIONS: Dict[str, int] = {
    "linear": cv2.INTER_LINEAR,
    "area": cv2.INTER_AREA,
    "cubic": cv2.INTER_CUBIC,
    "nearest": cv2.INTER_NEAREST,
}


# "auto": INTER_AREA when any axis shrinks, INTER_LINEAR otherwise
RESIZE_FILTERS = ("auto",) + tuple(sorted(INTERPOLATIONS))


@dataclass
class CombineConfig:
    interpolation: str = "auto"     # one of RESIZE_FILTERS
    jpeg_quality: int = 95          # 0..100
    png_compression: int = 3        # 0..9, OpenCV default
    show: bool = False              # preview inputs + result with matplotlib

    def __post_init__(self) -> None:
        if self.interpolation not in RESIZE_FILTERS:
            raise ValueError(
                f"interpolation must be one of {list(RESIZE_FILTERS)}, got {self.interpolation!r}"
            )
        if not 0 <= self.jpeg_quality <= 100:
            raise ValueError("jpeg_quality must be in [0, 100]")
        if not 0 <= self.png_compression <= 9:
            raise ValueError("png_compression must be in [0, 9]")

    def cv2_interpolation(self, shrinking: bool = True) -> int:
        if self.interpolation == "auto":
            return cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR
        return INTERPOLATIONS[self.interpolation]


# I/O helpers

def read_file_bytes(path: str | os.PathLike) -> bytes:
    """Read a whole file. Raises OSError if it cannot be opened or read."""
    with open(path, "rb") as fh:
        return fh.read()


def write_file_bytes(path: str | os.PathLike, data: bytes) -> None:
    with open(path, "wb") as fh:
        fh.write(data)
