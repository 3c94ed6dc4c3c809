from __future__ import annotations

import os

os.environ.setdefault("MPLBACKEND", "Agg")

from pathlib import Path

import cv2
import numpy as np
import pytest


def solid_bgra(width: int, height: int, rgba) -> np.ndarray:
    """width x height image filled with one RGBA colour, in OpenCV's BGRA order."""
    r, g, b, a = rgba
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[:] = (b, g, r, a)
    return img


@pytest.fixture
def write_image(tmp_path: Path):
    def _write(name: str, pixels: np.ndarray) -> Path:
        path = tmp_path / name
        assert cv2.imwrite(str(path), pixels)
        return path
    return _write
