from __future__ import annotations

import cv2
import matplotlib.pyplot as plt
import numpy as np
import pytest

from combiner import CombineConfig, ContainerFormat, Visualizer, read_file_bytes, write_file_bytes


def test_config_defaults():
    cfg = CombineConfig()
    assert cfg.interpolation == "auto"
    assert cfg.cv2_interpolation(shrinking=True) == cv2.INTER_AREA
    assert cfg.cv2_interpolation(shrinking=False) == cv2.INTER_LINEAR
    assert CombineConfig(interpolation="cubic").cv2_interpolation(shrinking=True) == cv2.INTER_CUBIC
    assert cfg.jpeg_quality == 95 and cfg.png_compression == 3
    assert cfg.show is False


@pytest.mark.parametrize("kwargs", [
    {"interpolation": "lanczos9"},
    {"jpeg_quality": -1},
    {"jpeg_quality": 101},
    {"png_compression": 10},
])
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        CombineConfig(**kwargs)


def test_file_bytes_roundtrip(tmp_path):
    path = tmp_path / "blob.bin"
    write_file_bytes(path, b"\x00\x01abc")
    assert read_file_bytes(path) == b"\x00\x01abc"


def test_container_format_metadata():
    assert ContainerFormat.PNG.extension == ".png"
    assert ContainerFormat.JPEG.extension == ".jpg"
    assert ContainerFormat.PNG.keeps_alpha
    assert not ContainerFormat.JPEG.keeps_alpha


def test_visualizer_returns_figure_without_showing():
    images = [np.zeros((2, 2, 4), dtype=np.uint8)] * 3
    fig = Visualizer.show_side_by_side(images, titles=["a", "b", "c"], show=False)
    try:
        assert len(fig.axes) == 3
        assert [ax.get_title() for ax in fig.axes] == ["a", "b", "c"]
    finally:
        plt.close(fig)
