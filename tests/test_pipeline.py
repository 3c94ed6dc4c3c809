"""End-to-end runs of the combine pipeline."""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest

from combiner import (
    CombineConfig, CombinePipeline, Compositor, ContainerFormat, DifferentFormatsError,
    SizeReconciler, Visualizer, combine_images,
)
from conftest import solid_bgra

RED = [255, 0, 0, 255]
GREEN = [0, 255, 0, 255]


def test_red_green_two_by_two(write_image, tmp_path: Path):
    a = write_image("a.png", solid_bgra(2, 2, RED))
    b = write_image("b.png", solid_bgra(2, 2, GREEN))
    out_path = tmp_path / "out.png"

    result = combine_images(a, b, out_path)

    expected = RED + GREEN + RED + GREEN
    assert result.data.tolist() == expected
    assert (result.width, result.height) == (2, 2)
    assert result.fmt is ContainerFormat.PNG

    back = cv2.cvtColor(cv2.imread(str(out_path), cv2.IMREAD_UNCHANGED), cv2.COLOR_BGRA2RGBA)
    assert back.reshape(-1).tolist() == expected


def test_larger_first_image_is_downsized(write_image, tmp_path: Path):
    a = write_image("a.png", solid_bgra(4, 4, RED))
    b = write_image("b.png", solid_bgra(2, 2, GREEN))
    result = combine_images(a, b, tmp_path / "out.png")

    assert (result.width, result.height) == (2, 2)
    assert cv2.imread(str(tmp_path / "out.png"), cv2.IMREAD_UNCHANGED).shape == (2, 2, 4)
    assert result.data.tolist() == RED + GREEN + RED + GREEN


def test_smaller_first_image_sets_output_size(write_image, tmp_path: Path):
    a = write_image("a.png", solid_bgra(3, 1, RED))
    b = write_image("b.png", solid_bgra(6, 6, GREEN))
    result = combine_images(a, b, tmp_path / "out.png")
    assert (result.width, result.height) == (3, 1)


def test_different_formats_abort_before_pixel_work(write_image, tmp_path: Path, monkeypatch):
    calls = []
    monkeypatch.setattr(SizeReconciler, "reconcile", lambda *a: calls.append("reconcile"))
    monkeypatch.setattr(Compositor, "combine", lambda *a: calls.append("combine"))

    a = write_image("a.png", solid_bgra(2, 2, RED))
    b = write_image("b.jpg", np.zeros((2, 2, 3), dtype=np.uint8))
    out_path = tmp_path / "out.png"

    with pytest.raises(DifferentFormatsError) as exc:
        combine_images(a, b, out_path)
    assert exc.value.fmt_1 is ContainerFormat.PNG
    assert exc.value.fmt_2 is ContainerFormat.JPEG
    assert calls == []
    assert not out_path.exists()


def test_bmp_inputs_write_bmp(write_image, tmp_path: Path):
    a = write_image("a.bmp", np.full((2, 2, 3), 50, dtype=np.uint8))
    b = write_image("b.bmp", np.full((2, 2, 3), 150, dtype=np.uint8))
    out_path = tmp_path / "out.bmp"

    result = combine_images(a, b, out_path)

    assert result.fmt is ContainerFormat.BMP
    assert out_path.read_bytes().startswith(b"BM")
    back = cv2.imread(str(out_path), cv2.IMREAD_UNCHANGED)
    assert back[:, :, 0].tolist() == [[50, 150], [50, 150]]


def test_missing_input_leaves_no_output(write_image, tmp_path: Path):
    a = write_image("a.png", solid_bgra(2, 2, RED))
    out_path = tmp_path / "out.png"
    with pytest.raises(OSError):
        combine_images(a, tmp_path / "missing.png", out_path)
    assert not out_path.exists()


def test_show_previews_reconciled_images(write_image, tmp_path: Path, monkeypatch):
    shown = []
    monkeypatch.setattr(
        Visualizer, "show_side_by_side",
        staticmethod(lambda images, titles=None, **kw: shown.append([i.shape for i in images])),
    )
    a = write_image("a.png", solid_bgra(4, 2, RED))
    b = write_image("b.png", solid_bgra(4, 4, GREEN))

    CombinePipeline(CombineConfig(show=True)).run(a, b, tmp_path / "out.png")
    assert shown == [[(2, 4, 4), (2, 4, 4), (2, 4, 4)]]
