from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

import os


class ContainerFormat(Enum):
    """On-disk image encodings the combiner can read and write."""

    PNG = ("png", (".png",), True)
    JPEG = ("jpeg", (".jpg", ".jpeg", ".jpe"), False)
    BMP = ("bmp", (".bmp", ".dib"), False)
    TIFF = ("tiff", (".tif", ".tiff"), True)
    WEBP = ("webp", (".webp",), True)

    def __init__(self, label: str, extensions: Tuple[str, ...], keeps_alpha: bool) -> None:
        self.label = label
        self.extensions = extensions
        self.keeps_alpha = keeps_alpha

    @property
    def extension(self) -> str:
        """Canonical extension, as cv2.imencode expects it."""
        return self.extensions[0]


# (offset, magic) pairs; WEBP also needs the RIFF header checked
_SIGNATURES = (
    (ContainerFormat.PNG, 0, b"\x89PNG\r\n\x1a\n"),
    (ContainerFormat.JPEG, 0, b"\xff\xd8\xff"),
    (ContainerFormat.BMP, 0, b"BM"),
    (ContainerFormat.TIFF, 0, b"II*\x00"),
    (ContainerFormat.TIFF, 0, b"MM\x00*"),
    (ContainerFormat.WEBP, 8, b"WEBP"),
)


def format_from_extension(path: str | os.PathLike) -> Optional[ContainerFormat]:
    suffix = Path(path).suffix.lower()
    for fmt in ContainerFormat:
        if suffix in fmt.extensions:
            return fmt
    return None


def format_from_signature(data: bytes) -> Optional[ContainerFormat]:
    for fmt, offset, magic in _SIGNATURES:
        if fmt is ContainerFormat.WEBP and not data.startswith(b"RIFF"):
            continue
        if data[offset:offset + len(magic)] == magic:
            return fmt
    return None
