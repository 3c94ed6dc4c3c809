from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .formats import ContainerFormat


class CombineError(Exception):
    """Base class for failures raised by the combiner pipeline."""


# Loader stage

class LoadError(CombineError):
    pass


class FormatUnknownError(LoadError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Could not determine image format: {path}")
        self.path = path


class DecodeError(LoadError):
    pass


# Between stages

class DifferentFormatsError(CombineError):
    def __init__(self, fmt_1: "ContainerFormat", fmt_2: "ContainerFormat") -> None:
        super().__init__(
            f"Images have different formats: {fmt_1.name} vs {fmt_2.name}"
        )
        self.fmt_1 = fmt_1
        self.fmt_2 = fmt_2


class SizeMismatchError(CombineError, ValueError):
    """Pixel buffers handed to the compositor do not line up."""


# Output stage

class OutputError(CombineError):
    pass


class BufferTooSmall(OutputError):
    """Composited data is larger than the output buffer (internal invariant)."""

    def __init__(self, length: int, capacity: int) -> None:
        super().__init__(
            f"Output buffer too small: got {length} bytes, capacity is {capacity}"
        )
        self.length = length
        self.capacity = capacity


class OutputStateError(OutputError):
    pass


class EncodeError(OutputError):
    pass
