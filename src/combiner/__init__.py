from .helpers import CombineConfig, read_file_bytes, write_file_bytes
from .formats import ContainerFormat, format_from_extension, format_from_signature
from .errors import (
    CombineError, LoadError, FormatUnknownError, DecodeError, DifferentFormatsError,
    SizeMismatchError, OutputError, BufferTooSmall, OutputStateError, EncodeError,
)
from .loader import DecodedImage, LoadedImage, ImageLoader, sniff_format, decode_image_bytes
from .reconcile import SizeReconciler, smallest_dimensions
from .compositor import Compositor, alternate_pixels
from .output import OutputImage, OutputState, ImageWriter
from .pipeline import CombinePipeline, CombineResult, combine_images
from .viz import Visualizer

__all__ = [
    "CombineConfig", "read_file_bytes", "write_file_bytes",
    "ContainerFormat", "format_from_extension", "format_from_signature",
    "CombineError", "LoadError", "FormatUnknownError", "DecodeError", "DifferentFormatsError",
    "SizeMismatchError", "OutputError", "BufferTooSmall", "OutputStateError", "EncodeError",
    "DecodedImage", "LoadedImage", "ImageLoader", "sniff_format", "decode_image_bytes",
    "SizeReconciler", "smallest_dimensions",
    "Compositor", "alternate_pixels",
    "OutputImage", "OutputState", "ImageWriter",
    "CombinePipeline", "CombineResult", "combine_images",
    "Visualizer",
]
