from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

from .errors import CombineError
from .helpers import RESIZE_FILTERS, CombineConfig
from .pipeline import CombinePipeline

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="image-combiner",
        description="Combine two images by alternating their pixels",
    )
    g_io = p.add_argument_group("I/O")
    g_io.add_argument("image_1", type=str, help="Path to the first image")
    g_io.add_argument("image_2", type=str, help="Path to the second image (same format)")
    g_io.add_argument("output", type=str, help="Where to write the combined image")
    g_io.add_argument("--show", action="store_true", help="Display inputs and result")

    g_enc = p.add_argument_group("Resize / Encode")
    g_enc.add_argument("--interpolation", choices=RESIZE_FILTERS, default="auto")
    g_enc.add_argument("--jpeg-quality", type=int, default=95)
    g_enc.add_argument("--png-compression", type=int, default=3)

    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Args: image_1={args.image_1} image_2={args.image_2} output={args.output}")

    try:
        config = CombineConfig(
            interpolation=args.interpolation,
            jpeg_quality=args.jpeg_quality,
            png_compression=args.png_compression,
            show=args.show,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        CombinePipeline(config).run(args.image_1, args.image_2, args.output)
    except (CombineError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
