"""
pdf_compare.equality

Two-tier PDF equality check.

A generated PDF rarely matches its reference byte for byte, so equality is
decided in two steps:

1. structural: the serialized documents are compared line by line, ignoring
   environment-specific lines (see :mod:`pdf_compare.policy`);
2. visual: if that fails, every page is rendered and the images compared.

The structural check is cheap and runs first; rendering only happens when it
reports a difference.
"""
from __future__ import annotations

import argparse
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from utils.env import Settings, load_settings
from utils.streams import Source, read_all

from .policy import DEFAULT_POLICY, IgnorePolicy
from .structural import compare_structural
from .visual import compare_visual

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def are_contents_equal(
    actual: Optional[Source],
    expected: Optional[Source],
    policy: Optional[IgnorePolicy] = None,
) -> bool:
    """Return True if the serialized contents are equal.

    Lines starting with /Producer, /Creator, /CreationDate, /DocChecksum or
    /Root (also as the first key of a ``<<`` dictionary) and comment lines
    starting with ``%`` are ignored. Lines starting with /ID or ``<</ID``
    are ignored together with the following lines up to one containing
    ``]``. Pass ``policy`` to use other prefixes.

    Two ``None`` values are not equal.
    """
    return compare_structural(
        read_all(actual), read_all(expected), policy or DEFAULT_POLICY
    )


def are_images_same(
    actual: Optional[Source],
    expected: Optional[Source],
    zoom: Optional[float] = None,
    strict: Optional[bool] = None,
) -> bool:
    """Return True if both documents render to identical page images.

    ``zoom`` and ``strict`` default to the values from :func:`get_settings`.
    """
    if actual is None or expected is None:
        return False
    if zoom is None or strict is None:
        settings = get_settings()
        zoom = settings.render_zoom if zoom is None else zoom
        strict = settings.strict_render if strict is None else strict
    return compare_visual(read_all(actual), read_all(expected), zoom=zoom, strict=strict)


def are_equal(
    actual: Optional[Source],
    expected: Optional[Source],
    zoom: Optional[float] = None,
    strict: Optional[bool] = None,
) -> bool:
    """Return True if the contents are equal or, failing that, the images are.

    The contents check always runs first; ``zoom`` and ``strict`` only apply
    to the image fallback.
    """
    actual_bytes = read_all(actual)
    expected_bytes = read_all(expected)
    if compare_structural(actual_bytes, expected_bytes, DEFAULT_POLICY):
        return True
    logger.info("Contents differ, falling back to rendered page comparison")
    return are_images_same(actual_bytes, expected_bytes, zoom=zoom, strict=strict)


def are_contents_similar_size(
    actual: Optional[Source],
    expected: Optional[Source],
    tolerance: float,
) -> bool:
    """Return True if expected's size is within ``tolerance`` of actual's.

    ``tolerance`` is a fraction in [0, 1] of the actual size: 0 requires the
    same size, 1 accepts any expected size strictly between 0 and twice the
    actual size. Two ``None`` values are not similar.

    Raises:
        ValueError: if ``tolerance`` is outside [0, 1].
    """
    if not 0 <= tolerance <= 1:
        raise ValueError(f"The tolerance ({tolerance}) must be between 0 and 1")
    if actual is None or expected is None:
        return False
    actual_size = len(read_all(actual))
    expected_size = len(read_all(expected))
    if tolerance == 0:
        return actual_size == expected_size
    return (1.0 - tolerance) * actual_size < expected_size < (1.0 + tolerance) * actual_size


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare a generated PDF with a reference PDF")
    parser.add_argument("actual", help="Path to the generated PDF")
    parser.add_argument("expected", help="Path to the reference PDF")
    parser.add_argument(
        "--mode",
        choices=["equal", "contents", "images", "size"],
        default="equal",
        help="Check to run (default: equal = contents, then images)",
    )
    parser.add_argument("--tolerance", type=float, default=0.1, help="Size tolerance for --mode size")
    parser.add_argument("--zoom", type=float, default=None, help="Render scale, 1.0 = 72dpi")
    parser.add_argument("--strict", action="store_true", default=None, help="Fail on pages that cannot be encoded")
    parser.add_argument("--log-level", default=None, help="Logging level (default: PDF_COMPARE_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)
    if not 0 <= args.tolerance <= 1:
        parser.error("--tolerance must be between 0 and 1")

    settings = get_settings()
    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="[%(levelname)s] %(message)s")

    actual = Path(args.actual).read_bytes()
    expected = Path(args.expected).read_bytes()

    if args.mode == "contents":
        same = are_contents_equal(actual, expected)
    elif args.mode == "images":
        same = are_images_same(actual, expected, zoom=args.zoom, strict=args.strict)
    elif args.mode == "size":
        same = are_contents_similar_size(actual, expected, args.tolerance)
    else:
        same = are_equal(actual, expected, zoom=args.zoom, strict=args.strict)

    if same:
        logger.info("%s and %s match (%s)", args.actual, args.expected, args.mode)
        return 0
    logger.warning("%s and %s differ (%s)", args.actual, args.expected, args.mode)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
