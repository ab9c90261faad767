"""Rendered-image comparison of two PDFs.

Each page of both documents is rasterized with PyMuPDF (fitz), encoded to
PNG with Pillow, and the two page image lists are compared byte for byte.
Differences that do not change the rendered output are therefore ignored.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable, List, Optional

import fitz  # PyMuPDF
from PIL import Image

from .errors import DocumentLoadError, PageEncodeError

logger = logging.getLogger(__name__)

# 1.0 = 72dpi, 2.0 ~ 144dpi
DEFAULT_ZOOM = 2.0


def load_document(data: bytes) -> fitz.Document:
    """Open a PDF held in memory.

    Raises:
        DocumentLoadError: if PyMuPDF cannot parse ``data``.
    """
    try:
        return fitz.open(stream=bytes(data), filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise DocumentLoadError(f"Cannot open PDF document: {e}") from e


def close_quietly(document: Optional[fitz.Document]) -> None:
    """Close ``document`` without letting a failure escape."""
    if document is None:
        return
    try:
        document.close()
    except Exception:
        logger.debug(
            "Closing a PDF document failed; the comparison result is unaffected",
            exc_info=True,
        )


def render_page(page: fitz.Page, zoom: float = DEFAULT_ZOOM) -> fitz.Pixmap:
    mat = fitz.Matrix(zoom, zoom)
    return page.get_pixmap(matrix=mat, alpha=False)


def encode_png(pix: fitz.Pixmap) -> bytes:
    """Encode an RGB pixmap as PNG bytes."""
    img = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
    with io.BytesIO() as buf:
        img.save(buf, format="PNG")
        return buf.getvalue()


def to_page_images(
    document: Iterable[fitz.Page],
    zoom: float = DEFAULT_ZOOM,
    strict: bool = False,
) -> List[bytes]:
    """Return one PNG per page, in page order.

    A page that cannot be encoded is left out of the list, which shifts the
    pages after it. With ``strict`` the failure is raised instead.
    """
    images: List[bytes] = []
    for page_number, page in enumerate(document, start=1):
        pix = render_page(page, zoom)
        try:
            images.append(encode_png(pix))
        except (OSError, ValueError) as e:
            if strict:
                raise PageEncodeError(page_number, f"could not encode page {page_number}: {e}") from e
            logger.warning("Skipping page %d, PNG encoding failed: %s", page_number, e)
    return images


def are_byte_lists_equal(
    list_x: Optional[List[bytes]], list_y: Optional[List[bytes]]
) -> bool:
    """Compare two page image lists.

    Two ``None`` lists are equal; otherwise both lists must hold the same
    bytes in the same order.
    """
    if list_x is None and list_y is None:
        return True
    if list_x is None or list_y is None:
        return False
    if len(list_x) != len(list_y):
        return False
    return all(x == y for x, y in zip(list_x, list_y))


def compare_visual(
    actual: Optional[bytes],
    expected: Optional[bytes],
    zoom: float = DEFAULT_ZOOM,
    strict: bool = False,
) -> bool:
    """Return True if every page of both documents renders to the same image.

    Raises:
        DocumentLoadError: if either input is not a readable PDF.
        PageEncodeError: with ``strict``, if a page cannot be encoded.
    """
    if actual is None or expected is None:
        return False

    actual_doc = None
    expected_doc = None
    try:
        actual_doc = load_document(actual)
        expected_doc = load_document(expected)
        actual_pages = to_page_images(actual_doc, zoom, strict)
        expected_pages = to_page_images(expected_doc, zoom, strict)
        same = are_byte_lists_equal(actual_pages, expected_pages)
        if not same:
            logger.info(
                "Rendered pages differ (%d actual, %d expected)",
                len(actual_pages),
                len(expected_pages),
            )
        return same
    finally:
        close_quietly(actual_doc)
        close_quietly(expected_doc)
