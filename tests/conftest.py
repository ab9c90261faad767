from __future__ import annotations

from pathlib import Path
import sys

import pytest

# Ensure src/ is on path
ROOT = Path(__file__).resolve().parents[1]
src_path = ROOT / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import fitz  # PyMuPDF


def _make_pdf(*page_texts: str, white_box: bool = False) -> bytes:
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page(width=200, height=200)
        page.insert_text((20, 40), text)
        if white_box:
            # invisible on a white page, but changes the serialized bytes
            page.draw_rect(fitz.Rect(20, 100, 120, 160), color=None, fill=(1, 1, 1))
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return _make_pdf
