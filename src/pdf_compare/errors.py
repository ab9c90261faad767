"""Exceptions raised by the comparison helpers."""

from __future__ import annotations


class DocumentLoadError(OSError):
    """Raised when a byte sequence cannot be opened as a PDF document."""


class PageEncodeError(OSError):
    """Raised in strict mode when a rendered page cannot be encoded."""

    def __init__(self, page_number: int, message: str = ""):
        self.page_number = page_number
        super().__init__(message or f"could not encode page {page_number}")
