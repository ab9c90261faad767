"""pdf_compare package

Lenient equality checks for generated PDFs: a structural line comparison
that ignores environment-specific lines, with a rendered-page fallback.
"""

from .equality import (  # noqa: F401
	are_contents_equal,
	are_contents_similar_size,
	are_equal,
	are_images_same,
)
from .errors import DocumentLoadError, PageEncodeError  # noqa: F401
from .policy import DEFAULT_POLICY, IgnorePolicy  # noqa: F401

__all__ = [
	"are_equal",
	"are_contents_equal",
	"are_images_same",
	"are_contents_similar_size",
	"IgnorePolicy",
	"DEFAULT_POLICY",
	"DocumentLoadError",
	"PageEncodeError",
]
