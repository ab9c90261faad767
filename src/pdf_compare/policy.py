"""
pdf_compare.policy

Line prefixes that the structural comparison is allowed to ignore.

A generated PDF carries details of the environment it was produced in
(producer, creation date, document ID, ...). Lines starting with one of the
scalar prefixes are skipped when both documents have them. Lines starting
with an array prefix open a block that is skipped until a line containing
``]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional


def _without_nones(prefixes: Optional[Iterable[Optional[str]]]) -> FrozenSet[str]:
    if prefixes is None:
        return frozenset()
    return frozenset(p for p in prefixes if p is not None)


def _shared_prefix(line1: str, line2: str, prefixes: FrozenSet[str]) -> bool:
    return any(line1.startswith(p) and line2.startswith(p) for p in prefixes)


@dataclass(frozen=True)
class IgnorePolicy:
    """Immutable pair of prefix sets.

    ``None`` entries are dropped at construction so callers can pass sets
    assembled from optional values.
    """

    array_prefixes: FrozenSet[str] = field(default_factory=frozenset)
    scalar_prefixes: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "array_prefixes", _without_nones(self.array_prefixes))
        object.__setattr__(self, "scalar_prefixes", _without_nones(self.scalar_prefixes))

    def skips_array(self, line1: str, line2: str) -> bool:
        """True when both lines open the same ignored array."""
        return _shared_prefix(line1, line2, self.array_prefixes)

    def skips_scalar(self, line1: str, line2: str) -> bool:
        """True when both lines start with the same ignored prefix."""
        return _shared_prefix(line1, line2, self.scalar_prefixes)

    def extended(
        self,
        array_prefixes: Iterable[Optional[str]] = (),
        scalar_prefixes: Iterable[Optional[str]] = (),
    ) -> "IgnorePolicy":
        """Return a new policy with the given prefixes added."""
        return IgnorePolicy(
            array_prefixes=self.array_prefixes | _without_nones(array_prefixes),
            scalar_prefixes=self.scalar_prefixes | _without_nones(scalar_prefixes),
        )


DEFAULT_SCALAR_PREFIXES = frozenset(
    {
        "/Producer",
        "/Creator",
        "/CreationDate",
        "/DocChecksum",
        "/Root",
        # same keys opening a dictionary
        "<</Producer",
        "<</Creator",
        "<</CreationDate",
        "<</DocChecksum",
        "<</Root",
        # comment lines
        "%",
    }
)

DEFAULT_ARRAY_PREFIXES = frozenset({"/ID", "<</ID"})

DEFAULT_POLICY = IgnorePolicy(
    array_prefixes=DEFAULT_ARRAY_PREFIXES,
    scalar_prefixes=DEFAULT_SCALAR_PREFIXES,
)
