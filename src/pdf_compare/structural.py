"""
pdf_compare.structural

Line-by-line comparison of two serialized PDF documents.

The raw bytes are read as ISO-8859-1 text so that every byte maps to a
character, then walked one line pair at a time. Pairs that differ are
excused when the ignore policy allows it; the first pair that is not
excused makes the documents unequal.
"""
from __future__ import annotations

import enum
import io
import logging
from typing import Iterable, Iterator, Optional, Tuple

from .policy import DEFAULT_POLICY, IgnorePolicy

logger = logging.getLogger(__name__)

ENCODING = "latin-1"


class ScanState(enum.Enum):
    NORMAL = "normal"
    SKIPPING_ARRAY = "skipping_array"


def advance(
    state: ScanState, line1: str, line2: str, policy: IgnorePolicy
) -> Tuple[ScanState, bool]:
    """Feed one line pair to the automaton.

    Returns the next state and whether the pair is acceptable.
    """
    if line1 == line2:
        return state, True
    if state is ScanState.SKIPPING_ARRAY:
        # the line holding the closing bracket is still part of the array
        if "]" in line1:
            return ScanState.NORMAL, True
        return state, True
    if policy.skips_array(line1, line2):
        return ScanState.SKIPPING_ARRAY, True
    if policy.skips_scalar(line1, line2):
        return state, True
    return state, False


def scan_lines(
    actual_lines: Iterable[str],
    expected_lines: Iterable[str],
    policy: IgnorePolicy = DEFAULT_POLICY,
) -> Optional[int]:
    """Walk both line sequences in lock-step.

    Returns the 1-based number of the first line pair that is not excused,
    or ``None`` when every line of ``actual_lines`` was matched. The walk is
    driven by ``actual_lines``: extra trailing lines in ``expected_lines``
    are never looked at.
    """
    expected_iter = iter(expected_lines)
    state = ScanState.NORMAL
    for line_number, line1 in enumerate(actual_lines, start=1):
        line2 = next(expected_iter, None)
        if line2 is None:
            logger.error(
                "Line %d exists only in the actual document:\n\t1. %s",
                line_number,
                line1,
            )
            return line_number
        state, ok = advance(state, line1, line2, policy)
        if not ok:
            logger.error(
                "Lines [#%d] are different!\n\t1. %s\n\t2. %s",
                line_number,
                line1,
                line2,
            )
            return line_number
    return None


def _read_lines(reader: io.TextIOBase) -> Iterator[str]:
    # universal newlines: "\n", "\r\n" and "\r" all end a line
    while True:
        line = reader.readline()
        if not line:
            return
        yield line[:-1] if line.endswith("\n") else line


def _open_text(data: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding=ENCODING, newline=None)


def compare_structural(
    actual: Optional[bytes],
    expected: Optional[bytes],
    policy: IgnorePolicy = DEFAULT_POLICY,
) -> bool:
    """Return True if the two serialized documents are equal under ``policy``.

    Two ``None`` values are not equal.
    """
    if actual is None or expected is None:
        return False
    with _open_text(actual) as r1, _open_text(expected) as r2:
        return scan_lines(_read_lines(r1), _read_lines(r2), policy) is None
