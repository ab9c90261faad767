"""Helpers to turn comparison inputs into bytes."""

from __future__ import annotations

from typing import BinaryIO, Optional, Union

Source = Union[bytes, bytearray, memoryview, BinaryIO]


def read_all(source: Optional[Source]) -> Optional[bytes]:
    """Return the full contents of ``source``.

    Bytes-like values are copied as is, binary file-like objects are read to
    the end. ``None`` passes through so callers can treat it as "unequal".
    """
    if source is None:
        return None
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    read = getattr(source, "read", None)
    if read is None:
        raise TypeError(f"expected bytes or a binary stream, got {type(source).__name__}")
    data = read()
    if isinstance(data, str):
        raise TypeError("stream must be opened in binary mode")
    return bytes(data)
