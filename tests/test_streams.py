from __future__ import annotations

import io

import pytest

from utils.streams import read_all


def test_bytes_like_inputs():
    assert read_all(None) is None
    assert read_all(b"ab") == b"ab"
    assert read_all(bytearray(b"ab")) == b"ab"
    assert read_all(memoryview(b"cd")) == b"cd"


def test_binary_stream_is_read_to_the_end():
    stream = io.BytesIO(b"0123456789")
    stream.read(3)
    assert read_all(stream) == b"3456789"


def test_text_stream_is_rejected():
    with pytest.raises(TypeError):
        read_all(io.StringIO("text"))


def test_other_types_are_rejected():
    with pytest.raises(TypeError):
        read_all(42)
