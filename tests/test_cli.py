from __future__ import annotations

import pytest

from pdf_compare.equality import main


@pytest.fixture
def pdf_files(tmp_path, make_pdf):
    def _write(actual: bytes, expected: bytes):
        a = tmp_path / "actual.pdf"
        e = tmp_path / "expected.pdf"
        a.write_bytes(actual)
        e.write_bytes(expected)
        return [str(a), str(e)]

    return _write


def test_equal_files_exit_zero(pdf_files, make_pdf):
    data = make_pdf("Hello")
    assert main(pdf_files(data, data)) == 0


def test_different_files_exit_one(pdf_files, make_pdf):
    args = pdf_files(make_pdf("Hello"), make_pdf("World"))
    assert main(args + ["--zoom", "1.0"]) == 1


def test_contents_mode_does_not_render(pdf_files, make_pdf):
    args = pdf_files(make_pdf("Hello"), make_pdf("Hello", white_box=True))
    assert main(args + ["--mode", "contents"]) == 1
    assert main(args + ["--mode", "images", "--zoom", "1.0"]) == 0


def test_size_mode(pdf_files):
    args = pdf_files(b"x" * 100, b"x" * 105)
    assert main(args + ["--mode", "size", "--tolerance", "0.1"]) == 0
    assert main(args + ["--mode", "size", "--tolerance", "0.01"]) == 1


def test_bad_tolerance_is_a_usage_error(pdf_files):
    args = pdf_files(b"a", b"a")
    with pytest.raises(SystemExit) as excinfo:
        main(args + ["--mode", "size", "--tolerance", "2"])
    assert excinfo.value.code == 2
