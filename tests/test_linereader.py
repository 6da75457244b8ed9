import io
import os

import pytest

from sshkvm.linereader import FD_MAX, LineReader


def _read_all(reader):
    lines = []
    while (line := reader.read_line()) is not None:
        lines.append(line)
    return lines


def test_lines_keep_newlines_and_last_line_without_one():
    data = "alpha\nbeta\ngamma"
    reader = LineReader(io.BytesIO(data.encode()))
    lines = _read_all(reader)
    assert lines == data.splitlines(keepends=True)
    assert "".join(lines) == data


@pytest.mark.parametrize("size", [1, 2, 3, 5, 1024])
def test_any_buffer_size_gives_the_same_lines(size):
    data = "first line\n\nthird\nfourth line is longer than the buffer\n"
    reader = LineReader(io.BytesIO(data.encode()), buffer_size=size)
    assert _read_all(reader) == data.splitlines(keepends=True)


def test_empty_input_gives_none():
    assert LineReader(io.BytesIO(b"")).read_line() is None


def test_none_again_after_exhaustion():
    reader = LineReader(io.BytesIO(b"only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_reads_from_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"one\ntwo\n")
        os.close(write_end)
        reader = LineReader(read_end, buffer_size=3)
        assert _read_all(reader) == ["one\n", "two\n"]
    finally:
        os.close(read_end)


def test_iteration_yields_every_line():
    data = "a\nb\nc\n"
    assert list(LineReader(io.BytesIO(data.encode()))) == data.splitlines(keepends=True)


@pytest.mark.parametrize("fd", [-1, FD_MAX + 1])
def test_invalid_descriptor_rejected(fd):
    with pytest.raises(ValueError):
        LineReader(fd)


def test_non_positive_buffer_size_rejected():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), buffer_size=0)