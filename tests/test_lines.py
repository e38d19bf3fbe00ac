import io

import pytest

from pushswap.lines import LineReader


TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 5, 42, 1000])
def test_lines_match_splitlines(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == TEXT.splitlines(keepends=True)


def test_readline_sequence_then_none():
    reader = LineReader(io.StringIO("a\nb\nc"), 3)
    assert reader.readline() == "a\n"
    assert reader.readline() == "b\n"
    assert reader.readline() == "c"
    assert reader.readline() is None
    assert reader.readline() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).readline() is None


def test_binary_stream():
    data = b"one\ntwo\nthree\n"
    lines = list(LineReader(io.BytesIO(data), 4))
    assert lines == data.splitlines(keepends=True)
    assert b"".join(lines) == data


def test_line_longer_than_buffer():
    long_line = "x" * 500 + "\n"
    reader = LineReader(io.StringIO(long_line + "tail"), 7)
    assert reader.readline() == long_line
    assert reader.readline() == "tail"


def test_join_reconstructs_input():
    text = "\n\nabc\n\ndef\n"
    assert "".join(LineReader(io.StringIO(text), 3)) == text


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_default_buffer_size_reads_whole_file():
    text = "\n".join(str(i) for i in range(100)) + "\n"
    lines = list(LineReader(io.StringIO(text)))
    assert len(lines) == 100
    assert all(line.endswith("\n") for line in lines)