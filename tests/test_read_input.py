import io

import pytest

from searchserver.read_input import read_line, read_line_with_number


def test_read_line_strips_newline():
    stream = io.StringIO("curly cat\nnext\n")
    assert read_line(stream) == "curly cat"
    assert read_line(stream) == "next"


def test_read_line_at_end():
    assert read_line(io.StringIO("")) == ""


def test_read_number_then_line():
    stream = io.StringIO("3 trailing\nand in at\n")
    assert read_line_with_number(stream) == 3
    assert read_line(stream) == "and in at"


def test_read_number_skips_blank_lines():
    stream = io.StringIO("\n  \n  -12\n")
    assert read_line_with_number(stream) == -12


def test_read_number_invalid():
    with pytest.raises(ValueError):
        read_line_with_number(io.StringIO("abc\n"))


def test_read_number_empty_input():
    with pytest.raises(EOFError):
        read_line_with_number(io.StringIO(""))