"""Tests for TextBuffer line indexing."""

from multipager.model import TextBuffer


def test_splits_on_newlines():
    buf = TextBuffer("t", "a\nbb\nccc")
    assert buf.line_count == 3
    assert [buf.line(i) for i in range(3)] == ["a", "bb", "ccc"]
    assert [buf.line_length(i) for i in range(3)] == [1, 2, 3]


def test_trailing_newline_gives_empty_last_line():
    buf = TextBuffer("t", "one\ntwo\n")
    assert buf.line_count == 3
    assert buf.line(2) == ""
    assert buf.line_length(2) == 0


def test_empty_content_is_one_empty_line():
    buf = TextBuffer("empty", "")
    assert buf.line_count == 1
    assert buf.line(0) == ""


def test_consecutive_newlines():
    buf = TextBuffer("t", "\n\nx")
    assert [buf.line(i) for i in range(buf.line_count)] == ["", "", "x"]


def test_lengths_count_code_points_not_bytes():
    buf = TextBuffer("t", "héllo\n日本語")
    assert buf.line_length(0) == 5
    assert buf.line_length(1) == 3
    assert buf.line(1) == "日本語"


def test_carriage_returns_are_kept():
    buf = TextBuffer("t", "a\r\nb")
    assert buf.line(0) == "a\r"


def test_repr_names_buffer():
    assert repr(TextBuffer("notes.txt", "a\nb")) == "TextBuffer(name='notes.txt', lines=2)"
