"""Tests for the renderer: gutters, tabs and soft wrapping."""

from multipager.view import Cell, frame_rows, gutter_width, render
from multipager.model import TextBuffer
from multipager.navigation import Action, apply

from helpers import make_state, numbered_lines


def rows(state):
    """Rendered rows with trailing blanks stripped."""
    return [row.rstrip() for row in frame_rows(render(state), state.grid_width, state.grid_height)]


def test_plain_lines_start_at_column_zero():
    state = make_state("a\nbb\nccc")
    assert rows(state)[:4] == ["a", "bb", "ccc", ""]


def test_rendering_starts_at_view_offset():
    state = make_state(numbered_lines(10), height=3, offset=4)
    assert rows(state) == ["line 4", "line 5", "line 6"]


def test_stops_at_grid_height():
    state = make_state(numbered_lines(10), height=3)
    frame = render(state)
    assert max(cell.y for cell in frame.cells) == 2


def test_gutter_width_is_digits_of_line_count():
    assert gutter_width(TextBuffer("t", "a")) == 1
    assert gutter_width(TextBuffer("t", numbered_lines(9))) == 1
    assert gutter_width(TextBuffer("t", numbered_lines(10))) == 2
    assert gutter_width(TextBuffer("t", numbered_lines(1000))) == 4


def test_absolute_numbers():
    state = make_state("a\nbb\nccc", show_numbers=True)
    assert rows(state)[:3] == ["1 a", "2 bb", "3 ccc"]


def test_absolute_numbers_are_right_justified():
    state = make_state(numbered_lines(10), height=10, show_numbers=True)
    result = rows(state)
    assert result[0] == " 1 line 0"
    assert result[9] == "10 line 9"


def test_relative_numbers_count_from_cursor():
    state = make_state("a\nbb\nccc", relative_numbers=True)
    state = apply(Action.CURSOR_DOWN, state)
    assert rows(state)[:3] == ["1 a", "0 bb", "1 ccc"]


def test_absolute_numbers_win_over_relative():
    state = make_state("a\nbb\nccc", show_numbers=True, relative_numbers=True)
    state = apply(Action.JUMP_BOTTOM, state)
    assert rows(state)[:3] == ["1 a", "2 bb", "3 ccc"]


def test_long_line_wraps_into_full_rows():
    state = make_state("x" * 100, width=10, height=24)
    frame = render(state)
    assert len(frame.cells) == 100
    result = rows(state)
    assert result[:10] == ["x" * 10] * 10
    assert result[10] == ""


def test_line_after_wrapped_line_starts_on_next_row():
    state = make_state("x" * 25 + "\nnext", width=10, height=5)
    assert rows(state) == ["x" * 10, "x" * 10, "x" * 5, "next", ""]


def test_tab_expands_to_four_columns_and_wraps_next_char():
    state = make_state("abcdefgh\tZ", width=12, height=3)
    cells = render(state).cells
    assert [c for c in cells if c.y == 0 and c.x >= 8] == [
        Cell(8, 0, ' '), Cell(9, 0, ' '), Cell(10, 0, ' '), Cell(11, 0, ' '),
    ]
    assert Cell(0, 1, 'Z') in cells


def test_tab_spaces_wrap_individually():
    state = make_state("abcdefghij\tZ", width=12, height=3)
    result = frame_rows(render(state), 12, 3)
    assert result[0] == "abcdefghij  "
    assert result[1].startswith("  Z")


def test_wrapped_rows_keep_gutter_padding():
    state = make_state("abcdefghij", width=6, height=5, show_numbers=True)
    assert rows(state)[:3] == ["1 abcd", "  efgh", "  ij"]


def test_line_running_past_bottom_is_truncated():
    state = make_state("y" * 30 + "\nhidden", width=10, height=2)
    frame = render(state)
    assert len(frame.cells) == 20
    assert all(cell.y < 2 for cell in frame.cells)
    assert all(cell.char == 'y' for cell in frame.cells)


def test_gutter_wider_than_grid_drops_content():
    state = make_state("abc", width=2, height=3, show_numbers=True)
    assert rows(state)[0] == "1"
    assert all(cell.x < 2 for cell in render(state).cells)


def test_gutter_is_clipped_at_grid_width():
    state = make_state(numbered_lines(100), width=2, height=2, show_numbers=True)
    assert [c.char for c in render(state).cells if c.y == 0] == [' ', ' ']


def test_zero_sized_grid_draws_nothing():
    for width, height in ((0, 24), (80, 0), (0, 0)):
        frame = render(make_state("abc", width=width, height=height))
        assert frame.cells == ()
        assert not frame.cursor_visible


def test_unicode_takes_one_cell_per_code_point():
    state = make_state("日本語", width=2, height=3)
    assert rows(state) == ["日本", "語", ""]


def test_frame_rows_pads_to_width():
    state = make_state("ab", width=4, height=2)
    assert frame_rows(render(state), 4, 2) == ["ab  ", "    "]


def test_render_does_not_change_state():
    state = make_state(numbered_lines(30), height=5, show_numbers=True)
    state = apply(Action.PAGE_DOWN, state)
    snapshot = (state.cursor_row, state.cursor_col, state.view_offset)
    render(state)
    render(state)
    assert (state.cursor_row, state.cursor_col, state.view_offset) == snapshot


def test_render_is_deterministic():
    state = make_state("a\tb\n" + "z" * 90, width=20, height=5, relative_numbers=True)
    assert render(state) == render(state)
