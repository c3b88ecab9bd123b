"""Renderer: maps a buffer and navigation state onto a character grid.

``render`` is a pure function; every call recomputes the whole frame from
the state it is given and never mutates it.
"""

from typing import NamedTuple, Optional

from .constants import PagerConstants
from .model import NavigationState, TextBuffer


class Cell(NamedTuple):
    x: int
    y: int
    char: str


class Frame(NamedTuple):
    """Result of rendering one full grid."""
    cells: tuple[Cell, ...]
    cursor_visible: bool
    cursor_x: int = 0
    cursor_y: int = 0


def gutter_width(buffer: TextBuffer) -> int:
    """Digits needed for the largest line number of ``buffer``."""
    return len(str(buffer.line_count))


def _gutter_label(state: NavigationState, line_index: int, width: int) -> Optional[str]:
    """Return the gutter text for ``line_index``, or None without a gutter.

    Absolute numbers take precedence when both number modes are enabled.
    """
    if state.flags.show_numbers:
        number = line_index + 1
    elif state.flags.relative_numbers:
        number = abs(state.cursor_row - line_index)
    else:
        return None
    return f"{number:>{width}}" + PagerConstants.GUTTER_SEPARATOR


def _expand(line: str):
    """Yield display characters of ``line`` with tabs expanded to spaces."""
    for ch in line:
        if ch == '\t':
            for _ in range(PagerConstants.TAB_WIDTH):
                yield ' '
        else:
            yield ch


def render(state: NavigationState) -> Frame:
    """Render the active buffer of ``state`` into a frame of cell writes.

    Lines are drawn from ``view_offset`` downwards. Lines longer than the
    grid wrap onto continuation rows that start after the gutter; a line
    that runs past the bottom row is truncated.

    The cursor is placed at ``cursor_col`` on the cursor's source row
    relative to the offset. Soft wrapping is not taken into account, so a
    cursor beyond the first screen row of a wrapped line is reported at its
    unwrapped column.
    """
    width, height = state.grid_width, state.grid_height
    if width <= 0 or height <= 0:
        return Frame(cells=(), cursor_visible=False)

    buffer = state.buffer
    number_width = gutter_width(buffer)
    indent = number_width + len(PagerConstants.GUTTER_SEPARATOR) if state.flags.gutter else 0

    cells: list[Cell] = []
    y = 0
    line_index = state.view_offset
    while line_index < buffer.line_count and y < height:
        x = 0
        label = _gutter_label(state, line_index, number_width)
        if label is not None:
            for ch in label:
                if x >= width:
                    break
                cells.append(Cell(x, y, ch))
                x += 1

        if indent < width:
            x = indent
            for ch in _expand(buffer.line(line_index)):
                if x >= width:
                    x = indent
                    y += 1
                    if y >= height:
                        break
                cells.append(Cell(x, y, ch))
                x += 1

        y += 1
        line_index += 1

    screen_cursor_y = state.cursor_row - state.view_offset
    if not 0 <= screen_cursor_y < height:
        return Frame(cells=tuple(cells), cursor_visible=False)

    cursor_x = state.cursor_col
    if state.flags.gutter:
        # Keep the cursor out of the number gutter
        cursor_x = max(cursor_x, indent)
    return Frame(tuple(cells), True, cursor_x, screen_cursor_y)


def frame_rows(frame: Frame, width: int, height: int) -> list[str]:
    """Compose ``frame`` into ``height`` strings of exactly ``width`` characters."""
    if width <= 0 or height <= 0:
        return []
    grid = [[' '] * width for _ in range(height)]
    for cell in frame.cells:
        if 0 <= cell.y < height and 0 <= cell.x < width:
            grid[cell.y][cell.x] = cell.char
    return [''.join(row) for row in grid]
