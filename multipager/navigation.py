"""Navigation state machine.

``apply(command, state)`` is the only entry point: it is total, never
raises, and returns a new ``NavigationState``. Out-of-range results are
clamped rather than rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union

from .constants import PagerConstants
from .model import NavigationState


class Action(Enum):
    """Navigation commands that take no arguments."""
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_DOWN = "cursor_down"
    CURSOR_UP = "cursor_up"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    NEXT_BUFFER = "next_buffer"
    PREV_BUFFER = "prev_buffer"
    REFRESH = "refresh"
    QUIT = "quit"


@dataclass(frozen=True)
class Resize:
    """New grid dimensions reported by the terminal."""
    width: int
    height: int


Command = Union[Action, Resize]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _settle(state: NavigationState) -> NavigationState:
    """Clamp a state after a vertical move so every invariant holds.

    The column is limited to the current line, the offset never passes the
    cursor, and the cursor row is kept on screen (line based, wrapped rows
    are not counted).
    """
    row = _clamp(state.cursor_row, 0, state.last_row)
    col = _clamp(state.cursor_col, 0, state.buffer.line_length(row))
    offset = _clamp(state.view_offset, 0, row)
    if state.grid_height > 0 and row - offset >= state.grid_height:
        offset = row - state.grid_height + 1
    return state.evolve(cursor_row=row, cursor_col=col, view_offset=offset)


def _cursor_left(state: NavigationState) -> NavigationState:
    if state.cursor_col > 0:
        return state.evolve(cursor_col=state.cursor_col - 1)
    return state


def _cursor_right(state: NavigationState) -> NavigationState:
    if state.cursor_col < state.current_line_length:
        return state.evolve(cursor_col=state.cursor_col + 1)
    return state


def _cursor_down(state: NavigationState) -> NavigationState:
    if state.cursor_row >= state.last_row:
        return state
    row = state.cursor_row + 1
    offset = state.view_offset
    if row - offset >= state.grid_height:
        offset += 1
    state = _settle(state.evolve(cursor_row=row, view_offset=offset))
    if state.flags.quit_at_eof and state.cursor_row == state.last_row:
        state = state.evolve(finished=True)
    return state


def _cursor_up(state: NavigationState) -> NavigationState:
    if state.cursor_row <= 0:
        return state
    row = state.cursor_row - 1
    offset = state.view_offset
    if row < offset:
        offset -= 1
    return _settle(state.evolve(cursor_row=row, view_offset=offset))


def _page_up(state: NavigationState) -> NavigationState:
    step = PagerConstants.PAGE_STEP
    row = max(0, state.cursor_row - step)
    offset = state.view_offset
    if row < offset:
        offset = max(0, offset - step)
    return _settle(state.evolve(cursor_row=row, view_offset=offset))


def _page_down(state: NavigationState) -> NavigationState:
    step = PagerConstants.PAGE_STEP
    row = min(state.last_row, state.cursor_row + step)
    offset = state.view_offset
    if row - offset >= state.grid_height:
        offset += step
    return _settle(state.evolve(cursor_row=row, view_offset=offset))


def _jump_top(state: NavigationState) -> NavigationState:
    return _settle(state.evolve(cursor_row=0, view_offset=0))


def _jump_bottom(state: NavigationState) -> NavigationState:
    row = state.last_row
    offset = max(0, row - state.grid_height + 1)
    return _settle(state.evolve(cursor_row=row, view_offset=offset))


def _switch_buffer(state: NavigationState, index: int) -> NavigationState:
    """Activate buffer ``index`` with the position reset to the startup offset."""
    if not 0 <= index < len(state.buffers) or index == state.active_buffer:
        return state
    state = state.evolve(
        active_buffer=index,
        cursor_row=state.initial_offset,
        cursor_col=0,
        view_offset=state.initial_offset,
    )
    return _settle(state)


def _next_buffer(state: NavigationState) -> NavigationState:
    return _switch_buffer(state, state.active_buffer + 1)


def _prev_buffer(state: NavigationState) -> NavigationState:
    return _switch_buffer(state, state.active_buffer - 1)


def _refresh(state: NavigationState) -> NavigationState:
    return state


def _quit(state: NavigationState) -> NavigationState:
    return state.evolve(finished=True)


_HANDLERS: Dict[Action, Callable[[NavigationState], NavigationState]] = {
    Action.CURSOR_LEFT: _cursor_left,
    Action.CURSOR_RIGHT: _cursor_right,
    Action.CURSOR_DOWN: _cursor_down,
    Action.CURSOR_UP: _cursor_up,
    Action.PAGE_UP: _page_up,
    Action.PAGE_DOWN: _page_down,
    Action.JUMP_TOP: _jump_top,
    Action.JUMP_BOTTOM: _jump_bottom,
    Action.NEXT_BUFFER: _next_buffer,
    Action.PREV_BUFFER: _prev_buffer,
    Action.REFRESH: _refresh,
    Action.QUIT: _quit,
}


def apply(command: Command, state: NavigationState) -> NavigationState:
    """Apply one command and return the resulting state."""
    if isinstance(command, Resize):
        # Visibility is re-derived by the next render, not here
        return state.evolve(
            grid_width=max(0, command.width),
            grid_height=max(0, command.height),
        )
    return _HANDLERS[command](state)
