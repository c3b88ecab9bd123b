"""Data model for the pager: text buffers and navigation state."""

from dataclasses import dataclass, field, replace
from typing import Sequence


class TextBuffer:
    """One loaded text source, split into lines on ``\\n``.

    The line-start index is built once at construction; the content is
    never modified afterwards.
    """

    __slots__ = ('name', 'content', '_starts')

    def __init__(self, name: str, content: str):
        self.name = name
        self.content = content
        starts = [0]
        pos = content.find('\n')
        while pos != -1:
            starts.append(pos + 1)
            pos = content.find('\n', pos + 1)
        self._starts: tuple[int, ...] = tuple(starts)

    def __repr__(self) -> str:
        return f"TextBuffer(name={self.name!r}, lines={self.line_count})"

    @property
    def line_count(self) -> int:
        """Number of lines; a trailing newline yields a final empty line."""
        return len(self._starts)

    def _end(self, index: int) -> int:
        if index + 1 < len(self._starts):
            return self._starts[index + 1] - 1  # Exclude the newline
        return len(self.content)

    def line(self, index: int) -> str:
        """Return line ``index`` without its terminating newline."""
        return self.content[self._starts[index]:self._end(index)]

    def line_length(self, index: int) -> int:
        """Length of line ``index`` in code points."""
        return self._end(index) - self._starts[index]


@dataclass(frozen=True)
class DisplayFlags:
    """Display-mode flags, fixed for the lifetime of a session."""
    show_numbers: bool = False
    relative_numbers: bool = False
    quit_at_eof: bool = False

    @property
    def gutter(self) -> bool:
        """True when a line-number gutter is drawn."""
        return self.show_numbers or self.relative_numbers


@dataclass(frozen=True)
class NavigationState:
    """Complete navigation state of a pager session.

    Instances are immutable; navigation produces new instances with
    ``dataclasses.replace`` and shares the same ``buffers`` sequence.
    """
    buffers: Sequence[TextBuffer] = field(repr=False, compare=False)
    active_buffer: int = 0
    cursor_row: int = 0
    cursor_col: int = 0
    view_offset: int = 0
    grid_width: int = 0
    grid_height: int = 0
    initial_offset: int = 0
    flags: DisplayFlags = DisplayFlags()
    finished: bool = False

    @classmethod
    def initial(cls, buffers: Sequence[TextBuffer], width: int, height: int,
                offset: int = 0, flags: DisplayFlags = DisplayFlags()) -> "NavigationState":
        """Create the startup state with cursor and view at ``offset``.

        ``offset`` is clamped to the first buffer, so callers that already
        validated it against every buffer see it unchanged.
        """
        offset = max(0, min(offset, buffers[0].line_count - 1))
        return cls(
            buffers=buffers,
            cursor_row=offset,
            view_offset=offset,
            grid_width=width,
            grid_height=height,
            initial_offset=offset,
            flags=flags,
        )

    @property
    def buffer(self) -> TextBuffer:
        """The active buffer."""
        return self.buffers[self.active_buffer]

    @property
    def last_row(self) -> int:
        return self.buffer.line_count - 1

    @property
    def current_line_length(self) -> int:
        return self.buffer.line_length(self.cursor_row)

    def evolve(self, **changes) -> "NavigationState":
        return replace(self, **changes)
