"""Terminal interface using Blessed for display and Curtsies for input."""

import os
import sys
from typing import Optional

import blessed

from .constants import PagerConstants
from .view import Frame, frame_rows


def reattach_tty() -> None:
    """Make the controlling terminal file descriptor 0 again.

    Used after standard input has been consumed as a data source, so that
    key presses can still be read from the keyboard.
    """
    fd = os.open('/dev/tty', os.O_RDONLY)
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)
    sys.stdin = open(0, 'r', closefd=False)


def _printable(ch: str) -> str:
    return ch if ch.isprintable() else PagerConstants.UNPRINTABLE_REPLACEMENT


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and put the keyboard into raw mode."""
        from curtsies import Input

        self._curtsies_input = Input(keynames='curtsies')
        self._curtsies_input.__enter__()
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.normal_cursor, end='')
            print(self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None

    def draw_frame(self, frame: Frame):
        """Redraw the whole grid from ``frame`` and place the cursor.

        Args:
            frame: Rendered frame whose cells cover at most width x height
        """
        rows = frame_rows(frame, self.width, self.height)
        out = [self.term.home + self.term.clear]
        for y, row in enumerate(rows):
            text = ''.join(_printable(ch) for ch in row)
            # Wide characters take two columns; never spill past the right edge
            out.append(self.term.move(y, 0) + self.term.truncate(text, self.width))
        if frame.cursor_visible:
            out.append(self.term.move(frame.cursor_y, frame.cursor_x) + self.term.normal_cursor)
        else:
            out.append(self.term.hide_cursor)
        print(''.join(out), end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived in time.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # blocks
        # send() also returns events curtsies has already buffered
        evt = self._curtsies_input.send(float(timeout))
        return str(evt) if evt is not None else None

    @property
    def width(self) -> int:
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self) -> int:
        """Terminal height in rows."""
        return self.term.height
