"""Main pager controller: wires input, navigation and rendering together."""

import logging
import os
import select
import signal
from typing import Optional, Sequence

from .commands import CommandRegistry
from .constants import PagerConstants
from .keyboard import KeyboardHandler, KeyEvent
from .model import DisplayFlags, NavigationState, TextBuffer
from .navigation import Action, Command, Resize, apply
from .terminal import TerminalInterface
from .view import render

logger = logging.getLogger(__name__)


class Pager:
    """Interactive viewer over a list of text buffers."""

    def __init__(self, buffers: Sequence[TextBuffer], initial_offset: int = 0,
                 flags: DisplayFlags = DisplayFlags(),
                 terminal: Optional[TerminalInterface] = None):
        """Create the pager.

        Args:
            buffers: Non-empty list of buffers to show, in order
            initial_offset: Startup line, already validated by the caller
            flags: Display flags for the whole session
            terminal: Terminal to draw on; a real one is created by default
        """
        if not buffers:
            raise ValueError("Pager needs at least one buffer")
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.state = NavigationState.initial(
            buffers,
            self.terminal.width,
            self.terminal.height,
            offset=initial_offset,
            flags=flags,
        )
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    @property
    def running(self) -> bool:
        return not self.state.finished

    def dispatch(self, command: Command) -> None:
        """Apply ``command`` to the state and redraw."""
        logger.debug("command %s", command)
        self.state = apply(command, self.state)
        self.draw()

    def handle_key_event(self, key_event: KeyEvent) -> bool:
        """Handle a keyboard event.

        Returns:
            True if the key was bound to a command
        """
        command = self.command_registry.lookup(key_event)
        if command is None:
            logger.debug("unbound key %r", key_event.raw)
            return False
        self.dispatch(command)
        return True

    def handle_resize(self) -> None:
        """Pick up the current terminal size and redraw."""
        width, height = self.terminal.width, self.terminal.height
        logger.debug("resize to %dx%d", width, height)
        self.dispatch(Resize(width, height))

    def draw(self) -> None:
        """Render the current state onto the terminal."""
        if self.state.finished:
            return
        self.terminal.draw_frame(render(self.state))

    def _handle_sigwinch(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, PagerConstants.RESIZE_PIPE_MARKER)

    def _drain_keys(self) -> None:
        """Handle every key event that is ready without blocking."""
        while self.running:
            key_event = self.keyboard.get_key_event(timeout=0)
            if key_event is None:
                break
            self.handle_key_event(key_event)

    def run(self) -> None:
        """Run the main pager loop until a quit command."""
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_sigwinch)
        try:
            self.terminal.setup()
            # Size may have changed between construction and setup
            self.handle_resize()
            while self.running:
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                if self._resize_pipe_r in ready:
                    os.read(self._resize_pipe_r, 1024)
                    self.handle_resize()
                if 0 in ready:
                    self._drain_keys()
        except KeyboardInterrupt:
            self.state = apply(Action.QUIT, self.state)
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()
