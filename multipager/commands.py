"""Mapping from key events to navigation commands."""

from typing import Dict, Optional, Tuple

from .keyboard import KeyEvent, KeyType
from .navigation import Action, Command


class CommandRegistry:
    """Registry for mapping key combinations to navigation commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], Command] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default key bindings."""
        # Cursor movement
        for key in ((KeyType.SPECIAL, 'left'), (KeyType.REGULAR, 'h')):
            self.register(key, Action.CURSOR_LEFT)
        for key in ((KeyType.SPECIAL, 'right'), (KeyType.REGULAR, 'l')):
            self.register(key, Action.CURSOR_RIGHT)
        for key in ((KeyType.SPECIAL, 'down'), (KeyType.REGULAR, 'j')):
            self.register(key, Action.CURSOR_DOWN)
        for key in ((KeyType.SPECIAL, 'up'), (KeyType.REGULAR, 'k')):
            self.register(key, Action.CURSOR_UP)

        # Paging
        self.register((KeyType.CTRL, 'u'), Action.PAGE_UP)
        self.register((KeyType.SPECIAL, 'page_up'), Action.PAGE_UP)
        self.register((KeyType.CTRL, 'd'), Action.PAGE_DOWN)
        self.register((KeyType.SPECIAL, 'page_down'), Action.PAGE_DOWN)
        self.register((KeyType.REGULAR, 'g'), Action.JUMP_TOP)
        self.register((KeyType.REGULAR, 'G'), Action.JUMP_BOTTOM)

        # Buffers
        self.register((KeyType.REGULAR, 'n'), Action.NEXT_BUFFER)
        self.register((KeyType.REGULAR, 'p'), Action.PREV_BUFFER)
        self.register((KeyType.REGULAR, 'b'), Action.PREV_BUFFER)

        # System
        self.register((KeyType.REGULAR, 'r'), Action.REFRESH)
        for value in ('q', 'Q', 'Z'):
            self.register((KeyType.REGULAR, value), Action.QUIT)
        self.register((KeyType.CTRL, 'c'), Action.QUIT)

    def register(self, key: Tuple[KeyType, str], command: Command):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[Command]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def lookup(self, key_event: KeyEvent) -> Optional[Command]:
        """Return the command bound to ``key_event``, or None if unbound."""
        return self.get_command(key_event.key_type, key_event.value)
