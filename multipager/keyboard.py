"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'g', 'down', 'page_up')
    raw: str  # The raw key string from curtsies


# curtsies spellings of the named keys the pager distinguishes
SPECIAL_NAMES = {
    'left': 'left',
    'right': 'right',
    'up': 'up',
    'down': 'down',
    'pageup': 'page_up',
    'page_up': 'page_up',
    'pagedown': 'page_down',
    'page_down': 'page_down',
}


class KeyboardHandler:
    """Turns curtsies key names delivered by a terminal into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name into a KeyEvent.

        Args:
            key: curtsies key name such as 'j', '<DOWN>' or '<Ctrl-d>'

        Returns:
            Parsed KeyEvent. Bracketed names the pager does not know are
            returned as SPECIAL events carrying the lowercased name.
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            prefix, _, base = name.rpartition('-')
            if prefix == 'ctrl' and len(base) == 1:
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str)
            return KeyEvent(key_type=KeyType.SPECIAL, value=SPECIAL_NAMES.get(name, name), raw=key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1 and 1 <= ord(key_str) <= 26:
            return KeyEvent(key_type=KeyType.CTRL, value=chr(ord('a') + ord(key_str) - 1), raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
