"""Shared helpers for building pager states in tests."""

from multipager.model import DisplayFlags, NavigationState, TextBuffer


def make_state(*texts, width=80, height=24, offset=0, **flags):
    """Build a startup state over one buffer per text."""
    buffers = [TextBuffer(f"buf{i}", text) for i, text in enumerate(texts)]
    return NavigationState.initial(buffers, width, height, offset=offset, flags=DisplayFlags(**flags))


def numbered_lines(count, prefix="line"):
    return "\n".join(f"{prefix} {i}" for i in range(count))
