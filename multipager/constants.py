"""Constants and configuration for the multipager viewer."""

class PagerConstants:
    """Central configuration constants for the pager."""

    # Rendering
    TAB_WIDTH = 4  # Columns a tab character expands to
    GUTTER_SEPARATOR = " "  # Printed after each line number

    # Navigation
    PAGE_STEP = 10  # Lines moved by PageUp/PageDown

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Terminal output
    UNPRINTABLE_REPLACEMENT = "?"

    # Buffer names
    STDIN_BUFFER_NAME = "stdin"

    # Messages
    NOTHING_TO_DISPLAY_MESSAGE = "Nothing to display."
    READ_ERROR_MESSAGE = "Error reading file {}: {}"
    OFFSET_WARNING_MESSAGE = (
        "Warning: Initial offset {} exceeds file length {} for file {}. "
        "Setting to last line."
    )
    TERMINAL_ERROR_MESSAGE = "Failed to initialize terminal: {}"
