"""Loading text sources into buffers."""

from __future__ import annotations

import logging
import os
import stat
import sys
from typing import IO, Iterable, Optional

from .constants import PagerConstants
from .model import TextBuffer

logger = logging.getLogger(__name__)


def _decode(data: bytes) -> str:
    # Invalid UTF-8 becomes U+FFFD rather than failing the whole file
    return data.decode('utf-8', errors='replace')


def read_stream(stream: IO[bytes], name: str = PagerConstants.STDIN_BUFFER_NAME) -> TextBuffer:
    """Read a whole binary stream into a buffer called ``name``."""
    return TextBuffer(name, _decode(stream.read()))


def has_piped_input(stdin: Optional[IO]) -> bool:
    """True when ``stdin`` is a pipe or regular file, not a character device.

    Terminals and devices such as /dev/null are never read as a data source.
    """
    if stdin is None:
        return False
    try:
        mode = os.fstat(stdin.fileno()).st_mode
    except (OSError, ValueError):
        # Closed stream, or one without a file descriptor
        return False
    return not stat.S_ISCHR(mode)


def read_files(filenames: Iterable[str], err: Optional[IO[str]] = None) -> list[TextBuffer]:
    """Read each named file into a buffer, in order.

    Files that cannot be read are reported on ``err`` (stdout by default)
    and skipped.
    """
    out = err if err is not None else sys.stdout
    buffers = []
    for filename in filenames:
        try:
            with open(filename, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.warning("Could not read %s: %s", filename, e)
            print(PagerConstants.READ_ERROR_MESSAGE.format(filename, e), file=out)
            continue
        buffers.append(TextBuffer(filename, _decode(data)))
    return buffers


def load_buffers(filenames: Iterable[str], stdin: Optional[IO] = None) -> list[TextBuffer]:
    """Collect buffers from piped standard input (if any) and then files.

    Args:
        filenames: Paths given on the command line
        stdin: Text stream to check for piped input; ``sys.stdin`` by default

    Returns:
        Buffers in display order; may be empty.
    """
    stdin = stdin if stdin is not None else sys.stdin
    buffers = []
    if has_piped_input(stdin):
        buffers.append(read_stream(stdin.buffer))
    buffers.extend(read_files(filenames))
    return buffers


def clamp_initial_offset(offset: int, buffers: Iterable[TextBuffer],
                         err: Optional[IO[str]] = None) -> int:
    """Lower ``offset`` so that it is a valid line index of every buffer.

    A warning is printed for each buffer the offset had to be lowered for.
    """
    out = err if err is not None else sys.stdout
    offset = max(0, offset)
    for buffer in buffers:
        if offset >= buffer.line_count:
            print(PagerConstants.OFFSET_WARNING_MESSAGE.format(offset, buffer.line_count, buffer.name), file=out)
            logger.info("Initial offset %d lowered to %d for %s", offset, buffer.line_count - 1, buffer.name)
            offset = buffer.line_count - 1
    return offset
