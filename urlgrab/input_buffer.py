"""
Buffering of standard input into an ordered list of lines.
"""
from typing import TextIO

from .errors import InputReadError
from .logging_config import get_logger

logger = get_logger("input_buffer")


def read_lines(stream: TextIO, max_lines: int = 0) -> list[str]:
    """Read lines from ``stream`` until EOF or ``max_lines`` lines were read.

    Line terminators are stripped. ``max_lines`` of 0 means unbounded.

    Raises:
        InputReadError: if the stream cannot be read or decoded.
    """
    lines = []
    try:
        for line in stream:
            lines.append(line.rstrip("\r\n"))
            if max_lines and len(lines) >= max_lines:
                logger.debug("line cap of %d reached, stop reading", max_lines)
                break
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"error reading input: {e}") from e

    logger.debug("read %d lines from input", len(lines))
    return lines
