"""Bounded, best-effort reading of captured stderr."""

import logging
import os
from typing import BinaryIO, Final

logger = logging.getLogger(__name__)

MAX_STDERR_BYTES: Final[int] = 1024

# Sizes are clamped to 16 bits before the byte limit is applied
_SIZE_CLAMP: Final[int] = 0xFFFF

READ_FAILED_PLACEHOLDER: Final[str] = "<failed to read stderr>"


def last_utf8_content(sink: BinaryIO) -> str:
    """Return the trailing MAX_STDERR_BYTES of a file, decoded as UTF-8.

    Invalid byte sequences are replaced with U+FFFD. This never raises
    for I/O problems: if the file cannot be read a fixed placeholder is
    returned, so a broken diagnostic never hides the real failure.

    Args:
        sink: Seekable binary file, e.g. a TemporaryFile a child wrote to.

    Returns:
        Decoded tail of the file, or READ_FAILED_PLACEHOLDER.
    """
    try:
        size = os.fstat(sink.fileno()).st_size
    except (OSError, ValueError) as e:
        logger.warning("failed to fstat: %s", e)
        size = 0

    length = min(size, _SIZE_CLAMP, MAX_STDERR_BYTES)

    try:
        sink.seek(-length, os.SEEK_END)
        buf = sink.read(length)
    except (OSError, ValueError) as e:
        logger.warning("failed seek+read: %s", e)
        return READ_FAILED_PLACEHOLDER

    return buf.decode("utf-8", errors="replace")
