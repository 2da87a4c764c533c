"""Binary stdin/stdout plumbing.

The whole input is read into memory before tokenization starts; output
is written in one call once formatting has finished.
"""

from __future__ import annotations

import sys
from typing import BinaryIO

from lineup.exceptions import StreamError


def read_input(stream: BinaryIO | None = None) -> bytes:
    """Read *stream* (default: ``sys.stdin.buffer``) to EOF.

    Raises
    ------
    StreamError
        When the underlying read fails.
    """
    source = stream if stream is not None else sys.stdin.buffer
    try:
        return source.read()
    except OSError as exc:
        raise StreamError(f"Failed to read input: {exc}") from exc


def write_output(data: bytes, stream: BinaryIO | None = None) -> None:
    """Write *data* to *stream* (default: ``sys.stdout.buffer``) and flush.

    Raises
    ------
    StreamError
        When the underlying write or flush fails.
    """
    sink = stream if stream is not None else sys.stdout.buffer
    try:
        sink.write(data)
        sink.flush()
    except OSError as exc:
        raise StreamError(
            f"Failed to write output: {exc}",
            hint="Check that the output pipe is still open.",
        ) from exc
