"""Line reader — splits a binary stream into lines, terminators kept."""

from __future__ import annotations
from typing import BinaryIO, Iterator


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield every line of ``stream`` including its terminator.

    A final line without a newline is yielded as-is.  No decoding happens
    here, so invalid UTF-8 is carried through untouched.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        yield line
