"""Streaming demangler — buffers chunks and filters lines as they complete.

For pipes or sockets where input arrives in arbitrary fragments, a symbol
may be split across chunks:
    _ZN4co  →  re3fmt5wri  →  te17h0123456789abcdefE\\n

Nothing is scanned until its line is complete, so split symbols are
demangled exactly as they would be from a file.

Usage:
    demangler = StreamingDemangler(SymbolFilter())
    for chunk in proc.stdout:
        ready = demangler.feed(chunk)
        if ready:
            sink.write(ready)
    # Flush the trailing partial line
    sink.write(demangler.flush())
"""

from __future__ import annotations

from .filter import SymbolFilter


class StreamingDemangler:
    """Buffers streaming chunks and filters complete lines."""

    __slots__ = ("_filter", "_buffer", "_max_line_len")

    def __init__(self, symbol_filter: SymbolFilter | None = None, *, max_line_len: int = 1 << 20) -> None:
        self._filter = symbol_filter or SymbolFilter()
        self._buffer = b""
        self._max_line_len = max_line_len  # safety limit

    def feed(self, chunk: bytes) -> bytes:
        """Feed a chunk, return filtered output for every completed line."""
        self._buffer += chunk
        return self._drain()

    def flush(self) -> bytes:
        """Filter whatever is left (call at end of stream)."""
        out = self._buffer
        self._buffer = b""
        if not out:
            return b""
        return self._filter.filter_line(out)

    def _drain(self) -> bytes:
        out_parts: list[bytes] = []

        while self._buffer:
            idx = self._buffer.find(b"\n")

            if idx == -1:
                if len(self._buffer) > self._max_line_len:
                    # No newline in sight, filter what we have
                    out_parts.append(self._filter.filter_line(self._buffer))
                    self._buffer = b""
                break

            line = self._buffer[:idx + 1]
            self._buffer = self._buffer[idx + 1:]
            out_parts.append(self._filter.filter_line(line))

        return b"".join(out_parts)
