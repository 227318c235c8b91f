"""Symbol filter — the main API.  Scan, demangle, substitute, line by line.

Usage:
    from symfilt import SymbolFilter, FilterConfig

    f = SymbolFilter(FilterConfig(include_hash=True))
    f.filter_line(b"at _ZN4core3fmt5write17h0123456789abcdefE\\n")
    # b"at core::fmt::write::h0123456789abcdef\\n"

    with open("build.log", "rb") as src:
        f.stream(src, sys.stdout.buffer)

Every byte outside a matched span is copied unchanged, so a log with no
symbols comes out byte-identical.
"""

from __future__ import annotations
import html
import logging
import re
from dataclasses import dataclass
from typing import BinaryIO, Callable

from .demangle import demangle
from .patterns import SYMBOL_PATTERN, scan_symbols
from .reader import iter_lines
from .types import DemangledName, FilterStats

log = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """Configuration for the SymbolFilter."""
    include_hash: bool = False       # show ::h<hash> suffixes
    escape: bool = False             # HTML-escape each rendered name
    pattern: re.Pattern[bytes] = SYMBOL_PATTERN


def render(name: DemangledName, *, include_hash: bool, escape: bool) -> str:
    """Render a demangled name for one of the four output modes."""
    text = name.render(include_hash)
    if escape:
        text = html.escape(text)
    return text


class SymbolFilter:
    """Replaces mangled Rust symbols in byte lines with demangled names."""

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        demangler: Callable[[str], DemangledName] = demangle,
    ) -> None:
        self.config = config or FilterConfig()
        self._demangle = demangler
        self.stats = FilterStats()

    def filter_line(self, line: bytes) -> bytes:
        """Return ``line`` with every candidate symbol substituted."""
        parts: list[bytes] = []
        self._substitute(line, parts.append)
        return b"".join(parts)

    def write_line(self, line: bytes, sink: BinaryIO) -> None:
        """Write the filtered ``line`` to ``sink`` and flush it."""
        self._substitute(line, sink.write)
        sink.flush()

    def stream(self, source: BinaryIO, sink: BinaryIO) -> FilterStats:
        """Filter every line of ``source`` into ``sink``.

        I/O errors propagate; whatever was flushed before stays written.
        """
        self.stats = FilterStats()
        for line in iter_lines(source):
            self.write_line(line, sink)
        return self.stats

    def _substitute(self, line: bytes, emit: Callable[[bytes], object]) -> None:
        cfg = self.config
        stats = self.stats
        stats.lines += 1
        cursor = 0

        for span in scan_symbols(line, cfg.pattern):
            stats.matches += 1

            if cursor >= span.end:
                # already emitted by an earlier overlapping span
                stats.passed_through += 1
                continue

            if cursor < span.start:
                emit(line[cursor:span.start])
            elif cursor > span.start:
                # partially consumed: emit only the unclaimed bytes
                emit(line[cursor:span.end])
                cursor = span.end
                stats.passed_through += 1
                continue
            cursor = span.end

            raw = span.text(line)
            try:
                candidate = raw.decode("utf-8")
            except UnicodeDecodeError:
                log.debug("undecodable candidate %r passed through", raw)
                emit(raw)
                stats.passed_through += 1
                continue

            name = self._demangle(candidate)
            text = render(name, include_hash=cfg.include_hash, escape=cfg.escape)
            emit(text.encode("utf-8"))
            stats.substituted += 1

        if cursor < len(line):
            emit(line[cursor:])
