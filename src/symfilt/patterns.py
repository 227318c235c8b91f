"""Symbol scanner — byte-level regex for Rust mangled names.

Two manglings are recognised lexically:

    _ZN...   legacy (Itanium-style) Rust symbols
    _R...    v0 Rust symbols

Whether a candidate really is a symbol is left to the demangler.
"""

from __future__ import annotations
import re
from typing import Iterable, Iterator

from .types import MatchSpan


class SymfiltError(Exception):
    """Base class for symfilt errors."""


class PatternError(SymfiltError):
    """A user-supplied symbol pattern failed to compile."""


# Same shape rustfilt uses: _(ZN|R) then a greedy [$._[:alnum:]]* run
SYMBOL_PATTERN: re.Pattern[bytes] = re.compile(rb"_(?:ZN|R)[$._0-9A-Za-z]*")


def compile_pattern(source: str | bytes) -> re.Pattern[bytes]:
    """Compile a custom symbol pattern for matching against raw bytes."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    try:
        pattern = re.compile(source)
    except re.error as e:
        raise PatternError(f"invalid symbol pattern {source!r}: {e}") from e
    if pattern.match(b"") is not None:
        raise PatternError(f"symbol pattern {source!r} matches the empty string")
    return pattern


def scan_symbols(
    line: bytes,
    pattern: re.Pattern[bytes] = SYMBOL_PATTERN,
) -> Iterator[MatchSpan]:
    """Yield candidate spans in ``line``, left to right, non-overlapping."""
    for m in pattern.finditer(line):
        yield MatchSpan(m.start(), m.end())


def spans_are_ordered(spans: Iterable[MatchSpan]) -> bool:
    """True if spans are non-empty, ascending and mutually non-overlapping."""
    prev_end = 0
    for span in spans:
        if span.start < prev_end or span.end <= span.start:
            return False
        prev_end = span.end
    return True
