"""Core types."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Half-open byte range [start, end) of a candidate symbol in a line."""
    start: int
    end: int

    def text(self, line: bytes) -> bytes:
        return line[self.start:self.end]


@dataclass(frozen=True, slots=True)
class DemangledName:
    """Result of demangling one candidate."""
    original: str              # candidate text as matched
    name: str                  # demangled path, hash suffix stripped
    hash: str | None = None    # legacy "h<16 hex>" suffix, if any
    recognized: bool = True    # False = demangler fell back to original
    suffix: str = ""           # text after the hash, e.g. ".cold" or "."

    def render(self, include_hash: bool = False) -> str:
        if not self.recognized:
            return self.original
        if include_hash and self.hash:
            return f"{self.name}::{self.hash}{self.suffix}"
        return self.name + self.suffix


@dataclass(slots=True)
class FilterStats:
    """Counters for one stream run."""
    lines: int = 0
    matches: int = 0
    substituted: int = 0       # rendered through the demangler
    passed_through: int = 0    # undecodable or already-consumed spans
