"""symfilt — demangle Rust symbols in logs, traces and linker output."""

from .filter import SymbolFilter, FilterConfig, render
from .demangle import demangle
from .patterns import SYMBOL_PATTERN, scan_symbols, compile_pattern, SymfiltError, PatternError
from .reader import iter_lines
from .streaming import StreamingDemangler
from .config import ConfigError, create_filter, load_config, load_from_yaml
from .types import DemangledName, FilterStats, MatchSpan

__all__ = [
    "SymbolFilter", "FilterConfig", "render",
    "demangle",
    "SYMBOL_PATTERN", "scan_symbols", "compile_pattern",
    "iter_lines",
    "StreamingDemangler",
    "create_filter", "load_config", "load_from_yaml",
    "SymfiltError", "PatternError", "ConfigError",
    "DemangledName", "FilterStats", "MatchSpan",
]
__version__ = "0.1.0"
