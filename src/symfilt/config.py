"""YAML/dict config loader for symfilt.

Supports loading from a YAML file or a plain dict (for embedding in a
larger tool config).

Example YAML:

    symfilt:
      include_hash: false
      escape: true
      pattern: "_(?:ZN|R)[$._0-9A-Za-z]*"   # optional override
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any

import yaml

from .filter import FilterConfig, SymbolFilter
from .patterns import SYMBOL_PATTERN, SymfiltError, compile_pattern


class ConfigError(SymfiltError):
    """The configuration file or dict is malformed."""


_TRUE = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE


def _flag(data: dict[str, Any], key: str, env: str) -> bool:
    value = data.get(key)
    if value is None:
        return _env_flag(env)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "symfilt" key or flat
    if isinstance(data, dict) and "symfilt" in data:
        data = data["symfilt"] or {}
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping, got {type(data).__name__}")

    pattern = data.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        raise ConfigError("pattern must be a string")

    return {
        "include_hash": _flag(data, "include_hash", "SYMFILT_INCLUDE_HASH"),
        "escape": _flag(data, "escape", "SYMFILT_ESCAPE"),
        "pattern": pattern,
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: {e}") from e
    return load_config(raw)


def create_filter(config: dict[str, Any]) -> SymbolFilter:
    """Create a SymbolFilter from a config dict."""
    cfg = load_config(config)
    pattern = compile_pattern(cfg["pattern"]) if cfg["pattern"] else SYMBOL_PATTERN
    return SymbolFilter(FilterConfig(
        include_hash=cfg["include_hash"],
        escape=cfg["escape"],
        pattern=pattern,
    ))
