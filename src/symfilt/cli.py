"""CLI interface for symfilt — demangle Rust symbols in a byte stream.

Usage:
    # Filter a build log through a pipe
    cargo build 2>&1 | symfilt

    # File to file, keeping hash suffixes
    symfilt -i crash.txt -o crash.demangled.txt --include-hash

    # HTML-safe output for embedding in a report
    symfilt --escape < perf.txt > perf.html.frag

Flags override the --config file, which overrides SYMFILT_* environment
variables.
"""

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import NoReturn

from .config import load_config, load_from_yaml, create_filter
from .patterns import SymfiltError

log = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    sys.stderr.write(f"symfilt: {message}\n")
    sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symfilt",
        description="Rust demangle tool: replaces mangled symbols in text",
    )
    parser.add_argument("-i", "--input", help="input file (default: stdin)")
    parser.add_argument("-o", "--output", help="output file (default: stdout)")
    parser.add_argument("--include-hash", action="store_true", help="include hash suffixes")
    parser.add_argument("-e", "--escape", action="store_true", help="enable HTML escape")
    parser.add_argument("-c", "--config", help="YAML config file")
    parser.add_argument("--pattern", help="override the symbol regex")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = load_from_yaml(args.config) if args.config else load_config({})
        if args.include_hash:
            cfg["include_hash"] = True
        if args.escape:
            cfg["escape"] = True
        if args.pattern:
            cfg["pattern"] = args.pattern
        symbol_filter = create_filter(cfg)
    except (SymfiltError, OSError) as e:
        _fail(str(e))

    try:
        source = open(args.input, "rb") if args.input else sys.stdin.buffer
    except OSError as e:
        _fail(f"cannot open input: {e}")
    try:
        sink = open(args.output, "wb") if args.output else sys.stdout.buffer
    except OSError as e:
        if args.input:
            source.close()
        _fail(f"cannot create output: {e}")

    try:
        stats = symbol_filter.stream(source, sink)
    except BrokenPipeError:
        # Downstream closed early (e.g. `| head`); silence the final flush
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
    except OSError as e:
        _fail(f"I/O error: {e}")
    finally:
        if args.input:
            source.close()
        if args.output:
            sink.close()

    log.debug(
        "%d lines, %d matches, %d substituted, %d passed through",
        stats.lines, stats.matches, stats.substituted, stats.passed_through,
    )


if __name__ == "__main__":
    main()
