# composite_gradients/utils.py
from __future__ import annotations

"""
Shared utilities for composite_gradients.

Run-summary formatting and tidy print logging for the CLI.
"""

import sys
from typing import Any, Iterable, Tuple


#  Formatting


def format_seconds_compact(seconds: float) -> str:
    """'<ms>ms' under a second, '<s>s' otherwise."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    return f"{seconds:.3f}s"


def format_value(value: Any) -> str:
    """on/off for bools, 1,234 for ints, trimmed 3dp for floats, str() otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(pairs: Iterable[Tuple[str, Any]], sep: str = "  ") -> str:
    """[("Samples", 16), ("Hues", 4)] -> 'Samples: 16  Hues: 4'."""
    return sep.join(f"{name}: {format_value(value)}" for name, value in pairs)


# Print logging


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    One config line, e.g.
      [source] Name: composite_16_1x  Samples: 16  Hues: 4  Grey band: leading
    Goes to debug_log() when debug=True, else log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    print(message, flush=True)


def debug_log(message: str) -> None:
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Error line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_value",
    "key_value_pairs_to_string",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
