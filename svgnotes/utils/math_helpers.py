"""Number <-> attribute text helpers. No model imports."""

from __future__ import annotations

import numpy as np


def format_number(value: float) -> str:
    """Shortest positional decimal that parses back to exactly `value`.

    4.0 -> "4", 0.1 -> "0.1". Never uses exponent notation.
    """
    return np.format_float_positional(float(value), unique=True, trim="-")


def parse_number(text: str) -> float:
    """float() restricted to plain ASCII numeric literals (no padding, no `_` separators)."""
    if not text.isascii() or text != text.strip() or "_" in text:
        raise ValueError(f"Not a number: {text!r}")
    return float(text)


def parse_byte(text: str) -> int:
    """Unsigned 8-bit integer literal."""
    if not text.isascii() or text != text.strip() or "_" in text:
        raise ValueError(f"Not an integer: {text!r}")
    value = int(text, 10)
    if not 0 <= value <= 255:
        raise ValueError(f"Out of range 0..=255: {value}")
    return value
