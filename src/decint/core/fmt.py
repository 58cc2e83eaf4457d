"""
Text rendering and stream helpers (I/O boundary only).

Rendering: optional leading '-', the most-significant group unpadded, every
lower group zero-padded to four digits. Stream input reads one
whitespace-delimited token, the way a formatted extraction would.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .groups import DigitGroups

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def group_to_string(store: DigitGroups, n: int) -> str:
    """Render group ``n``; only the most-significant group is left unpadded."""
    if n == store.size() - 1:
        return str(store.group(n))
    return f"{store.group(n):04d}"


def magnitude_to_string(store: DigitGroups) -> str:
    """Decimal text of |store| (no sign)."""
    return "".join(group_to_string(store, i) for i in range(store.size() - 1, -1, -1))


def format_groups(store: DigitGroups) -> str:
    """Decimal text with a leading '-' for negative values."""
    text = magnitude_to_string(store)
    return "-" + text if store.is_negative() else text


def print_groups(store: DigitGroups, sep: str = "", file: Optional[TextIO] = None) -> None:
    """Write the compact decimal form, optionally followed by one separator character."""
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    out = sys.stdout if file is None else file
    out.write(format_groups(store))
    if sep:
        out.write(sep)


# ---------------------------------------------------------------------------
# Stream tokens
# ---------------------------------------------------------------------------

def read_token(stream: TextIO) -> str:
    """Skip leading whitespace and return the next whitespace-delimited token.

    Returns '' at end of stream. The whitespace that ends the token is consumed.
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    token = "".join(chars)
    _dbg(f"read_token: {token!r}")
    return token


__all__ = [
    "group_to_string",
    "magnitude_to_string",
    "format_groups",
    "print_groups",
    "read_token",
]
