"""
Decimal Integer Core Constants
==============================

Only integer constants live here. Caps are looked up through this module at
call time (``constants.MAX_GROUPS``), never copied into local names, so that a
test can substitute a small synthetic cap.
"""

# NOTE: a "group" is one base-10000 big digit; four decimal digits per group.

# ---------------------------------------------------------------------------
# Group representation
# ---------------------------------------------------------------------------

#: Radix of one digit group.
BASE: int = 10_000

#: Decimal digits held by one full group.
GROUP_DIGITS: int = 4

#: Largest magnitude a single group may hold.
GROUP_MAX: int = BASE - 1

#: Maximum number of groups a value may own.
MAX_GROUPS: int = 0x3FFFFFFE

#: Maximum number of decimal digits a value may own.
MAX_DIGITS: int = 0xFFFFFFFC


# ---------------------------------------------------------------------------
# Native integer widths (bounded conversion)
# ---------------------------------------------------------------------------

#: (min, max) for each native integer kind accepted by ``to_integer``.
NATIVE_INT_RANGES: dict = {
    "int8": (-(2 ** 7), 2 ** 7 - 1),
    "int16": (-(2 ** 15), 2 ** 15 - 1),
    "int32": (-(2 ** 31), 2 ** 31 - 1),
    "int64": (-(2 ** 63), 2 ** 63 - 1),
    "uint8": (0, 2 ** 8 - 1),
    "uint16": (0, 2 ** 16 - 1),
    "uint32": (0, 2 ** 32 - 1),
    "uint64": (0, 2 ** 64 - 1),
}

#: Native kind an exponent must fit before power() will run.
POWER_EXPONENT_KIND: str = "uint32"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "BASE",
    "GROUP_DIGITS",
    "GROUP_MAX",
    "MAX_GROUPS",
    "MAX_DIGITS",
    "NATIVE_INT_RANGES",
    "POWER_EXPONENT_KIND",
]
