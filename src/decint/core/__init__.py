"""
Decimal Integer Core
====================

Unified exports for the arbitrary-precision decimal integer engine.
Magnitudes are stored as little-endian base-10000 groups with an explicit
sign; all arithmetic works group-wise in the integer domain.

Core exposes BigInteger as public API; DigitGroups and the arith primitives
are exported for callers that work on raw magnitudes.
"""

# NOTE:
#   Every operation leaves its result normalised (no most-significant zero
#   groups, zero is a single positive group). Caps live in `constants` and are
#   read at call time.

# Integer-domain constants
from .constants import (
    BASE,
    GROUP_DIGITS,
    GROUP_MAX,
    MAX_GROUPS,
    MAX_DIGITS,
    NATIVE_INT_RANGES,
)

# Digit-group store
from .groups import (
    Sign,
    DigitGroups,
)

# Positive-magnitude primitives
from .arith import (
    ShiftDirection,
    compare_magnitude,
    pow10_exponent,
    add_magnitude,
    subtract_magnitude,
    multiply_magnitude,
    divide_magnitude,
    shift10,
)

# Parsing and formatting
from .parse import NumberForm, classify, parse_groups
from .fmt import format_groups, print_groups, read_token

# Public value type
from .integer import BigInteger

# Core exceptions
from .exc import (
    ErrorKind,
    BigIntegerError,
    InvalidFormatError,
    DivisionByZeroError,
    BigIntegerOverflowError,
    NegativeShiftAmountError,
    InvalidOperandError,
    OperandTypeError,
)

__all__ = [
    # constants
    "BASE",
    "GROUP_DIGITS",
    "GROUP_MAX",
    "MAX_GROUPS",
    "MAX_DIGITS",
    "NATIVE_INT_RANGES",
    # groups
    "Sign",
    "DigitGroups",
    # arith
    "ShiftDirection",
    "compare_magnitude",
    "pow10_exponent",
    "add_magnitude",
    "subtract_magnitude",
    "multiply_magnitude",
    "divide_magnitude",
    "shift10",
    # parse / fmt
    "NumberForm",
    "classify",
    "parse_groups",
    "format_groups",
    "print_groups",
    "read_token",
    # value type
    "BigInteger",
    # exceptions
    "ErrorKind",
    "BigIntegerError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "BigIntegerOverflowError",
    "NegativeShiftAmountError",
    "InvalidOperandError",
    "OperandTypeError",
]
