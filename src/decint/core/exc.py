"""
Core exception types for decint.core.

These are dependency-free and may be imported by all core modules. Every class
carries a ``kind`` tag and also derives from the closest built-in exception so
callers may catch either.
"""

from enum import Enum

__all__ = [
    "ErrorKind",
    "BigIntegerError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "BigIntegerOverflowError",
    "NegativeShiftAmountError",
    "InvalidOperandError",
    "OperandTypeError",
]


class ErrorKind(Enum):
    """Tag identifying which failure a BigIntegerError reports."""

    INVALID_FORMAT = "invalid_format"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    NEGATIVE_SHIFT_AMOUNT = "negative_shift_amount"
    INVALID_OPERAND = "invalid_operand"
    OPERAND_TYPE = "operand_type"


class BigIntegerError(Exception):
    """Base class for all decint.core failures.

    Attributes
    ----------
    kind : ErrorKind
        Tag of the failure; fixed per subclass.
    """

    kind: ErrorKind


class InvalidFormatError(BigIntegerError, ValueError):
    """Raised when text does not match the integer / scientific-notation grammar."""

    kind = ErrorKind.INVALID_FORMAT


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """Raised when a divisor or modulus is zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class BigIntegerOverflowError(BigIntegerError, OverflowError):
    """Raised when a group, digit or exponent bound would be exceeded."""

    kind = ErrorKind.OVERFLOW


class NegativeShiftAmountError(BigIntegerError, ValueError):
    """Raised when ``<<`` or ``>>`` receives a negative amount."""

    kind = ErrorKind.NEGATIVE_SHIFT_AMOUNT


class InvalidOperandError(BigIntegerError, ValueError):
    """Raised for mathematically undefined operands (zero to a non-positive power)."""

    kind = ErrorKind.INVALID_OPERAND


class OperandTypeError(BigIntegerError, TypeError):
    """Raised when a value of an unsupported type is used to build a BigInteger."""

    kind = ErrorKind.OPERAND_TYPE
