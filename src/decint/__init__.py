# Top-level API for decint (integer-domain).
"""
Top-level API for decint.

This module exposes the stable interface of the arbitrary-precision decimal
integer engine:
  - BigInteger: signed value type with the full built-in integer operator set
  - BigIntegerError and its tagged subclasses

Raw group stores and magnitude primitives stay under `decint.core`.
"""

from __future__ import annotations

from .core import (
    BigInteger,
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
    "BigInteger",
    "ErrorKind",
    "BigIntegerError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "BigIntegerOverflowError",
    "NegativeShiftAmountError",
    "InvalidOperandError",
    "OperandTypeError",
]

__version__ = "0.1.0"
