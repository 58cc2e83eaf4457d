"""
Decimal / scientific-notation text -> DigitGroups.

Accepted grammar (whole string):

    [+-]? ( 0 | [1-9][0-9]* | [1-9](\\.[0-9]+)?[eE]\\+?[1-9][0-9]* )

- at most one sign; '-0' and '+0' are canonical zero
- no redundant leading zeros
- scientific form a*10^b with 1 <= a < 10 and b >= 1; b must cover every
  fractional digit of a ("2.5e1" is 25, "2.55e1" is rejected)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Tuple

from .arith import ShiftDirection, shift10
from .exc import BigIntegerOverflowError, InvalidFormatError
from .groups import DigitGroups

# Debug printing control (parser)
DEBUG_PARSE = False

def _dbg(msg: str) -> None:
    if DEBUG_PARSE:
        print(msg)


class NumberForm(Enum):
    ZERO = 0
    POSITIVE_INTEGER = 1
    SCIENTIFIC_NOTATION = 2


_NUMBER_RE = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:(?P<zero>0)"
    r"|(?P<integer>[1-9][0-9]*)"
    r"|(?P<lead>[1-9])(?:\.(?P<frac>[0-9]+))?[eE]\+?(?P<exp>[1-9][0-9]*))"
)

# Exponents longer than this cannot describe a value under MAX_DIGITS.
_MAX_EXPONENT_CHARS = 20


def classify(text: str) -> Tuple[NumberForm, "re.Match[str]"]:
    """Match ``text`` against the grammar; raise InvalidFormatError otherwise."""
    if not isinstance(text, str):
        raise InvalidFormatError(f"expected str, got {type(text).__name__}")
    m = _NUMBER_RE.fullmatch(text)
    if m is None:
        raise InvalidFormatError(f"invalid integer expression: {text!r}")
    if m.group("zero") is not None:
        return NumberForm.ZERO, m
    if m.group("integer") is not None:
        return NumberForm.POSITIVE_INTEGER, m
    return NumberForm.SCIENTIFIC_NOTATION, m


def _scientific_to_groups(lead: str, frac: str, exp_text: str) -> DigitGroups:
    if len(exp_text) > _MAX_EXPONENT_CHARS:
        raise BigIntegerOverflowError(f"exponent {exp_text[:12]}... exceeds MAX_DIGITS")
    exponent = int(exp_text)
    # Decimal-point shift left over once the fractional digits are absorbed.
    shift = exponent - len(frac)
    if shift < 0:
        raise InvalidFormatError(
            f"not an integer: exponent {exponent} < {len(frac)} fractional digits"
        )
    mantissa = DigitGroups.from_digits(lead + frac)
    _dbg(f"parse: scientific mantissa={lead + frac}, shift={shift}")
    return shift10(mantissa, shift, ShiftDirection.LEFT)


def parse_groups(text: str) -> DigitGroups:
    """Parse ``text`` into a normalised store, sign applied last."""
    form, m = classify(text)
    _dbg(f"parse: {text!r} -> {form.name}")
    if form is NumberForm.ZERO:
        return DigitGroups.zero()
    if form is NumberForm.POSITIVE_INTEGER:
        store = DigitGroups.from_digits(m.group("integer"))
    else:
        store = _scientific_to_groups(m.group("lead"), m.group("frac") or "", m.group("exp"))
    store.normalize()
    store.set_sign(m.group("sign") == "-")
    return store


__all__ = [
    "NumberForm",
    "classify",
    "parse_groups",
]
