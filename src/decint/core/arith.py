"""
Positive-magnitude primitives on DigitGroups.

Every function here reads magnitudes only (signs are ignored) and returns a
fresh, normalised, positive store; operands are never mutated. Sign handling is
layered on top in integer.py via the usual algebraic identities.

- add / subtract: group-wise carry and borrow in base 10000.
- multiply: schoolbook, one pass per multiplier group.
- divide: long division; each quotient group is found by binary search in [1, 9999].
- shift10: decimal scaling by 10^n, whole-group fast path when n % 4 == 0.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from . import constants
from .exc import BigIntegerOverflowError
from .fmt import magnitude_to_string
from .groups import DigitGroups

# Debug printing control
DEBUG_ARITH = False

def _dbg(msg: str) -> None:
    if DEBUG_ARITH:
        print(msg)


class ShiftDirection(Enum):
    RIGHT = 0
    LEFT = 1


# ----------------------------
# Comparison
# ----------------------------

def compare_magnitude(a: DigitGroups, b: DigitGroups) -> int:
    """Return 1, 0 or -1 comparing |a| with |b| (both normalised)."""
    i, j = a.size(), b.size()
    if i != j:
        return 1 if i > j else -1
    ga, gb = a.groups, b.groups
    for k in range(i - 1, -1, -1):
        if ga[k] != gb[k]:
            return 1 if ga[k] > gb[k] else -1
    return 0


def pow10_exponent(a: DigitGroups) -> int:
    """Return k if |a| == 10^k, else -1."""
    top = a.group(a.size() - 1)
    if top not in (1, 10, 100, 1000):
        return -1
    if any(a.groups[:-1]):
        return -1
    return (a.size() - 1) * constants.GROUP_DIGITS + len(str(top)) - 1


# ----------------------------
# Add / subtract
# ----------------------------

def add_magnitude(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    """|a| + |b|."""
    if b.is_zero():
        return a.magnitude()
    if a.is_zero():
        return b.magnitude()
    base = constants.BASE
    if a.size() < b.size():
        a, b = b, a
    result = DigitGroups._blank()
    carry = 0
    for i in range(b.size()):
        carry, r = divmod(a.group(i) + b.group(i) + carry, base)
        result.push(r)
    for i in range(b.size(), a.size()):
        carry, r = divmod(a.group(i) + carry, base)
        result.push(r)
    if carry:
        result.push(carry)
    return result.normalize()


def subtract_magnitude(a: DigitGroups, b: DigitGroups) -> Tuple[DigitGroups, bool]:
    """|a| - |b| as (magnitude, negative).

    The smaller magnitude is always subtracted from the larger one; ``negative``
    is True when |a| < |b|.
    """
    if b.is_zero():
        return a.magnitude(), False
    if a.is_zero():
        return b.magnitude(), True
    cmp = compare_magnitude(a, b)
    if cmp == 0:
        return DigitGroups.zero(), False
    negative = cmp < 0
    larger, smaller = (b, a) if negative else (a, b)
    base = constants.BASE
    result = larger.magnitude()
    borrow = 0
    for i in range(larger.size()):
        diff = larger.group(i) - borrow
        if i < smaller.size():
            diff -= smaller.group(i)
        elif not borrow:
            break
        if diff < 0:
            diff += base
            borrow = 1
        else:
            borrow = 0
        result.adjust(i, diff)
    return result.normalize(), negative


# ----------------------------
# Multiply
# ----------------------------

def multiply_magnitude(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    """|a| * |b| by schoolbook long multiplication in base 10000."""
    if a.is_zero() or b.is_zero():
        return DigitGroups.zero()
    # An n-digit by m-digit product has at least n + m - 1 digits.
    if a.digits() + b.digits() - 1 > constants.MAX_DIGITS:
        raise BigIntegerOverflowError(
            f"product would exceed MAX_DIGITS={constants.MAX_DIGITS}"
        )
    base = constants.BASE
    ga, gb = a.groups, b.groups
    na = len(ga)
    buf = [0] * (na + len(gb))
    for j, m in enumerate(gb):
        if m == 0:
            continue
        carry = 0
        for i in range(na):
            carry, buf[i + j] = divmod(m * ga[i] + buf[i + j] + carry, base)
        # Position j + na has not been written by any earlier pass.
        buf[j + na] = carry
    return DigitGroups(buf).normalize()


def _multiply_group(a: DigitGroups, q: int) -> DigitGroups:
    return multiply_magnitude(a, DigitGroups.from_int(q))


# ----------------------------
# Decimal shift
# ----------------------------

def shift10(a: DigitGroups, n: int, direction: ShiftDirection) -> DigitGroups:
    """Scale |a| by 10^n (LEFT multiplies, RIGHT truncating-divides).

    Multiples of four move whole groups; other amounts go through the decimal
    text form.
    """
    if a.is_zero() or n == 0:
        return a.magnitude()
    if direction is ShiftDirection.LEFT:
        if a.digits() + n > constants.MAX_DIGITS:
            raise BigIntegerOverflowError(
                f"shift by {n} would exceed MAX_DIGITS={constants.MAX_DIGITS}"
            )
        if n % constants.GROUP_DIGITS == 0:
            result = a.magnitude()
            result.insert_low(n // constants.GROUP_DIGITS)
            return result.normalize()
        return DigitGroups.from_digits(magnitude_to_string(a) + "0" * n).normalize()
    if n >= a.digits():
        return DigitGroups.zero()
    if n % constants.GROUP_DIGITS == 0:
        result = a.magnitude()
        result.drop_low(n // constants.GROUP_DIGITS)
        return result
    return DigitGroups.from_digits(magnitude_to_string(a)[:-n])


# ----------------------------
# Divide
# ----------------------------

def search_quotient(window: DigitGroups, divisor: DigitGroups) -> int:
    """Largest q in [1, 9999] with divisor * q <= window.

    Requires divisor <= window < divisor * 10000. Keeps low <= answer <= high.
    """
    low, high = 1, constants.GROUP_MAX
    while low < high:
        if low + 1 == high:
            return low if compare_magnitude(window, _multiply_group(divisor, high)) < 0 else high
        mid = (low + high) >> 1
        if compare_magnitude(window, _multiply_group(divisor, mid)) < 0:
            high = mid - 1
        else:
            low = mid
    return low


def divide_magnitude(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    """|a| // |b| by long division over base-10000 groups.

    Each round takes the top groups of the running dividend matching the
    divisor's group count (one more if that slice is still smaller), finds the
    quotient group by binary search, writes it at the window's position and
    subtracts the shifted multiple. Stops once the remainder is below the divisor.
    """
    if b.is_zero():
        raise ZeroDivisionError("divide_magnitude: zero divisor")
    if compare_magnitude(a, b) < 0:
        return DigitGroups.zero()
    rest = a.magnitude()
    divisor = b.magnitude()
    g2 = divisor.size()
    result = DigitGroups([0] * rest.size())
    while rest.size() >= g2:
        g1 = rest.size()
        extra = 0
        window = rest.high_range(g2)
        if compare_magnitude(window, divisor) < 0:
            if g1 == g2:
                break
            extra = 1
            window = rest.high_range(g2 + 1)
        q = search_quotient(window, divisor)
        pos = g1 - g2 - extra
        _dbg(f"divide: g1={g1}, g2={g2}, pos={pos}, q={q}")
        multiple = _multiply_group(divisor, q)
        multiple.insert_low(pos)
        rest, _ = subtract_magnitude(rest, multiple)
        result.adjust(pos, q)
    return result.normalize()


__all__ = [
    "ShiftDirection",
    "compare_magnitude",
    "pow10_exponent",
    "add_magnitude",
    "subtract_magnitude",
    "multiply_magnitude",
    "shift10",
    "search_quotient",
    "divide_magnitude",
]
