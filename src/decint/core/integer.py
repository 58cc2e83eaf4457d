"""
BigInteger: arbitrary-precision signed decimal integer over base-10000 groups.

- Value range is (-10^MAX_DIGITS, 10^MAX_DIGITS); exceeding a cap raises
  BigIntegerOverflowError, never clamps.
- Signed operators reduce to the positive-magnitude primitives in arith.py using
  x + (-y) = x - y, (-x) + y = -(x - y), (-x) + (-y) = -(x + y) and friends.
- Division truncates toward zero; ``%`` is defined by (a / b) * b + (a % b) == a.
- ``<<`` / ``>>`` scale by powers of two (multiply / divide by 2**n), not by bit patterns.

Instances are mutable: compound operators, increment/decrement, ``reverse``,
``swap``, ``assign`` and ``scan`` change the receiver. Each of them computes the
new value into a scratch store first and installs it only when the whole
computation succeeded, so a failure leaves the receiver unchanged. Being
mutable, BigInteger is unhashable.
"""

from __future__ import annotations

from typing import Optional, TextIO, Tuple, Union

from . import constants
from .arith import (
    ShiftDirection,
    add_magnitude,
    compare_magnitude,
    divide_magnitude,
    multiply_magnitude,
    pow10_exponent,
    shift10,
    subtract_magnitude,
)
from .exc import (
    BigIntegerOverflowError,
    DivisionByZeroError,
    InvalidOperandError,
    NegativeShiftAmountError,
    OperandTypeError,
)
from .fmt import format_groups, print_groups, read_token
from .groups import DigitGroups
from .parse import parse_groups

# Debug printing control
DEBUG_BIGINT = False

def _dbg(msg: str) -> None:
    if DEBUG_BIGINT:
        print(msg)


# ----------------------------
# Signed dispatch on stores
# ----------------------------

def _signed_add(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    if not a.is_negative() and not b.is_negative():
        return add_magnitude(a, b)
    if not a.is_negative():
        # x + (-y) = x - y
        mag, neg = subtract_magnitude(a, b)
    elif not b.is_negative():
        # (-x) + y = -(x - y)
        mag, neg = subtract_magnitude(a, b)
        neg = not neg
    else:
        # (-x) + (-y) = -(x + y)
        mag, neg = add_magnitude(a, b), True
    mag.set_sign(neg)
    return mag


def _signed_sub(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    if not a.is_negative() and not b.is_negative():
        mag, neg = subtract_magnitude(a, b)
    elif not a.is_negative():
        # x - (-y) = x + y
        mag, neg = add_magnitude(a, b), False
    elif not b.is_negative():
        # (-x) - y = -(x + y)
        mag, neg = add_magnitude(a, b), True
    else:
        # (-x) - (-y) = -(x - y)
        mag, neg = subtract_magnitude(a, b)
        neg = not neg
    mag.set_sign(neg)
    return mag


def _signed_mul(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    if a.is_zero() or b.is_zero():
        return DigitGroups.zero()
    negative = a.is_negative() != b.is_negative()
    p = pow10_exponent(b)
    if p >= 0:
        mag = shift10(a, p, ShiftDirection.LEFT)
    else:
        mag = multiply_magnitude(a, b)
    mag.set_sign(negative)
    return mag


def _signed_div(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    if b.is_zero():
        raise DivisionByZeroError("the divisor can not be zero")
    negative = a.is_negative() != b.is_negative()
    cmp = compare_magnitude(a, b)
    if a.is_zero() or cmp < 0:
        return DigitGroups.zero()
    if cmp == 0:
        mag = DigitGroups.from_int(1)
    else:
        p = pow10_exponent(b)
        if p >= 0:
            mag = shift10(a, p, ShiftDirection.RIGHT)
        else:
            mag = divide_magnitude(a, b)
    mag.set_sign(negative)
    return mag


def _signed_mod(a: DigitGroups, b: DigitGroups) -> DigitGroups:
    if b.is_zero():
        raise DivisionByZeroError("the modulus can not be zero")
    # Only (a / b) * b + (a % b) == a is guaranteed.
    return _signed_sub(a, _signed_mul(_signed_div(a, b), b))


# ----------------------------
# BigInteger
# ----------------------------

IntegerLike = Union["BigInteger", int, str]


def _as_big(value: object) -> Optional["BigInteger"]:
    """Operand coercion for operators: BigInteger or int (not bool), else None."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger(value)
    return None


class BigInteger:
    """Arbitrary-precision signed decimal integer.

    Constructs from an int (bool is rejected: cast explicitly), from decimal or
    scientific-notation text, or from another BigInteger (copy). There is no
    default value; zero must be asked for.

        >>> b = BigInteger("999999999999")
        >>> b += BigInteger("1111111111")
        >>> str(b)
        '1001111111110'
        >>> str(-b / 10000)
        '-100111111'
    """

    __slots__ = ("_groups",)

    def __init__(self, value: IntegerLike) -> None:
        if isinstance(value, BigInteger):
            self._groups = value._groups.copy()
        elif isinstance(value, bool):
            raise OperandTypeError("bool is not accepted; convert with int() explicitly")
        elif isinstance(value, int):
            self._groups = DigitGroups.from_int(value).normalize()
        elif isinstance(value, str):
            self._groups = parse_groups(value)
        else:
            raise OperandTypeError(
                f"cannot build BigInteger from {type(value).__name__}"
            )

    @classmethod
    def _wrap(cls, store: DigitGroups) -> "BigInteger":
        obj = cls.__new__(cls)
        obj._groups = store
        return obj

    @classmethod
    def read(cls, stream: TextIO) -> "BigInteger":
        """Build from the next whitespace-delimited token of ``stream``."""
        return cls(read_token(stream))

    # ------------- predicates -------------

    def is_positive(self) -> bool:
        return self._groups.is_positive()

    def is_negative(self) -> bool:
        return self._groups.is_negative()

    def is_zero(self) -> bool:
        return self._groups.is_zero()

    def is_odd(self) -> bool:
        return self._groups.is_odd()

    def is_even(self) -> bool:
        return self._groups.is_even()

    def digits(self) -> int:
        """Number of decimal digits (zero has one)."""
        return self._groups.digits()

    def max_digits(self) -> int:
        return constants.MAX_DIGITS

    # ------------- comparison -------------

    def compare(self, other: IntegerLike) -> int:
        """Return 1 if self > other, -1 if self < other, else 0."""
        rhs = BigInteger(other) if not isinstance(other, BigInteger) else other
        a, b = self._groups, rhs._groups
        if a.is_negative() != b.is_negative():
            return -1 if a.is_negative() else 1
        if not a.is_negative():
            return compare_magnitude(a, b)
        return compare_magnitude(b, a)

    def __eq__(self, other: object) -> bool:
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self._groups == rhs._groups

    def __lt__(self, other: object) -> bool:
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    __hash__ = None  # type: ignore[assignment]

    # ------------- derived values -------------

    def copy(self) -> "BigInteger":
        return BigInteger._wrap(self._groups.copy())

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    def opposite(self) -> "BigInteger":
        """-self, without modifying self."""
        result = self.copy()
        result.reverse()
        return result

    def absolute(self) -> "BigInteger":
        """|self|, without modifying self."""
        return BigInteger._wrap(self._groups.magnitude())

    def power(self, n: IntegerLike) -> "BigInteger":
        """self ** n.

        A zero base needs a positive exponent. Negative exponents give 0 unless
        |self| == 1. The exponent must fit uint32, and the projected digit count
        must stay under MAX_DIGITS.
        """
        exp = n if isinstance(n, BigInteger) else BigInteger(n)
        base = self._groups
        if base.is_zero():
            if not exp.is_positive():
                raise InvalidOperandError("zero can only be raised to a positive power")
            return BigInteger(0)
        unit = base.size() == 1 and base.group(0) == 1
        if exp.is_negative() and not unit:
            return BigInteger(0)
        if exp.is_zero() or (unit and not base.is_negative()):
            return BigInteger(1)
        if unit:
            # (-1)^n
            return BigInteger(1 if exp.is_even() else -1)
        if exp == 1:
            return self.copy()

        count, ok = exp.to_integer(constants.POWER_EXPONENT_KIND)
        if not ok:
            raise BigIntegerOverflowError(f"exponent {exp} does not fit {constants.POWER_EXPONENT_KIND}")

        p = pow10_exponent(base)
        if p >= 0:
            shift = p * count
            if shift >= constants.MAX_DIGITS:
                raise BigIntegerOverflowError(f"10^{shift} exceeds MAX_DIGITS={constants.MAX_DIGITS}")
            mag = shift10(DigitGroups.from_int(1), shift, ShiftDirection.LEFT)
            mag.set_sign(base.is_negative() and exp.is_odd())
            return BigInteger._wrap(mag)

        if (base.digits() - 1) * count >= constants.MAX_DIGITS:
            raise BigIntegerOverflowError(
                f"power with exponent {count} would exceed MAX_DIGITS={constants.MAX_DIGITS}"
            )
        _dbg(f"power: digits={base.digits()}, n={count}")
        half = self.power(exp / 2)
        result = half * half
        if exp.is_odd():
            result *= self
        return result

    # ------------- conversions -------------

    def to_string(self) -> str:
        return format_groups(self._groups)

    def to_integer(self, kind: str = "int64") -> Tuple[int, bool]:
        """Convert to a native integer of ``kind`` (e.g. 'int32', 'uint64').

        Returns (value, True) on success and (0, False) when out of range.
        """
        try:
            low, high = constants.NATIVE_INT_RANGES[kind]
        except KeyError:
            raise InvalidOperandError(f"unknown integer kind: {kind!r}") from None
        if self.compare(BigInteger(low)) < 0 or self.compare(BigInteger(high)) > 0:
            return 0, False
        return int(self), True

    def __int__(self) -> int:
        n = 0
        for g in reversed(self._groups.groups):
            n = n * constants.BASE + g
        return -n if self.is_negative() else n

    def __index__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def print(self, sep: str = "", file: Optional[TextIO] = None) -> None:
        """Write the decimal form to ``file`` (stdout by default), then ``sep`` if given."""
        print_groups(self._groups, sep, file)

    # ------------- modifiers -------------

    def reverse(self) -> None:
        """Flip the sign in place; zero stays zero."""
        self._groups.set_sign(not self._groups.is_negative())

    def swap(self, other: "BigInteger") -> None:
        if not isinstance(other, BigInteger):
            raise OperandTypeError("swap requires a BigInteger")
        self._groups, other._groups = other._groups, self._groups

    def assign(self, value: IntegerLike) -> "BigInteger":
        """Replace the value in place with ``value`` (int, text or BigInteger)."""
        self._groups = BigInteger(value)._groups
        return self

    def scan(self, stream: TextIO) -> "BigInteger":
        """Read the next whitespace-delimited token of ``stream`` into self."""
        return self.assign(read_token(stream))

    def increment(self) -> "BigInteger":
        """Pre-increment: add one in place and return self."""
        self._groups = _signed_add(self._groups, DigitGroups.from_int(1))
        return self

    def decrement(self) -> "BigInteger":
        """Pre-decrement: subtract one in place and return self."""
        self._groups = _signed_sub(self._groups, DigitGroups.from_int(1))
        return self

    def post_increment(self) -> "BigInteger":
        """Add one in place; return the previous value."""
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self) -> "BigInteger":
        """Subtract one in place; return the previous value."""
        before = self.copy()
        self.decrement()
        return before

    # ------------- unary -------------

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        return self.opposite()

    def __abs__(self) -> "BigInteger":
        return self.absolute()

    # ------------- arithmetic -------------

    def __add__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_add(self._groups, rhs._groups))

    def __radd__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_add(lhs._groups, self._groups))

    def __iadd__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_add(self._groups, rhs._groups)
        return self

    def __sub__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_sub(self._groups, rhs._groups))

    def __rsub__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_sub(lhs._groups, self._groups))

    def __isub__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_sub(self._groups, rhs._groups)
        return self

    def __mul__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_mul(self._groups, rhs._groups))

    def __rmul__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_mul(lhs._groups, self._groups))

    def __imul__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_mul(self._groups, rhs._groups)
        return self

    # '/' and '//' both truncate toward zero.
    def __truediv__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_div(self._groups, rhs._groups))

    def __rtruediv__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_div(lhs._groups, self._groups))

    def __itruediv__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_div(self._groups, rhs._groups)
        return self

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__
    __ifloordiv__ = __itruediv__

    def __mod__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_mod(self._groups, rhs._groups))

    def __rmod__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return BigInteger._wrap(_signed_mod(lhs._groups, self._groups))

    def __imod__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_mod(self._groups, rhs._groups)
        return self

    def __divmod__(self, other: object) -> Tuple["BigInteger", "BigInteger"]:
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        q = _signed_div(self._groups, rhs._groups)
        r = _signed_sub(self._groups, _signed_mul(q, rhs._groups))
        return BigInteger._wrap(q), BigInteger._wrap(r)

    def __pow__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self.power(rhs)

    def __rpow__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return lhs.power(self)

    # ------------- power-of-two scaling -------------

    @staticmethod
    def _scale_factor(n: "BigInteger") -> "BigInteger":
        if n.is_negative():
            raise NegativeShiftAmountError(f"shift amount must be non-negative, got {n}")
        return BigInteger(2).power(n)

    def __lshift__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self * BigInteger._scale_factor(rhs)

    def __rlshift__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return lhs << self

    def __ilshift__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_mul(self._groups, BigInteger._scale_factor(rhs)._groups)
        return self

    def __rshift__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        return self / BigInteger._scale_factor(rhs)

    def __rrshift__(self, other: object) -> "BigInteger":
        lhs = _as_big(other)
        if lhs is None:
            return NotImplemented
        return lhs >> self

    def __irshift__(self, other: object) -> "BigInteger":
        rhs = _as_big(other)
        if rhs is None:
            return NotImplemented
        self._groups = _signed_div(self._groups, BigInteger._scale_factor(rhs)._groups)
        return self


__all__ = [
    "BigInteger",
    "IntegerLike",
]
