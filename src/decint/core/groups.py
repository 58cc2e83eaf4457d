"""
Digit-group store: the little-endian base-10000 magnitude plus an explicit sign.

- Group 0 is the least-significant chunk; the last group is the most significant.
- Every group holds a magnitude in [0, 9999].
- Zero is exactly one group ``[0]`` with a positive sign (negative zero is never stored).
- Normalised stores carry no most-significant zero groups.

All mutation goes through ``push``, ``adjust`` and ``clear_excess_zeros``; the
bulk helpers (``insert_low``, ``drop_low``) enforce the same caps.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from . import constants
from .exc import BigIntegerOverflowError


class Sign(Enum):
    POSITIVE = 0
    NEGATIVE = 1


class DigitGroups:
    """Ordered base-10000 groups with a sign; the storage behind BigInteger."""

    __slots__ = ("groups", "sign")

    def __init__(self, groups: Optional[Iterable[int]] = None, sign: Sign = Sign.POSITIVE) -> None:
        self.groups: List[int] = list(groups) if groups is not None else [0]
        if not self.groups:
            self.groups = [0]
        self.sign = sign
        if self.is_zero():
            self.sign = Sign.POSITIVE

    # ------------- constructors -------------

    @classmethod
    def _blank(cls) -> "DigitGroups":
        # No groups yet; callers must push at least one.
        store = cls.__new__(cls)
        store.groups = []
        store.sign = Sign.POSITIVE
        return store

    @classmethod
    def zero(cls) -> "DigitGroups":
        return cls([0])

    @classmethod
    def from_int(cls, n: int) -> "DigitGroups":
        """Build from a native int, splitting |n| into base-10000 groups."""
        if n == 0:
            return cls.zero()
        store = cls._blank()
        m = -n if n < 0 else n
        while m:
            m, r = divmod(m, constants.BASE)
            store.push(r)
        if n < 0:
            store.sign = Sign.NEGATIVE
        return store

    @classmethod
    def from_digits(cls, digits: str) -> "DigitGroups":
        """Build a positive store from a plain run of decimal digits.

        Digits are consumed in 4-character chunks from the least-significant end.
        """
        store = cls._blank()
        width = constants.GROUP_DIGITS
        end = len(digits)
        while end > width:
            store.push(int(digits[end - width:end]))
            end -= width
        store.push(int(digits[:end]) if end > 0 else 0)
        store.clear_excess_zeros()
        return store

    # ------------- element access -------------

    def size(self) -> int:
        return len(self.groups)

    def group(self, n: int) -> int:
        return self.groups[n]

    def is_zero(self) -> bool:
        return len(self.groups) == 1 and self.groups[0] == 0

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def is_positive(self) -> bool:
        return self.sign is Sign.POSITIVE and not self.is_zero()

    def is_odd(self) -> bool:
        return (self.groups[0] & 1) == 1

    def is_even(self) -> bool:
        return (self.groups[0] & 1) == 0

    def digits(self) -> int:
        """Decimal digit count of the magnitude."""
        return (len(self.groups) - 1) * constants.GROUP_DIGITS + len(str(self.groups[-1]))

    # ------------- modifiers -------------

    def push(self, value: int) -> None:
        """Append a most-significant group."""
        if len(self.groups) >= constants.MAX_GROUPS:
            raise BigIntegerOverflowError(
                f"group count would exceed MAX_GROUPS={constants.MAX_GROUPS}"
            )
        self.groups.append(value)

    def adjust(self, n: int, value: int) -> None:
        self.groups[n] = value

    def clear_excess_zeros(self) -> None:
        """Pop most-significant zero groups, keeping at least one group."""
        groups = self.groups
        while len(groups) > 1 and groups[-1] == 0:
            groups.pop()
        if self.is_zero():
            self.sign = Sign.POSITIVE

    def normalize(self) -> "DigitGroups":
        """Strip excess zeros and enforce the group and digit caps."""
        self.clear_excess_zeros()
        if len(self.groups) > constants.MAX_GROUPS:
            raise BigIntegerOverflowError(
                f"group count {len(self.groups)} exceeds MAX_GROUPS={constants.MAX_GROUPS}"
            )
        if self.digits() > constants.MAX_DIGITS:
            raise BigIntegerOverflowError(
                f"digit count exceeds MAX_DIGITS={constants.MAX_DIGITS}"
            )
        return self

    def set_sign(self, negative: bool) -> None:
        """Apply a sign; zero always stays positive."""
        self.sign = Sign.NEGATIVE if negative and not self.is_zero() else Sign.POSITIVE

    def insert_low(self, count: int) -> None:
        """Insert ``count`` zero groups at the least-significant end (x * 10000^count)."""
        if count <= 0 or self.is_zero():
            return
        if len(self.groups) + count > constants.MAX_GROUPS:
            raise BigIntegerOverflowError(
                f"group count would exceed MAX_GROUPS={constants.MAX_GROUPS}"
            )
        self.groups[0:0] = [0] * count

    def drop_low(self, count: int) -> None:
        """Erase ``count`` least-significant groups (x // 10000^count)."""
        if count <= 0:
            return
        if count >= len(self.groups):
            self.groups = [0]
            self.sign = Sign.POSITIVE
            return
        del self.groups[:count]
        self.clear_excess_zeros()

    def swap(self, other: "DigitGroups") -> None:
        self.groups, other.groups = other.groups, self.groups
        self.sign, other.sign = other.sign, self.sign

    # ------------- views -------------

    def copy(self) -> "DigitGroups":
        dup = DigitGroups._blank()
        dup.groups = list(self.groups)
        dup.sign = self.sign
        return dup

    def magnitude(self) -> "DigitGroups":
        """Copy with the sign cleared."""
        dup = self.copy()
        dup.sign = Sign.POSITIVE
        return dup

    def high_range(self, n: int) -> "DigitGroups":
        """The ``n`` most-significant groups as a positive store.

        e.g. groups of 123456789999 are [9999, 5678, 1234]; high_range(2) is 12345678.
        """
        top = DigitGroups._blank()
        top.groups = self.groups[len(self.groups) - n:]
        top.clear_excess_zeros()
        return top

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitGroups):
            return NotImplemented
        return self.sign is other.sign and self.groups == other.groups

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DigitGroups({self.groups!r}, {self.sign.name})"


__all__ = [
    "Sign",
    "DigitGroups",
]
