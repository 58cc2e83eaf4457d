import pytest

from decint.core.arith import (
    ShiftDirection,
    add_magnitude,
    compare_magnitude,
    divide_magnitude,
    multiply_magnitude,
    pow10_exponent,
    search_quotient,
    shift10,
    subtract_magnitude,
)
from decint.core.exc import BigIntegerOverflowError
from decint.core.groups import DigitGroups, Sign


def _g(n: int) -> DigitGroups:
    return DigitGroups.from_int(n)


def _int(s: DigitGroups) -> int:
    n = 0
    for g in reversed(s.groups):
        n = n * 10000 + g
    return -n if s.is_negative() else n


# -----------------------------
# Comparison / power-of-ten detection
# -----------------------------

@pytest.mark.parametrize(
    "a,b,expected",
    [
        (0, 0, 0),
        (5, 7, -1),
        (10000, 9999, 1),
        (999999999999, 1000000000000, -1),
        (123456789, 123456789, 0),
        (-50, 40, 1),
    ],
)
def test_compare_magnitude(a, b, expected):
    print(f"[compare_magnitude] |{a}| vs |{b}| -> {expected}")
    assert compare_magnitude(_g(a), _g(b)) == expected


@pytest.mark.parametrize(
    "n,k",
    [(1, 0), (10, 1), (1000, 3), (10000, 4), (100000, 5), (10 ** 13, 13),
     (0, -1), (20, -1), (10001, -1), (110000, -1), (9999, -1)],
)
def test_pow10_exponent(n, k):
    assert pow10_exponent(_g(n)) == k


# -----------------------------
# Add / subtract
# -----------------------------

def test_add_carries_across_groups():
    print("[add] 99999999 + 1 -> [0, 0, 1]")
    assert add_magnitude(_g(99999999), _g(1)).groups == [0, 0, 1]
    assert add_magnitude(_g(1), _g(99999999)).groups == [0, 0, 1]
    assert add_magnitude(_g(9999), _g(1)).groups == [0, 1]


@pytest.mark.parametrize(
    "a,b",
    [(0, 0), (0, 5), (123, 0), (5555, 4445), (10 ** 20 - 1, 1), (987654321, 123456789012345)],
)
def test_add_matches_int(a, b):
    assert _int(add_magnitude(_g(a), _g(b))) == a + b


def test_add_ignores_signs():
    s = add_magnitude(_g(-5), _g(-7))
    assert s.groups == [12]
    assert s.sign is Sign.POSITIVE


@pytest.mark.parametrize(
    "a,b,mag,neg",
    [
        (8, 5, 3, False),
        (5, 8, 3, True),
        (7, 7, 0, False),
        (0, 9, 9, True),
        (9, 0, 9, False),
        (10000, 1, 9999, False),
        (10 ** 16, 1, 10 ** 16 - 1, False),
        (1, 10 ** 16, 10 ** 16 - 1, True),
        (100020003, 100010004, 9999, False),
    ],
)
def test_subtract_magnitude(a, b, mag, neg):
    print(f"[subtract] {a} - {b} -> ({mag}, negative={neg})")
    r, negative = subtract_magnitude(_g(a), _g(b))
    assert _int(r) == mag
    assert negative is neg
    assert r.sign is Sign.POSITIVE


def test_subtract_normalises_result():
    r, _ = subtract_magnitude(_g(100000000), _g(99999999))
    assert r.groups == [1]


# -----------------------------
# Multiply
# -----------------------------

@pytest.mark.parametrize(
    "a,b",
    [
        (9999, 9999),
        (12345678, 87654321),
        (10 ** 12 + 1, 10 ** 12 - 1),
        (2 ** 64 - 1, 2 ** 64 - 1),
        (123456789, 1),
        (40000, 5),
    ],
)
def test_multiply_matches_int(a, b):
    assert _int(multiply_magnitude(_g(a), _g(b))) == a * b


def test_multiply_by_zero():
    assert multiply_magnitude(_g(0), _g(123)).is_zero()
    assert multiply_magnitude(_g(123), _g(0)).is_zero()


def test_multiply_digit_cap(synthetic_caps):
    print("[multiply-cap] MAX_DIGITS=10, 6-digit * 6-digit (>= 11 digits) -> overflow")
    synthetic_caps(max_digits=10)
    assert _int(multiply_magnitude(_g(12345), _g(123456))) == 12345 * 123456
    with pytest.raises(BigIntegerOverflowError):
        multiply_magnitude(_g(123456), _g(123456))


def test_multiply_group_cap(synthetic_caps):
    synthetic_caps(max_groups=3)
    with pytest.raises(BigIntegerOverflowError):
        multiply_magnitude(_g(10 ** 8), _g(10 ** 8))


# -----------------------------
# Decimal shift
# -----------------------------

@pytest.mark.parametrize("n", [0, 1, 3, 4, 5, 8, 13])
def test_shift10_left(n):
    a = _g(123456)
    assert _int(shift10(a, n, ShiftDirection.LEFT)) == 123456 * 10 ** n


@pytest.mark.parametrize("n", [0, 1, 3, 4, 5, 6, 8, 20])
def test_shift10_right(n):
    a = _g(123456789)
    assert _int(shift10(a, n, ShiftDirection.RIGHT)) == 123456789 // 10 ** n


def test_shift10_returns_positive_copy():
    a = _g(-42)
    r = shift10(a, 4, ShiftDirection.LEFT)
    assert r.groups == [0, 42] and r.sign is Sign.POSITIVE
    assert a.groups == [42] and a.sign is Sign.NEGATIVE


def test_shift10_zero_stays_zero():
    assert shift10(_g(0), 7, ShiftDirection.LEFT).is_zero()


def test_shift10_left_digit_cap(synthetic_caps):
    synthetic_caps(max_digits=12)
    assert shift10(_g(123), 9, ShiftDirection.LEFT).digits() == 12
    with pytest.raises(BigIntegerOverflowError):
        shift10(_g(123), 10, ShiftDirection.LEFT)


# -----------------------------
# Divide
# -----------------------------

@pytest.mark.parametrize(
    "window,divisor,q",
    [(99, 7, 14), (7, 7, 1), (123456789, 12346, 9999), (99999999, 10000, 9999), (20000, 10001, 1)],
)
def test_search_quotient(window, divisor, q):
    print(f"[search] largest q with {divisor}*q <= {window} -> {q}")
    assert search_quotient(_g(window), _g(divisor)) == q


@pytest.mark.parametrize(
    "a,b",
    [
        (100, 7),
        (10000, 3),
        (99999999, 9999),
        (100020001, 10001),
        (200020002, 10001),
        (10 ** 20 + 7, 10 ** 10 + 3),
        (10 ** 24, 99990001),
        (2 ** 128 + 12345, 2 ** 64 - 59),
        (123456789012345678901234567890, 987654321),
        (5, 5),
        (4, 5),
    ],
)
def test_divide_matches_int(a, b):
    print(f"[divide] {a} // {b} -> {a // b}")
    assert _int(divide_magnitude(_g(a), _g(b))) == a // b


def test_divide_places_last_quotient_group():
    print("[divide-last-window] 10001^2 // 10001 needs the low group filled")
    assert divide_magnitude(_g(100020001), _g(10001)).groups == [1, 1]


def test_divide_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        divide_magnitude(_g(1), _g(0))
