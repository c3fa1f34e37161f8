"""Comparisons between E9M22 values.

Ordering rules: a NaN compares with nothing, not even another NaN; +0.0 and
-0.0 are equal; otherwise
-inf < -normals < -denormals < -0.0 = +0.0 < +denormals < +normals < +inf.
"""

from geotemp.format import MASK_SIGN, WORD_MASK, is_nan, is_negative, is_zero


def _operands(num1, num2):
    return num1 & WORD_MASK, num2 & WORD_MASK


def _either_nan(num1, num2):
    return is_nan(num1) or is_nan(num2)


def _both_zero(num1, num2):
    return is_zero(num1) and is_zero(num2)


def _same_sign(num1, num2):
    return (num1 & MASK_SIGN) == (num2 & MASK_SIGN)


def are_eq(num1, num2):
    """True if ``num1 == num2``."""
    num1, num2 = _operands(num1, num2)
    if _either_nan(num1, num2):
        return False
    return num1 == num2 or _both_zero(num1, num2)


def are_ne(num1, num2):
    """True if ``num1 != num2``; always true when either operand is a NaN."""
    num1, num2 = _operands(num1, num2)
    if _either_nan(num1, num2):
        return True
    if _both_zero(num1, num2):
        return False
    return num1 != num2


def are_unordered(num1, num2):
    """True if the operands cannot be ordered because one of them is a NaN."""
    num1, num2 = _operands(num1, num2)
    return _either_nan(num1, num2)


def is_gt(num1, num2):
    """True if ``num1 > num2``."""
    num1, num2 = _operands(num1, num2)
    if _either_nan(num1, num2) or _both_zero(num1, num2):
        return False
    if _same_sign(num1, num2):
        return num1 < num2 if is_negative(num1) else num1 > num2
    return is_negative(num2)


def is_ge(num1, num2):
    """True if ``num1 >= num2``."""
    num1, num2 = _operands(num1, num2)
    if _either_nan(num1, num2):
        return False
    if _both_zero(num1, num2):
        return True
    if _same_sign(num1, num2):
        return num1 <= num2 if is_negative(num1) else num1 >= num2
    return is_negative(num2)


def is_lt(num1, num2):
    """True if ``num1 < num2``."""
    num1, num2 = _operands(num1, num2)
    if _either_nan(num1, num2) or _both_zero(num1, num2):
        return False
    if _same_sign(num1, num2):
        return num1 > num2 if is_negative(num1) else num1 < num2
    return is_negative(num1)


def is_le(num1, num2):
    """True if ``num1 <= num2``."""
    num1, num2 = _operands(num1, num2)
    if _either_nan(num1, num2):
        return False
    if _both_zero(num1, num2):
        return True
    if _same_sign(num1, num2):
        return num1 >= num2 if is_negative(num1) else num1 <= num2
    return is_negative(num1)