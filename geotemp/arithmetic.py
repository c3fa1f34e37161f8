"""Arithmetic on E9M22 values: addition, subtraction, product, quotient,
negation and absolute value."""

from geotemp.format import (
    BIAS,
    EMIN,
    EXP_BITS,
    FRAC_BITS,
    IMPLICIT_ONE,
    INF_POS,
    MASK_EXP,
    MASK_FRAC,
    MASK_SIGN,
    QNAN,
    WORD_MASK,
    ZERO_POS,
    count_leading_zeros,
    count_trailing_zeros,
    is_finite,
    is_infinite,
    is_nan,
    is_zero,
    normalize_and_round,
)


def _unpack(bits):
    """Unbiased exponent and mantissa (with its implicit one) of a finite value."""
    if bits & MASK_EXP:
        return ((bits & MASK_EXP) >> FRAC_BITS) - BIAS, IMPLICIT_ONE | (bits & MASK_FRAC)
    return EMIN, bits & MASK_FRAC


def _int32(value):
    """Wrap ``value`` to a 32-bit two's-complement integer."""
    value &= WORD_MASK
    return value - (1 << 32) if value & MASK_SIGN else value


def _align(mant_big, exp_big, mant_small, exp_small):
    """Bring two mantissas to a common exponent.

    The mantissa with the larger exponent is shifted left as far as it
    safely can; the other is shifted right for whatever difference remains.
    Returns (mant_big, mant_small, common_exponent).
    """
    diff = exp_big - exp_small
    if diff < EXP_BITS:
        return mant_big << diff, mant_small, exp_small
    shift = EXP_BITS - 1
    mant_big <<= shift
    exp_big -= shift
    mant_small >>= exp_big - exp_small
    return mant_big, mant_small, exp_big


def _strip_trailing_zeros(exponent, mantissa):
    zeros = count_trailing_zeros(mantissa)
    return exponent + zeros, mantissa >> zeros


def add(num1, num2):
    """Sum of two E9M22 values.

    A NaN operand is returned as is; infinities of opposite sign give a
    quiet NaN, and an infinity absorbs any finite operand.
    """
    num1 &= WORD_MASK
    num2 &= WORD_MASK
    sign1 = num1 & MASK_SIGN
    sign2 = num2 & MASK_SIGN

    if not (is_finite(num1) and is_finite(num2)):
        if is_nan(num1):
            return num1
        if is_nan(num2):
            return num2
        if is_infinite(num1):
            if is_infinite(num2) and sign1 != sign2:
                return QNAN
            return num1
        return num2

    if is_zero(num1):
        return num2
    if is_zero(num2):
        return num1

    exp1, mant1 = _unpack(num1)
    exp2, mant2 = _unpack(num2)
    if exp1 < exp2:
        mant2, mant1, exponent = _align(mant2, exp2, mant1, exp1)
    elif exp1 > exp2:
        mant1, mant2, exponent = _align(mant1, exp1, mant2, exp2)
    else:
        exponent = exp1

    if mant1 == 0:
        return num2
    if mant2 == 0:
        return num1

    if sign1 != sign2:
        if sign1:
            mant1 = -mant1
        else:
            mant2 = -mant2

    total = abs(_int32(mant1 + mant2))

    if sign1 == sign2 or absolute(num1) >= absolute(num2):
        sign = sign1
    else:
        sign = sign2

    return normalize_and_round(sign, exponent, total)


def sub(num1, num2):
    """Difference ``num1 - num2`` of two E9M22 values."""
    return add(num1, neg(num2))


def mul(num1, num2):
    """Product of two E9M22 values.

    A NaN operand is returned as is; an infinity times zero gives a signed
    quiet NaN, and an infinity times anything else a signed infinity.
    """
    num1 &= WORD_MASK
    num2 &= WORD_MASK
    sign = 0 if (num1 & MASK_SIGN) == (num2 & MASK_SIGN) else MASK_SIGN

    if not (is_finite(num1) and is_finite(num2)):
        if is_nan(num1):
            return num1
        if is_nan(num2):
            return num2
        other = num2 if is_infinite(num1) else num1
        if is_zero(other):
            return sign | QNAN
        return sign | INF_POS

    if is_zero(num1) or is_zero(num2):
        return sign

    exp1, mant1 = _strip_trailing_zeros(*_unpack(num1))
    exp2, mant2 = _strip_trailing_zeros(*_unpack(num2))

    product = mant1 * mant2
    low = product & WORD_MASK
    high = product >> 32
    exponent = exp1 + exp2 - FRAC_BITS

    if high:
        leading_zeros = count_leading_zeros(high)
        shift = 32 - leading_zeros
        sticky = 1 if low & ((1 << shift) - 1) else 0
        mantissa = ((high << leading_zeros) | (low >> shift)) & WORD_MASK
        exponent += shift
        mantissa |= sticky
    else:
        mantissa = low

    return normalize_and_round(sign, exponent, mantissa)


def div(num1, num2):
    """Quotient ``num1 / num2`` of two E9M22 values.

    A NaN operand is returned as is; 0/0 and inf/inf give a signed quiet
    NaN, x/inf gives a signed zero, inf/x and non-zero/0 a signed infinity.
    """
    num1 &= WORD_MASK
    num2 &= WORD_MASK
    sign = 0 if (num1 & MASK_SIGN) == (num2 & MASK_SIGN) else MASK_SIGN

    if not (is_finite(num1) and is_finite(num2)):
        if is_nan(num1):
            return num1
        if is_nan(num2):
            return num2
        if is_infinite(num1):
            if is_infinite(num2):
                return sign | QNAN
            return sign | INF_POS
        return sign | ZERO_POS

    if is_zero(num1):
        return sign | (QNAN if is_zero(num2) else ZERO_POS)
    if is_zero(num2):
        return sign | INF_POS

    exp1, mant1 = _unpack(num1)
    exp2, mant2 = _unpack(num2)

    leading_zeros = count_leading_zeros(mant1)
    mant1 = (mant1 << leading_zeros) & WORD_MASK
    exp1 -= leading_zeros
    exp2, mant2 = _strip_trailing_zeros(exp2, mant2)

    quotient, _ = divmod(mant1, mant2)
    exponent = exp1 - exp2 + FRAC_BITS

    return normalize_and_round(sign, exponent, quotient)


def neg(bits):
    """The E9M22 value with its sign bit flipped."""
    return (bits ^ MASK_SIGN) & WORD_MASK


def absolute(bits):
    """The E9M22 value with its sign bit cleared."""
    return bits & ~MASK_SIGN & WORD_MASK