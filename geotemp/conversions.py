"""Conversions between E9M22 values and Python floats and ints."""

import struct

from geotemp.format import (
    BIAS,
    EXP_BITS,
    FRAC_BITS,
    IMPLICIT_ONE,
    MASK_EXP,
    MASK_FRAC,
    MASK_SIGN,
    WORD_MASK,
    count_leading_zeros,
    is_finite,
    is_infinite,
    is_nan,
    is_negative,
    is_normal,
    is_zero,
    round_nearest_even,
)

FLOAT_FRAC_BITS = 23
FLOAT_BIAS = 127
FLOAT_MASK_FRAC = (1 << FLOAT_FRAC_BITS) - 1
FLOAT_MASK_EXP = 0x7FFFFFFF ^ FLOAT_MASK_FRAC
FLOAT_EMIN = 1 - FLOAT_BIAS
FLOAT_EMAX = FLOAT_BIAS

INT32_MAX = 0x7FFFFFFF
INT32_MIN = -0x80000000


def _single_bits(value):
    """Bit pattern of ``value`` as IEEE 754 binary32, overflowing to infinity."""
    try:
        return struct.unpack(">I", struct.pack(">f", value))[0]
    except OverflowError:
        sign = MASK_SIGN if value < 0 else 0
        return sign | FLOAT_MASK_EXP


def _single_value(bits):
    """The binary32 number whose bit pattern is ``bits``."""
    return struct.unpack(">f", struct.pack(">I", bits & WORD_MASK))[0]


def to_float(bits):
    """Convert an E9M22 value to the nearest binary32 number, as a float.

    NaNs keep their sign, quiet/signalling bits and low payload; values
    beyond the binary32 range become a signed infinity, and values below it
    become a binary32 denormal or a signed zero.
    """
    bits &= WORD_MASK
    sign = bits & MASK_SIGN

    if is_nan(bits):
        single = (
            sign
            | FLOAT_MASK_EXP
            | ((bits & 0x00300000) << 1)
            | (bits & 0x0000FFFF)
        )
        return _single_value(single)

    exponent = ((bits & MASK_EXP) >> FRAC_BITS) - BIAS
    if is_infinite(bits) or exponent > FLOAT_EMAX:
        single = sign | FLOAT_MASK_EXP
    elif is_zero(bits) or exponent < FLOAT_EMIN:
        if exponent >= FLOAT_EMIN - FLOAT_FRAC_BITS:
            shift = FLOAT_EMIN - 1 - exponent
            single = sign | ((IMPLICIT_ONE | (bits & MASK_FRAC)) >> shift)
        else:
            single = sign
    else:
        single = (
            sign
            | ((exponent + FLOAT_BIAS) << FLOAT_FRAC_BITS)
            | ((bits << 1) & FLOAT_MASK_FRAC)
        )
    return _single_value(single)


def from_float(value):
    """Convert a number, taken as binary32, to an E9M22 value.

    Infinities and NaNs (with their quiet/signalling bits and payload) are
    kept; binary32 denormals become normal E9M22 values.
    """
    single = _single_bits(value)
    sign = single & MASK_SIGN

    if (single & FLOAT_MASK_EXP) == FLOAT_MASK_EXP:
        if single & FLOAT_MASK_FRAC:
            return (
                sign
                | MASK_EXP
                | ((single & 0x00600000) >> 1)
                | (single & 0x000FFFFF)
            )
        return sign | MASK_EXP

    if single & FLOAT_MASK_EXP:
        exponent = ((single & FLOAT_MASK_EXP) >> FLOAT_FRAC_BITS) - FLOAT_BIAS + BIAS
        return sign | (exponent << FRAC_BITS) | ((single >> 1) & MASK_FRAC)

    if (single & FLOAT_MASK_FRAC) == 0:
        return single

    exponent = FLOAT_EMIN
    mantissa = single & FLOAT_MASK_FRAC
    leading_zeros = count_leading_zeros(mantissa)
    mantissa = (mantissa << (leading_zeros - 8)) & WORD_MASK
    exponent -= leading_zeros - 8
    return sign | ((exponent + BIAS) << FRAC_BITS) | (mantissa & MASK_FRAC)


def to_int(bits):
    """Convert an E9M22 value to an int, rounding to nearest, ties to even.

    NaNs, infinities and magnitudes beyond 2**31 saturate to +/-0x7FFFFFFF;
    magnitudes below one, denormals and zeros give 0.
    """
    bits &= WORD_MASK
    exponent = ((bits & MASK_EXP) >> FRAC_BITS) - BIAS

    if is_finite(bits) and exponent <= 30:
        if is_normal(bits) and exponent >= 0:
            result = IMPLICIT_ONE | (bits & MASK_FRAC)
            if exponent < FRAC_BITS:
                shift = FRAC_BITS - exponent
                result = round_nearest_even(result, shift) >> shift
            elif exponent > FRAC_BITS:
                result <<= exponent - FRAC_BITS
        else:
            result = 0
    else:
        result = INT32_MAX

    return -result if is_negative(bits) else result


def from_int(value):
    """Convert a 32-bit signed integer to E9M22, rounding to nearest even.

    Raises ValueError if ``value`` does not fit in a 32-bit signed integer.
    """
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"{value} does not fit in a 32-bit signed integer")

    sign = 0
    if value < 0:
        value = -value
        sign = MASK_SIGN
    magnitude = value & WORD_MASK

    leading_zeros = count_leading_zeros(magnitude)
    if leading_zeros == 32:
        return 0

    exponent = 31 - leading_zeros
    if leading_zeros < EXP_BITS:
        shift = EXP_BITS - leading_zeros
        result = round_nearest_even(magnitude, shift)
        if count_leading_zeros(result) < leading_zeros:
            shift += 1
            exponent += 1
        result >>= shift
    elif leading_zeros > EXP_BITS:
        result = magnitude << (leading_zeros - EXP_BITS)
    else:
        result = magnitude

    return (sign | ((exponent + BIAS) << FRAC_BITS) | (result & MASK_FRAC)) & WORD_MASK