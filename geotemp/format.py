"""Bit layout, classification and normalisation of E9M22 floating-point values.

An E9M22 value is a 32-bit pattern: 1 sign bit (bit 31), 9 exponent bits
(bits 30..22, excess 255) and 22 fraction bits (bits 21..0). Values are
handled as plain Python ints holding the unsigned 32-bit pattern.
"""

import struct

WORD_MASK = 0xFFFFFFFF

EXP_BITS = 9
FRAC_BITS = 31 - EXP_BITS
BIAS = (1 << (EXP_BITS - 1)) - 1
EMAX = BIAS
EMIN = 1 - BIAS

MASK_FRAC = (1 << FRAC_BITS) - 1
MASK_EXP = 0x7FFFFFFF ^ MASK_FRAC
MASK_SIGN = 1 << 31
IMPLICIT_ONE = 1 << FRAC_BITS

ZERO_POS = 0x00000000
ZERO_NEG = 0x80000000
INF_POS = 0x7FC00000
INF_NEG = 0xFFC00000
QNAN = 0x7FE00000
SNAN = 0x7FD00000

MAX_NORM = 0x7FBFFFFF
MIN_NORM = 0x004FFFFF
MAX_DNORM = 0x003FFFFF
MIN_DNORM = 0x00000001

VALUE_1 = 0x3FC00000
VALUE_2 = 0x40000000
VALUE_5 = 0x40500000
VALUE_10 = 0x40900000
VALUE_20 = 0x40D00000
VALUE_50 = 0x41240000
VALUE_100 = 0x41640000
VALUE_200 = 0x41A40000
VALUE_500 = 0x41FD0000
VALUE_1000 = 0x423D0000
VALUE_2000 = 0x427D0000
VALUE_5000 = 0x42CE2000
VALUE_10_000 = 0x430E2000
VALUE_20_000 = 0x434E2000
VALUE_50_000 = 0x43A1A800
VALUE_100_000 = 0x43E1A800
VALUE_200_000 = 0x4421A800
VALUE_500_000 = 0x447A1200
VALUE_1_000_000 = 0x44BA1200
VALUE_2_000_000 = 0x44FA1200
VALUE_5_000_000 = 0x454C4B40
VALUE_0_1 = 0x3EE66666
VALUE_0_2 = 0x3F266666
VALUE_0_5 = 0x3F800000
VALUE_0_01 = 0x3E11EB85
VALUE_0_02 = 0x3E51EB85
VALUE_0_05 = 0x3EA66666
VALUE_0_001 = 0x3D418937
VALUE_0_002 = 0x3D818937
VALUE_0_005 = 0x3DD1EB85
VALUE_0_0001 = 0x3C68DB8B
VALUE_0_0002 = 0x3CA8DB8B
VALUE_0_0005 = 0x3D018937


def is_normal(bits):
    """True if the exponent field is neither all zeros nor all ones."""
    exp = bits & MASK_EXP
    return exp != 0 and exp != MASK_EXP


def is_denormal(bits):
    """True for a non-zero value with a zero exponent field."""
    return (bits & MASK_EXP) == 0 and (bits & MASK_FRAC) != 0


def is_zero(bits):
    """True for +0.0 and -0.0."""
    return (bits & (MASK_EXP | MASK_FRAC)) == 0


def is_infinite(bits):
    """True for +inf and -inf."""
    return (bits & MASK_EXP) == MASK_EXP and (bits & MASK_FRAC) == 0


def is_nan(bits):
    """True for any NaN pattern."""
    return (bits & MASK_EXP) == MASK_EXP and (bits & MASK_FRAC) != 0


def is_finite(bits):
    """True unless the value is an infinity or a NaN."""
    return (bits & MASK_EXP) != MASK_EXP


def is_negative(bits):
    """True if the sign bit is set."""
    return (bits & MASK_SIGN) != 0


def _float32_bits(value):
    """Bit pattern of ``value`` rounded to IEEE 754 binary32."""
    try:
        return struct.unpack(">I", struct.pack(">f", value))[0]
    except OverflowError:
        sign = 0x80000000 if value < 0 else 0
        return sign | 0x7F800000


def make_e9m22(value):
    """Encode a real number as E9M22 through its binary32 representation.

    Zero and binary32 denormals become a signed zero; infinities and NaNs
    are not given special treatment.
    """
    bits = _float32_bits(value)
    sign = bits & 0x80000000
    if not bits & 0x7F800000:
        return sign
    exponent = ((bits & 0x7F800000) >> 23) - 127 + BIAS
    return (sign | (exponent << FRAC_BITS) | ((bits & 0x7FFFFF) >> 1)) & WORD_MASK


def count_leading_zeros(num):
    """Number of zero bits above the highest set bit of a 32-bit word."""
    return 32 - (num & WORD_MASK).bit_length()


def count_trailing_zeros(num):
    """Number of zero bits below the lowest set bit of a 32-bit word."""
    num &= WORD_MASK
    if num == 0:
        return 32
    return (num & -num).bit_length() - 1


def round_nearest_even(mantissa, shift):
    """Round ``mantissa`` to nearest, ties to even, before a right shift.

    Returns the mantissa, possibly incremented at the bit that becomes the
    least significant one after shifting right by ``shift``; it is not shifted.
    """
    mantissa &= WORD_MASK
    result = mantissa
    if shift >= 2:
        mask_guard = 1 << shift
        mask_round = mask_guard >> 1
        mask_sticky = mask_round - 1
        guard = (mantissa & mask_guard) != 0
        round_bit = (mantissa & mask_round) != 0
        sticky = (mantissa & mask_sticky) != 0
        if round_bit and (guard or sticky):
            result += mask_guard
    elif shift == 1:
        if (mantissa & 3) == 3:
            result += 2
    return result & WORD_MASK


def normalize_and_round(sign, exponent, mantissa):
    """Build an E9M22 value from a sign bit, an exponent and a raw mantissa.

    The mantissa is shifted so that its leading one lands on the implicit
    bit, rounding to nearest even when bits are dropped. Exponents above
    the range give a signed infinity; below it, a denormal or signed zero.
    """
    mantissa &= WORD_MASK
    leading_zeros = count_leading_zeros(mantissa)
    if leading_zeros == 32:
        return sign & WORD_MASK

    exponent += EXP_BITS - leading_zeros
    if leading_zeros < EXP_BITS:
        shift = EXP_BITS - leading_zeros
        result = round_nearest_even(mantissa, shift)
        if count_leading_zeros(result) < leading_zeros:
            shift += 1
            exponent += 1
        result >>= shift
    elif leading_zeros > EXP_BITS:
        result = (mantissa << (leading_zeros - EXP_BITS)) & WORD_MASK
    else:
        result = mantissa

    if exponent > EMAX:
        return (sign | MASK_EXP) & WORD_MASK
    if exponent < EMIN:
        return (sign | (mantissa >> (EMIN - exponent))) & WORD_MASK
    return (sign | ((exponent + BIAS) << FRAC_BITS) | (result & MASK_FRAC)) & WORD_MASK