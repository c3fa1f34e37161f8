"""Temperature scale conversions on E9M22 values."""

from geotemp.arithmetic import add, mul, sub
from geotemp.format import make_e9m22

_NINE_FIFTHS = make_e9m22(9.0 / 5.0)
_FIVE_NINTHS = make_e9m22(5.0 / 9.0)
_THIRTY_TWO = make_e9m22(32.0)


def celsius_to_fahrenheit(value):
    """Convert an E9M22 Celsius temperature: ``value * 9/5 + 32``."""
    return add(mul(value, _NINE_FIFTHS), _THIRTY_TWO)


def fahrenheit_to_celsius(value):
    """Convert an E9M22 Fahrenheit temperature: ``(value - 32) * 5/9``."""
    return mul(sub(value, _THIRTY_TWO), _FIVE_NINTHS)