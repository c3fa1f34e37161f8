"""E9M22 floating-point arithmetic and temperature statistics for bundled city data."""

__version__ = "0.1.0"