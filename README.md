# geotemp

Monthly temperature statistics for cities of both hemispheres, computed
entirely in **E9M22**. E9M22 is a 32-bit floating-point format with 1 sign
bit, 9 exponent bits (bias 255) and 22 mantissa bits. Every value is a
plain Python `int` that holds the unsigned 32-bit encoding. All arithmetic
works on the bits and rounds to nearest, ties to even.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
geotemp
```

The command first converts every bundled temperature to E9M22. It then
turns the Fahrenheit rows into Celsius. After that it prints four
summaries:

- the city George Town;
- August in the northern hemisphere;
- the city Wellington;
- December in the southern hemisphere.

Each summary gives three values:

- the average in °C;
- the minimum in °C and °F, with the month or city where it occurs;
- the maximum in °C and °F, with the month or city where it occurs.

```
geotemp --demo
```

This prints the area `(B + b) * h / 2` of an example trapezium instead.
The trapezium has B = 45.12, b = 30.75 and h = 29.99. The area is given
both as a decimal value and as its E9M22 encoding.

## Library

### The format

`geotemp.format` defines the bit masks and some named constants. Examples
of the constants are `ZERO_POS`, `INF_NEG`, `QNAN`, `MAX_NORM`, `VALUE_1`
and `VALUE_0_001`. The module also provides classifiers and bit-level
helpers:

```python
from geotemp.format import make_e9m22, is_nan, is_negative

one = make_e9m22(1.0)            # 0x3FC00000
is_negative(make_e9m22(-5.125))  # True
```

The classifiers are `is_normal`, `is_denormal`, `is_zero`, `is_infinite`,
`is_nan`, `is_finite` and `is_negative`.

The other helpers are:

- `count_leading_zeros` and `count_trailing_zeros`, which count zero bits
  in a 32-bit word;
- `round_nearest_even(mantissa, shift)`, which rounds a mantissa before a
  right shift;
- `normalize_and_round(sign, exponent, mantissa)`, which builds an E9M22
  value. It returns a signed infinity on overflow, and a denormal or a
  signed zero on underflow.

### Conversions

`geotemp.conversions` converts between E9M22 values and Python numbers.

`to_float(bits)` and `from_float(value)` go through IEEE binary32:

- NaNs keep their sign, their quiet/signalling bits and their low payload.
- Values outside the binary32 range become a signed infinity.
- Values too small for binary32 become a denormal or a signed zero.

`to_int(bits)` rounds to nearest even:

- NaNs, infinities and magnitudes beyond 2**31 saturate to ±0x7FFFFFFF.
- Magnitudes below one give 0.

`from_int(value)` also rounds to nearest even. It raises `ValueError` for
a value outside the 32-bit signed range.

### Arithmetic and comparison

`geotemp.arithmetic` provides `add`, `sub`, `mul`, `div`, `neg` and
`absolute`. They handle zeros, denormals, infinities and NaNs:

- A NaN operand is returned as it is.
- `inf - inf`, `inf * 0`, `0 / 0` and `inf / inf` give a quiet NaN.
- A non-zero value divided by zero gives a signed infinity.

`geotemp.compare` provides `are_eq`, `are_ne`, `are_unordered`, `is_gt`,
`is_ge`, `is_lt` and `is_le`. Each returns a `bool`. They follow the usual
floating-point ordering:

- A NaN compares with nothing. Of these functions, only `are_ne` and
  `are_unordered` are true for a NaN.
- `+0` and `-0` are equal.

```python
from geotemp.arithmetic import add, div
from geotemp.compare import is_gt
from geotemp.conversions import from_float, to_float

x = add(from_float(45.12), from_float(30.75))
print(to_float(div(x, from_float(2.0))))
print(is_gt(x, from_float(70.0)))
```

### Temperature scales and statistics

`geotemp.scales` works on E9M22 values:

- `celsius_to_fahrenheit(value)` computes `value * 9/5 + 32`.
- `fahrenheit_to_celsius(value)` computes `(value - 32) * 5/9`.

`geotemp.stats` works on a table that has one row per city and twelve
monthly columns of E9M22 Celsius values:

- `city_stats(table, city)` summarises one row.
- `month_stats(table, month)` summarises one column.

Each returns a pair `(average, MaxMin)`. The frozen `MaxMin` dataclass has
these fields:

- `tmin_c`, `tmax_c`, `tmin_f` and `tmax_f`, the minimum and maximum in
  both scales;
- `id_min` and `id_max`, the index of each extreme. On ties the first
  occurrence is kept.

Both functions raise `IndexError` for an index that is out of range.
`city_stats` raises `ValueError` for a row that does not hold twelve
values. `month_stats` raises `ValueError` for an empty table.

### Bundled data

`geotemp.data` holds the 2020 average monthly temperatures:

- `north_cities()` returns the northern-hemisphere cities.
- `south_cities()` returns the southern-hemisphere cities.

Each city is a frozen `CityInfo` with a `name`, a `scale` (`"C"` or `"F"`)
and twelve `temperatures` as floats.

### Report helpers

`geotemp.report` has the pieces behind the command line:

- `to_e9m22_table(rows)` converts rows of numbers to rows of E9M22 values.
- `normalize_temperatures(cities, table)` returns a copy of the table with
  the Fahrenheit rows converted to Celsius.
- `trapezium_area(long_base, short_base, height)` computes the area of a
  trapezium.
- `run()` returns the four `(average, MaxMin)` pairs that the command
  prints.
- `main(argv=None)` is the command itself.