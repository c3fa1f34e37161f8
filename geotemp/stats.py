"""Average, maximum and minimum of a table of E9M22 temperatures.

A table holds one row per city and one column per month (twelve columns),
every temperature being an E9M22 value in degrees Celsius.
"""

from dataclasses import dataclass

from geotemp.arithmetic import add, div
from geotemp.compare import is_gt, is_lt
from geotemp.conversions import from_int
from geotemp.scales import celsius_to_fahrenheit

MONTHS = 12

_TWELVE = 0x40A00000


@dataclass(frozen=True)
class MaxMin:
    """Extreme temperatures of a row or column, with their positions."""

    tmin_c: int
    tmax_c: int
    tmin_f: int
    tmax_f: int
    id_min: int
    id_max: int


def _summarise(values, count):
    """Average of ``values`` divided by E9M22 ``count``, with their extremes.

    On ties the first occurrence of the minimum or maximum is kept.
    """
    first, *rest = values
    total = tmin = tmax = first
    id_min = id_max = 0
    for index, value in enumerate(rest, start=1):
        total = add(total, value)
        if is_gt(value, tmax):
            tmax, id_max = value, index
        if is_lt(value, tmin):
            tmin, id_min = value, index

    extremes = MaxMin(
        tmin_c=tmin,
        tmax_c=tmax,
        tmin_f=celsius_to_fahrenheit(tmin),
        tmax_f=celsius_to_fahrenheit(tmax),
        id_min=id_min,
        id_max=id_max,
    )
    return div(total, count), extremes


def city_stats(table, city):
    """Average, extremes and their months for row ``city`` of ``table``.

    Returns ``(average, MaxMin)``; the average is an E9M22 value in Celsius.
    """
    if not 0 <= city < len(table):
        raise IndexError(f"city index {city} out of range")
    row = table[city]
    if len(row) != MONTHS:
        raise ValueError(f"a city row must hold {MONTHS} temperatures, not {len(row)}")
    return _summarise(row, _TWELVE)


def month_stats(table, month):
    """Average, extremes and their cities for column ``month`` of ``table``.

    Returns ``(average, MaxMin)``; the average is an E9M22 value in Celsius.
    """
    if not table:
        raise ValueError("the table must hold at least one row")
    if not 0 <= month < MONTHS:
        raise IndexError(f"month index {month} out of range")
    column = [row[month] for row in table]
    return _summarise(column, from_int(len(column)))