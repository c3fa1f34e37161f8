"""Monthly temperature summaries for cities of both hemispheres, in E9M22."""

import argparse

from geotemp.arithmetic import add, div, mul
from geotemp.conversions import from_float, to_float
from geotemp.data import north_cities, south_cities
from geotemp.format import VALUE_2
from geotemp.scales import fahrenheit_to_celsius
from geotemp.stats import city_stats, month_stats

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Values of the trapezium worked example, in centimetres.
LONG_BASE = 0x411A3D70   # 45.12
SHORT_BASE = 0x40FB0000  # 30.75
HEIGHT = 0x40F7F5C2      # 29.99


def to_e9m22_table(rows):
    """Convert rows of numbers to rows of E9M22 values, each taken as binary32."""
    return [[from_float(value) for value in row] for row in rows]


def normalize_temperatures(cities, table):
    """Return ``table`` with every Fahrenheit row converted to Celsius.

    ``cities`` gives, row by row, the scale each row of ``table`` is in.
    Rows in Celsius are copied unchanged.
    """
    cities = list(cities)
    table = list(table)
    if len(cities) != len(table):
        raise ValueError(
            f"{len(cities)} cities given for a table of {len(table)} rows"
        )
    return [
        [fahrenheit_to_celsius(value) for value in row] if city.scale == "F" else list(row)
        for city, row in zip(cities, table)
    ]


def trapezium_area(long_base, short_base, height):
    """Area ``(B + b) * h / 2`` of a trapezium, all values in E9M22."""
    return div(mul(add(long_base, short_base), height), VALUE_2)


def _celsius_table(cities):
    table = to_e9m22_table(city.temperatures for city in cities)
    return normalize_temperatures(cities, table)


def run():
    """Compute the four reference summaries.

    Returns a list of ``(average, MaxMin)`` pairs, in this order: the city
    George Town, August in the north, the city Wellington, December in the
    south.
    """
    north = _celsius_table(north_cities())
    south = _celsius_table(south_cities())
    return [
        city_stats(north, 6),
        month_stats(north, 7),
        city_stats(south, 18),
        month_stats(south, 11),
    ]


def _describe(title, average, extremes, min_label, max_label):
    return "\n".join(
        (
            title,
            f"  average: {to_float(average):.4f} C (0x{average:08X})",
            f"  minimum: {to_float(extremes.tmin_c):.4f} C / "
            f"{to_float(extremes.tmin_f):.4f} F in {min_label}",
            f"  maximum: {to_float(extremes.tmax_c):.4f} C / "
            f"{to_float(extremes.tmax_f):.4f} F in {max_label}",
        )
    )


def main(argv=None):
    """Print the reference summaries, or the trapezium example with --demo."""
    parser = argparse.ArgumentParser(
        prog="geotemp",
        description="Average, maximum and minimum temperatures in E9M22 arithmetic.",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="compute the area of the example trapezium instead",
    )
    args = parser.parse_args(argv)

    if args.demo:
        area = trapezium_area(LONG_BASE, SHORT_BASE, HEIGHT)
        print(f"trapezium area: {to_float(area):.5f} cm^2 (0x{area:08X})")
        return 0

    north = north_cities()
    south = south_cities()
    (gt_avg, gt_mm), (aug_avg, aug_mm), (wl_avg, wl_mm), (dec_avg, dec_mm) = run()
    blocks = (
        _describe(
            f"City {north[6].name}", gt_avg, gt_mm,
            MONTH_NAMES[gt_mm.id_min], MONTH_NAMES[gt_mm.id_max],
        ),
        _describe(
            "August, northern hemisphere", aug_avg, aug_mm,
            north[aug_mm.id_min].name, north[aug_mm.id_max].name,
        ),
        _describe(
            f"City {south[18].name}", wl_avg, wl_mm,
            MONTH_NAMES[wl_mm.id_min], MONTH_NAMES[wl_mm.id_max],
        ),
        _describe(
            "December, southern hemisphere", dec_avg, dec_mm,
            south[dec_mm.id_min].name, south[dec_mm.id_max].name,
        ),
    )
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())