import pytest

from geotemp.conversions import from_float, to_float
from geotemp.data import CityInfo
from geotemp.format import MASK_SIGN, VALUE_1, VALUE_200
from geotemp.report import (
    HEIGHT,
    LONG_BASE,
    SHORT_BASE,
    main,
    normalize_temperatures,
    run,
    to_e9m22_table,
    trapezium_area,
)
from geotemp.scales import fahrenheit_to_celsius


def _close(actual, expected):
    assert to_float(actual) == pytest.approx(to_float(expected), rel=1e-5)


def _city(name, scale):
    return CityInfo(name, scale, tuple(float(i) for i in range(12)))


def test_to_e9m22_table_converts_each_value():
    table = to_e9m22_table([[1.0, -200.0], [0.0]])
    assert table == [[VALUE_1, MASK_SIGN | VALUE_200], [0]]


def test_to_e9m22_table_round_trips_through_float():
    rows = [[13.4, -2.2, 56.7], [-89.2, 0.5, 25.9]]
    table = to_e9m22_table(rows)
    for row, converted in zip(rows, table):
        for value, bits in zip(row, converted):
            assert to_float(bits) == pytest.approx(value, rel=1e-6)


def test_normalize_converts_only_fahrenheit_rows():
    cities = [_city("A", "C"), _city("B", "F")]
    table = [[from_float(50.0)] * 12, [from_float(212.0)] * 12]
    result = normalize_temperatures(cities, table)
    assert result[0] == table[0]
    assert result[1] == [fahrenheit_to_celsius(from_float(212.0))] * 12
    assert to_float(result[1][0]) == pytest.approx(100.0, rel=1e-5)


def test_normalize_does_not_modify_input():
    cities = [_city("B", "F")]
    table = [[from_float(32.0)] * 12]
    original = [list(row) for row in table]
    normalize_temperatures(cities, table)
    assert table == original


def test_normalize_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        normalize_temperatures([_city("A", "C")], [])


def test_trapezium_area_matches_worked_example():
    area = trapezium_area(LONG_BASE, SHORT_BASE, HEIGHT)
    assert to_float(area) == pytest.approx(1137.67041, abs=0.01)


def test_trapezium_area_is_symmetric_in_bases():
    assert trapezium_area(LONG_BASE, SHORT_BASE, HEIGHT) == trapezium_area(
        SHORT_BASE, LONG_BASE, HEIGHT
    )


def test_run_george_town():
    avg, mm = run()[0]
    _close(avg, 0x40EF8E39)
    _close(mm.tmin_c, 0x40E71C71)
    _close(mm.tmax_c, 0x40F6E38F)
    _close(mm.tmin_f, 0x414E6666)
    _close(mm.tmax_f, 0x41558000)
    assert (mm.id_min, mm.id_max) == (0, 7)


def test_run_august_north():
    avg, mm = run()[1]
    _close(avg, 0x40E4F543)
    _close(mm.tmin_c, 0x40580000)
    _close(mm.tmax_c, 0x410CCCCD)
    _close(mm.tmin_f, 0x4113CCCD)
    _close(mm.tmax_f, 0x41651EB8)
    assert (mm.id_min, mm.id_max) == (4, 13)


def test_run_wellington():
    avg, mm = run()[2]
    _close(avg, 0x40A75554)
    _close(mm.tmin_c, 0x40873333)
    _close(mm.tmax_c, 0x40C4CCCD)
    _close(mm.tmin_f, 0x41200A3E)
    _close(mm.tmax_f, 0x413DEB85)
    assert (mm.id_min, mm.id_max) == (6, 1)


def test_run_december_south():
    avg, mm = run()[3]
    _close(avg, 0x40CC6BCA)
    _close(mm.tmin_c, 0x4080CCCD)
    _close(mm.tmax_c, 0x40EF3333)
    _close(mm.tmin_f, 0x411D28F6)
    _close(mm.tmax_f, 0x41520A3E)
    assert (mm.id_min, mm.id_max) == (15, 12)


def test_main_prints_extreme_cities(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for name in ("George Town", "Dikson", "Reggane", "Wellington", "Stanley", "Port Moresby"):
        assert name in out


def test_main_demo_prints_area(capsys):
    assert main(["--demo"]) == 0
    out = capsys.readouterr().out
    assert "1137.67" in out