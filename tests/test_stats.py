import pytest

from geotemp.conversions import from_float, to_float
from geotemp.stats import MaxMin, city_stats, month_stats

F_TEST_DATA = [
    [13.4, 13.4, 20.0, 13.4, 20.0, 20.0, 25.9, 25.9, 20.0, 20.0, 20.0, 25.9],
    [-2.2, -3.5, -5.8, -7.5, -11.5, -15.4, -18.8, -18.5, -14.9, -10.3, -5.7, -3.0],
    [0.1, 0.3, 0.7, 0.8, 0.8, -0.9, -0.7, 0.5, 0.0, 0.7, 0.5, -0.9],
    [56.7, 56.7, 56.7, 56.7, -89.2, -89.2, -89.2, -89.2, -89.2, -89.2, 56.7, 56.7],
]


@pytest.fixture
def table():
    return [[from_float(value) for value in row] for row in F_TEST_DATA]


CITY_CASES = [
    (0, 0x40CF3333, (0x40AB3333, 0x40E79999, 0x41303D70, 0x414E9EB8, 0, 6)),
    (1, 0xC08E6666, (0xC0CB3333, 0xC0066666, 0xBFF5C28F, 0x40F028F6, 6, 0)),
    (2, 0x3F266666, (0xBFB33333, 0x3FA66666, 0x40F9851E, 0x4102E147, 5, 3)),
    (3, 0xC0C10000, (0xC1593333, 0x41316666, 0xC1804CCD, 0x41830000, 4, 0)),
]

MONTH_CASES = [
    (0, 0x40C40000, (0xC0066666, 0x41316666, 0x40F00000, 0x41830000, 1, 3)),
    (6, 0xC0D2CCCD, (0xC1593333, 0x40E79999, 0xC1804CCD, 0x414E9999, 3, 0)),
    (8, 0xC0D41999, (0xC1593333, 0x40D00000, 0xC1804CCD, 0x41440000, 3, 0)),
    (11, 0x40CEB333, (0xC0200000, 0x41316666, 0x40EA6666, 0x41830000, 1, 3)),
]


def _check(avg, extremes, xavg, xmm):
    tmin_c, tmax_c, tmin_f, tmax_f, id_min, id_max = xmm
    assert to_float(avg) == pytest.approx(to_float(xavg), abs=0.05)
    assert to_float(extremes.tmin_c) == pytest.approx(to_float(tmin_c), abs=0.0001)
    assert to_float(extremes.tmax_c) == pytest.approx(to_float(tmax_c), abs=0.0001)
    assert to_float(extremes.tmin_f) == pytest.approx(to_float(tmin_f), abs=0.1)
    assert to_float(extremes.tmax_f) == pytest.approx(to_float(tmax_f), abs=0.1)
    assert extremes.id_min == id_min
    assert extremes.id_max == id_max


@pytest.mark.parametrize("city, xavg, xmm", CITY_CASES)
def test_city_stats(table, city, xavg, xmm):
    avg, extremes = city_stats(table, city)
    _check(avg, extremes, xavg, xmm)


@pytest.mark.parametrize("month, xavg, xmm", MONTH_CASES)
def test_month_stats(table, month, xavg, xmm):
    avg, extremes = month_stats(table, month)
    _check(avg, extremes, xavg, xmm)


def test_city_extremes_are_table_values(table):
    _, extremes = city_stats(table, 0)
    assert extremes.tmin_c == table[0][extremes.id_min]
    assert extremes.tmax_c == table[0][extremes.id_max]


def test_month_extremes_are_table_values(table):
    _, extremes = month_stats(table, 6)
    assert extremes.tmin_c == table[extremes.id_min][6]
    assert extremes.tmax_c == table[extremes.id_max][6]


def test_single_row_month_keeps_value(table):
    avg, extremes = month_stats(table[:1], 6)
    assert avg == table[0][6]
    assert extremes.id_min == 0 and extremes.id_max == 0


def test_result_is_maxmin(table):
    _, extremes = city_stats(table, 3)
    assert isinstance(extremes, MaxMin) and extremes.tmin_c == 0xC1593333


def test_month_stats_empty_table():
    with pytest.raises(ValueError):
        month_stats([], 0)


def test_city_row_length_checked():
    with pytest.raises(ValueError):
        city_stats([[from_float(1.0)] * 5], 0)


def test_city_index_out_of_range(table):
    with pytest.raises(IndexError):
        city_stats(table, 4)


def test_month_index_out_of_range(table):
    with pytest.raises(IndexError):
        month_stats(table, 12)