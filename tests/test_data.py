import pytest

from geotemp.conversions import from_float, to_float
from geotemp.data import CityInfo, north_cities, south_cities
from geotemp.stats import city_stats, month_stats


def _south_table():
    return [[from_float(t) for t in city.temperatures] for city in south_cities()]


def test_city_counts():
    assert len(north_cities()) == 18
    assert len(south_cities()) == 19


def test_named_cities():
    north = north_cities()
    south = south_cities()
    assert north[4].name == "Dikson"
    assert north[13].name == "Reggane"
    assert south[15].name == "Stanley"
    assert south[12].name == "Port Moresby"


def test_every_city_has_twelve_months():
    for city in north_cities() + south_cities():
        assert len(city.temperatures) == 12
        assert city.scale in ("C", "F")


def test_fahrenheit_cities_in_north():
    scales = {city.name: city.scale for city in north_cities()}
    assert scales["George Town"] == "F"
    assert all(city.scale == "C" for city in south_cities())


def test_fresh_lists_each_call():
    first = north_cities()
    first.clear()
    assert len(north_cities()) == 18


def test_invalid_scale_rejected():
    with pytest.raises(ValueError):
        CityInfo("Nowhere", "K", (0.0,) * 12)


def test_wrong_month_count_rejected():
    with pytest.raises(ValueError):
        CityInfo("Nowhere", "C", (0.0,) * 11)


def test_wellington_stats():
    avg, extremes = city_stats(_south_table(), 18)
    assert to_float(avg) == pytest.approx(to_float(0x40A75554), abs=1e-3)
    assert to_float(extremes.tmin_c) == pytest.approx(to_float(0x40873333), abs=1e-4)
    assert to_float(extremes.tmax_c) == pytest.approx(to_float(0x40C4CCCD), abs=1e-4)
    assert to_float(extremes.tmin_f) == pytest.approx(to_float(0x41200A3E), abs=1e-3)
    assert to_float(extremes.tmax_f) == pytest.approx(to_float(0x413DEB85), abs=1e-3)
    assert (extremes.id_min, extremes.id_max) == (6, 1)


def test_southern_december_stats():
    avg, extremes = month_stats(_south_table(), 11)
    assert to_float(avg) == pytest.approx(to_float(0x40CC6BCA), abs=1e-3)
    assert to_float(extremes.tmin_c) == pytest.approx(to_float(0x4080CCCD), abs=1e-4)
    assert to_float(extremes.tmax_c) == pytest.approx(to_float(0x40EF3333), abs=1e-4)
    assert to_float(extremes.tmin_f) == pytest.approx(to_float(0x411D28F6), abs=1e-3)
    assert to_float(extremes.tmax_f) == pytest.approx(to_float(0x41520A3E), abs=1e-3)
    assert (extremes.id_min, extremes.id_max) == (15, 12)