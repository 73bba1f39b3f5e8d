# tests/test_api.py

from datetime import date

import pytest

import lichta
from lichta.engines.factory import spec_with_timezone
from lichta.engines.specs import ALL_SPECS, CalendarSpec


def test_list_engines():
    assert lichta.list_engines() == ["china", "vietnam"]


def test_engine_info():
    info = lichta.engine_info("vietnam")
    assert info["family"] == "lunisolar"
    assert info["timezone"] == 7.0
    assert info["fallback_timezone"] == 7.0
    assert lichta.engine_info("china")["timezone"] == 8.0


def test_unknown_engine():
    with pytest.raises(KeyError):
        lichta.to_lunar(date(2024, 5, 24), engine="mars")
    with pytest.raises(KeyError):
        lichta.get_calendar("mars")


def test_to_lunar_default_engine():
    assert lichta.to_lunar(date(2024, 5, 24)) == lichta.LunarDate(17, 4, 2024, False)
    assert lichta.convert_date_to_lunar(date(2022, 5, 24), 7.0).as_tuple() == (24, 4, 2022, False)


def test_timezone_override_matches_preset():
    d = date(2024, 5, 24)
    assert lichta.to_lunar(d, timezone=7.0) == lichta.to_lunar(d, engine="vietnam")
    cal = lichta.get_calendar("vietnam", timezone=8.0)
    assert cal.info()["timezone"] == 8.0
    assert cal.info()["family"] == "custom"


def test_china_new_year():
    assert lichta.to_lunar(date(2024, 2, 10), engine="china").as_tuple() == (1, 1, 2024, False)
    assert lichta.new_year_day(2024, engine="china") == date(2024, 2, 10)


def test_day_info_and_explain():
    info = lichta.day_info(date(2024, 5, 24), debug=True)
    assert info.lunar.month == 4
    assert info.solar_term == 4
    assert info.debug["month_difference"] == 5
    assert lichta.explain(date(2024, 5, 24))["k"] == 1538


def test_register_engine():
    eng = lichta.make_engine(CalendarSpec.like("vietnam").tweak(timezone=7.0))
    lichta.register_engine("vietnam-copy", eng)
    try:
        assert "vietnam-copy" in lichta.list_engines()
        with pytest.raises(KeyError):
            lichta.register_engine("vietnam-copy", eng)
        lichta.register_engine("vietnam-copy", eng, overwrite=True)
        assert lichta.to_lunar(date(2024, 5, 24), engine="vietnam-copy").day == 17
    finally:
        if "vietnam-copy" in lichta.api._reg():
            lichta.api._reg().unregister("vietnam-copy")


def test_spec_helpers():
    assert set(ALL_SPECS) == {"vietnam", "china"}
    with pytest.raises(KeyError):
        CalendarSpec.like("mars")
    spec = spec_with_timezone("china", 7.5)
    assert spec.params.timezone == 7.5
    assert spec.params.fallback_timezone == 7.0
    assert spec_with_timezone("china") is ALL_SPECS["china"]


def test_month_api():
    b = lichta.month_bounds(2025, 6, is_leap_month=True)
    assert b["first_date"] == date(2025, 7, 25)
    assert b["last_date"] == date(2025, 8, 22)
    assert b["length"] == 29
    assert lichta.first_day_of_month(2024, 4) == date(2024, 5, 8)
    assert lichta.last_day_of_month(2024, 4) == date(2024, 6, 5)
    assert lichta.days_in_month(2024, 4) == 29
    assert lichta.leap_month(2025) == 6
    assert lichta.leap_month(2024) is None
    assert len(lichta.lunar_months(2025)) == 13


def test_inverse_api():
    assert lichta.to_gregorian(2024, 4, 17) == date(2024, 5, 24)
    t = lichta.to_lunar(date(2025, 8, 1))
    assert lichta.lunar_date_to_gregorian(t) == date(2025, 8, 1)
    with pytest.raises(lichta.InvalidLunarDateError):
        lichta.to_gregorian(2024, 4, 31)
    with pytest.raises(ValueError):
        lichta.to_gregorian(2024, 4, 31)


def test_astro_helpers():
    assert lichta.new_moon(1533) == pytest.approx(2460291.49468915, abs=1e-9)
    assert lichta.new_moon_day(1533, 7.0) == date(2023, 12, 13)
    assert lichta.solar_term(date(2024, 12, 25), 7.0) == 18
    assert 60.0 < lichta.sun_longitude(date(2024, 5, 24), 7.0) < 75.0
    with pytest.raises(lichta.MonthIndexOverflowError):
        lichta.new_moon(2 ** 31)


def test_timezone_override_on_registered_engine():
    eng = lichta.make_engine(CalendarSpec.like("vietnam"))
    lichta.register_engine("vn-local", eng)
    try:
        d = date(2024, 2, 10)
        assert lichta.to_lunar(d, engine="vn-local", timezone=8.0) == lichta.to_lunar(d, engine="china")
        cal = lichta.get_calendar("vn-local", timezone=8.0)
        assert cal.info()["timezone"] == 8.0
        assert cal.info()["family"] == "custom"
        assert cal.info()["name"] == "vietnam"
        assert lichta.get_calendar("vn-local") is eng
    finally:
        lichta.api._reg().unregister("vn-local")


def test_timezone_override_needs_lunisolar_engine():
    class Other:
        def info(self):
            return {}

    lichta.register_engine("other", Other())
    try:
        with pytest.raises(TypeError):
            lichta.get_calendar("other", timezone=8.0)
    finally:
        lichta.api._reg().unregister("other")
