# tests/test_cli.py

import pytest

from lichta import cli


def test_day_command(capsys):
    assert cli.main(["day", "2024-05-24"]) == 0
    out = capsys.readouterr().out
    assert "2024-05-24  ->  17/04/2024" in out


def test_date_shortcut_with_debug(capsys):
    assert cli.main(["2025-07-25", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "01/06 (leap)/2025" in out
    assert "leap_offset" in out


def test_to_solar_command(capsys):
    assert cli.main(["to-solar", "2025", "6", "1", "--leap"]) == 0
    assert capsys.readouterr().out.strip() == "2025-07-25"


def test_year_command(capsys):
    assert cli.main(["year", "2025"]) == 0
    out = capsys.readouterr().out
    assert " 6L" in out
    assert "2025-07-25" in out


def test_astro_command(capsys):
    assert cli.main(["astro", "--jdn", "2451520", "--k", "1533"]) == 0
    out = capsys.readouterr().out
    assert "254.1325018323" in out
    assert "2460291.49468915" in out


def test_new_years_table(capsys):
    assert cli.main(["new-years", "--from-year", "2024", "--to-year", "2025", "--dates", "iso"]) == 0
    out = capsys.readouterr().out
    assert "2024-02-10" in out
    assert "2025-01-29" in out


def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--greg", "2024", "5"]) == 0
    out = capsys.readouterr().out
    assert "04-17" in out


def test_leap_months_listing(capsys):
    assert cli.main(["diag", "leap-months", "--start-year", "2024", "--end-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "2025  leap month 6" in out


def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["nope"])


def test_date_shortcut_needs_four_digit_year():
    assert cli._DATE_RE.match("0999-01-01")
    assert not cli._DATE_RE.match("-100-01-01")
    assert not cli._DATE_RE.match("999-01-01")
    with pytest.raises(SystemExit):
        cli.main(["-100-01-01"])


def test_year_reads_start_dates_from_table(capsys, monkeypatch):
    import lichta

    def no_lookup(*args, **kwargs):
        raise AssertionError("month_bounds called")

    monkeypatch.setattr(lichta, "month_bounds", no_lookup)
    assert cli.main(["year", "2024"]) == 0
    out = capsys.readouterr().out
    assert " 1     2024-02-10  29" in out
