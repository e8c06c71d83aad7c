# tests/unit/seasons/test_season_calendar.py
from datetime import date, datetime, timedelta

import pytest

from pricing_tracker.seasons import (
    SeasonCode,
    SeasonHalf,
    SeasonStatus,
    cost_label,
    current_shipping_season,
    format_date_range,
    parse_season_code,
    pre_book_start,
    season_info,
    season_status,
    seasons_with_status,
    ship_end,
    ship_start,
    status_label,
)


@pytest.mark.parametrize("half", [SeasonHalf.SPRING, SeasonHalf.FALL])
def test_parse_is_left_inverse_of_canonical_form(half):
    for yy in range(100):
        code = SeasonCode(year=2000 + yy, half=half)
        assert parse_season_code(str(code)) == code


def test_parse_accepts_any_letter_case():
    assert parse_season_code("26fa") == SeasonCode(2026, SeasonHalf.FALL)
    assert parse_season_code("05Sp") == SeasonCode(2005, SeasonHalf.SPRING)


def test_canonical_form_is_zero_padded():
    assert str(SeasonCode(2005, SeasonHalf.SPRING)) == "05SP"


@pytest.mark.parametrize("raw", [
    "", "26", "SP", "FA26", "126FA", "6FA", "26FAX", "26SU", " 26FA", "26FA ", "26FA\n",
    "2026FA", "26-FA", "٢٦FA", None, 26, ["26FA"],
])
def test_parse_rejects_everything_else(raw):
    assert parse_season_code(raw) is None


def test_ship_window_for_spring():
    assert ship_start("26SP") == date(2026, 2, 15)
    assert ship_end("26SP") == date(2026, 8, 14)


def test_fall_ship_end_rolls_into_next_year():
    assert ship_start("24FA") == date(2024, 8, 15)
    assert ship_end("24FA") == date(2025, 2, 14)
    assert ship_end("24FA").year == ship_start("24FA").year + 1


def test_pre_book_uses_fixed_dates_in_prior_year():
    assert pre_book_start("26SP") == date(2025, 6, 1)
    assert pre_book_start("26FA") == date(2025, 12, 1)


def test_date_functions_return_none_for_invalid_codes():
    for fn in (ship_start, ship_end, pre_book_start):
        assert fn("FA26") is None
        assert fn("") is None


def test_status_for_26sp(spring_26_dates):
    for day, expected in spring_26_dates.items():
        assert season_status("26SP", day).value == expected, day


def test_status_ignores_time_of_day():
    assert season_status("26SP", datetime(2026, 8, 14, 23, 59)) is SeasonStatus.SHIPPING
    assert season_status("26SP", datetime(2026, 2, 15, 0, 0)) is SeasonStatus.SHIPPING


def test_status_for_fall_across_year_boundary():
    assert season_status("25FA", date(2026, 2, 14)) is SeasonStatus.SHIPPING
    assert season_status("25FA", date(2026, 2, 15)) is SeasonStatus.CLOSED
    assert season_status("25FA", date(2024, 12, 1)) is SeasonStatus.PRE_BOOK
    assert season_status("25FA", date(2024, 11, 30)) is SeasonStatus.PLANNING


def test_status_defaults_to_closed_for_invalid_code():
    assert season_status("nonsense", date(2026, 1, 1)) is SeasonStatus.CLOSED


def test_status_defaults_to_today(mocker):
    fake_date = mocker.patch("pricing_tracker.seasons.calendar.date", wraps=date)
    fake_date.today.return_value = date(2026, 3, 1)
    assert season_status("26SP") is SeasonStatus.SHIPPING


@pytest.mark.parametrize("day, expected", [
    (date(2026, 1, 1), "25FA"),
    (date(2026, 1, 20), "25FA"),
    (date(2026, 2, 14), "25FA"),
    (date(2026, 2, 15), "26SP"),
    (date(2026, 8, 14), "26SP"),
    (date(2026, 8, 15), "26FA"),
    (date(2026, 12, 31), "26FA"),
    (date(2005, 3, 1), "05SP"),
])
def test_current_shipping_season(day, expected):
    assert current_shipping_season(day) == expected


def test_current_shipping_season_is_always_shipping():
    day = date(2001, 1, 1)
    while day < date(2099, 1, 1):
        assert season_status(current_shipping_season(day), day) is SeasonStatus.SHIPPING, day
        day += timedelta(days=1)


def test_season_info_bundles_calendar():
    info = season_info("26fa", date(2026, 10, 17))
    assert info.code == "26FA"
    assert info.short_label == "26FA"
    assert info.label == "Fall 2026"
    assert info.status is SeasonStatus.SHIPPING
    assert info.ship_start == date(2026, 8, 15)
    assert info.ship_end == date(2027, 2, 14)
    assert info.pre_book_start == date(2025, 12, 1)
    assert info.to_dict() == {
        "code": "26FA",
        "status": "SHIPPING",
        "shipStart": "2026-08-15",
        "shipEnd": "2027-02-14",
        "preBookStart": "2025-12-01",
        "label": "Fall 2026",
        "shortLabel": "26FA",
    }


def test_season_info_none_for_invalid_code():
    assert season_info("Fall 2026") is None


def test_seasons_with_status_drops_invalid_codes():
    infos = seasons_with_status(["25FA", "bogus", "26SP", "27SP"], date(2026, 3, 1))
    assert [i.code for i in infos] == ["25FA", "26SP", "27SP"]
    assert [i.status for i in infos] == [SeasonStatus.CLOSED, SeasonStatus.SHIPPING, SeasonStatus.PLANNING]


@pytest.mark.parametrize("status, expected", [
    (SeasonStatus.CLOSED, "Actual Cost"),
    (SeasonStatus.SHIPPING, "Actual Cost"),
    (SeasonStatus.PRE_BOOK, "Projected Cost"),
    (SeasonStatus.PLANNING, "Projected Cost"),
])
def test_cost_label(status, expected):
    assert cost_label(status) == expected


def test_status_label():
    assert status_label(SeasonStatus.PRE_BOOK) == "Pre-Book"
    assert status_label(SeasonStatus.CLOSED) == "Closed"


def test_format_date_range():
    assert format_date_range(date(2026, 2, 15), date(2026, 8, 14)) == "Feb 15 - Aug 14, 2026"
    assert format_date_range(date(2026, 8, 15), date(2027, 2, 14)) == "Aug 15 - Feb 14, 2027"
