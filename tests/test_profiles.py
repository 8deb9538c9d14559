from datetime import date, datetime

import pytest

import config
from alignment import numerology
from alignment.errors import InvalidBirthDateError
from alignment.models import Birthplace, Constitution, Element
from alignment.profiles import (
    build_challenges_profile, build_earth_profile, build_personal_profile, parse_birth_date,
    parse_full_date,
)


# ── Birth date parsing ────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "", "   ", None, "not a date", "2026-02-30", 12345, "1990", "May 1990", "15",
])
def test_invalid_birth_dates_raise(value):
    with pytest.raises(InvalidBirthDateError):
        parse_birth_date(value)


def test_invalid_birth_date_is_a_value_error():
    with pytest.raises(ValueError):
        build_personal_profile("garbage")


@pytest.mark.parametrize("value", ["1990-05-15", "15 May 1990", "May 15, 1990", date(1990, 5, 15)])
def test_date_only_inputs(value):
    assert parse_birth_date(value) == date(1990, 5, 15)


def test_birth_time_is_kept():
    parsed = parse_birth_date("1990-05-15T04:23:00")
    assert isinstance(parsed, datetime)
    assert parsed.hour == 4


# ── Personal ──────────────────────────────────────────────────────────────────

def test_personal_profile(personal):
    assert personal.birth_date == date(1990, 5, 15)
    assert personal.life_path_number == 3
    assert personal.birth_pattern.number == 27
    assert personal.constitution.primary is Constitution.PITTA
    assert personal.birth_element is Element.METAL
    assert personal.zodiac_sign == "Taurus"
    assert personal.astrology.location_based is False


def test_missing_birthplace_degrades_gracefully():
    profile = build_personal_profile("1990-05-15", today=date(2026, 1, 21))
    assert profile.astrology.moon_sign == "Virgo"
    assert not profile.astrology.location_based


def test_birthplace_and_time_feed_the_chart():
    place = Birthplace(latitude=51.5, longitude=-0.12, city="London")
    morning = build_personal_profile("1990-05-15T06:00:00", place, today=date(2026, 1, 21))
    assert morning.astrology.location_based
    assert morning.birth_date == date(1990, 5, 15)


# ── Earth ─────────────────────────────────────────────────────────────────────

def test_earth_profile(earth):
    assert earth.target == date(2026, 1, 21)
    assert earth.hour == 0
    assert earth.day.day_of_week == "Wednesday"
    assert earth.daily_pattern.number == 22
    assert earth.daily_element is Element.FIRE
    assert earth.day_number == 5
    assert earth.biorhythm.available


def test_earth_profile_without_birth_date(earth_without_birth):
    assert not earth_without_birth.biorhythm.available
    assert earth_without_birth.biorhythm.composite == config.BIORHYTHM_DEFAULT


def test_earth_profile_hour_from_datetime():
    earth = build_earth_profile(datetime(2026, 1, 21, 11, 30))
    assert earth.hour == 11
    assert earth.target == date(2026, 1, 21)


# ── Challenges ────────────────────────────────────────────────────────────────

def test_challenges_default_name_and_non_empty_lists():
    profile = build_challenges_profile("1990-05-15")
    assert profile.karmic.expression_number == numerology.expression_number(config.DEFAULT_PROFILE_NAME)
    assert profile.life_lessons
    assert profile.blind_spots
    assert profile.growth_opportunities
    assert profile.patterns_to_overcome


def test_challenges_with_karmic_debt():
    profile = build_challenges_profile(date(1985, 3, 13), name="Alex Doe")
    assert profile.karmic.has_karmic_debt
    assert profile.karmic.expression_number == numerology.expression_number("Alex Doe")
    assert profile.life_lessons == profile.karmic.lessons


@pytest.mark.parametrize("value", ["1990", "May 1990", "15", "05-15"])
def test_partial_dates_never_borrow_from_the_clock(value):
    with pytest.raises(InvalidBirthDateError, match="incomplete date"):
        build_personal_profile(value)


def test_parse_full_date():
    assert parse_full_date("2026-01-21") == datetime(2026, 1, 21)
    assert parse_full_date("21 Jan 2026 14:30") == datetime(2026, 1, 21, 14, 30)
    with pytest.raises(ValueError):
        parse_full_date("Jan 2026")
