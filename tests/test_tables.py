from datetime import date, timedelta

import pytest

from alignment import astrology, biorhythm, constitution, elements, lunar, timing_table, weekday_table
from alignment.models import (
    Activity, Birthplace, BusinessImpact, Constitution, CyclePhase, Element, LunarPhase,
)


# ── Timing table ──────────────────────────────────────────────────────────────

def test_timing_table_has_64_numbered_patterns():
    assert len(timing_table.PATTERNS) == 64
    assert [p.number for p in timing_table.PATTERNS] == list(range(1, 65))


@pytest.mark.parametrize("n", [0, 65, -1])
def test_get_pattern_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        timing_table.get_pattern(n)


def test_birth_and_daily_pattern_selection():
    assert timing_table.birth_pattern(date(1990, 5, 15)).number == 27
    assert timing_table.daily_pattern(date(2026, 1, 21)).number == 22
    assert timing_table.daily_pattern(date(2026, 3, 5)).number == 1


# ── Weekday table ─────────────────────────────────────────────────────────────

def test_weekday_table_is_sunday_first():
    assert [d.day_of_week for d in weekday_table.DAYS][:2] == ["Sunday", "Monday"]
    assert weekday_table.day_reading(date(2026, 1, 18)).day_of_week == "Sunday"
    assert weekday_table.day_reading(date(2026, 1, 21)).day_of_week == "Wednesday"


def test_every_day_rates_all_activities():
    for reading in weekday_table.DAYS:
        assert set(reading.ratings) == set(Activity)
        for rating in reading.ratings.values():
            assert 0 <= rating.score <= 100


def test_ratings_are_read_only():
    reading = weekday_table.DAYS[0]
    with pytest.raises(TypeError):
        reading.ratings[Activity.DEALS] = None


def test_scenario_day_scores_at_least_90():
    assert weekday_table.day_reading(date(2026, 1, 21)).overall_score >= 90
    assert weekday_table.activity_rating(date(2026, 1, 21), Activity.DEALS).score == 95


def test_best_day_and_next_optimal_day():
    assert weekday_table.best_day_for(Activity.DEALS).day_of_week == "Wednesday"
    when, reading = weekday_table.next_optimal_day(date(2026, 1, 21), Activity.DEALS, min_score=95)
    assert when == date(2026, 1, 28)
    assert reading.day_of_week == "Wednesday"


def test_next_optimal_day_falls_back_to_best_weekday():
    when, reading = weekday_table.next_optimal_day(date(2026, 1, 21), Activity.DEALS, min_score=101)
    assert reading.day_of_week == "Wednesday"
    assert when == date(2026, 1, 28)


# ── Constitution ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("month, expected", [
    (1, Constitution.VATA), (10, Constitution.VATA), (12, Constitution.VATA),
    (5, Constitution.PITTA), (9, Constitution.PITTA),
    (2, Constitution.KAPHA), (4, Constitution.KAPHA),
])
def test_seasonal_type(month, expected):
    assert constitution.seasonal_type(month) is expected


def test_secondary_dropped_when_equal_to_primary():
    profile = constitution.constitution_for(date(1990, 5, 15))
    assert profile.primary is Constitution.PITTA
    assert profile.secondary is None

    profile = constitution.constitution_for(date(1990, 5, 25))
    assert profile.secondary is Constitution.KAPHA


def test_daily_guidance_bands_and_seasonal_amplification():
    pitta = constitution.constitution_for(date(1990, 5, 15))
    peak = constitution.daily_guidance(pitta, hour=11, month=1)
    assert peak.energy_level == 95
    assert peak.peak_hours == "10 AM - 2 PM"

    in_season = constitution.daily_guidance(pitta, hour=11, month=7)
    assert in_season.energy_level == 100

    off_peak = constitution.daily_guidance(pitta, hour=20, month=7)
    assert off_peak.energy_level == 55


# ── Lunar ─────────────────────────────────────────────────────────────────────

def test_julian_day():
    assert lunar.julian_day(date(2000, 1, 1)) == 2451544.5


def test_reference_full_moon():
    reading = lunar.lunar_reading(date(2000, 1, 21))
    assert reading.phase is LunarPhase.FULL_MOON
    assert reading.influence == 95


def test_scenario_lunar_phase():
    reading = lunar.lunar_reading(date(2026, 1, 21))
    assert reading.phase is LunarPhase.WAXING_CRESCENT
    assert reading.influence == 75


def test_lunar_fraction_in_unit_interval():
    d = date(2025, 1, 1)
    for _ in range(60):
        assert 0 <= lunar.phase_fraction(d) < 1
        d += timedelta(days=1)


# ── Elements ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("year, expected", [
    (1990, Element.METAL), (2026, Element.FIRE), (2024, Element.WOOD),
    (2023, Element.WATER), (2028, Element.EARTH),
])
def test_element_for_year(year, expected):
    assert elements.element_for_year(year) is expected


def test_cycles_are_permutations():
    assert set(elements.GENERATES.values()) == set(Element)
    assert set(elements.DESTROYS.values()) == set(Element)


# ── Biorhythm ─────────────────────────────────────────────────────────────────

def test_biorhythm_on_birth_day_is_all_critical():
    reading = biorhythm.biorhythm_reading(date(1990, 5, 15), date(1990, 5, 15))
    assert reading.composite == 50
    assert reading.critical_count() == 3
    assert "Any major commitments" in reading.avoid


def test_biorhythm_scenario():
    reading = biorhythm.biorhythm_reading(date(1990, 5, 15), date(2026, 1, 21))
    assert reading.physical.value == -100
    assert reading.physical.percentage == 0
    assert reading.emotional.value == -22
    assert reading.intellectual.phase is CyclePhase.CRITICAL
    assert reading.composite == 30
    assert reading.overall_phase == "Low"


def test_physical_peak_quarter_cycle():
    cycle = biorhythm.calculate_cycle("Physical", 23, date(2000, 1, 1), date(2000, 1, 7))
    assert cycle.value == 100
    assert cycle.phase is CyclePhase.HIGH
    assert cycle.percentage == 100


def test_neutral_biorhythm_flagged_unavailable():
    reading = biorhythm.neutral_biorhythm(date(2026, 1, 21))
    assert reading.composite == 50
    assert not reading.available
    assert reading.critical_count() == 0


def test_biorhythm_range_and_critical_days():
    birth = date(1990, 5, 15)
    readings = biorhythm.biorhythm_range(birth, date(2026, 1, 1), 30)
    assert len(readings) == 30
    critical = biorhythm.critical_days(birth, date(2026, 1, 1), 30)
    assert all(r.target in critical for r in readings if r.critical_count() >= 2)


# ── Astrology ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("month, day, expected", [
    (5, 15, "Taurus"), (3, 20, "Pisces"), (3, 21, "Aries"),
    (1, 10, "Capricorn"), (1, 25, "Aquarius"), (12, 25, "Capricorn"), (12, 21, "Sagittarius"),
])
def test_zodiac_sign(month, day, expected):
    assert astrology.zodiac_sign(month, day) == expected


def test_profile_without_birthplace_uses_offsets():
    profile = astrology.astrology_profile(date(1990, 5, 15))
    assert profile.sun_sign == "Taurus"
    assert profile.moon_sign == "Virgo"
    assert profile.rising_sign == "Cancer"
    assert profile.location_based is False
    assert profile.strengths and profile.challenges


def test_profile_with_birthplace():
    place = Birthplace(latitude=40.71, longitude=-74.01, city="New York")
    profile = astrology.astrology_profile(date(1990, 5, 15), place)
    assert profile.location_based is True
    signs = {entry[0] for entry in astrology.ZODIAC}
    assert profile.moon_sign in signs
    assert profile.rising_sign in signs


def test_daily_transits_scenario():
    transits = astrology.daily_transits(date(2026, 1, 21))
    assert transits.impact == BusinessImpact(65, 65, 65, 65)
    assert transits.impact.average() == 65
    assert transits.best_hours == ("2:00 PM - 5:00 PM",)
    assert transits.avoid_hours == ()


def test_business_impact_clamped():
    d = date(2020, 1, 1)
    for _ in range(120):
        impact = astrology.daily_transits(d).impact
        for value in (impact.meetings, impact.decisions, impact.negotiations, impact.launches):
            assert 0 <= value <= 100
        d += timedelta(days=3)


def test_aspects_respect_orb():
    for aspect in astrology.find_aspects(astrology.positions(date(2026, 1, 21))):
        assert aspect.orb <= astrology.ORB


@pytest.mark.parametrize("d, expected", [
    (date(2026, 1, 21), "Excellent day for business"),
    (date(2026, 1, 22), "Good day for most activities"),
    (date(2026, 1, 18), "Moderate day - be selective"),
    (date(2026, 1, 24), "Challenging day - focus on planning"),
])
def test_overall_label_bands(d, expected):
    assert weekday_table.overall_label(weekday_table.day_reading(d)) == expected
