from dataclasses import replace
from datetime import date, timedelta

import pytest

import config
from alignment.models import ComponentScores
from alignment.profiles import build_earth_profile, build_personal_profile
from alignment.synthesis import (
    archetype, component_scores, confidence_score, guidance_for, perfect_day_score, synthesize,
)


def test_perfect_day_weights_sum_to_one():
    assert sum(config.PERFECT_DAY_WEIGHTS.values()) == pytest.approx(1.0)
    assert set(config.PERFECT_DAY_WEIGHTS) == {"timing", "element", "day", "lunar", "constitution"}


# ── Worked example: born 1990-05-15, read on Wednesday 2026-01-21 ─────────────

def test_scenario_components(personal, earth):
    components, available = component_scores(personal, earth)
    assert components == ComponentScores(
        timing=75, element=35, day=93, lunar=75, biorhythm=30, transit=65.0, constitution=75,
    )
    assert available


def test_scenario_combined(personal, earth):
    combined = synthesize(personal, earth)
    assert combined.overall_alignment == 64
    assert combined.intensity == 64
    assert combined.perfect_day_score == 72
    assert combined.confidence_score == 57
    assert combined.energy_type == "Harmonious"
    assert combined.energy_description == "Balance and cooperation"
    assert combined.peak_hours == "10 AM - 2 PM"
    assert combined.biorhythm_available


def test_scenario_windows(personal, earth):
    windows = synthesize(personal, earth).optimal_windows
    assert windows.meetings == "10 AM - 2 PM"
    assert windows.decisions == earth.daily_pattern.optimal_timing
    assert windows.deals == "Best day of the week for closing deals"
    assert windows.planning == "Strong for strategic and financial planning"


def test_biorhythm_flagged_unavailable_without_birth(personal, earth_without_birth):
    components, available = component_scores(personal, earth_without_birth)
    assert components.biorhythm == config.BIORHYTHM_DEFAULT
    assert not available
    assert not synthesize(personal, earth_without_birth).biorhythm_available


# ── Weighted blend and agreement ──────────────────────────────────────────────

def test_perfect_day_ignores_biorhythm_and_transit():
    base = ComponentScores(80, 80, 80, 80, 80, 80.0, 80)
    assert perfect_day_score(base) == 80
    assert perfect_day_score(replace(base, biorhythm=0, transit=0.0)) == 80


def test_identical_timing_raises_perfect_day():
    base = ComponentScores(65, 60, 70, 75, 50, 50.0, 75)
    assert perfect_day_score(replace(base, timing=100)) > perfect_day_score(base)


def test_confidence_bounds():
    assert confidence_score([70] * 7) == 100
    assert confidence_score([0, 100, 0, 100]) == 0


def test_archetype_wraps_modulo_nine():
    assert archetype(3, 5) == config.ARCHETYPES[8]
    assert archetype(9, 9) == config.ARCHETYPES[0]
    assert archetype(11, 22) == config.ARCHETYPES[6]


def test_guidance_without_constitution_is_neutral(personal, earth):
    guidance = guidance_for(replace(personal, constitution=None), earth)
    assert guidance.peak_hours == config.DEFAULT_PEAK_HOURS
    assert guidance.energy_level == config.CONSTITUTION_LUNAR_DEFAULT

    components, _ = component_scores(replace(personal, constitution=None), earth)
    assert components.constitution == config.CONSTITUTION_LUNAR_DEFAULT


# ── Properties over a range of dates ──────────────────────────────────────────

def test_synthesis_is_deterministic(personal, earth):
    assert synthesize(personal, earth) == synthesize(personal, earth)


def test_profile_build_order_does_not_matter():
    earth_first = build_earth_profile(date(2026, 1, 21), birth_date="1990-05-15")
    personal_second = build_personal_profile("1990-05-15", today=date(2026, 1, 21))
    personal_first = build_personal_profile(date(1990, 5, 15), today=date(2026, 1, 21))
    earth_second = build_earth_profile(date(2026, 1, 21), birth_date=date(1990, 5, 15))
    assert synthesize(personal_second, earth_first) == synthesize(personal_first, earth_second)


@pytest.mark.parametrize("birth", [date(1985, 3, 13), date(1990, 5, 15), date(2001, 11, 29)])
def test_scores_stay_in_range(birth):
    personal = build_personal_profile(birth, today=date(2026, 1, 1))
    target = date(2026, 1, 1)
    for _ in range(40):
        combined = synthesize(personal, build_earth_profile(target, birth_date=birth))
        for score in (combined.overall_alignment, combined.perfect_day_score,
                      combined.confidence_score):
            assert 0 <= score <= 100
        for component in combined.components.as_list():
            assert 0 <= component <= 100
        target += timedelta(days=9)
