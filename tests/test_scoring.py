from dataclasses import replace
from datetime import date

import pytest

import config
from alignment import scoring
from alignment.biorhythm import biorhythm_reading, neutral_biorhythm
from alignment.models import Constitution, Element, EnergyLevel, LunarPhase, Timing
from alignment.timing_table import get_pattern
from alignment.stats import clamp, mean, population_std_dev, round_half_up


def _pattern(number, timing, energy):
    return replace(get_pattern(number), timing=timing, energy=energy)


# ── Timing pattern ────────────────────────────────────────────────────────────

def test_timing_alignment_decision_table():
    a = _pattern(1, Timing.ACT, EnergyLevel.HIGH)
    assert scoring.timing_alignment(a, a) == 100
    assert scoring.timing_alignment(a, _pattern(2, Timing.ACT, EnergyLevel.HIGH)) == 90
    assert scoring.timing_alignment(a, _pattern(2, Timing.ACT, EnergyLevel.LOW)) == 80
    assert scoring.timing_alignment(a, _pattern(2, Timing.PREPARE, EnergyLevel.HIGH)) == 75
    assert scoring.timing_alignment(a, _pattern(2, Timing.WAIT, EnergyLevel.LOW)) == 40
    assert scoring.timing_alignment(a, _pattern(2, Timing.REFLECT, EnergyLevel.LOW)) == 65


def test_energy_match_outranks_act_wait_conflict():
    act = _pattern(1, Timing.ACT, EnergyLevel.MODERATE)
    wait = _pattern(2, Timing.WAIT, EnergyLevel.MODERATE)
    assert scoring.timing_alignment(act, wait) == 75


def test_scenario_timing_patterns():
    assert scoring.timing_alignment(get_pattern(27), get_pattern(22)) == 75


# ── Five element ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("birth, daily, expected", [
    (Element.WOOD, Element.WOOD, 100),
    (Element.WOOD, Element.FIRE, 85),
    (Element.FIRE, Element.WOOD, 75),
    (Element.WOOD, Element.EARTH, 45),
    (Element.METAL, Element.FIRE, 35),
])
def test_element_alignment(birth, daily, expected):
    assert scoring.element_alignment(birth, daily) == expected


def test_every_element_pair_is_scored():
    allowed = set(config.ELEMENT_SCORES.values())
    for birth in Element:
        for daily in Element:
            assert scoring.element_alignment(birth, daily) in allowed


# ── Constitution / lunar ──────────────────────────────────────────────────────

@pytest.mark.parametrize("constitution, phase, expected", [
    (Constitution.VATA, LunarPhase.NEW_MOON, 90),
    (Constitution.VATA, LunarPhase.WANING_CRESCENT, 90),
    (Constitution.PITTA, LunarPhase.FULL_MOON, 90),
    (Constitution.PITTA, LunarPhase.WAXING_GIBBOUS, 90),
    (Constitution.KAPHA, LunarPhase.FIRST_QUARTER, 90),
    (Constitution.KAPHA, LunarPhase.LAST_QUARTER, 90),
    (Constitution.PITTA, LunarPhase.WAXING_CRESCENT, 75),
    (Constitution.VATA, LunarPhase.FULL_MOON, 75),
    (None, LunarPhase.FULL_MOON, 75),
])
def test_constitution_lunar_alignment(constitution, phase, expected):
    assert scoring.constitution_lunar_alignment(constitution, phase) == expected


# ── Pass-through scores ───────────────────────────────────────────────────────

def test_biorhythm_score_defaults_when_unavailable(earth):
    assert scoring.biorhythm_score(None) == (50, False)
    assert scoring.biorhythm_score(neutral_biorhythm(earth.target)) == (50, False)
    assert scoring.biorhythm_score(earth.biorhythm) == (30, True)


def test_transit_score(earth):
    assert scoring.transit_score(None) == 50.0
    assert scoring.transit_score(earth.transits) == 65.0


@pytest.mark.parametrize("x, expected", [(-3, 0), (0, 0), (49.5, 50), (72.4, 72), (100, 100), (130.2, 100)])
def test_clamp_score(x, expected):
    assert scoring.clamp_score(x) == expected


# ── Stats helpers ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("x, expected", [(0.5, 1), (1.49, 1), (2.5, 3), (-0.5, 0), (-21.75, -22)])
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected


def test_clamp_bounds():
    assert clamp(-1) == 0
    assert clamp(101) == 100
    assert clamp(5, low=10, high=20) == 10


def test_population_std_dev():
    assert population_std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
    assert population_std_dev([70, 70, 70]) == 0
    assert mean([1, 2, 3, 4]) == 2.5


def test_stats_reject_empty_input():
    with pytest.raises(ValueError):
        mean([])
    with pytest.raises(ValueError):
        population_std_dev([])


def test_biorhythm_reading_feeds_score():
    reading = biorhythm_reading(date(1990, 5, 15), date(1990, 5, 15))
    assert scoring.biorhythm_score(reading) == (50, True)
