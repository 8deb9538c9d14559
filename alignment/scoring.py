"""
Alignment scorers.

Each scorer compares a birth-derived reading with a date-derived reading and
returns a 0–100 score from a small decision table. Rules are evaluated top to
bottom and the first match wins:

  Timing pattern      same variant → same timing & energy → same timing
                      → same energy → act/wait conflict → neutral
  Five element        same → birth generates daily → daily generates birth
                      → birth destroys daily → daily destroys birth → neutral
  Constitution/lunar  three (type, phase set) matches → default

Day, lunar and biorhythm scores pass through unchanged.
"""
from typing import Optional

import config
from alignment.elements import DESTROYS, GENERATES
from alignment.models import (
    BiorhythmReading, Constitution, DailyTransits, Element, LunarPhase, Timing, TimingPattern,
)
from alignment.stats import clamp, round_half_up

_CONFLICTING_TIMINGS = frozenset({Timing.ACT, Timing.WAIT})

_CONSTITUTION_PHASES = {
    Constitution.VATA:  frozenset({LunarPhase.NEW_MOON, LunarPhase.WANING_CRESCENT}),
    Constitution.PITTA: frozenset({LunarPhase.FULL_MOON, LunarPhase.WAXING_GIBBOUS}),
    Constitution.KAPHA: frozenset({LunarPhase.FIRST_QUARTER, LunarPhase.LAST_QUARTER}),
}


def timing_alignment(birth: TimingPattern, daily: TimingPattern) -> int:
    scores = config.TIMING_SCORES
    if birth.number == daily.number:
        return scores["identical"]
    if birth.timing is daily.timing and birth.energy is daily.energy:
        return scores["timing_energy"]
    if birth.timing is daily.timing:
        return scores["timing"]
    if birth.energy is daily.energy:
        return scores["energy"]
    if {birth.timing, daily.timing} == _CONFLICTING_TIMINGS:
        return scores["conflict"]
    return scores["neutral"]


def element_alignment(birth: Element, daily: Element) -> int:
    scores = config.ELEMENT_SCORES
    if birth is daily:
        return scores["identical"]
    if GENERATES[birth] is daily:
        return scores["generates"]
    if GENERATES[daily] is birth:
        return scores["generated_by"]
    if DESTROYS[birth] is daily:
        return scores["destroys"]
    if DESTROYS[daily] is birth:
        return scores["destroyed_by"]
    return scores["neutral"]


def constitution_lunar_alignment(constitution: Optional[Constitution], phase: LunarPhase) -> int:
    """Three matching pairs score high; every other pairing (or no constitution) gets the default."""
    if constitution is not None and phase in _CONSTITUTION_PHASES[constitution]:
        return config.CONSTITUTION_LUNAR_MATCH
    return config.CONSTITUTION_LUNAR_DEFAULT


def biorhythm_score(reading: Optional[BiorhythmReading]) -> tuple[int, bool]:
    """(composite, available). Unknown birth date → neutral default, flagged unavailable."""
    if reading is None or not reading.available:
        return config.BIORHYTHM_DEFAULT, False
    return reading.composite, True


def transit_score(transits: Optional[DailyTransits]) -> float:
    """Mean of the four business-impact numbers; neutral when no transit reading exists."""
    if transits is None:
        return float(config.TRANSIT_IMPACT_DEFAULT)
    return transits.impact.average()


def clamp_score(x: float) -> int:
    return round_half_up(clamp(x, 0, 100))
