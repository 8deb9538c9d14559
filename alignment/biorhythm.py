"""
Biorhythm cycles.

Three sinusoids counted from the birth date: physical (23 days), emotional
(28 days) and intellectual (33 days). Each yields a value in -100..100, a
phase label and a 0–100 percentage; the composite is the mean percentage.
"""
import math
from datetime import date, datetime, timedelta

from alignment.models import BiorhythmCycle, BiorhythmReading, CyclePhase
from alignment.stats import round_half_up

PHYSICAL = ("Physical", 23)
EMOTIONAL = ("Emotional", 28)
INTELLECTUAL = ("Intellectual", 33)

_DESCRIPTIONS = {
    ("Physical", CyclePhase.HIGH): (
        "Peak physical energy and stamina. Excellent for demanding tasks.",
        "Good physical energy. Suitable for active work."),
    ("Physical", CyclePhase.LOW): (
        "Low physical energy. Prioritize rest and light activities.",
        "Moderate physical energy. Pace yourself."),
    ("Emotional", CyclePhase.HIGH): (
        "Peak emotional stability and optimism. Great for people-facing activities.",
        "Positive emotional state. Good for collaboration."),
    ("Emotional", CyclePhase.LOW): (
        "Emotionally sensitive period. Avoid high-stress situations.",
        "Moderate emotional energy. Be mindful of reactions."),
    ("Intellectual", CyclePhase.HIGH): (
        "Peak mental clarity and analytical ability. Ideal for complex decisions.",
        "Good mental focus. Suitable for problem-solving."),
    ("Intellectual", CyclePhase.LOW): (
        "Mental fatigue likely. Postpone critical thinking tasks.",
        "Moderate mental energy. Take breaks as needed."),
}


def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d


def cycle_value(birth: date, target: date, period: int) -> int:
    days = (_as_date(target) - _as_date(birth)).days
    position = (days % period) / period
    return round_half_up(math.sin(position * 2 * math.pi) * 100)


def cycle_phase(value: int) -> CyclePhase:
    if abs(value) < 5:
        return CyclePhase.CRITICAL
    return CyclePhase.HIGH if value > 0 else CyclePhase.LOW


def _describe(name: str, phase: CyclePhase, value: int) -> str:
    if phase is CyclePhase.CRITICAL:
        return f"{name} cycle is at a transition point. Exercise caution."
    strong, mild = _DESCRIPTIONS[(name, phase)]
    return strong if abs(value) > 70 else mild


def calculate_cycle(name: str, period: int, birth: date, target: date) -> BiorhythmCycle:
    value = cycle_value(birth, target, period)
    phase = cycle_phase(value)
    return BiorhythmCycle(
        name=name,
        period=period,
        value=value,
        phase=phase,
        percentage=round_half_up((value + 100) / 200 * 100),
        description=_describe(name, phase, value),
    )


def overall_phase(composite: int) -> str:
    if composite >= 80:
        return "Peak"
    if composite >= 60:
        return "High"
    if composite >= 40:
        return "Neutral"
    if composite >= 20:
        return "Low"
    return "Critical"


def _recommendations(physical, emotional, intellectual) -> tuple[tuple, tuple]:
    best_for, avoid = [], []

    if physical.phase is CyclePhase.HIGH and physical.value > 50:
        best_for += ["Long meetings and presentations", "Travel and site visits"]
    elif physical.phase is not CyclePhase.HIGH:
        avoid += ["Physically demanding tasks", "Long travel"]

    if emotional.phase is CyclePhase.HIGH and emotional.value > 50:
        best_for += ["Client negotiations", "Team collaboration", "Conflict resolution"]
    elif emotional.phase is not CyclePhase.HIGH:
        avoid += ["Difficult conversations", "High-pressure negotiations"]

    if intellectual.phase is CyclePhase.HIGH and intellectual.value > 50:
        best_for += ["Strategic planning", "Complex problem-solving", "Financial analysis"]
    elif intellectual.phase is not CyclePhase.HIGH:
        avoid += ["Critical decisions", "Complex negotiations"]

    if physical.value > 50 and emotional.value > 50 and intellectual.value > 50:
        best_for += ["Major launches and announcements", "Important presentations"]

    critical = [c for c in (physical, emotional, intellectual) if c.phase is CyclePhase.CRITICAL]
    if len(critical) >= 2:
        avoid += ["Any major commitments", "Risky decisions"]

    return tuple(best_for), tuple(avoid)


def biorhythm_reading(birth: date, target: date) -> BiorhythmReading:
    physical = calculate_cycle(*PHYSICAL, birth, target)
    emotional = calculate_cycle(*EMOTIONAL, birth, target)
    intellectual = calculate_cycle(*INTELLECTUAL, birth, target)
    composite = round_half_up(
        (physical.percentage + emotional.percentage + intellectual.percentage) / 3
    )
    best_for, avoid = _recommendations(physical, emotional, intellectual)
    return BiorhythmReading(
        target=_as_date(target),
        physical=physical,
        emotional=emotional,
        intellectual=intellectual,
        composite=composite,
        overall_phase=overall_phase(composite),
        best_for=best_for,
        avoid=avoid,
        available=True,
    )


def neutral_biorhythm(target: date, composite: int = 50) -> BiorhythmReading:
    """Stand-in used when no birth date is known; flagged as unavailable."""
    return BiorhythmReading(
        target=_as_date(target),
        physical=None,
        emotional=None,
        intellectual=None,
        composite=composite,
        overall_phase=overall_phase(composite),
        available=False,
    )


def biorhythm_range(birth: date, start: date, days: int) -> list[BiorhythmReading]:
    return [biorhythm_reading(birth, _as_date(start) + timedelta(days=i)) for i in range(days)]


def critical_days(birth: date, start: date, days: int) -> list[date]:
    """Dates in the range where two or more cycles sit at a transition point."""
    return [r.target for r in biorhythm_range(birth, start, days) if r.critical_count() >= 2]
