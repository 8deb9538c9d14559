"""
Lunar phase approximation.

Mean synodic month measured from a reference full moon. This is a coarse
calendar approximation, good to within a day or so, not an ephemeris.
"""
import math
from datetime import date, datetime

from alignment.models import LunarPhase, LunarReading

SYNODIC_MONTH = 29.53058867
REFERENCE_FULL_MOON_JD = 2451565.4

# (upper bound of phase fraction, phase, influence)
_PHASES = (
    (0.0625, LunarPhase.NEW_MOON,        70),
    (0.1875, LunarPhase.WAXING_CRESCENT, 75),
    (0.3125, LunarPhase.FIRST_QUARTER,   80),
    (0.4375, LunarPhase.WAXING_GIBBOUS,  85),
    (0.5625, LunarPhase.FULL_MOON,       95),
    (0.6875, LunarPhase.WANING_GIBBOUS,  85),
    (0.8125, LunarPhase.LAST_QUARTER,    75),
    (0.9375, LunarPhase.WANING_CRESCENT, 65),
)


def julian_day(d: date) -> float:
    """Julian Day for a calendar date (fractional hours added for datetimes)."""
    y, m = d.year, d.month
    jd = (367 * y - math.floor(7 * (y + math.floor((m + 9) / 12)) / 4)
          + math.floor(275 * m / 9) + d.day + 1721013.5)
    if isinstance(d, datetime):
        jd += (d.hour + d.minute / 60 + d.second / 3600) / 24
    return jd


def phase_fraction(d: date) -> float:
    """0 = new, 0.25 = first quarter, 0.5 = full, 0.75 = last quarter."""
    cycles = (julian_day(d) - REFERENCE_FULL_MOON_JD) / SYNODIC_MONTH
    fraction = cycles - math.floor(cycles)
    return (fraction + 0.5) % 1.0


def lunar_reading(d: date) -> LunarReading:
    fraction = phase_fraction(d)
    for upper, phase, influence in _PHASES:
        if fraction < upper:
            return LunarReading(phase=phase, influence=influence, fraction=fraction)
    # 0.9375 and above wraps round to the next new moon
    return LunarReading(phase=LunarPhase.NEW_MOON, influence=70, fraction=fraction)
