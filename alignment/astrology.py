"""
Simplified sky positions for business timing.

Five bodies move at their mean rates from the Unix epoch:
  - Sun      sign from the calendar, degree from day of year
  - Moon     13.176°/day
  - Mercury  one orbit per 88 days, retrograde for 21 of every 120 days
  - Venus    one orbit per 225 days
  - Mars     one orbit per 687 days

Aspects use an 8° orb. This is a calendar heuristic, not an ephemeris.
"""
from collections import Counter
from datetime import date, datetime
from typing import Optional

from loguru import logger

from alignment.models import (
    Aspect, AstrologyProfile, Birthplace, BodyPosition, BusinessImpact, DailyTransits,
)
from alignment.stats import clamp, round_half_up

EPOCH = date(1970, 1, 1)
J2000 = date(2000, 1, 1)

# (name, (start month, start day), element, modality), in ecliptic order
ZODIAC = (
    ("Aries",       (3, 21),  "Fire",  "Cardinal"),
    ("Taurus",      (4, 20),  "Earth", "Fixed"),
    ("Gemini",      (5, 21),  "Air",   "Mutable"),
    ("Cancer",      (6, 21),  "Water", "Cardinal"),
    ("Leo",         (7, 23),  "Fire",  "Fixed"),
    ("Virgo",       (8, 23),  "Earth", "Mutable"),
    ("Libra",       (9, 23),  "Air",   "Cardinal"),
    ("Scorpio",     (10, 23), "Water", "Fixed"),
    ("Sagittarius", (11, 22), "Fire",  "Mutable"),
    ("Capricorn",   (12, 22), "Earth", "Cardinal"),
    ("Aquarius",    (1, 20),  "Air",   "Fixed"),
    ("Pisces",      (2, 19),  "Water", "Mutable"),
)

_SIGN_INDEX = {entry[0]: i for i, entry in enumerate(ZODIAC)}

# (name, exact angle, harmonious)
_ASPECTS = (
    ("conjunction", 0,   True),
    ("sextile",     60,  True),
    ("square",      90,  False),
    ("trine",       120, True),
    ("opposition",  180, False),
)
ORB = 8
# Aspects tighter than this are reported on the daily reading.
MAJOR_ORB = 5


# ── Signs ─────────────────────────────────────────────────────────────────────

def zodiac_sign(month: int, day: int) -> str:
    """Sun sign for a calendar month/day."""
    # Walk backwards from the last sign start on or before (month, day).
    for name, (start_month, start_day), _, _ in sorted(ZODIAC, key=lambda e: e[1], reverse=True):
        if (month, day) >= (start_month, start_day):
            return name
    return "Capricorn"


def sign_index(sign: str) -> int:
    return _SIGN_INDEX[sign]


def sign_element(sign: str) -> str:
    return ZODIAC[sign_index(sign)][2]


def sign_modality(sign: str) -> str:
    return ZODIAC[sign_index(sign)][3]


def _sign_for_longitude(longitude: float) -> str:
    return ZODIAC[min(11, max(0, int(longitude // 30)))][0]


# ── Positions ─────────────────────────────────────────────────────────────────

def _days_since_epoch(d: date) -> int:
    if isinstance(d, datetime):
        d = d.date()
    return (d - EPOCH).days


def _mean_motion(body: str, d: date, degrees_per_day: float, retrograde: bool = False) -> BodyPosition:
    lon = (_days_since_epoch(d) * degrees_per_day) % 360
    index = min(11, int(lon // 30))
    degree = round_half_up(lon % 30)
    return BodyPosition(
        body=body,
        sign=ZODIAC[index][0],
        degree=degree,
        house=index + 1,
        longitude=index * 30 + degree,
        retrograde=retrograde,
    )


def sun_position(d: date) -> BodyPosition:
    sign = zodiac_sign(d.month, d.day)
    day_of_year = d.timetuple().tm_yday
    degree = round_half_up((day_of_year * 360 / 365) % 30)
    return BodyPosition(body="Sun", sign=sign, degree=degree, house=1,
                        longitude=sign_index(sign) * 30 + degree)


def moon_position(d: date) -> BodyPosition:
    return _mean_motion("Moon", d, 13.176)


def mercury_position(d: date) -> BodyPosition:
    return _mean_motion("Mercury", d, 360 / 88,
                        retrograde=_days_since_epoch(d) % 120 < 21)


def venus_position(d: date) -> BodyPosition:
    return _mean_motion("Venus", d, 360 / 225)


def mars_position(d: date) -> BodyPosition:
    return _mean_motion("Mars", d, 360 / 687)


def positions(d: date) -> tuple:
    return (sun_position(d), moon_position(d), mercury_position(d),
            venus_position(d), mars_position(d))


def find_aspects(bodies) -> list[Aspect]:
    """Every pair within ORB of an exact angle; the first matching angle wins."""
    found = []
    for i, first in enumerate(bodies):
        for second in bodies[i + 1:]:
            distance = abs(second.longitude - first.longitude)
            if distance > 180:
                distance = 360 - distance
            for kind, angle, harmonious in _ASPECTS:
                orb = abs(distance - angle)
                if orb <= ORB:
                    found.append(Aspect(first.body, second.body, kind, orb, harmonious))
                    break
    return found


# ── Business impact ───────────────────────────────────────────────────────────

def business_impact(bodies, aspects) -> BusinessImpact:
    """Start every activity at 50, apply body and aspect adjustments, clamp to 0–100."""
    by_name = {b.body: b for b in bodies}
    meetings = decisions = negotiations = launches = 50

    mercury = by_name.get("Mercury")
    if mercury is not None:
        if mercury.retrograde:
            meetings -= 20
            negotiations -= 15
        elif mercury.sign in ("Gemini", "Virgo"):
            meetings += 15
            negotiations += 10

    venus = by_name.get("Venus")
    if venus is not None and venus.sign in ("Libra", "Taurus"):
        negotiations += 15

    mars = by_name.get("Mars")
    if mars is not None and mars.sign in ("Aries", "Scorpio"):
        launches += 20
        decisions += 10

    sun = by_name.get("Sun")
    if sun is not None and sun.sign in ("Leo", "Aries"):
        decisions += 15
        launches += 10

    for aspect in aspects:
        step = 5 if aspect.harmonious else -5
        meetings += step
        decisions += step
        negotiations += step
        launches += step

    return BusinessImpact(
        meetings=int(clamp(meetings)),
        decisions=int(clamp(decisions)),
        negotiations=int(clamp(negotiations)),
        launches=int(clamp(launches)),
    )


def daily_transits(d: date) -> DailyTransits:
    bodies = positions(d)
    aspects = find_aspects(bodies)
    impact = business_impact(bodies, aspects)
    moon, mercury = bodies[1], bodies[2]

    if moon.house <= 4:
        best_hours = ("9:00 AM - 12:00 PM",)
    elif moon.house <= 8:
        best_hours = ("2:00 PM - 5:00 PM",)
    else:
        best_hours = ("7:00 PM - 9:00 PM",)

    avoid_hours = []
    if mercury.retrograde:
        avoid_hours.append("12:00 PM - 2:00 PM")
    if any(not a.harmonious and a.orb < 3 for a in aspects):
        avoid_hours.append("5:00 PM - 7:00 PM")

    logger.debug(f"Transits {d}: moon {moon.sign}, {len(aspects)} aspects, "
                 f"impact avg {impact.average():.1f}")

    return DailyTransits(
        target=d.date() if isinstance(d, datetime) else d,
        moon_sign=moon.sign,
        aspects=tuple(a for a in aspects if a.orb < MAJOR_ORB),
        impact=impact,
        best_hours=best_hours,
        avoid_hours=tuple(avoid_hours),
    )


# ── Birth profile ─────────────────────────────────────────────────────────────

_ELEMENT_STRENGTHS = {
    "Fire":  ("Natural leadership and initiative", "Excellent at launching new ventures"),
    "Earth": ("Strong practical and financial skills", "Excellent at building sustainable businesses"),
    "Air":   ("Superior communication and networking", "Innovative problem-solving"),
    "Water": ("Strong intuition for market trends", "Excellent at building client relationships"),
}
_MODALITY_STRENGTHS = {
    "Cardinal": "Initiating projects and driving change",
    "Fixed":    "Maintaining focus and seeing projects through",
    "Mutable":  "Adapting to market changes quickly",
}
_ELEMENT_CHALLENGES = {
    "Fire":  "May act too impulsively",
    "Earth": "May resist necessary changes",
    "Air":   "May lack follow-through",
    "Water": "May be too emotionally influenced",
}
_MODALITY_CHALLENGES = {
    "Cardinal": "May start too many projects",
    "Fixed":    "May be too stubborn",
    "Mutable":  "May lack consistency",
}


def _dominant(values, order) -> str:
    """Most common value; ties go to the earlier entry in `order`."""
    counts = Counter(values)
    return max(order, key=lambda v: (counts[v], -order.index(v)))


def _birth_hour(birth: date) -> int:
    # Without a birth time the chart is cast for noon.
    return birth.hour if isinstance(birth, datetime) else 12


def _location_moon_sign(birth: date, place: Birthplace) -> str:
    days = _days_since_epoch(birth) - (J2000 - EPOCH).days + (_birth_hour(birth) - 12) / 24
    mean_longitude = (218.316 + 13.176396 * days) % 360
    return _sign_for_longitude((mean_longitude + place.longitude / 15) % 360)


def _location_rising_sign(birth: date, place: Birthplace) -> str:
    sidereal = ((_birth_hour(birth) + place.longitude / 15) * 15) % 360
    return _sign_for_longitude(sidereal)


def _offset_sign(month: int, day: int, offset: int) -> str:
    return zodiac_sign((month + offset) % 12 or 12, day)


def astrology_profile(birth: date, birthplace: Optional[Birthplace] = None) -> AstrologyProfile:
    """
    Birth-chart summary. Without a birthplace the moon and rising signs come
    from fixed month offsets (+4 and +2) and `location_based` is False.
    """
    sun_sign = zodiac_sign(birth.month, birth.day)

    if birthplace is None:
        logger.warning("No birthplace supplied, using calendar offsets for moon and rising signs")
        moon_sign = _offset_sign(birth.month, birth.day, 4)
        rising_sign = _offset_sign(birth.month, birth.day, 2)
    else:
        moon_sign = _location_moon_sign(birth, birthplace)
        rising_sign = _location_rising_sign(birth, birthplace)

    bodies = positions(birth)
    element = _dominant([sign_element(b.sign) for b in bodies], ["Fire", "Earth", "Air", "Water"])
    modality = _dominant([sign_modality(b.sign) for b in bodies], ["Cardinal", "Fixed", "Mutable"])

    return AstrologyProfile(
        sun_sign=sun_sign,
        moon_sign=moon_sign,
        rising_sign=rising_sign,
        dominant_element=element,
        dominant_modality=modality,
        strengths=_ELEMENT_STRENGTHS[element] + (_MODALITY_STRENGTHS[modality],),
        challenges=(_ELEMENT_CHALLENGES[element], _MODALITY_CHALLENGES[modality]),
        location_based=birthplace is not None,
    )
