"""
Profile builders.

  - Personal    once per person, from the birth date (and birthplace if known)
  - Earth       once per target date; the biorhythm needs the birth date too
  - Challenges  once per person, from the birth date and name

Only an absent or unparseable birth date raises. Everything optional
degrades to a neutral default with a flag.
"""
from datetime import date, datetime
from typing import Optional, Union

from dateutil.parser import parse as parse_date
from loguru import logger

import config
from alignment import numerology
from alignment.astrology import astrology_profile, daily_transits, zodiac_sign
from alignment.biorhythm import biorhythm_reading, neutral_biorhythm
from alignment.constitution import constitution_for
from alignment.elements import element_for_year
from alignment.errors import InvalidBirthDateError
from alignment.lunar import lunar_reading
from alignment.models import Birthplace, ChallengesProfile, EarthProfile, PersonalProfile
from alignment.timing_table import birth_pattern, daily_pattern
from alignment.weekday_table import day_reading

BirthDate = Union[str, date, datetime]

_DEFAULT_LIFE_LESSON = "Build on your strengths with steady, consistent effort"

# dateutil fills missing fields from `default`; two defaults that differ in
# year, month and day expose any field the text left out.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_full_date(text: str) -> datetime:
    """Parse a date string that names its year, month and day explicitly."""
    first, second = (parse_date(text, default=d) for d in _DEFAULTS)
    if first != second:
        raise ValueError(f"incomplete date {text!r}, year, month and day are required")
    return first


def parse_birth_date(value: Optional[BirthDate]) -> Union[date, datetime]:
    """
    Accepts a date, a datetime or any string dateutil understands
    ("1990-05-15", "15 May 1990", "1990-05-15T04:23:00Z"). Strings missing
    the year, month or day ("1990", "May 1990") are rejected.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidBirthDateError(value, "missing")
    if isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str):
        raise InvalidBirthDateError(value, f"unsupported type {type(value).__name__}")
    try:
        parsed = parse_full_date(value)
    except (ValueError, OverflowError) as e:
        raise InvalidBirthDateError(value, str(e)) from e
    # Date-only strings carry no time of birth.
    return parsed if parsed.time() != datetime.min.time() else parsed.date()


def _calendar_date(d: Union[date, datetime]) -> date:
    return d.date() if isinstance(d, datetime) else d


# ── Personal ──────────────────────────────────────────────────────────────────

def build_personal_profile(
    birth_date: BirthDate,
    birthplace: Optional[Birthplace] = None,
    today: Optional[date] = None,
) -> PersonalProfile:
    birth = parse_birth_date(birth_date)
    day = _calendar_date(birth)
    today = today or date.today()

    profile = PersonalProfile(
        birth_date=day,
        life_path_number=numerology.life_path_number(day),
        personal_year_number=numerology.personal_year_number(day, today.year),
        day_born=numerology.analyze_day_born(day),
        life_path=numerology.analyze_life_path(day),
        birth_pattern=birth_pattern(day),
        constitution=constitution_for(day),
        birth_element=element_for_year(day.year),
        zodiac_sign=zodiac_sign(day.month, day.day),
        astrology=astrology_profile(birth, birthplace),
    )
    logger.debug(f"Personal profile {day}: life path {profile.life_path_number}, "
                 f"pattern {profile.birth_pattern.number}, element {profile.birth_element.value}")
    return profile


# ── Earth ─────────────────────────────────────────────────────────────────────

def build_earth_profile(target: Union[date, datetime], birth_date: Optional[BirthDate] = None) -> EarthProfile:
    """
    Daily reading. The hour of a datetime target drives the constitution
    guidance; a plain date counts as midnight. Without a birth date the
    biorhythm is the neutral, unavailable reading.
    """
    day = _calendar_date(target)
    hour = target.hour if isinstance(target, datetime) else 0

    if birth_date is None:
        biorhythm = neutral_biorhythm(day, config.BIORHYTHM_DEFAULT)
    else:
        biorhythm = biorhythm_reading(_calendar_date(parse_birth_date(birth_date)), day)

    return EarthProfile(
        target=day,
        hour=hour,
        lunar=lunar_reading(target),
        day=day_reading(day),
        daily_pattern=daily_pattern(day),
        daily_element=element_for_year(day.year),
        day_number=numerology.day_number(day),
        transits=daily_transits(day),
        biorhythm=biorhythm,
    )


# ── Challenges ────────────────────────────────────────────────────────────────

def build_challenges_profile(birth_date: BirthDate, name: str = "") -> ChallengesProfile:
    day = _calendar_date(parse_birth_date(birth_date))
    name = name.strip() if name else ""
    if not name:
        name = config.DEFAULT_PROFILE_NAME

    karmic = numerology.analyze_karmic_numbers(day, name)
    life_path = numerology.life_path_number(day)

    return ChallengesProfile(
        karmic=karmic,
        life_lessons=karmic.lessons or (_DEFAULT_LIFE_LESSON,),
        blind_spots=numerology.blind_spots(life_path) or ("Work on self-awareness",),
        growth_opportunities=numerology.growth_opportunities(life_path, karmic),
        patterns_to_overcome=numerology.patterns_to_overcome(karmic),
    )
