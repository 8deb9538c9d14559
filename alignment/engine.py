"""
Engine entry points.

  - synthesize_and_explain   profiles in, combined analysis + insights out
  - calculate_energy_reading one-shot reading from birth data and a date
"""
from datetime import date, datetime
from typing import Optional, Union

from loguru import logger

from alignment.insights import generate_insights
from alignment.models import Birthplace, EarthProfile, EnergyReading, Explanation, PersonalProfile
from alignment.profiles import (
    BirthDate, build_challenges_profile, build_earth_profile, build_personal_profile,
)
from alignment.synthesis import synthesize


def synthesize_and_explain(personal: PersonalProfile, earth: EarthProfile) -> Explanation:
    combined = synthesize(personal, earth)
    insights = generate_insights(personal, earth, combined)
    return Explanation(combined=combined, insights=insights)


def calculate_energy_reading(
    birth_date: BirthDate,
    target: Optional[Union[date, datetime]] = None,
    birthplace: Optional[Birthplace] = None,
    name: str = "",
) -> EnergyReading:
    """
    Full reading for one person on one date (today when omitted).
    The birth date is threaded into the daily profile so the biorhythm is live.
    """
    target = target or date.today()
    day = target.date() if isinstance(target, datetime) else target
    personal = build_personal_profile(birth_date, birthplace, today=day)
    earth = build_earth_profile(target, birth_date=personal.birth_date)
    challenges = build_challenges_profile(personal.birth_date, name)
    explanation = synthesize_and_explain(personal, earth)

    logger.info(
        f"Reading {earth.target} | perfect day {explanation.combined.perfect_day_score} | "
        f"confidence {explanation.combined.confidence_score} | "
        f"type {explanation.combined.energy_type}"
    )

    return EnergyReading(
        personal=personal,
        earth=earth,
        challenges=challenges,
        combined=explanation.combined,
        insights=explanation.insights,
    )
