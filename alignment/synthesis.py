"""
Synthesis engine — combines one personal profile with one daily profile.

Pipeline:
  1. Seven component scores, in fixed order:
       timing pattern, five element, day rating, lunar influence,
       biorhythm composite, transit impact, constitution/lunar
  2. Overall alignment  = rounded mean of the components
  3. Perfect day score  = fixed weighted blend of five components
  4. Confidence         = 100 − 2·σ of the components, clamped to 0–100
  5. Energy archetype   = ARCHETYPES[(life path + day number) % 9]
  6. Peak hours and optimal windows copied from the underlying readings

Missing optional inputs fall back to neutral defaults; nothing here raises.
"""
from loguru import logger

import config
from alignment.constitution import daily_guidance
from alignment.models import (
    Activity, CombinedAnalysis, ComponentScores, ConstitutionGuidance, EarthProfile,
    OptimalWindows, PersonalProfile,
)
from alignment.scoring import (
    biorhythm_score, clamp_score, constitution_lunar_alignment, element_alignment,
    timing_alignment, transit_score,
)
from alignment.stats import mean, population_std_dev, round_half_up


# ── Shared lookups ─────────────────────────────────────────────────────────────

def guidance_for(personal: PersonalProfile, earth: EarthProfile) -> ConstitutionGuidance:
    """Constitution guidance for the target hour, or a neutral stand-in without a profile."""
    if personal.constitution is None:
        return ConstitutionGuidance(
            energy_level=config.CONSTITUTION_LUNAR_DEFAULT,
            peak_hours=config.DEFAULT_PEAK_HOURS,
            recommended_activities=(),
            avoid=(),
            business_focus="Balanced energy - pace the day evenly",
        )
    return daily_guidance(personal.constitution, earth.hour, earth.target.month)


def archetype(life_path_number: int, day_number: int) -> tuple[str, str]:
    return config.ARCHETYPES[(life_path_number + day_number) % len(config.ARCHETYPES)]


# ── Components ─────────────────────────────────────────────────────────────────

def component_scores(personal: PersonalProfile, earth: EarthProfile) -> tuple[ComponentScores, bool]:
    constitution = personal.constitution.primary if personal.constitution else None
    biorhythm, available = biorhythm_score(earth.biorhythm)
    components = ComponentScores(
        timing=timing_alignment(personal.birth_pattern, earth.daily_pattern),
        element=element_alignment(personal.birth_element, earth.daily_element),
        day=earth.day.overall_score,
        lunar=earth.lunar.influence,
        biorhythm=biorhythm,
        transit=transit_score(earth.transits),
        constitution=constitution_lunar_alignment(constitution, earth.lunar.phase),
    )
    return components, available


def perfect_day_score(components: ComponentScores) -> int:
    w = config.PERFECT_DAY_WEIGHTS
    blended = (
        w["timing"] * components.timing
        + w["element"] * components.element
        + w["day"] * components.day
        + w["lunar"] * components.lunar
        + w["constitution"] * components.constitution
    )
    return round_half_up(blended)


def confidence_score(scores: list) -> int:
    """High when the components agree; a spread of 50 or more drives it to zero."""
    return clamp_score(100 - 2 * population_std_dev(scores))


# ── Master synthesis ───────────────────────────────────────────────────────────

def synthesize(personal: PersonalProfile, earth: EarthProfile) -> CombinedAnalysis:
    components, biorhythm_available = component_scores(personal, earth)
    scores = components.as_list()

    overall = round_half_up(mean(scores))
    perfect = perfect_day_score(components)
    confidence = confidence_score(scores)
    energy_type, energy_description = archetype(personal.life_path_number, earth.day_number)

    guidance = guidance_for(personal, earth)
    windows = OptimalWindows(
        meetings=guidance.peak_hours,
        decisions=earth.daily_pattern.optimal_timing,
        deals=earth.day.rating(Activity.DEALS).guidance,
        planning=earth.day.rating(Activity.PLANNING).guidance,
    )

    logger.debug(
        f"Synthesis {earth.target} | components {scores} | "
        f"overall {overall} | perfect {perfect} | confidence {confidence} | "
        f"type {energy_type}"
    )

    return CombinedAnalysis(
        components=components,
        overall_alignment=overall,
        perfect_day_score=perfect,
        confidence_score=confidence,
        energy_type=energy_type,
        energy_description=energy_description,
        intensity=overall,
        peak_hours=guidance.peak_hours,
        optimal_windows=windows,
        biorhythm_available=biorhythm_available,
    )
