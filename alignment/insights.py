"""
Insight generator — turns a combined analysis into concrete time windows.

Everything hangs off one optimal hour:
  - meetings   optimal hour, two-hour window
  - decisions  one hour later, at the display minute
  - deals      one hour earlier, half-past to half-past
  - planning   the day table's planning guidance, passed through

The headline is picked by perfect-day band (≥90, ≥75, ≥60, below). Every
caller-visible string is checked against the terminology filter; on any hit
the whole set is rebuilt from fixed safe templates.
"""
import re

from loguru import logger

import config
from alignment.models import (
    Activity, BusinessInsights, CombinedAnalysis, EarthProfile, PersonalProfile, TimeWindow,
)
from alignment.stats import clamp, round_half_up
from alignment.synthesis import guidance_for
from alignment.terminology import ensure_clean, find_banned_terms

_HOUR_TOKEN = re.compile(
    r"(\d{1,2})(?::\d{2})?\s*(?:-\s*\d{1,2}(?::\d{2})?\s*)?(AM|PM)", re.IGNORECASE
)


# ── Time arithmetic ────────────────────────────────────────────────────────────

def parse_peak_hour(peak_hours: str) -> int:
    """
    First hour in a peak-hours string, as a 24h hour.

      "10 AM - 2 PM" → 10    "2-6 PM" → 14    "6-10 AM" → 6

    A range shares the meridiem written after it. Unparseable text falls back
    to OPTIMAL_HOUR_FALLBACK.
    """
    match = _HOUR_TOKEN.search(peak_hours or "")
    if not match:
        return config.OPTIMAL_HOUR_FALLBACK
    hour, meridiem = int(match.group(1)), match.group(2).upper()
    if meridiem == "PM" and hour != 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0
    return hour


def optimal_hour(base_hour: int, life_path_number: int, day_score: int, lunar_influence: int) -> int:
    """Adjusted hour, always inside the business window."""
    hour = base_hour + (life_path_number % 9) - 4
    if day_score <= 75:
        hour += 1
    if lunar_influence > 80:
        hour -= 1

    if hour < config.BUSINESS_HOUR_START:
        return config.BUSINESS_HOUR_START
    if hour > config.BUSINESS_HOUR_END:
        return config.OPTIMAL_HOUR_FALLBACK
    return hour


def display_minute(life_path_number: int, day_number: int) -> int:
    """0, 15, 30 or 45, fixed for a given person and day."""
    return 15 * ((life_path_number + day_number) % 4)


def next_day_score(earth: EarthProfile) -> int:
    trend = 5 if earth.lunar.influence > 80 else -5
    return int(clamp(earth.day.overall_score + trend))


def count_active_signals(personal: PersonalProfile, earth: EarthProfile) -> int:
    readings = (
        personal.life_path_number, personal.birth_pattern, personal.constitution,
        earth.day, earth.lunar, personal.birth_element, personal.zodiac_sign,
    )
    return sum(1 for r in readings if r)


def _clock(hour: int, minute: int = 0) -> str:
    return f"{hour:02d}:{minute:02d}"


def _span(start_hour: int, end_hour: int, minute: int = 0) -> str:
    return f"{_clock(start_hour, minute)}–{_clock(end_hour, minute)}"


# ── Confidences ───────────────────────────────────────────────────────────────

def _window_confidences(earth: EarthProfile, combined: CombinedAnalysis) -> dict:
    conf = combined.confidence_score
    day = earth.day
    return {
        "meetings":  round_half_up((conf + day.rating(Activity.MEETINGS).score) / 2),
        "decisions": round_half_up(
            (conf + day.rating(Activity.DECISIONS).score + earth.lunar.influence) / 3),
        "deals":     round_half_up((day.rating(Activity.DEALS).score + conf) / 2),
        "planning":  round_half_up((day.rating(Activity.PLANNING).score + conf) / 2),
    }


# ── Templates ─────────────────────────────────────────────────────────────────

def _headline(band_score: int, when: str, hour: int, personal, earth, guidance) -> tuple[str, str]:
    day_name = earth.day.day_of_week
    pattern = earth.daily_pattern

    if band_score >= config.BAND_EXCEPTIONAL:
        return (
            f"Schedule your most critical negotiation or major decision at {when} today",
            f"Your personal indicators line up with {day_name}'s peak energy. Your strengths "
            f"combine with favorable outside conditions for maximum impact.",
        )
    if band_score >= config.BAND_STRONG:
        return (
            f"{pattern.business_guidance}. Best window: {when}",
            f"Strong alignment across {count_active_signals(personal, earth)} independent signals. "
            f"{guidance.business_focus}.",
        )
    if band_score >= config.BAND_MODERATE:
        return (
            f"{guidance.business_focus}. Schedule between {guidance.peak_hours}",
            f"Moderate conditions - lean on your core strengths during peak hours. "
            f"{pattern.business_guidance}.",
        )
    return (
        f"Focus on strategic planning and preparation. "
        f"Avoid major decisions until after {_clock(hour + 2)}",
        f"Current {day_name} conditions favor reflection over action. Use this time to "
        f"prepare for tomorrow's outlook score of {next_day_score(earth)}.",
    )


def _primary(personal, earth, combined, hour, minute, confidence) -> BusinessInsights:
    guidance = guidance_for(personal, earth)
    day = earth.day
    pattern = earth.daily_pattern

    top, why = _headline(combined.perfect_day_score, _clock(hour, minute), hour,
                         personal, earth, guidance)

    meetings = TimeWindow(
        time=_span(hour, hour + 2),
        why=f"Your energy peaks during this window. {day.day_of_week} favors persuasive "
            f"communication ({day.rating(Activity.MEETINGS).score}/100 favorable).",
        confidence=confidence["meetings"],
    )
    decisions = TimeWindow(
        time=_clock(hour + 1, minute),
        why=f"{pattern.business_guidance}. Clarity is at its highest here and outside "
            f"conditions support decisive action.",
        confidence=confidence["decisions"],
    )
    deals = TimeWindow(
        time=_span(hour - 1, hour, 30),
        why=f"{day.day_of_week}: {day.rating(Activity.DEALS).guidance}. Your natural rhythm "
            f"fits today's conditions for negotiation.",
        confidence=confidence["deals"],
    )
    planning = TimeWindow(
        time=day.rating(Activity.PLANNING).guidance,
        why=f"{combined.energy_description}. {guidance.business_focus}. Best for strategic "
            f"thinking and long-term vision.",
        confidence=confidence["planning"],
    )

    return BusinessInsights(
        top_priority=top,
        top_priority_why=why,
        meetings=meetings,
        decisions=decisions,
        deals=deals,
        planning=planning,
        best_for=tuple(pattern.best_for[:2]) + tuple(guidance.recommended_activities[:2]),
        avoid=tuple(pattern.avoid[:2]) + tuple(guidance.avoid[:1]),
        key_opportunity=day.best_for[0] if day.best_for else "Focus on your strengths",
        watch_out=day.avoid[0] if day.avoid else "Avoid rushing decisions",
        perfect_day_score=combined.perfect_day_score,
        confidence_score=combined.confidence_score,
    )


def _safe(combined, hour, minute, confidence, tomorrow) -> BusinessInsights:
    """Fixed wording with only numbers and clock times interpolated."""
    score = combined.perfect_day_score
    when = _clock(hour, minute)

    if score >= config.BAND_EXCEPTIONAL:
        top = f"Schedule your most important decision at {when} today"
        why = "Conditions are unusually favorable. Use the window for your highest-impact work."
    elif score >= config.BAND_STRONG:
        top = f"Move forward on priority work. Best window: {when}"
        why = "Most indicators agree today. Momentum favors steady, confident action."
    elif score >= config.BAND_MODERATE:
        top = f"Focus on your core strengths around {when}"
        why = "Conditions are moderate. Concentrate effort in your peak hours."
    else:
        top = (f"Focus on strategic planning and preparation. "
               f"Avoid major decisions until after {_clock(hour + 2)}")
        why = f"Today favors reflection over action. Prepare for tomorrow's outlook score of {tomorrow}."

    return BusinessInsights(
        top_priority=top,
        top_priority_why=why,
        meetings=TimeWindow(_span(hour, hour + 2),
                            "Your energy peaks during this window.", confidence["meetings"]),
        decisions=TimeWindow(_clock(hour + 1, minute),
                             "Clarity is at its highest shortly after your peak begins.",
                             confidence["decisions"]),
        deals=TimeWindow(_span(hour - 1, hour, 30),
                         "A calm window ahead of your peak suits negotiation.", confidence["deals"]),
        planning=TimeWindow("Morning, before meetings begin",
                            "Best for strategic thinking and long-term vision.",
                            confidence["planning"]),
        best_for=("Focused work", "Clear communication", "Strategic planning", "Follow-through"),
        avoid=("Rushed decisions", "Overcommitting", "Unplanned meetings"),
        key_opportunity="Focus on your strengths",
        watch_out="Avoid rushing decisions",
        perfect_day_score=combined.perfect_day_score,
        confidence_score=combined.confidence_score,
        used_safe_templates=True,
    )


# ── Entry point ───────────────────────────────────────────────────────────────

def generate_insights(
    personal: PersonalProfile,
    earth: EarthProfile,
    combined: CombinedAnalysis,
) -> BusinessInsights:
    guidance = guidance_for(personal, earth)
    hour = optimal_hour(
        parse_peak_hour(guidance.peak_hours),
        personal.life_path_number,
        earth.day.overall_score,
        earth.lunar.influence,
    )
    minute = display_minute(personal.life_path_number, earth.day_number)
    confidence = _window_confidences(earth, combined)

    insights = _primary(personal, earth, combined, hour, minute, confidence)

    leaked = [term for text in insights.strings() for term in find_banned_terms(text)]
    if leaked:
        logger.warning(f"Insight text for {earth.target} leaked {sorted(set(leaked))}, "
                       f"falling back to safe templates")
        insights = _safe(combined, hour, minute, confidence, next_day_score(earth))
        for text in insights.strings():
            ensure_clean(text)

    logger.debug(f"Insights {earth.target} | optimal {_clock(hour, minute)} | "
                 f"safe={insights.used_safe_templates}")
    return insights
