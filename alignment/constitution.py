"""
Constitution model — three body-type profiles and their daily rhythm.

The primary type comes from the birth season, the secondary from the day of
the month. Daily guidance depends on the hour being evaluated and on whether
the current season matches the primary type.
"""
from datetime import date

from alignment.models import Constitution, ConstitutionGuidance, ConstitutionProfile


_PROFILES = {
    Constitution.VATA: dict(
        work_style="Fast-paced with bursts of creativity",
        energy_pattern="High energy in short bursts, needs variety",
        best_time_of_day="Morning (6-10 AM) and late afternoon (2-6 PM)",
        decision_making="Quick, intuitive decisions work best",
        strengths=("Creative thinking and innovation", "Adaptability to change",
                   "Quick learning and processing", "Excellent at brainstorming"),
        challenges=("Can be scattered or unfocused", "May struggle with routine",
                    "Tendency to overthink", "Energy can be inconsistent"),
    ),
    Constitution.PITTA: dict(
        work_style="Intense focus with clear goals",
        energy_pattern="Steady high energy, competitive drive",
        best_time_of_day="Midday (10 AM - 2 PM)",
        decision_making="Analytical, strategic decisions",
        strengths=("Strong focus and concentration", "Natural leadership abilities",
                   "Excellent at execution", "Strategic and analytical thinking"),
        challenges=("Can be overly critical", "May burn out from intensity",
                    "Impatience with slower pace", "Tendency toward perfectionism"),
    ),
    Constitution.KAPHA: dict(
        work_style="Methodical and consistent",
        energy_pattern="Steady sustained energy, slow to start",
        best_time_of_day="Late morning (10 AM - 2 PM) after warming up",
        decision_making="Thoughtful, deliberate decisions",
        strengths=("Exceptional endurance and stamina", "Reliable and consistent",
                   "Excellent at building relationships", "Patient and thorough"),
        challenges=("Slow to start or change", "May resist new ideas",
                    "Can become complacent", "Needs motivation to begin"),
    ),
}


def seasonal_type(month: int) -> Constitution:
    """
    Season → dominant type (month 1–12):
      Oct–Jan  Vata
      May–Sep  Pitta
      Feb–Apr  Kapha
    """
    if month >= 10 or month == 1:
        return Constitution.VATA
    if 5 <= month <= 9:
        return Constitution.PITTA
    return Constitution.KAPHA


def constitution_for(birth: date) -> ConstitutionProfile:
    primary = seasonal_type(birth.month)

    if birth.day <= 10:
        secondary = Constitution.VATA
    elif birth.day <= 20:
        secondary = Constitution.PITTA
    else:
        secondary = Constitution.KAPHA
    if secondary is primary:
        secondary = None

    return ConstitutionProfile(primary=primary, secondary=secondary, **_PROFILES[primary])


# ── Daily guidance ─────────────────────────────────────────────────────────────

# (start_hour, end_hour, energy, peak_hours, activities, avoid, focus)
# The final row of each type has no hour band and covers every other hour.
_BANDS = {
    Constitution.VATA: (
        (6, 10, 90, "6-10 AM",
         ("Creative brainstorming", "Innovation sessions", "Quick decisions", "Networking"),
         ("Routine tasks", "Long meetings", "Detailed analysis"),
         "Peak creativity - use for innovation and ideation"),
        (14, 18, 85, "2-6 PM",
         ("Client calls", "Presentations", "Strategic planning", "Problem-solving"),
         ("Monotonous work", "Heavy analysis"),
         "High energy window - ideal for dynamic activities"),
        (None, None, 60, "6-10 AM or 2-6 PM",
         ("Planning", "Light tasks", "Communication"),
         ("Major decisions", "Complex projects"),
         "Moderate energy - focus on lighter activities"),
    ),
    Constitution.PITTA: (
        (10, 14, 95, "10 AM - 2 PM",
         ("Strategic decisions", "Competitive situations", "Negotiations", "Execution",
          "Leadership tasks"),
         ("Passive activities", "Routine work"),
         "Peak intensity - tackle your most challenging work"),
        (6, 10, 75, "10 AM - 2 PM",
         ("Planning", "Analysis", "Preparation"),
         ("Major decisions before peak",),
         "Warm-up period - prepare for peak performance"),
        (None, None, 65, "10 AM - 2 PM",
         ("Review", "Follow-up", "Relationships"),
         ("High-intensity work", "Major decisions"),
         "Post-peak - focus on relationship building"),
    ),
    Constitution.KAPHA: (
        (10, 14, 85, "10 AM - 2 PM",
         ("Steady execution", "Relationship building", "Long-term planning",
          "Team collaboration"),
         ("Rushed decisions", "Quick pivots"),
         "Steady energy - ideal for sustained effort"),
        (6, 10, 55, "10 AM - 2 PM",
         ("Warm-up activities", "Planning", "Review"),
         ("Important decisions", "High-pressure situations"),
         "Warming up - ease into the day"),
        (None, None, 70, "10 AM - 2 PM",
         ("Maintenance", "Relationships", "Reflection"),
         ("Starting new projects", "High energy demands"),
         "Maintenance mode - consolidate and connect"),
    ),
}


def daily_guidance(profile: ConstitutionProfile, hour: int, month: int) -> ConstitutionGuidance:
    """
    Guidance for one hour of one month.

    When the season matches the primary type, peaks (> 80) are amplified by 5
    (capped at 100) and everything else is damped by 10 (floored at 50).
    """
    for start, end, energy, peak, activities, avoid, focus in _BANDS[profile.primary]:
        if start is None or start <= hour < end:
            break

    if seasonal_type(month) is profile.primary:
        if energy > 80:
            energy = min(100, energy + 5)
        else:
            energy = max(50, energy - 10)

    return ConstitutionGuidance(
        energy_level=energy,
        peak_hours=peak,
        recommended_activities=activities,
        avoid=avoid,
        business_focus=focus,
    )
