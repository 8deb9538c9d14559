"""
Day-of-week favorability table.

Seven fixed readings, one per weekday (Sunday first), each rating nine
business activities 0–100 with a short guidance line. Activity lookups go
through the Activity enum so only the nine known activities can be asked for.
"""
from datetime import date, timedelta
from types import MappingProxyType

from alignment.models import Activity, ActivityRating, DayReading


def _day(name: str, ratings: dict, best_for: tuple, avoid: tuple, overall: int) -> DayReading:
    return DayReading(
        day_of_week=name,
        ratings=MappingProxyType({a: ActivityRating(*r) for a, r in ratings.items()}),
        best_for=best_for,
        avoid=avoid,
        overall_score=overall,
    )


DAYS = (
    _day(
        "Sunday",
        {
            Activity.MEETINGS: (65, "Good for informal or vision-focused discussions"),
            Activity.DECISIONS: (60, "Better for personal than business decisions"),
            Activity.DEALS: (55, "Not ideal - save major deals for weekdays"),
            Activity.SIGNING: (50, "Avoid if possible - wait for better timing"),
            Activity.NEGOTIATIONS: (60, "Relaxed atmosphere may help, but not optimal"),
            Activity.PLANNING: (80, "Excellent for strategic reflection and planning"),
            Activity.PRESENTATIONS: (65, "Good for inspirational or vision-focused talks"),
            Activity.TRAVEL: (70, "Favorable for travel, especially personal"),
            Activity.LAUNCHING: (55, "Not ideal - launch on weekdays for better results"),
        },
        best_for=("Strategic planning", "Reflection", "Personal time", "Vision work"),
        avoid=("Major business deals", "Signing contracts", "Aggressive action"),
        overall=65,
    ),
    _day(
        "Monday",
        {
            Activity.MEETINGS: (85, "Excellent for starting new initiatives"),
            Activity.DECISIONS: (80, "Good for fresh starts and new directions"),
            Activity.DEALS: (75, "Favorable for initiating new partnerships"),
            Activity.SIGNING: (80, "Good day to begin new agreements"),
            Activity.NEGOTIATIONS: (75, "Fresh energy helps open negotiations"),
            Activity.PLANNING: (90, "Perfect for weekly planning and goal-setting"),
            Activity.PRESENTATIONS: (80, "Strong day for introducing new ideas"),
            Activity.TRAVEL: (75, "Good for starting business trips"),
            Activity.LAUNCHING: (85, "Excellent for launches and new beginnings"),
        },
        best_for=("New beginnings", "Fresh starts", "Planning", "Launches"),
        avoid=("Ending things", "Closures", "Aggressive confrontation"),
        overall=82,
    ),
    _day(
        "Tuesday",
        {
            Activity.MEETINGS: (60, "Be cautious - potential for tension"),
            Activity.DECISIONS: (55, "Avoid rushed or aggressive decisions"),
            Activity.DEALS: (50, "Not ideal - wait for Wednesday or Thursday"),
            Activity.SIGNING: (45, "Avoid if possible - higher risk of issues"),
            Activity.NEGOTIATIONS: (50, "Potential for conflict - proceed carefully"),
            Activity.PLANNING: (70, "Good for contingency and risk planning"),
            Activity.PRESENTATIONS: (55, "Moderate - audience may be critical"),
            Activity.TRAVEL: (60, "Acceptable but expect minor delays"),
            Activity.LAUNCHING: (45, "Not recommended - choose a stronger day"),
        },
        best_for=("Risk assessment", "Defensive planning", "Problem-solving"),
        avoid=("Major deals", "Signing contracts", "Confrontations", "Launches"),
        overall=55,
    ),
    _day(
        "Wednesday",
        {
            Activity.MEETINGS: (95, "Peak day for all types of meetings"),
            Activity.DECISIONS: (92, "Excellent clarity for important decisions"),
            Activity.DEALS: (95, "Best day of the week for closing deals"),
            Activity.SIGNING: (95, "Strongest day for signing contracts"),
            Activity.NEGOTIATIONS: (93, "Optimal for negotiations and agreements"),
            Activity.PLANNING: (88, "Strong for strategic and financial planning"),
            Activity.PRESENTATIONS: (92, "Excellent for persuasive presentations"),
            Activity.TRAVEL: (85, "Favorable for business travel"),
            Activity.LAUNCHING: (93, "Highly favorable for product/service launches"),
        },
        best_for=("Closing deals", "Signing contracts", "Major decisions", "Launches"),
        avoid=("Nothing - this is the best business day",),
        overall=93,
    ),
    _day(
        "Thursday",
        {
            Activity.MEETINGS: (75, "Good for educational or growth-focused meetings"),
            Activity.DECISIONS: (70, "Moderate - good for expansion decisions"),
            Activity.DEALS: (72, "Acceptable, especially for growth-oriented deals"),
            Activity.SIGNING: (70, "Okay, but Wednesday is better"),
            Activity.NEGOTIATIONS: (73, "Fair, focus on win-win outcomes"),
            Activity.PLANNING: (85, "Excellent for long-term and growth planning"),
            Activity.PRESENTATIONS: (80, "Good for educational or training presentations"),
            Activity.TRAVEL: (78, "Favorable, especially for learning opportunities"),
            Activity.LAUNCHING: (75, "Good for educational or growth-focused launches"),
        },
        best_for=("Growth planning", "Learning", "Teaching", "Long-term strategy"),
        avoid=("Aggressive tactics", "Short-term thinking"),
        overall=75,
    ),
    _day(
        "Friday",
        {
            Activity.MEETINGS: (88, "Excellent for relationship-building meetings"),
            Activity.DECISIONS: (75, "Good for collaborative decisions"),
            Activity.DEALS: (85, "Strong for partnership and relationship-based deals"),
            Activity.SIGNING: (82, "Good, especially for partnership agreements"),
            Activity.NEGOTIATIONS: (90, "Excellent for win-win negotiations"),
            Activity.PLANNING: (78, "Good for collaborative planning"),
            Activity.PRESENTATIONS: (85, "Strong for relationship-focused presentations"),
            Activity.TRAVEL: (88, "Very favorable for relationship-building travel"),
            Activity.LAUNCHING: (80, "Good for relationship or community-focused launches"),
        },
        best_for=("Relationship building", "Partnerships", "Networking", "Collaboration"),
        avoid=("Confrontation", "Aggressive tactics", "Solo work"),
        overall=84,
    ),
    _day(
        "Saturday",
        {
            Activity.MEETINGS: (40, "Not recommended - low energy and potential obstacles"),
            Activity.DECISIONS: (35, "Avoid major decisions - judgment may be clouded"),
            Activity.DEALS: (30, "Not favorable - postpone to next week"),
            Activity.SIGNING: (25, "Avoid - high risk of complications"),
            Activity.NEGOTIATIONS: (35, "Challenging - likely to encounter resistance"),
            Activity.PLANNING: (75, "Good for detailed, structured planning"),
            Activity.PRESENTATIONS: (40, "Not ideal - audience may be unreceptive"),
            Activity.TRAVEL: (45, "Acceptable for personal, not ideal for business"),
            Activity.LAUNCHING: (25, "Not recommended - wait for a better day"),
        },
        best_for=("Detailed planning", "Reflection", "Review", "Personal time"),
        avoid=("Major decisions", "Deals", "Signing contracts", "Launches", "Confrontations"),
        overall=40,
    ),
)


def _weekday_index(d: date) -> int:
    """0 = Sunday … 6 = Saturday."""
    return (d.weekday() + 1) % 7


def day_reading(d: date) -> DayReading:
    return DAYS[_weekday_index(d)]


def activity_rating(d: date, activity: Activity) -> ActivityRating:
    return day_reading(d).rating(activity)


def best_day_for(activity: Activity) -> DayReading:
    """Highest-rated weekday for an activity (earliest in the week on ties)."""
    best = DAYS[0]
    for reading in DAYS:
        if reading.rating(activity).score > best.rating(activity).score:
            best = reading
    return best


def next_optimal_day(d: date, activity: Activity, min_score: int = 80) -> tuple[date, DayReading]:
    """
    First date in the following seven days whose rating for `activity`
    reaches `min_score`. Falls back to the next occurrence of the
    best-rated weekday when no day qualifies.
    """
    for offset in range(1, 8):
        candidate = d + timedelta(days=offset)
        reading = day_reading(candidate)
        if reading.rating(activity).score >= min_score:
            return candidate, reading

    best = best_day_for(activity)
    target = next(i for i, reading in enumerate(DAYS) if reading is best)
    days_until = (target - _weekday_index(d) + 7) % 7 or 7
    return d + timedelta(days=days_until), best


def overall_label(reading: DayReading) -> str:
    if reading.overall_score >= 85:
        return "Excellent day for business"
    if reading.overall_score >= 70:
        return "Good day for most activities"
    if reading.overall_score >= 55:
        return "Moderate day - be selective"
    return "Challenging day - focus on planning"
