"""
Record types shared by the calculators, the profile builders and the engine.

Every record is a frozen dataclass created fresh per call. Closed categorical
sets are Enums so the permitted values are fixed in one place.
"""
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Mapping, Optional


# ── Categories ────────────────────────────────────────────────────────────────

class Timing(str, Enum):
    ACT = "act"
    WAIT = "wait"
    PREPARE = "prepare"
    REFLECT = "reflect"


class EnergyLevel(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class Element(str, Enum):
    WOOD = "Wood"
    FIRE = "Fire"
    EARTH = "Earth"
    METAL = "Metal"
    WATER = "Water"


class Constitution(str, Enum):
    VATA = "Vata"
    PITTA = "Pitta"
    KAPHA = "Kapha"


class LunarPhase(str, Enum):
    NEW_MOON = "new_moon"
    WAXING_CRESCENT = "waxing_crescent"
    FIRST_QUARTER = "first_quarter"
    WAXING_GIBBOUS = "waxing_gibbous"
    FULL_MOON = "full_moon"
    WANING_GIBBOUS = "waning_gibbous"
    LAST_QUARTER = "last_quarter"
    WANING_CRESCENT = "waning_crescent"


class Activity(str, Enum):
    MEETINGS = "meetings"
    DECISIONS = "decisions"
    DEALS = "deals"
    SIGNING = "signing"
    NEGOTIATIONS = "negotiations"
    PLANNING = "planning"
    PRESENTATIONS = "presentations"
    TRAVEL = "travel"
    LAUNCHING = "launching"


class CyclePhase(str, Enum):
    HIGH = "High"
    LOW = "Low"
    CRITICAL = "Critical"


# ── Subsystem readings ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TimingPattern:
    number: int
    name: str
    timing: Timing
    energy: EnergyLevel
    business_guidance: str
    best_for: tuple
    avoid: tuple
    optimal_timing: str


@dataclass(frozen=True)
class ActivityRating:
    score: int
    guidance: str


@dataclass(frozen=True)
class DayReading:
    day_of_week: str
    ratings: Mapping[Activity, ActivityRating]
    best_for: tuple
    avoid: tuple
    overall_score: int

    def rating(self, activity: Activity) -> ActivityRating:
        return self.ratings[activity]


@dataclass(frozen=True)
class ConstitutionProfile:
    primary: Constitution
    secondary: Optional[Constitution]
    work_style: str
    energy_pattern: str
    best_time_of_day: str
    decision_making: str
    strengths: tuple
    challenges: tuple


@dataclass(frozen=True)
class ConstitutionGuidance:
    energy_level: int
    peak_hours: str
    recommended_activities: tuple
    avoid: tuple
    business_focus: str


@dataclass(frozen=True)
class LunarReading:
    phase: LunarPhase
    influence: int
    fraction: float


@dataclass(frozen=True)
class BiorhythmCycle:
    name: str
    period: int
    value: int
    phase: CyclePhase
    percentage: int
    description: str


@dataclass(frozen=True)
class BiorhythmReading:
    target: date
    physical: Optional[BiorhythmCycle]
    emotional: Optional[BiorhythmCycle]
    intellectual: Optional[BiorhythmCycle]
    composite: int
    overall_phase: str
    best_for: tuple = ()
    avoid: tuple = ()
    available: bool = True

    def critical_count(self) -> int:
        cycles = (self.physical, self.emotional, self.intellectual)
        return sum(1 for c in cycles if c is not None and c.phase is CyclePhase.CRITICAL)


@dataclass(frozen=True)
class Birthplace:
    latitude: float
    longitude: float
    city: str = ""
    country: str = ""


@dataclass(frozen=True)
class BodyPosition:
    body: str
    sign: str
    degree: int
    house: int
    longitude: int
    retrograde: bool = False


@dataclass(frozen=True)
class Aspect:
    first: str
    second: str
    kind: str
    orb: float
    harmonious: Optional[bool]


@dataclass(frozen=True)
class AstrologyProfile:
    sun_sign: str
    moon_sign: str
    rising_sign: str
    dominant_element: str
    dominant_modality: str
    strengths: tuple
    challenges: tuple
    location_based: bool


@dataclass(frozen=True)
class BusinessImpact:
    meetings: int
    decisions: int
    negotiations: int
    launches: int

    def average(self) -> float:
        return (self.meetings + self.decisions + self.negotiations + self.launches) / 4


@dataclass(frozen=True)
class DailyTransits:
    target: date
    moon_sign: str
    aspects: tuple
    impact: BusinessImpact
    best_hours: tuple
    avoid_hours: tuple


@dataclass(frozen=True)
class DayBornAnalysis:
    day_number: int
    ruler: str
    characteristics: tuple
    strengths: tuple
    challenges: tuple


@dataclass(frozen=True)
class LifePathAnalysis:
    life_path_number: int
    description: str
    purpose: str
    talents: tuple
    challenges: tuple
    careers: tuple


@dataclass(frozen=True)
class KarmicAnalysis:
    has_karmic_debt: bool
    karmic_numbers: tuple
    karmic_debt_numbers: tuple
    expression_number: int
    lessons: tuple
    guidance: str


# ── Profiles ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PersonalProfile:
    birth_date: date
    life_path_number: int
    personal_year_number: int
    day_born: DayBornAnalysis
    life_path: LifePathAnalysis
    birth_pattern: TimingPattern
    constitution: Optional[ConstitutionProfile]
    birth_element: Element
    zodiac_sign: str
    astrology: AstrologyProfile


@dataclass(frozen=True)
class EarthProfile:
    target: date
    hour: int
    lunar: LunarReading
    day: DayReading
    daily_pattern: TimingPattern
    daily_element: Element
    day_number: int
    transits: Optional[DailyTransits]
    biorhythm: BiorhythmReading


@dataclass(frozen=True)
class ChallengesProfile:
    karmic: KarmicAnalysis
    life_lessons: tuple
    blind_spots: tuple
    growth_opportunities: tuple
    patterns_to_overcome: tuple


# ── Derived analysis ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ComponentScores:
    timing: int
    element: int
    day: int
    lunar: int
    biorhythm: int
    transit: float
    constitution: int

    def as_list(self) -> list:
        return [self.timing, self.element, self.day, self.lunar,
                self.biorhythm, self.transit, self.constitution]


@dataclass(frozen=True)
class OptimalWindows:
    meetings: str
    decisions: str
    deals: str
    planning: str


@dataclass(frozen=True)
class CombinedAnalysis:
    components: ComponentScores
    overall_alignment: int
    perfect_day_score: int
    confidence_score: int
    energy_type: str
    energy_description: str
    intensity: int
    peak_hours: str
    optimal_windows: OptimalWindows
    biorhythm_available: bool


@dataclass(frozen=True)
class TimeWindow:
    time: str
    why: str
    confidence: int


@dataclass(frozen=True)
class BusinessInsights:
    top_priority: str
    top_priority_why: str
    meetings: TimeWindow
    decisions: TimeWindow
    deals: TimeWindow
    planning: TimeWindow
    best_for: tuple
    avoid: tuple
    key_opportunity: str
    watch_out: str
    perfect_day_score: int
    confidence_score: int
    used_safe_templates: bool = False

    def strings(self) -> list:
        """Every caller-visible string, in a stable order."""
        out = [self.top_priority, self.top_priority_why]
        for window in (self.meetings, self.decisions, self.deals, self.planning):
            out.extend([window.time, window.why])
        out.extend(self.best_for)
        out.extend(self.avoid)
        out.extend([self.key_opportunity, self.watch_out])
        return out


@dataclass(frozen=True)
class Explanation:
    combined: CombinedAnalysis
    insights: BusinessInsights


@dataclass(frozen=True)
class EnergyReading:
    personal: PersonalProfile
    earth: EarthProfile
    challenges: ChallengesProfile
    combined: CombinedAnalysis
    insights: BusinessInsights


@dataclass(frozen=True)
class DailyOutlook:
    target: date
    day_of_week: str
    perfect_day_score: int
    confidence_score: int
    overall_alignment: int
    energy_type: str
    critical_cycles: int


@dataclass(frozen=True)
class Forecast:
    start: date
    days: tuple
    mean_score: Optional[float]
    slope: Optional[float]
    best_days: tuple = field(default_factory=tuple)
    caution_days: tuple = field(default_factory=tuple)


# ── Serialisation ─────────────────────────────────────────────────────────────

def to_dict(obj):
    """Plain JSON-ready structure: enums by value, dates as ISO strings."""
    if is_dataclass(obj):
        return {f.name: to_dict(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Mapping):
        return {to_dict(k): to_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_dict(v) for v in obj]
    if isinstance(obj, date):
        return obj.isoformat()
    return obj
