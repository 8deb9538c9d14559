"""
Numerology Engine — Pythagorean system calculations.

Provides:
  - Master-number aware digit reduction (11, 22 and 33 are never reduced)
  - Life Path Number (from a birth date)
  - Personal Year and Universal Day numbers
  - Expression Number (from a name string)
  - Day-born, life-path and karmic-debt analyses for the profiles
"""
from datetime import date

from config import KARMIC_DEBT_NUMBERS, MASTER_NUMBERS, PYTHAGOREAN_MAP
from alignment.models import DayBornAnalysis, KarmicAnalysis, LifePathAnalysis


def digit_sum(n: int) -> int:
    return sum(int(d) for d in str(abs(n)))


def reduce_to_single_digit(n: int) -> int:
    """
    Reduce an integer to 1–9 via repeated digit summation, stopping early on
    the master numbers 11, 22 and 33.

    Examples:
      24 → 6
      29 → 2+9 = 11 (master, kept)
      38 → 3+8 = 11 (master, kept)
    """
    n = abs(n)
    while n > 9 and n not in MASTER_NUMBERS:
        n = digit_sum(n)
    return n


def reduction_chain(n: int) -> list[int]:
    """Every intermediate value visited by reduce_to_single_digit, start included."""
    n = abs(n)
    chain = [n]
    while n > 9 and n not in MASTER_NUMBERS:
        n = digit_sum(n)
        chain.append(n)
    return chain


def life_path_number(d: date) -> int:
    """
    Life Path Number: reduce(day + month + year).

    Example — 1990-05-15:
      15 + 5 + 1990 = 2010 → 2+0+1+0 = 3
    """
    return reduce_to_single_digit(d.day + d.month + d.year)


def personal_year_number(birth: date, year: int) -> int:
    return reduce_to_single_digit(birth.day + birth.month + year)


def day_number(d: date) -> int:
    """
    Universal Day Number for a calendar date.
    Identical method to life_path_number but applied to the target date.
    """
    return reduce_to_single_digit(d.day + d.month + d.year)


def expression_number(name: str) -> int:
    """Pythagorean value of the alphabetic characters in a name."""
    total = sum(PYTHAGOREAN_MAP.get(ch, 0) for ch in name.lower() if ch.isalpha())
    return reduce_to_single_digit(total)


# ── Day born ──────────────────────────────────────────────────────────────────

_DAY_BORN = {
    1:  ("Sun", ("Leadership", "Independence", "Innovation", "Ambition"),
         ("Natural leader", "Creative thinker", "Self-motivated", "Pioneering spirit"),
         ("Can be domineering", "Impatient", "Stubborn")),
    2:  ("Moon", ("Diplomacy", "Sensitivity", "Cooperation", "Intuition"),
         ("Excellent mediator", "Empathetic", "Detail-oriented", "Patient"),
         ("Overly sensitive", "Indecisive", "Dependent on others")),
    3:  ("Jupiter", ("Creativity", "Expression", "Optimism", "Social"),
         ("Excellent communicator", "Artistic", "Enthusiastic", "Inspiring"),
         ("Scattered energy", "Superficial", "Extravagant")),
    4:  ("Rahu", ("Stability", "Hard work", "Discipline", "Practicality"),
         ("Reliable", "Organized", "Strong work ethic", "Detail-focused"),
         ("Rigid", "Overly serious", "Resistant to change")),
    5:  ("Mercury", ("Freedom", "Adventure", "Versatility", "Communication"),
         ("Adaptable", "Quick thinker", "Curious", "Energetic"),
         ("Restless", "Impulsive", "Inconsistent")),
    6:  ("Venus", ("Harmony", "Responsibility", "Love", "Service"),
         ("Nurturing", "Artistic", "Diplomatic", "Compassionate"),
         ("Perfectionist", "Worrying", "Self-sacrificing")),
    7:  ("Ketu", ("Analysis", "Introspection", "Wisdom", "Depth"),
         ("Deep thinker", "Intuitive", "Analytical", "Observant"),
         ("Isolated", "Overly critical", "Secretive")),
    8:  ("Saturn", ("Ambition", "Authority", "Material success", "Endurance"),
         ("Powerful", "Determined", "Business-minded", "Resilient"),
         ("Workaholic", "Materialistic", "Controlling")),
    9:  ("Mars", ("Compassion", "Completion", "Humanitarianism", "Courage"),
         ("Generous", "Idealistic", "Brave", "Inspirational"),
         ("Impulsive", "Aggressive", "Impatient")),
    11: ("Moon", ("Intuition", "Inspiration", "Vision", "Idealism"),
         ("Visionary", "Natural teacher", "Highly intuitive", "Inspirational"),
         ("Overly idealistic", "Nervous energy", "Impractical")),
    22: ("Sun", ("Master builder", "Vision", "Practical idealism", "Leadership"),
         ("Manifesting plans", "Powerful", "Visionary", "Practical"),
         ("Overwhelming responsibility", "High expectations", "Stress")),
    33: ("Jupiter", ("Master teacher", "Compassion", "Healing", "Service"),
         ("Selfless", "Healing presence", "Wise teacher", "Compassionate"),
         ("Martyr complex", "Overwhelming empathy", "Burnout")),
}


def analyze_day_born(birth: date) -> DayBornAnalysis:
    n = reduce_to_single_digit(birth.day)
    ruler, characteristics, strengths, challenges = _DAY_BORN[n]
    return DayBornAnalysis(
        day_number=n,
        ruler=ruler,
        characteristics=characteristics,
        strengths=strengths,
        challenges=challenges,
    )


# ── Life path ─────────────────────────────────────────────────────────────────

_LIFE_PATH = {
    1:  ("The Leader - here to develop independence, courage, and leadership.",
         "To pioneer new ideas and inspire others through originality and determination.",
         ("Leadership", "Innovation", "Independence", "Courage", "Determination"),
         ("Balancing independence with cooperation", "Avoiding arrogance", "Patience with others"),
         ("Entrepreneur", "Executive", "Innovator", "Designer", "Director")),
    2:  ("The Peacemaker - here to develop cooperation, diplomacy, and harmony.",
         "To bring people together through understanding and sensitivity.",
         ("Diplomacy", "Mediation", "Empathy", "Patience", "Attention to detail"),
         ("Building self-confidence", "Avoiding over-sensitivity", "Making decisions independently"),
         ("Counselor", "Mediator", "Diplomat", "Teacher", "Healthcare")),
    3:  ("The Creative Communicator - here to express and inspire.",
         "To uplift others through creativity, communication, and optimism.",
         ("Communication", "Creativity", "Optimism", "Social skills", "Artistic expression"),
         ("Focusing energy", "Avoiding superficiality", "Managing finances"),
         ("Writer", "Artist", "Entertainer", "Designer", "Marketing")),
    4:  ("The Builder - here to create stability and lasting foundations.",
         "To establish order, security, and practical systems that benefit others.",
         ("Organization", "Discipline", "Reliability", "Hard work", "Practical thinking"),
         ("Flexibility", "Avoiding rigidity", "Work-life balance"),
         ("Engineer", "Architect", "Accountant", "Manager", "Craftsperson")),
    5:  ("The Freedom Seeker - here to experience life fully and embrace change.",
         "To explore, embrace freedom, and help others adapt to change.",
         ("Adaptability", "Communication", "Curiosity", "Energy", "Versatility"),
         ("Commitment", "Focus", "Avoiding excess"),
         ("Travel", "Sales", "Marketing", "Journalism", "Consulting")),
    6:  ("The Nurturer - here to serve, heal, and create harmony.",
         "To care for others and create balance and harmony.",
         ("Nurturing", "Responsibility", "Compassion", "Artistic sense", "Healing"),
         ("Avoiding perfectionism", "Setting boundaries", "Self-care"),
         ("Healthcare", "Teaching", "Counseling", "Interior design", "Hospitality")),
    7:  ("The Seeker - here to search for truth and develop wisdom.",
         "To analyze, understand, and share intellectual insights.",
         ("Analysis", "Intuition", "Research", "Wisdom", "Depth"),
         ("Trusting others", "Avoiding isolation", "Practical application"),
         ("Researcher", "Analyst", "Scientist", "Strategist", "Philosopher")),
    8:  ("The Powerhouse - here to achieve material success and empower others.",
         "To master the material world and use power and resources wisely.",
         ("Business acumen", "Leadership", "Ambition", "Organization", "Resilience"),
         ("Work-life balance", "Avoiding materialism", "Sharing power"),
         ("Business owner", "Executive", "Finance", "Real estate", "Law")),
    9:  ("The Humanitarian - here to serve others and complete cycles.",
         "To give back through compassion, wisdom, and selfless service.",
         ("Compassion", "Idealism", "Generosity", "Wisdom", "Artistic talent"),
         ("Letting go", "Avoiding martyrdom", "Practical boundaries"),
         ("Nonprofit", "Healing arts", "Teaching", "Arts", "Social work")),
    11: ("The Messenger - here to inspire and enlighten others.",
         "To channel insight and inspire others toward higher goals.",
         ("Intuition", "Inspiration", "Insight", "Idealism", "Charisma"),
         ("Grounding energy", "Practical application", "Managing sensitivity"),
         ("Teacher", "Coach", "Artist", "Motivational speaker", "Counselor")),
    22: ("The Master Builder - here to turn grand visions into reality.",
         "To build lasting legacies that benefit many people.",
         ("Visionary thinking", "Practical manifestation", "Leadership", "Organization", "Ambition"),
         ("Managing stress", "Balancing idealism with practicality", "Patience"),
         ("Architect", "Urban planner", "CEO", "Visionary entrepreneur", "Systems designer")),
    33: ("The Master Teacher - here to uplift others through service.",
         "To teach, heal, and serve with compassion.",
         ("Healing", "Teaching", "Compassion", "Wisdom", "Selfless service"),
         ("Avoiding martyrdom", "Self-care", "Setting boundaries"),
         ("Teacher", "Healer", "Community leader", "Counselor", "Philanthropist")),
}


def analyze_life_path(birth: date) -> LifePathAnalysis:
    n = life_path_number(birth)
    description, purpose, talents, challenges, careers = _LIFE_PATH[n]
    return LifePathAnalysis(
        life_path_number=n,
        description=description,
        purpose=purpose,
        talents=talents,
        challenges=challenges,
        careers=careers,
    )


# ── Karmic debt ───────────────────────────────────────────────────────────────

_KARMIC_LESSONS = {
    13: "Learn discipline and hard work. Build through effort and perseverance.",
    14: "Learn moderation and balance, especially between freedom and responsibility.",
    16: "Learn humility. Rebuild from the ground up with integrity.",
    19: "Learn independence and selflessness. Balance personal power with service to others.",
}


def analyze_karmic_numbers(birth: date, name: str) -> KarmicAnalysis:
    """
    Karmic debt numbers (13, 14, 16, 19) are detected from:
      - the birth day itself
      - the sum of reduced day, month and year
      - any intermediate value while reducing the name total
    """
    debts: list[int] = []

    if birth.day in KARMIC_DEBT_NUMBERS:
        debts.append(birth.day)

    day_r = reduce_to_single_digit(birth.day)
    month_r = reduce_to_single_digit(birth.month)
    year_r = reduce_to_single_digit(birth.year)
    combined = day_r + month_r + year_r
    if combined in KARMIC_DEBT_NUMBERS and combined not in debts:
        debts.append(combined)

    name_total = sum(PYTHAGOREAN_MAP.get(ch, 0) for ch in name.lower() if ch.isalpha())
    for value in reduction_chain(name_total):
        if value in KARMIC_DEBT_NUMBERS and value not in debts:
            debts.append(value)

    lessons = tuple(_KARMIC_LESSONS[n] for n in debts)
    has_debt = bool(debts)
    if has_debt:
        guidance = ("Recurring lessons are present. Treat these challenges as growth "
                    "opportunities and face them with awareness and patience.")
    else:
        guidance = ("No major recurring lessons detected. Focus on your core purpose "
                    "and on helping others along the way.")

    return KarmicAnalysis(
        has_karmic_debt=has_debt,
        karmic_numbers=(day_r, month_r, year_r),
        karmic_debt_numbers=tuple(debts),
        expression_number=reduce_to_single_digit(name_total),
        lessons=lessons,
        guidance=guidance,
    )


# ── Challenge lists ───────────────────────────────────────────────────────────

_BLIND_SPOTS = {
    1: ("May overlook others' input", "Can be too independent"),
    2: ("May avoid conflict too much", "Can be overly dependent on others"),
    3: ("May scatter energy", "Can be superficial"),
    4: ("May be too rigid", "Can resist change"),
    5: ("May lack focus", "Can be impulsive"),
    6: ("May be perfectionist", "Can worry excessively"),
    7: ("May overthink", "Can be too isolated"),
    8: ("May be too focused on results", "Can neglect relationships"),
    9: ("May be too idealistic", "Can struggle with practical matters"),
}


def blind_spots(life_path: int) -> tuple:
    return _BLIND_SPOTS.get(life_path, ("Work on self-awareness",))


def growth_opportunities(life_path: int, karmic: KarmicAnalysis) -> tuple:
    opportunities = []
    if karmic.has_karmic_debt:
        opportunities.append("Transform past patterns into wisdom")
    opportunities.append("Develop your natural leadership abilities")
    opportunities.append("Build stronger collaborative relationships")
    return tuple(opportunities)


def patterns_to_overcome(karmic: KarmicAnalysis) -> tuple:
    if karmic.has_karmic_debt:
        return tuple(f"Overcome: {lesson}" for lesson in karmic.lessons)
    return ("Continue building on your strengths",)
