"""
Central configuration for the Energy Alignment engine.
Tunable parameters are loaded from the environment where applicable;
fixed scoring constants live here so every module reads the same values.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ── Profiles ──────────────────────────────────────────────────────────────────
# Used by the challenges profile when the caller supplies an empty name.
DEFAULT_PROFILE_NAME = os.getenv("DEFAULT_PROFILE_NAME", "User")

# ── CLI ───────────────────────────────────────────────────────────────────────
# Timezone that decides what "today" means when no --date is given.
CLI_TIMEZONE = os.getenv("CLI_TIMEZONE", "UTC")

# ── Forecast ──────────────────────────────────────────────────────────────────
FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "7"))
FORECAST_MIN_SCORE = int(os.getenv("FORECAST_MIN_SCORE", "75"))

# ── Perfect Day weighting ─────────────────────────────────────────────────────
# Fixed composite weights. They must sum to exactly 1.00 and are not
# environment-overridable.
#
#   timing pattern alignment   0.25
#   five-element alignment     0.20
#   day auspiciousness         0.30
#   lunar influence            0.15
#   constitution / lunar       0.10
PERFECT_DAY_WEIGHTS = {
    "timing":       0.25,
    "element":      0.20,
    "day":          0.30,
    "lunar":        0.15,
    "constitution": 0.10,
}

# ── Neutral defaults (missing optional data) ──────────────────────────────────
CONSTITUTION_LUNAR_DEFAULT = 75
BIORHYTHM_DEFAULT = 50
TRANSIT_IMPACT_DEFAULT = 50
# Peak-hours text used when no constitution profile is available.
DEFAULT_PEAK_HOURS = "10 AM - 2 PM"

# ── Alignment decision tables ─────────────────────────────────────────────────
TIMING_SCORES = {
    "identical":       100,
    "timing_energy":   90,
    "timing":          80,
    "energy":          75,
    "conflict":        40,
    "neutral":         65,
}

ELEMENT_SCORES = {
    "identical":          100,
    "generates":          85,
    "generated_by":       75,
    "destroys":           45,
    "destroyed_by":       35,
    "neutral":            60,
}

CONSTITUTION_LUNAR_MATCH = 90

# ── Business hours ────────────────────────────────────────────────────────────
# Optimal hour is kept inside [BUSINESS_HOUR_START, BUSINESS_HOUR_END].
# Results below the window clamp to its start; results above it fall back
# to OPTIMAL_HOUR_FALLBACK.
BUSINESS_HOUR_START = 9
BUSINESS_HOUR_END = 18
OPTIMAL_HOUR_FALLBACK = 14

# ── Perfect Day bands ─────────────────────────────────────────────────────────
BAND_EXCEPTIONAL = 90
BAND_STRONG = 75
BAND_MODERATE = 60

# ── Energy archetypes ─────────────────────────────────────────────────────────
# Indexed by (life_path_number + day_number) % 9.
ARCHETYPES = (
    ("Creative Flow",        "High imagination and innovation"),
    ("Focused Execution",    "Deep concentration and completion"),
    ("Reflective Pause",     "Strategic thinking and planning"),
    ("Communicative Energy", "Networking and collaboration"),
    ("Grounded Stability",   "Practical and organized"),
    ("High Momentum",        "Fast-paced action and initiative"),
    ("Structured Growth",    "Methodical progress and building"),
    ("Transformative",       "Change and renewal"),
    ("Harmonious",           "Balance and cooperation"),
)

# ── Terminology filter ────────────────────────────────────────────────────────
# Vocabulary of the underlying systems. None of these may appear in text
# handed to callers; matching is whole-word and case-insensitive, with an
# optional plural "s".
BANNED_TERMS = (
    "i-ching", "i ching", "iching", "hexagram", "trigram",
    "ayurveda", "ayurvedic", "dosha", "vata", "pitta", "kapha",
    "thai", "auspicious",
    "numerology", "numerological", "life path", "karmic", "karma",
    "astrology", "astrological", "zodiac", "horoscope", "natal",
    "planet", "planetary", "retrograde", "transit",
    "mercury", "venus", "mars", "saturn", "jupiter", "rahu", "ketu",
    "lunar", "moon", "full moon", "new moon",
    "wuxing", "five element", "yin", "yang", "qi", "chakra",
    "biorhythm", "tarot", "spiritual", "cosmic",
    "aries", "taurus", "gemini", "cancer", "leo", "virgo", "libra",
    "scorpio", "sagittarius", "capricorn", "aquarius", "pisces",
)

# ── Pythagorean Chart ─────────────────────────────────────────────────────────
PYTHAGOREAN_MAP = {
    'a': 1, 'b': 2, 'c': 3, 'd': 4, 'e': 5, 'f': 6, 'g': 7, 'h': 8, 'i': 9,
    'j': 1, 'k': 2, 'l': 3, 'm': 4, 'n': 5, 'o': 6, 'p': 7, 'q': 8, 'r': 9,
    's': 1, 't': 2, 'u': 3, 'v': 4, 'w': 5, 'x': 6, 'y': 7, 'z': 8,
}

MASTER_NUMBERS = (11, 22, 33)
KARMIC_DEBT_NUMBERS = (13, 14, 16, 19)
