"""
Symbolic timing table — 64 fixed patterns.

Each pattern carries a timing category, an energy category and plain
business guidance. A pattern is selected deterministically from a birth date
(for the personal profile) or from the day of the year (for the daily
reading).
"""
from datetime import date

from alignment.models import EnergyLevel, Timing, TimingPattern

PATTERNS = (
    TimingPattern(1, "The Creative", Timing.ACT, EnergyLevel.HIGH,
                  "Peak creative power and leadership energy",
                  ("launching initiatives", "bold decisions", "taking charge", "starting projects"),
                  ("hesitation", "seeking approval", "playing it safe"),
                  "Morning, early week"),
    TimingPattern(2, "The Receptive", Timing.WAIT, EnergyLevel.MODERATE,
                  "Focus on listening and gathering information",
                  ("research", "listening to feedback", "team collaboration", "building relationships"),
                  ("forcing decisions", "aggressive action", "solo initiatives"),
                  "Afternoon, mid-week"),
    TimingPattern(3, "Difficulty at the Beginning", Timing.PREPARE, EnergyLevel.MODERATE,
                  "Expect obstacles but persist with careful planning",
                  ("detailed planning", "risk assessment", "building foundations", "patience"),
                  ("rushing", "shortcuts", "impatience"),
                  "Early morning preparation"),
    TimingPattern(4, "Youthful Folly", Timing.REFLECT, EnergyLevel.LOW,
                  "Seek expert advice before proceeding",
                  ("learning", "mentorship", "asking questions", "training"),
                  ("overconfidence", "ignoring advice", "solo decisions"),
                  "Afternoon learning sessions"),
    TimingPattern(5, "Waiting", Timing.WAIT, EnergyLevel.MODERATE,
                  "Strategic patience - the timing isn't right yet",
                  ("preparation", "building resources", "strategic planning", "patience"),
                  ("premature action", "forcing outcomes", "impatience"),
                  "Wait 2-3 days for optimal timing"),
    TimingPattern(6, "Conflict", Timing.WAIT, EnergyLevel.LOW,
                  "Avoid confrontation - seek compromise",
                  ("mediation", "finding common ground", "diplomatic solutions"),
                  ("arguments", "forcing your view", "confrontation"),
                  "Postpone contentious meetings"),
    TimingPattern(7, "The Army", Timing.ACT, EnergyLevel.HIGH,
                  "Strong leadership and organized action required",
                  ("team leadership", "organized campaigns", "strategic execution"),
                  ("disorganization", "lack of planning", "weak leadership"),
                  "Monday morning, start of initiatives"),
    TimingPattern(8, "Holding Together", Timing.ACT, EnergyLevel.MODERATE,
                  "Build alliances and strengthen partnerships",
                  ("partnerships", "team building", "networking", "collaboration"),
                  ("isolation", "solo work", "competition"),
                  "Mid-week collaboration sessions"),
    TimingPattern(9, "Small Accumulating", Timing.PREPARE, EnergyLevel.MODERATE,
                  "Focus on incremental progress, not big wins",
                  ("steady progress", "small improvements", "patience", "consistency"),
                  ("big bets", "dramatic changes", "impatience"),
                  "Daily consistent effort"),
    TimingPattern(10, "Treading", Timing.ACT, EnergyLevel.MODERATE,
                  "Proceed carefully with proper protocol",
                  ("following procedures", "professional conduct", "careful steps"),
                  ("carelessness", "breaking protocol", "risky moves"),
                  "Formal business hours"),
    TimingPattern(11, "Peace", Timing.ACT, EnergyLevel.HIGH,
                  "Optimal conditions - move forward confidently",
                  ("major decisions", "negotiations", "closing deals", "expansion"),
                  ("hesitation", "overthinking", "missing opportunities"),
                  "Peak performance windows"),
    TimingPattern(12, "Standstill", Timing.WAIT, EnergyLevel.LOW,
                  "Avoid major moves - focus on maintenance",
                  ("review", "reflection", "maintenance", "patience"),
                  ("new initiatives", "big decisions", "expansion"),
                  "Postpone until conditions improve"),
    TimingPattern(13, "Fellowship", Timing.ACT, EnergyLevel.HIGH,
                  "Leverage community and shared vision",
                  ("team projects", "community building", "shared goals", "collaboration"),
                  ("isolation", "selfish goals", "competition"),
                  "Team meetings, collaborative work"),
    TimingPattern(14, "Great Possession", Timing.ACT, EnergyLevel.HIGH,
                  "Peak success energy - capitalize on momentum",
                  ("closing major deals", "celebrations", "expansion", "investment"),
                  ("complacency", "arrogance", "waste"),
                  "High-stakes meetings, major presentations"),
    TimingPattern(15, "Modesty", Timing.REFLECT, EnergyLevel.MODERATE,
                  "Listen more than you speak - humility wins",
                  ("listening", "learning", "modest proposals", "building trust"),
                  ("boasting", "aggressive pitches", "overconfidence"),
                  "Client listening sessions"),
    TimingPattern(16, "Enthusiasm", Timing.ACT, EnergyLevel.HIGH,
                  "High energy and enthusiasm - inspire others",
                  ("motivational presentations", "team rallies", "launches"),
                  ("pessimism", "doubt", "low energy activities"),
                  "Morning kickoffs, team events"),
    TimingPattern(17, "Following", Timing.ACT, EnergyLevel.MODERATE,
                  "Adapt to circumstances - go with the flow",
                  ("flexibility", "adapting plans", "following trends"),
                  ("rigidity", "forcing your way", "resistance"),
                  "Responsive decision-making"),
    TimingPattern(18, "Work on the Decayed", Timing.ACT, EnergyLevel.MODERATE,
                  "Fix what's broken - address underlying issues",
                  ("problem-solving", "repairs", "addressing issues", "cleanup"),
                  ("ignoring problems", "superficial fixes", "avoidance"),
                  "Problem-solving sessions"),
    TimingPattern(19, "Approach", Timing.ACT, EnergyLevel.HIGH,
                  "Opportunity approaching - prepare to seize it",
                  ("seizing opportunities", "advancement", "growth"),
                  ("hesitation", "missing opportunities", "unpreparedness"),
                  "When opportunities present themselves"),
    TimingPattern(20, "Contemplation", Timing.REFLECT, EnergyLevel.LOW,
                  "Step back and observe before acting",
                  ("analysis", "observation", "strategic thinking", "review"),
                  ("hasty action", "jumping to conclusions", "impulsiveness"),
                  "Strategic planning sessions"),
    TimingPattern(21, "Biting Through", Timing.ACT, EnergyLevel.HIGH,
                  "Take decisive action - remove obstacles",
                  ("tough decisions", "removing blockers", "direct action"),
                  ("avoidance", "indecision", "procrastination"),
                  "Decisive moments, tough conversations"),
    TimingPattern(22, "Grace", Timing.ACT, EnergyLevel.MODERATE,
                  "Focus on presentation and aesthetics",
                  ("presentations", "branding", "design", "appearances"),
                  ("sloppiness", "poor presentation", "neglecting details"),
                  "Client presentations, pitches"),
    TimingPattern(23, "Splitting Apart", Timing.WAIT, EnergyLevel.LOW,
                  "Avoid major moves - conditions are unfavorable",
                  ("patience", "preservation", "minimal action"),
                  ("new ventures", "expansion", "risk-taking"),
                  "Wait for better conditions"),
    TimingPattern(24, "Return", Timing.PREPARE, EnergyLevel.MODERATE,
                  "New beginning - conditions improving",
                  ("fresh starts", "renewals", "new approaches"),
                  ("old patterns", "giving up", "pessimism"),
                  "Start of new cycles"),
    TimingPattern(25, "Innocence", Timing.ACT, EnergyLevel.HIGH,
                  "Trust your instincts - act naturally",
                  ("intuitive decisions", "spontaneous action", "authenticity"),
                  ("overthinking", "artificiality", "manipulation"),
                  "When instincts are strong"),
    TimingPattern(26, "Great Accumulating", Timing.PREPARE, EnergyLevel.MODERATE,
                  "Build resources before major action",
                  ("resource building", "preparation", "training", "accumulation"),
                  ("premature action", "depletion", "waste"),
                  "Preparation phases"),
    TimingPattern(27, "Nourishment", Timing.REFLECT, EnergyLevel.MODERATE,
                  "Focus on sustainable practices",
                  ("sustainability", "self-care", "team wellness", "long-term thinking"),
                  ("burnout", "exploitation", "short-term thinking"),
                  "Wellness initiatives"),
    TimingPattern(28, "Great Exceeding", Timing.ACT, EnergyLevel.HIGH,
                  "Bold action required - extraordinary times",
                  ("bold moves", "extraordinary measures", "crisis management"),
                  ("timidity", "normal approaches", "hesitation"),
                  "Crisis moments, urgent situations"),
    TimingPattern(29, "The Abysmal", Timing.WAIT, EnergyLevel.LOW,
                  "Navigate carefully - risks are high",
                  ("caution", "risk management", "careful planning"),
                  ("recklessness", "big bets", "overconfidence"),
                  "Postpone risky decisions"),
    TimingPattern(30, "The Clinging", Timing.ACT, EnergyLevel.HIGH,
                  "Maximum clarity - make important decisions",
                  ("major decisions", "clarity", "vision", "strategy"),
                  ("confusion", "ambiguity", "procrastination"),
                  "Strategic decision windows"),
    TimingPattern(31, "Influence", Timing.ACT, EnergyLevel.HIGH,
                  "High influence - persuade and attract",
                  ("persuasion", "attraction", "influence", "sales"),
                  ("passivity", "missing influence opportunities"),
                  "Sales calls, persuasive presentations"),
    TimingPattern(32, "Duration", Timing.ACT, EnergyLevel.MODERATE,
                  "Consistency wins - maintain steady effort",
                  ("consistency", "long-term projects", "perseverance"),
                  ("giving up", "inconsistency", "impatience"),
                  "Long-term project work"),
    TimingPattern(33, "Retreat", Timing.WAIT, EnergyLevel.LOW,
                  "Strategic retreat - regroup and reassess",
                  ("regrouping", "reassessment", "strategic pause"),
                  ("pushing forward", "stubbornness", "forcing"),
                  "When to step back"),
    TimingPattern(34, "Great Power", Timing.ACT, EnergyLevel.HIGH,
                  "Peak power - take bold action",
                  ("bold moves", "strength", "assertiveness", "leadership"),
                  ("timidity", "weakness", "hesitation"),
                  "Power moves, assertive action"),
    TimingPattern(35, "Progress", Timing.ACT, EnergyLevel.HIGH,
                  "Rapid progress - advance confidently",
                  ("advancement", "promotion", "growth", "expansion"),
                  ("stagnation", "holding back", "timidity"),
                  "Growth initiatives"),
    TimingPattern(36, "Darkening of the Light", Timing.WAIT, EnergyLevel.LOW,
                  "Lay low - not the time for visibility",
                  ("discretion", "patience", "inner work"),
                  ("high visibility", "bold moves", "exposure"),
                  "Low-profile activities"),
    TimingPattern(37, "The Family", Timing.ACT, EnergyLevel.MODERATE,
                  "Focus on team and internal relationships",
                  ("team building", "internal focus", "relationships"),
                  ("external focus", "neglecting team", "isolation"),
                  "Team development"),
    TimingPattern(38, "Opposition", Timing.WAIT, EnergyLevel.LOW,
                  "Expect differences - find common ground",
                  ("finding common ground", "diplomacy", "patience"),
                  ("forcing agreement", "confrontation", "rigidity"),
                  "Diplomatic negotiations"),
    TimingPattern(39, "Obstruction", Timing.WAIT, EnergyLevel.LOW,
                  "Obstacles present - proceed carefully",
                  ("careful planning", "patience", "problem-solving"),
                  ("rushing", "forcing", "impatience"),
                  "Wait for obstacles to clear"),
    TimingPattern(40, "Deliverance", Timing.ACT, EnergyLevel.MODERATE,
                  "Obstacles clearing - move forward",
                  ("moving forward", "relief", "resolution"),
                  ("dwelling on past", "hesitation", "holding back"),
                  "After resolution"),
    TimingPattern(41, "Decrease", Timing.REFLECT, EnergyLevel.MODERATE,
                  "Simplify and focus on essentials",
                  ("simplification", "focus", "cutting waste"),
                  ("complexity", "expansion", "excess"),
                  "Efficiency reviews"),
    TimingPattern(42, "Increase", Timing.ACT, EnergyLevel.HIGH,
                  "Growth opportunity - expand confidently",
                  ("expansion", "growth", "investment", "scaling"),
                  ("contraction", "timidity", "missing opportunities"),
                  "Growth initiatives"),
    TimingPattern(43, "Breakthrough", Timing.ACT, EnergyLevel.HIGH,
                  "Decisive breakthrough - take action",
                  ("breakthroughs", "decisive action", "resolution"),
                  ("hesitation", "indecision", "delay"),
                  "Breakthrough moments"),
    TimingPattern(44, "Coming to Meet", Timing.WAIT, EnergyLevel.MODERATE,
                  "Be selective - not all opportunities are good",
                  ("discernment", "selectivity", "caution"),
                  ("jumping at everything", "lack of discernment"),
                  "Careful evaluation"),
    TimingPattern(45, "Gathering Together", Timing.ACT, EnergyLevel.HIGH,
                  "Bring people together - collective action",
                  ("gatherings", "collective action", "unity"),
                  ("isolation", "division", "solo work"),
                  "Team gatherings, conferences"),
    TimingPattern(46, "Pushing Upward", Timing.ACT, EnergyLevel.HIGH,
                  "Steady upward progress - keep climbing",
                  ("advancement", "growth", "promotion", "progress"),
                  ("stagnation", "complacency", "stopping"),
                  "Career advancement moves"),
    TimingPattern(47, "Oppression", Timing.WAIT, EnergyLevel.LOW,
                  "Conserve energy - difficult period",
                  ("conservation", "patience", "endurance"),
                  ("big moves", "expansion", "risk-taking"),
                  "Wait for better conditions"),
    TimingPattern(48, "The Well", Timing.ACT, EnergyLevel.MODERATE,
                  "Tap into existing resources",
                  ("using resources", "drawing on experience", "sustainability"),
                  ("reinventing wheel", "ignoring resources"),
                  "Resource optimization"),
    TimingPattern(49, "Revolution", Timing.ACT, EnergyLevel.HIGH,
                  "Major change required - transform boldly",
                  ("transformation", "revolution", "major change"),
                  ("maintaining status quo", "timidity", "resistance"),
                  "Transformation initiatives"),
    TimingPattern(50, "The Cauldron", Timing.ACT, EnergyLevel.HIGH,
                  "Refine and perfect - quality focus",
                  ("refinement", "quality", "excellence", "perfection"),
                  ("rushing", "sloppiness", "cutting corners"),
                  "Quality improvement"),
    TimingPattern(51, "The Arousing", Timing.ACT, EnergyLevel.HIGH,
                  "Sudden action - respond quickly",
                  ("quick response", "agility", "decisive action"),
                  ("slow response", "hesitation", "paralysis"),
                  "Rapid response situations"),
    TimingPattern(52, "Keeping Still", Timing.REFLECT, EnergyLevel.LOW,
                  "Pause and reflect - stillness brings clarity",
                  ("reflection", "meditation", "strategic pause"),
                  ("hasty action", "restlessness", "impulsiveness"),
                  "Strategic reflection time"),
    TimingPattern(53, "Development", Timing.ACT, EnergyLevel.MODERATE,
                  "Steady gradual progress - patience pays off",
                  ("steady progress", "patience", "gradual development"),
                  ("rushing", "impatience", "shortcuts"),
                  "Long-term development"),
    TimingPattern(54, "The Marrying Maiden", Timing.WAIT, EnergyLevel.MODERATE,
                  "Focus on relationships and partnerships",
                  ("relationships", "partnerships", "collaboration"),
                  ("solo action", "independence", "isolation"),
                  "Partnership development"),
    TimingPattern(55, "Abundance", Timing.ACT, EnergyLevel.HIGH,
                  "Peak abundance - maximize opportunities",
                  ("maximizing gains", "celebration", "expansion"),
                  ("complacency", "waste", "missing peak"),
                  "Peak performance periods"),
    TimingPattern(56, "The Wanderer", Timing.ACT, EnergyLevel.MODERATE,
                  "Flexibility and adaptation required",
                  ("travel", "flexibility", "adaptation", "exploration"),
                  ("rigidity", "attachment", "resistance to change"),
                  "Travel, exploration phases"),
    TimingPattern(57, "The Gentle", Timing.ACT, EnergyLevel.MODERATE,
                  "Gentle persistence - influence subtly",
                  ("gentle persuasion", "subtle influence", "persistence"),
                  ("force", "aggression", "bluntness"),
                  "Subtle influence work"),
    TimingPattern(58, "The Joyous", Timing.ACT, EnergyLevel.HIGH,
                  "Positive energy - enjoy and celebrate",
                  ("celebration", "positive interactions", "joy"),
                  ("negativity", "seriousness", "pessimism"),
                  "Celebrations, positive events"),
    TimingPattern(59, "Dispersion", Timing.ACT, EnergyLevel.MODERATE,
                  "Break down barriers - dissolve obstacles",
                  ("breaking barriers", "dissolution", "opening up"),
                  ("rigidity", "barriers", "closure"),
                  "Breaking down silos"),
    TimingPattern(60, "Limitation", Timing.REFLECT, EnergyLevel.MODERATE,
                  "Set boundaries - practice moderation",
                  ("boundaries", "moderation", "discipline"),
                  ("excess", "lack of boundaries", "overindulgence"),
                  "Setting limits"),
    TimingPattern(61, "Inner Truth", Timing.ACT, EnergyLevel.HIGH,
                  "Authenticity wins - be genuine",
                  ("authenticity", "truth", "sincerity", "trust-building"),
                  ("deception", "inauthenticity", "manipulation"),
                  "Trust-building conversations"),
    TimingPattern(62, "Small Exceeding", Timing.ACT, EnergyLevel.MODERATE,
                  "Focus on small wins - avoid overreach",
                  ("small gains", "caution", "modest goals"),
                  ("overreach", "big bets", "excess"),
                  "Incremental progress"),
    TimingPattern(63, "After Completion", Timing.REFLECT, EnergyLevel.MODERATE,
                  "Task complete - maintain and consolidate",
                  ("maintenance", "consolidation", "vigilance"),
                  ("complacency", "neglect", "assuming it's done"),
                  "Post-completion maintenance"),
    TimingPattern(64, "Before Completion", Timing.PREPARE, EnergyLevel.MODERATE,
                  "Almost there - final push needed",
                  ("final efforts", "completion", "persistence"),
                  ("giving up", "premature celebration", "losing focus"),
                  "Final push to completion"),
)


def get_pattern(number: int) -> TimingPattern:
    if number < 1 or number > len(PATTERNS):
        raise ValueError(f"Pattern number must be between 1 and {len(PATTERNS)}, got {number}")
    return PATTERNS[number - 1]


def birth_pattern(birth: date) -> TimingPattern:
    """Pattern ((day + month + year) % 64) + 1 for a birth date."""
    return get_pattern(((birth.day + birth.month + birth.year) % 64) + 1)


def daily_pattern(d: date) -> TimingPattern:
    """Pattern (day_of_year % 64) + 1 for a calendar date."""
    return get_pattern((d.timetuple().tm_yday % 64) + 1)
