"""
Terminology filter for caller-visible text.

Output must read as plain performance coaching. Any word from
config.BANNED_TERMS (whole word, any case, optional plural "s") marks the
text as leaking internal vocabulary.
"""
import re

import config
from alignment.errors import TerminologyLeakViolation


def _compile(terms) -> re.Pattern:
    # Longest first so "full moon" wins over "moon".
    alternatives = sorted((r"\s+".join(re.escape(w) for w in t.split()) for t in terms), key=len, reverse=True)
    return re.compile(r"\b(" + "|".join(alternatives) + r")s?\b", re.IGNORECASE)


_BANNED = _compile(config.BANNED_TERMS)


def find_banned_terms(text: str) -> list[str]:
    """Distinct banned terms found in `text`, lower-cased, in order of first appearance."""
    found = []
    for match in _BANNED.finditer(text or ""):
        term = " ".join(match.group(1).lower().split())
        if term not in found:
            found.append(term)
    return found


def is_clean(text: str) -> bool:
    return not find_banned_terms(text)


def ensure_clean(text: str) -> str:
    terms = find_banned_terms(text)
    if terms:
        raise TerminologyLeakViolation(text, terms)
    return text
