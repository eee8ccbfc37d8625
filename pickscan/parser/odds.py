"""
Odds Normalizer - Canonical odds token from a recognized fragment.
"""

import re


NO_ODDS = "N/A"

ODDS_PATTERN = re.compile(r"[+-]?\d+(?:\.\d+)?")


def normalize_odds(text: str) -> str:
    """
    Extract the first odds-like substring.

    Examples: "+150" -> "+150", "ML -110)" -> "-110", "+1S0" -> "+1".
    Text without any digits is returned unchanged; OCR noise is expected
    and downstream consumers accept a raw token.
    """
    match = ODDS_PATTERN.search(text)
    return match.group(0) if match else text
