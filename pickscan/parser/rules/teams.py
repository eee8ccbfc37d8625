"""
Team Rules - Infer the two competing team names from nearby text.
"""

import re
from typing import Optional, Tuple

from ..base import TeamNameRule
from ..context import ParseContext
from ..factory import register_team_rule


MIN_TEAM_NAME_LENGTH = 3
MIN_ALPHA_RATIO = 0.7

_NON_ALPHA = re.compile(r"[^a-zA-Z]")
_SEPARATOR_PATTERN = re.compile(r"([A-Za-z\s]+?)\s+(?:vs|@)\s+([A-Za-z\s]+)", re.IGNORECASE)


def looks_like_team_name(text: str) -> bool:
    """
    Check if a fragment looks like a team name.

    Team labels are at least three characters and mostly letters
    (>= 70% alphabetic).
    """
    if len(text) < MIN_TEAM_NAME_LENGTH:
        return False
    alpha_count = len(_NON_ALPHA.sub("", text))
    return alpha_count / len(text) >= MIN_ALPHA_RATIO


@register_team_rule
class AdjacentPairRule(TeamNameRule):
    """
    First consecutive pair of fragments that both look like team names.

    Odds boards stack each team next to its price, so the two names are
    usually adjacent once fragments are ordered by distance.
    """
    name = "adjacent_pair"
    priority = 10
    description = "Two adjacent team-like fragments"

    def infer(self, context: ParseContext) -> Optional[Tuple[str, str]]:
        texts = context.texts
        for first, second in zip(texts, texts[1:]):
            if looks_like_team_name(first) and looks_like_team_name(second):
                return first, second
        return None


@register_team_rule
class SeparatorRule(TeamNameRule):
    """Free-text "<team> vs <team>" or "<team> @ <team>" descriptions."""
    name = "separator"
    priority = 20
    description = "Names around a 'vs' or '@' separator"

    def infer(self, context: ParseContext) -> Optional[Tuple[str, str]]:
        match = _SEPARATOR_PATTERN.search(context.joined)
        if match is None:
            return None
        return match.group(1).strip(), match.group(2).strip()
