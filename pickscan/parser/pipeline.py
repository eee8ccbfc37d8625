"""
Parsing Pipeline - Run ordered rules over the nearby text context.
"""

import logging
import re
from typing import Optional, Sequence, Tuple

from ..models import DEFAULT_GAME_TEXT, MarketType
from .base import MarketRule, TeamNameRule
from .context import ParseContext
from .factory import get_market_rules, get_team_rules

logger = logging.getLogger(__name__)

GAME_TEXT_FRAGMENTS = 5

_DISALLOWED_CHARS = re.compile(r"[^\w\s\-+.]")
_WHITESPACE = re.compile(r"\s+")


def infer_team_names(
    texts: Sequence[str],
    rules: Optional[Sequence[TeamNameRule]] = None
) -> Tuple[str, str]:
    """
    Infer up to two team names from distance-sorted texts.

    Args:
        texts: Nearby fragment texts, closest first
        rules: Rules to evaluate in order (default: registered rules)

    Returns:
        (team1, team2); both empty strings when no rule matches
    """
    context = ParseContext.from_texts(texts)
    for rule in rules if rules is not None else get_team_rules():
        teams = rule.infer(context)
        if teams is not None:
            logger.debug(f"Team rule {rule.name} matched: {teams}")
            return teams
    return "", ""


def classify_market(
    texts: Sequence[str],
    odds: Optional[str],
    rules: Optional[Sequence[MarketRule]] = None
) -> MarketType:
    """
    Classify the market from context vocabulary, then odds shape.

    Args:
        texts: Nearby fragment texts
        odds: Normalized odds token, or None
        rules: Rules to evaluate in order (default: registered rules)

    Returns:
        MarketType (UNKNOWN when no rule matches)
    """
    context = ParseContext.from_texts(texts, odds)
    for rule in rules if rules is not None else get_market_rules():
        market = rule.classify(context)
        if market is not None:
            logger.debug(f"Market rule {rule.name} matched: {market.value}")
            return market
    return MarketType.UNKNOWN


def build_game_text(team1: str, team2: str, texts: Sequence[str]) -> str:
    """
    Human-readable game label.

    "<team1> vs <team2>" when both names are known, otherwise the first
    few context fragments with punctuation stripped.
    """
    if team1 and team2:
        return f"{team1} vs {team2}"

    text = " ".join(texts[:GAME_TEXT_FRAGMENTS])
    text = _DISALLOWED_CHARS.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()
    return text or DEFAULT_GAME_TEXT
