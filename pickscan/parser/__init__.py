"""
Parser Package - Heuristic pick parsing over positioned text.

This package turns recognized words around a tap into pick fields.
Team and market inference run as ordered rule lists; each rule is a
registered class with an explicit priority and can be tested alone.

Public API:
    - find_nearby_elements(): Words within a radius of the click
    - sort_by_distance(): Stable closest-first ordering
    - normalize_odds(): Canonical odds token
    - infer_team_names(): Ordered team rules
    - classify_market(): Ordered market rules
    - build_game_text(): Game label from teams or context
    - get_rule_info(): Registered rules in evaluation order

Usage:
    from pickscan.parser import infer_team_names, classify_market

    team1, team2 = infer_team_names(["Lakers", "Celtics"])
    market = classify_market(["Lakers", "+150"], "+150")
"""

# Core data structures
from .context import ParseContext
from .spatial import DEFAULT_SEARCH_RADIUS, NearbyElement, find_nearby_elements, sort_by_distance
from .odds import NO_ODDS, ODDS_PATTERN, normalize_odds

# Rule framework
from .base import MarketRule, TeamNameRule
from .factory import (
    create_market_rule,
    create_team_rule,
    get_market_rules,
    get_rule_info,
    get_team_rules,
    register_market_rule,
    register_team_rule,
)

# Import rules to register them
from . import rules

from .pipeline import build_game_text, classify_market, infer_team_names
from .leagues import determine_league, determine_sport, resolve_team_name

__all__ = [
    # Data structures
    "ParseContext",
    "NearbyElement",
    "DEFAULT_SEARCH_RADIUS",
    "NO_ODDS",
    "ODDS_PATTERN",
    # Selection and normalization
    "find_nearby_elements",
    "sort_by_distance",
    "normalize_odds",
    # Rule framework
    "TeamNameRule",
    "MarketRule",
    "register_team_rule",
    "register_market_rule",
    "create_team_rule",
    "create_market_rule",
    "get_team_rules",
    "get_market_rules",
    "get_rule_info",
    # Pipeline
    "infer_team_names",
    "classify_market",
    "build_game_text",
    # Leagues
    "resolve_team_name",
    "determine_sport",
    "determine_league",
]
