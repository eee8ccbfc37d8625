"""
Rules Package - Built-in team and market rules.

Import this module to register all built-in rules.
"""

from .teams import AdjacentPairRule, SeparatorRule, looks_like_team_name
from .markets import (
    KeywordMarketRule,
    MoneylineKeywordRule,
    SpreadKeywordRule,
    TotalKeywordRule,
    OddsShapeRule,
)

__all__ = [
    "AdjacentPairRule",
    "SeparatorRule",
    "looks_like_team_name",
    "KeywordMarketRule",
    "MoneylineKeywordRule",
    "SpreadKeywordRule",
    "TotalKeywordRule",
    "OddsShapeRule",
]
