"""
Market Rules - Classify the wager as moneyline, spread or total.

Vocabulary rules run before the odds-shape rule: a spread of -3 has the
same shape as a -110 moneyline price, so keywords are the stronger signal.
"""

import re
from typing import Optional, Tuple

from ...models import MarketType
from ..base import MarketRule
from ..context import ParseContext
from ..factory import register_market_rule


_ML_TOKEN = re.compile(r"\bml\b")
_SIGNS = ("+", "-")


class KeywordMarketRule(MarketRule):
    """Matches when the lower-cased context contains any keyword."""
    keywords: Tuple[str, ...] = ()
    market: MarketType = MarketType.UNKNOWN

    def matches(self, context_text: str) -> bool:
        return any(keyword in context_text for keyword in self.keywords)

    def classify(self, context: ParseContext) -> Optional[MarketType]:
        if self.matches(context.lowered):
            return self.market
        return None


@register_market_rule
class MoneylineKeywordRule(KeywordMarketRule):
    name = "moneyline_keyword"
    priority = 10
    description = "'moneyline' or a standalone 'ml' token"
    keywords = ("moneyline",)
    market = MarketType.MONEYLINE

    def matches(self, context_text: str) -> bool:
        return super().matches(context_text) or _ML_TOKEN.search(context_text) is not None


@register_market_rule
class SpreadKeywordRule(KeywordMarketRule):
    name = "spread_keyword"
    priority = 20
    description = "'spread' or 'point'"
    keywords = ("spread", "point")
    market = MarketType.SPREAD


@register_market_rule
class TotalKeywordRule(KeywordMarketRule):
    name = "total_keyword"
    priority = 30
    description = "'total', 'over', 'under' or 'o/u'"
    keywords = ("total", "over", "under", "o/u")
    market = MarketType.TOTAL


@register_market_rule
class OddsShapeRule(MarketRule):
    """
    Guess from the odds token alone.

    Signed decimals (+3.5) read as spreads, other signed values
    (+150, -110) as moneyline prices.
    """
    name = "odds_shape"
    priority = 40
    description = "Signed decimal -> spread, signed integer -> moneyline"

    def classify(self, context: ParseContext) -> Optional[MarketType]:
        odds = context.odds
        if not odds:
            return None
        signed = any(sign in odds for sign in _SIGNS)
        if signed and "." in odds:
            return MarketType.SPREAD
        if signed:
            return MarketType.MONEYLINE
        return None
