"""
Base Rule Module - Abstract base classes for pick-parsing rules.

Rules are evaluated in ascending priority; the first rule that returns a
result wins and later rules are not consulted.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..models import MarketType
from .context import ParseContext


class TeamNameRule(ABC):
    """
    Abstract base class for team-name inference rules.

    Subclasses must implement infer() and define name, priority and
    description class attributes.

    Attributes:
        name: Short identifier for the rule
        priority: Evaluation order (lower runs first)
        description: Human-readable description
    """
    name: str = "base"
    priority: int = 100
    description: str = "Base team rule"

    @abstractmethod
    def infer(self, context: ParseContext) -> Optional[Tuple[str, str]]:
        """
        Try to find two team names.

        Args:
            context: Nearby texts and odds

        Returns:
            (team1, team2), or None if this rule does not apply
        """
        pass


class MarketRule(ABC):
    """
    Abstract base class for market-type classification rules.

    Attributes:
        name: Short identifier for the rule
        priority: Evaluation order (lower runs first)
        description: Human-readable description
    """
    name: str = "base"
    priority: int = 100
    description: str = "Base market rule"

    @abstractmethod
    def classify(self, context: ParseContext) -> Optional[MarketType]:
        """
        Try to classify the market.

        Args:
            context: Nearby texts and odds

        Returns:
            MarketType, or None if this rule does not apply
        """
        pass
