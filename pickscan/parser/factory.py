"""
Rule Factory Module - Registry for team and market rules.
"""

from typing import Dict, List, Type

from .base import MarketRule, TeamNameRule


# Global registries of rules
_TEAM_RULES: Dict[str, Type[TeamNameRule]] = {}
_MARKET_RULES: Dict[str, Type[MarketRule]] = {}


def register_team_rule(cls: Type[TeamNameRule]) -> Type[TeamNameRule]:
    """
    Decorator to register a team-name rule class.

    Usage:
        @register_team_rule
        class MyRule(TeamNameRule):
            name = "my_rule"
            priority = 30
            ...
    """
    _TEAM_RULES[cls.name] = cls
    return cls


def register_market_rule(cls: Type[MarketRule]) -> Type[MarketRule]:
    """Decorator to register a market classification rule class."""
    _MARKET_RULES[cls.name] = cls
    return cls


def get_team_rules() -> List[TeamNameRule]:
    """
    Instantiate registered team rules in evaluation order.

    Returns:
        Rule instances sorted by ascending priority
    """
    return [cls() for cls in sorted(_TEAM_RULES.values(), key=lambda c: c.priority)]


def get_market_rules() -> List[MarketRule]:
    """
    Instantiate registered market rules in evaluation order.

    Returns:
        Rule instances sorted by ascending priority
    """
    return [cls() for cls in sorted(_MARKET_RULES.values(), key=lambda c: c.priority)]


def create_team_rule(name: str) -> TeamNameRule:
    """
    Create a team rule by name.

    Raises:
        ValueError: If rule name not found
    """
    if name not in _TEAM_RULES:
        available = ", ".join(_TEAM_RULES.keys())
        raise ValueError(f"Unknown team rule: {name}. Available: {available}")
    return _TEAM_RULES[name]()


def create_market_rule(name: str) -> MarketRule:
    """
    Create a market rule by name.

    Raises:
        ValueError: If rule name not found
    """
    if name not in _MARKET_RULES:
        available = ", ".join(_MARKET_RULES.keys())
        raise ValueError(f"Unknown market rule: {name}. Available: {available}")
    return _MARKET_RULES[name]()


def get_rule_info() -> Dict[str, List[Dict[str, object]]]:
    """
    Get name, priority and description for all registered rules.

    Returns:
        {"team": [...], "market": [...]} in evaluation order
    """
    def info(classes):
        return [
            {"name": cls.name, "priority": cls.priority, "description": cls.description}
            for cls in sorted(classes, key=lambda c: c.priority)
        ]

    return {"team": info(_TEAM_RULES.values()), "market": info(_MARKET_RULES.values())}
