"""
Pick Models - Click input and extracted pick record.
"""

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple


EXTRACTION_METHOD = "OCR"
DEFAULT_GAME_TEXT = "OCR Extracted Game"


@dataclass(frozen=True)
class Point:
    """2D point in image pixel space."""
    x: float
    y: float

    def distance_to(self, other: Tuple[float, float]) -> float:
        """Euclidean distance to an (x, y) tuple."""
        return math.hypot(other[0] - self.x, other[1] - self.y)

    def render(self) -> str:
        """Integer-truncated "(x, y)" form used for diagnostics."""
        return f"({int(self.x)}, {int(self.y)})"


@dataclass(frozen=True)
class Size:
    """Image dimensions in pixels."""
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height


@dataclass(frozen=True)
class ClickContext:
    """
    Where the user tapped and how large the screenshot is.

    The position may fall outside image_size; extraction tolerates it.
    """
    position: Point
    image_size: Size


class MarketType(str, Enum):
    """Category of wager."""
    MONEYLINE = "moneyline"
    SPREAD = "spread"
    TOTAL = "total"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PickExtraction:
    """
    Structured pick extracted around a tap.

    Every field is populated; parsing ambiguity is represented by empty
    strings, "N/A" odds and MarketType.UNKNOWN.
    """
    game_text: str
    odds_text: str
    odds: str
    team1: str
    team2: str
    market_type: MarketType
    timestamp: int  # epoch millis
    click_position: str
    extraction_method: str = EXTRACTION_METHOD
    sport: str = "Unknown"
    league: str = "Unknown"

    @property
    def has_teams(self) -> bool:
        return bool(self.team1 and self.team2)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase record as consumed by the app layer."""
        d = asdict(self)
        return {
            "gameText": d["game_text"],
            "oddsText": d["odds_text"],
            "odds": d["odds"],
            "team1": d["team1"],
            "team2": d["team2"],
            "marketType": self.market_type.value,
            "timestamp": d["timestamp"],
            "extractionMethod": d["extraction_method"],
            "clickPosition": d["click_position"],
            "sport": d["sport"],
            "league": d["league"],
        }
