"""
PickScan - Extract a sports-betting pick from a tap on a screenshot.

Usage:
    from pickscan import PickExtractor, Point, Size
    from pickscan.ocr import create_recognizer

    with create_recognizer("tesseract") as recognizer:
        extractor = PickExtractor(recognizer)
        pick = extractor.extract(image_bytes, Point(320, 840), Size(1170, 2532))
        if pick:
            print(pick.game_text, pick.odds, pick.market_type.value)
"""

from .models import (
    DEFAULT_GAME_TEXT,
    EXTRACTION_METHOD,
    ClickContext,
    MarketType,
    PickExtraction,
    Point,
    Size,
)
from .extractor import (
    ExtractionOutcome,
    ExtractionStatus,
    PickExtractor,
    extract_pick_from_image,
)

__all__ = [
    "DEFAULT_GAME_TEXT",
    "EXTRACTION_METHOD",
    "ClickContext",
    "MarketType",
    "PickExtraction",
    "Point",
    "Size",
    "ExtractionOutcome",
    "ExtractionStatus",
    "PickExtractor",
    "extract_pick_from_image",
]
