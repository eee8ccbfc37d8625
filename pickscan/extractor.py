"""
Pick Extractor - Turn a tap on a screenshot into a structured pick.

Sequences recognition, spatial selection, odds normalization, team
inference and market classification, and assembles the PickExtraction.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from .models import ClickContext, PickExtraction, Point, Size
from .ocr.base import TextRecognizer
from .ocr.result import ImageMetadata, RecognizedText
from .parser import (
    DEFAULT_SEARCH_RADIUS,
    NO_ODDS,
    MarketRule,
    NearbyElement,
    TeamNameRule,
    build_game_text,
    classify_market,
    determine_league,
    determine_sport,
    find_nearby_elements,
    infer_team_names,
    normalize_odds,
    sort_by_distance,
)

logger = logging.getLogger(__name__)

# (level, event, fields) -> None
EventCallback = Callable[[int, str, Dict[str, Any]], None]

PointLike = Union[Point, Tuple[float, float]]
SizeLike = Union[Size, Tuple[float, float]]


class ExtractionStatus(str, Enum):
    """Why an extraction did or did not produce a pick."""
    OK = "ok"
    NO_TEXT_NEARBY = "no_text_nearby"
    RECOGNITION_FAILED = "recognition_failed"


@dataclass(frozen=True)
class ExtractionOutcome:
    """
    Extraction result with its status.

    pick is set only when status is OK; error carries the recognizer
    exception when status is RECOGNITION_FAILED.
    """
    status: ExtractionStatus
    pick: Optional[PickExtraction] = None
    error: Optional[BaseException] = None
    recognized: Optional[RecognizedText] = None

    @property
    def found(self) -> bool:
        return self.pick is not None


def _as_point(value: PointLike) -> Point:
    return value if isinstance(value, Point) else Point(float(value[0]), float(value[1]))


def _as_size(value: SizeLike) -> Size:
    return value if isinstance(value, Size) else Size(float(value[0]), float(value[1]))


class PickExtractor:
    """
    Extracts picks using an injected text recognizer.

    The extractor holds no per-call state; one instance can serve every
    tap for the lifetime of the recognizer.

    Attributes:
        recognizer: Text recognizer handle (acquired/released by the owner)
        radius: Search radius around the tap in pixels
        event_callback: Optional observer for extraction events
    """

    def __init__(
        self,
        recognizer: TextRecognizer,
        radius: float = DEFAULT_SEARCH_RADIUS,
        event_callback: Optional[EventCallback] = None,
        team_rules: Optional[Sequence[TeamNameRule]] = None,
        market_rules: Optional[Sequence[MarketRule]] = None,
    ):
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        self.recognizer = recognizer
        self.radius = radius
        self.event_callback = event_callback
        self._team_rules = team_rules
        self._market_rules = market_rules

    def _emit(self, level: int, event: str, **fields: Any) -> None:
        """Log an extraction event and forward it to the observer."""
        logger.log(level, f"{event} {fields}", extra={"event": event, "fields": fields})
        if self.event_callback:
            try:
                self.event_callback(level, event, fields)
            except Exception as e:
                logger.exception(f"Event callback failed on {event}: {e}")

    def extract(
        self,
        image_bytes: bytes,
        click_position: PointLike,
        image_size: SizeLike,
        metadata: Optional[ImageMetadata] = None
    ) -> Optional[PickExtraction]:
        """
        Extract a pick around a tap.

        Args:
            image_bytes: Screenshot buffer (BGRA by default)
            click_position: Tap position in image pixels
            image_size: Screenshot dimensions
            metadata: Buffer layout; defaults to tightly packed BGRA

        Returns:
            PickExtraction, or None when nothing is near the tap or
            recognition failed
        """
        return self.extract_with_status(image_bytes, click_position, image_size, metadata).pick

    def extract_with_status(
        self,
        image_bytes: bytes,
        click_position: PointLike,
        image_size: SizeLike,
        metadata: Optional[ImageMetadata] = None
    ) -> ExtractionOutcome:
        """
        Extract a pick and report why none was found.

        Recognizer exceptions are caught here and reported as
        RECOGNITION_FAILED; they never propagate to the caller.
        """
        click = ClickContext(position=_as_point(click_position), image_size=_as_size(image_size))
        if metadata is None:
            metadata = ImageMetadata.for_size(click.image_size.width, click.image_size.height)

        self._emit(logging.DEBUG, "extraction_started",
                   click=click.position.render(),
                   image_size=f"{int(click.image_size.width)}x{int(click.image_size.height)}",
                   in_bounds=click.image_size.contains(click.position))

        try:
            recognized = self.recognizer.process(image_bytes, metadata)
        except Exception as e:
            logger.exception(f"Recognition failed: {e}")
            self._emit(logging.ERROR, "recognition_failed",
                       recognizer=self.recognizer.name, error=str(e))
            return ExtractionOutcome(status=ExtractionStatus.RECOGNITION_FAILED, error=e)

        self._emit(logging.DEBUG, "text_recognized",
                   blocks=len(recognized.blocks),
                   elements=recognized.element_count,
                   processing_time_ms=round(recognized.processing_time_ms, 1))

        return self.parse_with_status(recognized, click.position)

    def parse(self, recognized: RecognizedText, click_position: PointLike) -> Optional[PickExtraction]:
        """Run selection and parsing on already-recognized text."""
        return self.parse_with_status(recognized, click_position).pick

    def parse_with_status(self, recognized: RecognizedText, click_position: PointLike) -> ExtractionOutcome:
        """
        Run selection and parsing on already-recognized text.

        Args:
            recognized: Recognizer output
            click_position: Tap position in image pixels

        Returns:
            ExtractionOutcome with status OK or NO_TEXT_NEARBY
        """
        click = _as_point(click_position)
        nearby = find_nearby_elements(recognized, click, self.radius)

        if not nearby:
            self._emit(logging.WARNING, "no_text_nearby",
                       click=click.render(), radius=self.radius)
            return ExtractionOutcome(status=ExtractionStatus.NO_TEXT_NEARBY, recognized=recognized)

        pick = self._build_pick(sort_by_distance(nearby), click)
        self._emit(logging.INFO, "pick_extracted",
                   game=pick.game_text, odds=pick.odds, market=pick.market_type.value)
        return ExtractionOutcome(status=ExtractionStatus.OK, pick=pick, recognized=recognized)

    def _build_pick(self, ordered: List[NearbyElement], click: Point) -> PickExtraction:
        """Assemble the record from distance-sorted elements."""
        texts = [n.text for n in ordered]
        self._emit(logging.DEBUG, "context_collected", texts=" | ".join(texts))

        odds = normalize_odds(ordered[0].text) if ordered else None
        team1, team2 = infer_team_names(texts, self._team_rules)
        market = classify_market(texts, odds, self._market_rules)
        sport = determine_sport(team1, team2)

        return PickExtraction(
            game_text=build_game_text(team1, team2, texts),
            odds_text=odds or NO_ODDS,
            odds=odds or NO_ODDS,
            team1=team1,
            team2=team2,
            market_type=market,
            timestamp=int(time.time() * 1000),
            click_position=click.render(),
            sport=sport,
            league=determine_league(sport),
        )


def extract_pick_from_image(
    recognizer: TextRecognizer,
    image_bytes: bytes,
    click_position: PointLike,
    image_size: SizeLike,
    radius: float = DEFAULT_SEARCH_RADIUS,
    metadata: Optional[ImageMetadata] = None
) -> Optional[PickExtraction]:
    """
    Extract a pick from a screenshot at the tapped position.

    Args:
        recognizer: Text recognizer handle
        image_bytes: Screenshot buffer (BGRA by default)
        click_position: Tap position in image pixels
        image_size: Screenshot dimensions
        radius: Search radius in pixels
        metadata: Buffer layout; defaults to tightly packed BGRA

    Returns:
        PickExtraction, or None if nothing was found or recognition failed
    """
    extractor = PickExtractor(recognizer, radius=radius)
    return extractor.extract(image_bytes, click_position, image_size, metadata)
