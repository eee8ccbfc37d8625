"""
Test script for end-to-end pick extraction

Uses a fake recognizer with canned word boxes to test:
1. Worked scenarios (odds board, far tap, totals, OCR noise)
2. No-signal and recognizer-failure outcomes
3. Record completeness and wire format
4. Extraction events

Usage:
    python tests/test_extractor.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pickscan import (
    DEFAULT_GAME_TEXT,
    EXTRACTION_METHOD,
    ExtractionStatus,
    MarketType,
    PickExtractor,
    Point,
    Size,
    extract_pick_from_image,
)
from pickscan.ocr import (
    BoundingBox,
    ImageMetadata,
    RecognizedText,
    RecognizerError,
    TextBlock,
    TextElement,
    TextLine,
    TextRecognizer,
)


IMAGE_SIZE = Size(400, 800)
IMAGE_BYTES = bytes(400 * 800 * 4)


class FakeRecognizer(TextRecognizer):
    """Returns canned text, or raises when given an error."""

    def __init__(self, recognized: RecognizedText = None, error: Exception = None):
        super().__init__()
        self._recognized = recognized or RecognizedText()
        self._error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "fake"

    def process(self, image_bytes: bytes, metadata: ImageMetadata) -> RecognizedText:
        self._ensure_acquired()
        self.calls.append(metadata)
        if self._error is not None:
            raise self._error
        return self._recognized


def make_recognized(*elements):
    """Build a one-block RecognizedText with one line per (text, (l, t, w, h))."""
    lines = [TextLine([TextElement(text, BoundingBox(*box))]) for text, box in elements]
    return RecognizedText(blocks=[TextBlock(lines)], engine="fake")


ODDS_BOARD = make_recognized(
    ("+150", (10, 10, 40, 20)),
    ("Lakers", (10, 40, 60, 20)),
    ("Celtics", (10, 70, 60, 20)),
)


def test_odds_board():
    """Tap on a moneyline price next to two stacked team names."""
    print("\n" + "="*60)
    print("TEST: Odds Board")
    print("="*60)

    recognizer = FakeRecognizer(ODDS_BOARD)
    pick = PickExtractor(recognizer).extract(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE)
    print(f"  Pick: {pick}")

    assert pick is not None
    assert pick.odds == "+150"
    assert pick.odds_text == "+150"
    assert (pick.team1, pick.team2) == ("Lakers", "Celtics")
    assert pick.market_type == MarketType.MONEYLINE
    assert pick.game_text == "Lakers vs Celtics"
    assert pick.extraction_method == EXTRACTION_METHOD
    assert pick.click_position == "(30, 15)"
    assert pick.sport == "Basketball"
    assert pick.league == "NBA"

    # Default metadata describes a packed BGRA buffer of the image size
    metadata = recognizer.calls[0]
    assert (metadata.width, metadata.height) == (400, 800)
    assert metadata.pixel_format == "bgra8888"
    assert metadata.bytes_per_row == 1600

    print("  [PASS] Odds board")


def test_far_tap():
    """Nothing within the radius yields no pick."""
    print("\n" + "="*60)
    print("TEST: Far Tap")
    print("="*60)

    extractor = PickExtractor(FakeRecognizer(ODDS_BOARD))
    outcome = extractor.extract_with_status(IMAGE_BYTES, Point(500, 500), IMAGE_SIZE)
    print(f"  Status: {outcome.status.value}")

    assert outcome.pick is None
    assert outcome.status == ExtractionStatus.NO_TEXT_NEARBY
    assert extractor.extract(IMAGE_BYTES, Point(500, 500), IMAGE_SIZE) is None

    empty = PickExtractor(FakeRecognizer(RecognizedText()))
    assert empty.extract(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE) is None

    print("  [PASS] Far tap")


def test_totals_keyword():
    """'Over' in context beats the moneyline shape of the tapped price."""
    print("\n" + "="*60)
    print("TEST: Totals Keyword")
    print("="*60)

    recognized = make_recognized(
        ("Over", (60, 10, 30, 20)),
        ("220.5", (95, 10, 30, 20)),
        ("-110", (130, 10, 20, 20)),
    )
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, Point(140, 20), IMAGE_SIZE)
    print(f"  Pick: {pick}")

    assert pick is not None
    assert pick.odds == "-110"
    assert pick.market_type == MarketType.TOTAL
    assert (pick.team1, pick.team2) == ("", "")
    assert pick.game_text == "-110 220.5 Over"
    assert pick.sport == "Unknown"

    print("  [PASS] Totals keyword")


def test_ocr_noise():
    """A misread price keeps its leading numeric run."""
    print("\n" + "="*60)
    print("TEST: OCR Noise")
    print("="*60)

    recognized = make_recognized(("+1S0", (10, 10, 40, 20)))
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, Point(30, 20), IMAGE_SIZE)
    print(f"  Pick: {pick}")

    assert pick.odds == "+1"
    assert pick.market_type == MarketType.MONEYLINE
    assert pick.game_text == "+1S0"

    recognized = make_recognized(("EVEN", (10, 10, 40, 20)))
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, Point(30, 20), IMAGE_SIZE)
    assert pick.odds == "EVEN"
    assert pick.market_type == MarketType.UNKNOWN

    print("  [PASS] OCR noise")


def test_vocabulary_precedence():
    """'Moneyline' in context wins over a spread-shaped token."""
    print("\n" + "="*60)
    print("TEST: Vocabulary Precedence")
    print("="*60)

    recognized = make_recognized(
        ("+3.5", (10, 10, 40, 20)),
        ("Moneyline", (10, 40, 80, 20)),
    )
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, Point(30, 20), IMAGE_SIZE)

    assert pick.odds == "+3.5"
    assert pick.market_type == MarketType.MONEYLINE
    print("  [PASS] Vocabulary precedence")


def test_recognizer_failure():
    """Recognizer errors become an absent pick with a failure status."""
    print("\n" + "="*60)
    print("TEST: Recognizer Failure")
    print("="*60)

    error = RecognizerError("Buffer too short")
    extractor = PickExtractor(FakeRecognizer(error=error))

    outcome = extractor.extract_with_status(b"", Point(30, 15), IMAGE_SIZE)
    print(f"  Status: {outcome.status.value}, error: {outcome.error}")
    assert outcome.status == ExtractionStatus.RECOGNITION_FAILED
    assert outcome.error is error
    assert outcome.pick is None

    assert extractor.extract(b"", Point(30, 15), IMAGE_SIZE) is None

    # Released recognizers fail the same way
    released = FakeRecognizer(ODDS_BOARD)
    released.release()
    assert PickExtractor(released).extract(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE) is None

    # Any exception type is contained
    crashing = FakeRecognizer(error=ValueError("boom"))
    assert extract_pick_from_image(crashing, IMAGE_BYTES, Point(30, 15), IMAGE_SIZE) is None

    print("  [PASS] Recognizer failure")


def test_out_of_bounds_click():
    """Taps outside the image are tolerated."""
    print("\n" + "="*60)
    print("TEST: Out-of-Bounds Click")
    print("="*60)

    recognized = make_recognized(("Lakers", (0, 0, 40, 20)))
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, (-20.7, -15.2), (400, 800))
    print(f"  Pick: {pick}")

    assert pick is not None
    assert pick.click_position == "(-20, -15)"
    assert pick.odds == "Lakers"
    assert pick.game_text == "Lakers"
    print("  [PASS] Out-of-bounds click")


def test_record_format():
    """Every field is populated and the wire dict uses camelCase keys."""
    print("\n" + "="*60)
    print("TEST: Record Format")
    print("="*60)

    recognized = make_recognized(("$$", (10, 10, 20, 20)))
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, Point(20, 20), IMAGE_SIZE)
    data = pick.to_dict()
    print(f"  Record: {data}")

    assert set(data) == {
        "gameText", "oddsText", "odds", "team1", "team2", "marketType",
        "timestamp", "extractionMethod", "clickPosition", "sport", "league",
    }
    assert all(value is not None for value in data.values())
    assert data["gameText"] == DEFAULT_GAME_TEXT
    assert data["odds"] == "$$"
    assert data["marketType"] == "unknown"
    assert isinstance(data["timestamp"], int) and data["timestamp"] > 1_600_000_000_000
    print("  [PASS] Record format")


def test_custom_radius():
    """Smaller radius drops the far team names."""
    print("\n" + "="*60)
    print("TEST: Custom Radius")
    print("="*60)

    pick = PickExtractor(FakeRecognizer(ODDS_BOARD), radius=40).extract(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE)
    print(f"  Pick: {pick}")

    # Celtics center is ~66px away; Lakers ~36px
    assert (pick.team1, pick.team2) == ("", "")
    assert pick.game_text == "+150 Lakers"

    try:
        PickExtractor(FakeRecognizer(), radius=-1)
        raise AssertionError("negative radius should raise")
    except ValueError:
        pass
    print("  [PASS] Custom radius")


def test_events():
    """Extraction emits leveled events to the observer."""
    print("\n" + "="*60)
    print("TEST: Events")
    print("="*60)

    events = []
    extractor = PickExtractor(
        FakeRecognizer(ODDS_BOARD),
        event_callback=lambda level, event, fields: events.append((event, fields)),
    )
    extractor.extract(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE)
    names = [event for event, _ in events]
    print(f"  Events: {names}")

    assert names[0] == "extraction_started"
    assert "text_recognized" in names
    assert names[-1] == "pick_extracted"
    assert dict(events)["pick_extracted"]["market"] == "moneyline"

    events.clear()
    extractor.extract(IMAGE_BYTES, Point(500, 500), IMAGE_SIZE)
    assert [event for event, _ in events][-1] == "no_text_nearby"

    # A failing observer does not interrupt extraction
    def broken_observer(level, event, fields):
        raise RuntimeError("observer down")

    extractor = PickExtractor(FakeRecognizer(ODDS_BOARD), event_callback=broken_observer)
    outcome = extractor.extract_with_status(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE)
    assert outcome.found
    assert outcome.pick.odds == "+150"

    failing = PickExtractor(FakeRecognizer(error=RecognizerError("boom")), event_callback=broken_observer)
    outcome = failing.extract_with_status(IMAGE_BYTES, Point(30, 15), IMAGE_SIZE)
    assert outcome.status == ExtractionStatus.RECOGNITION_FAILED
    assert not outcome.found
    print("  [PASS] Events")


def test_multi_word_teams():
    """Full franchise names resolve to the right league."""
    print("\n" + "="*60)
    print("TEST: Multi-Word Teams")
    print("="*60)

    recognized = make_recognized(
        ("+3.5", (10, 10, 40, 20)),
        ("Minnesota Vikings vs Green Bay Packers", (10, 40, 200, 20)),
    )
    pick = PickExtractor(FakeRecognizer(recognized)).extract(IMAGE_BYTES, Point(30, 20), IMAGE_SIZE)
    print(f"  Pick: {pick}")

    assert (pick.team1, pick.team2) == ("Minnesota Vikings", "Green Bay Packers")
    assert pick.has_teams
    assert pick.market_type == MarketType.SPREAD
    assert pick.sport == "Football"
    assert pick.league == "NFL"
    print("  [PASS] Multi-word teams")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# EXTRACTOR VALIDATION TESTS")
    print("#"*60)

    tests = [
        ("Odds Board", test_odds_board),
        ("Far Tap", test_far_tap),
        ("Totals Keyword", test_totals_keyword),
        ("OCR Noise", test_ocr_noise),
        ("Vocabulary Precedence", test_vocabulary_precedence),
        ("Recognizer Failure", test_recognizer_failure),
        ("Out-of-Bounds Click", test_out_of_bounds_click),
        ("Record Format", test_record_format),
        ("Custom Radius", test_custom_radius),
        ("Events", test_events),
        ("Multi-Word Teams", test_multi_word_teams),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
