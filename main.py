"""
PickScan - Entry Point

Extracts a betting pick from a screenshot at a tapped position and prints
it as JSON.

Example:
    python main.py slip.png 320 840
    python main.py slip.png 320 840 --radius 150 --debug
"""

import sys
import json
import logging
import argparse
from datetime import datetime
from pathlib import Path

from PIL import Image

from pickscan import ExtractionStatus, PickExtractor, Point, Size
from pickscan.ocr import (
    DEBUG_DIR,
    ImageMetadata,
    RecognizerError,
    available_recognizers,
    create_recognizer,
    save_debug_image,
)
from pickscan.settings import load_settings, recognizer_config


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool, log_file: str = None) -> None:
    """Log to console, and to a file when requested."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="PickScan - Extract a betting pick from a screenshot tap"
    )
    parser.add_argument("image", help="Screenshot file (PNG/JPEG)")
    parser.add_argument("x", type=float, help="Tap X coordinate in image pixels")
    parser.add_argument("y", type=float, help="Tap Y coordinate in image pixels")
    parser.add_argument(
        "--radius", "-r",
        type=float,
        default=None,
        help="Search radius in pixels (default: from settings, 100)"
    )
    parser.add_argument(
        "--recognizer",
        default=None,
        choices=available_recognizers(),
        help="Text recognizer to use (default: from settings)"
    )
    parser.add_argument(
        "--settings", "-s",
        default=None,
        help="Settings JSON file (default: ./pickscan.json)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Save an annotated debug image to ./debug"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run one extraction and print the result."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file)

    settings = load_settings(args.settings)
    radius = args.radius if args.radius is not None else float(settings["search_radius"])
    recognizer_name = args.recognizer or settings["recognizer"]
    debug_mode = args.debug or bool(settings.get("debug_enabled", False))

    image_path = Path(args.image)
    try:
        image_bytes = image_path.read_bytes()
        with Image.open(image_path) as img:
            img.load()
            image = img.copy()
    except OSError as e:
        logger.error(f"Cannot read image {image_path}: {e}")
        return 2

    width, height = image.size
    metadata = ImageMetadata(width=width, height=height, pixel_format="encoded")
    click = Point(args.x, args.y)

    try:
        recognizer = create_recognizer(recognizer_name, **recognizer_config(settings))
        extractor = PickExtractor(recognizer, radius=radius)
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 2

    try:
        recognizer.acquire()
    except RecognizerError as e:
        logger.error(f"Recognizer unavailable: {e}")
        return 2

    try:
        outcome = extractor.extract_with_status(image_bytes, click, Size(width, height), metadata)
    finally:
        recognizer.release()

    if debug_mode:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = DEBUG_DIR / f"debug_{timestamp}.png"
        save_debug_image(image, outcome.recognized, click, radius, outcome.pick, str(path))
        logger.info(f"Debug image saved: {path}")

    if not outcome.found:
        if outcome.status == ExtractionStatus.RECOGNITION_FAILED:
            print(f"Recognition failed: {outcome.error}")
        else:
            print(f"No pick found within {radius:g}px of {click.render()}")
        return 1

    if not outcome.pick.has_teams:
        logger.info("No team pair near the tap; game text built from nearby words")

    print(json.dumps(outcome.pick.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
