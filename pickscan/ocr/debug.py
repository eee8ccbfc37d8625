"""
OCR Debug Utilities

Functions for saving annotated extraction images and managing debug output.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from ..models import PickExtraction, Point
from .result import RecognizedText

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Confidence thresholds for coloring
HIGH_CONFIDENCE = 0.90
MEDIUM_CONFIDENCE = 0.60


def get_confidence_color(confidence: float) -> str:
    """
    Get outline color for a recognized word.

    Args:
        confidence: Confidence value 0.0-1.0

    Returns:
        PIL color name
    """
    if confidence >= HIGH_CONFIDENCE:
        return "green"
    elif confidence >= MEDIUM_CONFIDENCE:
        return "yellow"
    else:
        return "red"


def save_debug_image(
    image: Image.Image,
    recognized: Optional[RecognizedText],
    click: Point,
    radius: float,
    pick: Optional[PickExtraction],
    path: str
) -> None:
    """
    Save an annotated debug image showing recognition and extraction.

    Annotations include:
    - Every recognized word box, colored by confidence
    - Words whose center lies inside the search radius in blue
    - The click point and search radius circle
    - Extraction summary (or "no pick")

    Args:
        image: Original PIL Image
        recognized: Recognizer output (can be None)
        click: Tap position
        radius: Search radius used for selection
        pick: Extraction result (can be None)
        path: Output file path
    """
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    debug_img = image.convert("RGB")
    draw = ImageDraw.Draw(debug_img)

    try:
        font = ImageFont.truetype("arial.ttf", 12)
    except OSError:
        font = ImageFont.load_default()

    if recognized:
        for element in recognized.iter_elements():
            box = element.bounding_box
            nearby = click.distance_to(box.center) <= radius
            color = "blue" if nearby else get_confidence_color(element.confidence)
            draw.rectangle([box.left, box.top, box.right, box.bottom], outline=color, width=2 if nearby else 1)

    # Click marker and search radius
    cx, cy = click.x, click.y
    draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], outline="magenta", width=1)
    draw.ellipse([cx - 3, cy - 3, cx + 3, cy + 3], fill="magenta")

    if pick:
        summary = f"{pick.game_text} | {pick.odds} | {pick.market_type.value}"
    else:
        summary = "No pick found"
    draw.text((10, 10), summary, fill="blue", font=font)

    debug_img.save(path, "PNG")
    logger.debug(f"Debug image saved: {path}")

    _cleanup_debug_images()


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove old debug image {old_file}: {e}")
