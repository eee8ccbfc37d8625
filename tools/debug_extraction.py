"""
Diagnostic script to inspect recognition around a tap.
Lists every recognized word with its center and distance to the click,
marking the ones inside the search radius.

Usage:
    python tools/debug_extraction.py slip.png 320 840 [radius]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from PIL import Image

from pickscan import Point
from pickscan.ocr import ImageMetadata, create_recognizer
from pickscan.parser import DEFAULT_SEARCH_RADIUS, find_nearby_elements, sort_by_distance


def analyze_image(image_path: str, click: Point, radius: float):
    """Recognize an image and report word distances from the click."""
    print(f"\n{'='*60}")
    print(f"Analyzing: {image_path} at {click.render()} (radius {radius:g}px)")
    print(f"{'='*60}")

    with Image.open(image_path) as img:
        width, height = img.size
    image_bytes = Path(image_path).read_bytes()
    metadata = ImageMetadata(width=width, height=height, pixel_format="encoded")

    with create_recognizer("tesseract") as recognizer:
        recognized = recognizer.process(image_bytes, metadata)

    print(f"Image size: {width}x{height}")
    print(f"Blocks: {len(recognized.blocks)}, words: {recognized.element_count}, "
          f"time: {recognized.processing_time_ms:.1f}ms")

    print(f"\n--- Words ---")
    print(f"{'Block':>5} {'Line':>4} {'Center':>16} {'Dist':>8} {'Conf':>5}  Text")
    print("-" * 60)
    for b, block in enumerate(recognized.blocks):
        for l, line in enumerate(block.lines):
            for element in line.elements:
                cx, cy = element.bounding_box.center
                distance = click.distance_to((cx, cy))
                flag = " *" if distance <= radius else ""
                print(f"{b:>5} {l:>4} {f'({cx:.0f}, {cy:.0f})':>16} {distance:>8.1f} "
                      f"{element.confidence:>5.2f}  {element.text}{flag}")

    nearby = sort_by_distance(find_nearby_elements(recognized, click, radius))
    print(f"\n--- Context (closest first) ---")
    if not nearby:
        print("  (nothing within radius)")
    for n in nearby:
        print(f"  {n.distance:>7.1f}  {n.text}")


if __name__ == "__main__":
    if len(sys.argv) < 4:
        print(__doc__)
        sys.exit(1)

    radius = float(sys.argv[4]) if len(sys.argv) > 4 else DEFAULT_SEARCH_RADIUS
    analyze_image(sys.argv[1], Point(float(sys.argv[2]), float(sys.argv[3])), radius)
