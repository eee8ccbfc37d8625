"""
OCR Module for PickScan

Pluggable text recognition for turning screenshots into positioned words.

Usage:
    from pickscan.ocr import create_recognizer, ImageMetadata

    # Create a recognizer (Tesseract) and hold it for the app's lifetime
    recognizer = create_recognizer()
    recognizer.acquire()

    # Recognize a raw BGRA screenshot buffer
    text = recognizer.process(image_bytes, ImageMetadata.for_size(1170, 2532))

    # Walk every word with its bounding box
    for element in text.iter_elements():
        print(element.text, element.bounding_box.center)

    # Free native resources on shutdown
    recognizer.release()
"""

# Public API - Result types
from .result import (
    PIXEL_FORMATS,
    BoundingBox,
    TextElement,
    TextLine,
    TextBlock,
    RecognizedText,
    ImageMetadata,
)

# Public API - Base class for custom recognizers
from .base import TextRecognizer, RecognizerError

# Public API - Factory functions
from .factory import (
    create_recognizer,
    register_recognizer,
    available_recognizers,
)

# Public API - Tesseract recognizer
from .tesseract_engine import TesseractRecognizer, decode_image, group_words

# Debug utilities
from .debug import DEBUG_DIR, save_debug_image

__all__ = [
    # Result types
    "PIXEL_FORMATS",
    "BoundingBox",
    "TextElement",
    "TextLine",
    "TextBlock",
    "RecognizedText",
    "ImageMetadata",
    # Base class
    "TextRecognizer",
    "RecognizerError",
    # Factory
    "create_recognizer",
    "register_recognizer",
    "available_recognizers",
    # Recognizers
    "TesseractRecognizer",
    # Functions
    "decode_image",
    "group_words",
    "save_debug_image",
    # Debug
    "DEBUG_DIR",
]
