"""
OCR Result Dataclasses

Shared data structures for text recognizer input and output.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


# Pixel formats accepted by ImageMetadata
PIXEL_FORMATS = ("bgra8888", "rgba8888", "gray8", "encoded")


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in image pixel coordinates."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Tuple[float, float]:
        """(x, y) center of the rectangle."""
        return (self.left + self.width / 2, self.top + self.height / 2)

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> 'BoundingBox':
        return cls(left=x0, top=y0, width=x1 - x0, height=y1 - y0)


@dataclass(frozen=True)
class TextElement:
    """Single recognized word with its bounding box."""
    text: str
    bounding_box: BoundingBox
    confidence: float = 1.0


@dataclass
class TextLine:
    """Ordered run of elements the recognizer grouped as one line."""
    elements: List[TextElement] = field(default_factory=list)

    @property
    def text(self) -> str:
        return " ".join(e.text for e in self.elements)


@dataclass
class TextBlock:
    """Ordered group of lines the recognizer grouped as one block."""
    lines: List[TextLine] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


@dataclass
class RecognizedText:
    """Complete recognizer result for one image."""
    blocks: List[TextBlock] = field(default_factory=list)
    engine: str = ""                  # Recognizer that produced the result
    processing_time_ms: float = 0.0   # Time taken

    def iter_elements(self) -> Iterator[TextElement]:
        """Flatten block -> line -> element in discovery order."""
        for block in self.blocks:
            for line in block.lines:
                for element in line.elements:
                    yield element

    @property
    def element_count(self) -> int:
        return sum(1 for _ in self.iter_elements())

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.blocks)


@dataclass(frozen=True)
class ImageMetadata:
    """
    Describes how to interpret a raw image buffer.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixel_format: One of PIXEL_FORMATS ("encoded" = PNG/JPEG container)
        bytes_per_row: Row stride for raw formats (0 = tightly packed)
        rotation: Clockwise rotation in degrees (0, 90, 180, 270)
    """
    width: int
    height: int
    pixel_format: str = "bgra8888"
    bytes_per_row: int = 0
    rotation: int = 0

    @classmethod
    def for_size(cls, width: float, height: float, pixel_format: str = "bgra8888") -> 'ImageMetadata':
        """Build metadata for a tightly packed buffer of the given size."""
        w, h = int(width), int(height)
        channels = 1 if pixel_format == "gray8" else 4
        stride = w * channels if pixel_format != "encoded" else 0
        return cls(width=w, height=h, pixel_format=pixel_format, bytes_per_row=stride)
