"""
Tesseract Text Recognizer

Recognizer implementation backed by Tesseract word-level output.
Decodes raw screenshot buffers with numpy/OpenCV, runs
pytesseract.image_to_data and regroups words into blocks and lines.
"""

import logging
import os
import time
from io import BytesIO
from typing import Dict, List, Optional, Tuple

import cv2
import numpy as np
import pytesseract
from PIL import Image
from pytesseract import Output

from .base import RecognizerError, TextRecognizer
from .result import (
    PIXEL_FORMATS,
    BoundingBox,
    ImageMetadata,
    RecognizedText,
    TextBlock,
    TextElement,
    TextLine,
)

logger = logging.getLogger(__name__)

# psm 11 = sparse text; odds boards scatter short labels across the screen
DEFAULT_PSM = 11
DEFAULT_LANGUAGE = "eng"

_ROTATIONS = {
    0: None,
    90: cv2.ROTATE_90_CLOCKWISE,
    180: cv2.ROTATE_180,
    270: cv2.ROTATE_90_COUNTERCLOCKWISE,
}


def _safe_float(x) -> float:
    try:
        return float(x)
    except (TypeError, ValueError):
        return float("nan")


def decode_image(image_bytes: bytes, metadata: ImageMetadata) -> np.ndarray:
    """
    Decode an image buffer into an upright grayscale array.

    Args:
        image_bytes: Raw pixel buffer or encoded PNG/JPEG bytes
        metadata: Buffer layout description

    Returns:
        2D uint8 array (H, W)

    Raises:
        RecognizerError: If the format is unsupported or the buffer is short
    """
    fmt = metadata.pixel_format
    if fmt not in PIXEL_FORMATS:
        raise RecognizerError(f"Unsupported pixel format: {fmt}")
    if metadata.rotation not in _ROTATIONS:
        raise RecognizerError(f"Unsupported rotation: {metadata.rotation}")

    if fmt == "encoded":
        try:
            with Image.open(BytesIO(image_bytes)) as img:
                gray = np.asarray(img.convert("L"), dtype=np.uint8)
        except OSError as e:
            raise RecognizerError(f"Could not decode image: {e}") from e
    else:
        width, height = metadata.width, metadata.height
        if width <= 0 or height <= 0:
            raise RecognizerError(f"Invalid image size: {width}x{height}")

        channels = 1 if fmt == "gray8" else 4
        stride = metadata.bytes_per_row or width * channels
        if stride < width * channels:
            raise RecognizerError(f"Row stride {stride} too small for width {width}")
        needed = stride * height
        if len(image_bytes) < needed:
            raise RecognizerError(f"Buffer too short: {len(image_bytes)} < {needed} bytes")

        rows = np.frombuffer(image_bytes, dtype=np.uint8, count=needed).reshape(height, stride)
        pixels = rows[:, :width * channels]

        if channels == 1:
            gray = np.ascontiguousarray(pixels)
        else:
            pixels = np.ascontiguousarray(pixels).reshape(height, width, 4)
            code = cv2.COLOR_BGRA2GRAY if fmt == "bgra8888" else cv2.COLOR_RGBA2GRAY
            gray = cv2.cvtColor(pixels, code)

    rotate_code = _ROTATIONS[metadata.rotation]
    if rotate_code is not None:
        gray = cv2.rotate(gray, rotate_code)

    return gray


def group_words(data: Dict[str, List], scale: float = 1.0, min_confidence: float = 0.0) -> List[TextBlock]:
    """
    Group image_to_data words into blocks and lines.

    Blocks follow (page_num, block_num); lines follow (par_num, line_num)
    inside a block. Words keep left-to-right order within a line and boxes
    are scaled back to source pixels.

    Args:
        data: pytesseract Output.DICT result
        scale: Upscale factor applied before recognition
        min_confidence: Drop words below this confidence (0-1)

    Returns:
        Ordered list of TextBlock
    """
    blocks: Dict[Tuple[int, int], Dict[Tuple[int, int], List[int]]] = {}
    n = len(data.get("text", []))

    def field(name: str, i: int) -> int:
        values = data.get(name)
        return int(values[i]) if values else 0

    for i in range(n):
        txt = str(data["text"][i] or "").strip()
        if not txt:
            continue
        conf = _safe_float(data.get("conf", ["-1"] * n)[i])
        if np.isnan(conf) or conf < 0:
            continue
        if conf / 100.0 < min_confidence:
            continue

        block_key = (field("page_num", i), field("block_num", i))
        line_key = (field("par_num", i), field("line_num", i))
        blocks.setdefault(block_key, {}).setdefault(line_key, []).append(i)

    out: List[TextBlock] = []
    for lines in blocks.values():
        block = TextBlock()
        for idxs in lines.values():
            idxs_sorted = sorted(idxs, key=lambda j: field("left", j))
            line = TextLine()
            for j in idxs_sorted:
                box = BoundingBox(
                    left=field("left", j) / scale,
                    top=field("top", j) / scale,
                    width=field("width", j) / scale,
                    height=field("height", j) / scale,
                )
                line.elements.append(TextElement(
                    text=str(data["text"][j]).strip(),
                    bounding_box=box,
                    confidence=_safe_float(data["conf"][j]) / 100.0,
                ))
            block.lines.append(line)
        out.append(block)

    return out


class TesseractRecognizer(TextRecognizer):
    """
    Text recognizer using Tesseract via pytesseract.

    Produces word-level elements so that the closest word to a tap can be
    isolated. Boxes are reported in the upright source image's pixel space.
    """

    def __init__(self):
        super().__init__()
        self._tesseract_cmd: Optional[str] = os.getenv("TESSERACT_PATH") or None
        self._language = DEFAULT_LANGUAGE
        self._psm = DEFAULT_PSM
        self._upscale = 1.0
        self._min_confidence = 0.0
        self._version: Optional[str] = None

    @property
    def name(self) -> str:
        return "tesseract"

    def configure(self, **kwargs) -> None:
        """
        Configure recognizer parameters.

        Args:
            tesseract_cmd: Path to the tesseract binary
            language: Tesseract language code (default "eng")
            psm: Page segmentation mode (default 11)
            upscale: Resize factor applied before recognition
            min_confidence: Drop words below this confidence (0-1)
        """
        if "tesseract_cmd" in kwargs:
            self._tesseract_cmd = kwargs["tesseract_cmd"]
        if "language" in kwargs:
            self._language = kwargs["language"]
        if "psm" in kwargs:
            self._psm = int(kwargs["psm"])
        if "upscale" in kwargs:
            upscale = float(kwargs["upscale"])
            if upscale <= 0:
                raise ValueError(f"upscale must be positive, got {upscale}")
            self._upscale = upscale
        if "min_confidence" in kwargs:
            self._min_confidence = float(kwargs["min_confidence"])

    def _on_acquire(self) -> None:
        if self._tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self._tesseract_cmd
        try:
            self._version = str(pytesseract.get_tesseract_version())
        except pytesseract.TesseractNotFoundError as e:
            raise RecognizerError(f"Tesseract binary not found: {e}") from e
        logger.info(f"Tesseract recognizer acquired (version {self._version})")

    def _on_release(self) -> None:
        logger.info("Tesseract recognizer released")

    def _config(self) -> str:
        return f"--oem 1 --psm {self._psm} -c preserve_interword_spaces=1"

    def process(self, image_bytes: bytes, metadata: ImageMetadata) -> RecognizedText:
        """
        Recognize words in an image.

        Args:
            image_bytes: Raw pixel buffer or encoded image
            metadata: Buffer layout description

        Returns:
            RecognizedText with word-level elements
        """
        self._ensure_acquired()
        start_time = time.perf_counter()

        gray = decode_image(image_bytes, metadata)
        if self._upscale != 1.0:
            gray = cv2.resize(gray, None, fx=self._upscale, fy=self._upscale,
                              interpolation=cv2.INTER_CUBIC)

        try:
            data = pytesseract.image_to_data(
                gray,
                lang=self._language,
                config=self._config(),
                output_type=Output.DICT,
            )
        except pytesseract.TesseractError as e:
            raise RecognizerError(f"Tesseract failed: {e}") from e

        blocks = group_words(data, scale=self._upscale, min_confidence=self._min_confidence)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        result = RecognizedText(blocks=blocks, engine=self.name, processing_time_ms=elapsed_ms)
        logger.debug(f"Tesseract found {len(blocks)} blocks, "
                     f"{result.element_count} words in {elapsed_ms:.1f}ms")
        return result
