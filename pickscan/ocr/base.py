"""
Text Recognizer Base Interface

Abstract base class defining the text recognizer contract.
"""

from abc import ABC, abstractmethod

from .result import ImageMetadata, RecognizedText


class RecognizerError(RuntimeError):
    """Raised when a recognizer cannot process an image."""


class TextRecognizer(ABC):
    """
    Abstract base class for text recognizers.

    A recognizer is an explicitly constructed handle around a native OCR
    resource. Callers acquire it before use and release it on shutdown,
    either directly or with a ``with`` block:

        with create_recognizer("tesseract") as recognizer:
            text = recognizer.process(image_bytes, metadata)
    """

    def __init__(self):
        self._acquired = False
        self._released = False

    @abstractmethod
    def process(self, image_bytes: bytes, metadata: ImageMetadata) -> RecognizedText:
        """
        Recognize text in an image.

        Args:
            image_bytes: Raw pixel buffer or encoded image
            metadata: Size, pixel format, row stride and rotation

        Returns:
            RecognizedText with blocks -> lines -> elements, each element
            carrying text and a bounding box in image pixel coordinates

        Raises:
            RecognizerError: If the image cannot be decoded or recognized
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Recognizer identifier.

        Returns:
            String name identifying this recognizer type (e.g., "tesseract")
        """
        pass

    def configure(self, **kwargs) -> None:
        """
        Configure recognizer parameters.

        Override in subclasses to support runtime configuration.
        Default implementation does nothing.
        """
        pass

    @property
    def is_acquired(self) -> bool:
        return self._acquired

    def acquire(self) -> None:
        """Prepare underlying resources. Safe to call more than once."""
        if self._released:
            raise RecognizerError(f"{self.name} recognizer has been released")
        if not self._acquired:
            self._on_acquire()
            self._acquired = True

    def release(self) -> None:
        """Free underlying resources. The handle cannot be reacquired."""
        if self._acquired:
            self._on_release()
        self._acquired = False
        self._released = True

    def _ensure_acquired(self) -> None:
        """Lazily acquire on first use."""
        if not self._acquired:
            self.acquire()

    def _on_acquire(self) -> None:
        pass

    def _on_release(self) -> None:
        pass

    def __enter__(self) -> 'TextRecognizer':
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
