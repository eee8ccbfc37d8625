"""
Spatial Selection Module - Find recognized words around a tap.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..models import Point
from ..ocr.result import RecognizedText, TextElement

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_RADIUS = 100.0


@dataclass(frozen=True)
class NearbyElement:
    """A recognized element and its distance from the click."""
    element: TextElement
    distance: float

    @property
    def text(self) -> str:
        return self.element.text


def find_nearby_elements(
    recognized: RecognizedText,
    click: Point,
    radius: float = DEFAULT_SEARCH_RADIUS
) -> List[NearbyElement]:
    """
    Collect elements whose box center lies within radius of the click.

    The boundary is inclusive. Results keep block -> line -> element
    discovery order; no sorting happens here.

    Args:
        recognized: Recognizer output
        click: Tap position in image pixels
        radius: Search radius in pixels

    Returns:
        List of NearbyElement (empty if nothing is close enough)
    """
    nearby: List[NearbyElement] = []

    for element in recognized.iter_elements():
        distance = click.distance_to(element.bounding_box.center)
        if distance <= radius:
            nearby.append(NearbyElement(element=element, distance=distance))
            logger.debug(f"Nearby text {element.text!r} at distance {distance:.1f}")

    return nearby


def sort_by_distance(nearby: List[NearbyElement]) -> List[NearbyElement]:
    """
    Order elements closest first.

    sorted() is stable, so equal distances keep discovery order.
    """
    return sorted(nearby, key=lambda n: n.distance)
