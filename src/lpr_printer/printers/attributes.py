"""Duplex (sides) and orientation print attributes."""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Sides(str, Enum):
    ONE_SIDED = 'one-sided'
    DUPLEX = 'duplex'
    TUMBLE = 'tumble'
    TWO_SIDED_SHORT_EDGE = 'two-sided-short-edge'
    TWO_SIDED_LONG_EDGE = 'two-sided-long-edge'

    def __str__(self):
        return self.value

    @property
    def ipp_keyword(self) -> str:
        """IPP 'sides' keyword; duplex and tumble are the long/short edge aliases."""
        if self is Sides.DUPLEX:
            return Sides.TWO_SIDED_LONG_EDGE.value
        if self is Sides.TUMBLE:
            return Sides.TWO_SIDED_SHORT_EDGE.value
        return self.value


class OrientationRequested(str, Enum):
    PORTRAIT = 'portrait'
    LANDSCAPE = 'landscape'
    REVERSE_PORTRAIT = 'reverse-portrait'
    REVERSE_LANDSCAPE = 'reverse-landscape'

    def __str__(self):
        return self.value

    @property
    def ipp_value(self) -> int:
        """IPP enum value for orientation-requested (RFC 8011 §5.2.10)."""
        return {
            OrientationRequested.PORTRAIT: 3,
            OrientationRequested.LANDSCAPE: 4,
            OrientationRequested.REVERSE_LANDSCAPE: 5,
            OrientationRequested.REVERSE_PORTRAIT: 6,
        }[self]


DEFAULT_SIDES = Sides.ONE_SIDED
DEFAULT_ORIENTATION = OrientationRequested.PORTRAIT

_SIDES = {s.value: s for s in Sides}
_ORIENTATIONS = {o.value: o for o in OrientationRequested}


def resolve_sides(value: Optional[str] = None) -> Sides:
    """Case-insensitive match on the sides keyword; anything else is one-sided."""
    if value is None:
        return DEFAULT_SIDES
    sides = _SIDES.get(value.lower())
    if sides is None:
        logger.warning(f"Unknown sides '{value}' — falling back to {DEFAULT_SIDES.value}")
        return DEFAULT_SIDES
    return sides


def resolve_orientation(value: Optional[str] = None) -> OrientationRequested:
    """Case-insensitive match on the orientation keyword; anything else is portrait."""
    if value is None:
        return DEFAULT_ORIENTATION
    orientation = _ORIENTATIONS.get(value.lower())
    if orientation is None:
        logger.warning(f"Unknown orientation '{value}' — falling back to {DEFAULT_ORIENTATION.value}")
        return DEFAULT_ORIENTATION
    return orientation
