"""
Byte decomposition and segment coloring for 32-bit timestamps
Position 0 is the most significant byte, position 3 the seconds byte.
"""

from enum import Enum
from typing import List, Sequence, Tuple

from .palette import Color

BYTE_COUNT = 4


class Scheme(Enum):
    """Color schemes for byte positions."""
    FOUR_TONE = "four_tone"
    TWO_TONE = "two_tone"


SCHEME_COLORS = {
    Scheme.FOUR_TONE: {
        0: Color.GRAY,
        1: Color.GRAY,
        2: Color.GREEN,
        3: Color.LIGHT_GRAY,
    },
    # Only the low two bytes are shown in the two-tone scheme
    Scheme.TWO_TONE: {
        2: Color.CYAN,
        3: Color.LIGHT_GRAY,
    },
}


def to_bytes(timestamp: int) -> List[int]:
    """Split a 32-bit timestamp into 4 bytes, most significant first."""
    return list(timestamp.to_bytes(BYTE_COUNT, "big"))


def from_bytes(values: Sequence[int]) -> int:
    """Reassemble big-endian bytes into a timestamp."""
    return int.from_bytes(bytes(values), "big")


def positions(scheme: Scheme) -> List[int]:
    """Byte positions rendered under a scheme, in display order."""
    return sorted(SCHEME_COLORS[scheme])


def classify(position: int, scheme: Scheme = Scheme.FOUR_TONE) -> Color:
    """Return the color for a byte position under the given scheme."""
    try:
        return SCHEME_COLORS[scheme][position]
    except KeyError:
        raise ValueError(f"position {position} is not rendered by {scheme.value}") from None


def segments(timestamp: int, scheme: Scheme = Scheme.FOUR_TONE) -> List[Tuple[Color, int]]:
    """Return the (color, byte) pairs displayed for a timestamp."""
    values = to_bytes(timestamp)
    return [(classify(pos, scheme), values[pos]) for pos in positions(scheme)]
