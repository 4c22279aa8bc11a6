"""
Closed choice sets used by the resolvers.

Pure domain enums - no resolution logic here.
"""
from enum import Enum, auto


class ShirtColor(Enum):
    """Shirt colors held in inventory."""
    RED = auto()
    BLUE = auto()


class DisplayMode(Enum):
    """UI display modes."""
    LIGHT = auto()
    DARK = auto()


class TimeOfDay(Enum):
    """Context signal consulted by the display mode fallback."""
    DAY = auto()
    NIGHT = auto()


class GiveawayStrategy(Enum):
    """How an inventory picks a shirt when the customer has no preference."""
    MOST_STOCKED = "most_stocked"
    MOST_RECENT = "most_recent"
