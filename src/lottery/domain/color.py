"""
Domain module for ball colors.

Contains the closed enumeration of colors a lottery ball can carry.
"""

from enum import Enum
from typing import List


class Color(str, Enum):
    """Enumeration of the colors a lottery ball can be painted with.

    The set is closed: members are never added at runtime. Each member's
    value equals its name, so the text form of a color is its upper-case
    name.
    """
    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"
    YELLOW = "YELLOW"
    ORANGE = "ORANGE"
    PURPLE = "PURPLE"
    WHITE = "WHITE"
    BLACK = "BLACK"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def names(cls) -> List[str]:
        """Return the names of all colors in declaration order."""
        return [color.name for color in cls]

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a color by name, ignoring case and surrounding whitespace.

        Args:
            name: Color name such as ``"red"`` or ``" BLUE "``.

        Returns:
            Color: The matching enumeration member.

        Raises:
            ValueError: If the name is empty or does not name a color.
        """
        normalized = (name or "").strip().upper()
        if not normalized:
            raise ValueError("Color name cannot be empty")
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(
                f"Unknown color: {name!r}. Supported colors: {', '.join(cls.names())}"
            ) from None
