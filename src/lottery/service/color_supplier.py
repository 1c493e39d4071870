"""Random color selection for lottery balls."""

from __future__ import annotations

import logging
import random  # nosec B311
from typing import Iterable, List, Optional

from ..domain import Color
from .protocols import IColorSupplier

logger = logging.getLogger(__name__)


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Return one color chosen uniformly from the Color enumeration.

    Args:
        rng: Random source to draw from. The module-level source is used
            when omitted.

    Returns:
        Color: The selected color.
    """
    source = rng if rng is not None else random
    return source.choice(list(Color))  # nosec B311


class RandomColorSupplier(IColorSupplier):
    """Color supplier picking uniformly at random from a fixed color set.

    The random source is injectable so draws can be made reproducible by
    passing a seeded ``random.Random``.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        colors: Optional[Iterable[Color]] = None,
    ) -> None:
        """Create a supplier.

        Args:
            rng: Random source; a fresh unseeded ``random.Random`` when omitted.
            colors: Subset of Color to choose from; all colors when omitted.

        Raises:
            ValueError: If ``colors`` is given but empty.
        """
        self._rng = rng if rng is not None else random.Random()  # nosec B311
        self._colors: List[Color] = list(Color) if colors is None else list(colors)
        if not self._colors:
            raise ValueError("Color supplier needs at least one color")

    @property
    def colors(self) -> List[Color]:
        return list(self._colors)

    def random_color(self) -> Color:
        color = self._rng.choice(self._colors)  # nosec B311
        logger.debug("Selected color %s", color.name)
        return color
