"""Lottery: draws randomly colored, randomly numbered balls."""

from __future__ import annotations

import logging
import random  # nosec B311
from typing import List, Optional

from ..config import LotteryConfig
from ..domain import Ball
from .color_supplier import RandomColorSupplier
from .protocols import ColorSupplierProtocol

logger = logging.getLogger(__name__)


class Lottery:
    """Ball generator composing a color supplier with a number draw.

    The lottery holds its color supplier instead of inheriting color
    selection, so any object with a ``random_color`` method can be
    substituted. Each draw is independent and returns a new Ball.
    """

    def __init__(
        self,
        color_supplier: Optional[ColorSupplierProtocol] = None,
        rng: Optional[random.Random] = None,
        config: Optional[LotteryConfig] = None,
    ) -> None:
        """Create a lottery.

        Args:
            color_supplier: Source of ball colors. Defaults to a
                RandomColorSupplier sharing ``rng``.
            rng: Random source for ball numbers; a fresh unseeded
                ``random.Random`` when omitted.
            config: Lottery settings; defaults apply when omitted.
        """
        self._rng = rng if rng is not None else random.Random()  # nosec B311
        self._color_supplier = (
            color_supplier if color_supplier is not None else RandomColorSupplier(self._rng)
        )
        self._config = config if config is not None else LotteryConfig()

    @property
    def color_supplier(self) -> ColorSupplierProtocol:
        return self._color_supplier

    @property
    def config(self) -> LotteryConfig:
        return self._config

    def random_ball(self) -> Ball:
        """Draw one ball with a random color and a random number.

        Returns:
            Ball: A new ball whose number lies in
                ``[0, config.number_upper_bound)``.
        """
        ball = Ball()
        ball.set_color(self._color_supplier.random_color())
        ball.set_number(self._rng.randrange(self._config.number_upper_bound))  # nosec B311
        logger.debug("Drew ball %s/%d", ball.color, ball.number)
        return ball

    def draw(self, count: int) -> List[Ball]:
        """Draw several independent balls.

        Args:
            count: Number of balls to draw.

        Returns:
            List[Ball]: ``count`` freshly drawn balls.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError("Draw count must be non-negative")
        balls = [self.random_ball() for _ in range(count)]
        logger.info("Drew %d balls", len(balls))
        return balls
