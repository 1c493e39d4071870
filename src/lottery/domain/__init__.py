"""
Domain package for lottery entities.

This package contains the core value objects of the lottery: the closed
Color enumeration and the Ball that carries a color and a number.

Main exports:
    - Ball: Value object representing one lottery ball
    - Color: Enum of the colors a ball can carry

Example usage:
    from lottery.domain import Ball, Color

    ball = Ball(Color.BLUE, 7)
    print(ball)  # Ball with number: 7 and color: BLUE
"""

from .ball import Ball
from .color import Color

__all__ = [
    "Ball",
    "Color",
]
