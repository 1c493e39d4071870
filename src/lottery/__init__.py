"""
Lottery: random colored, numbered balls.

Main exports:
    - Ball: Value object holding a color and a number
    - Color: Closed enumeration of ball colors
    - Lottery: Generator of randomized balls
    - RandomColorSupplier: Uniform random color selection
    - LotteryConfig: Settings for drawing and logging
"""

from .config import LotteryConfig
from .domain import Ball, Color
from .service import (
    ColorSupplierProtocol,
    IColorSupplier,
    Lottery,
    RandomColorSupplier,
    create_color_supplier,
    create_lottery,
    get_random_ball,
    random_color,
)

__all__ = [
    "Ball",
    "Color",
    "ColorSupplierProtocol",
    "IColorSupplier",
    "Lottery",
    "LotteryConfig",
    "RandomColorSupplier",
    "create_color_supplier",
    "create_lottery",
    "get_random_ball",
    "random_color",
]

__version__ = "1.0.0"
