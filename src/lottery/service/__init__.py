"""
Service package for drawing lottery balls.

This package provides the color supplier and the lottery that composes it
into fully randomized balls. Suppliers follow the Strategy pattern, so a
lottery can be given any implementation of the color supplier interface.

Main exports:
    - IColorSupplier: Abstract interface for color suppliers
    - ColorSupplierProtocol: Protocol-based interface for type checking
    - RandomColorSupplier: Default uniform random supplier
    - Lottery: Ball generator

Example usage:
    from lottery.service import Lottery

    lottery = Lottery()
    ball = lottery.random_ball()
    print(ball)
"""

import random  # nosec B311
from typing import Optional

from .protocols import IColorSupplier, ColorSupplierProtocol
from .color_supplier import RandomColorSupplier, random_color
from .lottery import Lottery

# Re-export domain models and settings for convenience
from ..config import LotteryConfig
from ..domain import Ball, Color

__all__ = [
    # Service interfaces and protocols
    "IColorSupplier",
    "ColorSupplierProtocol",
    # Service implementations
    "RandomColorSupplier",
    "random_color",
    "Lottery",
    # Factories
    "create_color_supplier",
    "create_lottery",
    "get_random_ball",
    # Domain models (re-exported for convenience)
    "Ball",
    "Color",
    "LotteryConfig",
]

SUPPORTED_SUPPLIER_TYPES = ("random",)


def create_color_supplier(
    supplier_type: str = "random",
    seed: Optional[int] = None
) -> IColorSupplier:
    """Factory function for creating color supplier instances.

    Args:
        supplier_type: Type of supplier to create. Only "random" is supported.
        seed: Optional seed for a reproducible color sequence.

    Returns:
        IColorSupplier: Configured supplier instance.

    Raises:
        ValueError: If supplier_type is not supported.
    """
    if supplier_type == "random":
        return RandomColorSupplier(random.Random(seed))  # nosec B311
    raise ValueError(
        f"Unsupported supplier type: {supplier_type}. "
        f"Supported types: {', '.join(repr(t) for t in SUPPORTED_SUPPLIER_TYPES)}"
    )


def create_lottery(
    seed: Optional[int] = None,
    config: Optional[LotteryConfig] = None
) -> Lottery:
    """Factory function for creating a lottery over a single random source.

    Lotteries created with the same seed draw the same sequence of balls.

    Args:
        seed: Optional seed for the random source.
        config: Optional lottery settings.

    Returns:
        Lottery: Ready-to-use lottery.
    """
    return Lottery(rng=random.Random(seed), config=config)  # nosec B311


def get_random_ball(seed: Optional[int] = None) -> Ball:
    """Convenience function drawing a single ball from a fresh lottery."""
    return create_lottery(seed).random_ball()
