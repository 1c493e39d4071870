"""
Service protocols and interfaces for color selection.

This module defines the abstract base class and protocol that establish the
contract for color suppliers. Lotteries depend on these interfaces rather
than on a concrete supplier, so a deterministic supplier can be injected
in place of the random one.
"""

from abc import ABC, abstractmethod
from typing import Protocol

from ..domain import Color


class IColorSupplier(ABC):
    """Abstract base class for color suppliers.

    A color supplier has a single capability: yield one color from the
    closed Color set. Implementations decide how the color is chosen.

    Example:
        class AlwaysRedSupplier(IColorSupplier):
            def random_color(self) -> Color:
                return Color.RED
    """

    @abstractmethod
    def random_color(self) -> Color:
        """Return one color from the Color enumeration.

        Returns:
            Color: The selected color. Never empty.
        """
        pass


class ColorSupplierProtocol(Protocol):
    """Protocol type for color supplier implementations.

    Any object with a ``random_color`` method can be handed to a Lottery
    without inheriting from IColorSupplier.
    """

    def random_color(self) -> Color:
        ...


__all__ = [
    "IColorSupplier",
    "ColorSupplierProtocol",
]
