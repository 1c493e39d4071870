"""Tests for random color selection."""

import random
from collections import Counter
from unittest.mock import Mock

import pytest

from lottery.domain import Color
from lottery.service.color_supplier import RandomColorSupplier, random_color
from lottery.service.protocols import IColorSupplier


class TestRandomColorSupplier:
    """Test cases for RandomColorSupplier."""

    def test_is_color_supplier(self):
        assert isinstance(RandomColorSupplier(), IColorSupplier)

    def test_returns_color_member(self):
        supplier = RandomColorSupplier()

        for _ in range(100):
            assert isinstance(supplier.random_color(), Color)

    def test_uniform_distribution(self):
        """Every color appears with roughly equal frequency."""
        supplier = RandomColorSupplier(random.Random(12345))
        draws = 10_000

        counts = Counter(supplier.random_color() for _ in range(draws))

        expected = draws / len(Color)
        assert set(counts) == set(Color)
        for color, count in counts.items():
            assert abs(count - expected) < expected * 0.2, color

    def test_seeded_suppliers_agree(self):
        first = RandomColorSupplier(random.Random(7))
        second = RandomColorSupplier(random.Random(7))

        assert [first.random_color() for _ in range(50)] == [
            second.random_color() for _ in range(50)
        ]

    def test_uses_injected_rng(self):
        rng = Mock()
        rng.choice.return_value = Color.WHITE

        supplier = RandomColorSupplier(rng)

        assert supplier.random_color() is Color.WHITE
        rng.choice.assert_called_once_with(list(Color))

    def test_color_subset(self):
        supplier = RandomColorSupplier(colors=[Color.RED, Color.BLUE])

        assert supplier.colors == [Color.RED, Color.BLUE]
        for _ in range(100):
            assert supplier.random_color() in (Color.RED, Color.BLUE)

    def test_empty_color_subset_rejected(self):
        with pytest.raises(ValueError):
            RandomColorSupplier(colors=[])

    def test_rng_failure_propagates(self):
        rng = Mock()
        rng.choice.side_effect = OSError("entropy exhausted")

        with pytest.raises(OSError):
            RandomColorSupplier(rng).random_color()


class TestRandomColorFunction:
    """Test cases for the module-level random_color function."""

    def test_returns_color_member(self):
        assert isinstance(random_color(), Color)

    def test_with_seeded_rng(self):
        assert random_color(random.Random(3)) is random_color(random.Random(3))
