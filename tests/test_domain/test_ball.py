"""Tests for Ball domain model."""

import pytest
from pydantic import ValidationError

from lottery.domain.ball import Ball
from lottery.domain.color import Color


class TestBall:
    """Test cases for the Ball class."""

    def test_default_ball(self):
        """A default ball has no color and number zero."""
        ball = Ball()

        assert ball.get_color() == ""
        assert ball.get_number() == 0
        assert not ball.has_color()

    def test_positional_construction(self):
        ball = Ball("RED", 42)

        assert ball.get_color() == "RED"
        assert ball.get_number() == 42

    def test_keyword_construction(self):
        ball = Ball(color="GREEN", number=3)

        assert ball.color == "GREEN"
        assert ball.number == 3

    def test_color_member_stored_as_text(self):
        ball = Ball(Color.PURPLE, 1)

        assert ball.color == "PURPLE"
        assert type(ball.color) is str
        assert ball.has_color()

    def test_description(self):
        assert str(Ball("BLUE", 7)) == "Ball with number: 7 and color: BLUE"
        assert Ball("BLUE", 7).describe() == "Ball with number: 7 and color: BLUE"

    def test_default_description(self):
        assert str(Ball()) == "Ball with number: 0 and color: "

    def test_setters(self):
        """Setters replace field values."""
        ball = Ball()
        ball.set_color(Color.YELLOW)
        ball.set_number(99)

        assert ball.get_color() == "YELLOW"
        assert ball.get_number() == 99

    def test_no_range_validation_on_direct_construction(self):
        """Direct construction trusts the caller: out-of-range values are kept."""
        ball = Ball("not-a-color", -5)
        ball.set_number(1000)

        assert ball.color == "not-a-color"
        assert ball.number == 1000
        assert not ball.has_color()

    def test_type_validation_on_assignment(self):
        ball = Ball()

        with pytest.raises(ValidationError):
            ball.set_number("many")

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            Ball("RED", 1, weight=3)

    def test_equality_by_fields(self):
        assert Ball("RED", 1) == Ball("RED", 1)
        assert Ball("RED", 1) != Ball("RED", 2)
        assert Ball("RED", 1) != Ball("BLUE", 1)
