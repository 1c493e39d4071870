"""Domain model for lottery balls.

This module defines the Ball class which represents one lottery entry
with a color and a number. Uses Pydantic for type checking on construction
and assignment.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .color import Color


class Ball(BaseModel):
    """Represents a lottery ball with its color and number.

    Direct construction is trusted: the number is not range-checked and the
    color may be any text, including the empty default. Only balls drawn by
    a lottery are guaranteed to carry a known color and a number in range.

    Attributes:
        color: Color name of the ball (empty until painted).
        number: Number printed on the ball.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    color: str = Field(default="", description="Color name of the ball")
    number: int = Field(default=0, description="Number printed on the ball")

    def __init__(self, color: Union[str, Color] = "", number: int = 0, **data: Any) -> None:
        super().__init__(color=color, number=number, **data)

    @field_validator("color", mode="before")
    @classmethod
    def color_to_text(cls, v: Any) -> Any:
        """Store Color members by name so the field always holds plain text."""
        if isinstance(v, Color):
            return v.value
        return v

    def get_color(self) -> str:
        return self.color

    def set_color(self, color: Union[str, Color]) -> None:
        self.color = color

    def get_number(self) -> int:
        return self.number

    def set_number(self, number: int) -> None:
        self.number = number

    def has_color(self) -> bool:
        """Check whether the ball is painted with a known color.

        Returns:
            bool: True if the color names a member of Color, False otherwise.
        """
        return self.color in Color.names()

    def describe(self) -> str:
        """Return a human-readable description of the ball."""
        return f"Ball with number: {self.number} and color: {self.color}"

    def __str__(self) -> str:
        return self.describe()
