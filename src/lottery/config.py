"""Configuration for the lottery package."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LotteryConfig(BaseModel):
    """Settings for drawing balls and for the package's logging.

    Attributes:
        number_upper_bound: Exclusive upper bound of drawn ball numbers.
        log_level: Level name used by the command-line entry point.
        log_dir: Directory for the rotating log file; console only when unset.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    number_upper_bound: int = Field(
        default=100,
        gt=0,
        description="Drawn numbers lie in [0, number_upper_bound)"
    )

    log_level: str = Field(
        default="WARNING",
        description="Standard logging level name"
    )

    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for log files"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name.

        Args:
            v: Level name in any case.

        Returns:
            Upper-case level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in _LEVEL_NAMES:
            raise ValueError(
                f"Invalid log level: {v}. Supported levels: {', '.join(_LEVEL_NAMES)}"
            )
        return normalized

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
