from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from lottery.config import LotteryConfig
from lottery.logging_config import setup_logging
from lottery.service import Lottery

logger = logging.getLogger(__name__)


def main(args: Optional[Sequence[str]] = None) -> int:
    """Draw one lottery ball and print its description."""
    parser = argparse.ArgumentParser(
        prog="lottery",
        description="Draw a lottery ball with a random color and number."
    )
    parser.parse_args(args)

    config = LotteryConfig()
    setup_logging("lottery", level=config.log_level, log_dir=config.log_dir)

    try:
        ball = Lottery(config=config).random_ball()
    except Exception:
        logger.exception("Failed to draw a ball")
        raise

    print(ball)
    return 0


if __name__ == "__main__":
    sys.exit(main())
