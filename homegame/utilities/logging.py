"""Logging setup for scripts and the API process."""

import logging
import sys

from homegame.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once.

    Args:
        level: Log level name (None = HOMEGAME_LOG_LEVEL, default INFO)
    """
    level_name = (level or get_log_level()).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(getattr(h, "_homegame", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._homegame = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
