"""Runtime configuration.

Settings come from environment variables so build scripts and the API
process can be configured without code changes. Read lazily on every call
so tests can patch the environment.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_HORIZON_MONTHS = 9
DEFAULT_TEAMS_PATH = Path("data") / "teams.json"
SITE_NAME = "homegame.today"
LEAGUE_TIMEZONE = "America/New_York"


def _get_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


def _get_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


def get_fetch_timeout() -> float:
    """Per-request timeout in seconds for upstream schedule APIs."""
    return _get_float("HOMEGAME_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT)


def get_horizon_months() -> int:
    """How many months ahead the schedule window reaches."""
    return _get_int("HOMEGAME_HORIZON_MONTHS", DEFAULT_HORIZON_MONTHS)


def get_teams_path() -> Path:
    """Location of the static team configuration file."""
    return Path(os.environ.get("HOMEGAME_TEAMS_PATH") or DEFAULT_TEAMS_PATH)


def get_site_base() -> str | None:
    """Absolute site URL used to build OG image links (None = relative)."""
    return os.environ.get("HOMEGAME_SITE_BASE") or None


def get_log_level() -> str:
    return os.environ.get("HOMEGAME_LOG_LEVEL", "INFO").upper()
