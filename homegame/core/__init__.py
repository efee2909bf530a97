"""Core types and interfaces for homegame.

All data structures are dataclasses with attribute access.
Sport providers implement the ScheduleAdapter interface.
"""

from homegame.core.exceptions import (
    ConfigurationError,
    DuplicateSlugError,
    HomegameError,
    UnknownSportError,
    UpstreamDecodeError,
    UpstreamHttpError,
    UpstreamTimeoutError,
)
from homegame.core.interfaces import ScheduleAdapter
from homegame.core.types import (
    DEFAULT_SPORT,
    SPORTS,
    Game,
    ScheduleDate,
    ScheduleFacts,
    SchedulePayload,
    Team,
    TeamRef,
    game_to_dict,
)

__all__ = [
    # Types
    "DEFAULT_SPORT",
    "SPORTS",
    "Game",
    "ScheduleDate",
    "ScheduleFacts",
    "SchedulePayload",
    "Team",
    "TeamRef",
    "game_to_dict",
    # Interfaces
    "ScheduleAdapter",
    # Errors
    "ConfigurationError",
    "DuplicateSlugError",
    "HomegameError",
    "UnknownSportError",
    "UpstreamDecodeError",
    "UpstreamHttpError",
    "UpstreamTimeoutError",
]
