"""Helpers shared by the sport adapters."""

import math
from datetime import datetime

from homegame.config import LEAGUE_TIMEZONE
from homegame.core.types import Game, ScheduleDate, SchedulePayload
from homegame.utilities.tz import date_key_in_zone, now_utc, parse_iso_instant

HOME_TEAM_NAME = "Home Team"
AWAY_TEAM_NAME = "Away Team"


def league_today_key(now: datetime | None = None) -> str:
    """League-wide 'today' (America/New_York)."""
    return date_key_in_zone(now or now_utc(), LEAGUE_TIMEZONE)


def game_timestamp(game: Game) -> float:
    """Sort key for a game's start; undated games sort last."""
    instant = parse_iso_instant(game.game_date)
    return instant.timestamp() if instant else math.inf


def sort_games_by_date(games: list[Game]) -> list[Game]:
    """Stable ascending sort by start time, undated games last."""
    return sorted(games, key=game_timestamp)


def group_games_by_date(games: list[Game], fallback_date_key: str = "") -> SchedulePayload:
    """Bucket games by the UTC day of their game_date.

    The bucket key is the date portion of the upstream ISO string, so
    it is the UTC calendar day, not the team-local one. Undated games go
    under fallback_date_key. Bucket order follows first appearance.
    """
    grouped: dict[str, list[Game]] = {}
    for game in games:
        day = str(game.game_date)[:10] if game.game_date else fallback_date_key
        grouped.setdefault(day, []).append(game)
    return SchedulePayload(
        dates=tuple(ScheduleDate(date=day, games=tuple(day_games)) for day, day_games in grouped.items())
    )


def list_of(data: dict | None, key: str) -> list:
    """Get a list field from an upstream payload, tolerating bad shapes."""
    if not isinstance(data, dict):
        return []
    value = data.get(key)
    return value if isinstance(value, list) else []
