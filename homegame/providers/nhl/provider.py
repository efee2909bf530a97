"""NHL schedule adapter."""

import logging

from homegame.core import ConfigurationError, Game, ScheduleAdapter, SchedulePayload, Team, TeamRef
from homegame.providers.nhl.client import NHLClient, current_nhl_season
from homegame.providers.shared import (
    AWAY_TEAM_NAME,
    HOME_TEAM_NAME,
    group_games_by_date,
    league_today_key,
    list_of,
    sort_games_by_date,
)

logger = logging.getLogger(__name__)


def _localized(value) -> str | None:
    """NHL names come as {'default': 'Bruins', 'fr': ...}."""
    if isinstance(value, dict):
        return value.get("default") or None
    return value or None


def _team_ref(raw: dict | None, default_name: str) -> TeamRef:
    raw = raw or {}
    return TeamRef(
        name=_localized(raw.get("commonName")) or default_name,
        id=raw.get("abbrev") or raw.get("id"),
    )


def normalize_game(raw: dict) -> Game | None:
    """Convert a raw NHL game to a Game."""
    if not raw:
        return None
    start = raw.get("startTimeUTC") or None
    return Game(
        game_id=raw.get("id"),
        game_date=start,
        home_team=_team_ref(raw.get("homeTeam"), HOME_TEAM_NAME),
        away_team=_team_ref(raw.get("awayTeam"), AWAY_TEAM_NAME),
        venue=_localized(raw.get("venue")),
        start_time_tbd=raw.get("gameScheduleState") == "TBD" or not start,
        status=raw.get("gameState") or None,
    )


def _normalize_all(raw_games: list) -> list[Game]:
    games = (normalize_game(g) for g in raw_games if isinstance(g, dict))
    return [g for g in games if g is not None]


class NHLAdapter(ScheduleAdapter):
    """api-web.nhle.com adapter.

    The club endpoint always returns the whole season; the requested
    window is not applied.
    """

    name = "nhl"

    def __init__(self, client: NHLClient | None = None):
        self._client = client or NHLClient()

    def fetch_schedule_window(
        self,
        team: Team,
        start_iso: str | None = None,
        end_iso: str | None = None,
    ) -> SchedulePayload:
        team_code = team.api_id
        if not team_code:
            raise ConfigurationError(f"NHL team missing api_id (3-letter code): {team.name}")

        season = current_nhl_season()
        data = self._client.get_club_schedule_season(str(team_code), season)
        if data is None:
            logger.info("[NHL] No %s schedule for %s (off-season?)", season, team_code)
            return group_games_by_date([])

        games = sort_games_by_date(_normalize_all(list_of(data, "games")))
        logger.debug("[NHL] %s: %d games in %s", team.slug, len(games), season)
        return group_games_by_date(games)

    def fetch_league_schedule_today(self) -> SchedulePayload:
        today = league_today_key()
        data = self._client.get_schedule(today)
        raw_games = [g for week in list_of(data, "gameWeek") for g in list_of(week, "games")]
        return group_games_by_date(_normalize_all(raw_games), today)
