"""ESPN-backed schedule adapters (NBA, NFL).

ESPN has no season-long schedule endpoint usable here, so team windows
are polled one scoreboard day at a time.
"""

import logging
import math
from datetime import date, datetime, timedelta

from homegame.core import Game, ScheduleAdapter, SchedulePayload, Team, TeamRef
from homegame.providers.espn.client import ESPNClient
from homegame.providers.shared import (
    AWAY_TEAM_NAME,
    HOME_TEAM_NAME,
    group_games_by_date,
    league_today_key,
    list_of,
)
from homegame.utilities.tz import now_utc

logger = logging.getLogger(__name__)

# Upper bound on days polled per window, whatever the requested length
MAX_WINDOW_DAYS = 14

STATUS_TBD = "STATUS_TBD"


def _competitor(competitors: list, side: str) -> dict:
    for comp in competitors:
        if isinstance(comp, dict) and comp.get("homeAway") == side:
            return comp
    return {}


def _team_ref(comp: dict, default_name: str) -> TeamRef:
    team = comp.get("team") or {}
    return TeamRef(
        name=team.get("displayName") or team.get("name") or default_name,
        id=team.get("abbreviation") or team.get("id"),
    )


def normalize_event(event: dict) -> Game | None:
    """Convert an ESPN scoreboard event to a Game."""
    if not event:
        return None
    competitions = list_of(event, "competitions")
    if not competitions or not isinstance(competitions[0], dict):
        return None
    comp = competitions[0]
    competitors = list_of(comp, "competitors")

    status_name = (
        ((comp.get("status") or {}).get("type") or {}).get("name")
        or ((event.get("status") or {}).get("type") or {}).get("name")
        or ""
    )

    return Game(
        game_id=event.get("id"),
        game_date=event.get("date") or None,
        home_team=_team_ref(_competitor(competitors, "home"), HOME_TEAM_NAME),
        away_team=_team_ref(_competitor(competitors, "away"), AWAY_TEAM_NAME),
        venue=(comp.get("venue") or {}).get("fullName") or None,
        start_time_tbd=status_name == STATUS_TBD or not event.get("date"),
        status=status_name or None,
    )


def _parse_day(value: str | None) -> date:
    if value:
        return date.fromisoformat(value[:10])
    return now_utc().date()


def window_days(start_iso: str | None, end_iso: str | None) -> list[date]:
    """Days to poll for a window: start plus up to MAX_WINDOW_DAYS more."""
    start = _parse_day(start_iso)
    end = _parse_day(end_iso)
    span = math.ceil((end - start) / timedelta(days=1))
    days = min(span, MAX_WINDOW_DAYS)
    return [start + timedelta(days=i) for i in range(days + 1)]


class ESPNAdapter(ScheduleAdapter):
    """Scoreboard-polling adapter for one ESPN league."""

    def __init__(self, league: str, client: ESPNClient | None = None):
        self.name = league
        self._client = client or ESPNClient()

    def fetch_scoreboard(self, day: date | datetime) -> list[Game]:
        """All games on one scoreboard day (empty on failure)."""
        data = self._client.get_scoreboard(self.name, day.strftime("%Y%m%d"))
        games = (normalize_event(e) for e in list_of(data, "events") if isinstance(e, dict))
        return [g for g in games if g is not None]

    def fetch_schedule_window(
        self,
        team: Team,
        start_iso: str | None,
        end_iso: str | None,
    ) -> SchedulePayload:
        team_id = team.team_api_id
        games: list[Game] = []
        days = window_days(start_iso, end_iso)
        for day in days:
            games.extend(
                g for g in self.fetch_scoreboard(day)
                if g.home_team.id == team_id or g.away_team.id == team_id
            )
        logger.debug("[ESPN] %s: %d games over %d days", team.slug, len(games), len(days))
        return group_games_by_date(games)

    def fetch_league_schedule_today(self) -> SchedulePayload:
        today = league_today_key()
        games = self.fetch_scoreboard(date.fromisoformat(today))
        return group_games_by_date(games, today)


class NBAAdapter(ESPNAdapter):
    def __init__(self, client: ESPNClient | None = None):
        super().__init__("nba", client)


class NFLAdapter(ESPNAdapter):
    def __init__(self, client: ESPNClient | None = None):
        super().__init__("nfl", client)
