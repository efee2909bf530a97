"""MLB schedule adapter.

Fetches regular-season and postseason schedules side by side, merges
them into one de-duplicated list and normalizes to the shared Game shape.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from homegame.core import Game, ScheduleAdapter, SchedulePayload, Team, TeamRef
from homegame.providers.http import RequestPolicy
from homegame.providers.mlb.client import MLBClient
from homegame.providers.shared import (
    AWAY_TEAM_NAME,
    HOME_TEAM_NAME,
    group_games_by_date,
    league_today_key,
    list_of,
    sort_games_by_date,
)
from homegame.utilities.tz import parse_iso_instant

logger = logging.getLogger(__name__)

# statsapi reports unscheduled games at 03:33 UTC
PLACEHOLDER_UTC_TIME = (3, 33)


def is_mlb_time_tbd(raw: dict) -> bool:
    """Whether a raw statsapi game has no real start time."""
    if (raw.get("status") or {}).get("startTimeTBD") is True:
        return True
    instant = parse_iso_instant(raw.get("gameDate"))
    if instant is None:
        return True
    return (instant.hour, instant.minute) == PLACEHOLDER_UTC_TIME


def normalize_game(raw: dict) -> Game | None:
    """Convert a raw statsapi game to a Game."""
    if not raw:
        return None
    teams = raw.get("teams") or {}
    home = (teams.get("home") or {}).get("team") or {}
    away = (teams.get("away") or {}).get("team") or {}
    status = raw.get("status") or {}
    return Game(
        game_id=raw.get("gamePk"),
        game_date=raw.get("gameDate") or None,
        home_team=TeamRef(name=home.get("name") or HOME_TEAM_NAME, id=home.get("id")),
        away_team=TeamRef(name=away.get("name") or AWAY_TEAM_NAME, id=away.get("id")),
        venue=(raw.get("venue") or {}).get("name") or None,
        start_time_tbd=is_mlb_time_tbd(raw),
        status=status.get("detailedState") or status.get("abstractGameState") or None,
    )


def _has_better_start(candidate: dict, kept: dict) -> bool:
    if not kept.get("gameDate"):
        return bool(candidate.get("gameDate"))
    return is_mlb_time_tbd(kept) and not is_mlb_time_tbd(candidate)


def merge_and_group_games(
    regular_dates: list,
    postseason_dates: list,
    fallback_date_key: str = "",
) -> SchedulePayload:
    """Merge regular and postseason date lists into one payload.

    Games are de-duplicated by gamePk. The first record seen wins unless
    its start is missing or the 03:33 placeholder and a later duplicate
    has a concrete one. Games without a gamePk are dropped.
    """
    raw_games = [
        g
        for d in [*regular_dates, *postseason_dates]
        if isinstance(d, dict)
        for g in list_of(d, "games")
        if isinstance(g, dict)
    ]

    by_pk: dict = {}
    for raw in raw_games:
        pk = raw.get("gamePk")
        if pk is None:
            continue
        existing = by_pk.get(pk)
        if existing is None or _has_better_start(raw, existing):
            by_pk[pk] = raw

    games = [g for g in (normalize_game(raw) for raw in by_pk.values()) if g is not None]
    return group_games_by_date(sort_games_by_date(games), fallback_date_key)


class MLBAdapter(ScheduleAdapter):
    """statsapi.mlb.com adapter."""

    name = "mlb"

    def __init__(self, client: MLBClient | None = None):
        self._client = client or MLBClient()

    def _fetch_both(
        self,
        team_id: int | str | None,
        start_date: str | None,
        end_date: str | None,
        regular_policy: RequestPolicy,
    ) -> tuple[list, list]:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="mlb") as executor:
            regular = executor.submit(
                self._client.get_schedule, team_id, start_date, end_date, policy=regular_policy
            )
            postseason = executor.submit(
                self._client.get_postseason_schedule,
                team_id,
                start_date,
                end_date,
                policy=RequestPolicy.OPTIONAL,
            )
            regular_data = regular.result()
            postseason_data = postseason.result()
        return list_of(regular_data, "dates"), list_of(postseason_data, "dates")

    def fetch_schedule_window(
        self,
        team: Team,
        start_iso: str | None,
        end_iso: str | None,
    ) -> SchedulePayload:
        regular, postseason = self._fetch_both(
            team.team_api_id, start_iso, end_iso, RequestPolicy.REQUIRED
        )
        payload = merge_and_group_games(regular, postseason)
        logger.debug(
            "[MLB] %s: %d games (%s..%s)", team.slug, payload.total_items, start_iso, end_iso
        )
        return payload

    def fetch_league_schedule_today(self) -> SchedulePayload:
        today = league_today_key()
        regular, postseason = self._fetch_both(None, today, today, RequestPolicy.OPTIONAL)
        return merge_and_group_games(regular, postseason, today)
