"""Schedule facts: today's games and the next home game for a team.

"Today" is always the team-local calendar day, even though adapters
bucket payload dates by UTC day.
"""

from datetime import UTC, datetime

from homegame.core import Game, ScheduleFacts, SchedulePayload, Team
from homegame.utilities.tz import date_key_in_zone, now_utc, parse_iso_instant


def _normalize_venue(value: str | None) -> str:
    return (value or "").strip().lower()


def is_home_for_team(game: Game, team: Team) -> bool:
    """Whether the team is at home for a game.

    Matches on the home team id, or on the venue name when both sides
    name one. Postseason placeholders sometimes carry a seed id instead
    of the real club id, so the venue check catches those.
    """
    if game.home_team.id == team.team_api_id:
        return True
    venue = _normalize_venue(game.venue)
    team_venue = _normalize_venue(team.venue)
    return bool(venue) and bool(team_venue) and venue == team_venue


def is_game_on(game: Game, date_key: str, time_zone: str | None) -> bool:
    """Whether a game starts on a team-local date."""
    instant = parse_iso_instant(game.game_date)
    return instant is not None and date_key_in_zone(instant, time_zone) == date_key


def find_next_home_game(games: list[Game], team: Team, now: datetime) -> Game | None:
    """Earliest dated home game starting at or after now.

    Equal start times keep their input order.
    """
    upcoming = []
    for game in games:
        instant = parse_iso_instant(game.game_date)
        if instant is not None and instant >= now and is_home_for_team(game, team):
            upcoming.append((instant, game))
    if not upcoming:
        return None
    upcoming.sort(key=lambda pair: pair[0])
    return upcoming[0][1]


def derive_team_schedule_facts(
    team: Team,
    payload: SchedulePayload | None,
    now: datetime | None = None,
) -> ScheduleFacts:
    """Derive a team's facts from a schedule payload.

    Args:
        team: Team being profiled
        payload: Normalized schedule (None = no games)
        now: Reference instant (default current time)

    Returns:
        ScheduleFacts for the team-local today
    """
    now = now or now_utc()
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    games = payload.all_games() if payload else []
    time_zone = team.timezone
    today_key = date_key_in_zone(now, time_zone)

    games_today = [g for g in games if is_game_on(g, today_key, time_zone)]
    return ScheduleFacts(
        team_time_zone=time_zone,
        today_key=today_key,
        games=games,
        games_today=games_today,
        home_games_today=[g for g in games_today if is_home_for_team(g, team)],
        away_games_today=[g for g in games_today if g.away_team.id == team.team_api_id],
        next_home_game=find_next_home_game(games, team, now),
    )
