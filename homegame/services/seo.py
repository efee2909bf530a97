"""schema.org SportsEvent JSON-LD for team pages."""

from homegame.core import Game, ScheduleFacts, Team

SCHEMA_CONTEXT = "https://schema.org"
OFFLINE_ATTENDANCE = "https://schema.org/OfflineEventAttendanceMode"

SPORT_DISPLAY_NAMES = {
    "mlb": "Baseball",
    "nhl": "Hockey",
    "nba": "Basketball",
    "nfl": "Football",
}


def sport_display_name(sport: str | None) -> str:
    return SPORT_DISPLAY_NAMES.get(sport or "mlb", "Baseball")


def select_game_for_team_today(facts: ScheduleFacts | None) -> tuple[Game | None, bool]:
    """Game to feature today: first home game, else first away game.

    Returns:
        (selected_game, is_home)
    """
    if facts is None:
        return None, False
    if facts.home_games_today:
        return facts.home_games_today[0], True
    if facts.away_games_today:
        return facts.away_games_today[0], False
    return None, False


def build_sports_event_json_ld(
    team: Team | None,
    selected_game: Game | None,
    is_home: bool,
    fallback_date_iso: str | None = None,
    sport_name: str = "Baseball",
) -> dict | None:
    """Build a SportsEvent record for the selected game.

    Args:
        team: Team whose page this is
        selected_game: Game from select_game_for_team_today
        is_home: Whether the team is at home for selected_game
        fallback_date_iso: YYYY-MM-DD used at UTC midnight when the game
            has no start time
        sport_name: Display name for the sport field

    Returns:
        JSON-LD dict, or None when there is no game or start date
    """
    if team is None or selected_game is None:
        return None

    team_name = team.name or "Team"
    if is_home:
        opponent = selected_game.away_team.name
        home_name, away_name = team_name, opponent or "Away Team"
        event_name = f"{team_name} vs {opponent or 'Opponent'}"
    else:
        opponent = selected_game.home_team.name
        home_name, away_name = opponent or "Home Team", team_name
        event_name = f"{opponent or 'Opponent'} vs {team_name}"

    start = selected_game.game_date or (
        f"{fallback_date_iso}T00:00:00Z" if fallback_date_iso else None
    )
    if not start:
        return None

    json_ld = {
        "@context": SCHEMA_CONTEXT,
        "@type": "SportsEvent",
        "name": event_name,
        "sport": sport_name,
        "startDate": start,
        "eventAttendanceMode": OFFLINE_ATTENDANCE,
        "homeTeam": {"@type": "SportsTeam", "name": home_name},
        "awayTeam": {"@type": "SportsTeam", "name": away_name},
    }
    if is_home and team.venue:
        json_ld["location"] = {"@type": "Place", "name": team.venue}
    return json_ld
