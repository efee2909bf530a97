"""Core data types for homegame.

All data structures are pure dataclasses with attribute access.
Games are normalized by the sport adapters into one sport-agnostic shape.
"""

from dataclasses import dataclass, field

SPORTS = ("mlb", "nhl", "nba", "nfl")
DEFAULT_SPORT = "mlb"


@dataclass(frozen=True)
class Team:
    """Static team configuration."""

    id: int | str
    slug: str
    name: str
    timezone: str
    sport: str = DEFAULT_SPORT
    venue: str | None = None
    colors: tuple[str, ...] = ()
    api_id: int | str | None = None  # e.g. NHL/NBA 3-letter code
    did: str | None = None  # AT-Proto DID for the team's Bluesky account

    @property
    def team_api_id(self) -> int | str:
        """Identifier the upstream API uses for this team."""
        return self.api_id if self.api_id is not None else self.id


@dataclass(frozen=True)
class TeamRef:
    """Team side of a game as reported upstream."""

    name: str
    id: int | str | None = None


@dataclass(frozen=True)
class Game:
    """A single normalized game."""

    game_id: int | str | None
    home_team: TeamRef
    away_team: TeamRef
    game_date: str | None = None  # ISO-8601 instant
    venue: str | None = None
    start_time_tbd: bool = False
    status: str | None = None


@dataclass(frozen=True)
class ScheduleDate:
    """Games bucketed under one date key."""

    date: str
    games: tuple[Game, ...] = ()

    @property
    def total_games(self) -> int:
        return len(self.games)


@dataclass(frozen=True)
class SchedulePayload:
    """Normalized schedule response shared by all adapters."""

    dates: tuple[ScheduleDate, ...] = ()

    @property
    def total_items(self) -> int:
        return sum(d.total_games for d in self.dates)

    def all_games(self) -> list[Game]:
        """Flatten date buckets in order."""
        return [g for d in self.dates for g in d.games]

    def to_dict(self) -> dict:
        return {
            "totalItems": self.total_items,
            "dates": [
                {
                    "date": d.date,
                    "totalGames": d.total_games,
                    "games": [game_to_dict(g) for g in d.games],
                }
                for d in self.dates
            ],
        }


@dataclass
class ScheduleFacts:
    """Per-team summary derived from a schedule payload.

    Recomputed on every request; never cached.
    """

    team_time_zone: str | None
    today_key: str
    games: list[Game] = field(default_factory=list)
    games_today: list[Game] = field(default_factory=list)
    home_games_today: list[Game] = field(default_factory=list)
    away_games_today: list[Game] = field(default_factory=list)
    next_home_game: Game | None = None


def game_to_dict(game: Game) -> dict:
    """Serialize a game using the upstream-style camelCase keys."""
    return {
        "gameId": game.game_id,
        "gameDate": game.game_date,
        "homeTeam": {"name": game.home_team.name, "id": game.home_team.id},
        "awayTeam": {"name": game.away_team.name, "id": game.away_team.id},
        "venue": game.venue,
        "startTimeTbd": game.start_time_tbd,
        "status": game.status,
    }
