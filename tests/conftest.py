"""Shared fixtures for homegame tests."""

from datetime import UTC, datetime

import httpx
import pytest

from homegame.core import Game, SchedulePayload, Team, TeamRef
from homegame.providers.http import HttpClient
from homegame.providers.shared import group_games_by_date

# Noon in Boston on the Fourth of July
NOW = datetime(2024, 7, 4, 16, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def red_sox() -> Team:
    return Team(
        id=111,
        slug="redsox",
        name="Boston Red Sox",
        venue="Fenway Park",
        timezone="America/New_York",
        colors=("#BD3039", "#0C2340"),
    )


@pytest.fixture
def bruins() -> Team:
    return Team(
        id=6,
        api_id="BOS",
        slug="bruins",
        name="Boston Bruins",
        sport="nhl",
        venue="TD Garden",
        timezone="America/New_York",
    )


@pytest.fixture
def celtics() -> Team:
    return Team(
        id=2,
        api_id="BOS",
        slug="celtics",
        name="Boston Celtics",
        sport="nba",
        venue="TD Garden",
        timezone="America/New_York",
    )


@pytest.fixture
def make_game():
    """Factory for normalized games (home 111 vs away 147 by default)."""

    def _make(
        game_date: str | None,
        home_id=111,
        away_id=147,
        game_id=1,
        venue: str | None = "Fenway Park",
        tbd: bool = False,
    ) -> Game:
        return Game(
            game_id=game_id,
            game_date=game_date,
            home_team=TeamRef(name="Boston Red Sox" if home_id == 111 else "Home Club", id=home_id),
            away_team=TeamRef(name="New York Yankees" if away_id == 147 else "Away Club", id=away_id),
            venue=venue,
            start_time_tbd=tbd,
        )

    return _make


@pytest.fixture
def payload_of():
    """Wrap games in a SchedulePayload bucketed like the adapters do."""

    def _payload(*games: Game) -> SchedulePayload:
        return group_games_by_date(list(games))

    return _payload


@pytest.fixture
def mock_http():
    """Build an HttpClient backed by an httpx.MockTransport handler."""

    clients: list[HttpClient] = []

    def _build(handler) -> HttpClient:
        client = HttpClient(timeout=10.0, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()
