"""NHL web API HTTP client (api-web.nhle.com)."""

from datetime import datetime

from homegame.providers.http import HttpClient, RequestPolicy
from homegame.utilities.tz import now_utc

NHL_BASE_URL = "https://api-web.nhle.com/v1"

# Seasons start in October
SEASON_START_MONTH = 10


def current_nhl_season(now: datetime | None = None) -> str:
    """Season id spanning two years, e.g. '20242025'.

    From October on, the season that starts this calendar year; before
    that, the one that started the previous year.
    """
    now = now or now_utc()
    year = now.year
    if now.month < SEASON_START_MONTH:
        return f"{year - 1}{year}"
    return f"{year}{year + 1}"


class NHLClient:
    """Thin wrapper over HttpClient for the NHL web API."""

    def __init__(self, http: HttpClient | None = None):
        self._http = http or HttpClient()

    def get_club_schedule_season(self, team_code: str, season: str) -> dict | None:
        """Fetch a club's full season schedule.

        A 404 means off-season or unknown club and returns None; any other
        failure raises.
        """
        url = f"{NHL_BASE_URL}/club-schedule-season/{team_code}/{season}"
        return self._http.get_json(url, policy=RequestPolicy.REQUIRED, empty_statuses=(404,))

    def get_schedule(self, date_key: str) -> dict | None:
        """Fetch the league schedule week starting at a YYYY-MM-DD date."""
        url = f"{NHL_BASE_URL}/schedule/{date_key}"
        return self._http.get_json(url, policy=RequestPolicy.OPTIONAL)
