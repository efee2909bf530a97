"""ESPN API HTTP client.

Handles raw HTTP requests to ESPN scoreboard endpoints.
No data transformation - just fetch and return JSON.
"""

import logging

from homegame.providers.http import HttpClient, RequestPolicy

logger = logging.getLogger(__name__)

ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"

# Canonical sport tag -> (ESPN sport, ESPN league) path segments
ESPN_SPORT_LEAGUES = {
    "nba": ("basketball", "nba"),
    "nfl": ("football", "nfl"),
}


class ESPNClient:
    """Low-level ESPN scoreboard client."""

    def __init__(self, http: HttpClient | None = None):
        self._http = http or HttpClient()

    def get_sport_league(self, league: str) -> tuple[str, str]:
        """Convert canonical league to ESPN sport/league pair.

        Args:
            league: Canonical league code (e.g., 'nfl', 'nba')

        Returns:
            (sport, espn_league) tuple for API path construction
        """
        try:
            return ESPN_SPORT_LEAGUES[league]
        except KeyError:
            raise ValueError(f"No ESPN mapping for league '{league}'") from None

    def get_scoreboard(self, league: str, date_str: str) -> dict | None:
        """Fetch scoreboard for a league on a given date.

        Scoreboard days are optional: any failure is logged and returns
        None so one bad day does not abort a multi-day fetch.

        Args:
            league: Canonical league code (e.g., 'nfl', 'nba')
            date_str: Date in YYYYMMDD format

        Returns:
            Raw ESPN response or None on error
        """
        sport, espn_league = self.get_sport_league(league)
        url = f"{ESPN_BASE_URL}/{sport}/{espn_league}/scoreboard"
        return self._http.get_json(url, {"dates": date_str}, policy=RequestPolicy.OPTIONAL)
