"""MLB Stats API HTTP client.

Builds request URLs for the regular-season and postseason schedule
endpoints. No data transformation - just fetch and return JSON.
"""

from homegame.providers.http import HttpClient, RequestPolicy

MLB_BASE_URL = "https://statsapi.mlb.com/api/v1"
MLB_SPORT_ID = "1"


class MLBClient:
    """Thin wrapper over HttpClient for statsapi.mlb.com."""

    def __init__(self, http: HttpClient | None = None):
        self._http = http or HttpClient()

    def get_schedule(
        self,
        team_id: int | str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        *,
        policy: RequestPolicy = RequestPolicy.REQUIRED,
    ) -> dict | None:
        """Fetch the regular-season schedule."""
        params = {"sportId": MLB_SPORT_ID}
        params.update(_window_params(team_id, start_date, end_date))
        return self._http.get_json(f"{MLB_BASE_URL}/schedule", params, policy=policy)

    def get_postseason_schedule(
        self,
        team_id: int | str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        *,
        policy: RequestPolicy = RequestPolicy.OPTIONAL,
    ) -> dict | None:
        """Fetch the postseason schedule (empty outside October)."""
        params = _window_params(team_id, start_date, end_date)
        return self._http.get_json(f"{MLB_BASE_URL}/schedule/postseason", params, policy=policy)


def _window_params(
    team_id: int | str | None,
    start_date: str | None,
    end_date: str | None,
) -> dict:
    params: dict = {}
    if team_id is not None:
        params["teamId"] = str(team_id)
    if start_date:
        params["startDate"] = start_date
    if end_date:
        params["endDate"] = end_date
    return params
