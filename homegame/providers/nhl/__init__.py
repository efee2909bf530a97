"""NHL provider backed by api-web.nhle.com."""

from homegame.providers.nhl.client import NHLClient, current_nhl_season
from homegame.providers.nhl.provider import NHLAdapter

__all__ = ["NHLAdapter", "NHLClient", "current_nhl_season"]
