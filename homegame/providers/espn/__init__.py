"""ESPN provider for NBA and NFL scoreboards."""

from homegame.providers.espn.client import ESPNClient
from homegame.providers.espn.provider import ESPNAdapter, NBAAdapter, NFLAdapter

__all__ = ["ESPNAdapter", "ESPNClient", "NBAAdapter", "NFLAdapter"]
