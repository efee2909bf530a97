"""Adapter registry - single source of truth for sport adapters.

The set of sports is closed (mlb, nhl, nba, nfl). Each registry instance
lazily builds one adapter per sport, sharing a single HttpClient, so a
test or a build run can own its registry without touching global state.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from homegame.core import DEFAULT_SPORT, SPORTS, ScheduleAdapter, UnknownSportError
from homegame.providers.espn import ESPNClient, NBAAdapter, NFLAdapter
from homegame.providers.http import HttpClient
from homegame.providers.mlb import MLBAdapter, MLBClient
from homegame.providers.nhl import NHLAdapter, NHLClient

logger = logging.getLogger(__name__)


@dataclass
class AdapterConfig:
    """A registered sport adapter."""

    sport: str
    factory: Callable[[], ScheduleAdapter]

    # Lazy instance
    _instance: ScheduleAdapter | None = field(default=None, repr=False)

    def get_instance(self) -> ScheduleAdapter:
        """Get or create adapter instance."""
        if self._instance is None:
            self._instance = self.factory()
        return self._instance

    def reset_instance(self) -> None:
        """Reset cached instance (for testing)."""
        self._instance = None


class AdapterRegistry:
    """Maps sport tags to adapters.

    Usage:
        registry = AdapterRegistry.default()
        adapter = registry.get_adapter(team.sport)
        payload = adapter.fetch_schedule_window(team, start_iso, end_iso)
    """

    def __init__(self, http: HttpClient | None = None) -> None:
        self._adapters: dict[str, AdapterConfig] = {}
        self._http = http

    def register(self, sport: str, factory: Callable[[], ScheduleAdapter]) -> None:
        """Register the adapter factory for one of the known sports."""
        if sport not in SPORTS:
            raise UnknownSportError(sport)
        if sport in self._adapters:
            logger.warning("[REGISTRY] Adapter '%s' already registered, overwriting", sport)
        self._adapters[sport] = AdapterConfig(sport=sport, factory=factory)
        logger.debug("[REGISTRY] Registered adapter: %s", sport)

    def get_adapter(self, sport: str | None = None) -> ScheduleAdapter:
        """Adapter for a sport tag (None/empty = mlb).

        Raises:
            UnknownSportError: Tag is not a registered sport
        """
        config = self._adapters.get(sport or DEFAULT_SPORT)
        if config is None:
            raise UnknownSportError(str(sport))
        return config.get_instance()

    def sports(self) -> list[str]:
        """Registered sport tags."""
        return list(self._adapters)

    def reset_instances(self) -> None:
        """Reset all cached instances (for testing)."""
        for config in self._adapters.values():
            config.reset_instance()

    def close(self) -> None:
        """Drop adapter instances and close the shared HTTP client, if any."""
        self.reset_instances()
        if self._http is not None:
            self._http.close()

    @classmethod
    def default(cls, http: HttpClient | None = None) -> "AdapterRegistry":
        """Registry with the four built-in adapters sharing one client."""
        http = http or HttpClient()
        registry = cls(http)
        registry.register("mlb", lambda: MLBAdapter(MLBClient(http)))
        registry.register("nhl", lambda: NHLAdapter(NHLClient(http)))
        registry.register("nba", lambda: NBAAdapter(ESPNClient(http)))
        registry.register("nfl", lambda: NFLAdapter(ESPNClient(http)))
        return registry


_default_registry: AdapterRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> AdapterRegistry:
    """Process-wide default registry, built on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = AdapterRegistry.default()
    return _default_registry


def get_adapter(sport: str | None = None) -> ScheduleAdapter:
    """Adapter for a sport from the process-wide default registry."""
    return get_default_registry().get_adapter(sport)
