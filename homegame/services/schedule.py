"""Schedule data service layer.

Routes schedule requests to the sport adapter with a per-run cache.
Consumers (pages, scripts, API routes) call this service - never
adapters directly.
"""

import logging

from homegame.core import DEFAULT_SPORT, SchedulePayload, Team
from homegame.providers import AdapterRegistry

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str, str | None, str | None]


def make_cache_key(team: Team, start_iso: str | None, end_iso: str | None) -> CacheKey:
    """Cache key: (sport, team api id, start, end)."""
    return (team.sport or DEFAULT_SPORT, str(team.team_api_id), start_iso, end_iso)


class ScheduleWindowCache:
    """In-memory schedule cache for a single build or script run.

    No TTL and no eviction: the key space is one window per team per run.
    Not safe for concurrent writers.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, SchedulePayload] = {}

    def get(self, key: CacheKey) -> SchedulePayload | None:
        return self._entries.get(key)

    def set(self, key: CacheKey, payload: SchedulePayload) -> None:
        self._entries[key] = payload

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class ScheduleService:
    """Unified access to team and league schedules.

    Owns one ScheduleWindowCache; create one service per run.
    """

    def __init__(
        self,
        registry: AdapterRegistry | None = None,
        cache: ScheduleWindowCache | None = None,
    ):
        self._registry = registry or AdapterRegistry.default()
        self._cache = cache if cache is not None else ScheduleWindowCache()

    @property
    def cache(self) -> ScheduleWindowCache:
        return self._cache

    def fetch_schedule_window_cached(
        self,
        team: Team,
        start_iso: str | None,
        end_iso: str | None,
    ) -> SchedulePayload:
        """Team schedule for a window, fetched at most once per run.

        Raises:
            UnknownSportError: team.sport has no adapter
            UpstreamHttpError: A required upstream request failed
        """
        key = make_cache_key(team, start_iso, end_iso)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("[SCHEDULE] Cache hit: %s", key)
            return cached

        adapter = self._registry.get_adapter(team.sport)
        payload = adapter.fetch_schedule_window(team, start_iso, end_iso)
        self._cache.set(key, payload)
        logger.debug("[SCHEDULE] Cached %d games for %s", payload.total_items, key)
        return payload

    def fetch_league_schedule_today(self, sport: str | None = DEFAULT_SPORT) -> SchedulePayload:
        """League-wide games today (uncached; used for off-season guards)."""
        return self._registry.get_adapter(sport).fetch_league_schedule_today()

    def close(self) -> None:
        """Close the registry's HTTP client. Only for services that own their registry."""
        self._registry.close()


def create_default_service() -> ScheduleService:
    """ScheduleService with the built-in adapters and a fresh cache."""
    return ScheduleService(registry=AdapterRegistry.default())
