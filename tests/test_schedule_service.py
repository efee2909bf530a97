"""Tests for the adapter registry and per-run schedule cache."""

from unittest.mock import MagicMock

import pytest

from homegame.core import ScheduleAdapter, SchedulePayload, Team, UnknownSportError, UpstreamHttpError
from homegame.providers import AdapterRegistry, HttpClient
from homegame.providers import registry as registry_module
from homegame.providers.espn import NBAAdapter, NFLAdapter
from homegame.providers.mlb import MLBAdapter
from homegame.providers.nhl import NHLAdapter
from homegame.providers.registry import get_adapter, get_default_registry
from homegame.services import ScheduleService, ScheduleWindowCache
from homegame.services.schedule import make_cache_key


def _fake_adapter(payload: SchedulePayload | None = None) -> MagicMock:
    adapter = MagicMock(spec=ScheduleAdapter)
    adapter.fetch_schedule_window.return_value = payload or SchedulePayload()
    adapter.fetch_league_schedule_today.return_value = SchedulePayload()
    return adapter


def _registry(**adapters) -> AdapterRegistry:
    registry = AdapterRegistry()
    for sport, adapter in adapters.items():
        registry.register(sport, lambda a=adapter: a)
    return registry


class TestAdapterRegistry:
    def test_default_variants(self):
        registry = AdapterRegistry.default()
        assert isinstance(registry.get_adapter("mlb"), MLBAdapter)
        assert isinstance(registry.get_adapter("nhl"), NHLAdapter)
        assert isinstance(registry.get_adapter("nba"), NBAAdapter)
        assert isinstance(registry.get_adapter("nfl"), NFLAdapter)

    def test_missing_tag_defaults_to_mlb(self):
        registry = AdapterRegistry.default()
        assert isinstance(registry.get_adapter(None), MLBAdapter)
        assert isinstance(registry.get_adapter(""), MLBAdapter)

    def test_instances_are_reused(self):
        registry = AdapterRegistry.default()
        assert registry.get_adapter("nhl") is registry.get_adapter("nhl")

    def test_unknown_sport(self):
        with pytest.raises(UnknownSportError) as exc_info:
            AdapterRegistry.default().get_adapter("cricket")
        assert exc_info.value.sport == "cricket"

    def test_register_rejects_unknown_sport(self):
        with pytest.raises(UnknownSportError):
            AdapterRegistry().register("curling", _fake_adapter)

    def test_close_closes_shared_client(self):
        http = MagicMock(spec=HttpClient)
        registry = AdapterRegistry.default(http)
        first = registry.get_adapter("mlb")

        registry.close()

        http.close.assert_called_once_with()
        assert registry.get_adapter("mlb") is not first

    def test_close_without_client(self):
        AdapterRegistry().close()


class TestDefaultRegistry:
    def test_module_level_adapter_reuses_one_registry(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_default_registry", None)
        built = []
        real_default = AdapterRegistry.default

        def counting_default():
            registry = real_default(MagicMock(spec=HttpClient))
            built.append(registry)
            return registry

        monkeypatch.setattr(AdapterRegistry, "default", counting_default)

        assert get_adapter("nhl") is get_adapter("nhl")
        assert isinstance(get_adapter(), MLBAdapter)
        assert len(built) == 1
        assert get_default_registry() is built[0]


class TestScheduleService:
    def test_cached_fetch_calls_adapter_once(self, red_sox):
        adapter = _fake_adapter()
        service = ScheduleService(registry=_registry(mlb=adapter))

        first = service.fetch_schedule_window_cached(red_sox, "2024-07-04", "2025-04-04")
        second = service.fetch_schedule_window_cached(red_sox, "2024-07-04", "2025-04-04")

        assert first is second
        adapter.fetch_schedule_window.assert_called_once_with(red_sox, "2024-07-04", "2025-04-04")
        assert len(service.cache) == 1

    def test_distinct_windows_fetch_separately(self, red_sox):
        adapter = _fake_adapter()
        service = ScheduleService(registry=_registry(mlb=adapter))

        service.fetch_schedule_window_cached(red_sox, "2024-07-04", "2025-04-04")
        service.fetch_schedule_window_cached(red_sox, "2024-07-05", "2025-04-05")

        assert adapter.fetch_schedule_window.call_count == 2

    def test_cache_key_uses_api_id(self, bruins):
        assert make_cache_key(bruins, "a", "b") == ("nhl", "BOS", "a", "b")

    def test_services_do_not_share_cache(self, red_sox):
        adapter = _fake_adapter()
        registry = _registry(mlb=adapter)
        ScheduleService(registry=registry).fetch_schedule_window_cached(red_sox, "s", "e")
        ScheduleService(registry=registry).fetch_schedule_window_cached(red_sox, "s", "e")
        assert adapter.fetch_schedule_window.call_count == 2

    def test_shared_cache_object(self, red_sox):
        adapter = _fake_adapter()
        cache = ScheduleWindowCache()
        ScheduleService(registry=_registry(mlb=adapter), cache=cache).fetch_schedule_window_cached(
            red_sox, "s", "e"
        )
        assert make_cache_key(red_sox, "s", "e") in cache
        cache.clear()
        assert len(cache) == 0

    def test_failures_are_not_cached(self, red_sox):
        adapter = _fake_adapter()
        adapter.fetch_schedule_window.side_effect = [UpstreamHttpError("u", 500), SchedulePayload()]
        service = ScheduleService(registry=_registry(mlb=adapter))

        with pytest.raises(UpstreamHttpError):
            service.fetch_schedule_window_cached(red_sox, "s", "e")
        service.fetch_schedule_window_cached(red_sox, "s", "e")
        assert adapter.fetch_schedule_window.call_count == 2

    def test_unknown_sport_makes_no_call(self):
        adapter = _fake_adapter()
        service = ScheduleService(registry=_registry(mlb=adapter))
        team = Team(id=1, slug="x", name="X", sport="cricket", timezone="UTC")

        with pytest.raises(UnknownSportError):
            service.fetch_schedule_window_cached(team, "s", "e")
        adapter.fetch_schedule_window.assert_not_called()

    def test_league_today_routes_by_sport(self):
        mlb, nhl = _fake_adapter(), _fake_adapter()
        service = ScheduleService(registry=_registry(mlb=mlb, nhl=nhl))

        service.fetch_league_schedule_today("nhl")
        service.fetch_league_schedule_today()

        nhl.fetch_league_schedule_today.assert_called_once_with()
        mlb.fetch_league_schedule_today.assert_called_once_with()

    def test_close_closes_registry(self):
        registry = MagicMock(spec=AdapterRegistry)
        ScheduleService(registry=registry).close()
        registry.close.assert_called_once_with()
