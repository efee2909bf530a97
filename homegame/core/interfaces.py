"""Adapter interface implemented by each sport provider."""

from abc import ABC, abstractmethod

from homegame.core.types import SchedulePayload, Team


class ScheduleAdapter(ABC):
    """A sport's schedule source, normalized to SchedulePayload.

    Implementations must apply the per-request timeout and their own
    required/optional policy to each upstream call.
    """

    name: str = ""

    @abstractmethod
    def fetch_schedule_window(
        self,
        team: Team,
        start_iso: str | None,
        end_iso: str | None,
    ) -> SchedulePayload:
        """Fetch one team's games between two YYYY-MM-DD dates."""

    @abstractmethod
    def fetch_league_schedule_today(self) -> SchedulePayload:
        """Fetch every league game for today (America/New_York)."""
