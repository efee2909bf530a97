"""Timezone utilities.

Single source of truth for date keys, schedule windows and the
locale-style date/time strings shown to users. All display formatting
uses en-US conventions (e.g. '7:05 PM', 'Jul 4, 2024').
"""

import calendar
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from homegame.config import get_horizon_months
from homegame.core.types import Game

__all__ = [
    "now_utc",
    "get_zone",
    "parse_iso_instant",
    "date_key_in_zone",
    "compute_window_start_end",
    "add_months",
    "format_time",
    "format_date",
    "is_start_time_tbd",
    "get_local_date_and_optional_time",
    "DATE_STYLES",
]

DATE_STYLES = ("full", "long", "medium", "short")


def now_utc() -> datetime:
    """Get current time in UTC."""
    return datetime.now(UTC)


def get_zone(time_zone: str | None) -> ZoneInfo | None:
    """Resolve an IANA zone id, or None when missing/unknown."""
    if not time_zone:
        return None
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError):
        return None


def parse_iso_instant(value: str | None) -> datetime | None:
    """Parse an ISO-8601 instant ('2024-07-04T23:05:00Z').

    Returns:
        Timezone-aware datetime (naive input is taken as UTC), or None
        when the value is missing or unparseable.
    """
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _as_aware(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant


def date_key_in_zone(instant: datetime, time_zone: str | None) -> str:
    """Format an instant as YYYY-MM-DD in the given IANA zone.

    Falls back to the UTC calendar date when the zone is missing or
    unsupported. Never raises.
    """
    instant = _as_aware(instant)
    zone = get_zone(time_zone)
    if zone is None:
        return instant.astimezone(UTC).date().isoformat()
    return instant.astimezone(zone).date().isoformat()


def add_months(day: date, months: int) -> date:
    """Add calendar months, keeping day-of-month.

    Days past the end of the target month roll into the following month
    (Jan 31 + 1 month = Mar 2 or 3), matching plain date arithmetic rather
    than clamping to month end.
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    first = date(year, month, 1)
    return first + timedelta(days=day.day - 1)


def compute_window_start_end(
    from_instant: datetime | None = None,
    months: int | None = None,
) -> tuple[str, str]:
    """Compute the forward-looking schedule window.

    Args:
        from_instant: Window start (default now)
        months: Months ahead (default HOMEGAME_HORIZON_MONTHS, 9)

    Returns:
        (start_iso, end_iso) as YYYY-MM-DD strings (UTC calendar dates)
    """
    if from_instant is None:
        from_instant = now_utc()
    if months is None:
        months = get_horizon_months()
    start = _as_aware(from_instant).astimezone(UTC).date()
    end = add_months(start, months)
    return start.isoformat(), end.isoformat()


def _localize(instant: datetime, time_zone: str | None) -> datetime:
    zone = get_zone(time_zone)
    return _as_aware(instant).astimezone(zone or UTC)


def format_time(instant: datetime, time_zone: str | None) -> str:
    """Format a clock time, e.g. '7:05 PM'."""
    local_dt = _localize(instant, time_zone)
    hour = local_dt.hour % 12 or 12
    return f"{hour}:{local_dt.minute:02d} {'AM' if local_dt.hour < 12 else 'PM'}"


def format_date(instant: datetime, time_zone: str | None, date_style: str = "medium") -> str:
    """Format a calendar date in one of the DATE_STYLES.

    full   -> 'Thursday, July 4, 2024'
    long   -> 'July 4, 2024'
    medium -> 'Jul 4, 2024'
    short  -> '7/4/24'
    """
    d = _localize(instant, time_zone)
    if date_style == "full":
        return f"{calendar.day_name[d.weekday()]}, {calendar.month_name[d.month]} {d.day}, {d.year}"
    if date_style == "long":
        return f"{calendar.month_name[d.month]} {d.day}, {d.year}"
    if date_style == "short":
        return f"{d.month}/{d.day}/{d.year % 100:02d}"
    return f"{calendar.month_abbr[d.month]} {d.day}, {d.year}"


def is_start_time_tbd(game: Game | None) -> bool:
    """Whether a normalized game lacks a trustworthy start time.

    Sport-specific placeholders (MLB's 03:33 UTC) are resolved by the
    adapters into Game.start_time_tbd.
    """
    if game is None or game.start_time_tbd:
        return True
    return parse_iso_instant(game.game_date) is None


def get_local_date_and_optional_time(
    game: Game | None,
    time_zone: str | None,
    date_style: str = "medium",
) -> tuple[str, str | None, bool]:
    """Split a game's start into display strings.

    Returns:
        (date_part, time_part, time_certain). time_part is None whenever
        the start time is TBD; date_part is '' when there is no date.
    """
    instant = parse_iso_instant(game.game_date) if game else None
    date_part = format_date(instant, time_zone, date_style) if instant else ""
    time_certain = not is_start_time_tbd(game)
    time_part = format_time(instant, time_zone) if time_certain and instant else None
    return date_part, time_part, time_certain
