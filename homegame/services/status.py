"""Status sentence formatter.

Turns schedule facts into the one-line answer shown on pages, OG images
and social posts:

1. Home game today     -> "Yes, today's game at {venue} is scheduled for {time}."
2. Future home game    -> "No, the next game at {venue} is scheduled for {date} at {time}."
3. Nothing scheduled   -> "No, the next game at {venue} is not yet scheduled."

TBD start times never render a clock time.
"""

from dataclasses import dataclass
from datetime import datetime

from homegame.core import SchedulePayload, Team
from homegame.services.facts import derive_team_schedule_facts
from homegame.utilities.tz import DATE_STYLES, get_local_date_and_optional_time

DEFAULT_VENUE = "their stadium"
NBSP = "\u00a0"
TEAM_NAME_SEPARATOR = " — "


@dataclass(frozen=True)
class StatusOptions:
    """Rendering options for format_team_status.

    nbsp replaces spaces inside the date/time substrings (and the space
    joining them) with non-breaking spaces so image layout never wraps a
    date. Surrounding text is unchanged.
    """

    include_team_name: bool = False
    nbsp: bool = False
    date_style: str = "medium"

    def __post_init__(self) -> None:
        if self.date_style not in DATE_STYLES:
            raise ValueError(f"Unknown date_style '{self.date_style}', expected one of {DATE_STYLES}")


def team_venue(team: Team) -> str:
    return team.venue or DEFAULT_VENUE


def format_team_status(
    team: Team,
    payload: SchedulePayload | None,
    options: StatusOptions | None = None,
    now: datetime | None = None,
) -> str:
    """Render the Yes/No status sentence for a team."""
    options = options or StatusOptions()
    venue = team_venue(team)
    facts = derive_team_schedule_facts(team, payload, now=now)
    tz = facts.team_time_zone

    prefix = f"{team.name}{TEAM_NAME_SEPARATOR}" if options.include_team_name else ""
    space = NBSP if options.nbsp else " "

    def nb(text: str) -> str:
        return text.replace(" ", NBSP) if options.nbsp else text

    if facts.home_games_today:
        _, time_part, time_certain = get_local_date_and_optional_time(facts.home_games_today[0], tz)
        if time_certain and time_part:
            return f"{prefix}Yes, today's game at {venue} is scheduled for {nb(time_part)}."
        return f"{prefix}Yes, today's game at {venue} is scheduled."

    next_home = facts.next_home_game
    if next_home is not None:
        date_part, time_part, time_certain = get_local_date_and_optional_time(
            next_home, tz, options.date_style
        )
        if time_certain and time_part:
            return (
                f"{prefix}No, the next game at {venue} is scheduled for "
                f"{nb(date_part)} at{space}{nb(time_part)}."
            )
        return f"{prefix}No, the next game at {venue} is scheduled for {nb(date_part)}."

    return f"{prefix}No, the next game at {venue} is not yet scheduled."


def compute_og_text(team: Team, payload: SchedulePayload | None, now: datetime | None = None) -> str:
    """Status line for OG images (no team name, non-breaking spaces)."""
    return format_team_status(team, payload, StatusOptions(nbsp=True), now=now)


def compute_status_for_team(
    team: Team, payload: SchedulePayload | None, now: datetime | None = None
) -> str:
    """Status line for social posts (team name prefix, plain spaces)."""
    return format_team_status(team, payload, StatusOptions(include_team_name=True), now=now)
