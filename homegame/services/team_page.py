"""Team page data: metadata, OG image path, identity links, JSON-LD.

Everything a page template or the JSON API needs for one team, built
from a single cached schedule fetch.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from urllib.parse import urljoin

from homegame.config import SITE_NAME
from homegame.core import HomegameError, ScheduleFacts, Team
from homegame.services.facts import derive_team_schedule_facts
from homegame.services.schedule import ScheduleService
from homegame.services.seo import (
    build_sports_event_json_ld,
    select_game_for_team_today,
    sport_display_name,
)
from homegame.services.status import (
    StatusOptions,
    compute_status_for_team,
    format_team_status,
    team_venue,
)
from homegame.utilities.tz import (
    compute_window_start_end,
    date_key_in_zone,
    get_local_date_and_optional_time,
    is_start_time_tbd,
    now_utc,
    parse_iso_instant,
)

logger = logging.getLogger(__name__)

BRIDGY_FED_DOMAIN = "bsky.brid.gy"


# =============================================================================
# Identity links
# =============================================================================


def get_og_image_path(slug: str, time_zone: str | None, now: datetime | None = None) -> str:
    """OG image path for today, keyed by the team-local date."""
    return f"/og/{slug}-{date_key_in_zone(now or now_utc(), time_zone)}.png"


def get_bluesky_handle(team: Team) -> str:
    return f"{team.slug}.{SITE_NAME}"


def get_bluesky_did(team: Team) -> str | None:
    did = (team.did or "").strip()
    return did or None


def get_bluesky_profile_url(team: Team) -> str:
    did = get_bluesky_did(team)
    return f"https://bsky.app/profile/{did}" if did else ""


def get_bluesky_rss_url(team: Team) -> str:
    profile = get_bluesky_profile_url(team)
    return f"{profile}/rss" if profile else ""


def get_mastodon_acct(team: Team) -> str:
    """Fediverse handle via Bridgy Fed (only for teams with a DID)."""
    return f"{get_bluesky_handle(team)}@{BRIDGY_FED_DOMAIN}" if get_bluesky_did(team) else ""


def get_mastodon_actor_url(team: Team) -> str:
    if not get_bluesky_did(team):
        return ""
    return f"https://{BRIDGY_FED_DOMAIN}/ap/@{get_bluesky_handle(team)}"


# =============================================================================
# Page content
# =============================================================================


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str


@dataclass(frozen=True)
class DetailContent:
    """Sentence under the Yes/No answer.

    Either pre + label (with iso for a <time> element) or fallback.
    """

    pre: str | None = None
    iso: str | None = None
    label: str | None = None
    fallback: str | None = None


@dataclass
class TeamPageData:
    meta: PageMeta
    og_image: str
    facts: ScheduleFacts
    json_ld: dict | None
    bluesky: dict = field(default_factory=dict)
    mastodon: dict = field(default_factory=dict)


def build_team_page_meta(team: Team, payload, now: datetime | None = None) -> PageMeta:
    """Page title ('{team} — Yes | homegame.today') and description."""
    message = format_team_status(team, payload, StatusOptions(), now=now)
    answer = "Yes" if message.startswith("Yes") else "No"
    return PageMeta(
        title=f"{team.name or 'Team'} — {answer} | {SITE_NAME}",
        description=message,
    )


def build_detail_content(team: Team, facts: ScheduleFacts) -> DetailContent:
    """Detail sentence fragments for the team page."""
    venue = team_venue(team)
    tz = team.timezone

    if facts.home_games_today:
        game = facts.home_games_today[0]
        instant = parse_iso_instant(game.game_date)
        if instant is None or is_start_time_tbd(game):
            return DetailContent(fallback=f"Yes, game at {venue} today.")
        _, time_part, _ = get_local_date_and_optional_time(game, tz)
        return DetailContent(
            pre=f"Today's game at {venue} is scheduled for ",
            iso=instant.isoformat().replace("+00:00", "Z"),
            label=time_part,
        )

    next_home = facts.next_home_game
    instant = parse_iso_instant(next_home.game_date) if next_home else None
    if instant is not None:
        date_part, time_part, time_certain = get_local_date_and_optional_time(next_home, tz)
        label = f"{date_part} at {time_part}" if time_certain and time_part else date_part
        return DetailContent(
            pre=f"The next game at {venue} is scheduled for ",
            iso=instant.isoformat().replace("+00:00", "Z"),
            label=label,
        )

    return DetailContent(fallback=f"The next game at {venue} is not yet scheduled.")


def build_team_page_data(
    team: Team,
    service: ScheduleService,
    site_base: str | None = None,
    now: datetime | None = None,
) -> TeamPageData:
    """Fetch (cached) and assemble everything a team page needs.

    Raises:
        UpstreamHttpError: Required schedule fetch failed
    """
    now = now or now_utc()
    start_iso, end_iso = compute_window_start_end(now)
    payload = service.fetch_schedule_window_cached(team, start_iso, end_iso)
    facts = derive_team_schedule_facts(team, payload, now=now)

    og_path = get_og_image_path(team.slug, team.timezone, now=now)
    selected, is_home = select_game_for_team_today(facts)
    json_ld = build_sports_event_json_ld(
        team,
        selected,
        is_home,
        fallback_date_iso=date_key_in_zone(now, team.timezone),
        sport_name=sport_display_name(team.sport),
    )

    return TeamPageData(
        meta=build_team_page_meta(team, payload, now=now),
        og_image=urljoin(site_base, og_path) if site_base else og_path,
        facts=facts,
        json_ld=json_ld,
        bluesky={"profile": get_bluesky_profile_url(team), "rss": get_bluesky_rss_url(team)},
        mastodon={"acct": get_mastodon_acct(team), "actor": get_mastodon_actor_url(team)},
    )


def build_all_team_statuses(
    teams: list[Team],
    service: ScheduleService,
    now: datetime | None = None,
) -> dict[str, str]:
    """Status line per team slug for batch scripts.

    A team whose fetch fails is logged and left out; the rest continue.
    """
    now = now or now_utc()
    start_iso, end_iso = compute_window_start_end(now)
    statuses: dict[str, str] = {}
    for team in teams:
        try:
            payload = service.fetch_schedule_window_cached(team, start_iso, end_iso)
        except HomegameError as e:
            logger.error("Skipping %s (%s): %s", team.name, team.slug, e)
            continue
        statuses[team.slug] = compute_status_for_team(team, payload, now=now)
    logger.info("Built status for %d/%d teams", len(statuses), len(teams))
    return statuses
