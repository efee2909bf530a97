"""Team API endpoints.

- GET /api/team/{slug}.json             - status, facts and JSON-LD for a team
- GET /{slug}/.well-known/atproto-did   - AT-Proto handle verification
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from homegame.core import HomegameError, Team
from homegame.database import get_team_by_slug
from homegame.services import ScheduleService, build_team_page_data

logger = logging.getLogger(__name__)

router = APIRouter()

CACHE_CONTROL = "public, max-age=300"


def _get_team(request: Request, slug: str) -> Team | None:
    return get_team_by_slug(request.app.state.teams, slug)


def _new_service(request: Request) -> ScheduleService:
    """Schedule service for one request; adapters are shared, the cache is not."""
    return ScheduleService(registry=request.app.state.registry)


@router.get("/api/team/{slug}.json")
def get_team_status(slug: str, request: Request):
    """Status, facts and JSON-LD for one team."""
    team = _get_team(request, slug)
    if team is None:
        return JSONResponse({"error": "Team not found"}, status_code=404)

    try:
        page = build_team_page_data(team, _new_service(request), site_base=request.app.state.site_base)
    except HomegameError as e:
        logger.error("Failed to build status for %s: %s", slug, e)
        return JSONResponse({"error": str(e)}, status_code=500)

    facts = page.facts
    payload = {
        "team": {
            "id": team.id,
            "name": team.name,
            "slug": team.slug,
            "colors": list(team.colors),
            "venue": team.venue,
            "timezone": team.timezone,
        },
        "meta": {"title": page.meta.title, "description": page.meta.description},
        "ogImage": page.og_image,
        "bluesky": page.bluesky,
        "facts": {
            "todayKey": facts.today_key,
            "hasHomeToday": bool(facts.home_games_today),
            "nextHomeGame": facts.next_home_game.game_date if facts.next_home_game else None,
        },
        "jsonLd": page.json_ld,
    }
    return JSONResponse(payload, headers={"Cache-Control": CACHE_CONTROL})


@router.get("/{slug}/.well-known/atproto-did", response_class=PlainTextResponse)
def get_atproto_did(slug: str, request: Request):
    """DID for a team's Bluesky handle ({slug}.homegame.today)."""
    team = _get_team(request, slug)
    did = (team.did or "").strip() if team else ""
    if not did:
        return PlainTextResponse("Not found", status_code=404)
    return PlainTextResponse(
        did + "\n",
        headers={"Cache-Control": CACHE_CONTROL},
        media_type="text/plain; charset=utf-8",
    )
