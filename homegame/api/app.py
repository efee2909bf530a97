"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from homegame.api.routes import teams as team_routes
from homegame.config import get_site_base
from homegame.core import Team
from homegame.database import load_teams
from homegame.providers import AdapterRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the shared HTTP client on shutdown."""
    logger.info("API ready with %d teams", len(app.state.teams))
    yield
    app.state.registry.close()
    logger.info("API shut down")


def create_app(
    team_list: list[Team] | None = None,
    registry: AdapterRegistry | None = None,
    site_base: str | None = None,
) -> FastAPI:
    """Build the API app.

    Args:
        team_list: Teams to serve (default: load_teams())
        registry: Adapter registry shared by requests (default built-ins);
            the app closes it on shutdown
        site_base: Absolute site URL for OG image links (default HOMEGAME_SITE_BASE)
    """
    app = FastAPI(title="homegame", docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.teams = team_list if team_list is not None else load_teams()
    app.state.registry = registry or AdapterRegistry.default()
    app.state.site_base = site_base if site_base is not None else get_site_base()
    app.include_router(team_routes.router)
    return app
