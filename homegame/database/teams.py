"""Static team configuration.

Teams are loaded once per process from a JSON file (a list of team
objects, camelCase keys as in the site's teams.json) and are immutable
afterwards.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from homegame.config import get_teams_path
from homegame.core import SPORTS, ConfigurationError, DuplicateSlugError, Team

logger = logging.getLogger(__name__)


class TeamRecord(BaseModel):
    """One entry of teams.json."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9-]+$")
    name: str
    sport: str = "mlb"
    venue: str | None = None
    timezone: str
    colors: list[str] = Field(default_factory=list)
    api_id: int | str | None = Field(default=None, alias="apiId")
    did: str | None = None

    @field_validator("sport", mode="before")
    @classmethod
    def _default_sport(cls, value):
        return value or "mlb"

    @field_validator("sport")
    @classmethod
    def _known_sport(cls, value: str) -> str:
        if value not in SPORTS:
            raise ValueError(f"unknown sport '{value}'")
        return value

    def to_team(self) -> Team:
        return Team(
            id=self.id,
            slug=self.slug,
            name=self.name,
            sport=self.sport,
            venue=self.venue,
            timezone=self.timezone,
            colors=tuple(self.colors),
            api_id=self.api_id,
            did=self.did,
        )


def parse_teams(data: list) -> list[Team]:
    """Validate raw team entries.

    Raises:
        ConfigurationError: Entry fails validation
        DuplicateSlugError: Two entries share a slug
    """
    if not isinstance(data, list):
        raise ConfigurationError("Team configuration must be a list")

    teams: list[Team] = []
    seen: set[str] = set()
    for index, entry in enumerate(data):
        try:
            record = TeamRecord.model_validate(entry)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid team at index {index}: {e}") from e
        if record.slug in seen:
            raise DuplicateSlugError(record.slug)
        seen.add(record.slug)
        teams.append(record.to_team())
    return teams


def load_teams(path: Path | str | None = None) -> list[Team]:
    """Load and validate teams from a JSON file.

    Args:
        path: File to read (default HOMEGAME_TEAMS_PATH or data/teams.json)

    Raises:
        ConfigurationError: File is missing, not JSON, or invalid
    """
    path = Path(path) if path else get_teams_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigurationError(f"Team file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Team file is not valid JSON: {path}: {e}") from e

    teams = parse_teams(data)
    logger.info("Loaded %d teams from %s", len(teams), path)
    return teams


def get_team_by_slug(teams: list[Team], slug: str) -> Team | None:
    """Find a team by slug."""
    for team in teams:
        if team.slug == slug:
            return team
    return None
