"""Static configuration storage (teams.json)."""

from homegame.database.teams import TeamRecord, get_team_by_slug, load_teams, parse_teams

__all__ = ["TeamRecord", "get_team_by_slug", "load_teams", "parse_teams"]
