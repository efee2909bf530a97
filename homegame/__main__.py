"""Command-line entry point: print today's status line for each team.

    python -m homegame [--teams PATH] [--slug SLUG ...] [--league-today SPORT]
"""

import argparse
import json
import logging
import sys

from homegame.core import HomegameError
from homegame.database import load_teams
from homegame.services import ScheduleService, build_all_team_statuses, create_default_service
from homegame.utilities import setup_logging

logger = logging.getLogger("homegame")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="homegame", description=__doc__.splitlines()[0])
    parser.add_argument("--teams", help="Path to teams.json (default HOMEGAME_TEAMS_PATH)")
    parser.add_argument("--slug", action="append", help="Only these team slugs")
    parser.add_argument(
        "--league-today",
        metavar="SPORT",
        help="Print the league-wide schedule for today as JSON instead",
    )
    parser.add_argument("--log-level", help="Log level (default HOMEGAME_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    service = create_default_service()
    try:
        return _run(args, service)
    finally:
        service.close()


def _run(args: argparse.Namespace, service: ScheduleService) -> int:
    try:
        if args.league_today:
            payload = service.fetch_league_schedule_today(args.league_today)
            print(json.dumps(payload.to_dict(), indent=2))
            return 0

        teams = load_teams(args.teams)
    except HomegameError as e:
        logger.error("%s", e)
        return 1

    if args.slug:
        teams = [t for t in teams if t.slug in set(args.slug)]

    statuses = build_all_team_statuses(teams, service)
    for slug, text in statuses.items():
        print(f"{slug}\t{text}")
    return 0 if len(statuses) == len(teams) else 1


if __name__ == "__main__":
    sys.exit(main())
