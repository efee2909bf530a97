"""Service layer: schedule fetching, facts, status text and page data."""

from homegame.services.facts import derive_team_schedule_facts, is_home_for_team
from homegame.services.schedule import (
    ScheduleService,
    ScheduleWindowCache,
    create_default_service,
)
from homegame.services.seo import build_sports_event_json_ld, select_game_for_team_today
from homegame.services.status import (
    StatusOptions,
    compute_og_text,
    compute_status_for_team,
    format_team_status,
)
from homegame.services.team_page import (
    build_all_team_statuses,
    build_team_page_data,
    get_og_image_path,
)

__all__ = [
    "ScheduleService",
    "ScheduleWindowCache",
    "StatusOptions",
    "build_all_team_statuses",
    "build_sports_event_json_ld",
    "build_team_page_data",
    "compute_og_text",
    "compute_status_for_team",
    "create_default_service",
    "derive_team_schedule_facts",
    "format_team_status",
    "get_og_image_path",
    "is_home_for_team",
    "select_game_for_team_today",
]
