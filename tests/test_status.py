"""Tests for the status sentence formatter."""

import pytest

from homegame.core import Team
from homegame.services import StatusOptions, compute_og_text, compute_status_for_team, format_team_status

NBSP = "\u00a0"


class TestHomeGameToday:
    def test_known_time(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-04T23:05:00Z"))
        assert (
            format_team_status(red_sox, payload, now=now)
            == "Yes, today's game at Fenway Park is scheduled for 7:05 PM."
        )

    def test_tbd_time(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-04T23:05:00Z", tbd=True))
        assert format_team_status(red_sox, payload, now=now) == "Yes, today's game at Fenway Park is scheduled."

    def test_today_beats_future(self, red_sox, make_game, payload_of, now):
        payload = payload_of(
            make_game("2024-07-04T23:05:00Z", game_id=1),
            make_game("2024-07-07T17:35:00Z", game_id=2),
        )
        assert format_team_status(red_sox, payload, now=now).startswith("Yes, today's game")

    def test_earlier_today_still_counts(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-04T15:05:00Z"))
        assert (
            format_team_status(red_sox, payload, now=now)
            == "Yes, today's game at Fenway Park is scheduled for 11:05 AM."
        )

    def test_nbsp_in_time_only(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-04T23:05:00Z"))
        text = format_team_status(red_sox, payload, StatusOptions(nbsp=True), now=now)
        assert text == f"Yes, today's game at Fenway Park is scheduled for 7:05{NBSP}PM."


class TestNextHomeGame:
    def test_known_time(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-07T23:10:00Z"))
        assert (
            format_team_status(red_sox, payload, now=now)
            == "No, the next game at Fenway Park is scheduled for Jul 7, 2024 at 7:10 PM."
        )

    def test_tbd_shows_date_only(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-07T03:33:00Z", tbd=True))
        text = format_team_status(red_sox, payload, now=now)
        # 03:33 UTC is still July 6 in Boston
        assert text == "No, the next game at Fenway Park is scheduled for Jul 6, 2024."
        assert "PM" not in text and "AM" not in text

    def test_away_today_is_not_home(self, red_sox, make_game, payload_of, now):
        payload = payload_of(
            make_game("2024-07-04T23:05:00Z", home_id=147, away_id=111, venue="Yankee Stadium"),
            make_game("2024-07-08T23:10:00Z", game_id=2),
        )
        assert format_team_status(red_sox, payload, now=now).startswith(
            "No, the next game at Fenway Park is scheduled for Jul 8, 2024"
        )

    def test_nbsp(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-07T23:10:00Z"))
        text = format_team_status(red_sox, payload, StatusOptions(nbsp=True), now=now)
        assert text == (
            f"No, the next game at Fenway Park is scheduled for Jul{NBSP}7,{NBSP}2024 at{NBSP}7:10{NBSP}PM."
        )

    def test_date_style(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-07T23:10:00Z"))
        text = format_team_status(red_sox, payload, StatusOptions(date_style="full"), now=now)
        assert "scheduled for Sunday, July 7, 2024 at 7:10 PM." in text

    def test_invalid_date_style(self):
        with pytest.raises(ValueError):
            StatusOptions(date_style="huge")


class TestNotScheduled:
    def test_no_home_games(self, red_sox, make_game, payload_of, now):
        payload = payload_of(make_game("2024-07-08T23:10:00Z", home_id=147, away_id=111, venue="Yankee Stadium"))
        assert format_team_status(red_sox, payload, now=now) == "No, the next game at Fenway Park is not yet scheduled."

    def test_empty_payload(self, red_sox, payload_of, now):
        assert format_team_status(red_sox, payload_of(), now=now).endswith("is not yet scheduled.")

    def test_default_venue(self, now):
        team = Team(id=1, slug="nowhere", name="Nowhere Nine", timezone="America/Chicago")
        assert format_team_status(team, None, now=now) == "No, the next game at their stadium is not yet scheduled."


class TestWrappers:
    def test_team_name_prefix(self, red_sox, payload_of, now):
        assert compute_status_for_team(red_sox, payload_of(), now=now) == (
            "Boston Red Sox — No, the next game at Fenway Park is not yet scheduled."
        )

    def test_og_text_uses_nbsp_without_name(self, red_sox, make_game, payload_of, now):
        text = compute_og_text(red_sox, payload_of(make_game("2024-07-07T23:10:00Z")), now=now)
        assert text.startswith("No, the next game at Fenway Park")
        assert f"at{NBSP}7:10{NBSP}PM." in text
