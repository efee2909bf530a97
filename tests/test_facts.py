"""Tests for schedule facts derivation."""

from datetime import UTC, datetime

from homegame.core import Team
from homegame.services import derive_team_schedule_facts, is_home_for_team


class TestTodayKey:
    def test_uses_team_zone(self, red_sox, payload_of):
        late_evening = datetime(2024, 7, 5, 2, 0, tzinfo=UTC)
        facts = derive_team_schedule_facts(red_sox, payload_of(), now=late_evening)
        assert facts.today_key == "2024-07-04"
        assert facts.team_time_zone == "America/New_York"

    def test_other_zone(self, payload_of):
        team = Team(id=1, slug="tokyo", name="Tokyo", timezone="Asia/Tokyo")
        facts = derive_team_schedule_facts(team, payload_of(), now=datetime(2024, 7, 4, 20, 0, tzinfo=UTC))
        assert facts.today_key == "2024-07-05"

    def test_none_payload(self, red_sox, now):
        facts = derive_team_schedule_facts(red_sox, None, now=now)
        assert facts.games == []
        assert facts.next_home_game is None


class TestHomeMatching:
    def test_by_id(self, red_sox, make_game):
        assert is_home_for_team(make_game("2024-07-04T23:05:00Z", venue=None), red_sox)

    def test_by_venue_name(self, red_sox, make_game):
        game = make_game("2024-10-08T22:08:00Z", home_id=9999, venue="  FENWAY park ")
        assert is_home_for_team(game, red_sox)

    def test_away(self, red_sox, make_game):
        game = make_game("2024-07-04T23:05:00Z", home_id=147, away_id=111, venue="Yankee Stadium")
        assert not is_home_for_team(game, red_sox)

    def test_blank_venues_do_not_match(self, make_game):
        team = Team(id=111, slug="redsox", name="Red Sox", timezone="America/New_York", venue=" ")
        game = make_game("2024-07-04T23:05:00Z", home_id=147, away_id=111, venue="")
        assert not is_home_for_team(game, team)


class TestDerive:
    def test_today_split(self, red_sox, make_game, payload_of, now):
        home = make_game("2024-07-04T23:05:00Z", game_id=1)
        away = make_game("2024-07-04T17:05:00Z", game_id=2, home_id=147, away_id=111, venue="Yankee Stadium")
        other = make_game("2024-07-06T23:05:00Z", game_id=3)

        facts = derive_team_schedule_facts(red_sox, payload_of(home, away, other), now=now)

        assert [g.game_id for g in facts.games_today] == [1, 2]
        assert [g.game_id for g in facts.home_games_today] == [1]
        assert [g.game_id for g in facts.away_games_today] == [2]
        assert len(facts.games) == 3

    def test_late_game_counts_as_local_today(self, red_sox, make_game, payload_of, now):
        # Bucketed under 2024-07-05 (UTC) but it is 10 PM on July 4 in Boston
        late = make_game("2024-07-05T02:00:00Z")
        payload = payload_of(late)
        assert payload.dates[0].date == "2024-07-05"

        facts = derive_team_schedule_facts(red_sox, payload, now=now)
        assert facts.home_games_today == [late]

    def test_next_home_game_skips_past_and_away(self, red_sox, make_game, payload_of, now):
        past = make_game("2024-07-03T23:05:00Z", game_id=1)
        away = make_game("2024-07-05T23:05:00Z", game_id=2, home_id=147, away_id=111, venue="Yankee Stadium")
        later = make_game("2024-07-09T23:05:00Z", game_id=4)
        sooner = make_game("2024-07-07T17:35:00Z", game_id=3)

        facts = derive_team_schedule_facts(red_sox, payload_of(past, away, later, sooner), now=now)
        assert facts.next_home_game.game_id == 3

    def test_next_home_game_includes_now(self, red_sox, make_game, payload_of, now):
        starting = make_game(now.isoformat(), game_id=5)
        facts = derive_team_schedule_facts(red_sox, payload_of(starting), now=now)
        assert facts.next_home_game is starting

    def test_next_home_game_tie_keeps_input_order(self, red_sox, make_game, payload_of, now):
        first = make_game("2024-07-07T17:35:00Z", game_id="a")
        second = make_game("2024-07-07T17:35:00Z", game_id="b")
        facts = derive_team_schedule_facts(red_sox, payload_of(first, second), now=now)
        assert facts.next_home_game.game_id == "a"

    def test_undated_games_never_next(self, red_sox, make_game, payload_of, now):
        facts = derive_team_schedule_facts(red_sox, payload_of(make_game(None)), now=now)
        assert facts.next_home_game is None
        assert facts.games_today == []

    def test_naive_now_is_utc(self, red_sox, make_game, payload_of):
        facts = derive_team_schedule_facts(
            red_sox, payload_of(make_game("2024-07-04T23:05:00Z")), now=datetime(2024, 7, 4, 16, 0)
        )
        assert facts.today_key == "2024-07-04"
        assert facts.next_home_game is not None
