"""Tests for the player-points calculator against the ORM store."""

from __future__ import annotations

import pytest
from django.core.exceptions import ValidationError

from fantasy.models import EventType, Gameweek, Position, ScoreEvent
from fantasy.models_scoring import PlayerPoints
from fantasy.services.player_points import calculate_player_points
from fantasy.services.stores import GameweekNotFound

pytestmark = pytest.mark.django_db


def row_for(player, gameweek) -> PlayerPoints:
    return PlayerPoints.objects.get(player=player, gameweek=gameweek)


@pytest.fixture
def lions_tigers(make_player, make_fixture, add_event):
    """Lions 2-1 Tigers: playerX scores, playerY assists."""
    player_x = make_player("Player X", "Lions")
    player_y = make_player("Player Y", "Lions")
    keeper = make_player("Lions Keeper", "Lions", Position.GOALKEEPER)
    tiger = make_player("Tiger", "Tigers")

    fixture = make_fixture("Lions", "Tigers", 2, 1)
    add_event(fixture, player_x, EventType.GOAL, minute=12)
    add_event(fixture, player_y, EventType.ASSIST, minute=12)
    return {"x": player_x, "y": player_y, "gk": keeper, "tiger": tiger, "fixture": fixture}


class TestCalculatePlayerPoints:
    def test_goal_scorer(self, gameweek, lions_tigers) -> None:
        calculate_player_points(gameweek.id)
        row = row_for(lions_tigers["x"], gameweek)
        assert row.goals == 1
        assert row.goals_conceded == 1
        assert row.points == 6

    def test_assister(self, gameweek, lions_tigers) -> None:
        calculate_player_points(gameweek.id)
        row = row_for(lions_tigers["y"], gameweek)
        assert row.assists == 1
        assert row.points == 4

    def test_whole_roster_gets_a_row(self, gameweek, lions_tigers) -> None:
        written = calculate_player_points(gameweek.id)
        assert written == 4
        assert row_for(lions_tigers["gk"], gameweek).points == 6  # 7 - 1
        tiger = row_for(lions_tigers["tiger"], gameweek)
        assert tiger.goals_conceded == 2
        assert tiger.points == 1

    def test_returns_rows_written(self, gameweek, lions_tigers) -> None:
        assert calculate_player_points(gameweek.id) == PlayerPoints.objects.filter(gameweek=gameweek).count()

    def test_is_idempotent(self, gameweek, lions_tigers) -> None:
        fields = ("player_id", "points", "goals", "assists", "own_goals", "yellow_cards", "red_cards", "goals_conceded")

        calculate_player_points(gameweek.id)
        first = list(PlayerPoints.objects.order_by("player_id").values_list(*fields))
        calculate_player_points(gameweek.id)
        second = list(PlayerPoints.objects.order_by("player_id").values_list(*fields))

        assert first == second
        assert PlayerPoints.objects.count() == 4

    def test_accepts_numeric_string_id(self, gameweek, lions_tigers) -> None:
        assert calculate_player_points(str(gameweek.id)) == 4


class TestSettledFixtures:
    def test_unsettled_fixture_is_ignored(self, gameweek, make_player, make_fixture, add_event) -> None:
        scorer = make_player("Scorer", "Owls")
        make_player("Hawk", "Hawks")
        fixture = make_fixture("Owls", "Hawks", None, 0)
        add_event(fixture, scorer, EventType.GOAL)

        assert calculate_player_points(gameweek.id) == 0
        assert not PlayerPoints.objects.exists()

    def test_unsettled_fixture_does_not_add_conceded(self, gameweek, make_player, make_fixture) -> None:
        keeper = make_player("Keeper", "Owls", Position.GOALKEEPER)
        make_fixture("Owls", "Hawks", 0, 0)
        make_fixture("Hawks", "Owls", None, None)

        calculate_player_points(gameweek.id)
        assert row_for(keeper, gameweek).points == 7

    def test_conceded_sums_across_fixtures(self, gameweek, make_player, make_fixture) -> None:
        keeper = make_player("Keeper", "Owls", Position.GOALKEEPER)
        make_fixture("Owls", "Hawks", 1, 2)
        make_fixture("Crows", "Owls", 3, 0)

        calculate_player_points(gameweek.id)
        row = row_for(keeper, gameweek)
        assert row.goals_conceded == 5
        assert row.points == 2

    def test_other_gameweeks_are_untouched(self, gameweek, make_player, make_fixture) -> None:
        other = Gameweek.objects.create(number=2)
        make_player("Owl", "Owls")
        make_fixture("Owls", "Hawks", 1, 0, gw=other)

        assert calculate_player_points(gameweek.id) == 0
        assert not PlayerPoints.objects.filter(gameweek=other).exists()


class TestEvents:
    def test_brace_counts_twice(self, gameweek, make_player, make_fixture, add_event) -> None:
        striker = make_player("Striker", "Owls")
        fixture = make_fixture("Owls", "Hawks", 2, 4)
        add_event(fixture, striker, EventType.GOAL)
        add_event(fixture, striker, EventType.GOAL)

        calculate_player_points(gameweek.id)
        row = row_for(striker, gameweek)
        assert row.goals == 2
        assert row.points == 10

    def test_red_overrides_yellow(self, gameweek, make_player, make_fixture, add_event) -> None:
        hothead = make_player("Hothead", "Owls")
        fixture = make_fixture("Owls", "Hawks", 0, 0)
        add_event(fixture, hothead, EventType.YELLOW_CARD)
        add_event(fixture, hothead, EventType.YELLOW_CARD)
        add_event(fixture, hothead, EventType.RED_CARD)

        calculate_player_points(gameweek.id)
        row = row_for(hothead, gameweek)
        assert (row.yellow_cards, row.red_cards) == (2, 1)
        assert row.points == -3 + 1

    def test_own_goal(self, gameweek, make_player, make_fixture, add_event) -> None:
        unlucky = make_player("Unlucky", "Owls")
        fixture = make_fixture("Owls", "Hawks", 0, 1)
        add_event(fixture, unlucky, EventType.OWN_GOAL)

        calculate_player_points(gameweek.id)
        row = row_for(unlucky, gameweek)
        assert row.own_goals == 1
        assert row.points == -2 + 1

    def test_player_outside_both_teams_is_seeded_directly(self, gameweek, make_player, make_fixture, add_event, caplog) -> None:
        loanee = make_player("Loanee", "Crows")
        fixture = make_fixture("Owls", "Hawks", 3, 5)
        add_event(fixture, loanee, EventType.ASSIST)

        calculate_player_points(gameweek.id)
        row = row_for(loanee, gameweek)
        # Not the home team, so the home side's goals are conceded
        assert row.goals_conceded == 3
        assert row.points == 3 + 1
        assert "plays for neither" in caplog.text

    def test_event_for_player_outside_both_teams_is_rejected(self, make_player, make_fixture) -> None:
        loanee = make_player("Loanee", "Crows")
        event = ScoreEvent(fixture=make_fixture("Owls", "Hawks", 1, 0), player=loanee, type=EventType.GOAL)

        with pytest.raises(ValidationError, match="not from either team"):
            event.full_clean()

    def test_event_for_away_player_is_valid(self, make_player, make_fixture) -> None:
        hawk = make_player("Hawk", "Hawks")
        ScoreEvent(fixture=make_fixture("Owls", "Hawks", 1, 1), player=hawk, type=EventType.GOAL).full_clean()


class TestFailures:
    def test_unknown_gameweek(self, db) -> None:
        with pytest.raises(GameweekNotFound):
            calculate_player_points(9999)

    @pytest.mark.parametrize("bad_id", ["abc", None, 0, -1, True, 1.5])
    def test_malformed_gameweek_id(self, db, bad_id) -> None:
        with pytest.raises(ValidationError):
            calculate_player_points(bad_id)
        assert not PlayerPoints.objects.exists()
