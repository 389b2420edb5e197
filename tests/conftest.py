"""Shared ORM factories."""

from __future__ import annotations

from typing import Callable, List, Optional

import pytest

from fantasy.models import Fixture, Gameweek, Player, Position, ScoreEvent, Team


@pytest.fixture
def gameweek(db) -> Gameweek:
    return Gameweek.objects.create(number=1, name="Gameweek 1", is_current=True)


@pytest.fixture
def make_player(db) -> Callable[..., Player]:
    def _make(name: str, team_name: str, position: str = Position.OUTFIELD) -> Player:
        return Player.objects.create(name=name, team_name=team_name, position=position)
    return _make


@pytest.fixture
def make_fixture(gameweek) -> Callable[..., Fixture]:
    def _make(home: str, away: str, home_goals: Optional[int], away_goals: Optional[int], gw: Gameweek = None) -> Fixture:
        return Fixture.objects.create(
            gameweek=gw or gameweek,
            home_team=home,
            away_team=away,
            home_goals=home_goals,
            away_goals=away_goals,
        )
    return _make


@pytest.fixture
def add_event(db) -> Callable[..., ScoreEvent]:
    def _add(fixture: Fixture, player: Player, event_type: str, minute: Optional[int] = None) -> ScoreEvent:
        return ScoreEvent.objects.create(fixture=fixture, player=player, type=event_type, minute=minute)
    return _add


@pytest.fixture
def make_team(db) -> Callable[..., Team]:
    """Team whose auto-created slots (GK1, OUT1..OUT4) are filled in that order."""
    def _make(name: str, players: List[Optional[Player]], captain: Optional[Player] = None) -> Team:
        team = Team.objects.create(name=name)
        for slot, player in zip(team.squad_slots.order_by("slot_label"), players):
            slot.player = player
            slot.is_captain = captain is not None and player == captain
            slot.save()
        return team
    return _make
