"""In-memory ScoringStore for exercising the services without ORM rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Dict, List

from fantasy.models import Position
from fantasy.services.stores import GameweekNotFound


@dataclass
class FakeScoringStore:
    gameweeks: List[int] = field(default_factory=lambda: [1])
    fixtures: List[SimpleNamespace] = field(default_factory=list)
    players: List[SimpleNamespace] = field(default_factory=list)
    team_list: List[SimpleNamespace] = field(default_factory=list)
    slots_by_team: Dict[int, List[SimpleNamespace]] = field(default_factory=dict)
    player_points: Dict[tuple, dict] = field(default_factory=dict)
    scores: Dict[tuple, int] = field(default_factory=dict)
    locked: List[int] = field(default_factory=list)

    def get_gameweek(self, gameweek_id, *, lock=False):
        if gameweek_id not in self.gameweeks:
            raise GameweekNotFound("Gameweek not found")
        if lock:
            self.locked.append(gameweek_id)
        return SimpleNamespace(id=gameweek_id)

    def fixtures_for_gameweek(self, gameweek_id):
        return [f for f in self.fixtures if f.gameweek_id == gameweek_id]

    def events_for_fixture(self, fixture):
        return fixture.events

    def players_for_team(self, team_name):
        return [p for p in self.players if p.team_name == team_name]

    def get_player(self, player_id):
        return next((p for p in self.players if p.id == player_id), None)

    def save_player_points(self, *, player_id, gameweek_id, points, counters):
        self.player_points[(player_id, gameweek_id)] = {"points": points, **counters}

    def clear_player_points(self, gameweek_id):
        stale = [key for key in self.player_points if key[1] == gameweek_id]
        for key in stale:
            del self.player_points[key]
        return len(stale)

    def player_points_for_gameweek(self, gameweek_id):
        return {pid: row["points"] for (pid, gw), row in self.player_points.items() if gw == gameweek_id}

    def teams(self):
        return self.team_list

    def squad_slots(self, team):
        return self.slots_by_team.get(team.id, [])

    def save_gameweek_score(self, *, team_id, gameweek_id, total):
        self.scores[(team_id, gameweek_id)] = total


def fake_fixture(fid, home, away, home_goals, away_goals, events=(), gameweek_id=1):
    return SimpleNamespace(
        id=fid,
        gameweek_id=gameweek_id,
        home_team=home,
        away_team=away,
        home_goals=home_goals,
        away_goals=away_goals,
        events=[SimpleNamespace(id=i, player_id=pid, type=kind) for i, (pid, kind) in enumerate(events, 1)],
    )


def fake_player(pid, team_name, position=Position.OUTFIELD):
    return SimpleNamespace(id=pid, team_name=team_name, position=position)


def fake_team(tid, name):
    return SimpleNamespace(id=tid, name=name)


def fake_slot(sid, player_id, is_captain=False):
    return SimpleNamespace(id=sid, player_id=player_id, is_captain=is_captain)
