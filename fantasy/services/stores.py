# fantasy/services/stores.py
# Read/write contract shared by the player-points calculator and the
# team-score aggregator. The ORM-backed store is the default; tests can
# hand either service an in-memory implementation instead.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol, Sequence

from django.core.exceptions import ObjectDoesNotExist, ValidationError

from fantasy.models import Fixture, Gameweek, Player, SquadSlot, Team
from fantasy.models_scoring import GameweekScore, PlayerPoints


class GameweekNotFound(ObjectDoesNotExist):
    pass


def coerce_gameweek_id(gameweek_id) -> int:
    """
    Accepts an int or a numeric string (admin forms, URL kwargs, CLI args).
    Raises ValidationError for anything else so callers fail before touching the DB.
    """
    if isinstance(gameweek_id, bool):
        raise ValidationError("Invalid gameweek ID")
    try:
        value = int(gameweek_id)
    except (TypeError, ValueError):
        raise ValidationError("Invalid gameweek ID") from None
    if isinstance(gameweek_id, float) and gameweek_id != value:
        raise ValidationError("Invalid gameweek ID")
    if value < 1:
        raise ValidationError("Invalid gameweek ID")
    return value


class ScoringStore(Protocol):
    def get_gameweek(self, gameweek_id: int, *, lock: bool = False): ...

    def fixtures_for_gameweek(self, gameweek_id: int) -> Iterable: ...

    def events_for_fixture(self, fixture) -> Iterable: ...

    def players_for_team(self, team_name: str) -> Iterable: ...

    def get_player(self, player_id) -> Optional[object]: ...

    def save_player_points(self, *, player_id, gameweek_id: int, points: int, counters: Dict[str, int]) -> None: ...

    def clear_player_points(self, gameweek_id: int) -> int: ...

    def player_points_for_gameweek(self, gameweek_id: int) -> Dict[object, int]: ...

    def teams(self) -> Iterable: ...

    def squad_slots(self, team) -> Sequence: ...

    def save_gameweek_score(self, *, team_id, gameweek_id: int, total: int) -> None: ...


@dataclass(frozen=True)
class ModelScoringStore:
    """Django ORM implementation of ScoringStore."""

    def get_gameweek(self, gameweek_id: int, *, lock: bool = False) -> Gameweek:
        qs = Gameweek.objects.all()
        if lock:
            # Serializes overlapping scoring runs for the same gameweek
            qs = qs.select_for_update()
        try:
            return qs.get(id=gameweek_id)
        except Gameweek.DoesNotExist:
            raise GameweekNotFound("Gameweek not found") from None

    def fixtures_for_gameweek(self, gameweek_id: int) -> Iterable[Fixture]:
        return (
            Fixture.objects
            .filter(gameweek_id=gameweek_id)
            .prefetch_related("events")
            .order_by("kickoff_at", "id")
        )

    def events_for_fixture(self, fixture: Fixture):
        return fixture.events.all()

    def players_for_team(self, team_name: str) -> Iterable[Player]:
        return Player.objects.filter(team_name=team_name).only("id", "team_name", "position").order_by("id")

    def get_player(self, player_id) -> Optional[Player]:
        return Player.objects.filter(id=player_id).only("id", "team_name", "position").first()

    def save_player_points(self, *, player_id, gameweek_id: int, points: int, counters: Dict[str, int]) -> None:
        PlayerPoints.objects.update_or_create(
            player_id=player_id,
            gameweek_id=gameweek_id,
            defaults={"points": points, **counters},
        )

    def clear_player_points(self, gameweek_id: int) -> int:
        deleted, _ = PlayerPoints.objects.filter(gameweek_id=gameweek_id).delete()
        return deleted

    def player_points_for_gameweek(self, gameweek_id: int) -> Dict[int, int]:
        rows = PlayerPoints.objects.filter(gameweek_id=gameweek_id).values_list("player_id", "points")
        return {player_id: points or 0 for player_id, points in rows}

    def teams(self) -> Iterable[Team]:
        return Team.objects.prefetch_related("squad_slots").order_by("id")

    def squad_slots(self, team: Team) -> Sequence[SquadSlot]:
        return list(team.squad_slots.all())

    def save_gameweek_score(self, *, team_id, gameweek_id: int, total: int) -> None:
        GameweekScore.objects.update_or_create(
            team_id=team_id,
            gameweek_id=gameweek_id,
            defaults={"total": total},
        )
