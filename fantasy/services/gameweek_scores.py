# fantasy/services/gameweek_scores.py

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from django.db import transaction

from fantasy.services.stores import ModelScoringStore, ScoringStore, coerce_gameweek_id
from fantasy.utils.scoring import apply_captain

logger = logging.getLogger(__name__)


REQUIRED_SQUAD_SIZE = 5


def team_gameweek_total(slots: Sequence, points_by_player: Dict[object, int]) -> int:
    """
    Sum the stored points of every occupied slot and double the captain.
    A player with no PlayerPoints row for the gameweek counts as 0.
    """
    base_total = 0
    captain_points = 0
    captain_seen = False

    for slot in slots:
        if slot.player_id is None:
            continue

        points = points_by_player.get(slot.player_id, 0)
        base_total += points

        if slot.is_captain:
            if captain_seen:
                logger.warning("Slot %s is a second captain; only the first is doubled.", slot.id)
                continue
            captain_seen = True
            captain_points = points

    return apply_captain(base_total, captain_points)


@transaction.atomic
def calculate_gameweek_scores(gameweek_id, *, store: Optional[ScoringStore] = None) -> int:
    """
    Upsert a GameweekScore for every team with a full squad, using the
    PlayerPoints already written by calculate_player_points.

    Teams without exactly REQUIRED_SQUAD_SIZE slots are skipped with a warning.
    Returns the number of GameweekScore rows written.
    """
    gameweek_id = coerce_gameweek_id(gameweek_id)
    store = store or ModelScoringStore()

    store.get_gameweek(gameweek_id, lock=True)

    points_by_player = store.player_points_for_gameweek(gameweek_id)

    written = 0
    for team in store.teams():
        slots = store.squad_slots(team)
        if len(slots) != REQUIRED_SQUAD_SIZE:
            logger.warning(
                'Team "%s" (%s) has %d slots instead of %d. Skipping scoring for this team.',
                team.name, team.id, len(slots), REQUIRED_SQUAD_SIZE,
            )
            continue

        store.save_gameweek_score(
            team_id=team.id,
            gameweek_id=gameweek_id,
            total=team_gameweek_total(slots, points_by_player),
        )
        written += 1

    logger.info("Wrote %d GameweekScore rows for gameweek %s", written, gameweek_id)
    return written
