# fantasy/services/pipeline.py
# Runs player points first, then team scores, for one gameweek.

from __future__ import annotations

import logging
from typing import Dict, Optional

from django.db import transaction

from fantasy.services.gameweek_scores import calculate_gameweek_scores
from fantasy.services.player_points import calculate_player_points
from fantasy.services.stores import ModelScoringStore, ScoringStore, coerce_gameweek_id

logger = logging.getLogger(__name__)


@transaction.atomic
def score_gameweek(gameweek_id, *, store: Optional[ScoringStore] = None) -> Dict[str, int]:
    """
    Returns summary dict: {"player_points": X, "team_scores": Y}
    """
    gameweek_id = coerce_gameweek_id(gameweek_id)
    store = store or ModelScoringStore()

    player_rows = calculate_player_points(gameweek_id, store=store)
    team_rows = calculate_gameweek_scores(gameweek_id, store=store)

    return {"player_points": player_rows, "team_scores": team_rows}


@transaction.atomic
def rescore_gameweek(gameweek_id, *, store: Optional[ScoringStore] = None) -> Dict[str, int]:
    """
    Full recomputation after fixtures or events were deleted: stale
    PlayerPoints rows are dropped before both stages run again.
    """
    gameweek_id = coerce_gameweek_id(gameweek_id)
    store = store or ModelScoringStore()

    # Lock and verify before deleting anything
    store.get_gameweek(gameweek_id, lock=True)

    cleared = store.clear_player_points(gameweek_id)
    logger.info("Cleared %d PlayerPoints rows for gameweek %s", cleared, gameweek_id)

    return score_gameweek(gameweek_id, store=store)
