# fantasy/services/player_points.py

from __future__ import annotations

import logging
from typing import Dict, Optional

from django.db import transaction

from fantasy.services.stores import ModelScoringStore, ScoringStore, coerce_gameweek_id
from fantasy.utils.scoring import PlayerTally, calculate_player_points as points_for_tally

logger = logging.getLogger(__name__)


def _is_settled(fixture) -> bool:
    return fixture.home_goals is not None and fixture.away_goals is not None


def _seed_conceded(tallies: Dict[object, PlayerTally], players, conceded: int) -> None:
    for player in players:
        tally = tallies.get(player.id)
        if tally is None:
            tallies[player.id] = PlayerTally(position=player.position, goals_conceded=conceded)
        else:
            tally.goals_conceded += conceded


def _fallback_tally(store: ScoringStore, fixture, player_id) -> Optional[PlayerTally]:
    """
    Tally for an event whose player was not on either fixture roster.
    Conceded goals come from the home side if the player's club is the
    home team, otherwise from the away side.
    """
    player = store.get_player(player_id)
    if player is None:
        return None

    if player.team_name == fixture.home_team:
        conceded = fixture.away_goals
    else:
        conceded = fixture.home_goals
    return PlayerTally(position=player.position, goals_conceded=conceded)


def tally_gameweek(gameweek_id: int, *, store: ScoringStore) -> Dict[object, PlayerTally]:
    """
    Sum every player's counters over the settled fixtures of one gameweek.
    Unsettled fixtures contribute nothing, not even their recorded events.
    """
    tallies: Dict[object, PlayerTally] = {}

    for fixture in store.fixtures_for_gameweek(gameweek_id):
        if not _is_settled(fixture):
            logger.debug("Skipping unsettled fixture %s", fixture.id)
            continue

        # Home players concede the away goals and vice versa
        _seed_conceded(tallies, store.players_for_team(fixture.home_team), fixture.away_goals)
        _seed_conceded(tallies, store.players_for_team(fixture.away_team), fixture.home_goals)

        for event in store.events_for_fixture(fixture):
            tally = tallies.get(event.player_id)
            if tally is None:
                tally = _fallback_tally(store, fixture, event.player_id)
                if tally is None:
                    logger.warning(
                        "Score event %s in fixture %s references unknown player %s; skipping.",
                        event.id, fixture.id, event.player_id,
                    )
                    continue
                logger.warning(
                    "Player %s has events in fixture %s but plays for neither %s nor %s.",
                    event.player_id, fixture.id, fixture.home_team, fixture.away_team,
                )
                tallies[event.player_id] = tally
            tally.record(event.type)

    return tallies


@transaction.atomic
def calculate_player_points(gameweek_id, *, store: Optional[ScoringStore] = None) -> int:
    """
    Recompute and upsert PlayerPoints for every player appearing in a settled
    fixture of the gameweek. Rows for players who no longer appear are left
    alone (see services/pipeline.rescore_gameweek).

    Returns the number of PlayerPoints rows written.
    """
    gameweek_id = coerce_gameweek_id(gameweek_id)
    store = store or ModelScoringStore()

    store.get_gameweek(gameweek_id, lock=True)

    tallies = tally_gameweek(gameweek_id, store=store)

    for player_id, tally in tallies.items():
        store.save_player_points(
            player_id=player_id,
            gameweek_id=gameweek_id,
            points=points_for_tally(tally),
            counters=tally.as_counters(),
        )

    logger.info("Wrote %d PlayerPoints rows for gameweek %s", len(tallies), gameweek_id)
    return len(tallies)
