# fantasy/services/season_stats.py

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import Count, Sum

from fantasy.models import Player, SquadSlot, Team
from fantasy.models_scoring import PlayerPoints

logger = logging.getLogger(__name__)


@transaction.atomic
def update_player_season_stats() -> int:
    """
    Recompute Player.total_points / goals / assists from PlayerPoints of
    finished gameweeks. Players with no rows are reset to 0.
    """
    totals = (
        PlayerPoints.objects
        .filter(gameweek__is_finished=True)
        .values("player_id")
        .annotate(
            total_points=Sum("points"),
            goals=Sum("goals"),
            assists=Sum("assists"),
        )
    )
    stats_by_player = {row["player_id"]: row for row in totals}

    players = list(Player.objects.all())
    for player in players:
        row = stats_by_player.get(player.id, {})
        player.total_points = row.get("total_points") or 0
        player.goals = row.get("goals") or 0
        player.assists = row.get("assists") or 0

    Player.objects.bulk_update(players, ["total_points", "goals", "assists"])

    logger.info("Updated season stats for %d players", len(players))
    return len(players)


@transaction.atomic
def update_player_ownership_pct() -> int:
    """owned_pct = teams holding the player in a squad slot / all teams * 100."""
    total_teams = Team.objects.count()

    owned_by = {}
    if total_teams:
        counts = (
            SquadSlot.objects
            .filter(player__isnull=False)
            .values("player_id")
            .annotate(teams=Count("team", distinct=True))
        )
        owned_by = {row["player_id"]: row["teams"] for row in counts}

    players = list(Player.objects.all())
    for player in players:
        teams = owned_by.get(player.id, 0)
        player.owned_pct = (teams / total_teams) * 100 if total_teams else 0.0

    Player.objects.bulk_update(players, ["owned_pct"])

    logger.info("Updated ownership for %d players across %d teams", len(players), total_teams)
    return len(players)
