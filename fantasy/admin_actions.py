from django.contrib import admin, messages
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.shortcuts import redirect

from .services.pipeline import rescore_gameweek, score_gameweek
from .services.season_stats import update_player_ownership_pct, update_player_season_stats
from .services.stores import GameweekNotFound


def _run_for_each(request, queryset, job, verb):
    for gameweek in queryset:
        try:
            summary = job(gameweek.id)
        except (GameweekNotFound, ValidationError, DatabaseError) as exc:
            # Nothing for this gameweek was committed; the admin can fix the data and re-run
            messages.error(request, f"{gameweek}: {verb} failed ({exc}).")
            continue

        messages.success(
            request,
            f"{gameweek}: {verb} {summary['player_points']} player rows "
            f"and {summary['team_scores']} team scores.",
        )


@admin.action(description="Calculate player points and team scores")
def action_run_scoring(modeladmin, request, queryset):
    """
    Admin action: score the selected gameweeks (player points, then team totals).
    """
    _run_for_each(request, queryset, score_gameweek, "scored")
    return redirect(request.get_full_path())


@admin.action(description="Rescore from scratch (clears stale player points)")
def action_rescore_gameweek(modeladmin, request, queryset):
    """
    Admin action: drop and recompute every PlayerPoints row of the selected gameweeks.
    """
    _run_for_each(request, queryset, rescore_gameweek, "rescored")
    return redirect(request.get_full_path())


@admin.action(description="Update player season stats and ownership")
def action_update_season_stats(modeladmin, request, queryset):
    players = update_player_season_stats()
    update_player_ownership_pct()

    messages.success(request, f"Season stats updated for {players} players.")
    return redirect(request.get_full_path())
