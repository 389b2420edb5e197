from django.contrib import admin
from .models import (
    Gameweek,
    Player,
    Fixture,
    ScoreEvent,
    Team,
    SquadSlot,
)
from .models_scoring import PlayerPoints, GameweekScore
from .admin_actions import action_run_scoring, action_rescore_gameweek, action_update_season_stats


# ======================
# GAMEWEEK
# ======================
@admin.register(Gameweek)
class GameweekAdmin(admin.ModelAdmin):
    list_display = ("number", "name", "deadline_at", "is_current", "is_finished")
    list_filter = ("is_current", "is_finished")
    ordering = ("number",)
    actions = [action_run_scoring, action_rescore_gameweek, action_update_season_stats]


# ======================
# PLAYER
# ======================
@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "team_name",
        "position",
        "price",
        "status",
        "total_points",
        "goals",
        "assists",
        "owned_pct",
    )
    search_fields = ("name", "team_name")
    list_filter = ("position", "status", "team_name")
    ordering = ("name",)


# ======================
# FIXTURE + EVENTS
# ======================
class ScoreEventInline(admin.TabularInline):
    model = ScoreEvent
    extra = 0
    autocomplete_fields = ("player",)


@admin.register(Fixture)
class FixtureAdmin(admin.ModelAdmin):
    list_display = ("__str__", "gameweek", "kickoff_at", "home_goals", "away_goals")
    list_filter = ("gameweek",)
    search_fields = ("home_team", "away_team")
    inlines = [ScoreEventInline]


@admin.register(ScoreEvent)
class ScoreEventAdmin(admin.ModelAdmin):
    list_display = ("fixture", "player", "type", "minute")
    list_filter = ("type", "fixture__gameweek")
    search_fields = ("player__name",)


# ======================
# TEAM + SQUAD
# ======================
class SquadSlotInline(admin.TabularInline):
    model = SquadSlot
    extra = 0
    max_num = 5
    autocomplete_fields = ("player",)


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("name", "manager")
    search_fields = ("name", "manager__username")
    inlines = [SquadSlotInline]


# ======================
# SCORING OUTPUT
# ======================
@admin.register(PlayerPoints)
class PlayerPointsAdmin(admin.ModelAdmin):
    list_display = (
        "player",
        "gameweek",
        "points",
        "goals",
        "assists",
        "own_goals",
        "yellow_cards",
        "red_cards",
        "goals_conceded",
    )
    list_filter = ("gameweek",)
    search_fields = ("player__name",)


@admin.register(GameweekScore)
class GameweekScoreAdmin(admin.ModelAdmin):
    list_display = ("team", "gameweek", "total")
    list_filter = ("gameweek",)
    ordering = ("gameweek", "-total")
