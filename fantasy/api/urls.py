# fantasy/api/urls.py

from django.urls import path
from .points_views import GameweekPlayerPointsAPIView, GameweekScoreListAPIView

urlpatterns = [
    # Per-player breakdown (GET) + manual override (POST, admin only)
    path(
        "gameweeks/<int:gameweek_id>/player-points/",
        GameweekPlayerPointsAPIView.as_view(),
        name="gameweek_player_points",
    ),

    # Team totals, highest first
    path(
        "gameweeks/<int:gameweek_id>/scores/",
        GameweekScoreListAPIView.as_view(),
        name="gameweek_scores",
    ),
]
