# fantasy/api/points_views.py

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from fantasy.models import Gameweek
from fantasy.models_scoring import PlayerPoints, GameweekScore
from fantasy.serializers import (
    GameweekScoreSerializer,
    PlayerPointsOverrideSerializer,
    PlayerPointsSerializer,
)


class GameweekPlayerPointsAPIView(generics.ListAPIView):
    """
    GET  /api/gameweeks/<id>/player-points/  every PlayerPoints row of the gameweek
    POST /api/gameweeks/<id>/player-points/  admin-only manual override, all rows or none
    """
    serializer_class = PlayerPointsSerializer

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAdminUser()]
        return super().get_permissions()

    def get_gameweek(self):
        return get_object_or_404(Gameweek, id=self.kwargs["gameweek_id"])

    def get_queryset(self):
        gameweek = self.get_gameweek()
        return (
            PlayerPoints.objects
            .filter(gameweek=gameweek)
            .select_related("player", "gameweek")
            .order_by("-points", "player__name")
        )

    def post(self, request, *args, **kwargs):
        gameweek = self.get_gameweek()

        serializer = PlayerPointsOverrideSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)

        with transaction.atomic():
            for row in serializer.validated_data:
                player = row.pop("player")
                PlayerPoints.objects.update_or_create(
                    player=player,
                    gameweek=gameweek,
                    defaults=row,
                )

        return Response({"saved": len(serializer.validated_data)}, status=status.HTTP_200_OK)


class GameweekScoreListAPIView(generics.ListAPIView):
    serializer_class = GameweekScoreSerializer

    def get_queryset(self):
        gameweek = get_object_or_404(Gameweek, id=self.kwargs["gameweek_id"])
        return (
            GameweekScore.objects
            .filter(gameweek=gameweek)
            .select_related("team", "gameweek")
            .order_by("-total", "team__name")
        )
