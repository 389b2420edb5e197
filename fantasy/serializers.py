from rest_framework import serializers
from fantasy.models import Player
from fantasy.models_scoring import PlayerPoints, GameweekScore


class PlayerPointsSerializer(serializers.ModelSerializer):
    player_name = serializers.CharField(source="player.name", read_only=True)
    team_name = serializers.CharField(source="player.team_name", read_only=True)
    position = serializers.CharField(source="player.position", read_only=True)
    gameweek = serializers.IntegerField(source="gameweek.number", read_only=True)

    class Meta:
        model = PlayerPoints
        fields = [
            "player_id",
            "player_name",
            "team_name",
            "position",
            "gameweek",
            "points",
            "goals",
            "assists",
            "own_goals",
            "yellow_cards",
            "red_cards",
            "goals_conceded",
        ]


class GameweekScoreSerializer(serializers.ModelSerializer):
    team_name = serializers.CharField(source="team.name", read_only=True)
    gameweek = serializers.IntegerField(source="gameweek.number", read_only=True)

    class Meta:
        model = GameweekScore
        fields = ["team_id", "team_name", "gameweek", "total"]


class PlayerPointsOverrideSerializer(serializers.Serializer):
    """
    One row of a manual PlayerPoints override. Counters are non-negative;
    points may be negative (a goalkeeper conceding more than 7).
    """
    player_id = serializers.PrimaryKeyRelatedField(queryset=Player.objects.all(), source="player")
    points = serializers.IntegerField()
    goals = serializers.IntegerField(min_value=0)
    assists = serializers.IntegerField(min_value=0)
    own_goals = serializers.IntegerField(min_value=0)
    yellow_cards = serializers.IntegerField(min_value=0)
    red_cards = serializers.IntegerField(min_value=0)
    goals_conceded = serializers.IntegerField(min_value=0)
