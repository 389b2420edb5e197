# fantasy/models_scoring.py
from django.db import models


class PlayerPoints(models.Model):
    player = models.ForeignKey("fantasy.Player", on_delete=models.CASCADE, related_name="gameweek_points")
    gameweek = models.ForeignKey("fantasy.Gameweek", on_delete=models.CASCADE, related_name="player_points")

    points = models.IntegerField(default=0)

    goals = models.PositiveIntegerField(default=0)
    assists = models.PositiveIntegerField(default=0)
    own_goals = models.PositiveIntegerField(default=0)
    yellow_cards = models.PositiveIntegerField(default=0)
    red_cards = models.PositiveIntegerField(default=0)
    goals_conceded = models.PositiveIntegerField(default=0)

    updated = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("player", "gameweek")
        verbose_name_plural = "player points"

    def __str__(self):
        return f"{self.player.name} GW{self.gameweek.number}: {self.points}"


class GameweekScore(models.Model):
    team = models.ForeignKey("fantasy.Team", on_delete=models.CASCADE, related_name="gameweek_scores")
    gameweek = models.ForeignKey("fantasy.Gameweek", on_delete=models.CASCADE, related_name="team_scores")
    total = models.IntegerField(default=0)

    updated = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("team", "gameweek")

    def __str__(self):
        return f"{self.team.name} GW{self.gameweek.number}: {self.total}"
