from django.db import models
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.db.models import Q


# ================================================================
# GAMEWEEKS
# ================================================================

class Gameweek(models.Model):
    number = models.PositiveIntegerField(unique=True)
    name = models.CharField(max_length=50, blank=True)
    deadline_at = models.DateTimeField(null=True, blank=True)

    is_current = models.BooleanField(default=False)
    is_finished = models.BooleanField(default=False)

    class Meta:
        ordering = ["number"]
        constraints = [
            models.UniqueConstraint(
                fields=["is_current"],
                condition=Q(is_current=True),
                name="fantasy_one_current_gameweek",
            ),
        ]

    def save(self, *args, **kwargs):
        # Marking a gameweek current demotes whichever one was current before
        if self.is_current:
            Gameweek.objects.filter(is_current=True).exclude(pk=self.pk).update(is_current=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name or f"Gameweek {self.number}"


# ================================================================
# REAL-WORLD PLAYERS
# ================================================================

class Position(models.TextChoices):
    GOALKEEPER = "GK", "Goalkeeper"
    OUTFIELD = "OUT", "Outfield"


class Player(models.Model):
    STATUS_CHOICES = [
        ("A", "Available"),
        ("I", "Injured"),
    ]

    name = models.CharField(max_length=100)

    # Real-world club, matched against Fixture.home_team / away_team
    team_name = models.CharField(max_length=100, db_index=True)

    position = models.CharField(max_length=3, choices=Position.choices)
    price = models.DecimalField(max_digits=5, decimal_places=1, default=0)
    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="A")

    # Season aggregates (derived from PlayerPoints, see services/season_stats.py)
    total_points = models.IntegerField(default=0)
    goals = models.IntegerField(default=0)
    assists = models.IntegerField(default=0)
    owned_pct = models.FloatField(default=0)

    updated = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    @property
    def is_goalkeeper(self):
        return self.position == Position.GOALKEEPER

    def __str__(self):
        return f"{self.name} ({self.team_name}, {self.position})"


# ================================================================
# FIXTURES + MATCH EVENTS
# ================================================================

class Fixture(models.Model):
    gameweek = models.ForeignKey(Gameweek, on_delete=models.CASCADE, related_name="fixtures")

    home_team = models.CharField(max_length=100)
    away_team = models.CharField(max_length=100)
    kickoff_at = models.DateTimeField(null=True, blank=True)

    # Null until the admin records the result
    home_goals = models.PositiveIntegerField(null=True, blank=True)
    away_goals = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["kickoff_at", "id"]

    @property
    def is_settled(self):
        return self.home_goals is not None and self.away_goals is not None

    def __str__(self):
        if self.is_settled:
            return f"{self.home_team} {self.home_goals}-{self.away_goals} {self.away_team}"
        return f"{self.home_team} vs {self.away_team}"


class EventType(models.TextChoices):
    GOAL = "GOAL", "Goal"
    ASSIST = "ASSIST", "Assist"
    OWN_GOAL = "OWN_GOAL", "Own goal"
    YELLOW_CARD = "YELLOW_CARD", "Yellow card"
    RED_CARD = "RED_CARD", "Red card"


class ScoreEvent(models.Model):
    fixture = models.ForeignKey(Fixture, on_delete=models.CASCADE, related_name="events")
    player = models.ForeignKey(Player, on_delete=models.CASCADE, related_name="score_events")
    type = models.CharField(max_length=12, choices=EventType.choices)
    minute = models.PositiveSmallIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["minute", "id"]

    def clean(self):
        # Unset relations are reported by their own field validation
        fixture = getattr(self, "fixture", None)
        player = getattr(self, "player", None)
        if fixture is None or player is None:
            return

        if player.team_name not in (fixture.home_team, fixture.away_team):
            raise ValidationError(
                f"{player.name} ({player.team_name}) is not from either team in {fixture}."
            )

    def __str__(self):
        minute = f" {self.minute}'" if self.minute is not None else ""
        return f"{self.get_type_display()} — {self.player.name}{minute}"


# ================================================================
# FANTASY TEAMS + SQUADS
# ================================================================

class Team(models.Model):
    name = models.CharField(max_length=100)

    manager = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="fantasy_teams",
    )

    def __str__(self):
        return self.name


class SquadSlot(models.Model):
    SLOT_CHOICES = [
        ("GK1", "Goalkeeper"),
        ("OUT1", "Outfield 1"),
        ("OUT2", "Outfield 2"),
        ("OUT3", "Outfield 3"),
        ("OUT4", "Outfield 4"),
    ]

    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="squad_slots")
    slot_label = models.CharField(max_length=4, choices=SLOT_CHOICES)
    player = models.ForeignKey(
        Player,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="squad_slots",
    )
    is_captain = models.BooleanField(default=False)

    class Meta:
        unique_together = ("team", "slot_label")
        ordering = ["team", "slot_label"]
        constraints = [
            models.UniqueConstraint(
                fields=["team"],
                condition=Q(is_captain=True),
                name="fantasy_one_captain_per_team",
            ),
        ]

    def __str__(self):
        return f"{self.team.name} — {self.slot_label}"
