from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Gameweek",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("number", models.PositiveIntegerField(unique=True)),
                ("name", models.CharField(blank=True, max_length=50)),
                ("deadline_at", models.DateTimeField(blank=True, null=True)),
                ("is_current", models.BooleanField(default=False)),
                ("is_finished", models.BooleanField(default=False)),
            ],
            options={
                "ordering": ["number"],
            },
        ),
        migrations.CreateModel(
            name="Player",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("team_name", models.CharField(db_index=True, max_length=100)),
                ("position", models.CharField(choices=[("GK", "Goalkeeper"), ("OUT", "Outfield")], max_length=3)),
                ("price", models.DecimalField(decimal_places=1, default=0, max_digits=5)),
                ("status", models.CharField(choices=[("A", "Available"), ("I", "Injured")], default="A", max_length=1)),
                ("total_points", models.IntegerField(default=0)),
                ("goals", models.IntegerField(default=0)),
                ("assists", models.IntegerField(default=0)),
                ("owned_pct", models.FloatField(default=0)),
                ("updated", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                (
                    "manager",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="fantasy_teams",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="Fixture",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("home_team", models.CharField(max_length=100)),
                ("away_team", models.CharField(max_length=100)),
                ("kickoff_at", models.DateTimeField(blank=True, null=True)),
                ("home_goals", models.PositiveIntegerField(blank=True, null=True)),
                ("away_goals", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "gameweek",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="fixtures",
                        to="fantasy.gameweek",
                    ),
                ),
            ],
            options={
                "ordering": ["kickoff_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="ScoreEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("GOAL", "Goal"),
                            ("ASSIST", "Assist"),
                            ("OWN_GOAL", "Own goal"),
                            ("YELLOW_CARD", "Yellow card"),
                            ("RED_CARD", "Red card"),
                        ],
                        max_length=12,
                    ),
                ),
                ("minute", models.PositiveSmallIntegerField(blank=True, null=True)),
                (
                    "fixture",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="fantasy.fixture",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="score_events",
                        to="fantasy.player",
                    ),
                ),
            ],
            options={
                "ordering": ["minute", "id"],
            },
        ),
        migrations.CreateModel(
            name="SquadSlot",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "slot_label",
                    models.CharField(
                        choices=[
                            ("GK1", "Goalkeeper"),
                            ("OUT1", "Outfield 1"),
                            ("OUT2", "Outfield 2"),
                            ("OUT3", "Outfield 3"),
                            ("OUT4", "Outfield 4"),
                        ],
                        max_length=4,
                    ),
                ),
                ("is_captain", models.BooleanField(default=False)),
                (
                    "player",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="squad_slots",
                        to="fantasy.player",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="squad_slots",
                        to="fantasy.team",
                    ),
                ),
            ],
            options={
                "ordering": ["team", "slot_label"],
                "unique_together": {("team", "slot_label")},
            },
        ),
        migrations.AddConstraint(
            model_name="squadslot",
            constraint=models.UniqueConstraint(
                condition=models.Q(("is_captain", True)),
                fields=("team",),
                name="fantasy_one_captain_per_team",
            ),
        ),
        migrations.CreateModel(
            name="PlayerPoints",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("points", models.IntegerField(default=0)),
                ("goals", models.PositiveIntegerField(default=0)),
                ("assists", models.PositiveIntegerField(default=0)),
                ("own_goals", models.PositiveIntegerField(default=0)),
                ("yellow_cards", models.PositiveIntegerField(default=0)),
                ("red_cards", models.PositiveIntegerField(default=0)),
                ("goals_conceded", models.PositiveIntegerField(default=0)),
                ("updated", models.DateTimeField(auto_now=True)),
                (
                    "gameweek",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="player_points",
                        to="fantasy.gameweek",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="gameweek_points",
                        to="fantasy.player",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "player points",
                "unique_together": {("player", "gameweek")},
            },
        ),
        migrations.CreateModel(
            name="GameweekScore",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("total", models.IntegerField(default=0)),
                ("updated", models.DateTimeField(auto_now=True)),
                (
                    "gameweek",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="team_scores",
                        to="fantasy.gameweek",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="gameweek_scores",
                        to="fantasy.team",
                    ),
                ),
            ],
            options={
                "unique_together": {("team", "gameweek")},
            },
        ),
    ]
