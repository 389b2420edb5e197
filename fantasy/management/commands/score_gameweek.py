# fantasy/management/commands/score_gameweek.py

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from fantasy.models import Gameweek
from fantasy.services.pipeline import rescore_gameweek, score_gameweek
from fantasy.services.player_points import calculate_player_points
from fantasy.services.stores import GameweekNotFound


class Command(BaseCommand):
    help = "Calculate player points, then team gameweek scores, for one gameweek (defaults to the current one)."

    def add_arguments(self, parser):
        parser.add_argument("--gameweek_id", type=str, default=None)

        mode = parser.add_mutually_exclusive_group()
        mode.add_argument(
            "--players-only",
            action="store_true",
            help="Only recompute PlayerPoints; leave team scores untouched.",
        )
        mode.add_argument(
            "--rescore",
            action="store_true",
            help="Delete the gameweek's PlayerPoints first (use after deleting fixtures or events).",
        )

    def handle(self, *args, **options):
        gameweek_id = options["gameweek_id"]
        if gameweek_id is None:
            current = Gameweek.objects.filter(is_current=True).first()
            if current is None:
                raise CommandError("No current gameweek; pass --gameweek_id.")
            gameweek_id = current.id

        try:
            if options["players_only"]:
                written = calculate_player_points(gameweek_id)
                self.stdout.write(f"Wrote {written} PlayerPoints rows for gameweek {gameweek_id}.")
            elif options["rescore"]:
                summary = rescore_gameweek(gameweek_id)
                self.stdout.write(f"Rescored gameweek {gameweek_id}: {summary}")
            else:
                # 1) PlayerPoints, 2) GameweekScore
                summary = score_gameweek(gameweek_id)
                self.stdout.write(f"Scored gameweek {gameweek_id}: {summary}")
        except GameweekNotFound:
            raise CommandError(f"Gameweek {gameweek_id} not found.")
        except ValidationError:
            raise CommandError(f"Invalid gameweek ID: {gameweek_id!r}")

        self.stdout.write(self.style.SUCCESS("Done."))
