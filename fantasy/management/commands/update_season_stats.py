from django.core.management.base import BaseCommand

from fantasy.services.season_stats import update_player_ownership_pct, update_player_season_stats


class Command(BaseCommand):
    help = "Recalculate season totals and ownership percentage for all players"

    def handle(self, *args, **kwargs):
        updated = update_player_season_stats()
        update_player_ownership_pct()

        self.stdout.write(self.style.SUCCESS(
            f"Recalculated season stats for {updated} players."
        ))
