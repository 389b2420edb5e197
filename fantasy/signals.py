import logging

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Fixture, ScoreEvent, SquadSlot, Team
from .models_scoring import PlayerPoints

logger = logging.getLogger(__name__)


# -----------------------------------------
# DEFAULT SQUAD SLOTS (team-based)
# -----------------------------------------

DEFAULT_SLOT_LABELS = ["GK1", "OUT1", "OUT2", "OUT3", "OUT4"]


@receiver(post_save, sender=Team)
def initialize_team_squad(sender, instance, created, **kwargs):
    """
    When a team is created, give it one empty slot per squad position
    (GK1, OUT1..OUT4) so the transfer and pick-team flows only ever fill them.
    """
    if not created:
        return

    for slot_label in DEFAULT_SLOT_LABELS:
        SquadSlot.objects.get_or_create(team=instance, slot_label=slot_label)


# -----------------------------------------
# RESCORE AFTER MATCH DATA IS REMOVED
# -----------------------------------------

def _rescore_after_commit(gameweek_id):
    from .services.pipeline import rescore_gameweek
    from .services.stores import GameweekNotFound

    try:
        summary = rescore_gameweek(gameweek_id)
    except GameweekNotFound:
        # Gameweek itself was deleted along with its fixtures
        logger.info("Gameweek %s no longer exists; nothing to rescore.", gameweek_id)
        return
    except Exception:
        # The delete is already committed; the rescore can be re-run from the admin
        logger.exception("Rescore of gameweek %s after deletion failed.", gameweek_id)
        return
    logger.info("Rescored gameweek %s after deletion: %s", gameweek_id, summary)


def _schedule_rescore(gameweek_id):
    if gameweek_id is None:
        return
    # Only gameweeks that were already scored need recomputing
    if not PlayerPoints.objects.filter(gameweek_id=gameweek_id).exists():
        return
    transaction.on_commit(lambda: _rescore_after_commit(gameweek_id))


@receiver(post_delete, sender=ScoreEvent)
def rescore_on_event_delete(sender, instance, **kwargs):
    gameweek_id = (
        Fixture.objects
        .filter(id=instance.fixture_id)
        .values_list("gameweek_id", flat=True)
        .first()
    )
    _schedule_rescore(gameweek_id)


@receiver(post_delete, sender=Fixture)
def rescore_on_fixture_delete(sender, instance, **kwargs):
    _schedule_rescore(instance.gameweek_id)
