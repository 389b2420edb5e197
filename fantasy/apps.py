# fantasy/apps.py
from django.apps import AppConfig


class FantasyConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "fantasy"

    def ready(self):
        import fantasy.models_scoring  # noqa: F401
        import fantasy.signals  # noqa: F401
