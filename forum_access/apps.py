# forum_access/apps.py

from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)


class ForumAccessConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "forum_access"
    verbose_name = "Forum Access"

    def ready(self):
        try:
            from . import signals

            signals.connect_forum_signals()
        except Exception as e:
            logger.exception("forum_access.signals wiring failed: %s", e)
