import logging

from django.apps import AppConfig

from .addon import ADDON_NAME, IS_DEVELOPING_ADDON, MIDDLEWARE_PATH

logger = logging.getLogger(__name__)


class SwDownloadConfig(AppConfig):
    name = "sw_download"
    verbose_name = ADDON_NAME

    def ready(self):
        from django.conf import settings

        if MIDDLEWARE_PATH not in settings.MIDDLEWARE:
            logger.warning(
                "%s is not in MIDDLEWARE; responses will not carry the Service-Worker-Allowed header",
                MIDDLEWARE_PATH,
            )
        elif IS_DEVELOPING_ADDON:
            logger.info("%s loaded in development mode", ADDON_NAME)
