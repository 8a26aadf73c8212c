"""Addon identity and the hook that wires its middleware into the host server."""

import logging

logger = logging.getLogger(__name__)

ADDON_NAME = "service-worker-authenticated-download"

# Build-time mode read by the host tooling.
IS_DEVELOPING_ADDON = True

MIDDLEWARE_PATH = "sw_download.middleware.ServiceWorkerAllowedMiddleware"


def server_middleware(middleware: list[str]) -> list[str]:
    """Register ServiceWorkerAllowedMiddleware on the host's middleware chain.

    Called once from settings at server start-up with the MIDDLEWARE list.
    The middleware goes in front of everything else so responses returned
    early by outer middleware (WhiteNoise static files, security redirects)
    still carry the header. Calling it again is a no-op.
    """
    if MIDDLEWARE_PATH not in middleware:
        middleware.insert(0, MIDDLEWARE_PATH)
        logger.debug("Registered %s for %s", MIDDLEWARE_PATH, ADDON_NAME)
    return middleware
