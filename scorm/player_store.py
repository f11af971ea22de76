"""
Keeps SCORM API handlers between HTTP requests.

Each handler owns exactly one session; the player id handed to the browser is
the session id. Handlers live in the Django cache and expire after
SCORM_PLAYER_TIMEOUT seconds of inactivity.
"""
import logging

from django.conf import settings
from django.core.cache import cache as default_cache

from .api_handler import ScormAPIHandler
from .session import ScormSession

logger = logging.getLogger(__name__)


class ScormPlayerStore:
    KEY_PREFIX = 'scorm_player_'

    def __init__(self, cache_backend=None, timeout=None):
        self.cache = cache_backend if cache_backend is not None else default_cache
        self.timeout = timeout if timeout is not None else getattr(settings, 'SCORM_PLAYER_TIMEOUT', 3600)

    def _key(self, player_id):
        return f"{self.KEY_PREFIX}{player_id}"

    def create(self, package=None, seed=None):
        handler = ScormAPIHandler(ScormSession(package=package, seed=seed))
        self.save(handler)
        logger.info(
            f"Created SCORM player {handler.session.id}"
            f" for package {package.name if package else '(none)'}"
        )
        return handler

    def get(self, player_id):
        handler = self.cache.get(self._key(player_id))
        if handler is None:
            logger.warning(f"SCORM player {player_id} not found or expired")
        return handler

    def save(self, handler):
        self.cache.set(self._key(handler.session.id), handler, timeout=self.timeout)

    def delete(self, player_id):
        self.cache.delete(self._key(player_id))


player_store = ScormPlayerStore()
