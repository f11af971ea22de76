"""
Tests for the cache-backed player store.
"""

from django.core.cache import caches
from django.test import SimpleTestCase, override_settings

from .packages import simulate_package_upload
from .player_store import ScormPlayerStore


@override_settings(CACHES={
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'scorm-player-store-tests',
    }
})
class ScormPlayerStoreTestCase(SimpleTestCase):

    def setUp(self):
        self.store = ScormPlayerStore(cache_backend=caches['default'], timeout=60)
        self.store.cache.clear()

    def test_created_player_can_be_fetched(self):
        handler = self.store.create(package=simulate_package_upload('course.zip'))
        fetched = self.store.get(handler.session.id)
        self.assertIsNotNone(fetched)
        self.assertEqual(fetched.session.id, handler.session.id)
        self.assertEqual(fetched.session.package.name, 'course')

    def test_changes_are_kept_after_save(self):
        handler = self.store.create()
        handler.LMSInitialize('')
        handler.LMSSetValue('cmi.comments', 'saved')
        self.store.save(handler)

        fetched = self.store.get(handler.session.id)
        self.assertEqual(fetched.LMSGetValue('cmi.comments'), 'saved')
        self.assertEqual(len(fetched.session.events), 3)

    def test_unknown_player_returns_none(self):
        with self.assertLogs('scorm.player_store', level='WARNING'):
            self.assertIsNone(self.store.get('does-not-exist'))

    def test_delete(self):
        handler = self.store.create()
        self.store.delete(handler.session.id)
        with self.assertLogs('scorm.player_store', level='WARNING'):
            self.assertIsNone(self.store.get(handler.session.id))

    def test_players_are_isolated(self):
        first = self.store.create(seed={'cmi.core.lesson_location': 'first'})
        second = self.store.create()
        first.LMSInitialize('')
        second.LMSInitialize('')
        self.assertEqual(first.LMSGetValue('cmi.core.lesson_location'), 'first')
        self.assertEqual(second.LMSGetValue('cmi.core.lesson_location'), '')
