"""
Tests for the SCORM session lifecycle.
"""

from django.test import SimpleTestCase

from .packages import simulate_package_upload
from .session import ScormSession, SessionStateError, INITIALIZED, NOT_INITIALIZED, TERMINATED


class ScormSessionTestCase(SimpleTestCase):

    def test_new_session_is_not_initialized(self):
        session = ScormSession()
        self.assertEqual(session.state, NOT_INITIALIZED)
        self.assertFalse(session.is_active)
        self.assertEqual(len(session.events), 0)
        self.assertEqual(session.error.code, '0')

    def test_lifecycle_runs_one_way(self):
        session = ScormSession()
        session.begin()
        self.assertEqual(session.state, INITIALIZED)
        session.end()
        self.assertEqual(session.state, TERMINATED)
        self.assertTrue(session.is_terminated)

        with self.assertRaises(SessionStateError):
            session.begin()
        with self.assertRaises(SessionStateError):
            session.end()

    def test_end_requires_begin(self):
        with self.assertRaises(SessionStateError):
            ScormSession().end()

    def test_explicit_seed_wins_over_package_data(self):
        package = simulate_package_upload('course.zip')
        session = ScormSession(package=package, seed={'cmi.core.score.raw': '40'})
        session.begin()
        self.assertEqual(session.data_model.get('cmi.core.score.raw'), '40')
        self.assertEqual(session.data_model.get('cmi.core.score.max'), '100')

    def test_store_mirrors_into_package(self):
        package = simulate_package_upload('course.zip')
        session = ScormSession(package=package)
        session.begin()
        session.store('cmi.core.lesson_location', 'page_2')
        self.assertEqual(package.data['cmi.core.lesson_location'], 'page_2')
        self.assertEqual(session.snapshot()['cmi.core.lesson_location'], 'page_2')

    def test_sessions_do_not_share_state(self):
        first, second = ScormSession(), ScormSession()
        first.begin()
        first.store('cmi.comments', 'only mine')
        second.begin()
        self.assertEqual(second.data_model.get('cmi.comments'), '')
        self.assertNotEqual(first.id, second.id)
