"""
Tests for the derived progress view.
"""

from django.test import SimpleTestCase

from .progress import get_progress, round_half_up


class ProgressViewTestCase(SimpleTestCase):

    def test_defaults_for_empty_snapshot(self):
        self.assertEqual(get_progress({}), {
            'status': 'not attempted',
            'score': 0.0,
            'maxScore': 100.0,
            'percentage': 0,
            'location': '',
            'sessionTime': '00:00:00',
            'totalTime': '00:00:00',
        })

    def test_percentage_from_scores(self):
        progress = get_progress({
            'cmi.core.lesson_status': 'incomplete',
            'cmi.core.score.raw': '30',
            'cmi.core.score.max': '40',
            'cmi.core.lesson_location': 'module_2',
            'cmi.core.session_time': '00:05:00',
        })
        self.assertEqual(progress['status'], 'incomplete')
        self.assertEqual(progress['percentage'], 75)
        self.assertEqual(progress['location'], 'module_2')
        self.assertEqual(progress['sessionTime'], '00:05:00')

    def test_zero_or_negative_max_gives_zero_percent(self):
        self.assertEqual(get_progress({'cmi.core.score.raw': '5', 'cmi.core.score.max': '0'})['percentage'], 0)
        self.assertEqual(get_progress({'cmi.core.score.raw': '5', 'cmi.core.score.max': '-10'})['percentage'], 0)

    def test_blank_raw_score_counts_as_zero(self):
        self.assertEqual(get_progress({'cmi.core.score.raw': '', 'cmi.core.score.max': '100'})['score'], 0.0)

    def test_rounding_is_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(get_progress({'cmi.core.score.raw': '1', 'cmi.core.score.max': '8'})['percentage'], 13)

    def test_snapshot_is_not_mutated(self):
        data = {'cmi.core.score.raw': '10'}
        get_progress(data)
        self.assertEqual(data, {'cmi.core.score.raw': '10'})
