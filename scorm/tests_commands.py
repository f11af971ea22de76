"""
Tests for the run_scorm_session management command.
"""

import json
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase


class RunScormSessionCommandTestCase(SimpleTestCase):

    def run_command(self, *args):
        out = StringIO()
        call_command('run_scorm_session', *args, stdout=out)
        return out.getvalue()

    def test_default_run_completes_lesson(self):
        report = json.loads(self.run_command('--json'))
        self.assertEqual(report['progress']['status'], 'completed')
        self.assertEqual(report['progress']['percentage'], 100)
        self.assertEqual(report['events'][0]['type'], 'initialize')
        self.assertEqual(report['events'][-1]['type'], 'terminate')
        self.assertTrue(all(event['success'] for event in report['events']))

    def test_partial_run_stays_incomplete(self):
        report = json.loads(self.run_command('--steps', '25', '50', '--json'))
        self.assertEqual(report['progress']['status'], 'incomplete')
        self.assertEqual(report['progress']['percentage'], 50)
        self.assertEqual(report['progress']['location'], 'section_50')

    def test_text_output(self):
        output = self.run_command('--package', 'course.zip', '--steps', '100')
        self.assertIn('SCORM session initialized', output)
        self.assertIn('Status: completed', output)

    def test_rejects_non_zip_package(self):
        with self.assertRaises(CommandError):
            self.run_command('--package', 'course.pdf')

    def test_rejects_out_of_range_step(self):
        with self.assertRaises(CommandError):
            self.run_command('--steps', '150')
