"""
Tests for the environment loader.
"""

import os
import tempfile
from unittest import mock

from django.test import SimpleTestCase

from .env_loader import EnvironmentLoader


class EnvironmentLoaderTestCase(SimpleTestCase):

    def write_env(self, content):
        handle = tempfile.NamedTemporaryFile('w', suffix='.env', delete=False, encoding='utf-8')
        handle.write(content)
        handle.close()
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    def test_loads_key_value_pairs(self):
        path = self.write_env(
            "# comment\n"
            "SCORM_TEST_PLAIN=value\n"
            "SCORM_TEST_QUOTED=\"quoted value\"\n"
            "\n"
        )
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('SCORM_TEST_PLAIN', None)
            os.environ.pop('SCORM_TEST_QUOTED', None)
            loader = EnvironmentLoader(path)
            self.assertEqual(loader.get('SCORM_TEST_PLAIN'), 'value')
            self.assertEqual(loader.get('SCORM_TEST_QUOTED'), 'quoted value')

    def test_process_environment_wins(self):
        path = self.write_env("SCORM_TEST_OVERRIDE=from_file\n")
        with mock.patch.dict(os.environ, {'SCORM_TEST_OVERRIDE': 'from_process'}):
            loader = EnvironmentLoader(path)
            self.assertEqual(loader.get('SCORM_TEST_OVERRIDE'), 'from_process')

    def test_missing_file_is_tolerated(self):
        loader = EnvironmentLoader('/nonexistent/path/.env')
        self.assertEqual(loader.loaded_variables, {})

    def test_typed_getters(self):
        loader = EnvironmentLoader('/nonexistent/path/.env')
        env = {
            'SCORM_TEST_BOOL': 'yes',
            'SCORM_TEST_INT': '42',
            'SCORM_TEST_BAD_INT': 'forty',
            'SCORM_TEST_LIST': 'a, b,,c',
        }
        with mock.patch.dict(os.environ, env):
            self.assertTrue(loader.get_bool('SCORM_TEST_BOOL'))
            self.assertEqual(loader.get_int('SCORM_TEST_INT'), 42)
            self.assertEqual(loader.get_int('SCORM_TEST_BAD_INT', 7), 7)
            self.assertEqual(loader.get_list('SCORM_TEST_LIST'), ['a', 'b', 'c'])

    def test_required_variable(self):
        loader = EnvironmentLoader('/nonexistent/path/.env')
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('SCORM_TEST_REQUIRED', None)
            with self.assertRaises(ValueError):
                loader.get('SCORM_TEST_REQUIRED', required=True)
